"""Example: using the service layer without Flask.

Registers an employee profile by email and prints the one-time password.
"""

import importlib
import sys

from config import get_settings_module

from src.employee_portal.employee_portal.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, upload_folder=settings.UPLOAD_FOLDER)
    email = sys.argv[1] if len(sys.argv) > 1 else "arjun.mehta@company.com"
    result = container.employee_auth_service.register(email)
    print(f"Registered {result.email}; initial password: {result.password}")


if __name__ == "__main__":
    main()
