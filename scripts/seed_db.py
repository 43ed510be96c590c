from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_portal.employee_portal.database.bootstrap import (
    DEMO_ADMIN_EMAIL,
    DEMO_ADMIN_PASSWORD,
    apply_seed_sql,
    ensure_demo_accounts,
)

logger = logging.getLogger("seed_db")


def main() -> None:
    parser = argparse.ArgumentParser(description="Load demo data and the demo admin account.")
    parser.add_argument("--admin-email", default=DEMO_ADMIN_EMAIL)
    parser.add_argument("--admin-password", default=DEMO_ADMIN_PASSWORD)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_accounts(db_config, email=args.admin_email, password=args.admin_password)

    logger.info("seed data and admin %s loaded into %s", args.admin_email, db_config.get("database"))


if __name__ == "__main__":
    main()
