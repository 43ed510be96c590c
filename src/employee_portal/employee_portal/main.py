from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .accounts.controller import register as register_accounts
from .attendance.controller import register as register_attendance
from .auth.web import install as install_auth
from .container import Container, build_container
from .core.constants import IDLE_TIMEOUT_MINUTES
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_accounts, list_tables
from .documents.controller import register as register_documents
from .leaves.controller import register as register_leaves
from .notifications.controller import register as register_notifications
from .tasks.controller import register as register_tasks

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the app. A prebuilt ``container`` skips database bootstrap entirely."""

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["IDLE_TIMEOUT_MINUTES"] = int(getattr(settings, "IDLE_TIMEOUT_MINUTES", IDLE_TIMEOUT_MINUTES))
    # Relative folders are taken from the repository root.
    app.config["UPLOAD_FOLDER"] = str(REPO_ROOT / getattr(settings, "UPLOAD_FOLDER", "uploads"))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_accounts(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config, upload_folder=app.config["UPLOAD_FOLDER"])

    install_auth(app)
    register_accounts(app, container)
    register_dashboard(app, container)
    register_leaves(app, container)
    register_tasks(app, container)
    register_attendance(app, container)
    register_documents(app, container)
    register_notifications(app, container)

    return app
