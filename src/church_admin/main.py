from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_admin, list_tables

from .admins.controller import register as register_auth
from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .members.controller import register as register_members
from .offerings.controller import register as register_offerings
from .prayer_requests.controller import register as register_prayer_requests
from .stats.controller import register as register_stats

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

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
            apply_schema(db_config)
            ensure_admin(
                db_config,
                username=getattr(settings, "ADMIN_USERNAME"),
                password=getattr(settings, "ADMIN_PASSWORD"),
            )
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config)

    register_error_handlers(app)

    register_auth(app, container)
    register_members(app, container)
    register_attendance(app, container)
    register_offerings(app, container)
    register_prayer_requests(app, container)
    register_stats(app, container)

    return app
