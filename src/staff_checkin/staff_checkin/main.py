from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .checkin.controller import register as register_checkin
from .container import Container, build_container
from .core.constants import CHECKIN_TOKEN_TTL_SECONDS, QR_DISPLAY_TTL_SECONDS
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.INFO)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            checkin_ttl_seconds=int(getattr(settings, "CHECKIN_TOKEN_TTL_SECONDS", CHECKIN_TOKEN_TTL_SECONDS)),
            display_ttl_seconds=int(getattr(settings, "QR_DISPLAY_TTL_SECONDS", QR_DISPLAY_TTL_SECONDS)),
            public_origin=getattr(settings, "PUBLIC_ORIGIN", None) or None,
        )

    register_checkin(app, container)
    register_attendance(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok", "service": "staff-checkin"})

    return app
