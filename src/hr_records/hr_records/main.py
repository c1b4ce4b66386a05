from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_accounts, list_tables
from .database.connection import DBConfig

from .container import Container, build_container
from .accounts.controller import register as register_accounts
from .auth.controller import register as register_auth
from .card.controller import register as register_card
from .catalogs.controller import register as register_catalogs
from .console.controller import register as register_console
from .roster.controller import register as register_roster

logger = logging.getLogger("hr_records")


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logger.setLevel(level)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ORG_MINISTRY"] = getattr(settings, "ORG_MINISTRY", "")
    app.config["ORG_NAME"] = getattr(settings, "ORG_NAME", "")

    _configure_logging(getattr(settings, "LOG_LEVEL", "DEBUG" if app.config["DEBUG"] else "INFO"))
    app.logger.setLevel(logger.level)

    if container is None:
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
        auto_seed_db = bool(getattr(settings, "AUTO_SEED_DB", False))
        if auto_init_db:
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if auto_seed_db:
            seed_path = Path(__file__).resolve().parents[3] / "database" / "seed.sql"
            apply_seed_sql(db_config, seed_path=seed_path)
            ensure_demo_accounts(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config)

    @app.context_processor
    def inject_org():
        return {"org_ministry": app.config["ORG_MINISTRY"], "org_name": app.config["ORG_NAME"]}

    register_auth(app, container)
    register_card(app, container)
    register_console(app, container)
    register_catalogs(app, container)
    register_accounts(app, container)
    register_roster(app, container)

    return app
