from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .assignments.controller import register as register_assignments
from .common.whatsapp import get_whatsapp_url
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_admin, list_tables
from .members.controller import register as register_members
from .people.controller import register as register_people

REPO_ROOT = Path(__file__).resolve().parents[3]


def service_options(settings) -> dict:
    """Service knobs read from a settings module."""
    return {
        "week_start_day": getattr(settings, "WEEK_START_DAY", "saturday"),
        "regeneration_policy": getattr(settings, "REGENERATION_POLICY", "strict"),
        "require_approval": bool(getattr(settings, "REQUIRE_APPROVAL", True)),
        "undo_grace_seconds": int(getattr(settings, "UNDO_GRACE_SECONDS", 60)),
    }


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"))

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.jinja_env.globals["whatsapp_url"] = get_whatsapp_url

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_admin(
                db_config,
                username=getattr(settings, "ADMIN_USERNAME", "admin"),
                password=getattr(settings, "ADMIN_PASSWORD", "admin123"),
            )
            app.logger.info("demo seed ready")

        container = build_container(db_config=db_config, **service_options(settings))

    register_members(app, container)
    register_people(app, container)
    register_assignments(app, container)

    return app
