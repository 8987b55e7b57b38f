from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_NUM_GROUPS
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .groups.controller import register as register_groups
from .students.controller import register as register_students

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    default_num_groups = int(getattr(settings, "DEFAULT_NUM_GROUPS", DEFAULT_NUM_GROUPS))

    if app.config["DEBUG"]:
        print(
            "[class-tracker] settings=", settings_module,
            " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            if app.config["DEBUG"]:
                print(f"[class-tracker] schema ready (tables={len(list_tables(db_config))})")
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            if app.config["DEBUG"]:
                print("[class-tracker] demo seed ready")

        container = build_container(db_config=db_config, default_num_groups=default_num_groups)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"success": True, "default_num_groups": container.grouping_service.default_num_groups})

    register_students(app, container)
    register_groups(app, container)

    return app
