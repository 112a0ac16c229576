from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .backup.controller import register as register_backup
from .common.log import configure_logging
from .container import build_container
from .core.constants import DEFAULT_API_PREFIX, DEFAULT_FANOUT_WORKERS
from .database.bootstrap import ensure_default_admin
from .database.connection import StoreConfig, connect_store
from .database.store import DocumentStore
from .projects.controller import register as register_projects
from .workers.controller import register as register_workers

logger = logging.getLogger(__name__)


def create_app(*, store: Optional[DocumentStore] = None) -> Flask:
    """Build the Flask app.

    ``store`` replaces the store described by the settings module (tests pass
    an in-memory one).
    """
    load_dotenv(override=False)
    app = Flask(__name__)
    CORS(app)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    prefix = ("/" + str(getattr(settings, "API_PREFIX", DEFAULT_API_PREFIX)).strip("/")).rstrip("/")

    if store is None:
        store_config = StoreConfig.from_mapping(getattr(settings, "STORE_CONFIG"))
        store = connect_store(store_config)
        logger.info("settings=%s store=%s", settings_module, store_config.backend)
    else:
        logger.info("settings=%s store=%s (injected)", settings_module, type(store).__name__)

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seeded = ensure_default_admin(store, password=str(getattr(settings, "DEFAULT_ADMIN_PASSWORD")))
        logger.info("default admin ready (%s)", seeded)

    container = build_container(
        store=store,
        fanout_workers=int(getattr(settings, "FANOUT_WORKERS", DEFAULT_FANOUT_WORKERS)),
    )

    register_auth(app, container, prefix=prefix)
    register_workers(app, container, prefix=prefix)
    register_projects(app, container, prefix=prefix)
    register_attendance(app, container, prefix=prefix)
    register_backup(app, container, prefix=prefix)

    @app.route("/", endpoint="index")
    def index():
        return "Server is running and database is initialized!"

    return app
