"""Attendance Tracker package.

A single-page roster attendance tracker: a pure roster store, a controller that
mirrors every change to a key-value storage, and a thin Flask view layer.
"""
from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .logging_config import configure_logging
from .roster.controller import register as register_roster

logger = logging.getLogger(__name__)

SETTING_NAMES = ("SECRET_KEY", "DEBUG", "TESTING", "STORAGE_BACKEND", "STORAGE_PATH", "STORAGE_KEY", "SESSION_MAX_BYTES", "LOG_LEVEL")


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name, None) for name in SETTING_NAMES}
    values.update(overrides or {})

    app.secret_key = values["SECRET_KEY"]
    app.config["DEBUG"] = bool(values["DEBUG"])
    app.config["TESTING"] = bool(values["TESTING"])
    for name in ("STORAGE_BACKEND", "STORAGE_PATH", "STORAGE_KEY", "SESSION_MAX_BYTES"):
        app.config[name] = values[name]

    configure_logging(values["LOG_LEVEL"] or "INFO")

    container = build_container(settings=app.config)
    app.extensions["attendance_tracker"] = container

    if app.config["DEBUG"]:
        logger.info("settings=%s storage=%s key=%s", settings_module, container.storage_backend, container.storage_key)

    register_roster(app, container)

    return app
