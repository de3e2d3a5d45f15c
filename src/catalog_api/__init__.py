"""Catalog API application factory."""

from __future__ import annotations

import os
from importlib import import_module
from typing import Iterable

from flask import Flask

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestingConfig
from .domain.stores.category import CategoryStore
from .errors import register_error_handlers
from .extensions import init_db
from .logging_config import setup_logging

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestingConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths to register on the app."""

    yield "catalog_api.blueprints.categories"


def create_app(config_name: str | None = None, *, store: CategoryStore | None = None) -> Flask:
    """Create and configure the Flask application instance.

    ``store`` replaces the configured category store, e.g. an
    ``InMemoryCategoryStore`` in tests.
    """

    app = Flask(__name__, instance_relative_config=True)
    config_cls = _resolve_config(config_name or os.getenv("CATALOG_ENV"))
    config_obj = config_cls()
    app.config.from_object(config_obj)
    app.config["CATALOG_CONFIG"] = config_obj

    setup_logging(config_obj)
    register_error_handlers(app)
    _register_blueprints(app)
    init_db(app, store=store)
    _cli.init_app(app)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


__all__ = ["BaseConfig", "DevConfig", "TestingConfig", "create_app"]
