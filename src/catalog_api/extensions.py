"""Store and repository wiring for the Flask app."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .domain.repositories.category import CategoryRepository
from .domain.stores.category import CategoryStore
from .infra.database import bootstrap_database
from .infra.repositories.category import StoreCategoryRepository
from .infra.stores.category import SQLModelCategoryStore
from .infra.stores.memory import InMemoryCategoryStore
from .logging_config import get_logger

EXTENSION_KEY = "catalog_api"

logger = get_logger("extensions")


def init_db(app: Flask, store: CategoryStore | None = None) -> CategoryRepository:
    """Build the category store and repository and attach them to ``app``.

    An explicitly supplied ``store`` wins over the configured backend.
    """

    config: BaseConfig = app.config["CATALOG_CONFIG"]
    if store is None:
        store = _build_store(config)

    repository = StoreCategoryRepository(store)
    app.extensions[EXTENSION_KEY] = {"store": store, "repository": repository}
    logger.info("Category store ready", extra={"store": type(store).__name__})
    return repository


def _build_store(config: BaseConfig) -> CategoryStore:
    pagination = {
        "default_per_page": config.DEFAULT_PER_PAGE,
        "max_per_page": config.MAX_PER_PAGE,
    }
    if config.STORE_BACKEND == "memory":
        return InMemoryCategoryStore(**pagination)

    _, session_factory = bootstrap_database(config)
    return SQLModelCategoryStore(session_factory, **pagination)


def get_repository() -> CategoryRepository:
    """Return the repository bound to the current application."""

    return current_app.extensions[EXTENSION_KEY]["repository"]
