"""Pytest configuration and shared fixtures for catalog API tests.

Provides database fixtures, store/repository fixtures for both store
implementations, and Flask app/client fixtures, without touching a real
application database.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

# Import models so they are registered with SQLModel metadata
from catalog_api import create_app, models  # noqa: F401
from catalog_api.infra.database import create_session_factory
from catalog_api.infra.repositories import StoreCategoryRepository
from catalog_api.infra.stores import InMemoryCategoryStore, SQLModelCategoryStore

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the app hands to ``SQLModelCategoryStore``."""

    return create_session_factory(db_engine)


# =============================================================================
# Store / Repository Fixtures
# =============================================================================


@pytest.fixture
def sqlmodel_store(session_factory) -> SQLModelCategoryStore:
    return SQLModelCategoryStore(session_factory, default_per_page=2, max_per_page=5)


@pytest.fixture
def memory_store() -> InMemoryCategoryStore:
    return InMemoryCategoryStore(default_per_page=2, max_per_page=5)


@pytest.fixture(params=["sqlmodel", "memory"])
def store(request):
    """Run store contract tests against every implementation."""

    if request.param == "sqlmodel":
        return request.getfixturevalue("sqlmodel_store")
    return request.getfixturevalue("memory_store")


@pytest.fixture
def repository(store) -> StoreCategoryRepository:
    return StoreCategoryRepository(store)


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Flask app backed by a temporary SQLite database."""

    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CATALOG_DATABASE_URL", f"sqlite:///{tmp_path / 'catalog.db'}")
    monkeypatch.setenv("CATALOG_DEFAULT_PER_PAGE", "2")
    monkeypatch.delenv("CATALOG_STORE", raising=False)
    application = create_app("testing")
    yield application


@pytest.fixture()
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def memory_app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Flask app wired to an in-memory store instead of SQLite."""

    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    application = create_app("testing", store=InMemoryCategoryStore(default_per_page=2))
    yield application
