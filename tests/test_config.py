"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from catalog_api import create_app
from catalog_api.config import BaseConfig, DevConfig, TestingConfig


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    for name in (
        "CATALOG_DATABASE_URL",
        "CATALOG_DEFAULT_PER_PAGE",
        "CATALOG_MAX_PER_PAGE",
        "CATALOG_STORE",
        "CATALOG_SECRET_KEY",
        "CATALOG_DEV_MODE",
        "CATALOG_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path):
    config = BaseConfig()

    assert config.DATA_DIR == tmp_path.resolve()
    assert config.DATABASE_URL == f"sqlite:///{tmp_path.resolve() / 'catalog.db'}"
    assert config.DEFAULT_PER_PAGE == 10
    assert config.MAX_PER_PAGE == 100
    assert config.STORE_BACKEND == "sqlmodel"
    assert config.DEV_MODE is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CATALOG_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("CATALOG_DEFAULT_PER_PAGE", "2")
    monkeypatch.setenv("CATALOG_MAX_PER_PAGE", "20")
    monkeypatch.setenv("CATALOG_STORE", "Memory")

    config = BaseConfig()

    assert config.DATABASE_URL == "sqlite:///:memory:"
    assert config.DEFAULT_PER_PAGE == 2
    assert config.MAX_PER_PAGE == 20
    assert config.STORE_BACKEND == "memory"


@pytest.mark.parametrize("value", ["zero", "0", "-3"])
def test_invalid_page_size_rejected(monkeypatch: pytest.MonkeyPatch, value):
    monkeypatch.setenv("CATALOG_DEFAULT_PER_PAGE", value)

    with pytest.raises(ValueError):
        BaseConfig()


def test_default_page_size_cannot_exceed_maximum(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CATALOG_DEFAULT_PER_PAGE", "50")
    monkeypatch.setenv("CATALOG_MAX_PER_PAGE", "10")

    with pytest.raises(ValueError):
        BaseConfig()


def test_unknown_store_backend_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CATALOG_STORE", "redis")

    with pytest.raises(ValueError):
        BaseConfig()


def test_secret_key_required_outside_dev_mode(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CATALOG_DEV_MODE", "false")

    with pytest.raises(ValueError):
        BaseConfig()

    monkeypatch.setenv("CATALOG_SECRET_KEY", "s3cret")
    assert BaseConfig().SECRET_KEY == "s3cret"


def test_sqlite_engine_options():
    assert BaseConfig().sqlalchemy_engine_options() == {
        "connect_args": {"check_same_thread": False}
    }


def test_config_flags():
    assert DevConfig.DEBUG is True
    assert TestingConfig.TESTING is True
    assert BaseConfig.TESTING is False


def test_create_app_selects_config_and_store(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CATALOG_STORE", "memory")
    monkeypatch.setenv("CATALOG_ENV", "development")

    app = create_app()

    assert isinstance(app.config["CATALOG_CONFIG"], DevConfig)
    assert app.config["DEBUG"] is True
    store = app.extensions["catalog_api"]["store"]
    assert type(store).__name__ == "InMemoryCategoryStore"
