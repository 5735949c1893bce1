"""Tests for settings parsing and logging setup."""

import json
import logging

import pytest

from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import JsonFormatter, configure_logging


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.is_sqlite
        assert settings.ENFORCE_STATUS_TRANSITIONS is True

    def test_postgres_url_gets_driver(self):
        settings = Settings(DATABASE_URL="postgresql://shop:pw@db/shop")
        assert settings.DATABASE_URL == "postgresql+psycopg://shop:pw@db/shop"
        assert not settings.is_sqlite

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENFORCE_STATUS_TRANSITIONS", "false")
        monkeypatch.setenv("DB_LOCK_TIMEOUT", "2.5")
        settings = Settings()
        assert settings.ENFORCE_STATUS_TRANSITIONS is False
        assert settings.DB_LOCK_TIMEOUT == 2.5


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogging:

    def test_json_formatter(self):
        record = logging.LogRecord(
            "storefront.test", logging.WARNING, __file__, 1, "stock %s", ("low",), None
        )
        payload = json.loads(JsonFormatter().format(record))
        assert payload["level"] == "WARNING"
        assert payload["name"] == "storefront.test"
        assert payload["message"] == "stock low"

    def test_production_uses_json(self, restore_root_logger):
        configure_logging(Settings(ENVIRONMENT="production", LOG_LEVEL="debug"))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_local_uses_plain_text(self, restore_root_logger):
        configure_logging(Settings(ENVIRONMENT="local"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
