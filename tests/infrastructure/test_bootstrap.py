"""Tests for environment-driven settings and wiring."""

import logging

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.bootstrap import Settings, active_order_store, payments_api
from storefront.infrastructure.logging_setup import LOGGER_NAME, setup_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("STOREFRONT_API_URL", "STOREFRONT_TIMEOUT", "STOREFRONT_DATA_DIR", "STOREFRONT_LOG_FILE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.api_url == "https://crypdeep.herokuapp.com"
        assert settings.timeout == 10.0
        assert settings.log_file is None

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOREFRONT_API_URL", "http://localhost:4567")
        monkeypatch.setenv("STOREFRONT_TIMEOUT", "2.5")
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        settings = Settings.from_env()
        assert settings.api_url == "http://localhost:4567"
        assert settings.timeout == 2.5
        assert settings.data_dir == tmp_path

    def test_zero_timeout_disables_it(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_TIMEOUT", "0")
        assert Settings.from_env().timeout is None

    def test_bad_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_TIMEOUT", "soon")
        with pytest.raises(ValidationError, match="STOREFRONT_TIMEOUT"):
            Settings.from_env()


class TestWiring:

    def test_active_order_store_lives_in_data_dir(self, tmp_path):
        store = active_order_store(Settings(data_dir=tmp_path))
        store.set("ord_1")
        assert (tmp_path / "active_order.json").exists()

    @pytest.mark.asyncio
    async def test_payments_api_uses_configured_url(self):
        api = payments_api(Settings(api_url="http://localhost:4567/"))
        try:
            assert api.base_url == "http://localhost:4567"
        finally:
            await api.aclose()


class TestLogging:

    def test_setup_is_idempotent(self, tmp_path):
        logger = logging.getLogger(LOGGER_NAME)
        saved = list(logger.handlers)
        logger.handlers.clear()
        try:
            setup_logging(logging.INFO, tmp_path / "logs" / "storefront.log")
            count = len(logger.handlers)
            setup_logging(logging.DEBUG)
            assert len(logger.handlers) == count == 2
            assert logger.level == logging.DEBUG
            assert (tmp_path / "logs").is_dir()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers[:] = saved
