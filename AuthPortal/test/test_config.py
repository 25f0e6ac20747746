"""
Tests for configuration and logging setup.
"""

import logging

import pytest

from AuthPortal.config import Config, _read_timeout
from AuthPortal.core.logging import LogConfig, auto_configure, configure_logging, get_logging_manager


class TestConfig:

    def test_fixed_values(self):
        values = Config.get_config()
        assert values["TOKEN_STORAGE_KEY"] == "token"
        assert values["DASHBOARD_ROUTE"] == "/dashboard"
        assert values["LOGIN_ENDPOINT"] == "/auth/login"
        assert values["REGISTER_ENDPOINT"] == "/user/register"
        assert not values["API_BASE_URL"].endswith("/")

    def test_timeout_unset_means_none(self):
        assert _read_timeout(None) is None
        assert _read_timeout("") is None
        assert _read_timeout("2.5") == 2.5

    @pytest.mark.parametrize("raw", ["soon", "0", "-3", "nan"])
    def test_unusable_timeout_is_ignored_with_warning(self, raw, caplog):
        with caplog.at_level(logging.WARNING, logger="AuthPortal.config"):
            assert _read_timeout(raw) is None

        assert "AUTHPORTAL_REQUEST_TIMEOUT" in caplog.text


class TestLogging:

    def test_reconfigure_replaces_handlers(self):
        manager = get_logging_manager()
        configure_logging(LogConfig(level="WARNING", file_output=False))
        configure_logging(LogConfig(level="DEBUG", file_output=False))

        root = logging.getLogger()
        ours = [h for h in root.handlers if h in manager._handlers]
        assert len(ours) == 1
        assert root.level == logging.DEBUG

    def test_auto_configure_testing(self):
        config = auto_configure("testing")
        assert config.file_output is False
        assert logging.getLogger("aiohttp").level == logging.ERROR
