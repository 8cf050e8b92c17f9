"""Tests for application startup checks."""

import logging

from config.settings import DEFAULT_JWT_SECRET, Settings
from main import warn_if_default_secret


class TestDefaultSecretWarning:
    def test_warns_on_built_in_secret(self, caplog):
        with caplog.at_level(logging.WARNING, logger="main"):
            assert warn_if_default_secret(Settings(jwt_secret=DEFAULT_JWT_SECRET))
        assert "JWT_SECRET not set" in caplog.text

    def test_silent_with_configured_secret(self, caplog):
        with caplog.at_level(logging.WARNING, logger="main"):
            assert not warn_if_default_secret(Settings(jwt_secret="a-real-secret"))
        assert "JWT_SECRET" not in caplog.text
