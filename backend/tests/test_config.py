"""
Products API — Settings Tests
===============================

What:  Validation rules of the pydantic-settings configuration.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HTTPS_REDIRECT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        s = Settings(_env_file=None)

        assert s.https_redirect is True
        assert s.error_path == "/error"
        assert s.log_level == "INFO"

    def test_log_level_upper_cased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(_env_file=None, log_level="chatty")

    def test_relative_error_path_rejected(self):
        with pytest.raises(ValidationError, match="Must start with"):
            Settings(_env_file=None, error_path="error")

    def test_https_redirect_from_env(self, monkeypatch):
        monkeypatch.setenv("HTTPS_REDIRECT", "false")

        assert Settings(_env_file=None).https_redirect is False
