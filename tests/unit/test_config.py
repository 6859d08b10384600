"""Unit tests for settings, logging setup, and database construction."""

import logging

import pytest

from collab.core.config import Settings
from collab.core.errors import ConfigurationError
from collab.core.logging_config import setup_logging
from collab.db.session import Database


class TestSettings:
    """Test suite for Settings."""

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"
        assert Settings(log_level="debug").debug is True

    def test_service_role_url_is_secret(self):
        settings = Settings(service_role_database_url="postgresql+asyncpg://svc:hunter2@db/collab")

        assert "hunter2" not in repr(settings)
        assert "hunter2" not in str(settings.service_role_database_url)
        assert settings.service_role_database_url.get_secret_value().endswith("@db/collab")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NDA_DEFAULT_TERM", "18 months")
        assert Settings().nda_default_term == "18 months"


class TestDatabase:
    """Test suite for Database construction."""

    def test_service_role_requires_credential(self):
        with pytest.raises(ConfigurationError, match="service role"):
            Database.service_role(Settings(service_role_database_url=None))

    def test_service_role_uses_secret_url(self):
        settings = Settings(service_role_database_url="sqlite+aiosqlite:///svc.db")
        database = Database.service_role(settings)
        assert database.safe_url == "sqlite+aiosqlite:///svc.db"

    def test_safe_url_masks_password(self):
        database = Database("postgresql+asyncpg://svc:hunter2@db:5432/collab")
        assert "hunter2" not in database.safe_url
        assert "***" in database.safe_url

    def test_engine_is_lazy(self):
        database = Database("postgresql+asyncpg://svc:pw@db/collab")
        assert database._engine is None


class TestLogging:
    """Test suite for setup_logging()."""

    def test_file_handlers(self, tmp_path, restore_root_logging):
        """Test that info and error logs are split by level."""
        log_dir = tmp_path / "logs"
        setup_logging(Settings(log_dir=log_dir))

        test_logger = logging.getLogger("collab.tests")
        test_logger.info("informational")
        test_logger.error("broken")
        for handler in logging.getLogger().handlers:
            handler.flush()

        info_text = (log_dir / "info.log").read_text(encoding="utf-8")
        error_text = (log_dir / "error.log").read_text(encoding="utf-8")

        assert "informational" in info_text and "broken" in info_text
        assert "broken" in error_text
        assert "informational" not in error_text

    def test_console_only_without_log_dir(self, restore_root_logging):
        root = setup_logging(Settings(log_dir=None))
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], logging.FileHandler)
