"""Tests for application settings."""

from hrportal.core.config import Settings, get_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test bundled defaults are used when nothing is configured."""
        monkeypatch.delenv("HRPORTAL_NAVIGATION_CATALOG_PATH", raising=False)
        settings = Settings(_env_file=None)
        assert settings.navigation_catalog_path is None
        assert settings.route_rules_path is None
        assert settings.log_to_file is False

    def test_env_prefix(self, monkeypatch):
        """Test HRPORTAL_ environment variables."""
        monkeypatch.setenv("HRPORTAL_NAVIGATION_CATALOG_PATH", "/etc/hrportal/catalog.yaml")
        monkeypatch.setenv("HRPORTAL_LOG_LEVEL", "WARNING")
        settings = Settings(_env_file=None)
        assert settings.navigation_catalog_path == "/etc/hrportal/catalog.yaml"
        assert settings.effective_log_level == "WARNING"

    def test_debug_forces_debug_logging(self):
        """Test debug mode overrides the log level."""
        settings = Settings(_env_file=None, debug=True, log_level="ERROR")
        assert settings.effective_log_level == "DEBUG"

    def test_get_settings_cached(self):
        """Test settings are built once."""
        assert get_settings() is get_settings()
