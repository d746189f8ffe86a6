"""Unit tests for environment configuration."""

import pytest

from ipxedust.config import Config


class TestConfig:
    """Tests for Config.from_env()."""

    def test_defaults(self, clean_env):
        """Test defaults when nothing is set."""
        config = Config.from_env()
        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.patch == ""
        assert config.patch_bytes == b""

    def test_from_env(self, clean_env):
        """Test every setting is read from the environment."""
        clean_env.setenv("IPXEDUST_LOG_LEVEL", "DEBUG")
        clean_env.setenv("IPXEDUST_LOG_FORMAT", "console")
        clean_env.setenv("IPXEDUST_PATCH", "set next-server 10.0.0.1")

        config = Config.from_env()
        assert config.log_level == "DEBUG"
        assert config.log_format == "console"
        assert config.patch_bytes == b"set next-server 10.0.0.1"

    def test_log_level_case_insensitive(self, clean_env):
        """Test lower case level names are accepted."""
        clean_env.setenv("IPXEDUST_LOG_LEVEL", "warning")
        assert Config.from_env().log_level == "WARNING"

    def test_invalid_log_level(self, clean_env):
        """Test names that are not log levels are rejected."""
        clean_env.setenv("IPXEDUST_LOG_LEVEL", "basic_format")
        with pytest.raises(ValueError, match="IPXEDUST_LOG_LEVEL"):
            Config.from_env()

    def test_invalid_log_format(self, clean_env):
        """Test unknown renderers are rejected."""
        clean_env.setenv("IPXEDUST_LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="IPXEDUST_LOG_FORMAT"):
            Config.from_env()
