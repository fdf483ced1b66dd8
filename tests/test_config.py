"""Tests for the immutable configuration loader."""

from pathlib import Path

import pytest

from sealkit.core.config import (
    LoggingConfig,
    PathConfig,
    SecureConfig,
)


def test_defaults():
    config = SecureConfig.load()
    assert config.logging.level == "INFO"
    assert config.logging.enable_console is True
    assert config.logging.enable_file is False
    assert config.paths.log_dir.is_absolute()
    assert config.app.app_name == "SealKit"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SEALKIT_LOGGING__LEVEL", "debug")
    monkeypatch.setenv("SEALKIT_LOGGING__ENABLE_FILE", "true")
    monkeypatch.setenv("SEALKIT_LOGGING__ENABLE_CONSOLE", "off")
    monkeypatch.setenv("SEALKIT_LOGGING__BACKUP_COUNT", " 3 ")
    monkeypatch.setenv("SEALKIT_PATHS__LOG_DIR", str(tmp_path))

    config = SecureConfig.load()

    assert config.logging.level == "DEBUG"
    assert config.logging.enable_file is True
    assert config.logging.enable_console is False
    assert config.logging.backup_count == 3
    assert config.paths.log_dir == tmp_path


@pytest.mark.parametrize("value", ["ture", "", "enabled", "2"])
def test_unknown_boolean_spelling_names_the_variable(monkeypatch, value):
    """A typo must not silently read as False."""
    monkeypatch.setenv("SEALKIT_LOGGING__ENABLE_CONSOLE", value)
    with pytest.raises(ValueError, match="SEALKIT_LOGGING__ENABLE_CONSOLE"):
        SecureConfig.load()


def test_non_integer_backup_count_names_the_variable(monkeypatch):
    monkeypatch.setenv("SEALKIT_LOGGING__BACKUP_COUNT", "five")
    with pytest.raises(ValueError, match="SEALKIT_LOGGING__BACKUP_COUNT") as excinfo:
        SecureConfig.load()
    assert excinfo.value.__cause__ is None


def test_unknown_log_level_names_the_variable(monkeypatch):
    monkeypatch.setenv("SEALKIT_LOGGING__LEVEL", "verbose")
    with pytest.raises(ValueError, match="SEALKIT_LOGGING__LEVEL"):
        SecureConfig.load()


def test_sensitive_env_keys_are_ignored(monkeypatch):
    monkeypatch.setenv("SEALKIT_LOGGING__SECRET_KEY", "should-not-load")
    assert "logging.secret_key" not in SecureConfig._parse_env_overrides("SEALKIT")


def test_invalid_values_are_rejected():
    with pytest.raises(ValueError):
        LoggingConfig(level="LOUD")
    with pytest.raises(ValueError):
        LoggingConfig(backup_count=-1)
    with pytest.raises(ValueError):
        PathConfig(log_dir=Path("relative/logs"))


def test_config_is_immutable():
    config = SecureConfig(logging=LoggingConfig(level="ERROR"))
    with pytest.raises(AttributeError):
        config._logging = LoggingConfig()
    with pytest.raises(AttributeError):
        config.logging.level = "DEBUG"


def test_instance_is_cached_until_reset(monkeypatch):
    first = SecureConfig.get_instance()
    assert SecureConfig.get_instance() is first

    monkeypatch.setenv("SEALKIT_LOGGING__LEVEL", "ERROR")
    SecureConfig.reset_instance()
    assert SecureConfig.get_instance().logging.level == "ERROR"


def test_hash_tracks_contents():
    assert SecureConfig().config_hash == SecureConfig().config_hash
    assert SecureConfig().config_hash != SecureConfig(logging=LoggingConfig(level="ERROR")).config_hash
    assert "hash=" in repr(SecureConfig())
