"""Tests for environment variable settings."""

import pytest

from torrent_notifier.config import (
    ConfigReadingError,
    ConfigValidationError,
    EnvironmentConfigError,
    load_environment_config,
)


def test_defaults(clean_env):
    env_config = load_environment_config()

    assert env_config.smtp_host == "localhost"
    assert env_config.smtp_port == 25
    assert env_config.smtp_use_tls is False
    assert env_config.smtp_user is None
    assert env_config.smtp_pass is None
    assert env_config.log_level == "INFO"
    assert env_config.log_format == "key-value"


def test_all_variables(clean_env):
    clean_env.setenv("SMTP_HOST", "mail.example.com")
    clean_env.setenv("SMTP_PORT", "587")
    clean_env.setenv("SMTP_USE_TLS", "yes")
    clean_env.setenv("SMTP_USER", "user")
    clean_env.setenv("SMTP_PASS", "pass")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("LOG_FORMAT", "JSON")

    env_config = load_environment_config()

    assert env_config.smtp_host == "mail.example.com"
    assert env_config.smtp_port == 587
    assert env_config.smtp_use_tls is True
    assert env_config.smtp_user == "user"
    assert env_config.smtp_pass == "pass"
    assert env_config.log_level == "DEBUG"
    assert env_config.log_format == "json"


def test_reports_every_invalid_variable(clean_env):
    clean_env.setenv("SMTP_PORT", "not-a-port")
    clean_env.setenv("SMTP_USE_TLS", "maybe")
    clean_env.setenv("SMTP_USER", "user")
    clean_env.setenv("LOG_LEVEL", "LOUD")
    clean_env.setenv("LOG_FORMAT", "xml")

    with pytest.raises(EnvironmentConfigError) as exc_info:
        load_environment_config()

    errors = exc_info.value.errors
    assert len(errors) == 5
    assert any("SMTP_PORT" in error for error in errors)
    assert any("SMTP_USE_TLS" in error for error in errors)
    assert any("SMTP_PASS is not" in error for error in errors)
    assert any("LOG_LEVEL" in error for error in errors)
    assert any("LOG_FORMAT" in error for error in errors)
    assert "Environment variable validation failed" in str(exc_info.value)


@pytest.mark.parametrize("port", ["0", "65536"])
def test_port_out_of_range(clean_env, port):
    clean_env.setenv("SMTP_PORT", port)

    with pytest.raises(EnvironmentConfigError) as exc_info:
        load_environment_config()

    assert "between 1 and 65535" in exc_info.value.errors[0]


def test_password_without_user(clean_env):
    clean_env.setenv("SMTP_PASS", "pass")

    with pytest.raises(EnvironmentConfigError) as exc_info:
        load_environment_config()

    assert exc_info.value.errors == [
        "SMTP_PASS is set but SMTP_USER is not. Both must be set for authentication."
    ]


def test_environment_errors_are_distinct_from_settings_rules(clean_env):
    clean_env.setenv("SMTP_PORT", "abc")

    with pytest.raises(ConfigReadingError) as exc_info:
        load_environment_config()

    assert isinstance(exc_info.value, EnvironmentConfigError)
    assert not isinstance(exc_info.value, ConfigValidationError)
