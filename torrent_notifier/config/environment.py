"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import EnvironmentConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("key-value", "json")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        smtp_host: str = "localhost",
        smtp_port: int = 25,
        smtp_use_tls: bool = False,
        smtp_user: Optional[str] = None,
        smtp_pass: Optional[str] = None,
        log_level: str = "INFO",
        log_format: str = "key-value",
    ):
        """Initialize environment configuration."""
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_use_tls = smtp_use_tls
        self.smtp_user = smtp_user
        self.smtp_pass = smtp_pass
        self.log_level = log_level
        self.log_format = log_format


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - SMTP_HOST: Mail transport host (default: localhost)
    - SMTP_PORT: Mail transport port, 1-65535 (default: 25)
    - SMTP_USE_TLS: Upgrade the connection with STARTTLS (default: false)
    - SMTP_USER / SMTP_PASS: Credentials, both or neither
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)
    - LOG_FORMAT: key-value or json (default: key-value)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        EnvironmentConfigError: Listing every invalid variable
    """
    errors = []

    smtp_host = os.getenv("SMTP_HOST") or "localhost"
    smtp_port_str = os.getenv("SMTP_PORT")
    smtp_use_tls_str = os.getenv("SMTP_USE_TLS")
    smtp_user = os.getenv("SMTP_USER") or None
    smtp_pass = os.getenv("SMTP_PASS") or None
    log_level = (os.getenv("LOG_LEVEL") or "INFO").upper()
    log_format = (os.getenv("LOG_FORMAT") or "key-value").lower()

    smtp_port = 25
    if smtp_port_str:
        try:
            smtp_port = int(smtp_port_str)
            if smtp_port < 1 or smtp_port > 65535:
                errors.append(
                    f"Invalid SMTP_PORT: {smtp_port}. Must be between 1 and 65535."
                )
        except ValueError:
            errors.append(
                f"Invalid SMTP_PORT: '{smtp_port_str}'. Must be a valid integer."
            )

    smtp_use_tls = False
    if smtp_use_tls_str:
        value = smtp_use_tls_str.strip().lower()
        if value in _TRUE_VALUES:
            smtp_use_tls = True
        elif value not in _FALSE_VALUES:
            errors.append(
                f"Invalid SMTP_USE_TLS: '{smtp_use_tls_str}'. Must be true or false."
            )

    if smtp_user and not smtp_pass:
        errors.append(
            "SMTP_USER is set but SMTP_PASS is not. Both must be set for authentication."
        )
    elif smtp_pass and not smtp_user:
        errors.append(
            "SMTP_PASS is set but SMTP_USER is not. Both must be set for authentication."
        )

    if log_level not in _LOG_LEVELS:
        errors.append(
            f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(_LOG_LEVELS)}"
        )

    if log_format not in _LOG_FORMATS:
        errors.append(
            f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(_LOG_FORMATS)}"
        )

    if errors:
        raise EnvironmentConfigError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset variables you do not need; every variable has a default",
            ],
        )

    return EnvironmentConfig(
        smtp_host=smtp_host,
        smtp_port=smtp_port,
        smtp_use_tls=smtp_use_tls,
        smtp_user=smtp_user,
        smtp_pass=smtp_pass,
        log_level=log_level,
        log_format=log_format,
    )
