"""Semantic validation rules for decoded settings."""

import ipaddress
import warnings
from typing import List

from .exceptions import ConfigValidationError
from .models import Config


def validate_config(config: Config) -> Config:
    """
    Check a decoded configuration against the notifier's requirements.

    Rules are applied in order and the first violation is raised; the
    configuration itself is never modified.

    Args:
        config: Decoded configuration

    Returns:
        The same configuration object

    Raises:
        ConfigValidationError: If a rule is violated
    """
    if not config.download_dir.startswith("/"):
        raise ConfigValidationError(
            "Invalid 'download-dir' value: it must be an absolute path"
        )

    if not config.rpc_enabled:
        raise ConfigValidationError("RPC is disabled in config")

    if not config.rpc_bind_address.strip():
        raise ConfigValidationError(
            "Invalid 'rpc-bind-address' value: it mustn't be empty"
        )

    if config.rpc_authentication_required and config.rpc_plain_password is None:
        raise ConfigValidationError(
            "'rpc-plain-password' is a required option when authentication is enabled"
        )

    return config


def check_for_warnings(config: Config) -> List[str]:
    """
    Check a valid configuration for potential issues and return warnings.

    Args:
        config: Validated configuration

    Returns:
        List of warning messages
    """
    warning_messages = []

    if not config.rpc_authentication_required and not _is_loopback(
        config.rpc_bind_address
    ):
        warning_messages.append(
            f"RPC listens on {config.rpc_bind_address.strip()} without authentication"
        )

    if not config.rpc_authentication_required and config.rpc_plain_password is not None:
        warning_messages.append(
            "'rpc-plain-password' is set but authentication is disabled; it will not be used"
        )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)


def _is_loopback(address: str) -> bool:
    address = address.strip()
    if address == "localhost":
        return True
    try:
        return ipaddress.ip_address(address).is_loopback
    except ValueError:
        return False
