"""Settings loading and validation for the download manager configuration."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import (
    ConfigIOError,
    ConfigParseError,
    ConfigReadingError,
    ConfigValidationError,
    EnvironmentConfigError,
)
from .loader import normalize_keys, read_config
from .models import Config
from .validators import check_for_warnings, validate_config

__all__ = [
    # Main loader functions
    "read_config",
    "normalize_keys",
    "validate_config",
    "check_for_warnings",
    "load_environment_config",
    # Configuration models
    "Config",
    "EnvironmentConfig",
    # Exceptions
    "ConfigReadingError",
    "ConfigIOError",
    "EnvironmentConfigError",
    "ConfigParseError",
    "ConfigValidationError",
]
