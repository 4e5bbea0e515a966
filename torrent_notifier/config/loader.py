"""Settings loader for the download manager configuration file."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from torrent_notifier.logging import get_logger

from .exceptions import ConfigIOError, ConfigParseError
from .models import Config
from .validators import check_for_warnings, emit_warnings, validate_config

logger = get_logger(__name__, component="config")

_TYPE_ERRORS = {
    "string_type": "string",
    "bool_type": "boolean",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
}


def read_config(path: Union[str, Path]) -> Config:
    """
    Read, decode and validate the settings file.

    The file is parsed as JSON, its keys are normalized from the hyphenated
    spelling to underscores, the result is decoded into a Config and then
    checked by validate_config().

    Args:
        path: Path to the settings file

    Returns:
        Validated Config

    Raises:
        ConfigIOError: If the file cannot be opened or read
        ConfigParseError: If the file is not a JSON object matching the schema
        ConfigValidationError: If a semantic rule is violated
    """
    config_file = Path(path)

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            raw = f.read()
    except UnicodeDecodeError as e:
        raise ConfigParseError(
            f"Settings file is not valid UTF-8: {e}",
            suggestions=[f"Ensure {config_file} is a UTF-8 encoded JSON file"],
        ) from e
    except OSError as e:
        raise ConfigIOError(
            f"Failed to read settings file {config_file}: {e}",
            cause=e,
            suggestions=[
                f"Ensure {config_file} exists and is readable",
                "Check file permissions",
            ],
        ) from e

    try:
        document = json.loads(raw)
        if not isinstance(document, dict):
            raise ConfigParseError("JSON root element is not an object")
        document = normalize_keys(document)
    except json.JSONDecodeError as e:
        raise ConfigParseError(
            f"Failed to parse JSON settings: {e}",
            suggestions=["Check JSON syntax in your settings file"],
        ) from e
    except RecursionError as e:
        raise ConfigParseError(
            "Failed to parse JSON settings: document is nested too deeply"
        ) from e

    config = _decode_config(document)
    validate_config(config)

    warnings = check_for_warnings(config)
    if warnings:
        emit_warnings(warnings)

    logger.debug(
        "Settings loaded",
        extra={"event": "config.loaded", "path": str(config_file)},
    )
    return config


def normalize_keys(document: Any) -> Any:
    """
    Return a copy of a parsed JSON document with hyphens in keys replaced.

    Every object key at every depth has each "-" turned into "_". When two
    keys collapse to the same spelling, the later one in document order wins.
    The input is left untouched.

    Args:
        document: Parsed JSON value

    Returns:
        New document with normalized keys
    """
    if isinstance(document, dict):
        return {
            key.replace("-", "_"): normalize_keys(value)
            for key, value in document.items()
        }
    if isinstance(document, list):
        return [normalize_keys(item) for item in document]
    return document


def _decode_config(document: Dict[str, Any]) -> Config:
    """
    Decode a normalized settings document into a Config.

    The result has not been through validate_config(); read_config() is the
    only caller.

    Args:
        document: JSON object with underscore-separated keys

    Returns:
        Decoded (not yet validated) Config

    Raises:
        ConfigParseError: For the first missing field or mismatched value
    """
    try:
        return Config.model_validate(document)
    except ValidationError as e:
        raise _parse_error_from_validation(e) from e


def _parse_error_from_validation(error: ValidationError) -> ConfigParseError:
    """Convert the first Pydantic error into a user-facing ConfigParseError."""
    details = error.errors()
    if not details:
        return ConfigParseError("JSON validation error")

    detail = details[0]
    field = str(detail["loc"][0]) if detail["loc"] else None
    option = field.replace("_", "-") if field else "settings"
    error_type = detail["type"]

    if error_type == "missing":
        return ConfigParseError(f"'{option}' option is missing", field=field)
    if error_type in _TYPE_ERRORS:
        return ConfigParseError(
            f"Invalid type for '{option}': expected {_TYPE_ERRORS[error_type]}",
            field=field,
        )
    return ConfigParseError(f"Invalid '{option}' value: {detail['msg']}", field=field)
