"""Loading of cabinet scene configuration files.

Reads a JSON document, validates it against ``SceneConfiguration`` and turns
every failure (missing file, unreadable file, broken JSON, schema mismatch)
into a single ``ConfigError`` carrying a category and per-field details.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_scene.application.config.schema import SceneConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded or validated.

    Attributes:
        message: Human-readable summary.
        error_type: One of "file_not_found", "permission_denied",
            "file_read_error", "json_parse" or "validation".
        path: The configuration file, when loaded from disk.
        details: Per-error dictionaries (JSON path and message for schema
            errors, line and column for JSON errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("cabinet", "width_mm"))
        'cabinet.width_mm'
        >>> _format_json_path(("items", 2, "name"))
        'items[2].name'
    """
    segments: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if segments:
                segments[-1] = f"{segments[-1]}[{segment}]"
            else:
                segments.append(f"[{segment}]")
        else:
            segments.append(str(segment))
    return ".".join(segments)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        # Missing fields report the whole parent object as input
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> SceneConfiguration:
    try:
        return SceneConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> SceneConfiguration:
    """Load and validate a configuration file.

    Args:
        path: Path to a JSON configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema. ``error_type`` names the category.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug("Loaded configuration for '%s' from %s", config.cabinet.name, path)
    return config


def load_config_from_dict(data: dict[str, Any]) -> SceneConfiguration:
    """Validate an in-memory configuration document.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)
