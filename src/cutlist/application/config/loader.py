"""Configuration file loading with structured error reporting.

Loads JSON cut list plans and turns file system, JSON syntax and schema
problems into a single ConfigError type that the CLI can display.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cutlist.application.config.schema import CutlistConfiguration


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded or validated.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation
        path: Path to the configuration file, when loading from disk
        details: Per-problem details (line/column for JSON errors, JSON path
            and message for validation errors)
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


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> format_json_path(("search", "attempts"))
        'search.attempts'
        >>> format_json_path(("cutlist", 1, "width"))
        'cutlist[1].width'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        # Whole-object inputs are noise in a one-line summary
        if detail.get("value") is not None and not isinstance(
            detail["value"], (dict, list)
        ):
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> CutlistConfiguration:
    try:
        return CutlistConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> CutlistConfiguration:
    """Load and validate a cut list configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated CutlistConfiguration

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON, or
            does not match the schema. ``error_type`` tells which.
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

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CutlistConfiguration:
    """Validate a cut list configuration held in memory.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
