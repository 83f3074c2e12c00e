"""Design document loading with actionable error reporting.

Reads JSON design files (or already-parsed dictionaries) and validates them
against DesignConfiguration. File system problems, JSON syntax errors and
schema violations all surface as ConfigError.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomplan.application.config.schema import DesignConfiguration


class ConfigError(Exception):
    """Raised when a design document cannot be read or validated.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation.
        path: Source file, if any.
        details: Per-problem dictionaries (path/message/value/error_type for
            validation, line/column/message for JSON syntax).
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
    """Render a pydantic error location as a dotted path.

    Examples:
        >>> format_json_path(("furniture", 0, "width"))
        'furniture[0].width'
        >>> format_json_path(("room", "customPolygon", 2))
        'room.customPolygon[2]'
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
    lines = ["Design validation failed:"]
    for detail in details:
        line = f"  - {detail['path'] or '(root)'}: {detail['message']}"
        value = detail.get("value")
        # Whole-object inputs are noise in a one-line summary
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> DesignConfiguration:
    try:
        return DesignConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Design file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading design file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading design file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in design file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_design(path: Path) -> DesignConfiguration:
    """Load and validate a design document from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does not
            match the schema. ``error_type`` tells which.
    """
    return _validate(_read_json(path), path)


def load_design_from_dict(data: dict[str, Any]) -> DesignConfiguration:
    """Validate an already-parsed design document.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
