"""Reading cut plan configurations from JSON.

Every failure while reading an order file surfaces as a single
:class:`ConfigError`. Its ``error_type`` tells the CLI how to present it and
its ``details`` carry the JSON location (line/column or field path).
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from stockcut.application.config.schema import CutPlanConfiguration


class ConfigError(Exception):
    """An order file that could not be turned into a configuration.

    Attributes:
        message: Text shown to the user.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse or validation.
        path: The order file, when loading from disk.
        details: Per-problem records (line/column or field path).
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
    """Render a pydantic error location, e.g. ``products[0].holes``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _field_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(problem["loc"]),
            "message": problem["msg"],
            "value": problem.get("input"),
            "error_type": problem["type"],
        }
        for problem in error.errors()
    ]


def _describe_problems(problems: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for problem in problems:
        line = f"  - {problem['path'] or '<root>'}: {problem['message']}"
        value = problem.get("value")
        # Only scalars are echoed back
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> CutPlanConfiguration:
    try:
        return CutPlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _field_problems(e)
        raise ConfigError(
            message=_describe_problems(problems),
            error_type="validation",
            path=path,
            details=problems,
        ) from e


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )

    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> CutPlanConfiguration:
    """Read and validate an order file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> CutPlanConfiguration:
    """Validate an already parsed order.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)
