"""Error hierarchy for scriptsmith."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ScriptsmithError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidInputError",
    "ModuleNotFoundError",
    "CircularDependencyError",
    "UnsupportedOSError",
    "ErrorCodes",
]


class ScriptsmithError(Exception):
    """Base error for all scriptsmith errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
        trace_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.trace_id = trace_id
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ScriptsmithError):
    """Raised when a configuration or catalog file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ScriptsmithError):
    """Raised when configuration or catalog content is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidInputError(ScriptsmithError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ModuleNotFoundError(ScriptsmithError):
    """Raised in strict mode when a selected or required module is unknown."""

    def __init__(self, module_id: str, required_by: str | None = None, **kwargs: Any) -> None:
        if required_by is None:
            message = f"Module not found: {module_id}"
        else:
            message = f"Module not found: {module_id} (required by {required_by})"
        super().__init__(
            code="MODULE_NOT_FOUND",
            message=message,
            details={"module_id": module_id, "required_by": required_by},
            **kwargs,
        )

    @property
    def module_id(self) -> str:
        """The module ID that could not be found."""
        return self.details["module_id"]

    @property
    def required_by(self) -> str | None:
        """The module whose requires list referenced the unknown ID, if any."""
        return self.details["required_by"]


class CircularDependencyError(ScriptsmithError):
    """Raised in strict mode when module requirements form a cycle."""

    def __init__(self, cycle_path: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="CIRCULAR_DEPENDENCY",
            message=f"Circular dependency detected: {' -> '.join(cycle_path)}",
            details={"cycle_path": cycle_path},
            **kwargs,
        )

    @property
    def cycle_path(self) -> list[str]:
        """The module IDs forming the cycle, first ID repeated at the end."""
        return self.details["cycle_path"]


class UnsupportedOSError(ScriptsmithError):
    """Raised when a request names an OS tag outside the supported set."""

    def __init__(self, os_tag: str, supported: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_OS",
            message=f"Unsupported target OS '{os_tag}'. Expected one of: {', '.join(supported)}",
            details={"os_tag": os_tag, "supported": supported},
            **kwargs,
        )


class ErrorCodes:
    """All scriptsmith error codes as constants.

    Example:
        if error.code == ErrorCodes.MODULE_NOT_FOUND:
            handle_not_found()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"
    MODULE_NOT_FOUND = "MODULE_NOT_FOUND"
    CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"
    UNSUPPORTED_OS = "UNSUPPORTED_OS"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
