"""Error hierarchy for layerconf."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

__all__ = [
    "LayerconfError",
    "ConfigTypeError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ErrorCodes",
]


class LayerconfError(Exception):
    """Base error for all layerconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigTypeError(LayerconfError):
    """Raised when a configuration value exists but has an unexpected kind."""

    def __init__(self, key: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_TYPE_ERROR",
            message=(
                f'The value of the configuration key "{key}" has an invalid type.\n'
                "\n"
                f'Expected a "{expected}", but got a "{actual}".'
            ),
            details={"key": key, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The configuration key that was looked up."""
        return self.details["key"]

    @property
    def expected(self) -> str:
        """Label of the kind the caller asked for."""
        return self.details["expected"]

    @property
    def actual(self) -> str:
        """Label of the kind that was actually found."""
        return self.details["actual"]


class ConfigNotFoundError(LayerconfError):
    """Raised when no source defines a value for a configuration key.

    The message lists every place the value could have been supplied so an
    operator can fix the deployment without reading the code. ``sources``
    usually comes from ``ConfigResolver.candidate_sources(key)``.
    """

    def __init__(
        self,
        key: str,
        msg: str | None = None,
        *,
        sources: Sequence[str],
        **kwargs: Any,
    ) -> None:
        candidates = list(sources)
        lines = [f'No value found for the configuration key "{key}".', ""]
        if msg:
            lines += [msg, ""]
        lines.append("To pass a value, you can use:")
        for index, source in enumerate(candidates):
            if index == len(candidates) - 1:
                lines.append(f"- {source}.")
            elif index == len(candidates) - 2:
                lines.append(f"- {source}, or")
            else:
                lines.append(f"- {source},")
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message="\n".join(lines),
            details={"key": key, "msg": msg, "sources": candidates},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The configuration key that was looked up."""
        return self.details["key"]

    @property
    def msg(self) -> str | None:
        """Optional contextual message supplied by the caller."""
        return self.details["msg"]


class ConfigParseError(LayerconfError):
    """Raised when a configuration file exists but cannot be parsed."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f"Invalid configuration file '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """Path of the file that failed to parse."""
        return self.details["path"]


class ErrorCodes:
    """All layerconf error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            use_fallback()
    """

    CONFIG_TYPE_ERROR = "CONFIG_TYPE_ERROR"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
