"""Error handling framework for the Arvia CLI."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ExitCode(IntEnum):
    """Arvia CLI exit codes."""

    SUCCESS = 0
    CONFIG_ERROR = 1  # Missing/invalid arvia.json or source dir (user fixable)
    BUILD_ERROR = 2  # I/O failure while producing the build output
    FATAL_ERROR = 3  # Unexpected crash


class ArviaError(Exception):
    """Base exception for Arvia errors."""

    exit_code: ExitCode = ExitCode.FATAL_ERROR

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for JSON output."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "exit_code": self.exit_code,
            **self.context,
        }


class ConfigError(ArviaError):
    """Precondition errors: missing descriptor, missing source directory."""

    exit_code = ExitCode.CONFIG_ERROR


class BuildError(ArviaError):
    """Build-time I/O errors."""

    exit_code = ExitCode.BUILD_ERROR

    def __init__(self, message: str, path: str, **context: Any) -> None:
        super().__init__(message, path=path, **context)
        self.path = path


__all__ = ["ExitCode", "ArviaError", "ConfigError", "BuildError"]
