"""Error kinds, messages, validation helpers and logging."""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from run1c.config import STARTER_FILENAME

DEFAULT_LOG_PATH = "run1c_error.log"
_FONT_EXTENSIONS = frozenset({".ttf", ".otf", ".TTF", ".OTF"})


class ErrorType(Enum):
    """Kinds of failure, each with its user-facing message."""

    FILE_NOT_FOUND = "File not found"
    INVALID_PATH = "Invalid path specified"
    LAUNCH_FAILED = "Failed to launch application"
    FONT_LOAD_FAILED = "Failed to load font"
    CONFIGURATION_ERROR = "Configuration error"
    ENVIRONMENT_VARIABLE_ERROR = "Environment variable error"
    PROCESS_CREATION_FAILED = "Process creation failed"


ErrorCallback = Callable[[ErrorType, str], None]


def error_message(error_type: ErrorType) -> str:
    """Return the base message for an error kind."""
    return error_type.value


def format_error_message(error_type: ErrorType, details: str) -> str:
    """Return the base message, followed by ``": details"`` when given."""
    base = error_message(error_type)
    return f"{base}: {details}" if details else base


class ErrorHandler:
    """Reports errors to the console, a log file and an optional callback."""

    def __init__(
        self,
        log_path: str | os.PathLike = DEFAULT_LOG_PATH,
        callback: Optional[ErrorCallback] = None,
    ) -> None:
        self.log_path = log_path
        self.callback = callback

    def show_error(self, error_type: ErrorType, details: str) -> None:
        """Print the error and pass it to the callback, if one is set."""
        print(f"[ERROR] {format_error_message(error_type, details)}", file=sys.stderr)
        if self.callback is not None:
            self.callback(error_type, details)

    def set_callback(self, callback: ErrorCallback) -> None:
        self.callback = callback

    def clear_callback(self) -> None:
        self.callback = None

    def validate_path(self, path: str) -> bool:
        """True if ``path`` is non-empty and exists; logs why otherwise."""
        if not path:
            self.log_info("Path validation failed: path is empty")
            return False
        try:
            exists = Path(path).exists()
        except (OSError, ValueError) as exc:
            self.log_error(
                ErrorType.INVALID_PATH,
                f"Path validation failed: {exc} for path: {path}",
            )
            return False
        if not exists:
            self.log_info(f"Path validation failed: path does not exist: {path}")
        return exists

    def validate_starter_path(self, path: str) -> bool:
        """True if ``path`` exists and names the 1C starter executable."""
        if not self.validate_path(path):
            return False
        return Path(path).name == STARTER_FILENAME

    def validate_font_path(self, path: str) -> bool:
        """True if ``path`` exists and has a TrueType or OpenType extension."""
        if not self.validate_path(path):
            return False
        return Path(path).suffix in _FONT_EXTENSIONS

    def _append(self, line: str) -> None:
        try:
            with open(self.log_path, "a", encoding="utf-8") as log:
                log.write(line + "\n")
        except OSError:
            pass

    def log_error(self, error_type: ErrorType, details: str) -> None:
        line = f"[ERROR] {format_error_message(error_type, details)}"
        print(line, file=sys.stderr)
        self._append(line)

    def log_warning(self, message: str) -> None:
        line = f"[WARNING] {message}"
        print(line, file=sys.stderr)
        self._append(line)

    def log_info(self, message: str) -> None:
        line = f"[INFO] {message}"
        print(line)
        self._append(line)