"""Application settings: font, 1C starter location, font size, storage file."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from run1c.utils import get_environment_variable

STARTER_FILENAME = "1cestart.exe"
DEFAULT_BASE_FONT_SIZE = 18
MIN_FONT_SIZE = 8
MAX_FONT_SIZE = 72
_STORAGE_FILENAME = "run1c_storage.ini"


def is_valid_path(path: str) -> bool:
    """True if ``path`` is non-empty and exists."""
    if not path:
        return False
    try:
        return Path(path).exists()
    except (OSError, ValueError):
        return False


def is_starter_valid(path: str) -> bool:
    """True if ``path`` exists and names the 1C starter executable."""
    return is_valid_path(path) and Path(path).name == STARTER_FILENAME


def default_font_path() -> str:
    """Return the font used when no custom font is set."""
    return "C:\\Windows\\Fonts\\segoeui.ttf"


def default_starter_path() -> str:
    """Return the usual location of the 1C starter."""
    try:
        return get_environment_variable("PROGRAMFILES") + "\\1cv8\\common\\1cestart.exe"
    except LookupError:
        return "C:\\Program Files\\1cv8\\common\\1cestart.exe"


def default_storage_path() -> str:
    """Return the per-user location of the storage file for this platform."""
    if sys.platform == "win32":
        try:
            return get_environment_variable("LOCALAPPDATA") + "\\RUN1C\\" + _STORAGE_FILENAME
        except LookupError:
            pass
        try:
            return (
                get_environment_variable("USERPROFILE")
                + "\\AppData\\Local\\RUN1C\\"
                + _STORAGE_FILENAME
            )
        except LookupError:
            pass
    elif sys.platform == "darwin":
        home = os.environ.get("HOME")
        if home is not None:
            return home + "/Library/Application Support/RUN1C/" + _STORAGE_FILENAME
    else:
        home = os.environ.get("HOME")
        if home is not None:
            return home + "/.config/run1c/" + _STORAGE_FILENAME
    return _STORAGE_FILENAME


class Config:
    """Settings with user overrides that fall back to defaults."""

    def __init__(self) -> None:
        self._font: Optional[str] = None
        self._starter: Optional[str] = None
        self._storage: Optional[str] = None
        self._base_font_size = DEFAULT_BASE_FONT_SIZE

    def font_path(self) -> str:
        if self._font is not None and is_valid_path(self._font):
            return self._font
        return default_font_path()

    def use_font(self, path: str) -> bool:
        """Set a custom font if the path exists; return whether it was taken."""
        if is_valid_path(path):
            self._font = path
            return True
        return False

    def starter_path(self) -> str:
        if self._starter is not None and is_starter_valid(self._starter):
            return self._starter
        return default_starter_path()

    def use_starter(self, path: str) -> bool:
        """Set a custom 1C starter if it is valid; return whether it was taken."""
        if is_starter_valid(path):
            self._starter = path
            return True
        return False

    def base_font_size(self) -> int:
        return self._base_font_size

    def use_base_font_size(self, size: int) -> bool:
        """Set the base font size if it lies in 8..72; return whether it was taken."""
        if MIN_FONT_SIZE <= size <= MAX_FONT_SIZE:
            self._base_font_size = size
            return True
        return False

    def storage_path(self) -> str:
        if self._storage is not None:
            return self._storage
        return default_storage_path()

    def use_storage_path(self, path: str) -> None:
        self._storage = path