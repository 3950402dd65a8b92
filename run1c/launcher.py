"""Turns a pasted 1C connection string into a launch of the 1C starter."""

from __future__ import annotations

import argparse
import re
import subprocess
from pathlib import PureWindowsPath
from typing import Callable, List, Optional, Sequence

from run1c.config import Config
from run1c.errors import ErrorHandler, ErrorType
from run1c.storage import PersistentStorage
from run1c.utils import launch_process

HISTORY_KEY = "basesHistory"
_DATABASE_FILENAME = "1cv8.1cd"
_FILEPATH_REGEX = re.compile(r'([a-zA-Z]:\\[^"]+?)(?="|\Z)')

LaunchFunction = Callable[[str, List[str]], object]


def extract_database_path(text: str) -> Optional[str]:
    """Find the first ``X:\\...`` path in ``text``, ending at a quote or the end.

    A trailing backslash is removed. Returns None when there is no path.
    """
    match = _FILEPATH_REGEX.search(text)
    if match is None:
        return None
    path = match.group(0)
    if len(path) > 3 and path.endswith("\\"):
        path = path[:-1]
    return path


def normalize_database_path(path: str) -> str:
    """Point at the directory when ``path`` names a ``1Cv8.1CD`` file."""
    windows_path = PureWindowsPath(path)
    if windows_path.name.lower() == _DATABASE_FILENAME:
        return str(windows_path.parent)
    return path


def remember(history: List[str], entry: str) -> None:
    """Move ``entry`` to the end of ``history``, adding it if absent."""
    if entry in history:
        history.remove(entry)
    history.append(entry)


class Launcher:
    """Starts 1C for a database path found in user input."""

    def __init__(
        self,
        starter_path: Optional[str] = None,
        handler: Optional[ErrorHandler] = None,
        launch: LaunchFunction = launch_process,
    ) -> None:
        self.starter_path = starter_path if starter_path is not None else Config().starter_path()
        self.handler = handler if handler is not None else ErrorHandler()
        self._launch = launch

    def build_arguments(self, text: str, config_mode: bool = False) -> List[str]:
        """Return the starter arguments for ``text``; ValueError if no path is found."""
        path = extract_database_path(text)
        if path is None:
            raise ValueError(f"Could not extract valid path from input: {text}")
        mode = "CONFIG" if config_mode else "ENTERPRISE"
        return [mode, "/F", f'"{normalize_database_path(path)}"']

    def run(self, text: str, config_mode: bool = False) -> bool:
        """Validate the input and launch 1C; return whether it was launched."""
        handler = self.handler
        try:
            if not text:
                handler.log_error(ErrorType.INVALID_PATH, "Empty input provided")
                return False
            if not handler.validate_starter_path(self.starter_path):
                handler.show_error(
                    ErrorType.FILE_NOT_FOUND,
                    f"1C starter not found at: {self.starter_path}",
                )
                return False

            handler.log_info(f"Processing input: {text}")
            handler.log_info("Running regex extraction on input")
            path = extract_database_path(text)
            if path is None:
                handler.log_error(
                    ErrorType.INVALID_PATH,
                    f"Could not extract valid path from input: {text}",
                )
                return False
            handler.log_info(f"Extracted path: {path}")

            if not handler.validate_path(path):
                handler.show_error(
                    ErrorType.INVALID_PATH, f"Database path does not exist: {path}"
                )
                return False

            target = normalize_database_path(path)
            if target != path:
                name = PureWindowsPath(path).name
                handler.log_info(f"Found {name} file, using parent directory: {target}")

            args = self.build_arguments(text, config_mode)
            handler.log_info(f"Launching 1C with path: {target}")
            self._launch(self.starter_path, args)
            return True
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            handler.show_error(ErrorType.LAUNCH_FAILED, f"Exception during launch: {exc}")
            return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch 1C for the given input, or list the history when none is given."""
    parser = argparse.ArgumentParser(
        prog="run1c", description="Launch 1C:Enterprise for a file database."
    )
    parser.add_argument("input", nargs="?", help="connection string or database path")
    parser.add_argument(
        "--config", action="store_true", help="open the designer instead of the client"
    )
    parser.add_argument("--starter", help="path to 1cestart.exe")
    parser.add_argument("--storage", help="path to the storage file")
    options = parser.parse_args(argv)

    config = Config()
    if options.storage:
        config.use_storage_path(options.storage)
    if options.starter:
        config.use_starter(options.starter)

    storage = PersistentStorage(config.storage_path())
    storage.load()
    history = storage.array_ref(HISTORY_KEY)

    if options.input is None:
        for entry in reversed(history):
            print(entry)
        return 0

    starter = options.starter if options.starter else config.starter_path()
    launcher = Launcher(starter)
    if not launcher.run(options.input, options.config):
        return 1
    remember(history, options.input)
    storage.save()
    return 0