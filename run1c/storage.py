"""Persistent key/value storage kept in a small bracketed text file."""

from __future__ import annotations

import os
import sys
from collections import deque
from pathlib import Path
from typing import Deque, Dict, List, Optional, Sequence, Union

from run1c.config import Config

StoreItem = Union[str, List[str]]


def parse_bracketed_line(line: str) -> List[str]:
    """Split a ``[a:b:c]`` header into its parts; return [] for anything else."""
    if len(line) < 3 or not line.startswith("[") or not line.endswith("]"):
        return []
    parts = line[1:-1].split(":")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _next_is_value(pending: Deque[str]) -> bool:
    return bool(pending) and not (
        pending[0].startswith("[") or pending[0].endswith("]")
    )


class PersistentStorage:
    """Strings and string lists stored by key in a plain text file.

    The file holds ``[key]`` followed by one value line, or
    ``[array:key]`` followed by one line per item.
    """

    def __init__(self, path: Optional[str | os.PathLike] = None) -> None:
        self.filepath = Path(path) if path is not None else Path(Config().storage_path())
        self._store: Dict[str, StoreItem] = {}
        print(f"[config] Using storage path: {self.filepath}")
        self._create_file_if_not_exists()
        print("[config] Storage initialized successfully")

    def _create_file_if_not_exists(self) -> None:
        parent = self.filepath.parent
        if str(parent) not in ("", ".") and not parent.exists():
            print(f"[config] Creating directory: {parent}")
            parent.mkdir(parents=True, exist_ok=True)
        if not self.filepath.exists():
            print(f"[config] Creating storage file: {self.filepath}")
            with self.filepath.open("a", encoding="utf-8"):
                pass

    def _read_lines(self) -> List[str]:
        try:
            with self.filepath.open("r", encoding="utf-8", newline="") as infile:
                text = infile.read()
        except OSError:
            return []
        stripped = (line.strip(" \t\r\n") for line in text.split("\n"))
        return [line for line in stripped if line]

    def load(self) -> None:
        """Read the file; keys already held are not overwritten."""
        pending = deque(self._read_lines())
        while pending:
            parts = parse_bracketed_line(pending.popleft())
            if len(parts) == 1:
                key = parts[0]
                if not _next_is_value(pending):
                    print(
                        f"[config loading] ERROR: missing value for key: {key}",
                        file=sys.stderr,
                    )
                    continue
                value = pending.popleft()
                print(f"[config loading] {key} = {value}")
                self._store.setdefault(key, value)
            elif len(parts) == 2 and parts[0] == "array":
                key = parts[1]
                items: List[str] = []
                while _next_is_value(pending):
                    item = pending.popleft()
                    print(f"[config loading] {key} << {item}")
                    items.append(item)
                if not items:
                    print(
                        f"[config loading] ERROR: missing items for array: {key}",
                        file=sys.stderr,
                    )
                    continue
                self._store.setdefault(key, items)
            else:
                print("[config loading] ERROR: wrong file format", file=sys.stderr)

    def save(self) -> None:
        """Write every entry to the file, keys in sorted order."""
        print("[config saving] persisting storage to disk")
        lines: List[str] = []
        for key in sorted(self._store):
            value = self._store[key]
            if isinstance(value, str):
                lines.extend((f"[{key}]", value))
            else:
                lines.append(f"[array:{key}]")
                lines.extend(value)
        try:
            with self.filepath.open("w", encoding="utf-8", newline="\n") as outfile:
                outfile.writelines(line + "\n" for line in lines)
        except OSError:
            print(
                f"[config saving] ERROR: Unable to open file for saving: {self.filepath}",
                file=sys.stderr,
            )
            return
        print("[config saving] storage saved successfully")

    def put(self, key: str, value: Union[str, Sequence[str]]) -> None:
        """Store a string or a list of strings under ``key``."""
        if isinstance(value, str):
            self._store[key] = value
        elif isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            self._store[key] = list(value)
        else:
            raise TypeError("value must be a string or a sequence of strings")

    def get_item(self, key: str) -> str:
        """Return the string under ``key``, or "" if absent or not a string."""
        value = self._store.get(key)
        return value if isinstance(value, str) else ""

    def get_array(self, key: str) -> List[str]:
        """Return a copy of the list under ``key``, or [] if absent or not a list."""
        value = self._store.get(key)
        return list(value) if isinstance(value, list) else []

    def array_ref(self, key: str) -> List[str]:
        """Return the stored list itself, replacing a missing or string value with []."""
        value = self._store.get(key)
        if isinstance(value, list):
            return value
        fresh: List[str] = []
        self._store[key] = fresh
        return fresh

    def __contains__(self, key: object) -> bool:
        return key in self._store