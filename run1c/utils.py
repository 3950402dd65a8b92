"""Small helpers: environment lookup, string replacement, process launching."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Optional

_REPLACEMENT_ESCAPE = re.compile(r"\$(\$|&|`|'|\d{1,2})")


def get_environment_variable(name: str) -> str:
    """Return the value of an environment variable.

    Raises LookupError if the variable is missing or empty.
    """
    value = os.environ.get(name)
    if not value:
        raise LookupError(f"Failed to retrieve environment variable: {name}")
    return value


def _expand_format(match: re.Match, replacement: str) -> str:
    """Expand an ECMAScript-style replacement string for one match."""
    groups = match.re.groups

    def expand(escape: re.Match) -> str:
        code = escape.group(1)
        if code == "$":
            return "$"
        if code == "&":
            return match.group(0)
        if code == "`":
            return match.string[: match.start()]
        if code == "'":
            return match.string[match.end():]
        number = int(code)
        if 1 <= number <= groups:
            return match.group(number) or ""
        if len(code) == 2:
            first = int(code[0])
            if 1 <= first <= groups:
                return (match.group(first) or "") + code[1]
        return escape.group(0)

    return _REPLACEMENT_ESCAPE.sub(expand, replacement)


def replace_with_regex(text: str, pattern: str, replacement: str) -> str:
    """Replace every match of ``pattern`` in ``text``.

    The replacement uses ``$&``, ``$1``..``$99``, ``$` ``, ``$'`` and ``$$``.
    """
    regex = re.compile(pattern)
    return regex.sub(lambda m: _expand_format(m, replacement), text)


def replace_substring(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, left to right."""
    if not old:
        raise ValueError("substring to replace must not be empty")
    return text.replace(old, new)


def _quote_argument(arg: str) -> str:
    if " " in arg and not arg.startswith('"') and not arg.endswith('"'):
        return f'"{arg}"'
    return arg


def build_command_line(program: str, args: Iterable[str]) -> str:
    """Join a program and its arguments into one command line.

    Arguments holding a space are quoted unless either end already
    carries a quotation mark.
    """
    return " ".join([program, *(_quote_argument(arg) for arg in args)])


def _posix_argument(arg: str) -> str:
    if len(arg) >= 2 and arg.startswith('"') and arg.endswith('"'):
        return arg[1:-1]
    return arg


def launch_process(
    program: str, args: Iterable[str] = (), timeout: float = 30.0
) -> Optional[int]:
    """Start ``program`` in its own directory and wait up to ``timeout`` seconds.

    Returns the exit code, or None if the process is still running when
    the wait ends.
    """
    if not program:
        raise ValueError("Program path cannot be empty")
    if not Path(program).exists():
        raise FileNotFoundError(f"Program not found: {program}")

    args = list(args)
    working_dir = str(Path(program).parent) or None
    if sys.platform == "win32":
        command = build_command_line(program, args)
    else:
        command = [program, *(_posix_argument(arg) for arg in args)]

    process = subprocess.Popen(command, cwd=working_dir)
    try:
        exit_code = process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        print(
            "Warning: Process is taking longer than expected to start",
            file=sys.stderr,
        )
        return None

    if exit_code != 0:
        print(f"Warning: Process exited with code: {exit_code}", file=sys.stderr)
    return exit_code


def create_file_if_not_exists(path: str | os.PathLike) -> None:
    """Create an empty file at ``path`` unless one is already there."""
    target = Path(path)
    if not target.exists():
        with target.open("a", encoding="utf-8"):
            pass