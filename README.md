# run1c

A small command-line launcher for 1C:Enterprise file databases. Give it a
path to a database folder, or to its `1Cv8.1cd` file, and it starts the 1C
starter (`1cestart.exe`) with that database, in user mode or in the
configurator. Every input that launched successfully is kept in a history
file.

## Installation

```
pip install .
```

## Usage

```
run1c "C:\Bases\Accounting"
```

The first Windows-style path (`X:\...`) found in the input is used; it ends
at a double quote or at the end of the text, so a line copied from a
shortcut or from the 1C base list works too. A trailing backslash is
dropped. The path must exist. A path whose file name is `1Cv8.1cd` (in any
letter case) is replaced by the folder that holds it. The starter is then
called with `ENTERPRISE /F "<path>"`.

Options:

- `--config` — start the configurator (`CONFIG`) instead of user mode.
- `--starter PATH` — use this `1cestart.exe` instead of the default one.
- `--storage PATH` — use this history file instead of the default one.

With no input given, `run1c` prints the stored history, most recent first.

The command exits with 0 on success and 1 when the input could not be
launched (no path found, path missing, starter missing, or the launch
failed). The starter is waited on for up to 30 seconds; a non-zero exit
code or a longer wait is reported as a warning on stderr.

## Where things live

- **Starter**: `%PROGRAMFILES%\1cv8\common\1cestart.exe`, or
  `C:\Program Files\1cv8\common\1cestart.exe` when `PROGRAMFILES` is not
  set. The file must be named `1cestart.exe`.
- **History**: `%LOCALAPPDATA%\RUN1C\run1c_storage.ini` on Windows (falling
  back to `%USERPROFILE%\AppData\Local\RUN1C\`),
  `~/Library/Application Support/RUN1C/run1c_storage.ini` on macOS and
  `~/.config/run1c/run1c_storage.ini` elsewhere. When none of these can be
  worked out, `run1c_storage.ini` in the current directory is used. The
  folder and file are created if missing.
- **Log**: messages are appended to `run1c_error.log` in the current
  directory.

The history file is plain text:

```
[array:basesHistory]
C:\Bases\Accounting
C:\Bases\Trade
```

A `[name]` line followed by one line holds a single value. An
`[array:name]` line is followed by one line for each item. Blank lines are
skipped, and keys are written back in sorted order.

## Using it from Python

```python
from run1c.config import Config
from run1c.launcher import Launcher, extract_database_path, remember
from run1c.storage import PersistentStorage

print(extract_database_path('"C:\\Bases\\Trade"'))  # C:\Bases\Trade

config = Config()
launcher = Launcher(config.starter_path())
if launcher.run("C:\\Bases\\Trade", config_mode=False):
    storage = PersistentStorage(config.storage_path())
    storage.load()
    remember(storage.array_ref("basesHistory"), "C:\\Bases\\Trade")
    storage.save()
```

- `run1c.launcher` — `Launcher` (with `build_arguments` and `run`),
  `extract_database_path`, `normalize_database_path`, `remember` and the
  `main` command.
- `run1c.storage` — `PersistentStorage` (`load`, `save`, `put`,
  `get_item`, `get_array`, `array_ref`, `in`) and `parse_bracketed_line`.
- `run1c.config` — `Config`, holding overrides for the font, starter, base
  font size (8 to 72, default 18) and storage file, each falling back to its
  default.
- `run1c.errors` — `ErrorType`, `ErrorHandler` (path validation, logging,
  an optional error callback) and the message helpers.
- `run1c.utils` — environment lookup, string replacement, command-line
  building and `launch_process`.

## What it does not do

There is no graphical window: the history is not shown as a clickable
list, and there is no keyboard navigation through it. The font settings in
`Config` are kept and validated, but nothing in the package draws text with
them.

## Running the tests

```
pip install .[test]
pytest
```