"""A small logger writing timestamped lines to the console and a file."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TextIO


def last_index_of(text: str, char: str) -> int:
    """Return the index of the last occurrence of ``char`` in ``text``, or -1."""
    found = -1
    for index, current in enumerate(text):
        if current == char:
            found = index
    return found


def create_dir(path: str | os.PathLike) -> Path | None:
    """Create the directory part of ``path`` (one level only).

    Returns the directory, or None when ``path`` has no directory part.
    An already existing directory is accepted; other failures raise OSError.
    """
    text = os.fspath(path)
    last_index = last_index_of(text, "/")
    if last_index <= 0:
        return None
    directory = text[:last_index]
    try:
        os.mkdir(directory, 0o755)
    except FileExistsError:
        pass
    return Path(directory)


def create_file_with_path(path: str | os.PathLike) -> Path:
    """Create ``path`` and its immediate parent directory if missing."""
    create_dir(path)
    with open(path, "a", encoding="utf-8"):
        pass
    return Path(path)


@dataclass
class Logger:
    """Writes informational messages to stdout and, if open, a log file."""

    enabled: bool = True
    console_out: bool = True
    file: TextIO | None = None
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)

    def info(self, message: str, *args: object) -> str | None:
        """Log a printf-style message; return the written line, or None if disabled."""
        if not self.enabled:
            return None
        text = message % args if args else message
        now = self.clock()
        line = f"[{now:%H:%M:%S}] - [INFO] - {text}\n"
        if self.console_out:
            sys.stdout.write(line)
        if self.file is not None:
            self.file.write(line)
            self.file.flush()
        return line

    def close(self) -> None:
        """Close the log file, if any."""
        if self.file is not None:
            self.file.close()
            self.file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _open_log_file(file_path: str | os.PathLike | None) -> TextIO | None:
    if file_path is None:
        return None
    try:
        create_file_with_path(file_path)
    except OSError:
        pass
    try:
        return open(file_path, "a", encoding="utf-8")
    except OSError:
        print(f"Unable to open file {os.fspath(file_path)} for logger.", file=sys.stderr)
        return None


def init_logger(file_path: str | os.PathLike | None) -> Logger:
    """Create an enabled console logger that also appends to ``file_path`` if possible."""
    return Logger(enabled=True, console_out=True, file=_open_log_file(file_path))