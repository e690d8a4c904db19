"""Line reading for scene files, keeping line endings as they are."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import TextIO

_CHUNK = 4096
_ENCODING = "latin-1"


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines split on "\\n" only, each with its newline kept.

    The last line is yielded without a newline if the text does not end
    with one; an empty stream yields nothing.
    """
    pending = ""
    while chunk := stream.read(_CHUNK):
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending


def _open(path: str | PathLike[str]) -> TextIO:
    return open(path, encoding=_ENCODING, newline="")


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return every line of a file; failures to open raise OSError."""
    with _open(path) as handle:
        return list(iter_lines(handle))


def count_lines(path: str | PathLike[str]) -> int:
    """Return the number of lines in a file; failures to open raise OSError."""
    with _open(path) as handle:
        return sum(1 for _ in iter_lines(handle))


def copy_line(line: str, keep_newline: bool) -> str:
    """Copy a line up to a NUL, and also cut at the first newline unless kept."""
    line = line.split("\0", 1)[0]
    if keep_newline:
        return line
    return line.split("\n", 1)[0]