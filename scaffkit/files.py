"""Open plain or gzip-compressed text files by name."""

from __future__ import annotations

import gzip
from collections.abc import Callable
from typing import IO


def _is_gzip(file_name: str) -> bool:
    return file_name.endswith(".gz")


def open_reader(file_name: str) -> IO[str]:
    """Open a text file for reading, decompressing names ending in ``.gz``.

    Raises ``OSError`` when the file cannot be opened.
    """
    if _is_gzip(file_name):
        return gzip.open(file_name, "rt", encoding="utf-8")
    return open(file_name, "r", encoding="utf-8")


def open_writer(file_name: str) -> IO[str]:
    """Open a text file for writing, compressing names ending in ``.gz``.

    Raises ``OSError`` when the file cannot be created.
    """
    if _is_gzip(file_name):
        return gzip.open(file_name, "wt", encoding="utf-8")
    return open(file_name, "w", encoding="utf-8")


def each_line(stream: IO[str], parse: Callable[[str], object]) -> None:
    """Call ``parse`` on every newline-terminated line, without the newline.

    A final line that lacks a newline is not passed on.
    """
    for line in stream:
        if line.endswith("\n"):
            parse(line[:-1])