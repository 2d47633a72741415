"""Small string helpers: trimming, splitting and simple checks."""

from __future__ import annotations

import re

_BLANKS = " \n\r\t"
_BLANK_RUN = re.compile(r"[ \n\r\t]+")
_DIGITS = frozenset("0123456789")


def itos(value: int) -> str:
    """Render an integer in decimal."""
    return str(int(value))


def ltrim(text: str) -> str:
    """Strip leading blanks; a string made only of blanks is an error."""
    stripped = text.lstrip(_BLANKS)
    if not stripped:
        raise ValueError("cannot left-trim a string made only of blanks")
    return stripped


def rtrim(text: str) -> str:
    """Strip trailing blanks."""
    return text.rstrip(_BLANKS)


def trim(text: str) -> str:
    """Strip blanks at both ends."""
    return ltrim(rtrim(text))


def split(text: str, separator: str | None = None) -> list[str]:
    """Split ``text`` and drop empty pieces.

    Without a separator the text is split on runs of space, tab, CR and LF.
    """
    if separator is None:
        return [piece for piece in _BLANK_RUN.split(text) if piece]
    if not separator:
        raise ValueError("separator must not be empty")
    return [piece for piece in text.split(separator) if piece]


def replace_all(text: str, old: str, new: str) -> str:
    """Return ``text`` with every occurrence of ``old`` replaced by ``new``."""
    if not old:
        raise ValueError("the substring to replace must not be empty")
    return text.replace(old, new)


def is_num(text: str) -> bool:
    """True when every character is an ASCII digit (an empty string counts)."""
    return all(char in _DIGITS for char in text)