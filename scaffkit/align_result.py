"""Alignment results: CIGAR details, MD tags and optional fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from scaffkit.stringtools import split


class Cigar(IntEnum):
    """CIGAR operations."""

    NONE = -1
    M = 0
    I = 1  # noqa: E741
    D = 2
    N = 3
    S = 4
    H = 5
    P = 6
    EQUAL = 7
    X = 8


_MATCHES = frozenset({Cigar.M, Cigar.X, Cigar.EQUAL})
_INDELS = frozenset({Cigar.I, Cigar.D})
_CLIPS = frozenset({Cigar.S, Cigar.H})

# operation -> (op, consumes read, consumes reference)
_OPS = {
    "M": (Cigar.M, True, True),
    "=": (Cigar.EQUAL, True, True),
    "X": (Cigar.X, True, True),
    "I": (Cigar.I, True, False),
    "H": (Cigar.H, True, False),
    "S": (Cigar.S, True, False),
    "D": (Cigar.D, False, True),
    "N": (Cigar.N, False, True),
}


@dataclass
class MatchInfo:
    """One CIGAR operation placed on the read (0-based) and reference.

    Positions are closed ranges; -1 marks a side the operation does not touch.
    """

    type: Cigar
    start_position_on_read: int = -1
    end_position_on_read: int = -1
    start_position_on_ref: int = -1
    end_position_on_ref: int = -1
    len: int = 0


@dataclass
class ExtraInfo:
    """An optional ``NAME:TYPE:CONTENT`` field."""

    name: str
    type: str
    content: str

    @classmethod
    def parse(cls, text: str) -> ExtraInfo:
        items = split(text, ":")
        if len(items) != 3:
            raise ValueError(f"optional field must have three parts: {text!r}")
        name, kind, content = items
        if len(name) != 2:
            raise ValueError(f"optional field name must be two characters: {text!r}")
        if len(kind) != 1:
            raise ValueError(f"optional field type must be one character: {text!r}")
        return cls(name, kind, content)


@dataclass
class MDData:
    """Number of matching bases counted from an MD string."""

    total_same: int = 0

    @classmethod
    def parse(cls, text: str) -> MDData:
        digits: list[str] = []
        total = 0
        for char in text + "\0":
            if char.isdigit() and char.isascii():
                digits.append(char)
            elif digits:
                total += int("".join(digits))
                digits.clear()
        return cls(total)

    def __bool__(self) -> bool:
        return self.total_same > 0


@dataclass
class MatchDetail:
    """The operations of one alignment and the read length they consume."""

    infos: list[MatchInfo] = field(default_factory=list)
    read_len: int = 0

    @classmethod
    def from_cigar(cls, text: str, first_match_on_ref: int = 0) -> MatchDetail:
        """Parse a CIGAR string with the reference starting at ``first_match_on_ref``.

        ``*`` yields a single ``NONE`` operation. Raises ``ValueError`` for an
        operation with no length.
        """
        detail = cls()
        number = ""
        on_ref = first_match_on_ref
        on_read = 0
        for char in text:
            if "0" <= char <= "9":
                number += char
            elif char == "*":
                detail.infos = [MatchInfo(Cigar.NONE)]
                return detail
            elif char == "P":
                number = ""
            elif char in _OPS:
                if not number:
                    raise ValueError(f"CIGAR operation {char!r} has no length in {text!r}")
                length = int(number)
                number = ""
                op, uses_read, uses_ref = _OPS[char]
                info = MatchInfo(op)
                if uses_read and length > 0:
                    info.start_position_on_read = on_read
                    info.end_position_on_read = on_read + length - 1
                    on_read += length
                    detail.read_len = on_read
                    info.len = length
                if uses_ref and length > 0:
                    info.start_position_on_ref = on_ref
                    info.end_position_on_ref = on_ref + length - 1
                    on_ref += length
                    info.len = length
                detail.infos.append(info)
        return detail

    def _total(self, kinds: frozenset[Cigar]) -> int:
        return sum(info.len for info in self.infos if info.type in kinds)

    def total_result_len(self) -> int:
        """Matched, inserted and deleted bases together."""
        return self._total(_MATCHES | _INDELS)

    def total_match_len(self) -> int:
        """Bases aligned as match or mismatch."""
        return self._total(_MATCHES)

    def total_in_len(self) -> int:
        """Inserted bases."""
        return self._total(frozenset({Cigar.I}))

    def total_del_len(self) -> int:
        """Deleted bases."""
        return self._total(frozenset({Cigar.D}))

    def total_clip_len(self) -> int:
        """Soft- and hard-clipped bases."""
        return self._total(_CLIPS)

    def total_indel_len(self) -> int:
        """Inserted and deleted bases."""
        return self._total(_INDELS)