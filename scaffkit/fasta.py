"""FASTA records, header formats and readers."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import IO, Any

from scaffkit.seq import Seq


class FastaFormatError(ValueError):
    """Raised for malformed FASTA input."""


@dataclass
class NormalHead:
    """A header kept verbatim."""

    text: str = ""

    @classmethod
    def parse(cls, line: str) -> NormalHead:
        return cls(line)

    def head(self) -> str:
        return self.text


@dataclass
class IdDescHead:
    """A header split into an id and the description after the first blank."""

    id: str = ""
    desc: str = ""

    @classmethod
    def parse(cls, line: str) -> IdDescHead:
        if len(line) < 2 or not line.startswith(">"):
            raise FastaFormatError(f"not a FASTA header: {line!r}")
        body = line[1:]
        cut = next((pos for pos, char in enumerate(body) if char in " \t"), len(body))
        return cls(body[:cut], body[cut:])

    def head(self) -> str:
        return ">" + self.id + self.desc


_SOAP2_HEAD = re.compile(r">\s*(\d+)\s+length\s+([+-]?\d+)\s+cvg_([^_\s]+)_tip_([+-]?\d+)")


@dataclass
class SOAP2ContigHead:
    """Header of a contig: ``>ID length LEN cvg_COV_tip_TIP``."""

    contig_id: int = 0
    length: int = 0
    cov: float = 0.0
    is_tip: int = 0

    @classmethod
    def parse(cls, line: str) -> SOAP2ContigHead:
        match = _SOAP2_HEAD.match(line)
        if match is None:
            raise FastaFormatError(f"not a contig header: {line!r}")
        try:
            cov = float(match.group(3))
        except ValueError:
            raise FastaFormatError(f"bad coverage in header: {line!r}") from None
        return cls(int(match.group(1)), int(match.group(2)), cov, int(match.group(4)))

    def head(self) -> str:
        return f">{self.contig_id} length {self.length} cvg_{self.cov:g}_tip_{self.is_tip}"


class GapType(IntEnum):
    """How a scaffold gap was found."""

    UNKNOW = 0
    PE = 1
    PE_TRUNK = 2
    TRUNK = 3


_GAP_HEAD = re.compile(
    r">([+-]?\d+)_([+-]?\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s+([+-]?\d+)"
)


@dataclass
class ScaffSplitGapHead:
    """Header of a gap cut out of a scaffold."""

    scaff_id: int = 0
    gap_index: int = 0
    prev_base_contig: int = 0
    next_base_contig: int = 0
    prev_contig: int = 0
    next_contig: int = 0
    gap_type: GapType = GapType.UNKNOW

    @classmethod
    def parse(cls, line: str) -> ScaffSplitGapHead:
        match = _GAP_HEAD.match(line)
        if match is None:
            raise FastaFormatError(f"not a gap header: {line!r}")
        numbers = [int(group) for group in match.groups()]
        try:
            gap_type = GapType(numbers[6])
        except ValueError:
            raise FastaFormatError(f"unknown gap type in header: {line!r}") from None
        return cls(*numbers[:6], gap_type)

    def head(self) -> str:
        return (
            f">{self.scaff_id}_{self.gap_index}\t{self.prev_base_contig}"
            f"\t{self.next_base_contig}\t{self.prev_contig}\t{self.next_contig}"
            f"\t{int(self.gap_type)}"
        )


@dataclass
class Fasta:
    """One record: a parsed header and its sequence."""

    head: Any
    seq: Seq = field(default_factory=Seq)


def is_head(line: str) -> bool:
    """True for a header line."""
    return line.startswith(">")


def _lines(stream: IO[str]) -> Iterator[str]:
    # A final line without a newline is not part of the input.
    for line in stream:
        if line.endswith("\n"):
            yield line[:-1]


def iter_fasta(stream: IO[str], head_type: type = NormalHead) -> Iterator[Fasta]:
    """Yield records one by one.

    Lines before the first header are skipped. Reading stops at a header
    that has no sequence lines after it.
    """
    head = None
    parts: list[str] | None = None
    for line in _lines(stream):
        if is_head(line):
            if head is not None:
                if parts is None:
                    return
                yield Fasta(head, Seq("".join(parts)))
            head = head_type.parse(line)
            parts = None
        elif head is not None:
            if parts is None:
                parts = []
            parts.append(line)
    if head is not None and parts is not None:
        yield Fasta(head, Seq("".join(parts)))


def read_all_fasta(stream: IO[str], head_type: type = NormalHead) -> list[Fasta]:
    """Read every record; headers without sequence are dropped.

    Raises ``FastaFormatError`` when sequence appears before any header.
    """
    records: list[Fasta] = []
    head = None
    parts: list[str] | None = None
    for line in _lines(stream):
        if is_head(line):
            if head is not None and parts is not None:
                records.append(Fasta(head, Seq("".join(parts))))
            head = head_type.parse(line)
            parts = None
        else:
            if head is None:
                raise FastaFormatError("sequence line before any header")
            if parts is None:
                parts = []
            parts.append(line)
    if head is not None and parts is not None:
        records.append(Fasta(head, Seq("".join(parts))))
    return records