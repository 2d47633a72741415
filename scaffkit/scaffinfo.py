"""Scaffold layouts: contigs with orientation, gaps and positions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import IO, ClassVar

from scaffkit.stringtools import split

_SCAFF_HEAD = re.compile(r">scaffold\s*([+-]?\d+)")


@dataclass
class ContigDetail:
    """One contig placed in a scaffold, with optional ``KEY=VALUE`` extras."""

    ONT_FILL: ClassVar[str] = "ONT_FILL"
    GAP_TYPE: ClassVar[str] = "GAP_TYPE"
    PREV_N: ClassVar[str] = "PREV_N"

    contig_id: int = 0
    orientation: bool = True
    gap_size: int = 0
    contig_len: int = 0
    start_pos: int = 0
    scaff_index: int = 0
    scaff_id: int = 0
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, line: str) -> ContigDetail:
        """Parse ``id strand gap len start index scaff [KEY=VALUE ...]``.

        Raises ``ValueError`` for missing columns or a malformed extra.
        """
        fields = line.split()
        if len(fields) < 7:
            raise ValueError(f"contig line has too few columns: {line!r}")
        detail = cls(
            contig_id=int(fields[0]),
            orientation=fields[1][0] == "+",
            gap_size=int(fields[2]),
            contig_len=int(fields[3]),
            start_pos=int(fields[4]),
            scaff_index=int(fields[5]),
            scaff_id=int(fields[6]),
        )
        for item in fields[7:]:
            parts = split(item, "=")
            if len(parts) != 2:
                raise ValueError(f"extra field must be KEY=VALUE: {item!r}")
            detail.extra[parts[0]] = parts[1]
        return detail

    def __str__(self) -> str:
        columns = [
            str(self.contig_id),
            "+" if self.orientation else "-",
            str(self.gap_size),
            str(self.contig_len),
            str(self.start_pos),
            str(self.scaff_index),
            str(self.scaff_id),
        ]
        columns.extend(f"{key}={value}" for key, value in sorted(self.extra.items()))
        return "\t".join(columns)


@dataclass
class ScaffInfo:
    """A scaffold: its id and its contigs in order."""

    scaff_id: int = 0
    contigs: list[ContigDetail] = field(default_factory=list)

    def print_scaff(self, stream: IO[str]) -> None:
        """Write the scaffold header and one line per contig."""
        stream.write(f">scaffold {self.scaff_id}\n")
        for contig in self.contigs:
            stream.write(f"{contig}\n")

    def format_index(self) -> None:
        """Number the contigs from 1 and stamp them with this scaffold's id."""
        for index, contig in enumerate(self.contigs, start=1):
            contig.scaff_index = index
            contig.scaff_id = self.scaff_id

    def format_start_pos(self) -> None:
        """Recompute 1-based start positions from lengths, gaps and ``PREV_N``."""
        start_pos = 1
        for contig in self.contigs:
            if ContigDetail.PREV_N in contig.extra:
                start_pos += int(contig.extra[ContigDetail.PREV_N])
            contig.start_pos = start_pos
            start_pos += contig.contig_len + contig.gap_size
            contig.scaff_id = self.scaff_id


@dataclass
class ScaffInfoHelper:
    """All scaffolds of a layout file and where each contig sits."""

    all_scaff: dict[int, ScaffInfo] = field(default_factory=dict)
    contig_index: dict[int, tuple[int, int]] = field(default_factory=dict)

    def print_all_scaff(self, stream: IO[str]) -> None:
        """Write every scaffold in order of id."""
        for scaff_id in sorted(self.all_scaff):
            self.all_scaff[scaff_id].print_scaff(stream)

    def load_all_scaff(self, stream: IO[str]) -> None:
        """Read scaffolds; a final line without a newline is ignored.

        Raises ``ValueError`` for a malformed header or a contig line
        before any header.
        """
        current: int | None = None
        for raw in stream:
            if not raw.endswith("\n"):
                break
            line = raw[:-1]
            if not line.strip():
                continue
            if line.startswith(">"):
                match = _SCAFF_HEAD.match(line)
                if match is None:
                    raise ValueError(f"not a scaffold header: {line!r}")
                current = int(match.group(1))
                self.all_scaff.setdefault(current, ScaffInfo(current)).scaff_id = current
                continue
            if current is None:
                raise ValueError("contig line before any scaffold header")
            contig = ContigDetail.parse(line)
            contigs = self.all_scaff[current].contigs
            contigs.append(contig)
            self.contig_index[contig.contig_id] = (current, len(contigs) - 1)

    def get_contig(self, contig_id: int) -> ContigDetail:
        """The placement of ``contig_id``; ``KeyError`` when unknown."""
        try:
            scaff_id, index = self.contig_index[contig_id]
            return self.all_scaff[scaff_id].contigs[index]
        except (KeyError, IndexError):
            raise KeyError(f"unknown contig: {contig_id}") from None

    def format_all_index(self) -> None:
        """Renumber contigs in every scaffold."""
        for scaff in self.all_scaff.values():
            scaff.format_index()

    def format_all_start_pos(self) -> None:
        """Recompute start positions in every scaffold."""
        for scaff in self.all_scaff.values():
            scaff.format_start_pos()