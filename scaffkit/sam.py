"""SAM header and alignment lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

from scaffkit.align_result import Cigar, MatchDetail
from scaffkit.stringtools import split


class HeadType(IntEnum):
    """Kind of a SAM header line."""

    UNKNOW = -1
    HEAD_LINE = 0
    SEQUENCE = 1
    READ_GROUP = 2
    PROGRAM = 3
    ONE_LINE_COMMENT = 4


_HEAD_TAGS = {
    "HD": HeadType.HEAD_LINE,
    "SQ": HeadType.SEQUENCE,
    "RG": HeadType.READ_GROUP,
    "PG": HeadType.PROGRAM,
    "CO": HeadType.ONE_LINE_COMMENT,
}


@dataclass
class SamHead:
    """A parsed header line; ``name`` and ``length`` are set for ``@SQ`` lines."""

    type: HeadType = HeadType.UNKNOW
    name: str = ""
    length: int = 0


class SamFlag(IntFlag):
    """Bits of the SAM FLAG field."""

    PAIRED = 0x1
    PROPER_PAIR = 0x2
    UNMAPPED = 0x4
    MATE_UNMAPPED = 0x8
    REVERSE = 0x10
    MATE_REVERSE = 0x20
    READ1 = 0x40
    READ2 = 0x80
    SECONDARY = 0x100
    QC_FAIL = 0x200
    DUPLICATE = 0x400
    SUPPLEMENTARY = 0x800


_MD_PREFIX = "MD:Z:"


@dataclass
class SamMDData:
    """Number of matching bases counted from an ``MD:Z:`` field."""

    total_same: int = 0

    @classmethod
    def parse(cls, text: str) -> SamMDData:
        """Sum the match runs of an ``MD:Z:...`` field.

        Raises ``ValueError`` when the text does not start with ``MD:Z:``.
        """
        if not text.startswith(_MD_PREFIX):
            raise ValueError(f"not an MD field: {text!r}")
        total = 0
        digits: list[str] = []
        for char in text[len(_MD_PREFIX):] + "\0":
            if char.isascii() and char.isdigit():
                digits.append(char)
            elif digits:
                total += int("".join(digits))
                digits.clear()
        return cls(total)

    def idy(self, total_match: int) -> float:
        """Fraction of ``total_match`` bases that are identical."""
        return self.total_same / total_match

    def __bool__(self) -> bool:
        return self.total_same > 0


@dataclass
class MatchData:
    """One alignment line of a SAM file."""

    read_name: str = ""
    flags: int = 0
    ref_name: str = ""
    first_match_position: int = 0
    quality: int = 0
    detail: MatchDetail = field(default_factory=MatchDetail)
    read_len: int = -1
    next_ref_name: str = ""
    next_ref_pos: int = 0
    insert_size: int = 0
    xa: bool = False
    md: bool = False
    md_data: SamMDData = field(default_factory=SamMDData)

    def _has(self, flag: SamFlag) -> bool:
        return bool(self.flags & flag)

    def _first_aligned(self):
        return next(
            (info for info in self.detail.infos if info.type in (Cigar.EQUAL, Cigar.M)),
            None,
        )

    def calc_left1_position(self) -> int:
        """Reference position the first read base would have; 0 without a match."""
        info = self._first_aligned()
        if info is None:
            return 0
        return info.start_position_on_ref - info.start_position_on_read

    def calc_read1_position(self) -> int:
        """Reference position of the read's first base, honouring the strand."""
        info = self._first_aligned()
        if info is None:
            return 0
        if self.is_reverse_complement():
            return info.start_position_on_ref + self.read_len - info.start_position_on_read - 1
        return info.start_position_on_ref - info.start_position_on_read

    def is_p(self) -> bool:
        """First read of a pair."""
        return self._has(SamFlag.READ1)

    def is_e(self) -> bool:
        """Second read of a pair."""
        return self._has(SamFlag.READ2)

    def is_primary_match(self) -> bool:
        return not self._has(SamFlag.SUPPLEMENTARY) and not self._has(SamFlag.SECONDARY)

    def is_pcr_duplicate(self) -> bool:
        return self._has(SamFlag.DUPLICATE)

    def is_pe_in_same_ref(self) -> bool:
        return self.next_ref_name == "="

    def is_pe_both_match(self) -> bool:
        return self.next_ref_name != "*"

    def is_pe_both_properly_match(self) -> bool:
        return self._has(SamFlag.PROPER_PAIR)

    def is_supplementary_match(self) -> bool:
        return self._has(SamFlag.SUPPLEMENTARY)

    def is_secondary_match(self) -> bool:
        return self._has(SamFlag.SECONDARY) and not self._has(SamFlag.SUPPLEMENTARY)

    def valid(self) -> bool:
        """True once an alignment has been parsed into this record."""
        return bool(self.detail.infos)

    def unmap(self) -> bool:
        return self._has(SamFlag.UNMAPPED)

    def other_unmap(self) -> bool:
        return self._has(SamFlag.MATE_UNMAPPED)

    def is_reverse_complement(self) -> bool:
        return self._has(SamFlag.REVERSE)

    def first_match_in_ref_no_reverse(self) -> int:
        """First matched reference position as if the read were forward; -1 if none."""
        if not self.is_reverse_complement():
            return self.first_match_position
        for info in self.detail.infos:
            if info.type == Cigar.M:
                return info.start_position_on_ref + self.read_len - info.start_position_on_read - 1
        return -1

    def total_result_len(self) -> int:
        return self.detail.total_result_len()

    def total_match_len(self) -> int:
        return self.detail.total_match_len()

    def total_in_len(self) -> int:
        return self.detail.total_in_len()

    def total_del_len(self) -> int:
        return self.detail.total_del_len()

    def total_clip_len(self) -> int:
        return self.detail.total_clip_len()

    def total_indel_len(self) -> int:
        return self.detail.total_indel_len()


def is_header_line(line: str) -> bool:
    """True for a header line; an empty line is an error."""
    if not line:
        raise ValueError("empty SAM line")
    return line[0] == "@"


def parse_head(line: str) -> SamHead:
    """Parse a header line such as ``@SQ\\tSN:chr1\\tLN:1000``."""
    tokens = line[1:].split() if line.startswith("@") else line.split()
    if not tokens:
        return SamHead()
    head = SamHead(_HEAD_TAGS.get(tokens[0], HeadType.UNKNOW))
    if head.type is HeadType.SEQUENCE:
        for token in tokens[1:]:
            parts = split(token, ":")
            if len(parts) < 2:
                continue
            if parts[0] == "SN":
                head.name = parts[1]
            elif parts[0] == "LN":
                head.length = int(parts[1])
    return head


def parse_match_data(line: str) -> MatchData:
    """Parse an alignment line.

    The first six columns are required; missing mate columns default to
    empty or zero. Raises ``ValueError`` for a malformed line.
    """
    fields = line.split()
    if len(fields) < 6:
        raise ValueError(f"SAM line has too few columns: {line!r}")
    data = MatchData(
        read_name=fields[0],
        flags=int(fields[1]),
        ref_name=fields[2],
        first_match_position=int(fields[3]),
        quality=int(fields[4]),
    )
    cigar = fields[5]
    if len(fields) > 6:
        data.next_ref_name = fields[6]
    if len(fields) > 7:
        data.next_ref_pos = int(fields[7])
    if len(fields) > 8:
        data.insert_size = int(fields[8])
    for extra in fields[9:]:
        if extra.startswith("MD"):
            try:
                data.md_data = SamMDData.parse(extra)
            except ValueError:
                data.md_data = SamMDData()
            data.md = True
        if extra.startswith("XA"):
            data.xa = True
    data.detail = MatchDetail.from_cigar(cigar, data.first_match_position)
    data.read_len = data.detail.read_len
    return data