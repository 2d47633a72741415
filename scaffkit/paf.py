"""Pairwise alignment (PAF) records."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from scaffkit.align_result import ExtraInfo, MatchDetail, MDData

_MIN_COLUMNS = 12


@dataclass
class PafItem:
    """One alignment line.

    The first four columns describe ``target`` and columns six to nine
    describe ``query``; ``query_char`` is the relative strand.
    """

    query_name: str = ""
    query_len: int = 0
    query_start: int = 0
    query_end: int = 0
    query_char: str = "+"
    target_name: str = ""
    target_len: int = 0
    target_start: int = 0
    target_end: int = 0
    match_len: int = 0
    aligned_len: int = 0
    quality: int = 0
    details: MatchDetail = field(default_factory=MatchDetail)
    md_data: MDData = field(default_factory=MDData)

    @classmethod
    def parse(cls, line: str) -> PafItem:
        """Parse a tab- or blank-separated PAF line.

        ``cg`` and ``MD`` optional fields are decoded. Raises ``ValueError``
        for too few columns or a malformed optional field.
        """
        fields = line.split()
        if len(fields) < _MIN_COLUMNS:
            raise ValueError(f"PAF line has too few columns: {line!r}")
        item = cls(
            target_name=fields[0],
            target_len=int(fields[1]),
            target_start=int(fields[2]),
            target_end=int(fields[3]),
            query_char=fields[4][0],
            query_name=fields[5],
            query_len=int(fields[6]),
            query_start=int(fields[7]),
            query_end=int(fields[8]),
            match_len=int(fields[9]),
            aligned_len=int(fields[10]),
            quality=int(fields[11]),
        )
        for extra in fields[_MIN_COLUMNS:]:
            info = ExtraInfo.parse(extra)
            if info.name == "cg":
                item.details = MatchDetail.from_cigar(info.content)
            if info.name == "MD":
                item.md_data = MDData.parse(info.content)
        return item

    def flatten(self) -> PafItem:
        """A copy with the whole query projected onto the target."""
        ret = copy.deepcopy(self)
        ret.query_start = 0
        ret.query_end = self.query_len - 1
        if self.query_char == "+":
            ret.target_start = self.target_start - (self.query_start - 1)
            ret.target_end = self.target_end + (self.query_len - self.query_end)
        else:
            ret.target_end = self.target_end + (self.query_start - 1)
            ret.target_start = self.target_start - (self.query_len - self.query_end)
        return ret

    def idy(self) -> float:
        """Fraction of aligned bases that match."""
        return self.match_len / self.aligned_len