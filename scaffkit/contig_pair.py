"""Relative orientation and distance of two contigs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from scaffkit.paf import PafItem
from scaffkit.scaffinfo import ContigDetail


class OOType(IntEnum):
    """Orientation of a contig pair; ``P`` marks a reversed contig."""

    UNKNOW = 0
    C1_2_C2 = 1
    C1_2_C2P = 2
    C1P_2_C2 = 3
    C1P_2_C2P = 4


_FROM_STRANDS = {
    ("+", "+"): OOType.C1_2_C2,
    ("+", "-"): OOType.C1_2_C2P,
    ("-", "-"): OOType.C1P_2_C2P,
    ("-", "+"): OOType.C1P_2_C2,
}

# Second contig placed before the first on the target.
_FROM_STRANDS_BEHIND = {
    ("+", "+"): OOType.C1P_2_C2P,
    ("+", "-"): OOType.C1P_2_C2,
    ("-", "-"): OOType.C1_2_C2,
    ("-", "+"): OOType.C1_2_C2P,
}


def get_cr(oo_type: OOType) -> OOType:
    """The orientation seen when the two contigs swap roles."""
    if oo_type is OOType.C1_2_C2:
        return OOType.C1P_2_C2P
    if oo_type is OOType.C1P_2_C2P:
        return OOType.C1_2_C2
    return oo_type


def _strand(orientation: bool) -> str:
    return "+" if orientation else "-"


@dataclass(order=True)
class PairPN:
    """Two contigs, smaller id first, with their orientation and gap."""

    c1: int = 0
    c2: int = 0
    type: OOType = OOType.UNKNOW
    gap_size: int = 0

    @classmethod
    def from_ref(cls, c1: int, t1: str, c2: int, t2: str, gap: int) -> PairPN:
        """Pair from two contig ids and strands ``+``/``-``.

        Raises ``ValueError`` for equal ids or an unknown strand.
        """
        if c1 == c2:
            raise ValueError(f"a pair needs two different contigs, got {c1} twice")
        try:
            oo_type = _FROM_STRANDS[(t1, t2)]
        except KeyError:
            raise ValueError(f"strands must be '+' or '-', got {t1!r} and {t2!r}") from None
        if c1 > c2:
            c1, c2 = c2, c1
            oo_type = get_cr(oo_type)
        return cls(c1, c2, oo_type, gap)

    @classmethod
    def from_scaff_info(cls, prev: ContigDetail, following: ContigDetail) -> PairPN:
        """Pair from two neighbouring contigs of a scaffold."""
        return cls.from_ref(
            prev.contig_id,
            _strand(prev.orientation),
            following.contig_id,
            _strand(following.orientation),
            prev.gap_size,
        )

    @classmethod
    def from_paf(cls, first: PafItem, second: PafItem) -> PairPN:
        """Pair from two contigs aligned to the same sequence.

        Query names are the contig ids. Raises ``ValueError`` when the
        alignments are on different sequences.
        """
        c1 = int(first.query_name)
        c2 = int(second.query_name)
        if c1 > c2:
            c1, c2 = c2, c1
            first, second = second, first
        if first.target_name != second.target_name:
            raise ValueError("alignments are on different target sequences")
        one = first.flatten()
        two = second.flatten()
        strands = (one.query_char, two.query_char)
        if one.target_start < two.target_start and one.target_end < two.target_end:
            gap = two.target_start - one.target_end - 1
            oo_type = _FROM_STRANDS.get(strands, OOType.UNKNOW)
        elif one.target_start > two.target_start and one.target_end > two.target_end:
            gap = one.target_start - two.target_end - 1
            oo_type = _FROM_STRANDS_BEHIND.get(strands, OOType.UNKNOW)
        else:
            gap = 0
            oo_type = OOType.UNKNOW
        return cls(c1, c2, oo_type, gap)