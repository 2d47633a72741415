"""Candidate long reads spanning a gap and orderings to rank them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from scaffkit.contig_pair import PairPN
from scaffkit.paf import PafItem


@dataclass
class ONT2GapInfo:
    """A read's alignments to the two contigs flanking a gap."""

    from_: PafItem = field(default_factory=PafItem)
    to: PafItem = field(default_factory=PafItem)
    pair_info: PairPN = field(default_factory=PairPN)


def _gap(info: ONT2GapInfo) -> int:
    return info.pair_info.gap_size


def sort_more(data: list[ONT2GapInfo]) -> None:
    """Sort in place, largest gap first."""
    data.sort(key=_gap, reverse=True)


def sort_less(data: list[ONT2GapInfo]) -> None:
    """Sort in place, smallest gap first."""
    data.sort(key=_gap)


def sort_median(data: list[ONT2GapInfo]) -> None:
    """Sort in place by distance from the median gap; fewer than 3 are left alone."""
    if len(data) < 3:
        return
    gaps = sorted(_gap(info) for info in data)
    median = gaps[len(gaps) // 2]
    data.sort(key=lambda info: abs(_gap(info) - median))


def sort_modify_less(data: list[ONT2GapInfo]) -> None:
    """Sort in place by absolute gap, negative before positive on ties."""
    data.sort(key=lambda info: (abs(_gap(info)), _gap(info)))


def _log10(value: float) -> float:
    return -math.inf if value == 0 else math.log10(value)


def sort_match_score_more(
    data: list[ONT2GapInfo], max_hang: int, fa: float = 1.0, fb: float = 1.0
) -> None:
    """Sort in place, best scoring first.

    Each side scores ``fa*log10(aligned share of max_hang) +
    fb*log10(identity)``, both in percent; the two sides are summed.
    """

    def side(item: PafItem) -> float:
        aligned = item.aligned_len / max_hang * 100
        identity = item.match_len / item.aligned_len * 100
        return fa * _log10(aligned) + fb * _log10(identity)

    data.sort(key=lambda info: side(info.from_) + side(info.to), reverse=True)