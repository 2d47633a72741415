"""Frequency counting and helpers for updating counter mappings."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Freq:
    """Counts occurrences of keys."""

    data: dict[Any, int] = field(default_factory=dict)

    def touch(self, key: Hashable, num: int = 1) -> None:
        """Add ``num`` to the count of ``key``."""
        self.data[key] = self.data.get(key, 0) + num

    def get_freq(self, key: Hashable) -> int:
        """Return the count of ``key``, zero when unseen."""
        return self.data.get(key, 0)

    def __str__(self) -> str:
        return "".join(f"{key}\t{count}\n" for key, count in sorted(self.data.items()))


def incr(mapping: MutableMapping, key: Hashable, value: Any) -> None:
    """Add ``value`` to ``mapping[key]``, inserting it when absent."""
    if key in mapping:
        mapping[key] += value
    else:
        mapping[key] = value


def update_as_biggest(mapping: MutableMapping, key: Hashable, value: Any) -> None:
    """Keep the largest value seen for ``key``."""
    if key not in mapping or mapping[key] < value:
        mapping[key] = value


def update_as_smallest(mapping: MutableMapping, key: Hashable, value: Any) -> None:
    """Keep the smallest value seen for ``key``."""
    if key not in mapping or mapping[key] > value:
        mapping[key] = value


def middle_valid(freq: Mapping[Any, int], fac: float) -> tuple[int, int]:
    """Return ``(smallest, biggest)`` of the counts covering ``fac`` of the total.

    Counts are taken from largest to smallest until their sum reaches
    ``fac`` of the total; the last count taken is the smallest.
    """
    if not 0.0 <= fac <= 1.0:
        raise ValueError("fac must lie between 0 and 1")
    if not freq:
        raise ValueError("frequency table is empty")
    counts = sorted(freq.values(), reverse=True)
    target = int(sum(counts) * fac)
    biggest = smallest = counts[0]
    running = 0
    for count in counts:
        running += count
        if running >= target:
            smallest = count
            break
    return smallest, biggest