"""Collections of integer ranges: merged unions and non-repeating picks."""

from __future__ import annotations


class SubSets:
    """A set of closed ranges kept merged wherever they overlap."""

    def __init__(self) -> None:
        self._ranges: dict[int, int] = {}

    def push(self, start: int, end: int) -> None:
        """Add ``[start, end]`` and merge it with any overlapping range."""
        if start > end:
            raise ValueError(f"range start {start} is after its end {end}")
        if self._ranges.get(start, end) <= end:
            self._ranges[start] = end
        merged: list[list[int]] = []
        for first, last in sorted(self._ranges.items()):
            if merged and merged[-1][1] >= first:
                merged[-1][1] = max(merged[-1][1], last)
            else:
                merged.append([first, last])
        self._ranges = {first: last for first, last in merged}

    def pop(self) -> tuple[int, int] | None:
        """Remove and return the range with the smallest start, or ``None``."""
        if not self._ranges:
            return None
        start = min(self._ranges)
        return start, self._ranges.pop(start)

    def __len__(self) -> int:
        return len(self._ranges)


class NonRepeatFilter:
    """Keeps up to ``max_count`` ranges, refusing ones that repeat a kept range.

    A new range is refused when its overlap with a kept range covers at
    least ``overlap_factor`` of that kept range.
    """

    def __init__(self, max_count: int, overlap_factor: float) -> None:
        self.max_count = max_count
        self.overlap_factor = overlap_factor
        self._ranges: dict[int, int] = {}

    def _repeats(self, start: int, end: int) -> bool:
        for first, last in self._ranges.items():
            total = last - first + 1
            overlap = last - start + 1 if first < start else end - first + 1
            if overlap > 0 and overlap / total >= self.overlap_factor:
                return True
        return False

    def push(self, start: int, end: int) -> None:
        """Keep ``[start, end]`` unless full or it repeats a kept range."""
        if len(self._ranges) >= self.max_count or self._repeats(start, end):
            return
        self._ranges[start] = end

    def pop(self) -> tuple[int, int] | None:
        """Remove and return the range with the smallest start, or ``None``."""
        if not self._ranges:
            return None
        start = min(self._ranges)
        return start, self._ranges.pop(start)

    def __len__(self) -> int:
        return len(self._ranges)