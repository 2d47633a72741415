"""Reading paired-end alignments from a SAM stream, one read pair at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO

from scaffkit.sam import MatchData, is_header_line, parse_match_data


class PairedSamParser:
    """Groups consecutive alignment lines sharing a read name into pairs.

    Reads of one pair must share a name and follow one another in the file.
    """

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._cache: list[MatchData] = []
        self._eof = False

    def _next_line(self) -> str | None:
        if self._eof:
            return None
        line = self._stream.readline()
        if not line:
            self._eof = True
            return None
        return line.rstrip("\r\n")

    def current_pair(self) -> tuple[MatchData, MatchData]:
        """The primary first and second read of the next group.

        A group with a single record yields two invalid records; a read
        with no primary alignment on one side yields an invalid record there.
        """
        following: list[MatchData] = []
        while (line := self._next_line()) is not None:
            if not line or is_header_line(line):
                continue
            record = parse_match_data(line)
            if not self._cache or record.read_name == self._cache[0].read_name:
                self._cache.append(record)
                continue
            following.append(record)
            break

        first = MatchData()
        second = MatchData()
        if len(self._cache) >= 2:
            for record in self._cache:
                if record.is_p() and record.is_primary_match():
                    first = record
                if record.is_e() and record.is_primary_match():
                    second = record
        self._cache = following
        return first, second

    def eof(self) -> bool:
        """True once the stream has been read to its end."""
        return self._eof

    def __iter__(self) -> Iterator[tuple[MatchData, MatchData]]:
        while not self._eof:
            yield self.current_pair()