"""Nucleotide sequences and sequence helpers."""

from __future__ import annotations

from dataclasses import dataclass

_COMPLEMENT = str.maketrans("AaGgCcTt", "TTCCGGAA")
_PAIRS = {"A": "T", "T": "A", "G": "C", "C": "G"}
_VALID = frozenset("aAgGtTcCnN")


def block_seq(atcgs: str, width: int = -1) -> str:
    """Wrap a sequence into lines of ``width`` characters.

    A width below one returns the sequence unchanged; otherwise every line,
    the last one included, ends with a newline.
    """
    if width < 1:
        return atcgs
    return "".join(atcgs[pos:pos + width] + "\n" for pos in range(0, len(atcgs), width))


def reverse_complement(line: str) -> str:
    """Reverse complement; output bases are upper case, other characters kept."""
    return line[::-1].translate(_COMPLEMENT)


def is_palindrome(line: str) -> bool:
    """True when the sequence equals its own reverse complement.

    Odd-length sequences are never palindromic; only upper-case A, C, G and
    T in the first half are checked.
    """
    if len(line) % 2 == 1:
        return False
    half = len(line) // 2
    for left, right in zip(line[:half], reversed(line)):
        mate = _PAIRS.get(left)
        if mate is not None and right != mate:
            return False
    return True


def is_valid(line: str) -> bool:
    """True when the sequence holds only A, C, G, T and N in either case."""
    return all(char in _VALID for char in line)


def only_n(line: str) -> bool:
    """True when every base is N."""
    return all(char in "nN" for char in line)


def has_n(line: str) -> bool:
    """True when any base is N."""
    return any(char in "nN" for char in line)


@dataclass
class Seq:
    """A sequence assembled from one or more lines."""

    atcgs: str = ""

    def text(self, width: int = -1) -> str:
        """The sequence, wrapped to ``width`` when positive."""
        return block_seq(self.atcgs, width)

    def reverse_complement(self, width: int = -1) -> str:
        """The reverse complement, wrapped to ``width`` when positive."""
        return block_seq(reverse_complement(self.atcgs), width)

    def add_part(self, line: str) -> None:
        """Append a piece of sequence."""
        self.atcgs += line

    def reset(self) -> None:
        """Clear the sequence."""
        self.atcgs = ""

    def __len__(self) -> int:
        return len(self.atcgs)