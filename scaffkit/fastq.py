"""FASTQ records, header formats and readers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import islice
from typing import IO, Any

from scaffkit.seq import Seq
from scaffkit.stringtools import is_num, split


class FastqFormatError(ValueError):
    """Raised for malformed FASTQ input."""


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
        if len(line) < 2 or not line.startswith("@"):
            raise FastqFormatError(f"not a FASTQ header: {line!r}")
        body = line[1:]
        cut = next((pos for pos, char in enumerate(body) if char in " \t"), len(body))
        return cls(body[:cut], body[cut:])

    def head(self) -> str:
        return "@" + self.id + self.desc


class ReadType(IntEnum):
    """Which parts a stLFR read header carries."""

    UNKNOW = 0
    READNAME_BARCODESTR = 1
    READNAME_BARCODESTR_INDEX = 2
    READNAME_BARCODESTR_INDEX_BARCODENUM = 3


@dataclass
class StLFRHeader:
    """Header of a barcoded read: ``@NAME#BARCODE[/INDEX][<blank>BARCODE_NUM]``."""

    read_type: ReadType = ReadType.UNKNOW
    read_index: int = 0
    barcode_num: int = 0
    barcode_str: str = ""
    read_name: str = ""

    @classmethod
    def parse(cls, line: str) -> StLFRHeader:
        items = split(line, "@")
        if not items:
            raise FastqFormatError(f"empty read header: {line!r}")
        fields = split(items[0])
        if not fields:
            raise FastqFormatError(f"empty read header: {line!r}")
        name_barcode = split(fields[0], "#")
        if len(name_barcode) != 2:
            raise FastqFormatError(f"read header lacks a barcode: {line!r}")
        barcode_parts = split(name_barcode[1], "/")
        if not barcode_parts:
            raise FastqFormatError(f"read header lacks a barcode: {line!r}")
        header = cls(
            read_type=ReadType.READNAME_BARCODESTR,
            read_name=name_barcode[0],
            barcode_str=barcode_parts[0],
        )
        if len(barcode_parts) == 2 and is_num(barcode_parts[1]):
            header.read_index = int(barcode_parts[1])
            header.read_type = ReadType.READNAME_BARCODESTR_INDEX
        if len(fields) > 1 and is_num(fields[1]):
            header.barcode_num = int(fields[1])
            header.read_type = ReadType.READNAME_BARCODESTR_INDEX_BARCODENUM
        return header

    def head(self) -> str:
        if self.read_type is ReadType.UNKNOW:
            raise FastqFormatError("header has not been parsed")
        text = f"@{self.read_name}#{self.barcode_str}"
        if self.read_type is ReadType.READNAME_BARCODESTR_INDEX:
            text += f"/{self.read_index}"
        elif self.read_type is ReadType.READNAME_BARCODESTR_INDEX_BARCODENUM:
            text += f"/{self.read_index}\t{self.barcode_num}"
        return text


@dataclass
class Fastq:
    """One record: a parsed header, its sequence and its quality string."""

    head: Any
    seq: Seq = field(default_factory=Seq)
    quality: Seq = field(default_factory=Seq)

    def quality_filled(self) -> bool:
        """True when the quality string covers the whole sequence.

        Raises ``FastqFormatError`` when the quality is longer than the sequence.
        """
        if len(self.quality) > len(self.seq):
            raise FastqFormatError("quality string is longer than the sequence")
        return len(self.quality) == len(self.seq)


def _is_head(line: str) -> bool:
    return line.startswith("@")


def _is_plus(line: str) -> bool:
    return line.startswith("+")


def _lines(stream: IO[str]) -> Iterator[str]:
    # A final line without a newline is not part of the input.
    for line in stream:
        if line.endswith("\n"):
            yield line[:-1]


def iter_fastq(stream: IO[str], head_type: type = NormalHead) -> Iterator[Fastq]:
    """Yield records of four lines each; an incomplete last record is dropped.

    Raises ``FastqFormatError`` when a header or separator line is malformed.
    """
    lines = _lines(stream)
    while True:
        chunk = list(islice(lines, 4))
        if not chunk:
            return
        if not _is_head(chunk[0]):
            raise FastqFormatError(f"fastq format invalid: expected header, got {chunk[0]!r}")
        if len(chunk) >= 3 and not _is_plus(chunk[2]):
            raise FastqFormatError(f"fastq format invalid: expected '+', got {chunk[2]!r}")
        if len(chunk) < 4:
            return
        yield Fastq(head_type.parse(chunk[0]), Seq(chunk[1]), Seq(chunk[3]))


def read_all_fastq(stream: IO[str], head_type: type = NormalHead) -> list[Fastq]:
    """Read every complete record."""
    return list(iter_fastq(stream, head_type))