"""Command-line option parsing with typed, required and optional arguments."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1
_HELP_WORDS = ("-h", "--help", "help")


class ArgType(IntEnum):
    """The kind of value an option takes."""

    BOOL = 0
    STRING = 1
    INT = 2
    LONG = 3
    FLOAT = 4
    VECTOR_STRING = 5

    @property
    def label(self) -> str:
        """Short description used in the usage text."""
        return _LABELS[self]


_LABELS = {
    ArgType.BOOL: "[ no arg ]",
    ArgType.STRING: "[ string arg ]",
    ArgType.INT: "[ int arg ]",
    ArgType.LONG: "[ long arg ]",
    ArgType.FLOAT: "[ float arg ]",
    ArgType.VECTOR_STRING: "[ vector_string arg ] ",
}


class ArgsError(Exception):
    """Raised when the command line cannot be accepted."""

    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.usage = usage


class HelpRequested(Exception):
    """Raised when help was asked for or no arguments were given."""

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage = usage


@dataclass
class _Arg:
    kind: ArgType
    name: str
    optional: bool
    explain: str
    default: str = ""
    is_set: bool = False
    value: Any = None
    items: list[str] = field(default_factory=list)


def _to_int(name: str, text: str, low: int, high: int) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ArgsError(f"invalid integer for --{name}: {text!r}")
    value = int(match.group())
    if not low <= value <= high:
        raise ArgsError(f"integer out of range for --{name}: {text!r}")
    return value


def _to_float(name: str, text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ArgsError(f"invalid number for --{name}: {text!r}")
    return float(match.group().strip())


class ArgsParser:
    """Declares options and parses a command line against them.

    Options are written ``--name value``, ``-name value`` or ``--name=value``;
    a unique prefix of a name is accepted. Unknown options are ignored.
    """

    def __init__(self) -> None:
        self._args: dict[str, _Arg] = {}

    def _add(self, arg: _Arg) -> None:
        if arg.name in self._args:
            raise ValueError(f"option --{arg.name} is already defined")
        self._args[arg.name] = arg

    def add_required(self, kind: ArgType, name: str, explain: str) -> None:
        """Declare an option that must be given."""
        self._add(_Arg(ArgType(kind), name, False, explain))

    def add_optional(self, kind: ArgType, name: str, explain: str, default: str) -> None:
        """Declare an option whose value falls back to ``default``."""
        self._add(_Arg(ArgType(kind), name, True, explain, str(default)))

    def usage(self, prog: str) -> str:
        """The usage text listing every declared option."""
        lines = [f"Usage : {prog} args "]
        for arg in self._args.values():
            line = f"\t\t--{arg.name}\t{'[optional]' if arg.optional else '[required]'}"
            line += f"\t{arg.kind.label}\t{arg.explain}"
            if arg.optional:
                line += f"\t [ default= {arg.default} ]"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def _convert(self, arg: _Arg, text: str) -> Any:
        if arg.kind is ArgType.STRING:
            return text
        if arg.kind is ArgType.INT:
            return _to_int(arg.name, text, _INT_MIN, _INT_MAX)
        if arg.kind is ArgType.LONG:
            return _to_int(arg.name, text, _LONG_MIN, _LONG_MAX)
        if arg.kind is ArgType.FLOAT:
            return _to_float(arg.name, text)
        raise ValueError(f"option --{arg.name} takes no value")

    def _resolve(self, name: str) -> _Arg | None:
        if name in self._args:
            return self._args[name]
        candidates = [arg for key, arg in self._args.items() if key.startswith(name)]
        if name and len(candidates) == 1:
            return candidates[0]
        return None

    def _assign(self, arg: _Arg, text: str) -> None:
        if arg.kind is ArgType.VECTOR_STRING:
            arg.items.append(text)
        else:
            arg.value = self._convert(arg, text)
        arg.is_set = True

    def parse(self, argv: Sequence[str] | None = None) -> dict[str, Any]:
        """Parse ``argv`` (program name first) and return values by name.

        Raises ``HelpRequested`` when no arguments or a help word come first,
        and ``ArgsError`` when a required option is missing or a value is bad.
        """
        argv = list(sys.argv if argv is None else argv)
        prog = argv[0] if argv else ""
        if len(argv) < 2 or argv[1] in _HELP_WORDS:
            raise HelpRequested(self.usage(prog))

        for arg in self._args.values():
            arg.is_set = False
            arg.value = None
            arg.items = []

        tokens = iter(argv[1:])
        for token in tokens:
            if token == "--":
                break
            if not token.startswith("-") or token == "-":
                continue
            body = token[2:] if token.startswith("--") else token[1:]
            name, has_inline, inline = body.partition("=")
            arg = self._resolve(name)
            if arg is None:
                continue
            if arg.kind is ArgType.BOOL:
                if not has_inline:
                    arg.value = True
                    arg.is_set = True
                continue
            if has_inline:
                self._assign(arg, inline)
                continue
            value = next(tokens, None)
            if value is not None:
                self._assign(arg, value)

        missing = [arg.name for arg in self._args.values() if not arg.optional and not arg.is_set]
        if missing:
            message = "\n".join(f"ERROR:  unset necessary args -- {name}" for name in missing)
            raise ArgsError(message, self.usage(prog))

        values: dict[str, Any] = {}
        for arg in self._args.values():
            if arg.kind is ArgType.VECTOR_STRING:
                values[arg.name] = list(arg.items) if arg.is_set else [arg.default]
            elif arg.kind is ArgType.BOOL:
                values[arg.name] = arg.is_set
            elif arg.is_set:
                values[arg.name] = arg.value
            else:
                values[arg.name] = self._convert(arg, arg.default)
        return values