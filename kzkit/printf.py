"""Formatted printing with the field semantics of a compact embedded printf.

Integers are taken modulo the width of their C type on a 32-bit target
(``int``, ``long`` and pointers are 32 bits, ``long long`` and ``intmax_t``
are 64 bits).  Floating-point conversions use the bounded fixed-point and
approximate exponential algorithms from :mod:`kzkit.numfmt`, so ``%g`` keeps
its trailing zeros.
"""

from __future__ import annotations

import re
from typing import Any, Iterator

from kzkit.numfmt import (
    FormatFlags,
    format_exponential,
    format_fixed,
    format_integer,
)

__all__ = ["FormatError", "sprintf", "snprintf"]

_LONG_BITS = 32
_LONG_LONG_BITS = 64
_POINTER_BITS = 32

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)"
    r"(?P<width>\d+|\*)?"
    r"(?:(?P<dot>\.)(?P<precision>\d+|\*)?)?"
    r"(?P<length>hh|h|ll|l|t|j|z)?"
    r"(?P<conv>.)?",
    re.DOTALL,
)

_FLAG_CHARS = {
    "0": FormatFlags.ZEROPAD,
    "-": FormatFlags.LEFT,
    "+": FormatFlags.PLUS,
    " ": FormatFlags.SPACE,
    "#": FormatFlags.HASH,
}

_LENGTH_FLAGS = {
    "l": FormatFlags.LONG,
    "ll": FormatFlags.LONG | FormatFlags.LONG_LONG,
    "h": FormatFlags.SHORT,
    "hh": FormatFlags.SHORT | FormatFlags.CHAR,
    "t": FormatFlags.LONG,
    "j": FormatFlags.LONG_LONG,
    "z": FormatFlags.LONG,
}

_INTEGER_CONVERSIONS = "diuxXob"


class FormatError(ValueError):
    """Raised when a format string and its arguments do not fit together."""


def _without(flags: FormatFlags, flag: FormatFlags) -> FormatFlags:
    return FormatFlags(int(flags) & ~int(flag))


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _take(args: Iterator[Any], what: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for {what}") from None


def _int_arg(args: Iterator[Any], what: str) -> int:
    value = _take(args, what)
    if not isinstance(value, int):
        raise FormatError(f"{what} needs an integer, got {type(value).__name__}")
    return value


def _float_arg(args: Iterator[Any], what: str) -> float:
    value = _take(args, what)
    if not isinstance(value, (int, float)):
        raise FormatError(f"{what} needs a number, got {type(value).__name__}")
    return float(value)


def _integer_bits(flags: FormatFlags) -> int:
    if flags & FormatFlags.LONG_LONG:
        return _LONG_LONG_BITS
    if flags & FormatFlags.LONG:
        return _LONG_BITS
    if flags & FormatFlags.CHAR:
        return 8
    if flags & FormatFlags.SHORT:
        return 16
    return 32


def _pad(text: str, width: int, flags: FormatFlags) -> str:
    if flags & FormatFlags.LEFT:
        return text.ljust(width)
    return text.rjust(width)


def _convert_integer(
    conv: str, args: Iterator[Any], precision: int, width: int, flags: FormatFlags
) -> str:
    if conv in "xX":
        base = 16
    elif conv == "o":
        base = 8
    elif conv == "b":
        base = 2
    else:
        base = 10
        flags = _without(flags, FormatFlags.HASH)
    if conv == "X":
        flags |= FormatFlags.UPPERCASE
    if conv not in "di":
        flags = _without(flags, FormatFlags.PLUS | FormatFlags.SPACE)
    if flags & FormatFlags.PRECISION:
        flags = _without(flags, FormatFlags.ZEROPAD)

    signed = conv in "di"
    value = _wrap(_int_arg(args, f"%{conv}"), _integer_bits(flags), signed)
    return format_integer(abs(value), value < 0, base, precision, width, flags)


def _convert(match: re.Match[str], args: Iterator[Any]) -> str:
    conv = match["conv"]
    if conv is None:
        raise FormatError("format string ends inside a conversion specification")

    flags = FormatFlags(0)
    for char in match["flags"]:
        flags |= _FLAG_CHARS[char]

    width = 0
    if match["width"] == "*":
        requested = _wrap(_int_arg(args, "'*' width"), 32, True)
        if requested < 0:
            flags |= FormatFlags.LEFT
            width = -requested
        else:
            width = requested
    elif match["width"]:
        width = int(match["width"])

    precision = 0
    if match["dot"]:
        flags |= FormatFlags.PRECISION
        if match["precision"] == "*":
            requested = _wrap(_int_arg(args, "'*' precision"), 32, True)
            precision = requested if requested > 0 else 0
        elif match["precision"]:
            precision = int(match["precision"])

    if match["length"]:
        flags |= _LENGTH_FLAGS[match["length"]]

    if conv in _INTEGER_CONVERSIONS:
        return _convert_integer(conv, args, precision, width, flags)

    if conv in "fF":
        if conv == "F":
            flags |= FormatFlags.UPPERCASE
        return format_fixed(_float_arg(args, f"%{conv}"), precision, width, flags)

    if conv in "eEgG":
        if conv in "gG":
            flags |= FormatFlags.ADAPT_EXP
        if conv in "EG":
            flags |= FormatFlags.UPPERCASE
        return format_exponential(_float_arg(args, f"%{conv}"), precision, width, flags)

    if conv == "c":
        value = _take(args, "%c")
        if isinstance(value, int):
            char = chr(value & 0xFF)
        elif isinstance(value, str) and len(value) == 1:
            char = value
        else:
            raise FormatError("%c needs an integer or a single character")
        return _pad(char, width, flags)

    if conv == "s":
        value = _take(args, "%s")
        if not isinstance(value, str):
            raise FormatError(f"%s needs a string, got {type(value).__name__}")
        text = value.partition("\0")[0]
        if flags & FormatFlags.PRECISION:
            text = text[:precision]
        return _pad(text, width, flags)

    if conv == "p":
        flags |= FormatFlags.ZEROPAD | FormatFlags.UPPERCASE
        address = _wrap(_int_arg(args, "%p"), _POINTER_BITS, False)
        return format_integer(address, False, 16, precision, _POINTER_BITS // 4, flags)

    # '%' and any unknown conversion character are printed as they are
    return conv


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    pieces: list[str] = []
    remaining = iter(args)
    pos = 0
    for match in _SPEC.finditer(fmt):
        pieces.append(fmt[pos : match.start()])
        pieces.append(_convert(match, remaining))
        pos = match.end()
    pieces.append(fmt[pos:])
    return "".join(pieces)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversion specifications filled from ``args``."""
    return _render(fmt, args)


def snprintf(count: int, fmt: str, *args: Any) -> tuple[str, int]:
    """Format into a buffer of ``count`` characters including the terminator.

    Returns the text that fits (at most ``count - 1`` characters) and the
    length the complete output would have had.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    text = _render(fmt, args)
    return text[: max(count - 1, 0)], len(text)