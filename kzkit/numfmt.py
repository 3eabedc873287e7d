"""Low-level number to text conversion used by the formatted-print routines.

The conversions work on a bounded scratch buffer of 32 characters, round
fixed-point values half to even at the last printed digit, and estimate the
decimal exponent of exponential output with a fast logarithm approximation.
Each function returns the finished field as a string.
"""

from __future__ import annotations

import enum
import struct
import sys

BUFFER_SIZE = 32
DEFAULT_FLOAT_PRECISION = 6
MAX_FLOAT = 1e9

_DBL_MAX = sys.float_info.max
_POW10 = [float(10**i) for i in range(10)]
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


class FormatFlags(enum.IntFlag):
    """Conversion flags parsed from a format specification."""

    ZEROPAD = 1 << 0
    LEFT = 1 << 1
    PLUS = 1 << 2
    SPACE = 1 << 3
    HASH = 1 << 4
    UPPERCASE = 1 << 5
    CHAR = 1 << 6
    SHORT = 1 << 7
    LONG = 1 << 8
    LONG_LONG = 1 << 9
    PRECISION = 1 << 10
    ADAPT_EXP = 1 << 11


def _coerce_flags(flags: int) -> FormatFlags:
    return FormatFlags(int(flags))


def _without(flags: FormatFlags, flag: FormatFlags) -> FormatFlags:
    return FormatFlags(int(flags) & ~int(flag))


def _check_field(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _finish(reversed_buf: list[str], width: int, flags: FormatFlags) -> str:
    """Turn a reversed digit buffer into the padded field."""
    text = "".join(reversed(reversed_buf))
    if not flags & FormatFlags.LEFT and not flags & FormatFlags.ZEROPAD:
        text = text.rjust(width)
    if flags & FormatFlags.LEFT:
        text = text.ljust(width)
    return text


def _append_sign(buf: list[str], negative: bool, flags: FormatFlags) -> None:
    if len(buf) < BUFFER_SIZE:
        if negative:
            buf.append("-")
        elif flags & FormatFlags.PLUS:
            buf.append("+")
        elif flags & FormatFlags.SPACE:
            buf.append(" ")


def _integer_field(
    buf: list[str],
    negative: bool,
    base: int,
    prec: int,
    width: int,
    flags: FormatFlags,
) -> str:
    if not flags & FormatFlags.LEFT:
        if (
            width
            and flags & FormatFlags.ZEROPAD
            and (negative or flags & (FormatFlags.PLUS | FormatFlags.SPACE))
        ):
            width -= 1
        while len(buf) < prec and len(buf) < BUFFER_SIZE:
            buf.append("0")
        while flags & FormatFlags.ZEROPAD and len(buf) < width and len(buf) < BUFFER_SIZE:
            buf.append("0")

    if flags & FormatFlags.HASH:
        if (
            not flags & FormatFlags.PRECISION
            and buf
            and (len(buf) == prec or len(buf) == width)
        ):
            buf.pop()
            if buf and base == 16:
                buf.pop()
        if base == 16 and len(buf) < BUFFER_SIZE:
            buf.append("X" if flags & FormatFlags.UPPERCASE else "x")
        elif base == 2 and len(buf) < BUFFER_SIZE:
            buf.append("b")
        if len(buf) < BUFFER_SIZE:
            buf.append("0")

    _append_sign(buf, negative, flags)
    return _finish(buf, width, flags)


def format_integer(
    value: int, negative: bool, base: int, precision: int, width: int, flags: int
) -> str:
    """Format the magnitude ``value`` in ``base``, with ``negative`` giving the sign."""
    if value < 0:
        raise ValueError("value is a magnitude and must not be negative")
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    _check_field("precision", precision)
    _check_field("width", width)
    flags = _coerce_flags(flags)

    if not value:
        flags = _without(flags, FormatFlags.HASH)

    letter = "A" if flags & FormatFlags.UPPERCASE else "a"
    buf: list[str] = []
    if not flags & FormatFlags.PRECISION or value:
        while True:
            digit = value % base
            buf.append(chr(48 + digit) if digit < 10 else chr(ord(letter) + digit - 10))
            value //= base
            if not value or len(buf) >= BUFFER_SIZE:
                break

    return _integer_field(buf, negative, base, precision, width, flags)


def _fixed(value: float, prec: int, width: int, flags: FormatFlags) -> str:
    if value != value:
        return _finish(list("nan"[::-1]), width, flags)
    if value < -_DBL_MAX:
        return _finish(list("-inf"[::-1]), width, flags)
    if value > _DBL_MAX:
        text = "+inf" if flags & FormatFlags.PLUS else "inf"
        return _finish(list(text[::-1]), width, flags)

    if value > MAX_FLOAT or value < -MAX_FLOAT:
        return _exponential(value, prec, width, flags)

    negative = False
    if value < 0:
        negative = True
        value = 0 - value

    if not flags & FormatFlags.PRECISION:
        prec = DEFAULT_FLOAT_PRECISION

    buf: list[str] = []
    # precision beyond nine digits is emitted as trailing zeros
    while len(buf) < BUFFER_SIZE and prec > 9:
        buf.append("0")
        prec -= 1

    whole = int(value)
    tmp = (value - whole) * _POW10[prec]
    frac = int(tmp)
    diff = tmp - frac

    if diff > 0.5:
        frac += 1
        if frac >= _POW10[prec]:
            frac = 0
            whole += 1
    elif diff < 0.5:
        pass
    elif frac == 0 or frac & 1:
        frac += 1

    if prec == 0:
        diff = value - float(whole)
        if (not diff < 0.5 or diff > 0.5) and whole & 1:
            whole += 1
    else:
        count = prec
        while len(buf) < BUFFER_SIZE:
            count = (count - 1) & _U32
            buf.append(chr(48 + frac % 10))
            frac //= 10
            if not frac:
                break
        while len(buf) < BUFFER_SIZE and count > 0:
            buf.append("0")
            count -= 1
        if len(buf) < BUFFER_SIZE:
            buf.append(".")

    while len(buf) < BUFFER_SIZE:
        buf.append(chr(48 + whole % 10))
        whole //= 10
        if not whole:
            break

    if not flags & FormatFlags.LEFT and flags & FormatFlags.ZEROPAD:
        if width and (negative or flags & (FormatFlags.PLUS | FormatFlags.SPACE)):
            width -= 1
        while len(buf) < width and len(buf) < BUFFER_SIZE:
            buf.append("0")

    _append_sign(buf, negative, flags)
    return _finish(buf, width, flags)


def _double_bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _bits_double(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits & _U64))[0]


def _exponential(value: float, prec: int, width: int, flags: FormatFlags) -> str:
    if value != value or value > _DBL_MAX or value < -_DBL_MAX:
        return _fixed(value, prec, width, flags)

    negative = value < 0
    if negative:
        value = -value

    if not flags & FormatFlags.PRECISION:
        prec = DEFAULT_FLOAT_PRECISION

    bits = _double_bits(value)
    exp2 = ((bits >> 52) & 0x7FF) - 1023
    mantissa = _bits_double((bits & ((1 << 52) - 1)) | (1023 << 52))
    expval = int(
        0.1760912590558 + exp2 * 0.301029995663981 + (mantissa - 1.5) * 0.289529654602168
    )
    exp2 = int(expval * 3.321928094887362 + 0.5)
    z = expval * 2.302585092994046 - exp2 * 0.6931471805599453
    z2 = z * z
    scale = _bits_double((exp2 + 1023) << 52)
    scale *= 1 + 2 * z / (2 - z + (z2 / (6 + (z2 / (10 + z2 / 14)))))
    if value < scale:
        expval -= 1
        scale /= 10

    minwidth = 4 if -100 < expval < 100 else 5

    if flags & FormatFlags.ADAPT_EXP:
        if 1e-4 <= value < 1e6:
            prec = prec - expval - 1 if prec > expval else 0
            flags |= FormatFlags.PRECISION
            minwidth = 0
            expval = 0
        elif prec > 0 and flags & FormatFlags.PRECISION:
            prec -= 1

    fwidth = width - minwidth if width > minwidth else 0
    if flags & FormatFlags.LEFT and minwidth:
        fwidth = 0

    if expval:
        value /= scale

    text = _fixed(
        -value if negative else value,
        prec,
        fwidth,
        _without(flags, FormatFlags.ADAPT_EXP),
    )

    if minwidth:
        text += "E" if flags & FormatFlags.UPPERCASE else "e"
        text += format_integer(
            abs(expval),
            expval < 0,
            10,
            0,
            minwidth - 1,
            FormatFlags.ZEROPAD | FormatFlags.PLUS,
        )
        if flags & FormatFlags.LEFT:
            text = text.ljust(width)
    return text


def format_fixed(value: float, precision: int, width: int, flags: int) -> str:
    """Format ``value`` in fixed-point notation.

    Values beyond ``MAX_FLOAT`` in magnitude fall back to exponential notation.
    ``precision`` applies only when ``FormatFlags.PRECISION`` is set.
    """
    _check_field("precision", precision)
    _check_field("width", width)
    return _fixed(float(value), precision, width, _coerce_flags(flags))


def format_exponential(value: float, precision: int, width: int, flags: int) -> str:
    """Format ``value`` in exponential notation.

    With ``FormatFlags.ADAPT_EXP`` set, values in ``[1e-4, 1e6)`` are printed in
    fixed-point notation and ``precision`` counts significant figures.
    """
    _check_field("precision", precision)
    _check_field("width", width)
    return _exponential(float(value), precision, width, _coerce_flags(flags))