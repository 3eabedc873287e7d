"""Memory watches: decoding watched values and laying out their display."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from kzkit.printf import sprintf

__all__ = ["WatchType", "Watch", "format_watch_value"]

LABEL_CHAR_WIDTH = 8


class WatchType(enum.IntEnum):
    """How the watched memory is interpreted and printed."""

    U8 = 0
    S8 = 1
    X8 = 2
    U16 = 3
    S16 = 4
    X16 = 5
    U32 = 6
    S32 = 7
    X32 = 8
    FLOAT = 9


_INTEGER_LAYOUT = {
    WatchType.U8: (">B", "%u"),
    WatchType.S8: (">b", "%d"),
    WatchType.X8: (">B", "%1X"),
    WatchType.U16: (">H", "%u"),
    WatchType.S16: (">h", "%d"),
    WatchType.X16: (">H", "%2X"),
    WatchType.U32: (">I", "%lu"),
    WatchType.S32: (">i", "%ld"),
    WatchType.X32: (">I", "%8lX"),
}


def _unpack(layout: str, raw: bytes):
    size = struct.calcsize(layout)
    if len(raw) < size:
        raise ValueError(f"need {size} bytes of memory, got {len(raw)}")
    return struct.unpack_from(layout, raw)[0]


def format_watch_value(watch_type: WatchType | int, raw: bytes) -> str:
    """Format the big-endian memory ``raw`` as ``watch_type`` describes."""
    watch_type = WatchType(watch_type)
    raw = bytes(raw)
    if watch_type is WatchType.FLOAT:
        bits = _unpack(">I", raw)
        value = _unpack(">f", raw)
        # exact zeros print as fixed-point to avoid the exponential path's rounding
        if bits in (0, 0x80000000):
            return sprintf("%f", value)
        return sprintf("%g", value)
    layout, spec = _INTEGER_LAYOUT[watch_type]
    return sprintf(spec, _unpack(layout, raw))


@dataclass
class Watch:
    """A watched memory address with its screen position and optional label."""

    address: int
    watch_type: WatchType = WatchType.U8
    x: int = 0
    y: int = 0
    floating: bool = False
    label: str | None = None

    def value_text(self, raw: bytes) -> str:
        """Format the memory ``raw`` read from this watch's address."""
        return format_watch_value(self.watch_type, raw)

    def render(self, raw: bytes) -> list[tuple[int, int, str]]:
        """Return the text items to draw, as ``(x, y, text)`` tuples.

        A floating watch with a label draws the label one character after
        the value.
        """
        text = self.value_text(raw)
        items = [(self.x, self.y, text)]
        if self.label and self.floating:
            items.append(
                (self.x + (len(text) + 1) * LABEL_CHAR_WIDTH, self.y, self.label)
            )
        return items