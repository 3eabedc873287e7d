"""Segmented address resolution for the game's segment table."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["SegmentTable", "SEGMENT_COUNT", "phys_to_kseg0"]

SEGMENT_COUNT = 16
_KSEG0_BASE = 0x80000000
_U32 = 0xFFFFFFFF


def phys_to_kseg0(addr: int) -> int:
    """Map a physical address into the cached kernel segment."""
    return (addr | _KSEG0_BASE) & _U32


def _split(seg_addr: int) -> tuple[int, int]:
    return (seg_addr >> 24) & 0xF, seg_addr & 0x00FFFFFF


@dataclass
class SegmentTable:
    """Physical base addresses of the sixteen display-list segments."""

    segments: list[int] = field(default_factory=lambda: [0] * SEGMENT_COUNT)

    def __post_init__(self) -> None:
        self.segments = list(self.segments)
        if len(self.segments) != SEGMENT_COUNT:
            raise ValueError(
                f"a segment table holds {SEGMENT_COUNT} entries, got {len(self.segments)}"
            )

    def _physical(self, seg_addr: int) -> int:
        segment, offset = _split(seg_addr)
        return (self.segments[segment] + offset) & _U32

    def find(self, seg_addr: int) -> int | None:
        """Resolve ``seg_addr`` to a virtual address, or ``None`` if it is null."""
        physical = self._physical(seg_addr)
        if not physical:
            return None
        return phys_to_kseg0(physical)

    def relocate(self, seg_addr: int) -> int:
        """Return the virtual address that replaces the stored ``seg_addr``."""
        return phys_to_kseg0(self._physical(seg_addr))