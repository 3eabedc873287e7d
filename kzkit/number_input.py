"""An editable fixed-width number field, edited one digit at a time."""

from __future__ import annotations

import enum

__all__ = ["Nav", "NumberInput"]

_U32 = 0xFFFFFFFF
_MAX_BASE = 36


class Nav(enum.Enum):
    """Navigation directions delivered to a menu item."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def _int_to_char(i: int) -> str:
    if 0 <= i <= 9:
        return chr(ord("0") + i)
    return chr(i + ord("a") - 10)


def _char_to_int(c: str) -> int:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    return ord(c) - (ord("a") - 10)


class NumberInput:
    """A number shown as a fixed count of digits in a given base.

    A negative ``base`` makes the field signed: it then carries a leading
    ``+``/``-`` slot.  An unsigned field carries an unused trailing slot
    instead, so both kinds have ``length + 1`` slots.  The value is held as
    an unsigned 32-bit integer.
    """

    def __init__(self, base: int, length: int) -> None:
        self.signed = base < 0
        self.base = abs(base)
        if not 2 <= self.base <= _MAX_BASE:
            raise ValueError(f"unsupported base {base}")
        if length < 1:
            raise ValueError(f"length must be at least 1, got {length}")
        self.length = length + 1
        self.editing = False
        self.value = 0
        self._digits = [" "] * self.length
        self._fill_digits(0, "+")
        self.edit_index = self.length - 1 if self.signed else self.length - 2

    @property
    def digits(self) -> str:
        """All slots of the field, including the sign or trailing slot."""
        return "".join(self._digits)

    def _fill_digits(self, val: int, sign: str) -> None:
        for i in reversed(range(self.length)):
            if i == 0 and self.signed:
                self._digits[i] = sign
            elif not self.signed and i == self.length - 1:
                self._digits[i] = " "
            else:
                self._digits[i] = _int_to_char(val % self.base)
                val //= self.base

    def set(self, value: int) -> None:
        """Store ``value`` and show it with a positive sign."""
        self.value = value & _U32
        self._fill_digits(self.value, "+")

    def activate(self) -> int | None:
        """Enter edit mode, or leave it and commit the edited digits.

        Returns the committed value when leaving edit mode, else ``None``.
        """
        if not self.editing:
            self.editing = True
            return None
        self.editing = False
        mul = 1
        val = 0
        for i in reversed(range(self.length)):
            if self.signed and i == 0:
                break
            if not self.signed and i == self.length - 1:
                continue
            val += (_char_to_int(self._digits[i]) % self.base) * mul
            mul *= self.base
        if self.signed and self._digits[0] == "-":
            val = -val
        self.value = val & _U32
        return self.value

    def navigate(self, direction: Nav) -> bool:
        """Move the cursor or change the digit under it while editing.

        Returns whether the event was consumed, which happens only in edit mode.
        """
        direction = Nav(direction)
        if not self.editing:
            return False
        idx = self.edit_index
        if direction is Nav.LEFT:
            if idx == 0:
                self.edit_index = self.length - 1 if self.signed else self.length - 2
            else:
                self.edit_index = idx - 1
        elif direction is Nav.RIGHT:
            idx += 1
            if (not self.signed and idx == self.length - 1) or idx >= self.length:
                idx = 0
            self.edit_index = idx
        else:
            step = 1 if direction is Nav.UP else -1
            if self.signed and idx == 0:
                self._digits[0] = "-" if self._digits[0] == "+" else "+"
            else:
                v = (_char_to_int(self._digits[idx]) + step + self.base) % self.base
                self._digits[idx] = _int_to_char(v)
        return True

    def display(self) -> str:
        """Return the text shown for the field.

        Outside edit mode the digits are refreshed from the stored value,
        keeping the current sign.
        """
        if not self.editing:
            negative = self.signed and self._digits[0] == "-"
            val = (-self.value) & _U32 if negative else self.value
            self._fill_digits(val, "-" if negative else "+")
        shown = self._digits if self.signed else self._digits[:-1]
        return "".join(shown)