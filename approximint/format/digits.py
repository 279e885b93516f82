"""Fixed-capacity ring buffer of decimal digit characters."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain

from approximint.constants import SIGNIFICANT_DIGITS

# Marker for slots that have never been written
_EMPTY = 0


class DigitSlot:
    """Mutable handle to a single DigitRing slot.

    Reads return ``""`` for slots that were never written.
    """

    __slots__ = ("_ring", "_index")

    def __init__(self, ring: DigitRing, index: int) -> None:
        self._ring = ring
        self._index = index

    @property
    def digit(self) -> str:
        code = self._ring._slots[self._index]
        return chr(code) if code != _EMPTY else ""

    @digit.setter
    def digit(self, digit: str) -> None:
        self._ring._slots[self._index] = ord(digit)

    def __repr__(self) -> str:
        return f"DigitSlot({self._index}, {self.digit!r})"


class DigitRing:
    """Circular buffer holding up to 9 ASCII digits.

    Digits are pushed least-significant first. ``first`` marks the slot the
    next push writes to, which is also the oldest digit once the ring is
    full. The buffer never grows: a tenth push overwrites the oldest digit,
    which is acceptable because coefficients never exceed 9 digits.
    """

    __slots__ = ("_slots", "_first")

    def __init__(self) -> None:
        self._slots = bytearray(SIGNIFICANT_DIGITS)
        self._first = 0

    def push_back(self, digit: str) -> None:
        """Write digit at the cursor and advance it, wrapping at capacity."""
        self._slots[self._first] = ord(digit)
        self._first += 1
        if self._first == len(self._slots):
            self._first = 0

    def __iter__(self) -> Iterator[str]:
        """Yield digits most-significant first, skipping unwritten slots."""
        first = self._first
        newest_first = chain(
            range(first - 1, -1, -1),
            range(len(self._slots) - 1, first - 1, -1),
        )
        for index in newest_first:
            code = self._slots[index]
            if code != _EMPTY:
                yield chr(code)

    def iter_mut_rev(self) -> Iterator[DigitSlot]:
        """Yield every slot least-significant first as a mutable handle.

        Unwritten slots sort below the least significant digit, so the
        sequence always covers a full 9-digit window.
        """
        first = self._first
        for index in chain(range(first, len(self._slots)), range(first)):
            yield DigitSlot(self, index)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"DigitRing({''.join(self)!r})"
