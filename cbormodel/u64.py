"""Unsigned 64-bit quantity used as the argument of CBOR data items."""

from __future__ import annotations

from dataclasses import dataclass

U64_MAX = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True, order=True)
class CBORU64:
    """An unsigned integer in the interval ``[0, 2**64 - 1]``.

    Negative numbers are refused so that a plain integer is never
    mistaken for the argument of a negative CBOR integer.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"CBORU64 needs an int, not {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValueError(f"CBORU64 cannot hold a negative number: {self.value}")
        if self.value > U64_MAX:
            raise OverflowError(f"{self.value} does not fit in 64 bits")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"CBORU64({self.value})"


def cbor(n: int) -> CBORU64:
    """Build a :class:`CBORU64` from ``n``."""
    return CBORU64(n)