"""CBOR major type 7: simple values and floating-point numbers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CBORSimple:
    """A CBOR simple value, identified by a number in ``[0, 255]``.

    Simple values and floats share major type 7.
    """

    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError(
                f"CBORSimple needs an int, not {type(self.number).__name__}"
            )
        if not 0 <= self.number <= 0xFF:
            raise ValueError(f"CBORSimple number must fit in one byte: {self.number}")


CBOR_FALSE = CBORSimple(0xF4)
CBOR_TRUE = CBORSimple(0xF5)
CBOR_NULL = CBORSimple(0xF6)
CBOR_UNDEFINED = CBORSimple(0xF7)


@dataclass(frozen=True)
class CBORFloat:
    """A CBOR floating-point value, held as a double."""

    value: float = 0.0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(
                f"CBORFloat needs a number, not {type(self.value).__name__}"
            )
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value