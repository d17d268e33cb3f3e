"""CBOR integers: major type 0 (unsigned) and major type 1 (negative)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .u64 import U64_MAX, CBORU64


def _require_u64(value: object, owner: str) -> None:
    if not isinstance(value, CBORU64):
        raise TypeError(f"{owner} needs a CBORU64, not {type(value).__name__}")


@dataclass(frozen=True, order=True)
class CBORUint:
    """CBOR major type 0: unsigned integers in the range 0 .. 2**64 - 1."""

    value: CBORU64 = field(default_factory=CBORU64)

    def __post_init__(self) -> None:
        _require_u64(self.value, "CBORUint")

    def __int__(self) -> int:
        return int(self.value)


@dataclass(frozen=True, order=True)
class CBORNint:
    """CBOR major type 1: negative integers in the range -2**64 .. -1.

    The stored argument ``v`` represents the number ``-1 - v``. Two
    negative integers are ordered by their argument, as encoded.
    """

    value: CBORU64 = field(default_factory=CBORU64)

    def __post_init__(self) -> None:
        _require_u64(self.value, "CBORNint")

    def __int__(self) -> int:
        return -1 - int(self.value)


_Variant = Union[CBORUint, CBORNint]


class CBORInt:
    """Either a :class:`CBORUint` or a :class:`CBORNint`, chosen by sign.

    Every negative integer orders before every non-negative one; two
    negative integers order by their encoded argument.
    """

    __slots__ = ("_value",)

    def __init__(self, n: int = 0) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"CBORInt needs an int, not {type(n).__name__}")
        if n < 0:
            if -1 - n > U64_MAX:
                raise OverflowError(f"{n} is below the CBOR integer range")
            self._value: _Variant = CBORNint(CBORU64(-1 - n))
        else:
            self._value = CBORUint(CBORU64(n))

    @property
    def value(self) -> _Variant:
        """The underlying unsigned or negative CBOR integer."""
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    def __repr__(self) -> str:
        return f"CBORInt({int(self)})"

    def _compare(self, other: object) -> int | None:
        if isinstance(other, CBORInt):
            theirs: _Variant = other._value
        elif isinstance(other, (CBORUint, CBORNint)):
            theirs = other
        else:
            return None
        mine = self._value
        if isinstance(mine, CBORNint) and isinstance(theirs, CBORUint):
            return -1
        if isinstance(mine, CBORUint) and isinstance(theirs, CBORNint):
            return 1
        a, b = int(mine.value), int(theirs.value)
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result == 0

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    def __hash__(self) -> int:
        return hash(self._value)