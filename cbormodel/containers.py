"""CBOR arrays (major type 4), maps (major type 5) and tags (major type 6)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from .u64 import CBORU64

if TYPE_CHECKING:
    from .value import CBORValue


def _as_value(item: Any) -> CBORValue:
    # Imported here because a CBOR value may itself hold containers.
    from .value import CBORValue

    return item if isinstance(item, CBORValue) else CBORValue(item)


class CBORArray:
    """CBOR major type 4: an array of CBOR values.

    Each element is stored as a :class:`~cbormodel.value.CBORValue`;
    elements of a major type are wrapped on construction.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._elements: list[CBORValue] = [_as_value(e) for e in elements]

    def __len__(self) -> int:
        return len(self._elements)

    def size(self) -> int:
        """Return the number of elements in the array."""
        return len(self._elements)

    def __iter__(self) -> Iterator[CBORValue]:
        return iter(self._elements)

    def __getitem__(self, i: int) -> CBORValue:
        return self._elements[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CBORArray):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CBORArray({self._elements!r})"


class CBORMap:
    """CBOR major type 5: a map of pairs of CBOR values.

    The entries are kept in order as a flat sequence of CBOR values.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[Any] = ()) -> None:
        self._entries: list[CBORValue] = [_as_value(e) for e in entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CBORValue]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CBORMap):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CBORMap({self._entries!r})"


class CBORTag:
    """CBOR major type 6: a CBOR value marked with a tag number.

    Copies of a tag share the tagged value.
    """

    __slots__ = ("_number", "_value")

    def __init__(self, number: CBORU64, value: Any) -> None:
        if not isinstance(number, CBORU64):
            raise TypeError(f"CBORTag needs a CBORU64 number, not {type(number).__name__}")
        self._number = number
        self._value: CBORValue = _as_value(value)

    def tag(self) -> CBORU64:
        """Return the tag number."""
        return self._number

    @property
    def value(self) -> CBORValue:
        """The tagged CBOR value."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CBORTag):
            return NotImplemented
        return self._number == other._number and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CBORTag({self._number!r}, {self._value!r})"