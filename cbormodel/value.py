"""A CBOR value: one item of any of the CBOR major types."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from .containers import CBORArray, CBORMap, CBORTag
from .integers import CBORNint, CBORUint
from .simple import CBOR_UNDEFINED, CBORFloat, CBORSimple
from .strings import CBORBstr, CBORTstr
from .u64 import CBORU64


class Kind(Enum):
    """Which CBOR type a :class:`CBORValue` holds."""

    UINT = "uint"
    NINT = "nint"
    BSTR = "bstr"
    TSTR = "tstr"
    ARRAY = "array"
    MAP = "map"
    TAG = "tag"
    SIMPLE = "simple"
    FLOAT = "float"


Item = Union[
    CBORUint, CBORNint, CBORBstr, CBORTstr, CBORArray, CBORMap, CBORTag, CBORSimple, CBORFloat
]

# CBORTstr is checked before its base class CBORBstr.
_KINDS: tuple[tuple[type, Kind], ...] = (
    (CBORUint, Kind.UINT),
    (CBORNint, Kind.NINT),
    (CBORTstr, Kind.TSTR),
    (CBORBstr, Kind.BSTR),
    (CBORArray, Kind.ARRAY),
    (CBORMap, Kind.MAP),
    (CBORTag, Kind.TAG),
    (CBORSimple, Kind.SIMPLE),
    (CBORFloat, Kind.FLOAT),
)


def _kind_of(item: Any) -> Kind:
    for cls, kind in _KINDS:
        if isinstance(item, cls):
            return kind
    raise TypeError(f"CBORValue cannot hold {type(item).__name__}")


class CBORValue:
    """One CBOR data item. With no argument it is the simple value *undefined*."""

    __slots__ = ("_item", "_kind")

    def __init__(self, value: Any = CBOR_UNDEFINED) -> None:
        if isinstance(value, CBORValue):
            value = value._item
        self._kind = _kind_of(value)
        self._item: Item = value

    @property
    def kind(self) -> Kind:
        """The CBOR type of the held item."""
        return self._kind

    @property
    def item(self) -> Item:
        """The held item."""
        return self._item

    def is_uint(self) -> bool:
        return self._kind is Kind.UINT

    def is_nint(self) -> bool:
        return self._kind is Kind.NINT

    def is_bstr(self) -> bool:
        return self._kind is Kind.BSTR

    def is_tstr(self) -> bool:
        return self._kind is Kind.TSTR

    def is_array(self) -> bool:
        return self._kind is Kind.ARRAY

    def is_map(self) -> bool:
        return self._kind is Kind.MAP

    def is_tag(self) -> bool:
        return self._kind is Kind.TAG

    def is_simple(self) -> bool:
        return self._kind is Kind.SIMPLE

    def is_float(self) -> bool:
        return self._kind is Kind.FLOAT

    def as_uint(self) -> CBORU64 | None:
        """Return the argument of an unsigned integer, or None."""
        return self._item.value if self._kind is Kind.UINT else None

    def as_nint(self) -> CBORU64 | None:
        """Return the argument of a negative integer, or None."""
        return self._item.value if self._kind is Kind.NINT else None

    def as_bstr(self) -> CBORBstr | None:
        """Return a copy of a held byte string, or None."""
        if self._kind is not Kind.BSTR:
            return None
        return CBORBstr(bytes(self._item))

    def take_bstr(self) -> CBORBstr | None:
        """Hand over a held byte string and become *undefined*.

        Returns None and leaves the value untouched if it holds no byte string.
        """
        if self._kind is not Kind.BSTR:
            return None
        taken = self._item
        self._item = CBOR_UNDEFINED
        self._kind = Kind.SIMPLE
        return taken

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CBORValue):
            return NotImplemented
        return self._kind is other._kind and self._item == other._item

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CBORValue({self._item!r})"