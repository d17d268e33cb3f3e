"""CBOR byte strings (major type 2) and text strings (major type 3)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import SupportsIndex


class CBORBstr:
    """CBOR major type 2: a byte string shorter than 2**64 bytes.

    The bytes are copied on construction, so later changes to the
    source object do not reach the string.
    """

    __slots__ = ("_storage",)

    def __init__(self, data: bytes | bytearray | Iterable[int] = b"") -> None:
        self._storage = bytearray(data)

    def __len__(self) -> int:
        return len(self._storage)

    def at(self, i: SupportsIndex) -> int:
        """Return the byte at index ``i``, refusing any index out of range.

        Unlike subscription, negative indices are not counted from the end.
        """
        index = i.__index__()
        if not 0 <= index < len(self._storage):
            raise IndexError(
                f"index {index} out of range for {type(self).__name__} "
                f"of length {len(self._storage)}"
            )
        return self._storage[index]

    def __getitem__(self, i: SupportsIndex) -> int:
        return self._storage[i.__index__()]

    def __setitem__(self, i: SupportsIndex, value: int) -> None:
        self._storage[i.__index__()] = value

    def __iter__(self):
        return iter(self._storage)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._storage == other._storage

    __hash__ = None  # type: ignore[assignment]

    def __bytes__(self) -> bytes:
        return bytes(self._storage)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._storage)!r})"


class CBORTstr(CBORBstr):
    """CBOR major type 3: a text string, held as its encoded bytes.

    A text string never compares equal to a byte string, even when
    both hold the same bytes.
    """

    __slots__ = ()