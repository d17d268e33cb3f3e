import pytest

from cbormodel.containers import CBORArray, CBORMap, CBORTag
from cbormodel.integers import CBORNint, CBORUint
from cbormodel.strings import CBORBstr
from cbormodel.u64 import cbor
from cbormodel.value import CBORValue


def test_empty_array_has_size_zero():
    array = CBORArray()
    assert array.size() == 0
    assert len(array) == 0


def test_array_size_matches_elements():
    array = CBORArray([CBORUint(cbor(1)), CBORNint(cbor(2)), CBORBstr(b"ab")])
    assert array.size() == 3
    assert len(array) == array.size()


def test_array_wraps_elements_in_values():
    array = CBORArray([CBORUint(cbor(7)), CBORBstr(b"x")])
    assert array[0].is_uint()
    assert array[0].as_uint() == cbor(7)
    assert array[1].is_bstr()


def test_array_keeps_existing_values():
    value = CBORValue(CBORNint(cbor(4)))
    array = CBORArray([value])
    assert array[0] is value


def test_array_iteration_preserves_order():
    array = CBORArray([CBORUint(cbor(n)) for n in (3, 1, 2)])
    assert [v.as_uint() for v in array] == [cbor(3), cbor(1), cbor(2)]


def test_array_equality():
    assert CBORArray([CBORUint(cbor(1))]) == CBORArray([CBORUint(cbor(1))])
    assert not CBORArray([CBORUint(cbor(1))]) == CBORArray([CBORNint(cbor(1))])


def test_array_rejects_unknown_element():
    with pytest.raises(TypeError):
        CBORArray(["text"])


def test_empty_map():
    assert len(CBORMap()) == 0


def test_map_entries_are_values():
    entries = [CBORUint(cbor(1)), CBORBstr(b"one")]
    mapping = CBORMap(entries)
    assert len(mapping) == 2
    assert [v.is_uint() for v in mapping] == [True, False]


def test_tag_number_and_value():
    tag = CBORTag(cbor(0), CBORUint(cbor(5)))
    assert tag.tag() == cbor(0)
    assert tag.value.is_uint()
    assert tag.value.as_uint() == cbor(5)


def test_tag_from_value_keeps_value():
    value = CBORValue(CBORBstr(b"\x01"))
    tag = CBORTag(cbor(2), value)
    assert tag.value is value


def test_tag_requires_u64_number():
    with pytest.raises(TypeError):
        CBORTag(1, CBORUint())


def test_tag_requires_value():
    with pytest.raises(TypeError):
        CBORTag(cbor(1))


def test_tag_inside_value():
    value = CBORValue(CBORTag(cbor(0), CBORUint()))
    assert value.is_tag()
    assert not value.is_uint()