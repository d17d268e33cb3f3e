import math

import pytest

from cbormodel.simple import (
    CBOR_FALSE,
    CBOR_NULL,
    CBOR_TRUE,
    CBOR_UNDEFINED,
    CBORFloat,
    CBORSimple,
)


def test_well_known_simple_values():
    assert CBOR_FALSE == CBORSimple(0xF4)
    assert CBOR_TRUE == CBORSimple(0xF5)
    assert CBOR_NULL == CBORSimple(0xF6)
    assert CBOR_UNDEFINED == CBORSimple(0xF7)
    assert CBORSimple(0xF4).number == 0xF4


def test_simple_equality_by_number():
    assert CBORSimple(0xF7) == CBOR_UNDEFINED
    assert not CBOR_TRUE == CBOR_FALSE
    assert hash(CBORSimple(0xF6)) == hash(CBOR_NULL)


@pytest.mark.parametrize("n", [0, 0xFF])
def test_simple_accepts_byte_range(n):
    assert CBORSimple(n).number == n


@pytest.mark.parametrize("n", [-1, 0x100])
def test_simple_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        CBORSimple(n)


@pytest.mark.parametrize("n", ["0", 1.0, True])
def test_simple_rejects_non_int(n):
    with pytest.raises(TypeError):
        CBORSimple(n)


def test_simple_is_immutable():
    s = CBORSimple(0)
    with pytest.raises(AttributeError):
        s.number = 1
    assert s.number == 0


def test_float_default_is_zero():
    assert CBORFloat().value == 0.0


def test_float_round_trip():
    assert float(CBORFloat(2.5)) == 2.5
    assert CBORFloat(3).value == 3


def test_float_holds_nan():
    assert math.isnan(CBORFloat(math.nan).value)


@pytest.mark.parametrize("v", ["1.0", None, False])
def test_float_rejects_non_number(v):
    with pytest.raises(TypeError):
        CBORFloat(v)


def test_float_equality():
    assert CBORFloat(1.5) == CBORFloat(1.5)
    assert not CBORFloat(1.5) == CBORFloat(-1.5)