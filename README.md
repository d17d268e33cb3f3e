# cbormodel

`cbormodel` is a small library of value types for the data items of CBOR, the
Concise Binary Object Representation. Each CBOR major type has a class of its
own, and a single `CBORValue` can hold any one of them.

It has no dependencies outside the standard library.

## Installation

```
pip install cbormodel
```

## Types

| Module                 | Name         | What it holds                                     |
|------------------------|--------------|---------------------------------------------------|
| `cbormodel.u64`        | `CBORU64`    | an unsigned 64-bit argument, `0 .. 2**64-1`       |
| `cbormodel.integers`   | `CBORUint`   | major type 0: unsigned integer                    |
| `cbormodel.integers`   | `CBORNint`   | major type 1: negative integer `-2**64 .. -1`     |
| `cbormodel.integers`   | `CBORInt`    | either of the two, chosen by the sign of an `int` |
| `cbormodel.strings`    | `CBORBstr`   | major type 2: byte string                         |
| `cbormodel.strings`    | `CBORTstr`   | major type 3: text string, held as its bytes      |
| `cbormodel.containers` | `CBORArray`  | major type 4: array of values                     |
| `cbormodel.containers` | `CBORMap`    | major type 5: map, kept as a flat list of values  |
| `cbormodel.containers` | `CBORTag`    | major type 6: a value with a tag number           |
| `cbormodel.simple`     | `CBORSimple` | major type 7: simple value, number `0 .. 255`     |
| `cbormodel.simple`     | `CBORFloat`  | major type 7: floating-point value                |
| `cbormodel.value`      | `CBORValue`  | any one of the above                              |

`cbormodel.simple` also provides the simple values `CBOR_FALSE`, `CBOR_TRUE`,
`CBOR_NULL` and `CBOR_UNDEFINED`, and `cbormodel.value.Kind` is an enum naming
the type a `CBORValue` holds.

## Usage

### Integers

```python
from cbormodel.u64 import CBORU64, cbor
from cbormodel.integers import CBORUint, CBORNint, CBORInt

# CBORU64 takes only ints in 0 .. 2**64-1; cbor(n) is a short form.
assert int(cbor(1)) == 1
assert cbor(0) < cbor(1)
# CBORU64(-1) raises ValueError, CBORU64(2**64) raises OverflowError.

# CBORUint and CBORNint take a CBORU64, never a plain int.
# The argument v of a negative integer stands for -1 - v.
assert int(CBORNint(cbor(0))) == -1
assert CBORUint() == CBORUint(cbor(0))

# CBORInt picks the right kind from a plain int and compares with both kinds.
assert CBORInt(-5) < CBORInt(3)
assert CBORInt(7) == CBORUint(cbor(7))
assert isinstance(CBORInt(-1).value, CBORNint)
```

Every negative integer orders before every unsigned one. Two `CBORNint`
values order by their argument, as encoded.

### Strings

```python
from cbormodel.strings import CBORBstr, CBORTstr

data = CBORBstr([0x01, 0x02])
assert len(data) == 2
assert data.at(1) == 0x02
assert bytes(data) == b"\x01\x02"

try:
    data.at(5)
except IndexError:
    pass
```

`at()` refuses any index outside `0 .. len-1`, negative ones included;
subscription (`data[i]`, `data[i] = b`) follows the rules of `bytearray`.
The bytes are copied on construction. A `CBORTstr` has the same interface but
never compares equal to a `CBORBstr`.

### Containers and tags

```python
from cbormodel.containers import CBORArray, CBORMap, CBORTag
from cbormodel.integers import CBORUint
from cbormodel.u64 import cbor

array = CBORArray([CBORUint(cbor(1)), CBORUint(cbor(2))])
assert len(array) == array.size() == 2
assert array[0].is_uint()

tagged = CBORTag(cbor(1), CBORUint(cbor(0)))
assert tagged.tag() == cbor(1)
assert tagged.value.as_uint() == cbor(0)
```

Elements, map entries and tagged values are stored as `CBORValue`; items of a
major type are wrapped on the way in.

### Values

```python
from cbormodel.value import CBORValue, Kind
from cbormodel.integers import CBORUint
from cbormodel.strings import CBORBstr
from cbormodel.u64 import cbor

value = CBORValue(CBORUint(cbor(3)))
assert value.is_uint() and value.kind is Kind.UINT
assert value.as_uint() == cbor(3)
assert value.as_bstr() is None

# With no argument a value is the simple value "undefined".
assert CBORValue().is_simple()

holder = CBORValue(CBORBstr(b"\x01"))
taken = holder.take_bstr()
assert bytes(taken) == b"\x01"
assert holder.is_simple()
```

`is_uint`, `is_nint`, `is_bstr`, `is_tstr`, `is_array`, `is_map`, `is_tag`,
`is_simple` and `is_float` test the held type. `as_uint` and `as_nint` return
the `CBORU64` argument, `as_bstr` a copy of the byte string; each returns
`None` for any other type. `take_bstr` hands over the byte string itself and
leaves the value "undefined". Anything that is not a CBOR item is refused with
`TypeError`.

## Command line

```
cbormodel-info
```

Prints a banner with the library's name, whether assertions are on (`Debug`)
or off (`Release`), and details of the machine and Python it runs on, followed
by the line `cbormodel/0.1 test_package`.

The same output is available from Python through `cbormodel.info`:
`banner_lines()`, `print_banner(file)` and `print_vector(strings, file)`.

## What it does not do

`cbormodel` only models CBOR data items. It does not encode values to CBOR
bytes nor decode CBOR bytes into values, and `CBORMap` offers no lookup by key.