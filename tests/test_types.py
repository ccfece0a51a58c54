import io
import struct

import pytest

from logixcip.types import (
    CIPDataError,
    CIPType,
    Float32,
    Int8,
    Int16,
    Int32,
    UInt8,
    UInt64,
    cip_type_of,
    get_bit,
    read_value,
)


def test_sizes_from_table():
    assert CIPType.STRUCT.size() == 88
    assert CIPType.DINT.size() == 4
    assert CIPType.LREAL.size() == 8
    assert CIPType.STRING.size() == 1
    assert CIPType.EPATH.size() == 0


def test_only_string_marker_is_not_atomic():
    assert not CIPType.STRING.is_atomic()
    assert all(t.is_atomic() for t in CIPType if t is not CIPType.STRING)


def test_labels():
    assert str(CIPType(0xC4)) == "0xC4 - DINT"
    assert str(CIPType(0xD4)) == "0xC9 - LWORD"
    assert str(CIPType(0xFF)) == "0xFF - (gologix specific) String"
    assert str(CIPType(0xDC)).endswith(" - Unknown")


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, (CIPType.BOOL, 1)),
        (36, (CIPType.DINT, 1)),
        (93.45, (CIPType.LREAL, 1)),
        ("Something", (CIPType.STRING, 1)),
        (Int16(999), (CIPType.INT, 1)),
        (UInt8(117), (CIPType.BYTE, 1)),
        (Int8(117), (CIPType.SINT, 1)),
        (Float32(1.5), (CIPType.REAL, 1)),
        (UInt64(5), (CIPType.LWORD, 1)),
        (None, (CIPType.UNKNOWN, 1)),
        (object(), (CIPType.STRUCT, 1)),
    ],
)
def test_cip_type_of_scalars(value, expected):
    assert cip_type_of(value) == expected


def test_cip_type_of_sequences():
    assert cip_type_of([4351, 4352, 4353]) == (CIPType.DINT, 3)
    assert cip_type_of(b"abcd") == (CIPType.BYTE, 4)
    assert cip_type_of(["a", "b"]) == (CIPType.STRING, 2)
    assert cip_type_of([Int32(0)] * 5) == (CIPType.DINT, 5)
    assert cip_type_of([Int16(1), Int16(2)]) == (CIPType.INT, 2)
    # bool arrays have no array type and count as structures
    assert cip_type_of([True, False]) == (CIPType.STRUCT, 1)


@pytest.mark.parametrize("make, bad", [(Int8, 200), (Int16, 40000), (UInt8, -1), (UInt64, 2**64)])
def test_fixed_width_range_checked(make, bad):
    with pytest.raises(ValueError):
        make(bad)


def test_float32_rounds_to_single_precision():
    assert Float32(93.45) == struct.unpack("<f", struct.pack("<f", 93.45))[0]
    assert Float32(93.45) != 93.45


@pytest.mark.parametrize(
    "typ, fmt, value",
    [
        (CIPType.SINT, "<b", -5),
        (CIPType.INT, "<h", 999),
        (CIPType.DINT, "<i", -4351),
        (CIPType.LINT, "<q", 85456),
        (CIPType.UINT, "<H", 65000),
        (CIPType.UDINT, "<I", 4000000000),
        (CIPType.LWORD, "<Q", 2**63),
        (CIPType.LREAL, "<d", 123.456),
        (CIPType.REAL, "<f", 15.0),
        (CIPType.BYTE, "<B", 117),
        (CIPType.WORD, "<H", 4353),
        (CIPType.DWORD, "<I", 4353),
    ],
)
def test_read_value_round_trip(typ, fmt, value):
    assert read_value(typ, io.BytesIO(struct.pack(fmt, value))) == value


def test_read_value_consumes_one_element():
    stream = io.BytesIO(struct.pack("<hh", 10, 20))
    assert read_value(CIPType.INT, stream) == 10
    assert read_value(CIPType.INT, stream) == 20


def test_read_value_bool_and_string():
    assert read_value(CIPType.BOOL, b"\x01") is True
    assert read_value(CIPType.BOOL, b"\x00") is False
    raw = b"Something".ljust(86, b"\x00")
    assert read_value(CIPType.STRING, raw) == raw


@pytest.mark.parametrize("typ", [CIPType.UNKNOWN, CIPType.STRUCT, CIPType.ULINT, 0x42])
def test_read_value_unsupported(typ):
    with pytest.raises(CIPDataError):
        read_value(typ, b"\x00" * 100)


def test_read_value_short_input():
    with pytest.raises(CIPDataError):
        read_value(CIPType.DINT, b"\x01\x02")


@pytest.mark.parametrize(
    "bit, expected",
    [(0, True), (1, True), (7, True), (8, False), (9, False), (11, False), (12, True), (15, False)],
)
def test_get_bit_of_dint(bit, expected):
    assert get_bit(CIPType.DINT, 4351, bit) is expected


def test_get_bit_out_of_range_is_false():
    assert get_bit(CIPType.INT, -1, 16) is False
    assert get_bit(CIPType.BYTE, 0xFF, -1) is False
    assert get_bit(CIPType.BOOL, True, 1) is False


def test_get_bit_bool():
    assert get_bit(CIPType.BOOL, True, 0) is True
    with pytest.raises(CIPDataError):
        get_bit(CIPType.BOOL, 1, 0)


@pytest.mark.parametrize("typ", [CIPType.REAL, CIPType.LREAL, CIPType.STRING, CIPType.STRUCT, CIPType.UNKNOWN, CIPType.ULINT])
def test_get_bit_unsupported(typ):
    with pytest.raises(CIPDataError):
        get_bit(typ, 1, 0)


def test_get_bit_wrong_value_type():
    with pytest.raises(CIPDataError):
        get_bit(CIPType.DINT, 1.5, 0)