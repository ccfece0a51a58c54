"""CIP elementary data types and conversion of wire values to Python values."""

from __future__ import annotations

import io
import struct
from enum import IntEnum
from typing import Any, BinaryIO, ClassVar


class CIPDataError(ValueError):
    """A value could not be read or interpreted as the requested CIP type."""


class CIPType(IntEnum):
    """One-byte CIP data type codes."""

    UNKNOWN = 0x00
    STRUCT = 0xA0  # also used on the wire for strings
    UTIME = 0xC0
    BOOL = 0xC1
    SINT = 0xC2
    INT = 0xC3
    DINT = 0xC4
    LINT = 0xC5
    USINT = 0xC6
    UINT = 0xC7
    UDINT = 0xC8
    ULINT = 0xC9
    REAL = 0xCA
    LREAL = 0xCB
    STIME = 0xCC
    DATE = 0xCD
    TIMEOFDAY = 0xCE
    DATETIME = 0xCF
    STRING_UNKNOWN = 0xD0
    BYTE = 0xD1  # 8 bits packed into one byte
    WORD = 0xD2
    DWORD = 0xD3
    LWORD = 0xD4
    STRING_UNKNOWN2 = 0xD5
    FTIME = 0xD6
    LTIME = 0xD7
    ITIME = 0xD8
    STRING_UNKNOWN3 = 0xD9
    STRING_SHORT = 0xDA
    TIMEOFDAY2 = 0xDB
    EPATH = 0xDC
    ENGUNIT = 0xDD
    # Logix strings travel as STRUCT; this code marks a standard string locally.
    STRING = 0xFF

    def size(self) -> int:
        """Size in bytes of one element of this type (0 where unknown)."""
        return _SIZES.get(self, 0)

    def is_atomic(self) -> bool:
        """True for every code except the local string marker."""
        return int(self) <= 254

    def __str__(self) -> str:
        label = _LABELS.get(self)
        if label is not None:
            return label
        return f"0x{int(self):2x} - Unknown"


_SIZES: dict[CIPType, int] = {
    CIPType.UNKNOWN: 0,
    CIPType.STRUCT: 88,
    CIPType.UTIME: 8,
    CIPType.BOOL: 1,
    CIPType.BYTE: 1,
    CIPType.SINT: 1,
    CIPType.INT: 2,
    CIPType.DINT: 4,
    CIPType.LINT: 8,
    CIPType.USINT: 1,
    CIPType.UINT: 2,
    CIPType.UDINT: 4,
    CIPType.ULINT: 8,
    CIPType.LWORD: 8,
    CIPType.REAL: 4,
    CIPType.LREAL: 8,
    CIPType.WORD: 2,
    CIPType.DWORD: 4,
    CIPType.DATE: 2,
    CIPType.TIMEOFDAY: 6,
    CIPType.DATETIME: 0,
    CIPType.STRING: 1,
}

_LABELS: dict[CIPType, str] = {
    CIPType.UNKNOWN: "0x00 - Unknown",
    CIPType.STRUCT: "0xA0 - Struct",
    CIPType.BOOL: "0xC1 - BOOL",
    CIPType.BYTE: "0xD1 - BYTE",
    CIPType.SINT: "0xC2 - SINT",
    CIPType.INT: "0xC3 - INT",
    CIPType.DINT: "0xC4 - DINT",
    CIPType.LINT: "0xC5 - LINT",
    CIPType.USINT: "0xC6 - USINT",
    CIPType.UINT: "0xC7 - UINT",
    CIPType.UDINT: "0xC8 - UDINT",
    CIPType.LWORD: "0xC9 - LWORD",
    CIPType.REAL: "0xCA - REAL",
    CIPType.LREAL: "0xCB - LREAL",
    CIPType.WORD: "0xD2 - WORD",
    CIPType.DWORD: "0xD3 - DWORD",
    CIPType.STRING: "0xFF - (gologix specific) String",
}


class _FixedInt(int):
    """An integer with a fixed width and signedness."""

    cip_type: ClassVar[CIPType]
    bits: ClassVar[int]
    signed: ClassVar[bool]

    def __new__(cls, value: int = 0):
        number = int(value)
        if cls.signed:
            low, high = -(1 << (cls.bits - 1)), (1 << (cls.bits - 1)) - 1
        else:
            low, high = 0, (1 << cls.bits) - 1
        if not low <= number <= high:
            raise ValueError(f"{number} does not fit in {cls.__name__}")
        return super().__new__(cls, number)

    @property
    def value(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class UInt8(_FixedInt):
    """Unsigned 8-bit value (BYTE)."""

    cip_type, bits, signed = CIPType.BYTE, 8, False


class Int8(_FixedInt):
    """Signed 8-bit value (SINT)."""

    cip_type, bits, signed = CIPType.SINT, 8, True


class UInt16(_FixedInt):
    """Unsigned 16-bit value (UINT)."""

    cip_type, bits, signed = CIPType.UINT, 16, False


class Int16(_FixedInt):
    """Signed 16-bit value (INT)."""

    cip_type, bits, signed = CIPType.INT, 16, True


class UInt32(_FixedInt):
    """Unsigned 32-bit value (UDINT)."""

    cip_type, bits, signed = CIPType.UDINT, 32, False


class Int32(_FixedInt):
    """Signed 32-bit value (DINT)."""

    cip_type, bits, signed = CIPType.DINT, 32, True


class UInt64(_FixedInt):
    """Unsigned 64-bit value (LWORD)."""

    cip_type, bits, signed = CIPType.LWORD, 64, False


class Int64(_FixedInt):
    """Signed 64-bit value (LINT)."""

    cip_type, bits, signed = CIPType.LINT, 64, True


class Float32(float):
    """Single-precision float (REAL), rounded to 32-bit precision."""

    cip_type: ClassVar[CIPType] = CIPType.REAL

    def __new__(cls, value: float = 0.0):
        try:
            (rounded,) = struct.unpack("<f", struct.pack("<f", float(value)))
        except (OverflowError, struct.error) as exc:
            raise ValueError(f"{value} does not fit in Float32") from exc
        return super().__new__(cls, rounded)

    @property
    def value(self) -> float:
        return float(self)

    def __repr__(self) -> str:
        return f"Float32({float(self)})"


_FIXED: dict[type, CIPType] = {
    cls: cls.cip_type
    for cls in (UInt8, Int8, UInt16, Int16, UInt32, Int32, UInt64, Int64, Float32)
}

# Element types that may form an array; any other sequence is a structure.
_ARRAY_ELEMENTS = frozenset(
    {
        CIPType.BYTE,
        CIPType.UINT,
        CIPType.INT,
        CIPType.UDINT,
        CIPType.DINT,
        CIPType.LWORD,
        CIPType.LINT,
        CIPType.REAL,
        CIPType.LREAL,
        CIPType.STRING,
    }
)


def _scalar_type(value: Any) -> CIPType | None:
    if isinstance(value, bool):
        return CIPType.BOOL
    fixed = _FIXED.get(type(value))
    if fixed is not None:
        return fixed
    if isinstance(value, int):
        return CIPType.DINT
    if isinstance(value, float):
        return CIPType.LREAL
    if isinstance(value, str):
        return CIPType.STRING
    return None


def cip_type_of(value: Any) -> tuple[CIPType, int]:
    """Return the CIP type matching a Python value and its element count."""
    if value is None:
        return CIPType.UNKNOWN, 1
    scalar = _scalar_type(value)
    if scalar is not None:
        return scalar, 1
    if isinstance(value, (bytes, bytearray)):
        return CIPType.BYTE, len(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return CIPType.UNKNOWN, 0
        element = _scalar_type(value[0])
        if element in _ARRAY_ELEMENTS:
            return element, len(value)
        return CIPType.STRUCT, 1
    return CIPType.STRUCT, 1


_READ_FORMATS: dict[CIPType, str] = {
    CIPType.BOOL: "<?",
    CIPType.BYTE: "<B",
    CIPType.SINT: "<b",
    CIPType.INT: "<h",
    CIPType.DINT: "<i",
    CIPType.LINT: "<q",
    CIPType.USINT: "<B",
    CIPType.UINT: "<H",
    CIPType.UDINT: "<I",
    CIPType.LWORD: "<Q",
    CIPType.REAL: "<f",
    CIPType.LREAL: "<d",
    CIPType.WORD: "<H",
    CIPType.DWORD: "<I",
    CIPType.STRING: "<86s",
}


def read_value(cip_type: int, stream: BinaryIO | bytes | bytearray) -> Any:
    """Read one element of ``cip_type`` from a binary stream (or bytes)."""
    if isinstance(stream, (bytes, bytearray)):
        stream = io.BytesIO(stream)
    try:
        typ = CIPType(cip_type)
    except ValueError:
        raise CIPDataError(f"default (unknown) type {int(cip_type)}") from None
    if typ is CIPType.UNKNOWN:
        raise CIPDataError("unknown type")
    if typ is CIPType.STRUCT:
        raise CIPDataError("don't know what to do with a struct")
    fmt = _READ_FORMATS.get(typ)
    if fmt is None:
        raise CIPDataError(f"default (unknown) type {int(typ)}")
    needed = struct.calcsize(fmt)
    data = stream.read(needed)
    if data is None or len(data) < needed:
        got = 0 if data is None else len(data)
        raise CIPDataError(
            f"problem reading {typ} as one unit: needed {needed} bytes, got {got}"
        )
    (value,) = struct.unpack(fmt, data)
    return value


_BIT_WIDTHS: dict[CIPType, int] = {
    CIPType.BYTE: 8,
    CIPType.SINT: 8,
    CIPType.USINT: 8,
    CIPType.INT: 16,
    CIPType.UINT: 16,
    CIPType.WORD: 16,
    CIPType.DINT: 32,
    CIPType.UDINT: 32,
    CIPType.DWORD: 32,
    CIPType.LINT: 64,
    CIPType.LWORD: 64,
}


def get_bit(cip_type: int, value: Any, bitpos: int) -> bool:
    """Return one bit of an integer value read as ``cip_type``.

    A bit position outside the type's width yields False.
    """
    try:
        typ = CIPType(cip_type)
    except ValueError:
        raise CIPDataError("got an unknown type. don't know how to get bit") from None
    if typ is CIPType.UNKNOWN:
        raise CIPDataError("unknown type")
    if typ is CIPType.STRUCT:
        raise CIPDataError("got a struct - can't get a bit")
    if typ is CIPType.BOOL:
        if bitpos != 0:
            return False
        if isinstance(value, bool):
            return value
        raise CIPDataError(
            f"value was a bool, but bit {bitpos} was requested. must be 0 for bool"
        )
    if typ in (CIPType.REAL, CIPType.LREAL):
        raise CIPDataError(f"value was a {typ.name}, not finding bit of real")
    if typ is CIPType.STRING:
        raise CIPDataError("value was a STRING, not finding bit of string")
    width = _BIT_WIDTHS.get(typ)
    if width is None:
        raise CIPDataError("got an unknown type. don't know how to get bit")
    if not 0 <= bitpos < width:
        return False
    if isinstance(value, int) and not isinstance(value, bool):
        return bool(value & (1 << bitpos))
    raise CIPDataError(
        f"value was a {typ.name}, but bit {bitpos} was requested. "
        f"must be 0-{width - 1} for {typ.name}"
    )