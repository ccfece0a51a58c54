"""Wire form of Logix STRING values as they travel in read replies."""

from __future__ import annotations

import struct
from dataclasses import dataclass

# Structure type marker (0xA0, 0x02) followed by the STRING template handle.
STRING_HEADER = b"\xa0\x02\xce\x0f"
_LENGTH = struct.Struct("<I")
HEADER_SIZE = len(STRING_HEADER) + _LENGTH.size


@dataclass(frozen=True)
class CIPStringPacker:
    """A string that packs as its type header, a 32-bit length and its bytes."""

    text: str

    def _encoded(self) -> bytes:
        return self.text.encode("utf-8")

    def __len__(self) -> int:
        return HEADER_SIZE + len(self._encoded())

    def __bytes__(self) -> bytes:
        data = self._encoded()
        if len(data) > 0xFFFF_FFFF:
            raise ValueError(f"string of {len(data)} bytes is too long to encode")
        return STRING_HEADER + _LENGTH.pack(len(data)) + data


def encode_cip_string(text: str) -> bytes:
    """Encode ``text`` in the reply form used for Logix strings."""
    return bytes(CIPStringPacker(text))


def decode_cip_string(data: bytes | bytearray) -> str:
    """Decode a string produced by :func:`encode_cip_string`.

    Bytes after the encoded length are ignored.
    """
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise ValueError(f"string header needs {HEADER_SIZE} bytes, got {len(data)}")
    if data[: len(STRING_HEADER)] != STRING_HEADER:
        raise ValueError(f"not a string header: {data[:len(STRING_HEADER)].hex()}")
    (length,) = _LENGTH.unpack_from(data, len(STRING_HEADER))
    end = HEADER_SIZE + length
    if len(data) < end:
        raise ValueError(f"string needs {length} bytes, got {len(data) - HEADER_SIZE}")
    return data[HEADER_SIZE:end].decode("utf-8")