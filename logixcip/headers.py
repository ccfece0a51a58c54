"""Reply headers for write and read services."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from logixcip.services import CIPService


def _unpack(fmt: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < fmt.size:
        raise ValueError(f"{what} needs {fmt.size} bytes, got {len(data)}")
    return fmt.unpack_from(data)


def _pack(fmt: struct.Struct, what: str, *values: int) -> bytes:
    try:
        return fmt.pack(*values)
    except struct.error as exc:
        raise ValueError(f"cannot pack {what}: {exc}") from exc


@dataclass(frozen=True)
class WriteResultHeader:
    """Connected reply header: sequence count, service and status."""

    sequence_count: int = 0
    service: CIPService = CIPService(0)
    reserved: int = 0
    status: int = 0
    status_extended: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<HBBBB")
    SIZE: ClassVar[int] = _FORMAT.size

    def pack(self) -> bytes:
        """Little-endian wire form."""
        return _pack(
            self._FORMAT,
            "write result header",
            self.sequence_count,
            int(self.service),
            self.reserved,
            self.status,
            self.status_extended,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "WriteResultHeader":
        """Parse the header from the start of ``data``."""
        seq, service, reserved, status, extended = _unpack(cls._FORMAT, data, "write result header")
        return cls(seq, CIPService(service), reserved, status, extended)


@dataclass(frozen=True)
class UnconnWriteResultHeader:
    """Reply header without a sequence count."""

    service: CIPService = CIPService(0)
    reserved: int = 0
    status: int = 0
    status_extended: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<BBBB")
    SIZE: ClassVar[int] = _FORMAT.size

    def pack(self) -> bytes:
        """Little-endian wire form."""
        return _pack(
            self._FORMAT,
            "unconnected write result header",
            int(self.service),
            self.reserved,
            self.status,
            self.status_extended,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "UnconnWriteResultHeader":
        """Parse the header from the start of ``data``."""
        service, reserved, status, extended = _unpack(
            cls._FORMAT, data, "unconnected write result header"
        )
        return cls(CIPService(service), reserved, status, extended)