"""Fixed-layout messages exchanged by the server: list services and forward open."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntFlag
from typing import ClassVar

from logixcip.services import CIPService


class ServiceCapabilityFlags(IntFlag):
    """Capability bits reported by the list-services reply."""

    CIP_ENCAPSULATION = 1 << 5
    SUPPORTS_CLASS1_UDP = 1 << 8


def _unpack(fmt: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < fmt.size:
        raise ValueError(f"{what} needs {fmt.size} bytes, got {len(data)}")
    return fmt.unpack_from(data)


def _path_after(size: int, words: int, data: bytes, what: str) -> bytes:
    end = size + words * 2
    if len(data) < end:
        raise ValueError(f"{what} path needs {words * 2} bytes, got {max(len(data) - size, 0)}")
    return bytes(data[size:end])


@dataclass(frozen=True)
class ListServicesReply:
    """Reply to a list-services request."""

    count: int = 1
    type_code: int = 0x0100
    length: int = 10
    version: int = 1
    cap_flags: ServiceCapabilityFlags = (
        ServiceCapabilityFlags.CIP_ENCAPSULATION | ServiceCapabilityFlags.SUPPORTS_CLASS1_UDP
    )
    name: bytes = b"Communications  "

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<HHHHH16s")

    def pack(self) -> bytes:
        """Little-endian wire form; the name is padded or cut to 16 bytes."""
        return self._FORMAT.pack(
            self.count,
            self.type_code,
            self.length,
            self.version,
            int(self.cap_flags),
            self.name,
        )


@dataclass(frozen=True)
class _ForwardOpenFields:
    service: CIPService
    path_size: int
    class_type: int
    class_code: int
    instance_type: int
    instance: int
    priority: int
    timeout_ticks: int
    ot_connection_id: int
    to_connection_id: int
    connection_serial_number: int
    vendor_id: int
    originator_serial_number: int
    multiplier: int
    ot_rpi: int
    ot_network_conn_params: int
    to_rpi: int
    to_network_conn_params: int
    transport_trigger: int
    conn_path_size: int

    _FORMAT: ClassVar[struct.Struct]
    _WHAT: ClassVar[str]

    @classmethod
    def _from_bytes(cls, data: bytes):
        values = list(_unpack(cls._FORMAT, data, cls._WHAT))
        values[0] = CIPService(values[0])
        return cls(*values)

    def _path(self, data: bytes) -> bytes:
        return _path_after(self._FORMAT.size, self.conn_path_size, data, self._WHAT)


@dataclass(frozen=True)
class ForwardOpenStandard(_ForwardOpenFields):
    """A forward-open request with 16-bit network connection parameters.

    O means originator and T target, so ``ot_*`` is originator to target.
    """

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<8BIIHHIIIHIHBB")
    _WHAT: ClassVar[str] = "forward open"
    SIZE: ClassVar[int] = _FORMAT.size

    @classmethod
    def unpack(cls, data: bytes) -> "ForwardOpenStandard":
        """Parse the fixed part from the start of ``data``."""
        return cls._from_bytes(data)

    def connection_path(self, data: bytes) -> bytes:
        """The connection path following the fixed part in the same ``data``."""
        return self._path(data)


@dataclass(frozen=True)
class ForwardOpenLarge(_ForwardOpenFields):
    """A large forward-open request with 32-bit network connection parameters."""

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<8BIIHHIIIIIIBB")
    _WHAT: ClassVar[str] = "large forward open"
    SIZE: ClassVar[int] = _FORMAT.size

    @classmethod
    def unpack(cls, data: bytes) -> "ForwardOpenLarge":
        """Parse the fixed part from the start of ``data``."""
        return cls._from_bytes(data)

    def connection_path(self, data: bytes) -> bytes:
        """The connection path following the fixed part in the same ``data``."""
        return self._path(data)


@dataclass(frozen=True)
class ForwardOpenReply:
    """Successful reply to a forward open."""

    service: CIPService
    ot_connection_id: int
    to_connection_id: int
    connection_serial_number: int
    vendor_id: int
    originator_serial_number: int
    ot_api: int = 0
    to_api: int = 0
    status: int = 0
    additional_status_size: int = 0
    application_reply_size: int = 0
    reserved: int = field(default=0)

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<BBBBIIHHIIIBB")
    SIZE: ClassVar[int] = _FORMAT.size

    def pack(self) -> bytes:
        """Little-endian wire form."""
        try:
            return self._FORMAT.pack(
                int(self.service),
                0,
                self.status,
                self.additional_status_size,
                self.ot_connection_id,
                self.to_connection_id,
                self.connection_serial_number,
                self.vendor_id,
                self.originator_serial_number,
                self.ot_api,
                self.to_api,
                self.application_reply_size,
                self.reserved,
            )
        except struct.error as exc:
            raise ValueError(f"cannot pack forward open reply: {exc}") from exc