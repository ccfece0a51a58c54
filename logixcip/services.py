"""CIP service codes and encapsulation command codes."""

from __future__ import annotations

from enum import IntEnum

_RESPONSE_BIT = 0b1000_0000

# (attribute name, service code, printable label or None when it has none)
_SERVICES: tuple[tuple[str, int, str | None], ...] = (
    ("GET_ATTRIBUTE_ALL", 0x01, "cipService_GetAttributeAll"),
    ("SET_ATTRIBUTE_ALL", 0x02, "cipService_SetAttributeAll"),
    ("GET_ATTRIBUTE_LIST", 0x03, "cipService_GetAttributeList"),
    ("SET_ATTRIBUTE_LIST", 0x04, "cipService_SetAttributeList"),
    ("RESET", 0x05, "cipService_Reset"),
    ("START", 0x06, "cipService_Start"),
    ("STOP", 0x07, "cipService_Stop"),
    ("CREATE", 0x08, "cipService_Create"),
    ("DELETE", 0x09, "cipService_Delete"),
    ("MULTIPLE_SERVICE", 0x0A, "cipService_MultipleService"),
    ("APPLY_ATTRIBUTES", 0x0D, "cipService_ApplyAttributes"),
    ("GET_ATTRIBUTE_SINGLE", 0x0E, "cipService_GetAttributeSingle"),
    ("SET_ATTRIBUTE_SINGLE", 0x10, "cipService_SetAttributeSingle"),
    ("FIND_NEXT_OBJECT_INSTANCE", 0x11, "cipService_FindNextObjectInstance"),
    ("ERROR_RESPONSE", 0x14, None),
    ("RESTORE", 0x15, "cipService_Restore"),
    ("SAVE", 0x16, "cipService_Save"),
    ("NOP", 0x17, "cipService_NOP"),
    ("GET_MEMBER", 0x18, "cipService_GetMember"),
    ("SET_MEMBER", 0x19, "cipService_SetMember"),
    ("INSERT_MEMBER", 0x1A, "cipService_InsertMember"),
    ("REMOVE_MEMBER", 0x1B, "cipService_RemoveMember"),
    ("GROUP_SYNC", 0x1C, "cipService_GroupSync"),
    ("GET_MEMBER_LIST", 0x1D, "cipService_GetMemberList"),
    ("GET_INSTANCE_LIST", 0x4B, None),
    ("READ", 0x4C, "cipService_Read"),
    ("WRITE", 0x4D, "cipService_Write"),
    ("FORWARD_CLOSE", 0x4E, "cipService_ForwardClose"),
    ("READ_MOD_WRITE", 0x4E, None),
    ("GET_CONNECTION_OWNER", 0x5A, "cipService_GetConnectionOwner"),
    ("FORWARD_OPEN", 0x54, "cipService_ForwardOpen"),
    ("LARGE_FORWARD_OPEN", 0x5B, "cipService_LargeForwardOpen"),
    ("FRAG_READ", 0x52, "cipService_FragRead"),
    ("FRAG_WRITE", 0x53, "cipService_FragWrite"),
    ("GET_INSTANCE_ATTRIBUTE_LIST", 0x55, "cipService_GetInstanceAttributeList"),
    ("GET_CONNECTION_DATA", 0x57, "cipService_GetConnectionData"),
)

_LABELS: dict[int, str] = {}
for _name, _code, _label in _SERVICES:
    if _label is not None:
        _LABELS.setdefault(_code, _label)


class CIPService(int):
    """A one-byte CIP service code; the top bit marks a response."""

    def __new__(cls, value: int) -> "CIPService":
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"service code {value} does not fit in one byte")
        return super().__new__(cls, value)

    def is_response(self) -> bool:
        """True when the response bit is set."""
        return bool(self & _RESPONSE_BIT)

    def as_response(self) -> "CIPService":
        """The same service with the response bit set."""
        return CIPService(self | _RESPONSE_BIT)

    def un_response(self) -> "CIPService":
        """The same service with the response bit cleared."""
        return CIPService(self & ~_RESPONSE_BIT & 0xFF)

    def __bytes__(self) -> bytes:
        return bytes((int(self),))

    def __str__(self) -> str:
        label = _LABELS.get(int(self))
        if label is not None:
            return label
        return f"unknown service {int(self)}"

    def __repr__(self) -> str:
        return f"CIPService(0x{int(self):02X})"


for _name, _code, _label in _SERVICES:
    setattr(CIPService, _name, CIPService(_code))


class CIPCommand(IntEnum):
    """EtherNet/IP encapsulation commands."""

    NOP = 0x00
    LIST_SERVICES = 0x04
    PCCC_CONNECTED_EXPLICIT = 0x0A
    PCCC_UNCONNECTED_EXPLICIT = 0x0B
    SEND_UNREGISTERED = 0x52
    LIST_IDENTITY = 0x63
    LIST_INTERFACES = 0x64
    REGISTER_SESSION = 0x65
    UNREGISTER_SESSION = 0x66
    SEND_RR_DATA = 0x6F
    SEND_UNIT_DATA = 0x70
    INDICATE_STATUS = 0x72
    CANCEL = 0x73