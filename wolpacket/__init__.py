"""Wake-on-LAN magic packets: parse a MAC, build the packet, send it."""

from .errors import (
    AddressResolutionError,
    ConnectError,
    EncodingError,
    InvalidFormat,
    MagicPacketError,
    WriteError,
)
from .mac import HardwareAddress, parse_mac
from .packet import MagicPacket, build, new, serialize
from .sender import send_packet

__all__ = [
    "AddressResolutionError",
    "ConnectError",
    "EncodingError",
    "HardwareAddress",
    "InvalidFormat",
    "MagicPacket",
    "MagicPacketError",
    "WriteError",
    "build",
    "new",
    "parse_mac",
    "send_packet",
    "serialize",
]
