from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import EncodingError
from .mac import HardwareAddress, parse_mac
from .sender import send_packet

HEADER = b"\xff" * 6
REPEAT = 16
PACKET_SIZE = len(HEADER) + REPEAT * 6


@dataclass(frozen=True)
class MagicPacket:
    """6 bytes of 0xFF followed by 16 copies of the destination MAC."""

    header: bytes
    payload: Tuple[HardwareAddress, ...]

    @property
    def mac(self) -> HardwareAddress:
        return self.payload[0]

    def to_bytes(self) -> bytes:
        return serialize(self)

    def __bytes__(self) -> bytes:
        return serialize(self)

    def send(self, ip: str, port: int) -> None:
        send_packet(serialize(self), ip, port)


def build(addr: HardwareAddress) -> MagicPacket:
    return MagicPacket(header=HEADER, payload=(addr,) * REPEAT)


def serialize(packet: MagicPacket) -> bytes:
    buf = bytearray(packet.header)
    for addr in packet.payload:
        buf += bytes(addr)
    if len(buf) != PACKET_SIZE:
        raise EncodingError("serialize", f"packet is {len(buf)} bytes, expected {PACKET_SIZE}")
    return bytes(buf)


def new(mac: str) -> MagicPacket:
    """Validate ``mac`` and build its magic packet."""
    return build(parse_mac(mac))
