from __future__ import annotations


class MagicPacketError(Exception):
    """Base error. ``op`` names the operation that failed."""

    def __init__(self, op: str, message: str) -> None:
        super().__init__(f"{op}: {message}")
        self.op = op
        self.message = message


class InvalidFormat(MagicPacketError, ValueError):
    pass


class EncodingError(MagicPacketError):
    pass


class AddressResolutionError(MagicPacketError):
    pass


class ConnectError(MagicPacketError):
    pass


class WriteError(MagicPacketError):
    pass
