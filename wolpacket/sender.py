from __future__ import annotations

import logging
import socket
from typing import Tuple

from .errors import AddressResolutionError, ConnectError, WriteError

logger = logging.getLogger("wolpacket.sender")


def _destination(host: str, port: int) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def resolve(host: str, port: int) -> Tuple[int, tuple]:
    """Return (family, sockaddr) of the first UDP address for host:port."""
    # getaddrinfo wraps ports past 65535 instead of failing.
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 65535:
        raise AddressResolutionError("socket.getaddrinfo", f"invalid port {port!r} for {_destination(host, port)}")
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    except (OSError, UnicodeError, OverflowError) as e:
        raise AddressResolutionError("socket.getaddrinfo", f"{_destination(host, port)}: {e}") from e
    if not infos:
        raise AddressResolutionError("socket.getaddrinfo", f"no address for {_destination(host, port)}")
    family, _, _, _, sockaddr = infos[0]
    return family, sockaddr


def send_packet(data: bytes, host: str, port: int) -> None:
    """Send ``data`` as one UDP datagram to host:port.

    Fire and forget: nothing is read back and nothing is retried. The socket
    is closed whatever happens.
    """
    family, sockaddr = resolve(host, port)
    dest = _destination(host, port)

    try:
        s = socket.socket(family, socket.SOCK_DGRAM)
    except OSError as e:
        raise ConnectError("socket.socket", f"{dest}: {e}") from e

    with s:
        try:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            s.connect(sockaddr)
        except OSError as e:
            raise ConnectError("socket.connect", f"{dest}: {e}") from e

        logger.info("Attempting to send a magic packet to MAC %s", data[6:12].hex())
        logger.info("... Broadcasting to: %s", dest)

        try:
            sent = s.send(data)
        except OSError as e:
            raise WriteError("socket.send", f"{dest}: {e}") from e
        if sent != len(data):
            raise WriteError("socket.send", f"{dest}: sent {sent} of {len(data)} bytes")
