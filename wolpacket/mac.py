from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidFormat

MAC_DELIMS = ":-"
MAC_RE = re.compile(r"([0-9a-fA-F]{2}[" + MAC_DELIMS + r"]){5}([0-9a-fA-F]{2})")

# Byte lengths a generic link-layer address may have: MAC-48, EUI-64, IPoIB.
_HW_LENGTHS = (6, 8, 20)
_HEX = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class HardwareAddress:
    """A 6 byte IEEE 802 MAC-48 address."""

    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != 6:
            raise InvalidFormat("HardwareAddress", f"expected 6 bytes, got {len(self.octets)}")

    def __bytes__(self) -> bytes:
        return self.octets

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self.octets)

    def hex(self) -> str:
        return self.octets.hex()


def _hex_groups(text: str, width: int, sep: str) -> bytes:
    groups = text.split(sep)
    if any(len(g) != width or not set(g) <= _HEX for g in groups):
        raise ValueError("bad hex group")
    return bytes.fromhex("".join(groups))


def parse_hardware_addr(text: str) -> bytes:
    """Parse any link-layer address in colon, hyphen or dotted notation.

    Accepts 6, 8 or 20 byte addresses, e.g. ``00:00:5e:00:53:01``,
    ``00-00-5e-00-53-01``, ``0000.5e00.5301`` or the 8 byte EUI-64 forms.
    The separator is taken from the first one found and must not change.
    """
    if len(text) < 14:
        raise InvalidFormat("parse_mac.generic", f"invalid MAC address {text!r}")

    if text[2] in MAC_DELIMS:
        width, sep = 2, text[2]
    elif text[4] == ".":
        width, sep = 4, "."
    else:
        raise InvalidFormat("parse_mac.generic", f"invalid MAC address {text!r}")

    try:
        raw = _hex_groups(text, width, sep)
    except ValueError:
        raise InvalidFormat("parse_mac.generic", f"invalid MAC address {text!r}") from None

    if len(raw) not in _HW_LENGTHS:
        raise InvalidFormat("parse_mac.generic", f"invalid MAC address {text!r}")
    return raw


def parse_mac(text: str) -> HardwareAddress:
    raw = parse_hardware_addr(text)
    # The generic parser also takes EUI-64 and InfiniBand addresses.
    if not MAC_RE.fullmatch(text):
        raise InvalidFormat("parse_mac.strict", f"{text!r} is not a IEEE 802 MAC-48 address")
    return HardwareAddress(raw[:6])
