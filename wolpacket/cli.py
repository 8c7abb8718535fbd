from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .config import DEFAULT_BROADCAST, DEFAULT_PORT, ConfigError, Host, load_hosts
from .errors import MagicPacketError
from .logs import setup_logging
from .packet import new

logger = logging.getLogger("wolpacket.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="wolpacket", description="Send a Wake-on-LAN magic packet")
    p.add_argument("targets", nargs="+", metavar="TARGET", help="MAC address, or host name from --hosts")
    p.add_argument("-i", "--ip", help=f"destination address (default {DEFAULT_BROADCAST})")
    p.add_argument("-p", "--port", type=int, help=f"destination UDP port (default {DEFAULT_PORT})")
    p.add_argument("--hosts", type=Path, help="hosts.yml with named hosts")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def wake(target: str, hosts: Dict[str, Host], ip: Optional[str], port: Optional[int]) -> bool:
    host = hosts.get(target)
    mac = str(host.mac) if host else target
    dest_ip = ip or (host.broadcast_ip if host else DEFAULT_BROADCAST)
    dest_port = port if port is not None else (host.port if host else DEFAULT_PORT)
    try:
        new(mac).send(dest_ip, dest_port)
    except MagicPacketError as e:
        logger.error("Wake %s failed: %s", target, e)
        return False
    return True


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    hosts: Dict[str, Host] = {}
    if args.hosts is not None:
        try:
            hosts = {h.name: h for h in load_hosts(args.hosts)}
        except ConfigError as e:
            logger.error("%s", e)
            return 2

    ok = True
    for target in args.targets:
        ok = wake(target, hosts, args.ip, args.port) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
