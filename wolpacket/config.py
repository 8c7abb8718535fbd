from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from .errors import InvalidFormat
from .mac import HardwareAddress, parse_mac

DEFAULT_BROADCAST = "255.255.255.255"
DEFAULT_PORT = 9


@dataclass(frozen=True)
class Host:
    name: str
    mac: HardwareAddress
    broadcast_ip: str = DEFAULT_BROADCAST
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    tg_token: str
    allowed_ids: List[int]
    log_file: Path
    hosts: List[Host]


class ConfigError(Exception):
    pass


def _parse_host(item: dict) -> Host:
    if not isinstance(item, dict) or "name" not in item or "mac" not in item:
        raise ConfigError(f"Host entries need 'name' and 'mac': {item!r}")
    name = str(item["name"]).strip()
    try:
        mac = parse_mac(str(item["mac"]).strip())
    except InvalidFormat as e:
        raise ConfigError(f"Invalid MAC address for host {name}: {e}") from e

    broadcast_ip = str(item.get("broadcast_ip") or DEFAULT_BROADCAST).strip()
    try:
        port = int(item.get("port", DEFAULT_PORT))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid port for host {name}: {item.get('port')!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range for host {name}: {port}")
    return Host(name=name, mac=mac, broadcast_ip=broadcast_ip, port=port)


def load_hosts(hosts_path: Optional[Path] = None) -> List[Host]:
    """Load the host list from hosts.yml."""
    if hosts_path is None:
        hosts_path = Path("hosts.yml")
    if not hosts_path.exists():
        raise ConfigError(f"Hosts file not found: {hosts_path}")

    try:
        with hosts_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {hosts_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {hosts_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("hosts"), list):
        raise ConfigError("hosts.yml must contain a 'hosts' list")

    hosts: List[Host] = []
    seen = set()
    for item in data["hosts"]:
        host = _parse_host(item)
        if host.name in seen:
            raise ConfigError(f"Duplicate host name: {host.name}")
        seen.add(host.name)
        hosts.append(host)
    return hosts


def load_settings(env_path: Optional[Path] = None, hosts_path: Optional[Path] = None) -> Settings:
    """Load settings from .env and hosts.yml.

    Env vars:
      - TG_TOKEN: Telegram bot token
      - ALLOWED_IDS: comma-separated Telegram user IDs
      - LOG_FILE: path to log file (optional; default ./wolbot.log)
    """
    if env_path is None:
        env_path = Path(".env")
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

    tg_token = os.getenv("TG_TOKEN")
    if not tg_token:
        raise ConfigError("TG_TOKEN is required in environment or .env")

    allowed_ids_raw = os.getenv("ALLOWED_IDS", "")
    try:
        allowed_ids = [int(x) for x in allowed_ids_raw.replace(" ", "").split(",") if x]
    except ValueError as e:
        raise ConfigError("ALLOWED_IDS must be a comma-separated list of integers") from e

    log_file = Path(os.getenv("LOG_FILE", "./wolbot.log"))

    return Settings(
        tg_token=tg_token,
        allowed_ids=allowed_ids,
        log_file=log_file,
        hosts=load_hosts(hosts_path),
    )
