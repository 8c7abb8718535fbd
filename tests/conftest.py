from __future__ import annotations

import socket
from typing import List

import pytest

from wolpacket import sender


class FakeSocket:
    instances: List["FakeSocket"] = []
    connect_error = None
    send_error = None
    short_write = False

    def __init__(self, family=socket.AF_INET, type=socket.SOCK_DGRAM):
        self.family = family
        self.type = type
        self.options = {}
        self.connected_to = None
        self.writes: List[bytes] = []
        self.closed = False
        FakeSocket.instances.append(self)

    def setsockopt(self, level, name, value):
        self.options[(level, name)] = value

    def connect(self, addr):
        if self.connect_error:
            raise self.connect_error
        self.connected_to = addr

    def send(self, data):
        if self.send_error:
            raise self.send_error
        self.writes.append(bytes(data))
        return len(data) - 1 if self.short_write else len(data)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def fake_socket(monkeypatch):
    FakeSocket.instances = []
    monkeypatch.setattr(sender.socket, "socket", FakeSocket)
    return FakeSocket
