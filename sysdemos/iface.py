"""Listing network interfaces with their state, address and netmask."""

from __future__ import annotations

import argparse
import contextlib
import fcntl
import socket
import struct
from dataclasses import dataclass
from typing import Sequence

SIOCGIFFLAGS = 0x8913
SIOCGIFADDR = 0x8915
SIOCGIFNETMASK = 0x891B
IFF_UP = 0x1
IFNAMSIZ = 16
_IFREQ_SIZE = 40


@dataclass(frozen=True)
class InterfaceInfo:
    """One network interface as shown by the listing."""

    name: str
    index: int
    up: bool
    address: str | None = None
    netmask: str | None = None


def _ifreq(name: str, request: int) -> bytes:
    encoded = name.encode()
    if not encoded or len(encoded) >= IFNAMSIZ:
        raise ValueError(f"invalid interface name: {name!r}")
    request_buf = bytearray(encoded.ljust(_IFREQ_SIZE, b"\0"))
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_DGRAM)) as sock:
        fcntl.ioctl(sock.fileno(), request, request_buf)
    return bytes(request_buf)


def interface_state(name: str) -> bool:
    """True when the interface is up; OSError when it cannot be queried."""
    raw = _ifreq(name, SIOCGIFFLAGS)
    (flags,) = struct.unpack_from("@h", raw, IFNAMSIZ)
    return bool(flags & IFF_UP)


def _ipv4_field(name: str, request: int) -> str | None:
    try:
        raw = _ifreq(name, request)
    except OSError:
        return None
    return socket.inet_ntoa(raw[IFNAMSIZ + 4 : IFNAMSIZ + 8])


def interface_address(name: str) -> str | None:
    """IPv4 address of the interface, or None when it has none."""
    return _ipv4_field(name, SIOCGIFADDR)


def interface_netmask(name: str) -> str | None:
    """IPv4 netmask of the interface, or None when it has none."""
    return _ipv4_field(name, SIOCGIFNETMASK)


def list_interfaces() -> list[InterfaceInfo]:
    """All interfaces in index order, with their state, address and netmask."""
    result = []
    for index, name in sorted(socket.if_nameindex()):
        try:
            up = interface_state(name)
        except OSError:
            up = False
        result.append(InterfaceInfo(name, index, up, interface_address(name), interface_netmask(name)))
    return result


def format_interface(info: InterfaceInfo) -> str:
    """Two ifconfig-like lines and a blank line for one interface."""
    state = "Up" if info.up else "Down"
    address = info.address or "none"
    netmask = info.netmask or "none"
    return (
        f"{info.name:<10}  Index: {info.index}  State: {state}\n"
        f"{' ':<10}  Addr: {address}  Mask: {netmask}\n\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List network interfaces.")
    parser.parse_args(argv)
    for info in list_interfaces():
        print(format_interface(info), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())