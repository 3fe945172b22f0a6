"""
Canonical IP and port helpers for dashtx.
One internal type (IPv6) everywhere; map IPv4 -> v6-mapped at edges.
Ports are held as plain ints and only flipped to network byte order at the wire.
"""

from __future__ import annotations

import ipaddress as _ip
from io import BytesIO

from dashtx.core import read_stream, read_big_int, PROTX, WriteError

__all__ = ["normalize", "to_display", "read_ip16", "write_ip16", "read_port", "write_port", "IPLike"]

IPLike = str | bytes | _ip.IPv4Address | _ip.IPv6Address


def normalize(ip: IPLike) -> _ip.IPv6Address:
    """
    Return an IPv6Address. IPv4 is mapped to ::ffff:W.X.Y.Z.
    Accepts str/bytes/IPv4Address/IPv6Address.
    """
    if isinstance(ip, _ip.IPv6Address):
        return ip
    if isinstance(ip, _ip.IPv4Address):
        return _ip.IPv6Address(b"\x00" * 10 + b"\xff\xff" + ip.packed)

    # Bytes -> recurse
    if isinstance(ip, (bytes, bytearray, memoryview)):
        b = bytes(ip)
        if len(b) == 16:
            return _ip.IPv6Address(b)
        if len(b) == 4:
            return normalize(_ip.IPv4Address(b))
        raise ValueError("IP bytes must be length 4 or 16")

    # Strings -> recurse
    if isinstance(ip, str):
        return normalize(_ip.ip_address(ip.strip().strip("[]")))

    raise TypeError(f"Unsupported IP input type: {type(ip)}")


def to_display(ip: IPLike) -> str:
    """Human-friendly string: dotted-quad for mapped v4; compressed for native v6."""
    ip6 = normalize(ip)
    return str(ip6.ipv4_mapped) if ip6.ipv4_mapped else str(ip6)


def read_ip16(stream: BytesIO) -> _ip.IPv6Address:
    """Read exactly 16 bytes from stream and return IPv6Address."""
    return _ip.IPv6Address(read_stream(stream, PROTX.IP_ADDRESS, "ip address"))


def write_ip16(ip: IPLike) -> bytes:
    """16-byte network-order representation."""
    return normalize(ip).packed


def write_port(port: int) -> bytes:
    """
    Ports are the one big-endian integer in an otherwise little-endian payload
    """
    if not 0 <= port <= 0xffff:
        raise WriteError(f"Port {port} out of range")
    return port.to_bytes(PROTX.PORT, "big")


def read_port(stream: BytesIO) -> int:
    """Inverse of write_port"""
    return read_big_int(stream, PROTX.PORT, "port")
