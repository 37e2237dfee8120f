"""Generators for IP addresses and socket addresses."""

from __future__ import annotations

import random
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

from .core import FAKER, Faker, fake, register
from .primitives import IntType

IpAddress = IPv4Address | IPv6Address


@dataclass(frozen=True)
class SocketAddrV4:
    """An IPv4 address with a port."""

    ip: IPv4Address
    port: int

    def __post_init__(self) -> None:
        if not isinstance(self.ip, IPv4Address):
            raise TypeError("ip must be an IPv4Address")
        IntType.U16.check(self.port)

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


@dataclass(frozen=True)
class SocketAddrV6:
    """An IPv6 address with a port, flow information and scope id."""

    ip: IPv6Address
    port: int
    flowinfo: int = 0
    scope_id: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.ip, IPv6Address):
            raise TypeError("ip must be an IPv6Address")
        IntType.U16.check(self.port)
        IntType.U32.check(self.flowinfo)
        IntType.U32.check(self.scope_id)

    def __str__(self) -> str:
        if self.scope_id:
            return f"[{self.ip}%{self.scope_id}]:{self.port}"
        return f"[{self.ip}]:{self.port}"


@register(IPv4Address, Faker)
def _ipv4(target: type, config: Faker, rng: random.Random) -> IPv4Address:
    return IPv4Address(bytes(fake(IntType.U8, FAKER, rng) for _ in range(4)))


@register(IPv6Address, Faker)
def _ipv6(target: type, config: Faker, rng: random.Random) -> IPv6Address:
    groups = (fake(IntType.U16, FAKER, rng) for _ in range(8))
    return IPv6Address(b"".join(group.to_bytes(2, "big") for group in groups))


@register(IpAddress, Faker)
def _ip(target: object, config: Faker, rng: random.Random) -> IPv4Address | IPv6Address:
    if fake(bool, FAKER, rng):
        return fake(IPv4Address, FAKER, rng)
    return fake(IPv6Address, FAKER, rng)


@register(SocketAddrV4, Faker)
def _socket_v4(target: type, config: Faker, rng: random.Random) -> SocketAddrV4:
    ip = fake(IPv4Address, FAKER, rng)
    port = fake(IntType.U16, FAKER, rng)
    return SocketAddrV4(ip, port)


@register(SocketAddrV6, Faker)
def _socket_v6(target: type, config: Faker, rng: random.Random) -> SocketAddrV6:
    ip = fake(IPv6Address, FAKER, rng)
    port = fake(IntType.U16, FAKER, rng)
    flowinfo = fake(IntType.U32, FAKER, rng)
    scope_id = fake(IntType.U32, FAKER, rng)
    return SocketAddrV6(ip, port, flowinfo, scope_id)