import random
from ipaddress import IPv4Address, IPv6Address

import pytest

from fakedata.core import fake
from fakedata.net import IpAddress, SocketAddrV4, SocketAddrV6


def test_ipv4_reproducible():
    first = fake(IPv4Address, rng=random.Random(1))
    assert first == fake(IPv4Address, rng=random.Random(1))
    assert first.version == 4


def test_ipv6_reproducible():
    first = fake(IPv6Address, rng=random.Random(2))
    assert first == fake(IPv6Address, rng=random.Random(2))
    assert first.version == 6


def test_ip_address_both_versions():
    rng = random.Random(3)
    versions = {fake(IpAddress, rng=rng).version for _ in range(60)}
    assert versions == {4, 6}


def test_socket_v4_fields():
    rng = random.Random(4)
    for _ in range(20):
        addr = fake(SocketAddrV4, rng=rng)
        assert addr.ip.version == 4
        assert 0 <= addr.port <= 65535
        assert str(addr).endswith(f":{addr.port}")


def test_socket_v6_fields():
    rng = random.Random(5)
    for _ in range(20):
        addr = fake(SocketAddrV6, rng=rng)
        assert addr.ip.version == 6
        assert 0 <= addr.port <= 65535
        assert 0 <= addr.flowinfo < 2**32
        assert 0 <= addr.scope_id < 2**32


def test_socket_v4_str():
    assert str(SocketAddrV4(IPv4Address("127.0.0.1"), 8080)) == "127.0.0.1:8080"


def test_socket_v6_str():
    assert str(SocketAddrV6(IPv6Address("::1"), 8080)) == "[::1]:8080"
    assert str(SocketAddrV6(IPv6Address("::1"), 8080, 0, 3)) == "[::1%3]:8080"


def test_socket_port_out_of_range():
    with pytest.raises(ValueError):
        SocketAddrV4(IPv4Address("127.0.0.1"), 70000)


def test_socket_wrong_ip_type():
    with pytest.raises(TypeError):
        SocketAddrV6(IPv4Address("127.0.0.1"), 80)