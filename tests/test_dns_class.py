import pytest

from dnsreply.dns_class import DnsClass

PACKET = bytes(
    [
        0x03, 0x77, 0x77, 0x77,
        0x06, 0x67, 0x6F, 0x6F, 0x67, 0x6C, 0x65,
        0x03, 0x63, 0x6F, 0x6D,
        0x00,
        0x00, 0x01,
        0x00, 0x01,
    ]
)


@pytest.mark.parametrize(
    "value, expected",
    [(1, DnsClass.IN), (2, DnsClass.CS), (3, DnsClass.CH), (4, DnsClass.HS)],
)
def test_class_conversion(value, expected):
    assert DnsClass(value) is expected


@pytest.mark.parametrize("value", [0, 5, 123])
def test_class_conversion_errors(value):
    with pytest.raises(ValueError):
        DnsClass(value)


def test_class_from_packet_too_short():
    with pytest.raises(ValueError):
        DnsClass.from_packet(bytes([0x00, 0x01]), 1)


def test_class_from_packet():
    assert DnsClass.from_packet(PACKET, 16) is DnsClass.IN


def test_class_from_packet_unknown_value():
    with pytest.raises(ValueError):
        DnsClass.from_packet(bytes([0x00, 0x01, 0x00, 0x09]), 0)