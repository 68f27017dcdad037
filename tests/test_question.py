import pytest

from dnsreply.dns_class import DnsClass
from dnsreply.domain_name import DomainName
from dnsreply.question import DnsQuestion
from dnsreply.record_type import RecordType

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


def test_dns_question_parse():
    assert DnsQuestion.parse(PACKET) == DnsQuestion(
        domain_name=DomainName(
            wire_format=bytes(
                [
                    0x03, 0x77, 0x77, 0x77, 0x06, 0x67, 0x6F, 0x6F, 0x67, 0x6C, 0x65,
                    0x03, 0x63, 0x6F, 0x6D, 0x00,
                ]
            ),
            label_segments=("www", "google", "com"),
        ),
        record_type=RecordType.A,
        dns_class=DnsClass.IN,
    )


def test_dns_question_to_bytes():
    assert DnsQuestion.parse(PACKET).to_bytes() == PACKET


def test_dns_question_missing_class_fails():
    with pytest.raises(ValueError):
        DnsQuestion.parse(PACKET[:-2])


def test_dns_question_unterminated_name_fails():
    with pytest.raises(ValueError):
        DnsQuestion.parse(PACKET[:10])


def test_dns_question_unknown_record_type_fails():
    bad = PACKET[:16] + bytes([0x00, 0x11, 0x00, 0x01])
    with pytest.raises(ValueError):
        DnsQuestion.parse(bad)


def test_dns_question_unknown_class_fails():
    bad = PACKET[:18] + bytes([0x00, 0x05])
    with pytest.raises(ValueError):
        DnsQuestion.parse(bad)