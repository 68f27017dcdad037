import pytest

from dnsreply.answer_record import DnsAnswerRecord, RData
from dnsreply.dns_class import DnsClass
from dnsreply.domain_name import DomainName
from dnsreply.record_type import RecordType


def test_rdata_too_short_slice_fails():
    with pytest.raises(ValueError):
        RData.parse(bytes([0x08, 0x08]))


def test_rdata_fewer_bytes_than_announced_fails():
    with pytest.raises(ValueError):
        RData.parse(bytes([0x00, 0x02, 0x08]))


def test_rdata_ipv4_address():
    assert RData.parse(bytes([0x00, 0x04, 0x08, 0x08, 0x08, 0x08])) == RData(
        bytes([0x08, 0x08, 0x08, 0x08])
    )


def test_rdata_ignores_trailing_bytes():
    parsed = RData.parse(bytes([0x00, 0x02, 0x01, 0x02, 0x03, 0x04]))
    assert parsed.data == bytes([0x01, 0x02])


def test_rdata_empty_slice_fails():
    with pytest.raises(ValueError):
        RData.parse(b"")


def test_answer_record_holds_fields():
    name = DomainName.parse(bytes([0x06]) + b"google" + bytes([0x03]) + b"com" + b"\x00")
    rdata = RData.parse(bytes([0x00, 0x04, 0x08, 0x08, 0x08, 0x08]))
    record = DnsAnswerRecord(
        domain_name=name,
        record_type=RecordType.A,
        dns_class=DnsClass.IN,
        time_to_live=60,
        r_data_length=len(rdata.data),
        r_data=rdata,
    )
    assert str(record.domain_name) == "google.com"
    assert record.r_data_length == 4
    assert record == DnsAnswerRecord(name, RecordType.A, DnsClass.IN, 60, 4, rdata)