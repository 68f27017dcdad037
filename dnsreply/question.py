"""The question section entry of a DNS message."""

from __future__ import annotations

from dataclasses import dataclass

from .dns_class import DnsClass
from .domain_name import DomainName
from .record_type import RecordType


@dataclass(frozen=True)
class DnsQuestion:
    """A name to look up, with the record type and class asked for."""

    domain_name: DomainName
    record_type: RecordType
    dns_class: DnsClass

    @classmethod
    def parse(cls, packet: bytes) -> DnsQuestion:
        """Parse a question from the start of ``packet``.

        Raises ValueError if the name, type or class cannot be read.
        """
        domain_name = DomainName.parse(packet)
        name_len = len(domain_name.wire_format)
        record_type = RecordType.from_packet(packet, name_len)
        dns_class = DnsClass.from_packet(packet, name_len)
        return cls(domain_name, record_type, dns_class)

    def to_bytes(self) -> bytes:
        """Serialize to wire format: name, then TYPE and CLASS big-endian."""
        return (
            self.domain_name.wire_format
            + int(self.record_type).to_bytes(2, "big")
            + int(self.dns_class).to_bytes(2, "big")
        )