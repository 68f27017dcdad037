"""DNS resource records as they appear in the answer section."""

from __future__ import annotations

from dataclasses import dataclass

from .dns_class import DnsClass
from .domain_name import DomainName
from .record_type import RecordType

_LENGTH_SIZE = 2


@dataclass(frozen=True)
class RData:
    """The raw RDATA bytes of a resource record."""

    data: bytes

    @classmethod
    def parse(cls, packet_slice: bytes) -> RData:
        """Read a big-endian RDLENGTH followed by that many bytes of RDATA.

        Raises ValueError if the slice is shorter than three bytes or holds
        fewer bytes than RDLENGTH announces.
        """
        if len(packet_slice) < _LENGTH_SIZE + 1:
            raise ValueError("packet slice too short for resource data")
        length = int.from_bytes(packet_slice[:_LENGTH_SIZE], "big")
        data = bytes(packet_slice[_LENGTH_SIZE : _LENGTH_SIZE + length])
        if len(data) != length:
            raise ValueError(
                f"resource data announces {length} bytes, only {len(data)} present"
            )
        return cls(data)


@dataclass(frozen=True)
class DnsAnswerRecord:
    """A single resource record of a DNS answer."""

    domain_name: DomainName
    record_type: RecordType
    dns_class: DnsClass
    time_to_live: int
    r_data_length: int
    r_data: RData