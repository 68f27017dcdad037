"""DNS record TYPE values (RFC 1035, section 3.2.2)."""

from __future__ import annotations

from enum import IntEnum


class RecordType(IntEnum):
    """The TYPE field of a DNS question or resource record."""

    A = 1
    NS = 2
    MD = 3
    MF = 4
    CNAME = 5
    SOA = 6
    MB = 7
    MG = 8
    MR = 9
    NULL = 10
    WKS = 11
    PTR = 12
    HINFO = 13
    MINFO = 14
    MX = 15
    TXT = 16

    @classmethod
    def from_packet(cls, packet: bytes, domain_name_len: int) -> RecordType:
        """Read the big-endian TYPE that follows a domain name of the given length.

        Raises ValueError if the packet is too short or the value is unknown.
        """
        field = packet[domain_name_len : domain_name_len + 2]
        if len(field) != 2:
            raise ValueError("packet too short for record type")
        return cls(int.from_bytes(field, "big"))