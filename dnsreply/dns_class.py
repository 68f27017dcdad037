"""DNS CLASS values (RFC 1035, section 3.2.4)."""

from __future__ import annotations

from enum import IntEnum


class DnsClass(IntEnum):
    """The CLASS field of a DNS question or resource record."""

    IN = 1
    CS = 2
    CH = 3
    HS = 4

    @classmethod
    def from_packet(cls, packet: bytes, domain_name_len: int) -> DnsClass:
        """Read the big-endian CLASS that follows the name and the TYPE field.

        Raises ValueError if the packet is too short or the value is unknown.
        """
        start = domain_name_len + 2
        field = packet[start : start + 2]
        if len(field) != 2:
            raise ValueError("packet too short for class")
        return cls(int.from_bytes(field, "big"))