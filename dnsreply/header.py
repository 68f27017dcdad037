"""The fixed 12-byte DNS message header (RFC 1035, section 4.1.1)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

HEADER_SIZE = 12
_HEADER = struct.Struct(">H2sHHHH")


class QRIndicator(IntEnum):
    """Whether a message is a query or a reply."""

    QUESTION = 0
    REPLY = 1

    @classmethod
    def from_byte(cls, byte: int) -> QRIndicator:
        """Zero is a question; any other value is a reply."""
        return cls.QUESTION if byte == 0 else cls.REPLY


class ResponseCode(IntEnum):
    """DNS response codes."""

    NO_ERROR = 0
    FORMAT_ERROR = 1
    SERVER_FAILURE = 2
    NAME_ERROR = 3
    NOT_IMPLEMENTED = 4
    REFUSED = 5

    @classmethod
    def from_byte(cls, byte: int) -> ResponseCode:
        """Map a value to its code; unknown values become FORMAT_ERROR."""
        try:
            return cls(byte)
        except ValueError:
            return cls.FORMAT_ERROR


@dataclass
class DnsHeader:
    """A DNS message header."""

    packet_identifier: int
    query_response_indicator: QRIndicator
    operation_code: int
    authoritative_answer: bool
    truncation: bool
    recursion_desired: bool
    recursion_available: bool
    reserved: int
    response_code: ResponseCode
    question_count: int
    answer_record_count: int
    authority_record_count: int
    additional_record_count: int

    def flags_bytes(self) -> bytes:
        """Pack the flags: QR|Opcode|AA|TC|RD, then RA|Z|RCODE."""
        first = (
            (int(self.query_response_indicator) << 7)
            | (self.operation_code << 3)
            | (int(self.authoritative_answer) << 2)
            | (int(self.truncation) << 1)
            | int(self.recursion_desired)
        ) & 0xFF
        second = (
            (int(self.recursion_available) << 7)
            | (self.reserved << 4)
            | int(self.response_code)
        ) & 0xFF
        return bytes([first, second])

    def to_bytes(self) -> bytes:
        """Serialize to the 12-byte wire format."""
        return _HEADER.pack(
            self.packet_identifier,
            self.flags_bytes(),
            self.question_count,
            self.answer_record_count,
            self.authority_record_count,
            self.additional_record_count,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> DnsHeader:
        """Deserialize a header from exactly 12 bytes."""
        if len(data) != HEADER_SIZE:
            raise ValueError(f"DNS header must be {HEADER_SIZE} bytes, got {len(data)}")
        ident, flags, qd, an, ns, ar = _HEADER.unpack(data)
        first, second = flags
        return cls(
            packet_identifier=ident,
            query_response_indicator=QRIndicator.from_byte(first & 0b1000_0000),
            operation_code=(first & 0b0111_1000) >> 3,
            authoritative_answer=bool(first & 0b0000_0100),
            truncation=bool(first & 0b0000_0010),
            recursion_desired=bool(first & 0b0000_0001),
            recursion_available=bool(second & 0b1000_0000),
            reserved=(second & 0b0111_0000) >> 4,
            response_code=ResponseCode.from_byte(second & 0b0000_1111),
            question_count=qd,
            answer_record_count=an,
            authority_record_count=ns,
            additional_record_count=ar,
        )