"""A UDP DNS server that answers every query with a fixed reply."""

from __future__ import annotations

import argparse
import socket
import sys

from .dns_class import DnsClass
from .domain_name import DomainName
from .header import DnsHeader, QRIndicator, ResponseCode
from .question import DnsQuestion
from .record_type import RecordType

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2053
PACKET_SIZE = 512


def build_response() -> bytes:
    """Build the fixed 512-byte reply: a header and one question, zero padded."""
    header = DnsHeader(
        packet_identifier=1234,
        query_response_indicator=QRIndicator.REPLY,
        operation_code=0,
        authoritative_answer=False,
        truncation=False,
        recursion_desired=False,
        recursion_available=False,
        reserved=0,
        response_code=ResponseCode.NO_ERROR,
        question_count=1,
        answer_record_count=0,
        authority_record_count=0,
        additional_record_count=0,
    )
    question = DnsQuestion(
        domain_name=DomainName(
            wire_format=b"\x0ccodecrafters\x02io\x00",
            label_segments=("codecrafters", "io"),
        ),
        record_type=RecordType.A,
        dns_class=DnsClass.IN,
    )
    body = header.to_bytes() + question.to_bytes()
    return body.ljust(PACKET_SIZE, b"\x00")


def serve(host: str, port: int) -> None:
    """Bind a UDP socket and answer each datagram with the fixed reply.

    Runs until receiving or sending fails; the OSError is then raised.
    """
    print("Logs from your program will appear here!")
    response = build_response()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((host, port))
        while True:
            try:
                data, source = sock.recvfrom(PACKET_SIZE)
            except OSError as exc:
                print(f"Error receiving data: {exc}", file=sys.stderr)
                raise
            print(f"Received {len(data)} bytes from {source[0]}:{source[1]}")
            sock.sendto(response, source)


def main(argv: list[str] | None = None) -> int:
    """Run the server; report an error and return 1 if it stops."""
    parser = argparse.ArgumentParser(description="Answer DNS queries over UDP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port)
    except OSError as exc:
        print(f"Server error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())