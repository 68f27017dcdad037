# dnsreply

A small DNS server that listens on UDP and answers every datagram with the
same fixed reply. The package also holds the parts needed to read and write
some pieces of a DNS message as RFC 1035 lays them out.

| Module | Contents |
| --- | --- |
| `dnsreply.header` | `DnsHeader`, `QRIndicator`, `ResponseCode` for the 12-byte header |
| `dnsreply.domain_name` | `DomainName` for names made of length-prefixed labels |
| `dnsreply.record_type` | `RecordType`, the TYPE field (A through TXT, values 1–16) |
| `dnsreply.dns_class` | `DnsClass`, the CLASS field (IN, CS, CH, HS) |
| `dnsreply.question` | `DnsQuestion` for one question section entry |
| `dnsreply.answer_record` | `RData` and `DnsAnswerRecord` for resource records |
| `dnsreply.server` | `build_response()`, `serve(host, port)`, `main()` |

## Installing

```
pip install .
```

## Running the server

```
dnsreply
dnsreply --host 0.0.0.0 --port 5353
```

By default the server binds to `127.0.0.1:2053`. It prints a line for each
datagram it receives and sends back a 512-byte reply. That reply holds a
header with ID 1234, the QR bit set and a question count of 1. After the
header comes one question for `codecrafters.io`, type A, class IN. The rest
of the reply is zero bytes.

If a socket error stops the server, the command prints `Server error: ...` to
standard error and exits with status 1.

## Using the library

```python
from dnsreply.header import DnsHeader
from dnsreply.question import DnsQuestion

header = DnsHeader.from_bytes(packet[:12])
question = DnsQuestion.parse(packet[12:])
print(header.packet_identifier, question.domain_name, question.record_type)

encoded = question.to_bytes()
assert encoded == packet[12:12 + len(encoded)]
```

- `DnsHeader.from_bytes` takes exactly 12 bytes. `to_bytes` writes them back
  out, and `flags_bytes` gives the two packed flag bytes on their own.
- `QRIndicator.from_byte` treats 0 as a question and any other value as a
  reply. `ResponseCode.from_byte` maps any unknown value to `FORMAT_ERROR`.
- `DomainName.parse` reads a name from the start of a buffer and ignores any
  bytes after the terminating zero. `str(name)` joins the labels with dots.
- `RecordType.from_packet` and `DnsClass.from_packet` read the TYPE and CLASS
  fields that follow a name of a given wire length.
- `RData.parse` reads a two-byte big-endian length and then that many bytes.

The parsers raise `ValueError` for malformed input. This covers an empty
buffer, a name with no terminating zero byte, a buffer too short for the
field being read, an unknown record type or class, and resource data shorter
than its length field says.

`dnsreply.server.build_response()` returns the reply bytes without opening a
socket. `dnsreply.server.serve(host, port)` runs the receive-and-reply loop
on any address. It raises `OSError` when receiving or sending fails.

## What it does not do

- The server does not read the queries it receives. Every datagram gets the
  same reply, whatever its ID or the name it asks about.
- The server sends no answer records and does no lookups, recursion or
  forwarding.
- `DnsAnswerRecord` only holds parsed values. It cannot parse a whole record
  from a packet or serialize one.
- Compressed names (pointers) are not understood. Only one question is parsed
  at a time, and the package has no parser for a full message.

## Tests

```
pip install .[test]
pytest
```