"""Domain names in DNS wire format (length-prefixed labels)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DomainName:
    """A domain name held both as wire bytes and as its labels."""

    wire_format: bytes
    label_segments: tuple[str, ...]

    @classmethod
    def parse(cls, packet: bytes) -> DomainName:
        """Parse a name from the start of ``packet``; trailing bytes are ignored.

        Raises ValueError if the packet is empty or the name is not terminated.
        """
        if not packet:
            raise ValueError("empty packet")

        wire = bytearray()
        labels: list[str] = []
        expected: int | None = None
        label = bytearray()

        for byte in packet:
            wire.append(byte)
            if expected is None:
                if byte == 0:
                    break
                expected = byte
            else:
                label.append(byte)
                if len(label) == expected:
                    labels.append(label.decode("latin-1"))
                    label.clear()
                    expected = None

        if expected is not None or wire[-1] != 0:
            raise ValueError("domain name is not terminated")
        return cls(bytes(wire), tuple(labels))

    def __str__(self) -> str:
        return ".".join(self.label_segments)