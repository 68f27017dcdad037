"""A UDP DNS server that sends a fixed reply, and RFC 1035 header, name, question and record types."""

__version__ = "0.1.0"
__all__ = ["__version__"]