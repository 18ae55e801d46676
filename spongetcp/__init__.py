"""The sending half of a small TCP: byte stream, segments, wrapping sequence numbers and a sender."""

__version__ = "0.1.0"
__all__ = ["wrapping", "segment", "stream", "sender"]