"""TCP header fields and segments as seen by the sender."""

from __future__ import annotations

from dataclasses import dataclass, field

from spongetcp.wrapping import WrappingInt32


@dataclass
class TCPHeader:
    """The fields of a TCP header."""

    sport: int = 0
    dport: int = 0
    seqno: WrappingInt32 = field(default_factory=WrappingInt32)
    ackno: WrappingInt32 = field(default_factory=WrappingInt32)
    doff: int = 5
    urg: bool = False
    ack: bool = False
    psh: bool = False
    rst: bool = False
    syn: bool = False
    fin: bool = False
    win: int = 0
    cksum: int = 0
    uptr: int = 0


@dataclass
class TCPSegment:
    """A TCP header together with its payload."""

    header: TCPHeader = field(default_factory=TCPHeader)
    payload: bytes = b""

    def length_in_sequence_space(self) -> int:
        """Payload length plus one for each of the SYN and FIN flags."""
        return len(self.payload) + int(self.header.syn) + int(self.header.fin)