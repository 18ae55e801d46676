"""The sending half of a TCP endpoint."""

from __future__ import annotations

import secrets
from collections import deque
from dataclasses import replace

from spongetcp.segment import TCPSegment
from spongetcp.stream import ByteStream
from spongetcp.wrapping import WrappingInt32, unwrap, wrap

DEFAULT_CAPACITY = 64000
MAX_PAYLOAD_SIZE = 1000
TIMEOUT_DFLT = 1000


def _clone(seg: TCPSegment) -> TCPSegment:
    return TCPSegment(header=replace(seg.header), payload=seg.payload)


class TCPSender:
    """Splits an outgoing byte stream into segments, tracks them and retransmits on timeout."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        retx_timeout: int = TIMEOUT_DFLT,
        fixed_isn: WrappingInt32 | None = None,
    ) -> None:
        self._isn = fixed_isn if fixed_isn is not None else WrappingInt32(secrets.randbits(32))
        self._segments_out: deque[TCPSegment] = deque()
        self._outstanding: deque[TCPSegment] = deque()
        self._initial_rto = retx_timeout
        self._rto = retx_timeout
        self._timer = 0
        self._timer_running = False
        self._stream = ByteStream(capacity)
        self._next_seqno = 0
        self._window_size = 1
        self._window_zero = False
        self._syn_sent = False
        self._fin_sent = False
        self._consecutive_retransmissions = 0
        self._bytes_in_flight = 0
        self._ackno_recv = 0

    def stream_in(self) -> ByteStream:
        """The outgoing stream the application writes into."""
        return self._stream

    def segments_out(self) -> deque[TCPSegment]:
        """Segments queued for transmission."""
        return self._segments_out

    def bytes_in_flight(self) -> int:
        """Sequence numbers sent but not yet acknowledged."""
        return self._bytes_in_flight

    def consecutive_retransmissions(self) -> int:
        return self._consecutive_retransmissions

    def next_seqno_absolute(self) -> int:
        return self._next_seqno

    def next_seqno(self) -> WrappingInt32:
        return wrap(self._next_seqno, self._isn)

    def fill_window(self) -> None:
        """Send a SYN if none was sent yet, otherwise as much data as the window allows."""
        if self._stream.error():
            raise RuntimeError("outgoing stream is in an error state")
        if self._next_seqno == 0:
            syn = TCPSegment()
            syn.header.syn = True
            self._syn_sent = True
            self._send_segment(syn)
            return
        if self._next_seqno == self._bytes_in_flight:
            return  # the SYN is still unacknowledged

        window = self._window_size
        self._window_zero = window == 0
        if self._window_zero:
            window = 1  # probe a zero window with one sequence number

        while not self._fin_sent:
            remaining = window - (self._next_seqno - self._ackno_recv)
            if remaining <= 0:
                break
            seg = TCPSegment(payload=self._stream.read(min(MAX_PAYLOAD_SIZE, remaining)))
            if self._stream.eof() and seg.length_in_sequence_space() < window:
                seg.header.fin = True
                self._fin_sent = True
            if seg.length_in_sequence_space() == 0:
                return
            self._send_segment(seg)

    def ack_received(self, ackno: WrappingInt32, window_size: int) -> bool:
        """Process an acknowledgment; return False if it acknowledges unsent data."""
        abs_ackno = unwrap(ackno, self._isn, self._ackno_recv)
        if abs_ackno > self._next_seqno:
            return False
        self._window_size = window_size
        if abs_ackno <= self._ackno_recv:
            return True
        self._ackno_recv = abs_ackno

        while self._outstanding:
            seg = self._outstanding[0]
            end = unwrap(seg.header.seqno, self._isn, self._next_seqno) + seg.length_in_sequence_space()
            if end > abs_ackno:
                break
            self._bytes_in_flight -= seg.length_in_sequence_space()
            self._outstanding.popleft()

        self.fill_window()

        self._rto = self._initial_rto
        self._consecutive_retransmissions = 0
        if self._outstanding:
            self._timer_running = True
            self._timer = 0
        return True

    def tick(self, ms_since_last_tick: int) -> None:
        """Advance the retransmission timer and retransmit the oldest segment if it expired."""
        self._timer += ms_since_last_tick
        if self._timer >= self._rto and self._outstanding:
            self._segments_out.append(_clone(self._outstanding[0]))
            if not self._window_zero:
                self._consecutive_retransmissions += 1
                self._rto *= 2
            self._timer_running = True
            self._timer = 0
        if not self._outstanding:
            self._timer_running = False
            self._timer = 0

    def send_empty_segment(self) -> None:
        """Queue a segment occupying no sequence space, e.g. for a bare ACK."""
        seg = TCPSegment()
        seg.header.seqno = wrap(self._next_seqno, self._isn)
        self._segments_out.append(seg)

    def _send_segment(self, seg: TCPSegment) -> None:
        seg.header.seqno = wrap(self._next_seqno, self._isn)
        length = seg.length_in_sequence_space()
        self._next_seqno += length
        self._bytes_in_flight += length
        self._outstanding.append(seg)
        self._segments_out.append(_clone(seg))
        if not self._timer_running:
            self._timer_running = True
            self._timer = 0