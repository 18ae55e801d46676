# spongetcp

This package is the sending side of a small TCP implementation. It uses only
the standard library.

The application writes outgoing bytes into a `ByteStream`. `TCPSender` splits
those bytes into `TCPSegment`s that fit the receiver's advertised window. It
keeps the segments that have not been acknowledged yet. When the
retransmission timer runs out, it sends the oldest of them again.

Sequence numbers are 32-bit values that wrap around. `WrappingInt32`, `wrap`
and `unwrap` convert between them and 64-bit absolute positions in the
stream.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Modules

- `spongetcp.wrapping` provides `WrappingInt32`, `wrap(n, isn)` and
  `unwrap(n, isn, checkpoint)`.
  - Adding an integer to a `WrappingInt32` gives a new `WrappingInt32`.
    Subtracting an integer also gives a new `WrappingInt32`.
  - Subtracting one `WrappingInt32` from another gives their signed distance.
- `spongetcp.stream` provides `ByteStream`, a byte buffer with a bounded
  capacity.
  - The writer calls `write`, which returns the number of bytes accepted, and
    then `end_input`.
  - The reader calls `read(size)`.
  - `eof()` is true once input has ended and every byte has been read.
- `spongetcp.segment` provides `TCPHeader`, a dataclass of header fields, and
  `TCPSegment`, which holds a header and a `bytes` payload.
  - `length_in_sequence_space()` is the payload length plus one for SYN and
    one for FIN.
- `spongetcp.sender` provides `TCPSender`.

## Sequence numbers

```python
from spongetcp.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)
seqno = wrap(3 * (1 << 32) + 17, isn)   # WrappingInt32(raw_value=32)
unwrap(seqno, isn, 3 * (1 << 32))       # 3 * 2**32 + 17
```

`unwrap` returns the absolute sequence number that maps to `n` and lies
closest to `checkpoint`.

## Sending

```python
from spongetcp.sender import TCPSender
from spongetcp.wrapping import WrappingInt32

sender = TCPSender(capacity=4000, retx_timeout=1000, fixed_isn=WrappingInt32(0))

sender.fill_window()              # the first call sends the SYN
syn = sender.segments_out().popleft()

sender.ack_received(WrappingInt32(1), 1000)   # the peer acks the SYN and opens a window
sender.stream_in().write(b"hello")
sender.stream_in().end_input()
sender.fill_window()              # "hello", with FIN on the same segment

sender.tick(1000)                 # the timer expires and the oldest outstanding segment is sent again
sender.consecutive_retransmissions()   # 1
```

### Defaults

If no arguments are given, `TCPSender` uses these values:

- a capacity of 64000 bytes;
- an initial retransmission timeout of 1000 ms;
- a random initial sequence number.

A segment's payload is at most 1000 bytes.

### The outgoing queue

`segments_out()` returns a `collections.deque` of the segments the sender
wants to transmit. The caller takes segments from it and delivers them.

### Other `TCPSender` methods

- `bytes_in_flight()` returns the number of sequence numbers that have been
  sent but not yet acknowledged.
- `next_seqno_absolute()` returns the next sequence number as an absolute
  value.
- `next_seqno()` returns the next sequence number as a wrapped value.
- `send_empty_segment()` queues a segment that takes up no sequence space,
  for example a bare ACK.

### Acknowledgments

`ack_received` returns `False` when the acknowledgment number covers data
that has not been sent. The sender then ignores the acknowledgment.

When an acknowledgment covers new data, the sender does the following:

- it drops the segments that are now fully acknowledged;
- it fills the window again;
- it resets the timeout to its initial value.

### Zero windows

When the receiver's window is zero, the sender probes it as if the window
were one. A retransmission during such a probe does not double the timeout
and does not count as a consecutive retransmission.

### Errors

`fill_window` raises `RuntimeError` if the outgoing stream has been marked
with `set_error()`.

## What this package does not do

This package covers only the sending half. It does not:

- receive segments or reassemble incoming data;
- manage a connection's state;
- parse or serialize segments to wire format;
- compute checksums;
- open sockets.

Moving segments between `segments_out()` and a network is up to the caller.