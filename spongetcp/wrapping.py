"""32-bit wrapping sequence numbers and conversion to absolute 64-bit positions."""

from __future__ import annotations

from dataclasses import dataclass

_MOD = 1 << 32
_HALF = 1 << 31


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around modulo 2**32."""

    raw_value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value % _MOD)

    def __add__(self, n: int) -> WrappingInt32:
        if not isinstance(n, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + n)

    def __sub__(self, n: int | WrappingInt32) -> WrappingInt32 | int:
        """Subtract an integer (giving a wrapped value) or another wrapped value (giving a signed distance)."""
        if isinstance(n, WrappingInt32):
            diff = (self.raw_value - n.raw_value) % _MOD
            return diff - _MOD if diff >= _HALF else diff
        if not isinstance(n, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - n)

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Convert an absolute sequence number into a wrapped one relative to ``isn``."""
    return isn + n


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number for ``n`` that lies closest to ``checkpoint``."""
    offset = (n.raw_value - isn.raw_value) % _MOD
    k = (checkpoint - offset + _HALF) // _MOD
    candidate = offset + k * _MOD
    if candidate < 0:
        candidate += _MOD
    return candidate