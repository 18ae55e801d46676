import random

import pytest

from spongetcp.wrapping import WrappingInt32, unwrap, wrap

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


def test_compare_low_adjacent():
    assert (WrappingInt32(3) != WrappingInt32(1)) is True
    assert (WrappingInt32(3) == WrappingInt32(1)) is False


def test_compare_random():
    rd = random.Random(1234)
    for _ in range(4096):
        n = rd.getrandbits(32)
        diff = rd.getrandbits(8)
        m = (n + diff) & UINT32_MAX
        assert (WrappingInt32(n) == WrappingInt32(m)) == (n == m)
        assert (WrappingInt32(n) != WrappingInt32(m)) == (n != m)


@pytest.mark.parametrize(
    "value, isn, expected",
    [
        (3 * (1 << 32), 0, 0),
        (3 * (1 << 32) + 17, 15, 32),
        (7 * (1 << 32) - 2, 15, 13),
    ],
)
def test_wrap(value, isn, expected):
    assert wrap(value, WrappingInt32(isn)) == WrappingInt32(expected)


@pytest.mark.parametrize(
    "n, isn, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
    ],
)
def test_unwrap(n, isn, checkpoint, expected):
    assert unwrap(WrappingInt32(n), WrappingInt32(isn), checkpoint) == expected


def _check_roundtrip(isn, value, checkpoint):
    assert unwrap(wrap(value, isn), isn, checkpoint) == value


def test_roundtrip_random():
    rd = random.Random(98765)
    big_offset = (1 << 31) - 1
    for _ in range(20000):
        isn = WrappingInt32(rd.getrandbits(32))
        val = rd.randint(1 << 31, 1 << 63)
        offset = rd.randint(0, (1 << 31) - 1)
        _check_roundtrip(isn, val, val)
        _check_roundtrip(isn, val + 1, val)
        _check_roundtrip(isn, val - 1, val)
        _check_roundtrip(isn, val + offset, val)
        _check_roundtrip(isn, val - offset, val)
        _check_roundtrip(isn, val + big_offset, val)
        _check_roundtrip(isn, val - big_offset, val)


def test_add_wraps_around():
    assert WrappingInt32(UINT32_MAX) + 1 == WrappingInt32(0)


def test_subtract_integer_wraps_around():
    assert WrappingInt32(0) - 1 == WrappingInt32(UINT32_MAX)


def test_subtract_wrapped_gives_signed_distance():
    a = WrappingInt32(5)
    b = WrappingInt32(UINT32_MAX)
    assert (a - b) == -(b - a)
    assert b + (a - b) == a


def test_construction_masks_value():
    assert WrappingInt32(1 << 32) == WrappingInt32(0)
    assert str(WrappingInt32(UINT32_MAX)) == str(UINT32_MAX)