"""
Bit-level helpers for hypercube vertices.

A vertex of Q_n is an unsigned integer whose low ``ndim`` bits are the
coordinates. Integers here are unbounded, so ``width`` stands in for the
machine word the ids are meant to fit in (32 or 64 bits) and bounds every
bit index. Out-of-range indices and malformed strings are caller bugs and
fail on ``assert``.
"""
from __future__ import annotations
from typing import Callable, List

WIDTH = 64

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def get_bit(value: int, idx: int, width: int = WIDTH) -> int:
    """Return bit ``idx`` of ``value`` (0 or 1)."""
    assert 0 <= idx < width, f"bit index {idx} out of range for width {width}"
    return (value >> idx) & 0x01


def set_bit(value: int, idx: int, bit: int, width: int = WIDTH) -> int:
    """Return ``value`` with bit ``idx`` replaced by the low bit of ``bit``."""
    assert 0 <= idx < width, f"bit index {idx} out of range for width {width}"
    value &= ~(0x01 << idx)
    return value | ((bit & 0x01) << idx)


def parse_binary(s: str, value: int = 0, width: int = WIDTH) -> int:
    """
    Read a '0'/'1' string into ``value``, character i setting bit i
    (so the string is written least-significant bit first).
    Bits of ``value`` past ``len(s)`` are kept.
    """
    assert len(s) <= width, f"{len(s)} characters do not fit in {width} bits"
    for i, ch in enumerate(s):
        assert ch in ("0", "1"), f"not a binary digit: {ch!r} at position {i}"
        value = set_bit(value, i, ord(ch) - ord("0"), width)
    return value


def format_binary(value: int, ndim: int, width: int = WIDTH) -> str:
    """'b' followed by bits 0..ndim-1 of ``value``, low bit first."""
    assert 0 <= ndim <= width, f"ndim {ndim} exceeds width {width}"
    return "b" + "".join(str(get_bit(value, i, width)) for i in range(ndim))


def num_states(ndim: int, width: int = WIDTH) -> int:
    """Number of vertices of Q_ndim."""
    assert 0 <= ndim < width, f"2^{ndim} states do not fit in {width} bits"
    return 0x01 << ndim


def neighbors(value: int, ndim: int) -> List[int]:
    """The ``ndim`` vertices one bit flip away from ``value``."""
    return [value ^ (0x01 << i) for i in range(ndim)]


# ---------------------------------------------------------------------------
# Population count
# ---------------------------------------------------------------------------

def popcount_native(value: int) -> int:
    return value.bit_count()


def popcount_swar32(value: int) -> int:
    # https://stackoverflow.com/questions/109023
    value &= MASK32
    value = value - ((value >> 1) & 0x55555555)
    value = (value & 0x33333333) + ((value >> 2) & 0x33333333)
    return ((((value + (value >> 4)) & 0x0F0F0F0F) * 0x01010101) & MASK32) >> 24


def popcount_swar64(value: int) -> int:
    value &= MASK64
    value = (value & 0x5555555555555555) + ((value >> 1) & 0x5555555555555555)
    value = (value & 0x3333333333333333) + ((value >> 2) & 0x3333333333333333)
    value = (value + (value >> 4)) & 0x0F0F0F0F0F0F0F0F
    value = value + (value >> 8)
    value = value + (value >> 16)
    value = (value + (value >> 32)) & 0x7F
    return value


HAS_NATIVE_POPCOUNT = hasattr(int, "bit_count")

# chosen once; callers never branch on the capability themselves
popcount: Callable[[int], int] = popcount_native if HAS_NATIVE_POPCOUNT else popcount_swar64

hamming_weight = popcount
