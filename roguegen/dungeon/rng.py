"""Deterministic xorshift generator.

Every map is a pure function of its seed, so this generator must reproduce
the reference sequence bit for bit: all state lives in signed 32-bit words
and shifts wrap exactly as fixed-width integer arithmetic does. The stdlib
``random`` module is not an option here since its sequence is unrelated.
"""
from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def _int32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _ushr(value: int, bits: int) -> int:
    """Unsigned right shift of a 32-bit word."""
    return (value & _MASK32) >> bits


class XorShiftRandom:
    SEED_X = 31415926535
    SEED_Y = 8979323846
    SEED_Z = 2643383279

    def __init__(self, seed: int):
        self.x = _int32(self.SEED_X)
        self.y = _int32(self.SEED_Y)
        self.z = _int32(self.SEED_Z)
        self.w = _int32(seed)

    def next(self) -> int:
        t = _int32(self.x ^ (self.x << 11))
        self.x, self.y, self.z = self.y, self.z, self.w
        self.w = _int32((self.w ^ _ushr(self.w, 19)) ^ (t ^ _ushr(t, 8)))
        return abs(self.w)

    def next_int(self, lo: int, hi: int) -> int:
        """Return ``lo + next() % (hi + 1 - lo)``.

        The modulo bias is part of the reference output and is kept.
        """
        span = hi + 1 - lo
        if span <= 0:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return lo + self.next() % span


__all__ = ["XorShiftRandom"]
