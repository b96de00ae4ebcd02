"""Scheme parameters and the small integer helpers the polynomial code relies on."""

N = 256
K = 4
Q = 3329
ETA1 = 2
ETA2 = 2

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT32_BIAS = 1 << 31


def _wrap_int32(x: int) -> int:
    """Reduce ``x`` to a signed 32-bit value with two's complement wrap-around."""
    return ((x + _INT32_BIAS) & _MASK32) - _INT32_BIAS


class Barrett:
    """Barrett reduction modulo a fixed positive modulus on 32-bit integers."""

    __slots__ = ("modulus", "m")

    def __init__(self, modulus: int) -> None:
        if modulus <= 0:
            raise ValueError(f"modulus must be positive, got {modulus}")
        self.modulus = modulus
        self.m = (1 << 32) // modulus

    def reduce(self, x: int) -> int:
        """Reduce ``x`` (treated as a signed 32-bit integer) towards ``[0, modulus)``."""
        x = _wrap_int32(x)
        q = (((x & _MASK64) * self.m) & _MASK64) >> 32
        r = _wrap_int32(x - q * self.modulus)
        return r if r < self.modulus else r - self.modulus

    def __repr__(self) -> str:
        return f"Barrett({self.modulus})"


def branchless_abs(n: int) -> int:
    """Absolute value computed with a sign mask instead of a branch."""
    mask = -(n < 0)
    return (n + mask) ^ mask


def ceil_to_int(x: float) -> int:
    """Smallest integer not less than ``x``."""
    truncated = int(x)
    return int(x + 1.0) if x > truncated else truncated