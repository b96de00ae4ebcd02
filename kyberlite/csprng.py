"""ChaCha20-based pseudo-random generator of 32-bit words."""

import secrets
import struct

_MASK32 = 0xFFFFFFFF
_KEY_SIZE = 16

# ASCII of "expand 16-byte k"
_CONSTANTS = (0x61707865, 0x3120646E, 0x79622D36, 0x6B206574)

_ORDER = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotl(v: int, n: int) -> int:
    return ((v << n) | (v >> (32 - n))) & _MASK32


def _quarter_round(s: list[int], a: int, b: int, c: int, d: int) -> None:
    s[a] = (s[a] + s[b]) & _MASK32
    s[d] = _rotl(s[d] ^ s[a], 16)
    s[c] = (s[c] + s[d]) & _MASK32
    s[b] = _rotl(s[b] ^ s[c], 12)
    s[a] = (s[a] + s[b]) & _MASK32
    s[d] = _rotl(s[d] ^ s[a], 8)
    s[c] = (s[c] + s[d]) & _MASK32
    s[b] = _rotl(s[b] ^ s[c], 7)


class ChaChaRng:
    """Generator keyed with 16 bytes; without a key it seeds itself from the OS."""

    def __init__(self, key: bytes | None = None) -> None:
        self._key: tuple[int, ...] = (0, 0, 0, 0)
        self._counter = 0
        self._buffer: list[int] = []
        if key is None:
            self.seed_random()
        else:
            self.seed(key)

    def seed(self, key: bytes) -> None:
        """Restart the stream from a 16-byte key."""
        key = bytes(key)
        if len(key) != _KEY_SIZE:
            raise ValueError(f"key must be {_KEY_SIZE} bytes, got {len(key)}")
        self._key = struct.unpack("<4I", key)
        self._counter = 0
        self._buffer = []

    def seed_random(self) -> None:
        """Restart the stream from a fresh key drawn from the OS."""
        self.seed(secrets.token_bytes(_KEY_SIZE))

    def _block(self) -> list[int]:
        self._counter += 1
        ctr = self._counter & _MASK32
        state = [*_CONSTANTS, *self._key, *self._key, 0, 0, ctr, ctr]
        work = list(state)
        for _ in range(10):
            for indices in _ORDER:
                _quarter_round(work, *indices)
        return [(w + s) & _MASK32 for w, s in zip(work, state)]

    def next_uint32(self) -> int:
        """Return the next 32-bit word of the stream."""
        if not self._buffer:
            self._buffer = self._block()
        return self._buffer.pop()