"""Polynomials over Z_Q modulo X^N + 1."""

from collections.abc import Iterable, Iterator

from .arith import N, Q, Barrett, branchless_abs, ceil_to_int
from .csprng import ChaChaRng

_BARRETT = Barrett(Q)
_HALF_Q = int(Q / 2.0 + 0.5)


def _check_index(i: int) -> int:
    if i < 0:
        raise IndexError(f"negative coefficient index {i}")
    return i


class Poly:
    """A polynomial whose coefficient list grows on demand.

    Reading past the stored coefficients yields zero; writing a non-zero value
    past them extends the list with zeros.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[int] | None = None) -> None:
        self._coeffs = [int(c) for c in coeffs] if coeffs is not None else []

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._coeffs)

    def __getitem__(self, i: int) -> int:
        _check_index(i)
        return self._coeffs[i] if i < len(self._coeffs) else 0

    def __setitem__(self, i: int, x: int) -> None:
        _check_index(i)
        if i < len(self._coeffs):
            self._coeffs[i] = x
        elif x:
            self.reserve(i + 1)
            self._coeffs[i] = x

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self._coeffs == other._coeffs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Poly({self._coeffs!r})"

    def copy(self) -> "Poly":
        return Poly(self._coeffs)

    def reserve(self, n: int) -> None:
        """Grow to at least ``n`` coefficients, padding with zeros."""
        if n > len(self._coeffs):
            self._coeffs.extend([0] * (n - len(self._coeffs)))

    def gen(self, n: int, rng: ChaChaRng | None = None) -> None:
        """Fill the first ``n`` coefficients uniformly from Z_Q, the last one non-zero."""
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}")
        if rng is None:
            rng = ChaChaRng()
        self.reserve(n)
        for i in range(n - 1):
            self[i] = rng.next_uint32() % Q
        self[n - 1] = rng.next_uint32() % (Q - 1) + 1

    def cbd(self, eta: int, rng: ChaChaRng | None = None) -> None:
        """Fill N coefficients with small noise in ``[-eta, eta]``."""
        if rng is None:
            rng = ChaChaRng()
        self.reserve(N)
        for i in range(N):
            a = rng.next_uint32() % (eta + 1)
            b = rng.next_uint32() % (eta + 1)
            self[i] = a - b

    def compressed(self) -> "Poly":
        """Map each coefficient to 1 if it lies nearer Q/2 than 0 or Q, else 0."""
        bits = []
        for c in self._coeffs:
            dist_center = branchless_abs(_HALF_Q - c)
            dist_bound = c if c < Q - c else Q - c
            bits.append(1 if dist_center < dist_bound else 0)
        return Poly(bits)

    def decompressed(self) -> "Poly":
        """Scale each coefficient by Q/2, rounding up."""
        return Poly(ceil_to_int((Q / 2.0) * c) for c in self._coeffs)

    def _accumulate(self, other: "Poly", sign: int) -> None:
        self.reserve(N)
        for i in range(N):
            self._coeffs[i] = _BARRETT.reduce(self._coeffs[i] + sign * other[i])

    def __iadd__(self, other: "Poly") -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        self._accumulate(other, 1)
        return self

    def __isub__(self, other: "Poly") -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        self._accumulate(other, -1)
        return self

    def __add__(self, other: "Poly") -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: "Poly") -> "Poly":
        if not isinstance(other, Poly):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: "Poly") -> "Poly":
        """Negacyclic product modulo X^N + 1, reduced into Z_Q."""
        if not isinstance(other, Poly):
            return NotImplemented
        a = [self[i] for i in range(N)]
        acc = [0] * N
        for j in range(N):
            bj = other[j]
            if not bj:
                continue
            for i in range(N):
                term = a[i - j] * bj  # a negative index wraps to a[N + i - j]
                acc[i] += term if i >= j else -term
        return Poly(_BARRETT.reduce(v) for v in acc)

    def format(self, sep: str = " ") -> str:
        """Render the coefficients as ``[c0<sep>c1...]``."""
        return "[" + sep.join(str(c) for c in self._coeffs) + "]"