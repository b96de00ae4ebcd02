"""Lattice public-key encryption of N-bit messages."""

from .arith import ETA1, ETA2, K, N
from .csprng import ChaChaRng
from .poly import Poly
from .polymat import PolyMat


class KPke:
    """Key pair and last ciphertext of the public-key encryption scheme.

    ``a`` and ``t`` form the public key, ``s`` the secret key, and ``u`` and
    ``v`` the ciphertext produced by :meth:`encrypt`.
    """

    def __init__(self, rng: ChaChaRng | None = None) -> None:
        self._rng = rng if rng is not None else ChaChaRng()
        self.a = PolyMat(K, K)
        self.s = PolyMat(K, 1)
        self.e = PolyMat(K, 1)
        self.t = PolyMat(K, 1)
        self.r = PolyMat(K, 1)
        self.e1 = PolyMat(K, 1)
        self.u = PolyMat(K, 1)
        self.e2 = Poly()
        self.v = Poly()

    def _noise(self, rows: int, eta: int) -> PolyMat:
        m = PolyMat(rows, 1)
        for i in range(rows):
            m[i, 0].cbd(eta, self._rng)
        return m

    def keygen(self) -> None:
        """Draw a fresh key pair: t = a * s + e."""
        a = PolyMat(K, K)
        for i in range(K):
            for j in range(K):
                a[i, j].gen(N, self._rng)
        self.a = a
        self.s = self._noise(K, ETA1)
        self.e = self._noise(K, ETA1)
        self.t = self.a * self.s + self.e

    def encrypt(self, msg: Poly) -> tuple[PolyMat, Poly]:
        """Encrypt a polynomial of bits; return and keep the ciphertext (u, v)."""
        self.r = self._noise(K, ETA1)
        self.e1 = self._noise(K, ETA2)
        self.e2 = Poly()
        self.e2.cbd(ETA2, self._rng)

        self.u = self.a.transpose() * self.r + self.e1
        self.v = (self.t.transpose() * self.r)[0, 0] + self.e2
        self.v += msg.decompressed()
        return self.u, self.v

    def decrypt(self) -> Poly:
        """Recover the bits held in the ciphertext (u, v) with the secret key s."""
        masked = (self.s.transpose() * self.u)[0, 0]
        return (self.v - masked).compressed()