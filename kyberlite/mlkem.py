"""Key encapsulation built on the public-key encryption scheme."""

from .arith import K, N
from .csprng import ChaChaRng
from .kpke import KPke
from .poly import Poly
from .polymat import PolyMat


class MlKem:
    """Holds an encapsulation key (ek_a, ek_t), a decapsulation key dk_s,
    the ciphertext (c_u, c_v) and the shared key."""

    def __init__(self, rng: ChaChaRng | None = None) -> None:
        self._rng = rng if rng is not None else ChaChaRng()
        self.ek_t = PolyMat(K, 1)
        self.ek_a = PolyMat(K, K)
        self.dk_s = PolyMat(K, 1)
        self.c_u = PolyMat(K, 1)
        self.c_v = Poly()
        self.key = Poly()

    def keygen(self) -> tuple[PolyMat, PolyMat]:
        """Generate a key pair; return the public part (ek_a, ek_t)."""
        pke = KPke(self._rng)
        pke.keygen()
        self.ek_a = pke.a
        self.ek_t = pke.t
        self.dk_s = pke.s
        return self.ek_a, self.ek_t

    def encapsulate(self) -> Poly:
        """Draw a random N-bit shared key and encrypt it under the public key."""
        key = Poly(self._rng.next_uint32() % 2 for _ in range(N))
        pke = KPke(self._rng)
        pke.a = self.ek_a
        pke.t = self.ek_t
        self.c_u, self.c_v = pke.encrypt(key)
        self.key = key
        return key.copy()

    def decapsulate(self) -> Poly:
        """Recover the shared key from the ciphertext with the secret key."""
        pke = KPke(self._rng)
        pke.s = self.dk_s
        pke.u = self.c_u
        pke.v = self.c_v
        self.key = pke.decrypt()
        return self.key.copy()