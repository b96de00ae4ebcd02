import pytest

from kyberlite.arith import K, N
from kyberlite.csprng import ChaChaRng
from kyberlite.mlkem import MlKem
from kyberlite.poly import Poly


@pytest.fixture(scope="module")
def kem():
    scheme = MlKem(ChaChaRng(bytes([9] * 16)))
    scheme.keygen()
    return scheme


def test_fresh_instance_holds_empty_keys():
    scheme = MlKem(ChaChaRng(bytes(16)))
    assert (scheme.ek_a.rows, scheme.ek_a.cols) == (K, K)
    assert scheme.ek_a[0, 0] == Poly()
    assert scheme.c_v == Poly()
    assert scheme.key == Poly()


def test_keygen_returns_public_key(kem):
    assert (kem.ek_a.rows, kem.ek_t.rows, kem.dk_s.rows) == (K, K, K)
    assert len(kem.dk_s[0, 0]) == N


def test_shared_key_agreement(kem):
    key = kem.encapsulate()
    assert len(key) == N
    assert set(key) <= {0, 1}
    assert kem.key == key
    assert (kem.c_u.rows, kem.c_u.cols) == (K, 1)
    assert len(kem.c_v) == N
    recovered = kem.decapsulate()
    assert recovered == key


def test_other_party_recovers_key(kem):
    key = kem.encapsulate()
    bob = MlKem(ChaChaRng(bytes([1] * 16)))
    bob.dk_s = kem.dk_s
    bob.c_u = kem.c_u
    bob.c_v = kem.c_v
    assert bob.decapsulate() == key