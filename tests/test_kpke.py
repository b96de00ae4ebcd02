import pytest

from kyberlite.arith import ETA1, K, N, Q
from kyberlite.csprng import ChaChaRng
from kyberlite.kpke import KPke
from kyberlite.poly import Poly


@pytest.fixture(scope="module")
def pke():
    scheme = KPke(ChaChaRng(bytes(range(16))))
    scheme.keygen()
    return scheme


def _bits(seed_byte):
    rng = ChaChaRng(bytes([seed_byte] * 16))
    return Poly([rng.next_uint32() % 2 for _ in range(N - 1)] + [1])


def test_key_shapes(pke):
    assert (pke.a.rows, pke.a.cols) == (K, K)
    assert (pke.t.rows, pke.t.cols) == (K, 1)
    assert (pke.s.rows, pke.s.cols) == (K, 1)


def test_secret_is_small_noise(pke):
    for i in range(K):
        coeffs = list(pke.s[i, 0])
        assert len(coeffs) == N
        assert all(-ETA1 <= c <= ETA1 for c in coeffs)


def test_public_matrix_is_uniform_range(pke):
    for i in range(K):
        for j in range(K):
            coeffs = list(pke.a[i, j])
            assert len(coeffs) == N
            assert all(0 <= c < Q for c in coeffs)
            assert coeffs[-1] != 0


def test_round_trip(pke):
    msg = _bits(7)
    pke.encrypt(msg)
    assert pke.decrypt() == msg


def test_short_message_round_trip_pads_with_zeros(pke):
    pke.encrypt(Poly([1, 0, 1]))
    assert pke.decrypt() == Poly([1, 0, 1] + [0] * (N - 3))


def test_encrypt_returns_stored_ciphertext_and_keeps_message(pke):
    msg = _bits(3)
    original = msg.copy()
    u, v = pke.encrypt(msg)
    assert msg == original
    assert u == pke.u and v == pke.v
    assert (u.rows, u.cols) == (K, 1)
    assert len(v) == N