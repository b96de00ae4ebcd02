# kyberlite

A compact, readable lattice-based public-key encryption scheme (`KPke`) and a
key-encapsulation wrapper around it (`MlKem`). Both are built on polynomials
in Z_q[X]/(X^n + 1).

The parameters are fixed in `kyberlite.arith`:

- n = 256 (`N`)
- k = 4 (`K`)
- q = 3329 (`Q`)
- noise width 2 (`ETA1` and `ETA2`)

Each noise coefficient is the difference of two uniform draws from
`[0, eta]`, so it falls in `[-eta, eta]`.

This is a learning tool. It is not constant-time. It has no byte encodings
and no hashing of keys or ciphertexts. The shared key is a polynomial of 256
random bits, and it is encrypted directly. Do not use it to protect real data.

## Installing

    pip install .

## Command line

Run a full key exchange and print every value involved:

    kyberlite

The command does the following in order:

1. Generates a key pair and prints the public parts `t` and `a` and the secret `s`.
2. Encapsulates a random 256-bit shared key and prints it.
3. Prints the ciphertext parts `u` and `v`.
4. Decapsulates with the secret key and prints the recovered key, so the two copies can be compared.

To make the run repeatable, pass a 16-byte generator seed as 32 hex digits:

    kyberlite --seed 000102030405060708090a0b0c0d0e0f

Time key generation, encryption and decryption:

    kyberlite-benchmark
    kyberlite-benchmark --repeat 10

This prints the total seconds taken for each operation over `--repeat` runs.
The default is 1000 runs.

## Library use

    from kyberlite.csprng import ChaChaRng
    from kyberlite.mlkem import MlKem

    rng = ChaChaRng(bytes(16))       # or ChaChaRng() to seed from the OS
    kem = MlKem(rng)
    ek_a, ek_t = kem.keygen()        # public key; the secret is kem.dk_s
    alice_key = kem.encapsulate()    # ciphertext in kem.c_u and kem.c_v
    bob_key = kem.decapsulate()
    print(alice_key == bob_key)

The building blocks live in their own modules:

- `kyberlite.arith`
  - Scheme parameters.
  - `Barrett`, Barrett reduction on 32-bit values.
  - `branchless_abs` and `ceil_to_int`.
- `kyberlite.csprng`: `ChaChaRng`, a ChaCha-based generator of 32-bit words.
  - `seed(key)` restarts it from a 16-byte key.
  - `seed_random()` restarts it from a key drawn from the OS.
  - `next_uint32()` returns the next word.
- `kyberlite.poly`: `Poly`, a polynomial whose coefficient list grows on demand.
  - `+`, `-` and negacyclic `*`, all reduced mod q.
  - `gen` for uniform sampling and `cbd` for noise sampling.
  - `compressed()` and `decompressed()` for one-bit compression and its inverse.
  - `format(sep)` for output.
- `kyberlite.polymat`: `PolyMat`, a matrix of polynomials.
  - Indexed as `m[row, col]`.
  - Has `transpose()`, `+`, `*`, `copy()`, `reserve()` and `format()`.
- `kyberlite.kpke`: `KPke`, the public-key encryption scheme.
  - `keygen()` creates a key pair.
  - `encrypt(msg)` returns `(u, v)`.
  - `decrypt()` returns the message bits.
- `kyberlite.mlkem`: `MlKem`, with `keygen()`, `encapsulate()` and `decapsulate()`.
- `kyberlite.benchmark`
  - `random_message(n, rng)` returns `n` random bits ending in 1.
  - `run_benchmark(repeat, rng)` returns the seconds taken per operation.

## Running the tests

    pip install .[test]
    pytest