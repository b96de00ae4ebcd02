"""Command that runs one key exchange and prints every value involved."""

import argparse
import sys

from .csprng import ChaChaRng
from .mlkem import MlKem


def _seed(text: str) -> bytes:
    try:
        key = bytes.fromhex(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a hex string: {text!r}") from exc
    if len(key) != 16:
        raise argparse.ArgumentTypeError("seed must be 16 bytes (32 hex digits)")
    return key


def _show(label: str, body: str) -> None:
    sys.stdout.write(f"{label}{body}\n\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kyberlite",
        description="Generate keys, encapsulate a shared key and decapsulate it again.",
    )
    parser.add_argument("--seed", type=_seed, help="16-byte generator seed as hex")
    args = parser.parse_args(argv)

    kem = MlKem(ChaChaRng(args.seed))

    kem.keygen()
    _show("EK_PKE_T (Public key part): ", kem.ek_t.format())
    _show("EK_PKE_A (Public key part): ", kem.ek_a.format())
    _show("DK_PKE_S (Secret key, kept by Bob): ", kem.dk_s.format())

    alice_key = kem.encapsulate()
    _show("K (Alice's shared key): ", alice_key.format(","))
    _show("C_U (Ciphertext part): ", kem.c_u.format())
    _show("C_V (Ciphertext part): ", kem.c_v.format(","))

    bob_key = kem.decapsulate()
    _show("K (Bob's recovered key): ", bob_key.format(","))
    return 0


if __name__ == "__main__":
    sys.exit(main())