"""Timing of key generation, encryption and decryption."""

import argparse
import sys
import time

from .arith import N
from .csprng import ChaChaRng
from .kpke import KPke
from .poly import Poly

DEFAULT_REPEAT = 1000


def random_message(n: int, rng: ChaChaRng | None = None) -> Poly:
    """Return ``n`` random bits whose last bit is always 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if rng is None:
        rng = ChaChaRng()
    return Poly([rng.next_uint32() % 2 for _ in range(n - 1)] + [1])


def run_benchmark(repeat: int = DEFAULT_REPEAT, rng: ChaChaRng | None = None) -> dict[str, float]:
    """Time ``repeat`` runs of each operation; return seconds per operation name."""
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")
    if rng is None:
        rng = ChaChaRng()
    pke = KPke(rng)
    timings: dict[str, float] = {}

    start = time.perf_counter()
    for _ in range(repeat):
        pke.keygen()
    timings["keygen"] = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(repeat):
        pke.encrypt(random_message(N, rng))
    timings["encrypt"] = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(repeat):
        pke.decrypt()
    timings["decrypt"] = time.perf_counter() - start

    return timings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kyberlite-benchmark",
        description="Time key generation, encryption and decryption.",
    )
    parser.add_argument("--repeat", type=int, default=DEFAULT_REPEAT, help="runs per operation")
    args = parser.parse_args(argv)
    if args.repeat < 1:
        parser.error("--repeat must be at least 1")

    timings = run_benchmark(args.repeat)
    labels = {"keygen": "keygen():     ", "encrypt": "encrypt():    ", "decrypt": "decrypt():    "}
    for name, label in labels.items():
        print(f"{label}{timings[name]:g} seconds for {args.repeat} runs")
    return 0


if __name__ == "__main__":
    sys.exit(main())