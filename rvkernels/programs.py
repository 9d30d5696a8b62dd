"""The self-checking kernel programs and a command to run them."""

import argparse
import operator
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import reduce

from rvkernels.arith import (
    bubble_sort,
    count_primes,
    factorial,
    fast_pow,
    fibonacci,
    gcd,
    modexp,
    q_rsqrt,
    rk4_fixed,
)
from rvkernels.bits import MASK32, andn, mask32, popcount, reverse_bits
from rvkernels.crypto import (
    AES_SAMPLE_KEY,
    AES_SAMPLE_KEY_WORDS,
    AES_SAMPLE_STATE,
    CHACHA_SAMPLE_STATE,
    add_round_key,
    chacha_rounds,
    expand_key,
)
from rvkernels.mix import array_churn_checksum, matrix_hash, mix_checksum

PASS_SIGNAL = 2025
FAIL_SIGNAL = 0xDEAD

SORT_DATA = (23, 5, 99, 1, 17, 42)
POPCOUNT_DATA = (0xF0F0F0F0, 0x12345678, 0xAAAAAAAA, 0x55555555)


@dataclass(frozen=True)
class Result:
    """Outcome of one program: the values it computed and whether they matched."""

    name: str
    values: tuple[int, ...]
    passed: bool

    @property
    def signal(self) -> int:
        """The value the program leaves in x7: 2025 on success, 0xDEAD otherwise."""
        return PASS_SIGNAL if self.passed else FAIL_SIGNAL


@dataclass(frozen=True)
class Program:
    """A kernel, the values it should produce, and the mask applied before comparing."""

    name: str
    description: str
    compute: Callable[[], tuple[int, ...]]
    expected: tuple[int, ...]
    mask: int = MASK32

    def run(self) -> Result:
        values = tuple(self.compute())
        passed = len(values) == len(self.expected) and all(
            (value & self.mask) == want for value, want in zip(values, self.expected)
        )
        return Result(self.name, values, passed)


def _aes_ks() -> tuple[int, ...]:
    return (expand_key(AES_SAMPLE_KEY_WORDS)[-1],)


def _aes_encrypt() -> tuple[int, ...]:
    return (sum(add_round_key(AES_SAMPLE_STATE, AES_SAMPLE_KEY)),)


def _chacha() -> tuple[int, ...]:
    return (mask32(sum(chacha_rounds(CHACHA_SAMPLE_STATE, 10))),)


def _bubblesort() -> tuple[int, ...]:
    return (reduce(operator.xor, bubble_sort(SORT_DATA), 0),)


def _fibsum() -> tuple[int, ...]:
    return (mask32(sum(andn(fibonacci(i), 0xAAAAAAAA) for i in range(10))),)


def _multiply() -> tuple[int, ...]:
    return (mask32(1 + sum(reverse_bits(i * 7) for i in range(1, 9))),)


def _popcount() -> tuple[int, ...]:
    total = sum(popcount(v) for v in POPCOUNT_DATA)
    return (total, min(POPCOUNT_DATA), max(POPCOUNT_DATA))


_ALL = (
    Program("aes_ks", "AES-128 key schedule without SubWord",
            _aes_ks, (0xB6630CA6,)),
    Program("aes_encrypt", "AES AddRoundKey byte sum",
            _aes_encrypt, (1417,)),
    Program("chacha", "ChaCha20 rounds word sum",
            _chacha, (4160930768,)),
    Program("fast_power", "binary exponentiation 3^10",
            lambda: (fast_pow(3, 10),), (59049,)),
    Program("fast_inv_sqrt", "integer inverse square root of 4.0",
            lambda: (q_rsqrt(0x40800000),), (0x3F000000,), 0xFFF00000),
    Program("gcd", "Euclidean gcd(48, 18)",
            lambda: (gcd(48, 18),), (6,)),
    Program("modexp", "modular exponentiation 5^3 mod 13",
            lambda: (modexp(5, 3, 13),), (8,)),
    Program("bubblesort", "bubble sort then XOR of elements",
            _bubblesort, (89,)),
    Program("fibsum", "Fibonacci values masked with ANDN, summed",
            _fibsum, (705,)),
    Program("multiply", "multiply by 7, bit-reverse and accumulate",
            _multiply, (286331165,)),
    Program("popcount", "population count, minimum and maximum",
            _popcount, (64, 0x12345678, 0xF0F0F0F0)),
    Program("primality", "count primes from 2 to 100",
            lambda: (count_primes(2, 100),), (25,)),
    Program("factorial", "recursive factorial of 5",
            lambda: (factorial(5),), (120,)),
    Program("runge_kutta", "one fixed-point RK4 step",
            lambda: (rk4_fixed(0, 1 << 16, 0x199A),), (0x00011BC0,), 0xFFFFFFF0),
    Program("mix_1", "mixed arithmetic and logic checksum",
            lambda: (mix_checksum(),), (0xAADE,), 0xFFFF),
    Program("mix_2", "array churn checksum",
            lambda: (array_churn_checksum(),), (0xA2B2,), 0xFFFF),
    Program("mix_3", "matrix hash",
            lambda: (matrix_hash(),), (0xDADA,), 0xFFFF),
)

PROGRAMS: dict[str, Program] = {program.name: program for program in _ALL}


def run_all(names: Iterable[str] | None = None) -> list[Result]:
    """Run the named programs in the given order, or every program if none are named."""
    selected = list(PROGRAMS) if names is None else list(names)
    unknown = [name for name in selected if name not in PROGRAMS]
    if unknown:
        raise KeyError(f"unknown program: {', '.join(unknown)}")
    return [PROGRAMS[name].run() for name in selected]


def _format(result: Result) -> str:
    status = "PASS" if result.passed else "FAIL"
    values = ", ".join(f"0x{v:08X}" for v in result.values)
    return f"{result.name:<14} {status}  x7=0x{result.signal:04X}  {values}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run kernel programs and report each one; exit status 1 if any failed."""
    parser = argparse.ArgumentParser(
        prog="rvkernels", description="Run self-checking integer kernels."
    )
    parser.add_argument("names", nargs="*", metavar="NAME",
                        help="programs to run (default: all)")
    parser.add_argument("--list", action="store_true",
                        help="list the available programs and exit")
    args = parser.parse_args(argv)

    if args.list:
        for program in PROGRAMS.values():
            print(f"{program.name:<14} {program.description}")
        return 0

    unknown = [name for name in args.names if name not in PROGRAMS]
    if unknown:
        parser.error(f"unknown program: {', '.join(unknown)}")

    results = run_all(args.names or None)
    for result in results:
        print(_format(result))
    return 0 if all(result.passed for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())