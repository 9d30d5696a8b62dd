# rvkernels

A collection of small, deterministic integer kernels that work on unsigned
32-bit words. Each program computes a fixed result and compares it with a
known constant, so the set doubles as a quick self-test suite: a program
either passes (signal `2025`) or fails (signal `0xDEAD`).

All arithmetic wraps modulo 2**32, as a 32-bit machine would.

## Modules

- `rvkernels.bits`: `mask32`, `rotl`, `reverse_bits`, `popcount`, `andn`,
  and the constants `WORD_BITS` and `MASK32`.
- `rvkernels.crypto`: a simplified AES-128 key schedule without SubWord
  (`expand_key`, 4 words in, 44 words out), AES `add_round_key` on bytes,
  and ChaCha20 `quarterround` and `chacha_rounds` on a 16-word state.
  Sample inputs are provided as `AES_SAMPLE_KEY_WORDS`, `AES_SAMPLE_STATE`,
  `AES_SAMPLE_KEY` and `CHACHA_SAMPLE_STATE`. Inputs of the wrong length or
  words outside 32 bits raise `ValueError`.
- `rvkernels.arith`: `fast_pow`, `q_rsqrt`, `gcd`, `modexp`, `is_prime`,
  `count_primes`, `factorial`, `rk4_fixed` (one Runge-Kutta step of
  dy/dx = x + y in Q16.16 fixed point), `fibonacci`, `bubble_sort`.
  `factorial` and `fibonacci` raise `ValueError` for negative arguments.
- `rvkernels.mix`: the bit-churning workloads `mix_checksum`,
  `array_churn_checksum` and `matrix_hash`, each returning a 32-bit value.
- `rvkernels.programs`: the self-checking programs (`Program`), their
  outcomes (`Result`), `PROGRAMS` (a dict by name), `run_all` and the
  command-line entry point `main`.

## Programs

`aes_ks`, `aes_encrypt`, `chacha`, `fast_power`, `fast_inv_sqrt`, `gcd`,
`modexp`, `bubblesort`, `fibsum`, `multiply`, `popcount`, `primality`,
`factorial`, `runge_kutta`, `mix_1`, `mix_2`, `mix_3`.

Some programs compare only part of their result through a mask (for example
the top 12 bits for `fast_inv_sqrt`, the low 16 bits for the `mix_*`
programs).

## Installation

```
pip install .
```

## Command line

Run every program and report each one:

```
rvkernels
```

Run only some of them, by name, in the order given:

```
rvkernels gcd modexp chacha
```

List the programs with a short description:

```
rvkernels --list
```

Each line shows the name, `PASS` or `FAIL`, the signal value and the computed
values. The command exits with status 1 if any selected program fails, and
reports an error for an unknown name.

## Library use

```python
from rvkernels.arith import gcd, modexp
from rvkernels.bits import reverse_bits
from rvkernels.programs import PROGRAMS, run_all

assert gcd(48, 18) == 6
assert modexp(5, 3, 13) == 8
assert reverse_bits(1) == 0x80000000

result = PROGRAMS["gcd"].run()
assert result.passed and result.signal == 2025

for result in run_all(None):
    print(result.name, result.passed, result.values)
```

`run_all` takes an iterable of program names, or `None` for all of them, and
returns one `Result` per program; an unknown name raises `KeyError`.

## What it does not do

The kernels are computed directly in Python. The package does not build,
load or execute machine code, and it does not simulate a processor or its
registers; the "signal" of a `Result` is only the value a passing or failing
program reports.

## Tests

```
pip install .[test]
pytest
```