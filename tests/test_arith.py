import math
import struct

import pytest

from rvkernels.arith import (
    RSQRT_MAGIC,
    bubble_sort,
    count_primes,
    factorial,
    fast_pow,
    fibonacci,
    gcd,
    is_prime,
    modexp,
    q_rsqrt,
    rk4_fixed,
)
from rvkernels.bits import mask32


def _float_bits(value):
    return int.from_bytes(struct.pack(">f", value), "big")


def _bits_float(bits):
    return struct.unpack(">f", bits.to_bytes(4, "big"))[0]


def test_fast_pow_source_case():
    assert fast_pow(3, 10) == 59049


@pytest.mark.parametrize("base", [0, 1, 3, 12345])
def test_fast_pow_zero_exponent(base):
    assert fast_pow(base, 0) == 1


def test_fast_pow_wraps_at_32_bits():
    assert fast_pow(2, 32) == 0


@pytest.mark.parametrize("base,exp", [(3, 5), (7, 9), (11, 13), (2, 40)])
def test_fast_pow_matches_wrapped_power(base, exp):
    assert fast_pow(base, exp) == pow(base, exp, 2**32)


def test_q_rsqrt_of_zero_is_magic():
    assert q_rsqrt(0) == RSQRT_MAGIC


@pytest.mark.parametrize("value", [1.0, 2.0, 4.0, 10.0, 100.0])
def test_q_rsqrt_approximates_inverse_sqrt(value):
    approx = _bits_float(q_rsqrt(_float_bits(value)))
    expected = 1 / math.sqrt(value)
    assert abs(approx - expected) / expected < 0.05


def test_gcd_source_case():
    assert gcd(48, 18) == 6


@pytest.mark.parametrize("a,b", [(48, 18), (17, 5), (100, 75), (0, 9)])
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert gcd(a, b) == gcd(b, a)


def test_gcd_with_zero():
    assert gcd(42, 0) == 42


def test_modexp_source_case():
    assert modexp(5, 3, 13) == 8


@pytest.mark.parametrize("base,exp,mod", [(5, 3, 13), (7, 100, 97), (123, 456, 1009), (2, 0, 7)])
def test_modexp_matches_pow(base, exp, mod):
    assert modexp(base, exp, mod) == pow(base, exp, mod)


def test_modexp_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        modexp(5, 3, 0)


def test_count_primes_source_case():
    assert count_primes(2, 100) == 25


@pytest.mark.parametrize("n", [0, 1])
def test_is_prime_below_two(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", [2, 3, 5, 97])
def test_is_prime_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [4, 9, 91, 100])
def test_is_prime_composites(n):
    assert is_prime(n) is False


def test_count_primes_empty_range():
    assert count_primes(10, 9) == 0


def test_factorial_source_case():
    assert factorial(5) == 120


def test_factorial_base_cases():
    assert factorial(0) == factorial(1) == 1


@pytest.mark.parametrize("n", range(2, 41))
def test_factorial_recurrence(n):
    assert factorial(n) == mask32(n * factorial(n - 1))


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("y", [0, 1 << 16, 12345])
def test_rk4_zero_step_keeps_y(y):
    assert rk4_fixed(0, y, 0) == y


def test_rk4_source_inputs_give_32_bit_word():
    result = rk4_fixed(0, 1 << 16, 0x199A)
    assert result == mask32(result)


def test_fibonacci_start():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 60))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == mask32(fibonacci(n - 1) + fibonacci(n - 2))


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-3)


def test_bubble_sort_source_data():
    data = [23, 5, 99, 1, 17, 42]
    assert bubble_sort(data) == sorted(data)
    assert data == [23, 5, 99, 1, 17, 42]


@pytest.mark.parametrize("data", [[], [1], [3, 3, 1], [5, 4, 3, 2, 1], [1, 2, 3]])
def test_bubble_sort_matches_sorted(data):
    assert bubble_sort(data) == sorted(data)