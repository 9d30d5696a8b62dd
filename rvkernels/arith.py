"""Integer arithmetic kernels working in unsigned 32-bit words."""

import math
from collections.abc import Iterable

from rvkernels.bits import WORD_BITS, mask32

RSQRT_MAGIC = 0x5F3759DF

# 2**32 divides n! for every n >= 34, so the wrapped factorial is zero from there.
_FACTORIAL_ZERO_FROM = 34


def fast_pow(base: int, exp: int) -> int:
    """Compute ``base ** exp`` by squaring, wrapping at 32 bits."""
    base, exp = mask32(base), mask32(exp)
    result = 1
    while exp:
        if exp & 1:
            result = mask32(result * base)
        base = mask32(base * base)
        exp >>= 1
    return result


def q_rsqrt(number: int) -> int:
    """Approximate the float bits of 1/sqrt(x) from the float bits ``number``."""
    return mask32(RSQRT_MAGIC - (mask32(number) >> 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    a, b = mask32(a), mask32(b)
    while b:
        a, b = b, a % b
    return a


def modexp(base: int, exp: int, mod: int) -> int:
    """Compute ``base ** exp % mod`` with 32-bit intermediate products."""
    mod = mask32(mod)
    base, exp = mask32(base) % mod, mask32(exp)
    result = 1
    while exp:
        if exp & 1:
            result = mask32(result * base) % mod
        base = mask32(base * base) % mod
        exp >>= 1
    return result


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    n = mask32(n)
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def count_primes(lo: int, hi: int) -> int:
    """Count the primes in the inclusive range ``lo..hi``."""
    return sum(1 for n in range(lo, hi + 1) if is_prime(n))


def factorial(n: int) -> int:
    """Compute ``n!`` wrapped to 32 bits."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n >= _FACTORIAL_ZERO_FROM:
        return 0
    return mask32(math.factorial(n))


def rk4_fixed(x: int, y: int, h: int) -> int:
    """One RK4 step of dy/dx = x + y on unsigned words, as the kernel computes it."""
    x, y, h = mask32(x), mask32(y), mask32(h)
    half = h // 2
    k1 = mask32(h * (x + y))
    k2 = mask32(h * (x + half + y + k1 // 2))
    k3 = mask32(h * (x + half + y + k2 // 2))
    k4 = mask32(h * (x + h + y + k3))
    return mask32(y + mask32(k1 + 2 * k2 + 2 * k3 + k4) // 6)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number (F0 = 0), wrapped to 32 bits."""
    if n < 0:
        raise ValueError("index must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, mask32(a + b)
    return a


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


__all__ = [
    "WORD_BITS",
    "bubble_sort",
    "count_primes",
    "factorial",
    "fast_pow",
    "fibonacci",
    "gcd",
    "is_prime",
    "modexp",
    "q_rsqrt",
    "rk4_fixed",
]