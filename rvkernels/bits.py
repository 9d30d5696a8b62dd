"""32-bit word helpers shared by the kernels."""

WORD_BITS = 32
MASK32 = (1 << WORD_BITS) - 1


def mask32(x: int) -> int:
    """Reduce ``x`` to an unsigned 32-bit word, wrapping like hardware does."""
    return x & MASK32


def rotl(x: int, r: int) -> int:
    """Rotate the 32-bit word ``x`` left by ``r`` bits."""
    r %= WORD_BITS
    x = mask32(x)
    return mask32((x << r) | (x >> (WORD_BITS - r)))


def reverse_bits(x: int) -> int:
    """Reverse the order of the 32 bits of ``x``."""
    return int(format(mask32(x), f"0{WORD_BITS}b")[::-1], 2)


def popcount(x: int) -> int:
    """Count the set bits of the 32-bit word ``x``."""
    return bin(mask32(x)).count("1")


def andn(x: int, mask: int) -> int:
    """Return ``x & ~mask`` as a 32-bit word."""
    return mask32(x & ~mask)