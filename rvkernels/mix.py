"""Mixed bit-churning workloads that fold into a 32-bit checksum."""

from rvkernels.bits import mask32, rotl

_MIX_OUTER = 10
_MIX_INNER = 50

_CHURN_LEN = 64
_CHURN_ROUNDS = 3

_MATRIX_N = 16
_MATRIX_PASSES = 3


def mix_checksum() -> int:
    """Run the mixed arithmetic, shift and logic workload; return its checksum."""
    acc = 0xCAFEBABE
    for outer in range(_MIX_OUTER):
        for i in range(_MIX_INNER):
            v = i * 17 + outer
            v = mask32(v ^ (v << 3) ^ (v >> 2))
            v = mask32(v + ((v & 0xFF00FF00) ^ 0xA5A5A5A5))
            v = rotl(v, 27)
            acc ^= v
            acc = mask32(acc + ((acc >> 11) ^ mask32(v << 1)))
        acc = mask32((acc << 1) ^ (acc >> 3) ^ 0x1337BEEF)
    return mask32((acc ^ (acc >> 16)) + 0xBEEF0000)


def _churn_seed_array() -> list[int]:
    seed = 0xDEADC0DE
    values = []
    for i in range(_CHURN_LEN):
        seed = rotl(seed ^ mask32(i * 0x91E9), i % 5)
        seed ^= seed >> 3
        values.append(seed)
    return values


def array_churn_checksum() -> int:
    """Build a 64-word array, churn it nonlinearly and fold it into a checksum."""
    arr = _churn_seed_array()
    for _ in range(_CHURN_ROUNDS):
        # Updated in place: later words read neighbours already rewritten.
        for i in range(_CHURN_LEN):
            x = arr[i]
            x = mask32(x ^ (x >> 5) ^ (x << 7))
            x = mask32(x + (arr[(i + 5) % _CHURN_LEN] ^ arr[(i + 13) % _CHURN_LEN]))
            arr[i] = rotl(x, i % 17)
    checksum = 0
    for i, value in enumerate(arr):
        checksum = rotl(checksum ^ value, i % 7)
    return checksum


def _seed_matrix() -> list[list[int]]:
    seed = 0x12345678
    matrix = []
    for i in range(_MATRIX_N):
        row = []
        for j in range(_MATRIX_N):
            seed ^= seed >> 13
            seed = mask32(seed * 0x5BD1E995)
            seed = mask32(seed ^ (seed << 11))
            row.append(seed ^ (i * j))
        matrix.append(row)
    return matrix


def matrix_hash() -> int:
    """Diffuse a pseudo-random 16x16 matrix and return the running hash."""
    matrix = _seed_matrix()
    hash_ = 0x7F4A7C15
    for _ in range(_MATRIX_PASSES):
        for i, row in enumerate(matrix):
            for j, x in enumerate(row):
                x = mask32(mask32((x << 5) ^ (x >> 3)) + (x ^ hash_))
                x ^= mask32((i + j) * 0x13371337)
                row[j] = x
                hash_ = mask32((hash_ ^ x) + mask32(hash_ << 1))
                hash_ ^= hash_ >> 17
    return hash_