"""Simplified AES key schedule, AddRoundKey and ChaCha20 rounds on 32-bit words."""

from collections.abc import Iterable, Sequence

from rvkernels.bits import MASK32, mask32, rotl

RCON = (
    0x01000000, 0x02000000, 0x04000000, 0x08000000,
    0x10000000, 0x20000000, 0x40000000, 0x80000000,
    0x1B000000, 0x36000000,
)

AES_SAMPLE_KEY_WORDS = (0x2B7E1516, 0x28AED2A6, 0xABF71588, 0x09CF4F3C)

AES_SAMPLE_STATE = bytes([
    0x32, 0x88, 0x31, 0xE0,
    0x43, 0x5A, 0x31, 0x37,
    0xF6, 0x30, 0x98, 0x07,
    0xA8, 0x8D, 0xA2, 0x34,
])

AES_SAMPLE_KEY = bytes([
    0x2B, 0x7E, 0x15, 0x16,
    0x28, 0xAE, 0xD2, 0xA6,
    0xAB, 0xF7, 0x15, 0x88,
    0x09, 0xCF, 0x4F, 0x3C,
])

CHACHA_SAMPLE_STATE = (
    0x61707865, 0x3320646E, 0x79622D32, 0x6B206574,
    0x03020100, 0x07060504, 0x0B0A0908, 0x0F0E0D0C,
    0x00000001, 0x09000000, 0x4A000000, 0x00000000,
    0x00000000, 0x00000000, 0x00000000, 0x00000000,
)

KEY_WORDS = 4
SCHEDULE_WORDS = 44
CHACHA_WORDS = 16

_COLUMNS = ((0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15))
_DIAGONALS = ((0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14))


def _words(values: Iterable[int]) -> list[int]:
    words = list(values)
    for word in words:
        if not 0 <= word <= MASK32:
            raise ValueError(f"not a 32-bit word: {word!r}")
    return words


def expand_key(key: Iterable[int]) -> list[int]:
    """Expand a 4-word key into 44 words (RotWord and Rcon, no SubWord)."""
    words = _words(key)
    if len(words) != KEY_WORDS:
        raise ValueError(f"key must have {KEY_WORDS} words, got {len(words)}")
    for i in range(KEY_WORDS, SCHEDULE_WORDS):
        temp = words[-1]
        if i % KEY_WORDS == 0:
            temp = rotl(temp, 8) ^ RCON[i // KEY_WORDS - 1]
        words.append(words[i - KEY_WORDS] ^ temp)
    return words


def add_round_key(state: bytes, key: bytes) -> bytes:
    """XOR each byte of ``state`` with the matching byte of ``key``."""
    if len(state) != len(key):
        raise ValueError(
            f"state and key differ in length: {len(state)} != {len(key)}"
        )
    return bytes(s ^ k for s, k in zip(state, key))


def quarterround(x: Sequence[int], a: int, b: int, c: int, d: int) -> list[int]:
    """Apply one ChaCha quarterround to words ``a, b, c, d``; return the new state."""
    w = list(x)
    w[a] = mask32(w[a] + w[b])
    w[d] = rotl(w[d] ^ w[a], 16)
    w[c] = mask32(w[c] + w[d])
    w[b] = rotl(w[b] ^ w[c], 12)
    w[a] = mask32(w[a] + w[b])
    w[d] = rotl(w[d] ^ w[a], 8)
    w[c] = mask32(w[c] + w[d])
    w[b] = rotl(w[b] ^ w[c], 7)
    return w


def chacha_rounds(state: Iterable[int], double_rounds: int = 10) -> list[int]:
    """Run ``double_rounds`` column-plus-diagonal rounds over a 16-word state."""
    words = _words(state)
    if len(words) != CHACHA_WORDS:
        raise ValueError(f"state must have {CHACHA_WORDS} words, got {len(words)}")
    if double_rounds < 0:
        raise ValueError("double_rounds must not be negative")
    for _ in range(double_rounds):
        for indices in _COLUMNS + _DIAGONALS:
            words = quarterround(words, *indices)
    return words