"""String hash functions and random word generation."""

from __future__ import annotations

import random
import string

_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63


def _offset(ch: str) -> int:
    return ord(ch) - ord("a")


def _wrap_signed64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value & _SIGN64 else value


def _c_remainder(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend, as integer division truncates."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


def random_words(size: int, word_len: int, rng: random.Random | None = None) -> list[str]:
    """Return ``size`` distinct random lowercase words of length ``word_len``."""
    if size > 26 ** word_len:
        raise ValueError(
            f"cannot make {size} distinct words of length {word_len}"
        )
    rng = rng or random.Random()
    seen: set[str] = set()
    words: list[str] = []
    while len(words) < size:
        word = "".join(rng.choice(string.ascii_lowercase) for _ in range(word_len))
        if word not in seen:
            seen.add(word)
            words.append(word)
    return words


def basic_hash(key: str) -> int:
    """Sum of the letter offsets of ``key``."""
    return sum(_offset(ch) for ch in key)


def poly_roll_hash(key: str, length: int, p: int) -> int:
    """Polynomial rolling hash with base ``p``, reduced modulo ``length``."""
    total = 0
    power = 1
    for ch in key:
        total = _wrap_signed64(total + _offset(ch) * power)
        power = _wrap_signed64(power * p)
    return _c_remainder(total, length)


def poly_sum_hash(key: str) -> int:
    """Sum of the cubes of the letter offsets of ``key``."""
    return sum(_offset(ch) ** 3 for ch in key)


def djb_hash(key: str, length: int) -> int:
    """DJB-style hash (multiplier 33) on 64-bit unsigned arithmetic, modulo ``length``."""
    total = 0
    for ch in key:
        total = (total * 33 + _offset(ch)) & _MASK64
    return total % length


def sdbm_hash(key: str, length: int) -> int:
    """SDBM-style hash (multiplier 65599) on 64-bit unsigned arithmetic, modulo ``length``."""
    total = 0
    for ch in key:
        total = (total * 65599 + _offset(ch)) & _MASK64
    return total % length