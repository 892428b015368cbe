# core/generator_utils.py
from __future__ import annotations
import logging
import math
import secrets
from typing import List, Optional, Protocol, Sequence, TypeVar

from core.password_constants import (
    ALL_CHARACTERS,
    CHARACTER_CLASSES,
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    def next_uniform(self, low: int, high: int) -> int:
        """Return an int in [low, high)."""
        ...


class SecretsRandom:
    """CSPRNG-backed source (secrets module)."""

    def next_uniform(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError("Empty range.")
        return low + secrets.randbelow(high - low)


_DEFAULT_RNG = SecretsRandom()


def clamp_length(value) -> int:
    """
    Bring any requested length into [MIN_LENGTH, MAX_LENGTH].
    Floats are truncated, numeric strings parsed; anything unparseable
    (None, "abc", NaN) gives DEFAULT_LENGTH.
    """
    if isinstance(value, int):
        return max(MIN_LENGTH, min(value, MAX_LENGTH))
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_LENGTH
    if math.isnan(number):
        return DEFAULT_LENGTH
    return int(max(MIN_LENGTH, min(number, MAX_LENGTH)))


def random_char(alphabet: str, rng: Optional[RandomSource] = None) -> str:
    if not alphabet:
        raise ValueError("Empty alphabet.")
    rng = rng or _DEFAULT_RNG
    return alphabet[rng.next_uniform(0, len(alphabet))]


def shuffle(items: Sequence[T], rng: Optional[RandomSource] = None) -> List[T]:
    """Fisher-Yates shuffle into a new list."""
    rng = rng or _DEFAULT_RNG
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.next_uniform(0, i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def generate(length=DEFAULT_LENGTH, rng: Optional[RandomSource] = None) -> str:
    """
    Generate a password of clamp_length(length) characters with at least
    one lowercase, uppercase, digit and special character.
    """
    rng = rng or _DEFAULT_RNG
    size = clamp_length(length)
    if size != length:
        logger.debug("Requested length %r clamped to %d", length, size)

    pw_chars = [random_char(alphabet, rng) for _, alphabet in CHARACTER_CLASSES]  # guarantee coverage
    for _ in range(size - len(pw_chars)):
        pw_chars.append(random_char(ALL_CHARACTERS, rng))
    return "".join(shuffle(pw_chars, rng))
