# core/strength_utils.py
"""
Password strength scoring.

Five fixed criteria are checked in declaration order. The score and the list
of unmet criteria come out of the same loop, so they cannot disagree.

    score 0-1 -> Very Weak
    score 2   -> Weak
    score 3   -> Medium
    score 4   -> Strong
    score 5   -> Very Strong
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from core.password_constants import (
    DIGITS,
    LOWERCASE,
    MIN_LENGTH,
    SPECIAL_CHARACTERS,
    UPPERCASE,
)

logger = logging.getLogger(__name__)

_UPPER = frozenset(UPPERCASE)
_LOWER = frozenset(LOWERCASE)
_DIGIT = frozenset(DIGITS)
_SPECIAL = frozenset(SPECIAL_CHARACTERS)


@dataclass(frozen=True)
class Criterion:
    key: str
    label: str
    predicate: Callable[[str], bool]
    remediation: Callable[[str], str]

    def is_met(self, password: str) -> bool:
        return self.predicate(password)


@dataclass(frozen=True)
class StrengthLevel:
    label: str
    icon: str
    colors: Tuple[str, str]  # gradient start, end

    @property
    def text(self) -> str:
        return f"{self.label} {self.icon}"


def _missing_length_message(password: str) -> str:
    missing = MIN_LENGTH - len(password)
    return f"Need {missing} more character{'s' if missing > 1 else ''}"


def _contains_any(alphabet: frozenset) -> Callable[[str], bool]:
    return lambda password: any(c in alphabet for c in password)


CRITERIA: Tuple[Criterion, ...] = (
    Criterion(
        "length",
        f"At least {MIN_LENGTH} characters",
        lambda password: len(password) >= MIN_LENGTH,
        _missing_length_message,
    ),
    Criterion(
        "uppercase",
        "Uppercase letter (A-Z)",
        _contains_any(_UPPER),
        lambda _: "Add uppercase letters (A-Z)",
    ),
    Criterion(
        "lowercase",
        "Lowercase letter (a-z)",
        _contains_any(_LOWER),
        lambda _: "Add lowercase letters (a-z)",
    ),
    Criterion(
        "number",
        "Number (0-9)",
        _contains_any(_DIGIT),
        lambda _: "Add numbers (0-9)",
    ),
    Criterion(
        "special",
        "Special character (!@#$%...)",
        _contains_any(_SPECIAL),
        lambda _: "Add special characters (!@#$%...)",
    ),
)

MAX_SCORE = len(CRITERIA)

_VERY_WEAK = StrengthLevel("Very Weak", "❌", ("#e74c3c", "#c0392b"))

# Indexed by score; 0 and 1 share the lowest level on purpose
STRENGTH_LEVELS: Tuple[StrengthLevel, ...] = (
    _VERY_WEAK,
    _VERY_WEAK,
    StrengthLevel("Weak", "😕", ("#e67e22", "#d35400")),
    StrengthLevel("Medium", "⚠️", ("#f39c12", "#e67e22")),
    StrengthLevel("Strong", "👍", ("#3498db", "#2980b9")),
    StrengthLevel("Very Strong", "💪", ("#2ecc71", "#27ae60")),
)


def strength_level(score: int) -> StrengthLevel:
    score = max(0, min(int(score), MAX_SCORE))
    return STRENGTH_LEVELS[score]


@dataclass(frozen=True)
class ScoreResult:
    passed: Tuple[str, ...]
    remediation: Tuple[str, ...]

    @property
    def score(self) -> int:
        return len(self.passed)

    @property
    def failed(self) -> Tuple[str, ...]:
        return tuple(c.key for c in CRITERIA if c.key not in self.passed)

    @property
    def all_met(self) -> bool:
        return not self.remediation

    @property
    def level(self) -> StrengthLevel:
        return strength_level(self.score)

    @property
    def label(self) -> str:
        return self.level.label

    @property
    def percent(self) -> float:
        return self.score / MAX_SCORE * 100


def evaluate(password: Optional[str]) -> ScoreResult:
    """
    Score a password against CRITERIA.
    None is treated as an empty string; never raises.
    """
    password = password or ""
    passed = []
    remediation = []
    for criterion in CRITERIA:
        if criterion.is_met(password):
            passed.append(criterion.key)
        else:
            remediation.append(criterion.remediation(password))

    result = ScoreResult(passed=tuple(passed), remediation=tuple(remediation))
    logger.debug("Evaluated password of length %d: score=%d", len(password), result.score)
    return result


def check_criteria(password: Optional[str]) -> Dict[str, bool]:
    """Per-criterion pass map in declaration order."""
    passed = evaluate(password).passed
    return {c.key: c.key in passed for c in CRITERIA}


def feedback_text(result: ScoreResult) -> str:
    if result.all_met:
        return "✓ All requirements met! Great password!"
    return "💡 Suggestions: " + " • ".join(result.remediation)
