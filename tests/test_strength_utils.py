"""
tests/test_strength_utils.py
============================
Tests for core.strength_utils. Pure functions, no Streamlit.
"""
import pytest

from core.password_constants import SPECIAL_CHARACTERS
from core.strength_utils import (
    CRITERIA,
    STRENGTH_LEVELS,
    check_criteria,
    evaluate,
    feedback_text,
    strength_level,
)

ALL_MESSAGES = (
    "Need 8 more characters",
    "Add uppercase letters (A-Z)",
    "Add lowercase letters (a-z)",
    "Add numbers (0-9)",
    "Add special characters (!@#$%...)",
)


class TestEvaluate:

    def test_empty_password(self):
        result = evaluate("")
        assert result.score == 0
        assert result.passed == ()
        assert result.remediation == ALL_MESSAGES

    def test_none_is_empty(self):
        assert evaluate(None) == evaluate("")

    def test_all_criteria_met(self):
        result = evaluate("Abcdef1!")
        assert result.score == 5
        assert result.remediation == ()
        assert result.all_met

    def test_length_and_lowercase_only(self):
        result = evaluate("abcdefgh")
        assert result.score == 2
        assert result.passed == ("length", "lowercase")
        assert result.failed == ("uppercase", "number", "special")

    def test_singular_length_message(self):
        assert evaluate("Abcdefg").remediation[0] == "Need 1 more character"

    def test_plural_length_message(self):
        assert evaluate("Ab1!").remediation[0] == "Need 4 more characters"

    def test_remediation_follows_criteria_order(self):
        result = evaluate("12345")
        assert result.remediation == (
            "Need 3 more characters",
            "Add uppercase letters (A-Z)",
            "Add lowercase letters (a-z)",
            "Add special characters (!@#$%...)",
        )

    def test_unicode_letters_do_not_count(self):
        # Only ASCII A-Z / a-z / 0-9 satisfy the character criteria
        result = evaluate("ÄÖÜäöü٣٤")
        assert result.passed == ("length",)

    def test_idempotent(self):
        assert evaluate("P@ssw0rd") == evaluate("P@ssw0rd")

    @pytest.mark.parametrize("ch", list(SPECIAL_CHARACTERS))
    def test_every_special_character_counts(self, ch):
        assert "special" in evaluate(ch).passed

    def test_space_is_not_special(self):
        assert "special" not in evaluate("abc def").passed

    @pytest.mark.parametrize("pw", [
        "", "a", "abcdefgh", "ABCDEFGH", "Abcdef1!", "12345678",
        "!!!!!!!!", "Password1", "P@ss", "héllo wörld", "\U0001F600" * 9,
    ])
    def test_score_matches_criteria(self, pw):
        result = evaluate(pw)
        met = sum(c.is_met(pw) for c in CRITERIA)
        assert result.score == met
        assert result.score == 5 - len(result.remediation)
        assert result.score == len(result.passed)

    def test_percent(self):
        assert evaluate("").percent == 0
        assert evaluate("abcdefgh").percent == 40
        assert evaluate("Abcdef1!").percent == 100


class TestStrengthLevel:

    def test_six_levels(self):
        assert len(STRENGTH_LEVELS) == 6

    def test_zero_and_one_share_lowest(self):
        assert strength_level(0) == strength_level(1)
        assert strength_level(0).label == "Very Weak"

    @pytest.mark.parametrize("score,label", [
        (2, "Weak"),
        (3, "Medium"),
        (4, "Strong"),
        (5, "Very Strong"),
    ])
    def test_labels(self, score, label):
        assert strength_level(score).label == label

    def test_out_of_range_is_clamped(self):
        assert strength_level(-1) == STRENGTH_LEVELS[0]
        assert strength_level(9) == STRENGTH_LEVELS[5]

    def test_result_level(self):
        assert evaluate("Abcdef1!").label == "Very Strong"
        assert evaluate("abcdefgh").label == "Weak"

    def test_text_has_icon(self):
        assert strength_level(5).text == "Very Strong 💪"


class TestFeedback:

    def test_all_met(self):
        assert feedback_text(evaluate("Abcdef1!")) == "✓ All requirements met! Great password!"

    def test_suggestions_joined(self):
        text = feedback_text(evaluate("abcdefgh"))
        assert text == (
            "💡 Suggestions: Add uppercase letters (A-Z) • "
            "Add numbers (0-9) • Add special characters (!@#$%...)"
        )


class TestCheckCriteria:

    def test_keys_in_order(self):
        assert list(check_criteria("")) == ["length", "uppercase", "lowercase", "number", "special"]

    def test_values(self):
        assert check_criteria("abcdefgh") == {
            "length": True,
            "uppercase": False,
            "lowercase": True,
            "number": False,
            "special": False,
        }
