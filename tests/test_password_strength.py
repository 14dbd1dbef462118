# -*- coding: utf-8 -*-
"""
tests/test_password_strength.py
=================================
Guesses -> StrengthLevel classification, scorers. Zero Qt widgets.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from decimal import Decimal

import pytest
from exceptions import RuleConfigurationError, ScorerError
from utils import rule_catalog as rc
from utils.password_strength import (
    GUESS_DISCOUNT,
    GuessEstimate,
    StrengthLevel,
    StrengthResult,
    classify,
    default_feedback,
    make_level_scorer,
    make_scorer,
    score,
)


class TestStrengthLevel:

    def test_explicit_ranks(self):
        assert [int(level) for level in StrengthLevel] == [0, 1, 2, 3, 4]

    def test_ordering(self):
        assert StrengthLevel.VERY_WEAK < StrengthLevel.WEAK < StrengthLevel.MEDIOCRE
        assert StrengthLevel.MEDIOCRE < StrengthLevel.STRONG < StrengthLevel.VERY_STRONG
        assert StrengthLevel.STRONG >= StrengthLevel.STRONG

    @pytest.mark.parametrize("level,color", [
        (StrengthLevel.VERY_WEAK, "#FF1F1F"),
        (StrengthLevel.WEAK, "#FFBF00"),
        (StrengthLevel.MEDIOCRE, "#EFEF00"),
        (StrengthLevel.STRONG, "#1FFF1F"),
        (StrengthLevel.VERY_STRONG, "#00BF00"),
    ])
    def test_colors(self, level, color):
        assert level.color == color

    def test_caption_key(self):
        assert StrengthLevel.VERY_STRONG.caption_key == "strength_level_very_strong"


class TestClassify:

    @pytest.mark.parametrize("guesses,level", [
        (0, StrengthLevel.VERY_WEAK),
        (1e3 + 4, StrengthLevel.VERY_WEAK),
        (1e3 + 5, StrengthLevel.WEAK),
        (1_000_000, StrengthLevel.WEAK),
        (1e6 + 5, StrengthLevel.MEDIOCRE),
        (1e9 + 4, StrengthLevel.MEDIOCRE),
        (1e9 + 5, StrengthLevel.STRONG),
        (1e12 + 4, StrengthLevel.STRONG),
        (1e12 + 5, StrengthLevel.VERY_STRONG),
        (1e30, StrengthLevel.VERY_STRONG),
    ])
    def test_breakpoints(self, guesses, level):
        assert classify(guesses) is level

    def test_discount(self):
        assert GUESS_DISCOUNT == 5

    def test_negative_guesses_are_very_weak(self):
        assert classify(-10) is StrengthLevel.VERY_WEAK

    def test_decimal_guesses(self):
        assert classify(Decimal("1000005")) is StrengthLevel.MEDIOCRE

    @pytest.mark.parametrize("nan", [float("nan"), Decimal("NaN")])
    def test_nan_is_very_weak(self, nan):
        assert classify(nan) is StrengthLevel.VERY_WEAK


class TestDefaultFeedback:

    def test_time_and_warning(self):
        text = default_feedback(GuessEstimate(10, "3 hours", "This is a top-10 common password."))
        assert text == "Could take 3 hours to crack. This is a top-10 common password."

    def test_time_without_warning(self):
        assert default_feedback(GuessEstimate(10, "centuries")) == "Could take centuries to crack."

    def test_warning_without_time(self):
        assert default_feedback(GuessEstimate(10, "", "Avoid dates.")) == "Avoid dates."

    def test_nothing_known(self):
        assert default_feedback(GuessEstimate(10)) == ""


class TestScore:

    def test_number_estimator(self):
        result = score("abc", lambda text: 5e6)
        assert result == StrengthResult(StrengthLevel.MEDIOCRE, "")

    def test_estimate_estimator(self):
        result = score("abc", lambda text: GuessEstimate(50, "less than a second", ""))
        assert result.level is StrengthLevel.VERY_WEAK
        assert result.feedback == "Could take less than a second to crack."

    def test_custom_formatter(self):
        result = score("abc", lambda text: GuessEstimate(1e20), formatter=lambda e: "fine")
        assert result == StrengthResult(StrengthLevel.VERY_STRONG, "fine")

    def test_estimator_exception_wrapped(self):
        def broken(text):
            raise ValueError("nope")
        with pytest.raises(ScorerError) as exc_info:
            score("abc", broken)
        assert exc_info.value.code == "SCORER_RAISED"
        assert exc_info.value.detail == "ValueError"

    @pytest.mark.parametrize("bad", [None, "1000", True, [1]])
    def test_unusable_result_rejected(self, bad):
        with pytest.raises(ScorerError) as exc_info:
            score("abc", lambda text: bad)
        assert exc_info.value.code == "SCORER_BAD_RESULT"

    @pytest.mark.parametrize("estimate", [float("nan"), GuessEstimate(float("nan"), "centuries")])
    def test_nan_guesses_rejected(self, estimate):
        with pytest.raises(ScorerError) as exc_info:
            score("abc", lambda text: estimate)
        assert exc_info.value.code == "SCORER_BAD_RESULT"

    def test_nan_estimator_cannot_pass_minimum_strength(self):
        rule = rc.minimum_strength(StrengthLevel.WEAK, make_level_scorer(lambda text: float("nan")))
        with pytest.raises(RuleConfigurationError):
            rule.is_satisfied_by("abc")


class TestScorerFactories:

    def test_make_scorer(self):
        scorer = make_scorer(lambda text: 10 ** len(text))
        assert scorer("ab").level is StrengthLevel.VERY_WEAK
        assert scorer("abcdefghijklm").level is StrengthLevel.VERY_STRONG

    def test_make_level_scorer_returns_level(self):
        level_scorer = make_level_scorer(lambda text: 10 ** len(text))
        assert level_scorer("abcde") is StrengthLevel.WEAK
