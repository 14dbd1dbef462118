# -*- coding: utf-8 -*-
"""
utils/password_strength.py
==========================
Guesses → strength level classification; no Qt.

Scoring:
  adjusted = guesses - 5          (every password costs at least 5 guesses)

  adjusted < 1e3   → VERY_WEAK   "#FF1F1F"
  adjusted < 1e6   → WEAK        "#FFBF00"
  adjusted < 1e9   → MEDIOCRE    "#EFEF00"
  adjusted < 1e12  → STRONG      "#1FFF1F"
  otherwise        → VERY_STRONG "#00BF00"

How the guesses were estimated is not this module's business: an
estimator is injected (see services.zxcvbn_estimator).
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from numbers import Real
from typing import Callable, Optional, Union

from exceptions import ScorerError

GUESS_DISCOUNT = 5


class StrengthLevel(IntEnum):
    """Ordered strength levels; the integer value is the rank."""

    VERY_WEAK = 0
    WEAK = 1
    MEDIOCRE = 2
    STRONG = 3
    VERY_STRONG = 4

    @property
    def color(self) -> str:
        return _LEVEL_COLORS[self]

    @property
    def caption_key(self) -> str:
        """Translation key of the localized caption, e.g. strength_level_weak."""
        return f"strength_level_{self.name.lower()}"


_LEVEL_COLORS = {
    StrengthLevel.VERY_WEAK: "#FF1F1F",
    StrengthLevel.WEAK: "#FFBF00",
    StrengthLevel.MEDIOCRE: "#EFEF00",
    StrengthLevel.STRONG: "#1FFF1F",
    StrengthLevel.VERY_STRONG: "#00BF00",
}

# (exclusive upper bound on adjusted guesses, level)
_THRESHOLDS = (
    (1e3, StrengthLevel.VERY_WEAK),
    (1e6, StrengthLevel.WEAK),
    (1e9, StrengthLevel.MEDIOCRE),
    (1e12, StrengthLevel.STRONG),
)


@dataclass(frozen=True)
class StrengthResult:
    level: StrengthLevel
    feedback: str = ""


@dataclass(frozen=True)
class GuessEstimate:
    """What an estimator knows about one candidate."""

    guesses: float
    crack_time_display: str = ""
    warning: str = ""


Estimator = Callable[[str], Union[GuessEstimate, Real]]
FeedbackFormatter = Callable[[GuessEstimate], str]


def _is_nan(value) -> bool:
    return isinstance(value, (float, Decimal)) and math.isnan(value)


def classify(guesses: float) -> StrengthLevel:
    """Map an estimated number of guesses to a StrengthLevel; NaN is VERY_WEAK."""
    adjusted = guesses - GUESS_DISCOUNT
    if _is_nan(adjusted):
        return StrengthLevel.VERY_WEAK
    for upper_bound, level in _THRESHOLDS:
        if adjusted < upper_bound:
            return level
    return StrengthLevel.VERY_STRONG


def default_feedback(estimate: GuessEstimate) -> str:
    """'Could take {time} to crack. {warning}' in the current language."""
    from core.translator import tf

    if not estimate.crack_time_display:
        return (estimate.warning or "").strip()
    return tf(
        "strength_feedback",
        time=estimate.crack_time_display,
        warning=estimate.warning or "",
    ).strip()


def _estimate(candidate: str, estimator: Estimator) -> GuessEstimate:
    try:
        estimate = estimator(candidate)
    except Exception as e:
        raise ScorerError(detail=type(e).__name__) from e

    if isinstance(estimate, Real) and not isinstance(estimate, bool):
        estimate = GuessEstimate(guesses=float(estimate))
    if isinstance(estimate, GuessEstimate):
        if _is_nan(estimate.guesses):
            raise ScorerError("Estimator returned NaN guesses", code="SCORER_BAD_RESULT")
        return estimate
    raise ScorerError(
        f"Estimator returned {type(estimate).__name__}, expected GuessEstimate or a number",
        code="SCORER_BAD_RESULT",
    )


def score(
    candidate: str,
    estimator: Estimator,
    formatter: Optional[FeedbackFormatter] = None,
) -> StrengthResult:
    """
    Estimate, classify and describe the strength of ``candidate``.

    Raises:
        ScorerError: the estimator raised or returned something unusable.
    """
    estimate = _estimate(candidate, estimator)
    level = classify(estimate.guesses)
    feedback = (formatter or default_feedback)(estimate)
    return StrengthResult(level=level, feedback=feedback)


def make_scorer(
    estimator: Estimator,
    formatter: Optional[FeedbackFormatter] = None,
) -> Callable[[str], StrengthResult]:
    """Bind an estimator into the scorer expected by CredentialForm.set_scorer."""
    def scorer(candidate: str) -> StrengthResult:
        return score(candidate, estimator, formatter)
    return scorer


def make_level_scorer(estimator: Estimator) -> Callable[[str], StrengthLevel]:
    """Bind an estimator into the level-only scorer used by minimum_strength rules."""
    def level_scorer(candidate: str) -> StrengthLevel:
        return classify(_estimate(candidate, estimator).guesses)
    return level_scorer
