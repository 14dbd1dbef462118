"""
zxcvbn estimator adapter.

Maps a zxcvbn result onto utils.password_strength.GuessEstimate so the
classifier stays independent of the estimator library.
"""

import logging
from typing import Callable, Iterable

from zxcvbn import zxcvbn

from utils.password_strength import (
    GuessEstimate,
    StrengthLevel,
    StrengthResult,
    make_level_scorer,
    make_scorer,
)

logger = logging.getLogger(__name__)

CRACK_TIME_SCENARIO = "offline_slow_hashing_1e4_per_second"


def zxcvbn_estimate(text: str, user_inputs: Iterable[str] = ()) -> GuessEstimate:
    """
    Estimate ``text`` with zxcvbn.

    ``user_inputs`` are words the estimator should treat as known to an
    attacker (user ID, e-mail, product name). Empty text is zero guesses;
    zxcvbn itself cannot score it.
    """
    if not text:
        return GuessEstimate(guesses=0.0)

    result = zxcvbn(text, user_inputs=list(user_inputs))
    feedback = result.get("feedback") or {}
    return GuessEstimate(
        guesses=float(result["guesses"]),
        crack_time_display=result.get("crack_times_display", {}).get(CRACK_TIME_SCENARIO, ""),
        warning=feedback.get("warning") or "",
    )


def _estimator(user_inputs: Iterable[str]) -> Callable[[str], GuessEstimate]:
    inputs = tuple(user_inputs)

    def estimate(text: str) -> GuessEstimate:
        return zxcvbn_estimate(text, inputs)

    return estimate


def make_zxcvbn_scorer(user_inputs: Iterable[str] = ()) -> Callable[[str], StrengthResult]:
    """Scorer for CredentialForm.set_scorer."""
    logger.debug("zxcvbn scorer created")
    return make_scorer(_estimator(user_inputs))


def make_zxcvbn_level_scorer(user_inputs: Iterable[str] = ()) -> Callable[[str], StrengthLevel]:
    """Level scorer for rule_catalog.minimum_strength."""
    return make_level_scorer(_estimator(user_inputs))
