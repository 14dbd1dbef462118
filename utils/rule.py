# -*- coding: utf-8 -*-
"""
utils/rule.py
=============
A named predicate over user IDs and password candidates; no Qt.

A Rule pairs a human-readable description (shown next to a pass/fail
indicator) with a pure test function. Rules are built once when the form
is configured, usually through utils.rule_catalog, and never mutated.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from exceptions import InvalidValueError, RuleConfigurationError


class RuleState(Enum):
    """Display state of one rule for the current candidate."""

    UNEVALUATED = "unevaluated"   # candidate is empty
    FAILED = "failed"
    PASSED = "passed"


@dataclass(frozen=True, eq=False)
class Rule:
    """
    A description plus a pure ``(text) -> bool`` test.

    The test must depend on its argument only. Rules hold no reference
    values in their repr: closures over encoded secrets stay opaque.
    """

    description: str
    test: Callable[[str], bool] = field(repr=False)

    def __post_init__(self):
        if not callable(self.test):
            raise InvalidValueError("test", type(self.test).__name__, "must be callable")
        if not isinstance(self.description, str):
            raise InvalidValueError("description", self.description, "must be a string")

    def is_satisfied_by(self, text: str) -> bool:
        """
        Apply the test to ``text``.

        Raises:
            RuleConfigurationError: the test raised; a broken rule is never
                reported as a plain failure.
        """
        try:
            return bool(self.test(text))
        except Exception as e:
            raise RuleConfigurationError(
                self.description, detail=type(e).__name__
            ) from e


@dataclass(frozen=True)
class RuleOutcome:
    """Transient projection of a rule against one candidate."""

    rule: Rule
    state: RuleState

    @property
    def passed(self) -> bool:
        return self.state is RuleState.PASSED

    @property
    def description(self) -> str:
        return self.rule.description
