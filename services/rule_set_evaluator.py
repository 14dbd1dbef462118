"""
RuleSetEvaluator - CHANGEPASS
=============================

Runs an ordered collection of rules against one candidate value and
reports every rule's state at once, so the UI can tick or cross each of
them on every keystroke.

Usage:
    evaluator = RuleSetEvaluator([rule_catalog.length(8), rule_catalog.has_digits(1)])
    evaluation = evaluator.evaluate("hunter22")
    evaluation.all_satisfied      # True
    [o.state for o in evaluation.outcomes]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from exceptions import RuleConfigurationError
from utils.rule import Rule, RuleOutcome, RuleState

logger = logging.getLogger(__name__)

# Inputs every rule must answer without raising before it is accepted.
PROBE_SAMPLES = ("", "Probe-1 x")


@dataclass(frozen=True)
class Evaluation:
    outcomes: Tuple[RuleOutcome, ...]
    all_satisfied: bool

    @property
    def failed_rules(self) -> Tuple[Rule, ...]:
        return tuple(o.rule for o in self.outcomes if o.state is RuleState.FAILED)

    @property
    def states(self) -> Tuple[RuleState, ...]:
        return tuple(o.state for o in self.outcomes)


class RuleSetEvaluator:
    """
    Ordered rules for one field.

    Insertion order is display order and duplicates are kept. Evaluation
    is idempotent and has no side effects.
    """

    def __init__(self, rules: Iterable[Rule] = (), name: str = ""):
        self._name = name or "rules"
        self._rules: list[Rule] = []
        self.add_rules(rules)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return tuple(self._rules)

    def set_rules(self, rules: Iterable[Rule]) -> None:
        """Replace the whole rule set."""
        rules = list(rules)
        self._verify(rules)
        self._rules = rules
        logger.debug(f"[{self._name}] rule set replaced ({len(rules)} rules)")

    def add_rules(self, rules: Iterable[Rule]) -> None:
        """Append rules after the existing ones."""
        rules = list(rules)
        self._verify(rules)
        self._rules.extend(rules)
        if rules:
            logger.debug(f"[{self._name}] {len(rules)} rules added, {len(self._rules)} total")

    def clear(self) -> None:
        self._rules.clear()

    def _verify(self, rules: list) -> None:
        """
        Reject anything that is not a Rule, and any rule whose test raises
        on the probe samples, before it can reach the user.
        """
        for rule in rules:
            if not isinstance(rule, Rule):
                raise RuleConfigurationError(
                    message=f"Expected a Rule, got {type(rule).__name__}",
                    code="NOT_A_RULE",
                )
            for sample in PROBE_SAMPLES:
                try:
                    rule.is_satisfied_by(sample)
                except RuleConfigurationError:
                    logger.error(f"[{self._name}] rule '{rule.description}' raised during registration")
                    raise

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, candidate: Optional[str]) -> Evaluation:
        """
        Empty (or None) candidate: every rule UNEVALUATED, not satisfied.
        Otherwise every rule runs, no short-circuit; satisfied iff all pass.

        Raises:
            RuleConfigurationError: a rule's test raised.
        """
        if not candidate:
            outcomes = tuple(RuleOutcome(rule, RuleState.UNEVALUATED) for rule in self._rules)
            return Evaluation(outcomes=outcomes, all_satisfied=False)

        outcomes = tuple(
            RuleOutcome(rule, RuleState.PASSED if rule.is_satisfied_by(candidate) else RuleState.FAILED)
            for rule in self._rules
        )
        return Evaluation(
            outcomes=outcomes,
            all_satisfied=all(o.passed for o in outcomes),
        )

    def is_satisfied_by(self, candidate: Optional[str]) -> bool:
        return self.evaluate(candidate).all_satisfied

    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(tuple(self._rules))

    def __repr__(self) -> str:
        return f"RuleSetEvaluator(name={self._name!r}, rules={len(self._rules)})"
