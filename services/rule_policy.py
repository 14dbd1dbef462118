"""
Rule policies.

A policy is a flat mapping of requirements, typically stored in
settings.json or an environment variable:

    PASSWORD_POLICY={"min_length": 10, "max_length": 64,
                     "min_character_groups": 3, "specials": "!@#$%",
                     "min_specifieds": 1}

RulePolicy.from_mapping() checks it and build_rules() turns it into
rule_catalog rules in display order. The same keys serve USERID_POLICY.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional

from exceptions import InvalidValueError
from utils import rule_catalog
from utils.rule import Rule

logger = logging.getLogger(__name__)

PASSWORD_POLICY_KEY = "PASSWORD_POLICY"
USERID_POLICY_KEY = "USERID_POLICY"


@dataclass(frozen=True)
class RulePolicy:
    """Complexity requirements; zero / None / empty means 'no rule'."""

    min_length: int = 0
    max_length: Optional[int] = None
    min_uppercase: int = 0
    min_lowercase: int = 0
    min_digits: int = 0
    min_specials: int = 0
    min_character_groups: int = 0
    specials: str = ""
    min_specifieds: int = 0
    start_with_letter: bool = False

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "RulePolicy":
        mapping = dict(mapping or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise InvalidValueError("policy", ", ".join(unknown), "unknown policy keys")

        start = mapping.get("start_with_letter", False)
        if not isinstance(start, bool):
            raise InvalidValueError("start_with_letter", start, "must be true or false")
        specials = mapping.get("specials", "")
        if not isinstance(specials, str):
            raise InvalidValueError("specials", specials, "must be a string")

        return cls(**mapping)

    def is_empty(self) -> bool:
        return self == RulePolicy()

    def build_rules(self) -> List[Rule]:
        """
        Rules in display order: length, first letter, character classes,
        specified characters, character groups.

        Raises:
            InvalidValueError: a count is negative or not an integer, or
                max_length < min_length.
        """
        rules: List[Rule] = []

        if self.min_length or self.max_length is not None:
            rules.append(rule_catalog.length(self.min_length, self.max_length))
        if self.start_with_letter:
            rules.append(rule_catalog.starts_with_letter())

        for count, factory in (
            (self.min_uppercase, rule_catalog.has_uppercase),
            (self.min_lowercase, rule_catalog.has_lowercase),
            (self.min_digits, rule_catalog.has_digits),
            (self.min_specials, rule_catalog.has_specials),
        ):
            if count:
                rules.append(factory(count))

        if self.min_specifieds:
            rules.append(rule_catalog.has_specifieds(self.min_specifieds, self.specials))
        if self.min_character_groups:
            rules.append(rule_catalog.has_character_groups(self.min_character_groups))

        return rules


def build_rules(mapping: Optional[Mapping[str, Any]]) -> List[Rule]:
    return RulePolicy.from_mapping(mapping).build_rules()


def load_policy_rules(config, key: str) -> List[Rule]:
    """Read policy ``key`` from a core.config.Config and build its rules."""
    rules = build_rules(config.get_mapping(key))
    logger.info(f"{len(rules)} rules configured from {key}")
    return rules
