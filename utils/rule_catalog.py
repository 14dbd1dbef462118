# -*- coding: utf-8 -*-
"""
utils/rule_catalog.py
=====================
Factories for the common credential rules.

Every factory returns a utils.rule.Rule. Unless ``description`` is given,
the description is generated from the translation table in the current
language, pluralized for count == 1 versus any other count:

    length(8)                    "At least 8 characters long"
    length(10, 64)               "Between 10 and 64 characters long"
    starts_with_letter()         "Must start with a letter"
    has_uppercase(1)             "At least 1 uppercase letter"
    has_digits(2)                "At least 2 digits"
    has_specifieds(1, "!@#")     "At least 1 character from: !@#"
    has_character_groups(3)      "Characters from at least 3 of the groups: ..."
    different(enc, enc("old"))   "Different from current password"
    not_any_of(enc, [h1, h2])    "Not any of 2 previous passwords"
    minimum_strength(STRONG, f)  "Minimum strength of Strong"

Count-based rules with count == 0 accept any text, the empty one included.
Character classes follow Unicode: str.isupper / str.islower / str.isdecimal.
"""
from typing import Callable, Iterable, Optional

from core.translator import t, tf
from exceptions import InvalidValueError
from utils.password_strength import StrengthLevel, StrengthResult
from utils.rule import Rule

Encoder = Callable[[str], str]


# ─── Argument checks ──────────────────────────────────────────────────────────

def _check_count(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(name, value, "must be an integer")
    if value < 0:
        raise InvalidValueError(name, value, "must not be negative")
    return value


def _check_callable(name: str, value) -> None:
    if not callable(value):
        raise InvalidValueError(name, type(value).__name__, "must be callable")


def _plural_key(base: str, count: int) -> str:
    return f"{base}_one" if count == 1 else f"{base}_other"


# ─── Character classes ────────────────────────────────────────────────────────

def _is_upper(c: str) -> bool:
    return c.isupper()


def _is_lower(c: str) -> bool:
    return c.islower()


def _is_digit(c: str) -> bool:
    return c.isdecimal()


def _is_special(c: str) -> bool:
    return not (c.isupper() or c.islower() or c.isdecimal())


def _count_of(predicate: Callable[[str], bool], text: str) -> int:
    return sum(1 for c in text if predicate(c))


def _counting_rule(key: str, count: int, predicate, description: Optional[str]) -> Rule:
    count = _check_count("count", count)
    if description is None:
        description = tf(_plural_key(key, count), count=count)
    return Rule(description, lambda text: _count_of(predicate, text) >= count)


# ─── Length ───────────────────────────────────────────────────────────────────

def length(
    min_length: int,
    max_length: Optional[int] = None,
    description: Optional[str] = None,
) -> Rule:
    """At least ``min_length`` characters, and at most ``max_length`` if given."""
    min_length = _check_count("min_length", min_length)

    if max_length is None:
        if description is None:
            description = tf("rule_length_min", min=min_length)
        return Rule(description, lambda text: len(text) >= min_length)

    max_length = _check_count("max_length", max_length)
    if max_length < min_length:
        raise InvalidValueError(
            "max_length", max_length, f"must be >= min_length ({min_length})"
        )
    if description is None:
        description = tf("rule_length_range", min=min_length, max=max_length)
    return Rule(description, lambda text: min_length <= len(text) <= max_length)


def starts_with_letter(description: Optional[str] = None) -> Rule:
    """First character is a Unicode letter."""
    if description is None:
        description = t("rule_starts_with_letter")
    return Rule(description, lambda text: text[:1].isalpha())


# ─── Character counts ─────────────────────────────────────────────────────────

def has_uppercase(count: int, description: Optional[str] = None) -> Rule:
    return _counting_rule("rule_has_uppercase", count, _is_upper, description)


def has_lowercase(count: int, description: Optional[str] = None) -> Rule:
    return _counting_rule("rule_has_lowercase", count, _is_lower, description)


def has_digits(count: int, description: Optional[str] = None) -> Rule:
    return _counting_rule("rule_has_digits", count, _is_digit, description)


def has_specials(count: int, description: Optional[str] = None) -> Rule:
    """Characters that are neither uppercase, lowercase nor digits."""
    return _counting_rule("rule_has_specials", count, _is_special, description)


def has_specifieds(count: int, charset: str, description: Optional[str] = None) -> Rule:
    """At least ``count`` characters of the text belong to ``charset``."""
    count = _check_count("count", count)
    if not isinstance(charset, str):
        raise InvalidValueError("charset", charset, "must be a string")
    if count > 0 and not charset:
        raise InvalidValueError("charset", charset, "must not be empty")

    chars = "".join(dict.fromkeys(charset))
    allowed = frozenset(chars)
    if description is None:
        description = tf(_plural_key("rule_has_specifieds", count), count=count, chars=chars)
    return Rule(description, lambda text: _count_of(allowed.__contains__, text) >= count)


def has_character_groups(count: int, description: Optional[str] = None) -> Rule:
    """
    At least ``count`` of the four groups (uppercase, lowercase, digits,
    specials) occur somewhere in the text. Presence counts, not quantity.
    """
    count = _check_count("count", count)
    if count > 4:
        raise InvalidValueError("count", count, "there are only 4 character groups")
    if description is None:
        description = tf("rule_character_groups", count=count)

    groups = (_is_upper, _is_lower, _is_digit, _is_special)

    def test(text: str) -> bool:
        present = sum(1 for group in groups if any(group(c) for c in text))
        return present >= count

    return Rule(description, test)


# ─── Reuse prevention ─────────────────────────────────────────────────────────

def different(
    encoder: Encoder,
    encoded_reference: str,
    description: Optional[str] = None,
) -> Rule:
    """
    The encoded candidate differs from ``encoded_reference``.

    Only the encoded reference is kept, inside the rule's closure; the
    plaintext it came from never reaches this module.
    """
    _check_callable("encoder", encoder)
    if description is None:
        description = t("rule_different")
    return Rule(description, lambda text: encoder(text) != encoded_reference)


def not_any_of(
    encoder: Encoder,
    encoded_references: Iterable[str],
    description: Optional[str] = None,
) -> Rule:
    """The encoded candidate matches none of ``encoded_references``."""
    _check_callable("encoder", encoder)
    if isinstance(encoded_references, str):
        raise InvalidValueError(
            "encoded_references", None, "must be a collection of encoded values, not a string"
        )
    references = frozenset(encoded_references)
    if description is None:
        description = tf(_plural_key("rule_not_any_of", len(references)), count=len(references))
    return Rule(description, lambda text: encoder(text) not in references)


# ─── Strength ─────────────────────────────────────────────────────────────────

def minimum_strength(
    level: StrengthLevel,
    scorer: Callable[[str], StrengthLevel],
    description: Optional[str] = None,
) -> Rule:
    """
    ``scorer(text)`` reaches at least ``level``.

    The scorer returns a StrengthLevel (a StrengthResult is accepted too);
    see utils.password_strength.make_level_scorer.
    """
    _check_callable("scorer", scorer)
    try:
        level = StrengthLevel(level)
    except ValueError as e:
        raise InvalidValueError("level", level, "must be a StrengthLevel") from e
    if description is None:
        description = tf("rule_minimum_strength", caption=t(level.caption_key))

    def test(text: str) -> bool:
        scored = scorer(text)
        if isinstance(scored, StrengthResult):
            scored = scored.level
        return StrengthLevel(scored) >= level

    return Rule(description, test)


__all__ = [
    "length",
    "starts_with_letter",
    "has_uppercase",
    "has_lowercase",
    "has_digits",
    "has_specials",
    "has_specifieds",
    "has_character_groups",
    "different",
    "not_any_of",
    "minimum_strength",
]
