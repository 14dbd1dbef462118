"""
exceptions.py
=============
CHANGEPASS - Hierarchical Exception System

All application exceptions inherit from ChangePassError so integrators
can catch the full hierarchy with a single except clause when needed.

Rule outcomes and field checks that simply fail are NOT exceptions; they
are returned as data (RuleOutcome / FieldCheck). Only broken
configuration surfaces here.

Structure
---------
ChangePassError
├── ConfigurationError
│   ├── InvalidValueError
│   ├── RuleConfigurationError
│   └── ScorerError
└── StateError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class ChangePassError(Exception):
    """Base exception for all CHANGEPASS errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "RULE_RAISED"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(ChangePassError):
    """Raised when the widget or application configuration is invalid."""


class InvalidValueError(ConfigurationError):
    """Raised when a factory or configuration argument is out of range."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, **kwargs)
        self.field = field
        self.value = value
        self.reason = reason


class RuleConfigurationError(ConfigurationError):
    """Raised when a rule's test raises instead of answering True/False."""

    def __init__(self, description: str = "", message: str = "", **kwargs):
        if not message:
            message = (
                f"Rule '{description}' raised while testing a candidate"
                if description
                else "Rule raised while testing a candidate"
            )
        kwargs.setdefault("code", "RULE_RAISED")
        super().__init__(message, **kwargs)
        self.description = description


class ScorerError(ConfigurationError):
    """Raised when a strength scorer or guesses estimator fails."""

    def __init__(self, message: str = "Strength scorer failed", **kwargs):
        kwargs.setdefault("code", "SCORER_RAISED")
        super().__init__(message, **kwargs)


# ─── State ───────────────────────────────────────────────────────────────────

class StateError(ChangePassError):
    """Raised when the form is driven with an unknown field or mode."""
