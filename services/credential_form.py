"""
CredentialForm - CHANGEPASS
===========================

State machine behind the change-password widget: owns the Credentials,
the user-ID and password rule sets and the strength scorer, and
re-validates eagerly on every value change.

Modes:
    CHANGE_FORGOTTEN  new + confirm password only
    CHANGE_KNOWN      current password, new + confirm password (default)
    ESTABLISH_NEW     editable user ID, new + confirm password

Usage:
    form = CredentialForm(ChangePasswordMode.CHANGE_KNOWN)
    form.configure_rules(RuleField.PASSWORD, [rule_catalog.length(10, 64)])
    form.set_scorer(make_zxcvbn_scorer())
    form.confirmed.connect(on_confirmed)

    form.set_current_password(...)
    form.set_desired_password(...)
    form.set_confirm_password(...)
    form.confirm()      # emits confirmed only when is_valid()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from PySide6.QtCore import QObject, Signal

from core.translator import t, tf
from exceptions import ScorerError, StateError
from services.rule_set_evaluator import Evaluation, RuleSetEvaluator
from utils.password_strength import StrengthResult
from utils.rule import Rule

logger = logging.getLogger(__name__)

Scorer = Callable[[str], Optional[StrengthResult]]


class ChangePasswordMode(Enum):
    CHANGE_FORGOTTEN = "change_forgotten"
    CHANGE_KNOWN = "change_known"
    ESTABLISH_NEW = "establish_new"

    @classmethod
    def from_name(cls, name: str) -> "ChangePasswordMode":
        """Parse 'change_known', 'CHANGE-KNOWN', ... as found in config files."""
        key = (name or "").strip().lower().replace("-", "_")
        for mode in cls:
            if mode.value == key:
                return mode
        raise StateError(f"Unknown change-password mode: {name!r}", code="UNKNOWN_MODE")

    @property
    def title_key(self) -> str:
        return _MODE_TITLES[self]


_MODE_TITLES = {
    ChangePasswordMode.CHANGE_FORGOTTEN: "reset_password_title",
    ChangePasswordMode.CHANGE_KNOWN: "change_password_title",
    ChangePasswordMode.ESTABLISH_NEW: "establish_account_title",
}


class CredentialField(Enum):
    USER_ID = "user_id"
    CURRENT_PASSWORD = "current_password"
    DESIRED_PASSWORD = "desired_password"
    CONFIRM_PASSWORD = "confirm_password"

    @property
    def label_key(self) -> str:
        return f"{self.value}_label"


class RuleField(Enum):
    """Fields that carry a rule set."""

    USER_ID = "user_id"
    PASSWORD = "password"


@dataclass
class Credentials:
    user_id: Optional[str] = None
    current_password: Optional[str] = None
    desired_password: Optional[str] = None
    confirm_password: Optional[str] = None

    def clear(self) -> None:
        self.user_id = None
        self.current_password = None
        self.desired_password = None
        self.confirm_password = None

    def __repr__(self) -> str:
        # values stay out of logs and tracebacks
        filled = [name for name, value in vars(self).items() if value]
        return f"Credentials(filled={filled})"


@dataclass(frozen=True)
class FieldState:
    visible: bool
    required: bool
    read_only: bool

    @property
    def editable(self) -> bool:
        return self.visible and not self.read_only


@dataclass(frozen=True)
class FieldCheck:
    field: CredentialField
    valid: bool
    message: str = ""


@dataclass(frozen=True)
class ConfirmedCredentials:
    """Payload of CredentialForm.confirmed."""

    user_id: Optional[str]
    current_password: Optional[str]
    desired_password: str

    def __repr__(self) -> str:
        return "ConfirmedCredentials(<redacted>)"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class CredentialForm(QObject):
    """
    In-memory model of one change-password form instance.

    Nothing here is shared between instances; all evaluation runs
    synchronously on the caller's thread.
    """

    confirmed = Signal(object)              # ConfirmedCredentials
    cancelled = Signal()
    mode_changed = Signal(object)           # ChangePasswordMode
    field_states_changed = Signal()
    outcomes_changed = Signal(object, object)   # RuleField, Evaluation
    strength_changed = Signal(object)       # StrengthResult | None
    score_requested = Signal(int, str)      # token, desired password (async scorers)

    def __init__(self, mode: ChangePasswordMode = ChangePasswordMode.CHANGE_KNOWN, parent=None):
        super().__init__(parent)
        self._credentials = Credentials()
        self._evaluators: Dict[RuleField, RuleSetEvaluator] = {
            RuleField.USER_ID: RuleSetEvaluator(name="user_id"),
            RuleField.PASSWORD: RuleSetEvaluator(name="password"),
        }
        self._scorer: Optional[Scorer] = None
        self._scorer_async = False
        self._score_token = 0
        self._score_pending = False
        self._strength: Optional[StrengthResult] = None
        self._field_states: Dict[CredentialField, FieldState] = {}
        self._mode = ChangePasswordMode.CHANGE_KNOWN
        self.set_mode(mode)

    # ==============================
    # Mode & field table
    # ==============================

    def get_mode(self) -> ChangePasswordMode:
        return self._mode

    def set_mode(self, mode: ChangePasswordMode) -> None:
        if not isinstance(mode, ChangePasswordMode):
            raise StateError(f"Unknown change-password mode: {mode!r}", code="UNKNOWN_MODE")
        changed = mode is not self._mode
        self._mode = mode
        self._derive_field_states()
        if changed:
            logger.info(f"Change-password mode set to {mode.value}")
            self.mode_changed.emit(mode)

    def _derive_field_states(self) -> None:
        mode = self._mode
        establish = mode is ChangePasswordMode.ESTABLISH_NEW

        userid_visible = establish or self._credentials.user_id is not None
        userid_read_only = not establish
        current_visible = mode is ChangePasswordMode.CHANGE_KNOWN

        self._field_states = {
            CredentialField.USER_ID: FieldState(
                visible=userid_visible,
                required=userid_visible and not userid_read_only,
                read_only=userid_read_only,
            ),
            CredentialField.CURRENT_PASSWORD: FieldState(
                visible=current_visible, required=current_visible, read_only=False,
            ),
            CredentialField.DESIRED_PASSWORD: FieldState(visible=True, required=True, read_only=False),
            CredentialField.CONFIRM_PASSWORD: FieldState(visible=True, required=True, read_only=False),
        }
        self.field_states_changed.emit()

    def field_state(self, field: CredentialField) -> FieldState:
        try:
            return self._field_states[field]
        except KeyError:
            raise StateError(f"Unknown credential field: {field!r}", code="UNKNOWN_FIELD") from None

    # ==============================
    # Rules
    # ==============================

    def _evaluator(self, field: RuleField) -> RuleSetEvaluator:
        try:
            return self._evaluators[field]
        except KeyError:
            raise StateError(f"Unknown rule field: {field!r}", code="UNKNOWN_FIELD") from None

    def configure_rules(self, field: RuleField, rules: Iterable[Rule]) -> None:
        """Replace the rules of ``field``."""
        self._evaluator(field).set_rules(rules)
        self._publish_outcomes(field)

    def add_rules(self, field: RuleField, rules: Iterable[Rule]) -> None:
        """Append rules to ``field``."""
        self._evaluator(field).add_rules(rules)
        self._publish_outcomes(field)

    def get_rules(self, field: RuleField) -> tuple:
        return self._evaluator(field).rules

    def evaluate(self, field: RuleField) -> Evaluation:
        """Rule outcomes for the field's current value."""
        value = (
            self._credentials.user_id
            if field is RuleField.USER_ID
            else self._credentials.desired_password
        )
        return self._evaluator(field).evaluate(value)

    def _publish_outcomes(self, field: RuleField) -> None:
        self.outcomes_changed.emit(field, self.evaluate(field))

    # ==============================
    # Scorer
    # ==============================

    def set_scorer(self, scorer: Optional[Scorer], asynchronous: bool = False) -> None:
        """
        Install the strength scorer; None removes the meter entirely.

        With ``asynchronous=True`` the form never calls the scorer itself.
        It emits score_requested(token, text) and waits for
        deliver_score(token, result); only the latest token is accepted.
        """
        if scorer is not None and not callable(scorer):
            raise StateError("Scorer must be callable or None", code="BAD_SCORER")
        self._scorer = scorer
        self._scorer_async = bool(asynchronous) and scorer is not None
        logger.debug(f"Scorer {'installed' if scorer else 'removed'} (async={self._scorer_async})")
        self._rescore()

    def get_scorer(self) -> Optional[Scorer]:
        return self._scorer

    def has_scorer(self) -> bool:
        return self._scorer is not None

    def get_strength(self) -> Optional[StrengthResult]:
        """Current strength; None when empty, pending or without scorer."""
        return self._strength

    def is_score_pending(self) -> bool:
        """True between score_requested and the matching deliver_score."""
        return self._score_pending

    def _set_strength(self, strength: Optional[StrengthResult]) -> None:
        self._strength = strength
        self.strength_changed.emit(strength)

    def _rescore(self) -> None:
        self._score_token += 1
        self._score_pending = False
        desired = self._credentials.desired_password

        if self._scorer is None or not desired:
            self._set_strength(None)
            return

        if self._scorer_async:
            self._set_strength(None)
            self._score_pending = True
            self.score_requested.emit(self._score_token, desired)
            return

        try:
            result = self._scorer(desired)
        except ScorerError:
            self._set_strength(None)
            raise
        except Exception as e:
            self._set_strength(None)
            raise ScorerError(detail=type(e).__name__) from e
        self._set_strength(result)

    def deliver_score(self, token: int, result: Optional[StrengthResult]) -> bool:
        """
        Accept an asynchronous score. Results for a superseded input are
        discarded and False is returned.
        """
        if token != self._score_token:
            logger.debug(f"Discarding stale score (token {token}, latest {self._score_token})")
            return False
        self._score_pending = False
        self._set_strength(result)
        return True

    # ==============================
    # Credentials
    # ==============================

    def get_user_id(self) -> Optional[str]:
        return self._credentials.user_id

    def set_user_id(self, user_id: Optional[str]) -> None:
        self._credentials.user_id = user_id
        self._derive_field_states()
        self._publish_outcomes(RuleField.USER_ID)

    def get_current_password(self) -> Optional[str]:
        return self._credentials.current_password

    def set_current_password(self, password: Optional[str]) -> None:
        self._credentials.current_password = password

    def get_desired_password(self) -> Optional[str]:
        return self._credentials.desired_password

    def set_desired_password(self, password: Optional[str]) -> None:
        """Setting the desired password never touches the confirm field."""
        self._credentials.desired_password = password
        self._publish_outcomes(RuleField.PASSWORD)
        self._rescore()

    def get_confirm_password(self) -> Optional[str]:
        return self._credentials.confirm_password

    def set_confirm_password(self, password: Optional[str]) -> None:
        self._credentials.confirm_password = password

    def set_value(self, field: CredentialField, value: Optional[str]) -> None:
        setter = {
            CredentialField.USER_ID: self.set_user_id,
            CredentialField.CURRENT_PASSWORD: self.set_current_password,
            CredentialField.DESIRED_PASSWORD: self.set_desired_password,
            CredentialField.CONFIRM_PASSWORD: self.set_confirm_password,
        }.get(field)
        if setter is None:
            raise StateError(f"Unknown credential field: {field!r}", code="UNKNOWN_FIELD")
        setter(value)

    def get_value(self, field: CredentialField) -> Optional[str]:
        if not isinstance(field, CredentialField):
            raise StateError(f"Unknown credential field: {field!r}", code="UNKNOWN_FIELD")
        return getattr(self._credentials, field.value)

    def get_credentials(self) -> Credentials:
        """A copy; mutating it does not affect the form."""
        return replace(self._credentials)

    # ==============================
    # Validation
    # ==============================

    def _required_message(self, field: CredentialField) -> str:
        return tf("required_field", label=t(field.label_key))

    def validate_field(self, field: CredentialField) -> FieldCheck:
        state = self.field_state(field)
        value = self.get_value(field)

        if field is CredentialField.USER_ID:
            if not state.editable:
                return FieldCheck(field, True)
            if _is_blank(value):
                return FieldCheck(field, False, self._required_message(field))
            if not self._evaluator(RuleField.USER_ID).is_satisfied_by(value):
                return FieldCheck(field, False, t("userid_invalid"))
            return FieldCheck(field, True)

        if field is CredentialField.CURRENT_PASSWORD:
            if state.visible and _is_blank(value):
                return FieldCheck(field, False, self._required_message(field))
            return FieldCheck(field, True)

        if field is CredentialField.DESIRED_PASSWORD:
            if _is_blank(value):
                return FieldCheck(field, False, self._required_message(field))
            if not self._evaluator(RuleField.PASSWORD).is_satisfied_by(value):
                return FieldCheck(field, False, t("password_invalid"))
            return FieldCheck(field, True)

        # confirm password
        if _is_blank(value):
            return FieldCheck(field, False, self._required_message(field))
        if value != self._credentials.desired_password:
            return FieldCheck(field, False, t("passwords_mismatch"))
        return FieldCheck(field, True)

    def validate(self) -> List[FieldCheck]:
        return [self.validate_field(field) for field in CredentialField]

    def is_valid(self) -> bool:
        """All four field checks pass; recomputed on every call."""
        return all(check.valid for check in self.validate())

    # ==============================
    # Actions
    # ==============================

    def reset(self) -> None:
        """Clear all values; rules, scorer and mode stay."""
        self._credentials.clear()
        self._derive_field_states()
        for field in RuleField:
            self._publish_outcomes(field)
        self._rescore()
        logger.debug("Credential form reset")

    def confirm(self) -> bool:
        """Emit confirmed once if the form is valid; return whether it fired."""
        if not self.is_valid():
            invalid = [c.field.value for c in self.validate() if not c.valid]
            logger.info(f"Confirm refused, invalid fields: {invalid}")
            return False

        payload = ConfirmedCredentials(
            user_id=self._credentials.user_id,
            current_password=self._credentials.current_password,
            desired_password=self._credentials.desired_password,
        )
        logger.info(f"Credentials confirmed (mode={self._mode.value})")
        self.confirmed.emit(payload)
        return True

    def cancel(self) -> None:
        logger.info("Credential form cancelled")
        self.cancelled.emit()
