"""
ChangePasswordPanel - CHANGEPASS
================================

Widget front of a CredentialForm:

- credential block: user ID, current, new and confirm password edits,
  each with its label and an error line
- help block: optional info text, user ID rules, password rules and the
  strength meter; hidden when all four are hidden

Every keystroke is pushed into the form (eager value change). Field
visibility and read-only state follow the form's field table; error
lines show for fields the user has edited, and for all fields after a
refused confirm.
"""

import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit
)
from PySide6.QtCore import Qt, Signal

from constants import ObjectNames as ON, ERROR_TEXT_COLOR
from core.translator import TranslationManager
from exceptions import ScorerError
from services.credential_form import (
    ChangePasswordMode, CredentialField, CredentialForm, RuleField,
)
from ui.widgets.rule_list import RuleListBlock
from ui.widgets.strength_meter import StrengthMeter

logger = logging.getLogger(__name__)

_EDIT_NAMES = {
    CredentialField.USER_ID: ON.USER_ID_EDIT,
    CredentialField.CURRENT_PASSWORD: ON.CURRENT_PASSWORD_EDIT,
    CredentialField.DESIRED_PASSWORD: ON.DESIRED_PASSWORD_EDIT,
    CredentialField.CONFIRM_PASSWORD: ON.CONFIRM_PASSWORD_EDIT,
}


class ChangePasswordPanel(QWidget):

    scorer_failed = Signal(str)

    def __init__(self, form: Optional[CredentialForm] = None, parent=None):
        super().__init__(parent)
        self.setObjectName(ON.PANEL)
        self._ = TranslationManager.get_instance().translate

        self.form = form if form is not None else CredentialForm(parent=self)
        self._syncing = False
        self._touched = set()
        self._show_all_errors = False

        self.labels: Dict[CredentialField, QLabel] = {}
        self.edits: Dict[CredentialField, QLineEdit] = {}
        self.errors: Dict[CredentialField, QLabel] = {}

        self._init_ui()
        self._connect_form()

        TranslationManager.get_instance().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()

        self._sync_from_form()
        self.userid_rules.update_evaluation(self.form.evaluate(RuleField.USER_ID))
        self.password_rules.update_evaluation(self.form.evaluate(RuleField.PASSWORD))
        self.strength_meter.set_result(self.form.get_strength())
        self._update_help_visibility()

    # ==============================
    # Layout
    # ==============================

    def _init_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        credential_block = QWidget()
        credential_layout = QVBoxLayout(credential_block)
        credential_layout.setContentsMargins(0, 0, 0, 0)
        credential_layout.setSpacing(2)

        for field in CredentialField:
            label = QLabel()
            edit = QLineEdit()
            edit.setObjectName(_EDIT_NAMES[field])
            if field is not CredentialField.USER_ID:
                edit.setEchoMode(QLineEdit.Password)
            label.setBuddy(edit)

            error = QLabel()
            error.setObjectName(ON.FIELD_ERROR)
            error.setStyleSheet(f"color: {ERROR_TEXT_COLOR}; font-size: 11px;")
            error.setWordWrap(True)
            error.setVisible(False)

            credential_layout.addWidget(label)
            credential_layout.addWidget(edit)
            credential_layout.addWidget(error)

            edit.textChanged.connect(lambda text, f=field: self._on_text_changed(f, text))

            self.labels[field] = label
            self.edits[field] = edit
            self.errors[field] = error

        credential_layout.addStretch()

        self.help_block = QWidget()
        self.help_block.setObjectName(ON.HELP_BLOCK)
        help_layout = QVBoxLayout(self.help_block)
        help_layout.setContentsMargins(0, 0, 0, 0)
        help_layout.setSpacing(10)

        self.info_label = QLabel()
        self.info_label.setObjectName(ON.INFO_LABEL)
        self.info_label.setWordWrap(True)
        self.info_label.setTextFormat(Qt.AutoText)
        self.info_label.setVisible(False)

        self.userid_rules = RuleListBlock("userid_rules_label", ON.USERID_RULES)
        self.password_rules = RuleListBlock("password_rules_label", ON.PASSWORD_RULES)
        self.strength_meter = StrengthMeter()

        help_layout.addWidget(self.info_label)
        help_layout.addWidget(self.userid_rules)
        help_layout.addWidget(self.password_rules)
        help_layout.addWidget(self.strength_meter)
        help_layout.addStretch()

        layout.addWidget(credential_block, 3)
        layout.addWidget(self.help_block, 4)

    def _connect_form(self):
        self.form.field_states_changed.connect(self._apply_field_states)
        self.form.outcomes_changed.connect(self._on_outcomes_changed)
        self.form.strength_changed.connect(self._on_strength_changed)
        self.form.mode_changed.connect(lambda _mode: self._update_help_visibility())

    def retranslate_ui(self):
        for field, label in self.labels.items():
            label.setText(self._(field.label_key))
        self._refresh_errors()

    # ==============================
    # Form -> widgets
    # ==============================

    def _sync_from_form(self):
        """Copy form values into the edits without echoing them back."""
        self._syncing = True
        try:
            for field, edit in self.edits.items():
                value = self.form.get_value(field) or ""
                if edit.text() != value:
                    edit.setText(value)
        finally:
            self._syncing = False
        self._apply_field_states()

    def _apply_field_states(self):
        for field, edit in self.edits.items():
            state = self.form.field_state(field)
            self.labels[field].setVisible(state.visible)
            edit.setVisible(state.visible)
            edit.setReadOnly(state.read_only)
        self._update_help_visibility()
        self._refresh_errors()

    def _on_outcomes_changed(self, field: RuleField, evaluation):
        block = self.userid_rules if field is RuleField.USER_ID else self.password_rules
        block.update_evaluation(evaluation)
        self._update_help_visibility()

    def _on_strength_changed(self, result):
        self.strength_meter.set_result(result)
        self._update_help_visibility()

    def _update_help_visibility(self):
        userid_state = self.form.field_state(CredentialField.USER_ID)
        self.userid_rules.setVisible(self.userid_rules.has_rules() and userid_state.editable)
        self.password_rules.setVisible(self.password_rules.has_rules())
        self.strength_meter.setVisible(self.form.has_scorer())

        self.help_block.setVisible(
            not self.info_label.isHidden()
            or not self.userid_rules.isHidden()
            or not self.password_rules.isHidden()
            or not self.strength_meter.isHidden()
        )

    # ==============================
    # Widgets -> form
    # ==============================

    def _on_text_changed(self, field: CredentialField, text: str):
        if self._syncing:
            return
        self._touched.add(field)
        try:
            self.form.set_value(field, text)
        except ScorerError as e:
            logger.error(f"Strength scoring failed: {e}")
            self.strength_meter.feedback.setText(self._("scorer_failed"))
            self.scorer_failed.emit(str(e))
        if field is CredentialField.DESIRED_PASSWORD and self.form.get_confirm_password():
            self._touched.add(CredentialField.CONFIRM_PASSWORD)
        self._refresh_errors()

    # ==============================
    # Errors
    # ==============================

    def _refresh_errors(self):
        for check in self.form.validate():
            error = self.errors[check.field]
            show = (
                not check.valid
                and self.form.field_state(check.field).visible
                and (self._show_all_errors or check.field in self._touched)
            )
            error.setText(check.message if show else "")
            error.setVisible(show)

    def show_all_errors(self):
        """Reveal every field error, e.g. after a refused confirm."""
        self._show_all_errors = True
        self._refresh_errors()

    def error_text(self, field: CredentialField) -> str:
        return self.errors[field].text()

    # ==============================
    # Public API
    # ==============================

    def set_info_text(self, text: Optional[str]):
        """Text (plain or rich) shown above the rules; None or empty hides it."""
        self.info_label.setText(text or "")
        self.info_label.setVisible(bool(text))
        self._update_help_visibility()

    def info_text(self) -> str:
        return self.info_label.text()

    def set_mode(self, mode: ChangePasswordMode):
        self.form.set_mode(mode)

    def refresh(self):
        """Re-read values from the form after the host changed them directly."""
        self._sync_from_form()

    def reset(self):
        self.form.reset()
        self._touched.clear()
        self._show_all_errors = False
        self._sync_from_form()

    def first_editable_edit(self) -> Optional[QLineEdit]:
        """User ID when editable, else current password when shown, else new password."""
        for field in CredentialField:
            state = self.form.field_state(field)
            if state.editable:
                return self.edits[field]
        return None

    def showEvent(self, event):
        super().showEvent(event)
        edit = self.first_editable_edit()
        if edit is not None:
            edit.setFocus()
