"""
ChangePasswordDialog - CHANGEPASS

Modal dialog around a ChangePasswordPanel with Cancel / OK.

OK closes the dialog only when the form is valid; otherwise every field
error is revealed and the dialog stays open. Cancel, Escape and the
window close button all cancel the form.

Usage:
    dialog = ChangePasswordDialog(ChangePasswordMode.CHANGE_KNOWN, parent=self)
    dialog.form.configure_rules(RuleField.PASSWORD, rules)
    dialog.form.set_scorer(make_zxcvbn_scorer())
    dialog.confirmed.connect(self._store_new_password)
    dialog.exec()
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QVBoxLayout, QHBoxLayout
from PySide6.QtCore import Signal

from constants import ObjectNames as ON
from core.base_dialog import BaseDialog
from services.credential_form import ChangePasswordMode, CredentialForm
from ui.widgets.change_password_panel import ChangePasswordPanel
from ui.widgets.custom_button import CustomButton

logger = logging.getLogger(__name__)


class ChangePasswordDialog(BaseDialog):

    confirmed = Signal(object)      # ConfirmedCredentials
    cancelled = Signal()

    def __init__(
        self,
        mode: ChangePasswordMode = ChangePasswordMode.CHANGE_KNOWN,
        parent=None,
        form: Optional[CredentialForm] = None,
    ):
        super().__init__(parent, title_key=mode.title_key, auto_center=True)

        self.form = form if form is not None else CredentialForm(mode, parent=self)
        if form is not None:
            self.form.set_mode(mode)

        self.form.confirmed.connect(self.confirmed)
        self.form.cancelled.connect(self.cancelled)
        self.form.mode_changed.connect(lambda m: self.set_translated_title(m.title_key))

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        self.panel = ChangePasswordPanel(self.form, self)
        self.panel.scorer_failed.connect(self._on_scorer_failed)
        layout.addWidget(self.panel)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.cancel_button = CustomButton("cancel", self, object_name=ON.CANCEL_BUTTON)
        self.cancel_button.setAutoDefault(False)
        self.cancel_button.clicked.connect(self.reject)

        self.ok_button = CustomButton("ok", self, object_name=ON.OK_BUTTON)
        self.ok_button.setDefault(True)
        self.ok_button.clicked.connect(self.accept)

        buttons.addWidget(self.cancel_button)
        buttons.addWidget(self.ok_button)
        layout.addLayout(buttons)

    # ==============================
    # Panel shortcuts
    # ==============================

    def set_info_text(self, text: Optional[str]):
        self.panel.set_info_text(text)

    # ==============================
    # Accept / reject
    # ==============================

    def validate(self) -> bool:
        if self.form.confirm():
            return True
        self.panel.show_all_errors()
        return False

    def _on_scorer_failed(self, _detail: str):
        self.show_error("error", "scorer_failed")

    def reject(self):
        self.form.cancel()
        super().reject()
