"""
CHANGEPASS Demo Entry Point
===========================
Opens a window with a single button that shows the change-password
dialog, configured from .env / config/settings.json:

    CHANGEPASS_LANGUAGE   en | ar
    CHANGEPASS_MODE       change_known | change_forgotten | establish_new
    PASSWORD_POLICY       {"min_length": 10, "max_length": 64, ...}
    USERID_POLICY         {"min_length": 4, "start_with_letter": true}
"""
import sys
import os
import logging

os.environ.setdefault("QT_LOGGING_RULES", "qt.qpa.*=false;*.debug=false")

from PySide6.QtWidgets import QApplication, QWidget, QVBoxLayout, QLabel, QMessageBox

from core.config import CONFIG_SCHEMA, config, is_debug_mode
from core.logging_config import LoggingConfig
from core.translator import TranslationManager, t, tf
from exceptions import ChangePassError
from services.credential_form import ChangePasswordMode, RuleField
from services.rule_policy import PASSWORD_POLICY_KEY, USERID_POLICY_KEY, load_policy_rules
from services.zxcvbn_estimator import make_zxcvbn_level_scorer, make_zxcvbn_scorer
from ui.dialogs.change_password_dialog import ChangePasswordDialog
from ui.widgets.custom_button import CustomButton
from utils import rule_catalog
from utils.auth_utils import encode_password
from utils.password_strength import StrengthLevel
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)

# Stand-ins for what a host would load from its user store.
DEMO_USER_ID = "demo"
DEMO_CURRENT_PASSWORD = "Winter-2024"
DEMO_PREVIOUS_PASSWORDS = ("Autumn-2023", "Summer-2023")


class DemoWindow(QWidget):
    def __init__(self, mode: ChangePasswordMode):
        super().__init__()
        self.mode = mode
        self.setWindowTitle(f"{APP_NAME} {VERSION}")
        self.setMinimumWidth(320)

        layout = QVBoxLayout(self)
        self.open_button = CustomButton("demo_open_dialog", self)
        self.open_button.clicked.connect(self.open_dialog)
        self.status = QLabel()
        self.status.setWordWrap(True)
        layout.addWidget(self.open_button)
        layout.addWidget(self.status)

    def _build_dialog(self) -> ChangePasswordDialog:
        dialog = ChangePasswordDialog(self.mode, parent=self)
        form = dialog.form

        if self.mode is not ChangePasswordMode.ESTABLISH_NEW:
            form.set_user_id(DEMO_USER_ID)
        if self.mode is ChangePasswordMode.CHANGE_KNOWN:
            form.set_current_password(DEMO_CURRENT_PASSWORD)
        dialog.panel.refresh()

        form.configure_rules(RuleField.USER_ID, load_policy_rules(config, USERID_POLICY_KEY))

        password_rules = load_policy_rules(config, PASSWORD_POLICY_KEY)
        password_rules.append(rule_catalog.different(encode_password, encode_password(DEMO_CURRENT_PASSWORD)))
        password_rules.append(rule_catalog.not_any_of(
            encode_password, [encode_password(p) for p in DEMO_PREVIOUS_PASSWORDS]
        ))
        password_rules.append(rule_catalog.minimum_strength(
            StrengthLevel.MEDIOCRE, make_zxcvbn_level_scorer([DEMO_USER_ID])
        ))
        form.configure_rules(RuleField.PASSWORD, password_rules)
        form.set_scorer(make_zxcvbn_scorer([DEMO_USER_ID]))

        dialog.set_info_text(t("demo_instructions"))
        dialog.confirmed.connect(self._on_confirmed)
        dialog.cancelled.connect(self._on_cancelled)
        return dialog

    def open_dialog(self):
        try:
            dialog = self._build_dialog()
        except ChangePassError as e:
            logger.error(f"Could not configure the dialog: {e}", exc_info=is_debug_mode())
            QMessageBox.critical(self, t("error"), str(e))
            return
        dialog.exec()

    def _on_confirmed(self, credentials):
        self.status.setText(tf("demo_confirmed", length=len(credentials.desired_password)))

    def _on_cancelled(self):
        self.status.setText(t("demo_cancelled"))


def main():
    # 1) Logging
    LoggingConfig.setup_logging(log_level=config.get("LOG_LEVEL"))
    LoggingConfig.cleanup_old_logs(days_to_keep=30)

    # 2) Configuration
    try:
        config.validate(CONFIG_SCHEMA)
        mode = ChangePasswordMode.from_name(config.get("CHANGEPASS_MODE", "change_known"))
    except ChangePassError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    # 3) Application + language
    app = QApplication(sys.argv)
    TranslationManager.get_instance().set_language(config.get("CHANGEPASS_LANGUAGE", "en"))

    window = DemoWindow(mode)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
