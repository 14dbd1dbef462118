"""
Base Dialog - CHANGEPASS

Base class for the dialogs with:
- Translation support
- Layout direction (RTL languages)
- Logging
- Message boxes
- Keyboard shortcuts
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QDialog, QMessageBox, QApplication
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtCore import Qt

from core.translator import TranslationManager

logger = logging.getLogger(__name__)


class BaseDialog(QDialog):

    def __init__(
        self,
        parent=None,
        title_key: Optional[str] = None,
        auto_center: bool = False
    ):
        super().__init__(parent)
        self._auto_center = auto_center
        self.translator = TranslationManager.get_instance()
        self._ = self.translator.translate

        # Title management
        self._title_key = None
        if title_key:
            self.set_translated_title(title_key)

        self.translator.language_changed.connect(self._retranslate_ui)
        self._apply_layout_direction()

        self._setup_shortcuts()
        self._set_default_style()

        logger.debug(f"Initialized {self.__class__.__name__}")

    # --------- Translation ---------

    def set_translated_title(self, title_key: str) -> None:
        self._title_key = title_key
        self.setWindowTitle(self._(title_key))

    def _retranslate_ui(self) -> None:
        """Re-translate UI elements when language changes"""
        if self._title_key:
            self.setWindowTitle(self._(self._title_key))
        self._apply_layout_direction()

        if hasattr(self, 'retranslate_ui'):
            self.retranslate_ui()

    def _apply_layout_direction(self):
        if self.translator.is_rtl():
            self.setLayoutDirection(Qt.RightToLeft)
        else:
            self.setLayoutDirection(Qt.LeftToRight)

    # ==============================
    # VALIDATION HOOK
    # ==============================

    def validate(self) -> bool:
        """
        Override in subclasses.
        Return False to prevent accept().
        """
        return True

    # --------- Styling & Layout ---------

    def _set_default_style(self, min_width: int = 380) -> None:
        self.setMinimumWidth(min_width)
        self.setModal(True)

    # --------- Keyboard Shortcuts ---------

    def _setup_shortcuts(self) -> None:
        """Escape and Ctrl+W reject the dialog."""
        QShortcut(QKeySequence("Escape"), self, self.reject)
        QShortcut(QKeySequence("Ctrl+W"), self, self.reject)

    # --------- Message Boxes ---------

    def show_error(
        self,
        title: str,
        message: str,
        use_translate: bool = True
    ) -> None:
        """
        Show error message box.

        Args:
            title: Title (or translation key)
            message: Message (or translation key)
            use_translate: Whether to translate title and message
        """
        if use_translate:
            title = self._(title)
            message = self._(message)

        QMessageBox.critical(self, title, message)
        logger.error(f"{self.__class__.__name__}: error shown: {title}")

    # --------- Event Handlers ---------

    def showEvent(self, event):
        super().showEvent(event)

        if self._auto_center:
            self.center_on_parent()

        logger.debug(f"{self.__class__.__name__}: opened")

    def accept(self):
        if not self.validate():
            return
        logger.debug(f"{self.__class__.__name__}: accepted")
        super().accept()

    def reject(self):
        logger.debug(f"{self.__class__.__name__}: rejected")
        super().reject()

    # --------- Helper Methods ---------

    def center_on_parent(self) -> None:
        """Center dialog on parent widget, or on the screen without one"""
        parent = self.parent()
        if parent is not None:
            geometry = parent.geometry()
        else:
            screen = QApplication.primaryScreen()
            if screen is None:
                return
            geometry = screen.availableGeometry()
        x = geometry.x() + (geometry.width() - self.width()) // 2
        y = geometry.y() + (geometry.height() - self.height()) // 2
        self.move(x, y)
