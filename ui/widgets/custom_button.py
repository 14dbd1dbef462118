from PySide6.QtWidgets import QPushButton
from core.translator import TranslationManager


class CustomButton(QPushButton):
    """Push button whose text is a translation key, retranslated on language change."""

    def __init__(self, text_key, parent=None, object_name="custom-btn"):
        super().__init__(parent)
        self.text_key = text_key
        self._ = TranslationManager.get_instance().translate
        self.setObjectName(object_name)
        TranslationManager.get_instance().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()

    def retranslate_ui(self):
        self.setText(self._(self.text_key))
