"""
StrengthMeter - CHANGEPASS
==========================

Five boxes, one per StrengthLevel. Boxes up to and including the current
level are painted in that level's color, the rest stay empty; the caption
and the estimator feedback sit underneath. None clears everything.
"""

from typing import List, Optional

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame

from constants import Meter, ObjectNames as ON
from core.translator import TranslationManager
from utils.password_strength import StrengthLevel, StrengthResult


def meter_colors(result: Optional[StrengthResult]) -> List[str]:
    """Box colors for ``result``, lowest level first."""
    if result is None:
        return [Meter.EMPTY_COLOR] * Meter.BOX_COUNT
    filled = int(result.level) + 1
    return (
        [result.level.color] * filled
        + [Meter.EMPTY_COLOR] * (Meter.BOX_COUNT - filled)
    )


class StrengthMeter(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName(ON.STRENGTH_METER)
        self._ = TranslationManager.get_instance().translate
        self._result: Optional[StrengthResult] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.title = QLabel()
        self.title.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.title)

        boxes_row = QHBoxLayout()
        boxes_row.setSpacing(3)
        self.boxes: List[QFrame] = []
        for _ in StrengthLevel:
            box = QFrame()
            box.setObjectName(ON.STRENGTH_BOX)
            box.setFixedSize(Meter.BOX_WIDTH, Meter.BOX_HEIGHT)
            boxes_row.addWidget(box)
            self.boxes.append(box)
        boxes_row.addStretch()
        layout.addLayout(boxes_row)

        self.caption = QLabel()
        self.caption.setObjectName(ON.STRENGTH_CAPTION)
        layout.addWidget(self.caption)

        self.feedback = QLabel()
        self.feedback.setObjectName(ON.STRENGTH_FEEDBACK)
        self.feedback.setWordWrap(True)
        layout.addWidget(self.feedback)

        TranslationManager.get_instance().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()

    def retranslate_ui(self):
        self.title.setText(self._("password_strength_label"))
        self.set_result(self._result)

    def result(self) -> Optional[StrengthResult]:
        return self._result

    def colors(self) -> List[str]:
        return meter_colors(self._result)

    def set_result(self, result: Optional[StrengthResult]):
        self._result = result
        for box, color in zip(self.boxes, meter_colors(result)):
            box.setStyleSheet(f"background-color: {color}; border-radius: 2px;")

        if result is None:
            self.caption.clear()
            self.feedback.clear()
        else:
            self.caption.setText(self._(result.level.caption_key))
            self.feedback.setText(result.feedback)
