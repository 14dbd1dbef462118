"""
Rule list widgets - CHANGEPASS
==============================

RuleItem shows one rule: a state indicator followed by its description.
RuleListBlock is a heading plus one RuleItem per rule of a field, driven
by CredentialForm.outcomes_changed. The block hides itself when the
field has no rules.
"""

from typing import List, Optional

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel
from PySide6.QtCore import Qt

from constants import ObjectNames as ON, RuleIndicator
from core.translator import TranslationManager
from services.rule_set_evaluator import Evaluation
from utils.rule import RuleOutcome, RuleState

_INDICATORS = {
    RuleState.UNEVALUATED: (RuleIndicator.UNEVALUATED_GLYPH, RuleIndicator.UNEVALUATED_COLOR),
    RuleState.FAILED: (RuleIndicator.FAILED_GLYPH, RuleIndicator.FAILED_COLOR),
    RuleState.PASSED: (RuleIndicator.PASSED_GLYPH, RuleIndicator.PASSED_COLOR),
}


class RuleItem(QWidget):
    def __init__(self, outcome: RuleOutcome, parent=None):
        super().__init__(parent)
        self.setObjectName(ON.RULE_ITEM)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.icon = QLabel()
        self.icon.setObjectName(ON.RULE_ICON)
        self.icon.setFixedWidth(16)
        self.icon.setAlignment(Qt.AlignCenter)

        self.text = QLabel()
        self.text.setWordWrap(True)

        layout.addWidget(self.icon)
        layout.addWidget(self.text, 1)

        self.state = RuleState.UNEVALUATED
        self.set_outcome(outcome)

    def set_outcome(self, outcome: RuleOutcome):
        self.state = outcome.state
        glyph, color = _INDICATORS[outcome.state]
        self.icon.setText(glyph)
        self.icon.setStyleSheet(f"color: {color}; font-weight: bold;")
        self.text.setText(outcome.description)


class RuleListBlock(QWidget):
    """Heading and rule items for one field."""

    def __init__(self, title_key: str, object_name: str, parent=None):
        super().__init__(parent)
        self.setObjectName(object_name)
        self._ = TranslationManager.get_instance().translate
        self.title_key = title_key

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.title = QLabel()
        self.title.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.title)

        self._items_layout = QVBoxLayout()
        self._items_layout.setSpacing(2)
        layout.addLayout(self._items_layout)

        self.items: List[RuleItem] = []
        self._has_rules = False

        TranslationManager.get_instance().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()
        self.setVisible(False)

    def retranslate_ui(self):
        self.title.setText(self._(self.title_key))

    def has_rules(self) -> bool:
        return self._has_rules

    def states(self) -> List[RuleState]:
        return [item.state for item in self.items]

    def update_evaluation(self, evaluation: Optional[Evaluation]):
        """Show ``evaluation``; the item list is rebuilt only when the rule count changes."""
        outcomes = evaluation.outcomes if evaluation is not None else ()

        if len(outcomes) != len(self.items):
            self._clear_items()
            for outcome in outcomes:
                item = RuleItem(outcome, self)
                self._items_layout.addWidget(item)
                self.items.append(item)
        else:
            for item, outcome in zip(self.items, outcomes):
                item.set_outcome(outcome)

        self._has_rules = bool(outcomes)

    def _clear_items(self):
        for item in self.items:
            self._items_layout.removeWidget(item)
            item.deleteLater()
        self.items = []
