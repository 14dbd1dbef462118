# -*- coding: utf-8 -*-
"""
tests/test_widgets.py
=======================
Rule list, strength meter and ChangePasswordPanel on an offscreen
QApplication. Visibility is checked with isHidden() because the widgets
are never shown on screen.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
from constants import Meter, RuleIndicator
from services.credential_form import (
    ChangePasswordMode, CredentialField as CF, CredentialForm, RuleField,
)
from ui.widgets.change_password_panel import ChangePasswordPanel
from ui.widgets.rule_list import RuleListBlock
from ui.widgets.strength_meter import StrengthMeter, meter_colors
from utils import rule_catalog as rc
from utils.password_strength import StrengthLevel, StrengthResult
from utils.rule import RuleState


def _length_scorer(text):
    return StrengthResult(StrengthLevel(min(len(text) // 4, 4)), "feedback")


@pytest.fixture
def panel(app, form):
    return ChangePasswordPanel(form)


# ─── strength meter ──────────────────────────────────────────────────────────

class TestMeterColors:

    def test_none_is_all_empty(self):
        assert meter_colors(None) == [Meter.EMPTY_COLOR] * 5

    @pytest.mark.parametrize("level", list(StrengthLevel))
    def test_filled_up_to_level(self, level):
        colors = meter_colors(StrengthResult(level))
        filled = int(level) + 1
        assert colors[:filled] == [level.color] * filled
        assert colors[filled:] == [Meter.EMPTY_COLOR] * (5 - filled)


class TestStrengthMeter:

    def test_caption_and_feedback(self, app):
        meter = StrengthMeter()
        meter.set_result(StrengthResult(StrengthLevel.STRONG, "Could take centuries to crack."))
        assert meter.caption.text() == "Strong"
        assert meter.feedback.text() == "Could take centuries to crack."
        assert meter.colors()[3] == StrengthLevel.STRONG.color

    def test_cleared(self, app):
        meter = StrengthMeter()
        meter.set_result(StrengthResult(StrengthLevel.WEAK, "x"))
        meter.set_result(None)
        assert meter.caption.text() == ""
        assert meter.feedback.text() == ""
        assert meter.result() is None

    def test_retranslated(self, app, english):
        meter = StrengthMeter()
        meter.set_result(StrengthResult(StrengthLevel.WEAK))
        english.set_language("ar")
        assert meter.caption.text() != "Weak"
        assert meter.title.text() != "Password Strength"


# ─── rule list ───────────────────────────────────────────────────────────────

class TestRuleListBlock:

    def test_items_follow_evaluation(self, app):
        from services.rule_set_evaluator import RuleSetEvaluator
        ev = RuleSetEvaluator([rc.length(3), rc.has_digits(1)])
        block = RuleListBlock("password_rules_label", "test-rules")

        block.update_evaluation(ev.evaluate(""))
        assert block.states() == [RuleState.UNEVALUATED] * 2
        assert block.items[0].icon.text() == RuleIndicator.UNEVALUATED_GLYPH

        block.update_evaluation(ev.evaluate("ab1"))
        assert block.states() == [RuleState.PASSED, RuleState.PASSED]
        assert block.items[1].icon.text() == RuleIndicator.PASSED_GLYPH

        block.update_evaluation(ev.evaluate("a"))
        assert block.states() == [RuleState.FAILED, RuleState.FAILED]
        assert block.items[0].text.text() == "At least 3 characters long"

    def test_empty(self, app):
        block = RuleListBlock("password_rules_label", "test-rules")
        block.update_evaluation(None)
        assert not block.has_rules()
        assert block.items == []


# ─── panel ───────────────────────────────────────────────────────────────────

class TestPanelLayout:

    def test_help_block_hidden_without_content(self, panel):
        assert panel.help_block.isHidden()

    def test_password_rules_show_help(self, panel, form):
        form.configure_rules(RuleField.PASSWORD, [rc.length(8)])
        assert not panel.password_rules.isHidden()
        assert not panel.help_block.isHidden()

    def test_info_text(self, panel):
        panel.set_info_text("Pick something long.")
        assert not panel.info_label.isHidden()
        assert not panel.help_block.isHidden()
        panel.set_info_text(None)
        assert panel.help_block.isHidden()

    def test_meter_follows_scorer(self, panel, form):
        assert panel.strength_meter.isHidden()
        form.set_scorer(_length_scorer)
        assert not panel.strength_meter.isHidden()
        form.set_scorer(None)
        assert panel.strength_meter.isHidden()

    def test_userid_rules_only_when_editable(self, panel, form):
        form.configure_rules(RuleField.USER_ID, [rc.length(4)])
        assert panel.userid_rules.isHidden()
        form.set_mode(ChangePasswordMode.ESTABLISH_NEW)
        assert not panel.userid_rules.isHidden()

    def test_field_visibility_per_mode(self, panel, form):
        assert panel.edits[CF.USER_ID].isHidden()
        assert not panel.edits[CF.CURRENT_PASSWORD].isHidden()
        form.set_mode(ChangePasswordMode.ESTABLISH_NEW)
        assert not panel.edits[CF.USER_ID].isHidden()
        assert not panel.edits[CF.USER_ID].isReadOnly()
        assert panel.edits[CF.CURRENT_PASSWORD].isHidden()

    def test_prefilled_user_id_read_only(self, panel, form):
        form.set_user_id("alice")
        panel.refresh()
        edit = panel.edits[CF.USER_ID]
        assert edit.text() == "alice"
        assert edit.isReadOnly()
        assert not edit.isHidden()

    @pytest.mark.parametrize("mode,field", [
        (ChangePasswordMode.CHANGE_KNOWN, CF.CURRENT_PASSWORD),
        (ChangePasswordMode.CHANGE_FORGOTTEN, CF.DESIRED_PASSWORD),
        (ChangePasswordMode.ESTABLISH_NEW, CF.USER_ID),
    ])
    def test_first_editable_edit(self, app, mode, field):
        panel = ChangePasswordPanel(CredentialForm(mode))
        assert panel.first_editable_edit() is panel.edits[field]


class TestPanelInput:

    def test_typing_updates_form(self, panel, form):
        panel.edits[CF.DESIRED_PASSWORD].setText("abc")
        assert form.get_desired_password() == "abc"
        assert form.get_confirm_password() is None

    def test_rule_states_on_keystroke(self, panel, form):
        form.configure_rules(RuleField.PASSWORD, [rc.length(3), rc.has_digits(1)])
        assert panel.password_rules.states() == [RuleState.UNEVALUATED] * 2
        panel.edits[CF.DESIRED_PASSWORD].setText("abc")
        assert panel.password_rules.states() == [RuleState.PASSED, RuleState.FAILED]

    def test_meter_on_keystroke(self, panel, form):
        form.set_scorer(_length_scorer)
        panel.edits[CF.DESIRED_PASSWORD].setText("abcdefgh")
        assert panel.strength_meter.result().level is StrengthLevel.MEDIOCRE
        panel.edits[CF.DESIRED_PASSWORD].setText("")
        assert panel.strength_meter.result() is None

    def test_mismatch_error_shown(self, panel):
        panel.edits[CF.DESIRED_PASSWORD].setText("one")
        panel.edits[CF.CONFIRM_PASSWORD].setText("two")
        assert panel.error_text(CF.CONFIRM_PASSWORD) == "Passwords don't match."
        panel.edits[CF.CONFIRM_PASSWORD].setText("one")
        assert panel.error_text(CF.CONFIRM_PASSWORD) == ""

    def test_untouched_fields_quiet_until_show_all(self, panel):
        assert panel.error_text(CF.CURRENT_PASSWORD) == ""
        panel.show_all_errors()
        assert panel.error_text(CF.CURRENT_PASSWORD) == "Current Password is required."

    def test_scorer_failure_reported(self, panel, form, recorder):
        def broken(text):
            raise RuntimeError("down")
        form.set_scorer(broken)
        panel.scorer_failed.connect(recorder)
        panel.edits[CF.DESIRED_PASSWORD].setText("abc")
        assert len(recorder) == 1
        assert form.get_desired_password() == "abc"
        assert panel.strength_meter.result() is None

    def test_reset(self, panel, form):
        panel.edits[CF.CURRENT_PASSWORD].setText("old")
        panel.edits[CF.DESIRED_PASSWORD].setText("new")
        panel.show_all_errors()
        panel.reset()
        assert all(edit.text() == "" for edit in panel.edits.values())
        assert form.get_current_password() is None
        assert panel.error_text(CF.DESIRED_PASSWORD) == ""

    def test_labels_retranslated(self, panel, english):
        assert panel.labels[CF.DESIRED_PASSWORD].text() == "New Password"
        english.set_language("ar")
        assert panel.labels[CF.DESIRED_PASSWORD].text() != "New Password"
