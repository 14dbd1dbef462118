"""
CHANGEPASS Constants - Single Source of Truth
=============================================

Object names, indicator glyphs and colors shared by the widgets.
Strength level colors live with the levels in utils.password_strength.
"""


class ObjectNames:
    """
    Qt object names, used by stylesheets and by tests (findChild).

    Usage:
        from constants import ObjectNames as ON
        edit = panel.findChild(QLineEdit, ON.DESIRED_PASSWORD_EDIT)
    """

    PANEL = "change-password-panel"
    INFO_LABEL = "info-label"
    HELP_BLOCK = "help-block"

    USER_ID_EDIT = "user-id-edit"
    CURRENT_PASSWORD_EDIT = "current-password-edit"
    DESIRED_PASSWORD_EDIT = "desired-password-edit"
    CONFIRM_PASSWORD_EDIT = "confirm-password-edit"
    FIELD_ERROR = "field-error"

    USERID_RULES = "userid-rules"
    PASSWORD_RULES = "password-rules"
    RULE_ITEM = "rule-item"
    RULE_ICON = "rule-icon"

    STRENGTH_METER = "strength-meter"
    STRENGTH_BOX = "strength-box"
    STRENGTH_CAPTION = "strength-caption"
    STRENGTH_FEEDBACK = "strength-feedback"

    OK_BUTTON = "ok-btn"
    CANCEL_BUTTON = "cancel-btn"


class RuleIndicator:
    """Glyph and color per rule state."""

    UNEVALUATED_GLYPH = "\u25CB"   # circle
    FAILED_GLYPH = "\u2717"        # cross
    PASSED_GLYPH = "\u2713"        # check

    UNEVALUATED_COLOR = "#94A3B8"
    FAILED_COLOR = "#EF4444"
    PASSED_COLOR = "#10B981"


class Meter:
    BOX_COUNT = 5
    BOX_WIDTH = 28
    BOX_HEIGHT = 10
    EMPTY_COLOR = "#E2E8F0"


ERROR_TEXT_COLOR = "#EF4444"
