from .credential_form import (
    ChangePasswordMode,
    ConfirmedCredentials,
    CredentialField,
    CredentialForm,
    RuleField,
)
from .rule_set_evaluator import Evaluation, RuleSetEvaluator

__all__ = [
    "ChangePasswordMode",
    "ConfirmedCredentials",
    "CredentialField",
    "CredentialForm",
    "RuleField",
    "Evaluation",
    "RuleSetEvaluator",
]
