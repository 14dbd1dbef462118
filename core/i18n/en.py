# -*- coding: utf-8 -*-
translations = {
    # ─── Field labels ─────────────────────────────────────────────────────
    "user_id_label":            "User ID",
    "current_password_label":   "Current Password",
    "desired_password_label":   "New Password",
    "confirm_password_label":   "Confirm Password",

    # ─── Help block headings ──────────────────────────────────────────────
    "userid_rules_label":       "User ID Rules",
    "password_rules_label":     "Password Complexity Rules",
    "password_strength_label":  "Password Strength",

    # ─── Field validation messages ────────────────────────────────────────
    "required_field":           "{label} is required.",
    "userid_invalid":           "Desired user ID must satisfy all User ID Rules.",
    "password_invalid":         "Desired password must satisfy all Password Complexity Rules.",
    "passwords_mismatch":       "Passwords don't match.",

    # ─── Strength levels ──────────────────────────────────────────────────
    "strength_level_very_weak":     "Very Weak",
    "strength_level_weak":          "Weak",
    "strength_level_mediocre":      "Mediocre",
    "strength_level_strong":        "Strong",
    "strength_level_very_strong":   "Very Strong",
    "strength_feedback":            "Could take {time} to crack. {warning}",

    # ─── Rule descriptions ────────────────────────────────────────────────
    "rule_length_min":              "At least {min} characters long",
    "rule_length_range":            "Between {min} and {max} characters long",
    "rule_starts_with_letter":      "Must start with a letter",
    "rule_has_uppercase_one":       "At least {count} uppercase letter",
    "rule_has_uppercase_other":     "At least {count} uppercase letters",
    "rule_has_lowercase_one":       "At least {count} lowercase letter",
    "rule_has_lowercase_other":     "At least {count} lowercase letters",
    "rule_has_digits_one":          "At least {count} digit",
    "rule_has_digits_other":        "At least {count} digits",
    "rule_has_specials_one":        "At least {count} special character",
    "rule_has_specials_other":      "At least {count} special characters",
    "rule_has_specifieds_one":      "At least {count} character from: {chars}",
    "rule_has_specifieds_other":    "At least {count} characters from: {chars}",
    "rule_character_groups":        "Characters from at least {count} of the groups: "
                                    "uppercase, lowercase, digits, & specials",
    "rule_different":               "Different from current password",
    "rule_not_any_of_one":          "Not any of {count} previous password",
    "rule_not_any_of_other":        "Not any of {count} previous passwords",
    "rule_minimum_strength":        "Minimum strength of {caption}",

    # ─── Dialog ───────────────────────────────────────────────────────────
    "change_password_title":    "Change Password",
    "reset_password_title":     "Reset Password",
    "establish_account_title":  "Create Account",
    "ok":                       "OK",
    "cancel":                   "Cancel",
    "error":                    "Error",
    "scorer_failed":            "The password strength could not be estimated.",

    # ─── Demo ─────────────────────────────────────────────────────────────
    "demo_open_dialog":         "Change Password",
    "demo_instructions":        "Enter the current password, then a new password that "
                                "satisfies the complexity rules. Verify its strength with "
                                "the meter and repeat it to confirm.",
    "demo_confirmed":           "New password accepted ({length} characters).",
    "demo_cancelled":           "Password change cancelled.",
}
