# -*- coding: utf-8 -*-
translations = {
    # ─── Field labels ─────────────────────────────────────────────────────
    "user_id_label":            "اسم المستخدم",
    "current_password_label":   "كلمة المرور الحالية",
    "desired_password_label":   "كلمة المرور الجديدة",
    "confirm_password_label":   "تأكيد كلمة المرور",

    # ─── Help block headings ──────────────────────────────────────────────
    "userid_rules_label":       "قواعد اسم المستخدم",
    "password_rules_label":     "قواعد تعقيد كلمة المرور",
    "password_strength_label":  "قوة كلمة المرور",

    # ─── Field validation messages ────────────────────────────────────────
    "required_field":           "{label} مطلوب.",
    "userid_invalid":           "يجب أن يحقق اسم المستخدم جميع القواعد.",
    "password_invalid":         "يجب أن تحقق كلمة المرور الجديدة جميع قواعد التعقيد.",
    "passwords_mismatch":       "كلمتا المرور غير متطابقتين.",

    # ─── Strength levels ──────────────────────────────────────────────────
    "strength_level_very_weak":     "ضعيفة جداً",
    "strength_level_weak":          "ضعيفة",
    "strength_level_mediocre":      "متوسطة",
    "strength_level_strong":        "قوية",
    "strength_level_very_strong":   "قوية جداً",
    "strength_feedback":            "قد يستغرق كسرها {time}. {warning}",

    # ─── Rule descriptions ────────────────────────────────────────────────
    "rule_length_min":              "{min} أحرف على الأقل",
    "rule_length_range":            "بين {min} و {max} حرفاً",
    "rule_starts_with_letter":      "يجب أن تبدأ بحرف",
    "rule_has_uppercase_one":       "حرف كبير واحد على الأقل",
    "rule_has_uppercase_other":     "{count} أحرف كبيرة على الأقل",
    "rule_has_lowercase_one":       "حرف صغير واحد على الأقل",
    "rule_has_lowercase_other":     "{count} أحرف صغيرة على الأقل",
    "rule_has_digits_one":          "رقم واحد على الأقل",
    "rule_has_digits_other":        "{count} أرقام على الأقل",
    "rule_has_specials_one":        "رمز خاص واحد على الأقل",
    "rule_has_specials_other":      "{count} رموز خاصة على الأقل",
    "rule_has_specifieds_one":      "حرف واحد على الأقل من: {chars}",
    "rule_has_specifieds_other":    "{count} أحرف على الأقل من: {chars}",
    "rule_character_groups":        "أحرف من {count} مجموعات على الأقل: "
                                    "كبيرة، صغيرة، أرقام، رموز",
    "rule_different":               "مختلفة عن كلمة المرور الحالية",
    "rule_not_any_of_one":          "ليست كلمة المرور السابقة",
    "rule_not_any_of_other":        "ليست أياً من كلمات المرور الـ {count} السابقة",
    "rule_minimum_strength":        "الحد الأدنى للقوة: {caption}",

    # ─── Dialog ───────────────────────────────────────────────────────────
    "change_password_title":    "تغيير كلمة المرور",
    "reset_password_title":     "إعادة تعيين كلمة المرور",
    "establish_account_title":  "إنشاء حساب",
    "ok":                       "موافق",
    "cancel":                   "إلغاء",
    "error":                    "خطأ",
    "scorer_failed":            "تعذّر تقدير قوة كلمة المرور.",

    # ─── Demo ─────────────────────────────────────────────────────────────
    "demo_open_dialog":         "تغيير كلمة المرور",
    "demo_instructions":        "أدخل كلمة المرور الحالية، ثم كلمة مرور جديدة تحقق قواعد "
                                "التعقيد. تحقق من قوتها بالمؤشر ثم أعد كتابتها للتأكيد.",
    "demo_confirmed":           "تم قبول كلمة المرور الجديدة ({length} حرفاً).",
    "demo_cancelled":           "تم إلغاء تغيير كلمة المرور.",
}
