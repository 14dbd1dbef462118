"""
Language modules for TranslationManager.

Each module (en.py, ar.py, ...) exposes a single ``translations`` dict.
Keys with an ``_one`` / ``_other`` suffix are the singular and plural
forms of a count-based message.
"""
