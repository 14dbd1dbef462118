import logging
import importlib
import pkgutil
from typing import Dict, Optional, Set
from PySide6.QtCore import QObject, Signal
from core.singleton import QObjectSingletonMixin

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class TranslationManager(QObject, QObjectSingletonMixin):

    language_changed = Signal()

    def __init__(self):
        super().__init__()
        self._current_language = DEFAULT_LANGUAGE
        self._translations: Dict[str, str] = {}
        self._loading = False
        self._supported_languages = self._discover_languages()
        self._load_translations()

    # ==============================
    # Public API
    # ==============================

    def set_language(self, language_code: str) -> bool:
        if not language_code:
            return False

        lang = language_code.strip().lower()

        if lang not in self._supported_languages:
            logger.warning(f"Unsupported language: {lang}")
            return False

        if lang == self._current_language:
            return True

        old_lang = self._current_language
        self._current_language = lang

        if not self._load_translations():
            self._current_language = old_lang
            self._load_translations()
            return False

        self.language_changed.emit()
        logger.info(f"Language changed to {lang}")
        return True

    def translate(self, key: str, fallback: Optional[str] = None) -> str:
        if not key:
            return fallback or ""

        value = self._translations.get(key)

        if value is not None:
            return value

        logger.debug(f"Missing translation key: {key}")
        return fallback if fallback is not None else key

    def format(self, key: str, fallback: Optional[str] = None, **params) -> str:
        """Translate ``key`` and fill its ``{placeholders}`` from ``params``."""
        template = self.translate(key, fallback)
        try:
            return template.format(**params)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning(f"Bad placeholders in translation '{key}': {e}")
            return template

    def get_current_language(self) -> str:
        return self._current_language

    def get_supported_languages(self) -> Set[str]:
        return self._supported_languages.copy()

    def is_rtl(self) -> bool:
        return self._current_language.startswith("ar")

    # ==============================
    # Internal Logic
    # ==============================

    def _discover_languages(self) -> Set[str]:
        """Discover the language modules inside the core.i18n package."""
        try:
            import core.i18n

            languages = set()
            for module in pkgutil.iter_modules(core.i18n.__path__):
                languages.add(module.name)

            logger.info(f"Discovered languages: {languages}")
            return languages

        except ImportError as e:
            logger.error(f"Language discovery failed: {e}")
            return {DEFAULT_LANGUAGE}

    def _load_translations(self) -> bool:
        if self._loading:
            return False

        self._loading = True

        try:
            module_path = f"core.i18n.{self._current_language}"
            module = importlib.import_module(module_path)

            translations = getattr(module, "translations", None)

            if not isinstance(translations, dict):
                logger.error(f"{module_path} must define a 'translations' dict")
                self._translations = {}
                return False

            self._translations = translations
            logger.info(
                f"Loaded {len(translations)} translations "
                f"for {self._current_language}"
            )
            return True

        except ImportError as e:
            logger.error(
                f"Failed to load translations "
                f"for {self._current_language}: {e}",
                exc_info=True
            )
            self._translations = {}
            return False

        finally:
            self._loading = False


# ==============================
# Convenience wrappers
# ==============================

def translate(key: str, fallback: Optional[str] = None) -> str:
    return TranslationManager.get_instance().translate(key, fallback)


def t(key: str, fallback: Optional[str] = None) -> str:
    return translate(key, fallback)


def tf(key: str, **params) -> str:
    return TranslationManager.get_instance().format(key, **params)
