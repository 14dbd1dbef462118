# core/__init__.py
"""
CHANGEPASS Core Module
======================

Application plumbing shared by the services and the widgets.

Public API:
    - Configuration: Config
    - Translation: TranslationManager
    - Base Classes: BaseDialog
    - Singletons: SingletonMeta, QObjectSingletonMixin
    - Logging: LoggingConfig
"""

# Configuration
from .config import Config

# Translation
from .translator import TranslationManager

# Base Classes
from .base_dialog import BaseDialog

# Utilities
from .singleton import SingletonMeta, QObjectSingletonMixin

# Logging
from .logging_config import LoggingConfig

__all__ = [
    "Config",
    "TranslationManager",
    "BaseDialog",
    "SingletonMeta",
    "QObjectSingletonMixin",
    "LoggingConfig",
]

__version__ = "1.0.0"
__author__ = "CHANGEPASS Team"
