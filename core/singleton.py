"""
singleton.py - CHANGEPASS
==========================
Single source of truth for the Singleton pattern in the project.

Two flavours, depending on the class:

  ① QObjectSingletonMixin  ← for classes inheriting QObject
        class MyManager(QObject, QObjectSingletonMixin): ...
        MyManager.get_instance()

  ② SingletonMeta          ← for plain classes (no Qt)
        class MyService(metaclass=SingletonMeta): ...
        MyService()  # or MyService.get_instance()

Both:
  - are thread-safe with double-checked locking
  - support clear_instance() for tests
  - log to the module logger on creation and removal
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ─────────────────────────────────────────────────────────────────────────────
# ① QObjectSingletonMixin
# ─────────────────────────────────────────────────────────────────────────────

class QObjectSingletonMixin:
    """
    Adds a thread-safe get_instance() to any QObject subclass.

    A metaclass cannot be combined with QObject (shiboken owns the
    metaclass), so the shared instance lives in a class-level registry.

    Usage:
        class TranslationManager(QObject, QObjectSingletonMixin):
            def __init__(self):
                super().__init__()

        mgr = TranslationManager.get_instance()
        TranslationManager.clear_instance()      # tests only
    """

    _singleton_instances: Dict[type, Any] = {}
    _singleton_lock: threading.Lock = threading.Lock()

    @classmethod
    def get_instance(cls: Type[T]) -> T:
        """Return the shared instance, creating it on first use."""
        if cls not in cls._singleton_instances:
            with cls._singleton_lock:
                if cls not in cls._singleton_instances:
                    instance = cls()
                    cls._singleton_instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._singleton_instances[cls]

    @classmethod
    def clear_instance(cls) -> None:
        """Drop the shared instance (tests only)."""
        with cls._singleton_lock:
            if cls in cls._singleton_instances:
                del cls._singleton_instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


# ─────────────────────────────────────────────────────────────────────────────
# ② SingletonMeta
# ─────────────────────────────────────────────────────────────────────────────

class SingletonMeta(type):
    """
    Metaclass turning a plain class into a thread-safe singleton.

    Usage:
        class Config(metaclass=SingletonMeta):
            ...

        assert Config() is Config.get_instance()
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._instances[cls]

    def get_instance(cls, *args, **kwargs):
        """Same as __call__; mirrors QObjectSingletonMixin.get_instance()."""
        return cls(*args, **kwargs)

    def clear_instance(cls) -> None:
        """Drop the shared instance (tests only)."""
        with cls._lock:
            if cls in cls._instances:
                del cls._instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


__all__ = ["QObjectSingletonMixin", "SingletonMeta"]
