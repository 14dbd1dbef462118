# -*- coding: utf-8 -*-
"""
utils/auth_utils.py
=====================
Password encoders for the reuse-prevention rules. Zero Qt.

An encoder is a one-argument callable ``(str) -> str``. The rules
``different`` and ``not_any_of`` only ever see encoded values, so the host
keeps its previous passwords in encoded form and hands over the same
encoder it used to produce them.

Only deterministic digests qualify: a salted hash never compares equal
for the same input twice.
"""
from typing import Callable

from passlib.registry import get_crypt_handler

from exceptions import InvalidValueError

DEFAULT_SCHEME = "hex_sha256"


def make_encoder(scheme: str = DEFAULT_SCHEME) -> Callable[[str], str]:
    """Return an encoder backed by the passlib handler named ``scheme``."""
    try:
        handler = get_crypt_handler(scheme)
    except KeyError as e:
        raise InvalidValueError("scheme", scheme, "unknown passlib scheme") from e

    if "salt" in getattr(handler, "setting_kwds", ()):
        raise InvalidValueError("scheme", scheme, "salted schemes are not deterministic")

    def encoder(password: str) -> str:
        return handler.hash(password)

    if encoder("probe") != encoder("probe"):
        raise InvalidValueError("scheme", scheme, "encoder is not deterministic")
    return encoder


_default_encoder = None


def encode_password(password: str) -> str:
    """Encode with the default scheme."""
    global _default_encoder
    if _default_encoder is None:
        _default_encoder = make_encoder()
    return _default_encoder(password)
