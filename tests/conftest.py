"""
tests/conftest.py
=================
Shared pytest fixtures: offscreen QApplication, English translations,
fresh CredentialForm.
"""
import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
from PySide6.QtWidgets import QApplication

from core.translator import TranslationManager


# ─── Qt application (session-scoped) ─────────────────────────────────────────

@pytest.fixture(scope="session")
def app():
    return QApplication.instance() or QApplication(sys.argv)


# ─── Translator reset ────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def english():
    """Every test starts (and ends) in English."""
    tm = TranslationManager.get_instance()
    tm.set_language("en")
    yield tm
    tm.set_language("en")


# ─── Form factory ────────────────────────────────────────────────────────────

@pytest.fixture
def form(app):
    from services.credential_form import CredentialForm, ChangePasswordMode
    return CredentialForm(ChangePasswordMode.CHANGE_KNOWN)


@pytest.fixture
def recorder():
    """Collects signal payloads: form.confirmed.connect(recorder)."""
    class Recorder(list):
        def __call__(self, *args):
            self.append(args[0] if len(args) == 1 else args)
    return Recorder()


# ─── Isolated Config ─────────────────────────────────────────────────────────

@pytest.fixture
def make_config(tmp_path):
    """
    Build a fresh Config singleton reading only files under tmp_path;
    the shared instance is dropped again on teardown.
    """
    from core.config import Config

    def _f(settings=None, env_text=None):
        config_file = tmp_path / "settings.json"
        env_file = tmp_path / ".env"
        if settings is not None:
            import json
            config_file.write_text(json.dumps(settings), encoding="utf-8")
        if env_text is not None:
            env_file.write_text(env_text, encoding="utf-8")
        Config.clear_instance()
        return Config(config_file=str(config_file), env_file=str(env_file))

    yield _f
    Config.clear_instance()
