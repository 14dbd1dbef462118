# -*- coding: utf-8 -*-
"""
tests/test_logging_config.py
==============================
LoggingConfig: handlers, log file naming, old log cleanup.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import logging
import time

import pytest
from core.logging_config import REDACTED, CredentialRedactionFilter, LoggingConfig


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:

    def test_file_handler_and_name(self, tmp_path, restore_root_logger):
        log_file = LoggingConfig.setup_logging(log_level="DEBUG", log_dir=str(tmp_path), enable_console=False)
        assert log_file.parent == tmp_path
        assert log_file.name.startswith("changepass_")
        assert log_file.suffix == ".log"

        logging.getLogger("changepass.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_level_applied(self, tmp_path, restore_root_logger):
        LoggingConfig.setup_logging(log_level="WARNING", log_dir=str(tmp_path), enable_console=False)
        assert logging.getLogger().level == logging.WARNING

    def test_console_handler_optional(self, tmp_path, restore_root_logger):
        LoggingConfig.setup_logging(log_dir=str(tmp_path), enable_console=False)
        kinds = {type(h).__name__ for h in logging.getLogger().handlers}
        assert kinds == {"RotatingFileHandler"}


class TestCredentialRedaction:

    @pytest.fixture
    def record(self):
        def _make(msg, *args):
            return logging.LogRecord("changepass.test", logging.INFO, __file__, 1, msg, args, None)
        return _make

    @pytest.mark.parametrize("msg,args", [
        ("password=hunter2", ()),
        ("desired_password: %s", ("hunter2",)),
        ("user_id='hunter2' mode=change_known", ()),
        ("token = hunter2, next", ()),
    ])
    def test_value_masked(self, record, msg, args):
        rec = record(msg, *args)
        assert CredentialRedactionFilter().filter(rec) is True
        text = rec.getMessage()
        assert "hunter2" not in text
        assert REDACTED in text

    @pytest.mark.parametrize("msg", [
        "Credentials confirmed (mode=change_known)",
        "Confirm refused, invalid fields: ['desired_password']",
        "3 rules configured from PASSWORD_POLICY",
    ])
    def test_plain_messages_untouched(self, record, msg):
        rec = record(msg)
        CredentialRedactionFilter().filter(rec)
        assert rec.getMessage() == msg

    def test_installed_on_file_handler(self, tmp_path, restore_root_logger):
        log_file = LoggingConfig.setup_logging(log_dir=str(tmp_path), enable_console=False)
        logging.getLogger("changepass.test").warning("current_password=%s", "hunter2")
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "hunter2" not in text
        assert f"current_password={REDACTED}" in text


class TestCleanupOldLogs:

    def test_removes_only_old_files(self, tmp_path):
        old = tmp_path / "changepass_20000101.log"
        new = tmp_path / "changepass_today.log"
        old.write_text("old")
        new.write_text("new")
        long_ago = time.time() - 90 * 24 * 3600
        os.utime(old, (long_ago, long_ago))

        assert LoggingConfig.cleanup_old_logs(str(tmp_path), days_to_keep=30) == 1
        assert not old.exists()
        assert new.exists()

    def test_missing_dir(self, tmp_path):
        assert LoggingConfig.cleanup_old_logs(str(tmp_path / "absent")) == 0
