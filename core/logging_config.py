"""
Logging Configuration for CHANGEPASS

Console + daily rotating file handlers on the root logger, old log
cleanup, and a redaction filter on every handler.

Code logs lengths, counts, modes and field names only. The filter is
the backstop: any ``password=...``, ``user_id: ...``, ``token=...``
style pair that still reaches a handler has its value masked.
"""
import logging
import logging.handlers
import os
import re
import sys
from pathlib import Path
from datetime import datetime, timedelta
from typing import Optional

REDACTED = "***REDACTED***"

SENSITIVE_KEYS = ("password", "passwd", "secret", "token", "credential", "user_id", "userid")


class CredentialRedactionFilter(logging.Filter):
    """Mask the value of any sensitive ``key=value`` / ``key: value`` pair."""

    _PAIR = re.compile(
        r"(?i)\b(\w*(?:" + "|".join(SENSITIVE_KEYS) + r")\w*)"
        r"(\s*[=:]\s*)"
        r"(\"[^\"]*\"|'[^']*'|[^\s,;)\]}]+)"
    )

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self._PAIR.sub(lambda m: f"{m.group(1)}{m.group(2)}{REDACTED}", message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


class LoggingConfig:
    """Root logger setup for the demo application."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_LOG_DIR = "logs"
    MAX_BYTES = 2 * 1024 * 1024
    BACKUP_COUNT = 3
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    @staticmethod
    def _log_dir(log_dir: Optional[str] = None) -> Path:
        return Path(log_dir or os.getenv("LOG_DIR", LoggingConfig.DEFAULT_LOG_DIR))

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_dir: Optional[str] = None,
            enable_console: bool = True,
    ) -> Path:
        """Install the handlers; returns today's log file path."""
        log_level = log_level or os.getenv("LOG_LEVEL", LoggingConfig.DEFAULT_LOG_LEVEL)
        log_path = LoggingConfig._log_dir(log_dir)
        log_path.mkdir(exist_ok=True, parents=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        root_logger.handlers.clear()

        formatter = logging.Formatter(LoggingConfig.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        redaction = CredentialRedactionFilter()

        handlers = []
        # no stdout under pythonw
        if enable_console and sys.stdout is not None:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)
            handlers.append(console_handler)

        log_file = log_path / f"changepass_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LoggingConfig.MAX_BYTES,
            backupCount=LoggingConfig.BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

        for handler in handlers:
            handler.setFormatter(formatter)
            handler.addFilter(redaction)
            root_logger.addHandler(handler)

        root_logger.info(f"Logging initialized (level={log_level.upper()})")
        return log_file

    @staticmethod
    def cleanup_old_logs(log_dir: Optional[str] = None, days_to_keep: int = 30) -> int:
        """Delete changepass log files older than ``days_to_keep``; returns how many."""
        log_path = LoggingConfig._log_dir(log_dir)
        if not log_path.exists():
            return 0

        cutoff = datetime.now() - timedelta(days=days_to_keep)
        deleted = 0
        for log_file in log_path.glob("changepass_*.log*"):
            try:
                if datetime.fromtimestamp(log_file.stat().st_mtime) < cutoff:
                    log_file.unlink()
                    deleted += 1
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not remove {log_file}: {e}")
        return deleted
