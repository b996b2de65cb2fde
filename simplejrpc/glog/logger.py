"""Logger construction with size-based rotation, and a stack-trace wrapper."""

from __future__ import annotations

import gzip
import json
import logging
import os
import shutil
import sys
import threading
import time
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from simplejrpc.glog.log_config import (
    LogConfig,
    parse_rotate_expire,
    replace_date_placeholders,
)

_LOGGER_NAME = "simplejrpc"
_MAX_SIZE_BYTES = 10 * 1024 * 1024

_LEVELS = {
    "": logging.INFO,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "dpanic": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}

_LEVEL_LABELS = {
    logging.DEBUG: ("DEBUG", 35),
    logging.INFO: ("INFO", 34),
    logging.WARNING: ("WARN", 33),
    logging.ERROR: ("ERROR", 31),
    logging.CRITICAL: ("FATAL", 31),
}


def _parse_level(text: str) -> int:
    # Only all-lower or all-upper names are recognised; anything else is INFO.
    if text not in (text.lower(), text.upper()):
        return logging.INFO
    return _LEVELS.get(text.lower(), logging.INFO)


class _ConsoleFormatter(logging.Formatter):
    """Tab-separated lines: time, level, caller, message."""

    def __init__(self, color: bool) -> None:
        super().__init__()
        self._color = color

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        moment = datetime.fromtimestamp(record.created).astimezone()
        millis = int(record.msecs)
        return f"{moment:%Y-%m-%dT%H:%M:%S}.{millis:03d}{moment:%z}"

    def format(self, record: logging.LogRecord) -> str:
        label, color = _LEVEL_LABELS.get(record.levelno, (record.levelname, 0))
        if self._color and color:
            label = f"\x1b[{color}m{label}\x1b[0m"
        line = (
            f"{self.formatTime(record)}\t{label}\t"
            f"{record.filename}:{record.lineno}\t{record.getMessage()}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class _RotatingFileHandler(RotatingFileHandler):
    """Rotates by size into timestamped backups, optionally gzipped,
    pruning by count and age."""

    def __init__(
        self,
        filename: str,
        max_bytes: int,
        max_backups: int,
        max_age_days: int,
        compress: bool,
    ) -> None:
        super().__init__(filename, maxBytes=max_bytes, encoding="utf-8", delay=True)
        self._max_backups = max_backups
        self._max_age_days = max_age_days
        self._compress = compress

    def doRollover(self) -> None:
        if self.stream:
            self.stream.close()
            self.stream = None  # type: ignore[assignment]
        current = Path(self.baseFilename)
        if current.exists():
            stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S.%f")[:-3]
            backup = current.with_name(f"{current.stem}-{stamp}{current.suffix}")
            os.replace(current, backup)
            if self._compress:
                with backup.open("rb") as src, gzip.open(f"{backup}.gz", "wb") as dst:
                    shutil.copyfileobj(src, dst)
                backup.unlink()
        self._prune(current)
        if not self.delay:
            self.stream = self._open()

    def _prune(self, current: Path) -> None:
        backups = [
            path
            for path in current.parent.glob(f"{current.stem}-*")
            if path.name.endswith((current.suffix, f"{current.suffix}.gz"))
        ]
        backups.sort(key=lambda path: path.stat().st_mtime, reverse=True)
        doomed: set[Path] = set()
        if self._max_backups > 0:
            doomed.update(backups[self._max_backups:])
        if self._max_age_days > 0:
            cutoff = time.time() - self._max_age_days * 86400
            doomed.update(path for path in backups if path.stat().st_mtime < cutoff)
        for path in doomed:
            path.unlink(missing_ok=True)


def new_logger(config: LogConfig) -> logging.Logger:
    """Configure and return the package logger according to ``config``.

    The log directory is created if needed. Calling this again replaces the
    previous configuration. Raises OSError if the directory cannot be created.
    """
    os.makedirs(config.path, mode=0o755, exist_ok=True)
    full_path = os.path.join(config.path, replace_date_placeholders(config.file))

    file_handler = _RotatingFileHandler(
        full_path,
        max_bytes=_MAX_SIZE_BYTES,
        max_backups=config.rotate_backup_limit,
        max_age_days=parse_rotate_expire(config.rotate_expire) // 24,
        compress=config.rotate_backup_compress > 0,
    )
    handlers: list[logging.Handler] = []
    if config.stdout:
        handlers.append(logging.StreamHandler(sys.stdout))
    handlers.append(file_handler)

    formatter = _ConsoleFormatter(config.writer_color_enable)
    logger = logging.getLogger(_LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.setLevel(_parse_level(config.level))
    logger.propagate = False
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def _current_stack() -> str:
    # Drop the frames inside this module.
    return "".join(traceback.format_stack()[:-3])


def _all_stacks() -> str:
    names = {thread.ident: thread.name for thread in threading.enumerate()}
    parts = []
    for ident, frame in sys._current_frames().items():
        name = names.get(ident, "unknown")
        parts.append(f"thread {name} ({ident}):\n{''.join(traceback.format_stack(frame))}")
    return "\n".join(parts)


class GLogger:
    """Wraps a logger, adding stack traces to error, fatal and panic messages.

    Keyword arguments are structured fields appended to the message as JSON.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def _log(self, level: int, msg: str, fields: dict[str, Any]) -> str:
        if fields:
            msg = f"{msg}\t{json.dumps(fields, default=str, ensure_ascii=False)}"
        self.logger.log(level, msg, stacklevel=3)
        return msg

    def _flush(self) -> None:
        for handler in self.logger.handlers:
            handler.flush()

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, f"{msg}\nstack: {_current_stack()}", kwargs)

    def error_with_stack(self, msg: str, **kwargs: Any) -> None:
        """Log an error with the stacks of all running threads."""
        self._log(logging.ERROR, f"{msg}\nfull stack: {_all_stacks()}", kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, kwargs)

    def warn(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def fatal(self, msg: str, **kwargs: Any) -> None:
        """Log with a stack trace, then exit with status 1."""
        self._log(logging.CRITICAL, f"{msg}\nstack: {_current_stack()}", kwargs)
        self._flush()
        raise SystemExit(1)

    def panic(self, msg: str, **kwargs: Any) -> None:
        """Log with a stack trace, then raise RuntimeError with the message."""
        text = self._log(logging.CRITICAL, f"{msg}\nstack: {_current_stack()}", kwargs)
        self._flush()
        raise RuntimeError(text)