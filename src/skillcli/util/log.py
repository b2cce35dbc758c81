"""Structured logging with tagged loggers and optional file output.

Loggers are created per service and write key/value, JSON or pretty lines to
stderr and/or a log file. Nothing is written until ``Log.configure`` enables a
sink, so command output on stdout is never mixed with log lines.
"""

import json
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from ..core.global_paths import GlobalPath

MAX_LOG_FILES = 10


class LogLevel(str, Enum):
    """Log severity levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        if value is None:
            return cls.WARN
        text = value.strip().lower()
        if text == "debug":
            return cls.DEBUG
        if text == "info":
            return cls.INFO
        if text in {"warn", "warning"}:
            return cls.WARN
        if text == "error":
            return cls.ERROR
        raise ValueError(f"invalid log level: {value}")


class LogFormat(str, Enum):
    """Log output format."""

    KV = "kv"
    JSON = "json"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: str | None) -> "LogFormat":
        if value is None:
            return cls.KV
        text = value.strip().lower()
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"invalid log format: {value}")


LEVEL_PRIORITY = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
}


@dataclass
class LogConfig:
    """Process-wide logging configuration."""

    level: LogLevel = LogLevel.WARN
    format: LogFormat = LogFormat.KV
    console: bool = False
    file: bool = False
    log_file_path: Optional[str] = None
    _file_handle: Optional[TextIO] = None


_config = LogConfig()
_last_timestamp = time.time()


class Logger:
    """Logger carrying a fixed set of tags merged into every event."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = tags or {}

    def _should_log(self, level: LogLevel) -> bool:
        return LEVEL_PRIORITY[level] >= LEVEL_PRIORITY[_config.level]

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, Exception):
            return f"{value.__class__.__name__}: {value}"
        if isinstance(value, Path):
            return str(value)
        if isinstance(value, (dict, list, tuple, int, float, bool)) or value is None:
            return value
        return str(value)

    def _value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, (dict, list, tuple)):
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        text = str(value)
        if text == "" or any(ch.isspace() for ch in text) or "=" in text:
            return json.dumps(text, ensure_ascii=False)
        return text

    def _build_message(
        self,
        level: LogLevel,
        message: Any,
        extra: Optional[Dict[str, Any]] = None,
    ) -> str:
        global _last_timestamp

        now = time.time()
        delta_ms = int((now - _last_timestamp) * 1000)
        _last_timestamp = now

        tags = {**self.tags, **(extra or {})}
        payload = {
            "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "delta_ms": delta_ms,
            "level": level.value.lower(),
            "msg": self._normalize(message),
            **{k: self._normalize(v) for k, v in tags.items() if v is not None},
        }

        if _config.format == LogFormat.JSON:
            return json.dumps(payload, ensure_ascii=False, separators=(",", ":")) + "\n"

        pairs = " ".join(
            f"{k}={self._value(v)}"
            for k, v in payload.items()
            if k not in {"time", "delta_ms", "level", "msg"}
        )
        if _config.format == LogFormat.PRETTY:
            text = str(payload["msg"] or "")
            suffix = f" ({pairs})" if pairs else ""
            return f"{payload['time']} {level.value} {text}{suffix} +{delta_ms}ms\n"

        parts = [
            str(payload["time"]),
            f"+{delta_ms}ms",
            f"level={payload['level']}",
            f"msg={self._value(payload['msg'])}",
            pairs,
        ]
        return " ".join(part for part in parts if part) + "\n"

    def _write(self, message: str) -> None:
        if _config.console:
            sys.stderr.write(message)
            sys.stderr.flush()
        if _config.file and _config._file_handle:
            _config._file_handle.write(message)
            _config._file_handle.flush()

    def _log(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> None:
        if not (_config.console or _config.file):
            return
        if self._should_log(level):
            self._write(self._build_message(level, message, extra))

    def debug(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.INFO, message, extra)

    def warn(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.WARN, message, extra)

    def error(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.ERROR, message, extra)


class Log:
    """Global logging interface and factory."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Optional[Dict[str, Any]] = None) -> Logger:
        """Create or retrieve a logger.

        Loggers whose tags contain a ``service`` key are cached by service name.
        """
        tags = tags or {}
        service = tags.get("service")

        if service and isinstance(service, str):
            if service not in cls._loggers:
                cls._loggers[service] = Logger(tags=tags)
            return cls._loggers[service]

        return Logger(tags=tags)

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
        file: bool | None = None,
        dev: bool = False,
    ) -> None:
        """Configure logging sinks and output format."""
        if level is not None:
            _config.level = level
        if format is not None:
            _config.format = format
        if console is not None:
            _config.console = console
        if file is not None:
            _config.file = file

        cls.close()
        if not _config.file:
            _config.log_file_path = None
            return

        log_dir = Path(GlobalPath.log())
        cls._cleanup_logs(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        if dev:
            log_path = log_dir / "dev.log"
        else:
            stamp = datetime.now().isoformat().split(".")[0].replace(":", "")
            log_path = log_dir / f"{stamp}.log"

        _config.log_file_path = str(log_path)
        _config._file_handle = log_path.open("w", encoding="utf-8")

    @classmethod
    def _cleanup_logs(cls, log_dir: Path) -> None:
        """Remove old log files, keeping only the most recent ones."""
        if not log_dir.exists():
            return

        log_files = sorted(
            log_dir.glob("????-??-??T??????.log"),
            key=lambda p: p.stat().st_mtime,
        )
        for old_file in log_files[:-MAX_LOG_FILES]:
            if old_file.exists():
                old_file.unlink()

    @classmethod
    def close(cls) -> None:
        """Close the log file handle if open."""
        if _config._file_handle:
            _config._file_handle.close()
            _config._file_handle = None

    @classmethod
    def reset(cls) -> None:
        """Disable every sink and restore default level and format."""
        cls.close()
        _config.level = LogLevel.WARN
        _config.format = LogFormat.KV
        _config.console = False
        _config.file = False
        _config.log_file_path = None
