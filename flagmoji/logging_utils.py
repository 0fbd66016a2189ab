"""flagmoji.logging_utils

Logging configuration for the flagmoji CLI and bot.

The library modules only create named loggers; applications call
setup_logging() once to get:
- One console format across CLI + bot
- UTC timestamps
- Optional Discord context (guild name + id) in a ``server`` field
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Optional


class _RateLimiter:
    """In-process rate limiter for repetitive log lines."""

    def __init__(self) -> None:
        self._next_allowed: dict[str, float] = {}

    def allow(self, key: str, every_seconds: int) -> bool:
        now = time.time()
        next_ok = self._next_allowed.get(key, 0.0)
        if now < next_ok:
            return False
        self._next_allowed[key] = now + float(every_seconds)
        return True

    def reset(self) -> None:
        self._next_allowed.clear()


_rate_limiter = _RateLimiter()


class _DefaultFieldsFilter(logging.Filter):
    """Ensure optional fields exist so formatters never KeyError."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "server"):
            record.server = "-"
        return True


LOG_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(server)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure process-wide logging once.

    Args:
        level: Logging level name (e.g. 'INFO', 'DEBUG'). If omitted, uses
               the FLAGMOJI_LOG_LEVEL setting, falling back to 'INFO'.
    """
    from .settings import SETTINGS

    level_name = (level or SETTINGS.get("log_level") or "INFO").upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if getattr(root, "_flagmoji_configured", False):
        return

    root.setLevel(numeric_level)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    formatter.converter = time.gmtime
    handler.setFormatter(formatter)
    handler.addFilter(_DefaultFieldsFilter())

    root.addHandler(handler)
    root._flagmoji_configured = True  # type: ignore[attr-defined]

    # discord.py is chatty at INFO.
    logging.getLogger("discord").setLevel(logging.WARNING)
    logging.getLogger("discord.http").setLevel(logging.WARNING)
    logging.getLogger("discord.gateway").setLevel(logging.WARNING)


def server_label(guild_id: int | None, server_name: str | None = None) -> str:
    """Return a consistent server label for logs."""
    if guild_id is None:
        return "-"
    if server_name:
        return f"{server_name} ({guild_id})"
    return str(guild_id)


class ServerLoggerAdapter(logging.LoggerAdapter):
    """Inject a consistent 'server' field so the formatter stays uniform."""

    def __init__(self, logger: logging.Logger, guild_id: int | None, server_name: str | None = None):
        super().__init__(logger, {"server": server_label(guild_id, server_name)})

    @classmethod
    def for_guild(cls, logger_name: str, guild_id: int | None, server_name: str | None = None) -> "ServerLoggerAdapter":
        return cls(logging.getLogger(logger_name), guild_id, server_name)


def new_error_id() -> str:
    """Short correlation id for error lines (users paste these back to us)."""
    return uuid.uuid4().hex[:6].upper()


def warn_ratelimited(
    logger: logging.Logger,
    *,
    key: str,
    message: str,
    every_seconds: int = 3600,
) -> None:
    """Emit a WARNING at most once per interval for a given key."""
    if not _rate_limiter.allow(key, every_seconds):
        return
    logger.warning(message)
