"""Structured Logging — JSON formatter and setup for client observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (service, endpoint, http_status, ...) surfaced when present
    - Credentials never logged: OAuth header values and oauth_* secrets are masked
      in the message, extra fields and exception text before output
    - TwitterCoreError exceptions add their code and category to the record

Design Decisions:
    - setup_logging is opt-in: a library never configures the root logger on import
    - configure_logging() reads TWITTER_LOG_LEVEL / TWITTER_LOG_FORMAT from Settings
"""

import logging
import json
import re
from datetime import datetime, timezone

from twitter_core.config import Settings, get_settings
from twitter_core.core.errors import TwitterCoreError

_EXTRA_FIELDS = (
    "service", "endpoint", "method", "path", "http_status", "error_code",
)

REDACTED = "[redacted]"

# Whole "OAuth k=v, ..." header values, then stray oauth_token/oauth_signature pairs
_OAUTH_HEADER = re.compile(r'OAuth\s+oauth_[a-z_]+="[^"]*"(?:,\s*oauth_[a-z_]+="[^"]*")*')
_OAUTH_SECRET = re.compile(r'(oauth_(?:token|signature|consumer_key)=)("?)[^"&,\s]+\2')


def scrub(text: str) -> str:
    """Mask OAuth credentials in free text."""
    text = _OAUTH_HEADER.sub(f"OAuth {REDACTED}", text)
    return _OAUTH_SECRET.sub(rf"\1\2{REDACTED}\2", text)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": scrub(record.getMessage()),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = scrub(val) if isinstance(val, str) else val
        if record.exc_info:
            error = record.exc_info[1]
            if isinstance(error, TwitterCoreError):
                log.setdefault("error_code", error.code)
                log["error_category"] = error.category.value
                if error.context.http_status is not None:
                    log.setdefault("http_status", error.context.http_status)
            log["exception"] = scrub(self.formatException(record.exc_info))
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a handler for the twitter_core logger tree. Returns the handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root = logging.getLogger("twitter_core")
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """setup_logging() driven by log_level / log_format settings."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
