"""Structured logging — JSON formatter and opt-in setup.

Tests cover:
    - Base fields always present; extras only when set
    - Exceptions rendered into the "exception" field
    - setup_logging attaches to the twitter_core logger, not the root logger
    - configure_logging takes level and format from settings
    - OAuth credentials are masked in message, extras and exception text
    - TwitterCoreError code and category are surfaced
"""

import json
import logging
import sys

from twitter_core.config import Settings
from twitter_core.core.errors import ErrorContext, TwitterApiError
from twitter_core.infrastructure.observability import (
    REDACTED, JSONFormatter, configure_logging, scrub, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "twitter_core.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "twitter_core.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log
    assert "service" not in log


def test_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(service="FavoriteService", endpoint="list", http_status=429, token="x"),
    ))
    assert log["service"] == "FavoriteService"
    assert log["endpoint"] == "list"
    assert log["http_status"] == 429
    assert "token" not in log


def test_exception_field():
    try:
        raise RuntimeError("kaput")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: kaput" in log["exception"]


def test_setup_logging_scoped_to_package():
    package_logger = logging.getLogger("twitter_core")
    root_handlers = list(logging.getLogger().handlers)
    handler = setup_logging("debug", "text")
    try:
        assert handler in package_logger.handlers
        assert package_logger.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
        assert logging.getLogger().handlers == root_handlers
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)


def test_configure_logging_from_settings():
    package_logger = logging.getLogger("twitter_core")
    settings = Settings(_env_file=None, log_level="WARNING", log_format="json")
    handler = configure_logging(settings)
    try:
        assert handler in package_logger.handlers
        assert package_logger.level == logging.WARNING
        assert isinstance(handler.formatter, JSONFormatter)
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)


def test_scrub_masks_oauth_header():
    header = 'OAuth oauth_consumer_key="ck-123", oauth_nonce="n1", oauth_token="tok-789"'
    text = scrub(f"sent Authorization: {header}")
    assert text == f"sent Authorization: OAuth {REDACTED}"


def test_scrub_masks_oauth_query_values():
    text = scrub("GET /x.json?oauth_token=tok-789&count=5")
    assert "tok-789" not in text
    assert "count=5" in text


def test_credentials_masked_in_extras():
    header = 'OAuth oauth_consumer_key="ck-123", oauth_signature="c2lnbmF0dXJl"'
    log = json.loads(JSONFormatter().format(_record(path=header)))
    assert "ck-123" not in log["path"]
    assert "c2lnbmF0dXJl" not in json.dumps(log)


def test_twitter_error_fields_surfaced():
    try:
        raise TwitterApiError(
            429, api_error_code=88, api_message="Rate limit exceeded",
            context=ErrorContext(service="FavoriteService", endpoint="list"),
        )
    except TwitterApiError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert log["error_code"] == "TWITTER_API_ERROR"
    assert log["error_category"] == "external_api"
    assert log["http_status"] == 429
