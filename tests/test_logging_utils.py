from __future__ import annotations

import logging

from flagmoji.logging_utils import (
    ServerLoggerAdapter,
    _DefaultFieldsFilter,
    new_error_id,
    server_label,
    warn_ratelimited,
)


def test_server_label():
    assert server_label(None) == "-"
    assert server_label(42) == "42"
    assert server_label(42, "Flags HQ") == "Flags HQ (42)"


def test_adapter_injects_server_field():
    adapter = ServerLoggerAdapter.for_guild("bot", 7, "Guild")
    _, kwargs = adapter.process("hello", {})
    assert kwargs["extra"] == {"server": "Guild (7)"}


def test_default_fields_filter():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert _DefaultFieldsFilter().filter(record)
    assert record.server == "-"


def test_error_id_shape():
    error_id = new_error_id()
    assert len(error_id) == 6
    assert error_id == error_id.upper()


def test_warn_ratelimited_once_per_key(caplog):
    logger = logging.getLogger("flagmoji.test")
    with caplog.at_level(logging.WARNING, logger="flagmoji.test"):
        warn_ratelimited(logger, key="k1", message="first")
        warn_ratelimited(logger, key="k1", message="second")
        warn_ratelimited(logger, key="k2", message="other")
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["first", "other"]


def test_warn_ratelimited_allows_again_after_interval(caplog):
    logger = logging.getLogger("flagmoji.test")
    with caplog.at_level(logging.WARNING, logger="flagmoji.test"):
        warn_ratelimited(logger, key="k3", message="a", every_seconds=0)
        warn_ratelimited(logger, key="k3", message="b", every_seconds=0)
    assert [r.getMessage() for r in caplog.records] == ["a", "b"]
