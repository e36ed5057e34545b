import json
import logging

from prestashop_webservice.logging_config import (
    LoggingSink,
    MemorySink,
    _sanitize,
    configure_logging,
    log_call,
    log_http_request,
    logger,
)


def test_sanitize_strips_sensitive_keys():
    cleaned = _sanitize({"resource": "customers", "ws_key": "abc", "Authorization": "Basic x", "nested": [{"password": "p", "id": 1}]})

    assert cleaned == {"resource": "customers", "nested": [{"id": 1}]}


def test_sanitize_summarises_bytes_and_falls_back_to_str():
    class Opaque:
        def __str__(self):
            return "opaque"

    assert _sanitize(b"abc") == "<binary 3 bytes>"
    assert _sanitize(Opaque()) == "opaque"


def test_log_call_records_entry_and_exit(caplog):
    @log_call
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="prestashop_webservice"):
        assert add(1, b=2) == 3

    events = [json.loads(r.getMessage()) for r in caplog.records]
    assert events[0] == {"event": "call_start", "function": "add", "args": [1], "kwargs": {"b": 2}}
    assert events[1] == {"event": "call_end", "function": "add", "result": 3}


def test_log_http_request_drops_authorization(caplog):
    with caplog.at_level(logging.DEBUG, logger="prestashop_webservice"):
        log_http_request("GET", "http://shop/api/x", headers={"Authorization": "Basic x", "Accept": "*/*"}, status=200, duration_ms=1.234)

    data = json.loads(caplog.records[-1].getMessage())
    assert data["headers"] == {"Accept": "*/*"}
    assert data["status"] == 200
    assert data["duration_ms"] == 1.23


def test_logging_sink_writes_json(caplog):
    with caplog.at_level(logging.INFO, logger="prestashop_webservice"):
        LoggingSink().record("RETURN HTTP BODY", "{}")

    assert json.loads(caplog.records[-1].getMessage()) == {
        "event": "webservice_debug",
        "title": "RETURN HTTP BODY",
        "content": "{}",
    }


def test_memory_sink_keeps_order():
    sink = MemorySink()
    sink.record("a", "1")
    sink.record("b", "2")

    assert sink.events == [("a", "1"), ("b", "2")]
    assert sink.titles() == ["a", "b"]


def test_configure_logging_attaches_handler():
    before = list(logger.handlers)
    try:
        configure_logging(logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == len(before) + 1
    finally:
        for handler in logger.handlers[len(before):]:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
