"""Tests for log formatting and the request logging middleware."""

import json
import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from linkhub.core.logging import JSONFormatter, LoggingMiddleware, get_log_level


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("linkhub.test", logging.INFO, __file__, 1, "hi %s", ("there",), None)
    record.user_id = "abc"

    entry = json.loads(JSONFormatter().format(record))
    assert entry["message"] == "hi there"
    assert entry["level"] == "INFO"
    assert entry["extra"] == {"user_id": "abc"}


def test_get_log_level_falls_back_to_info():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("nonsense") == logging.INFO


def test_level_selection():
    mw = LoggingMiddleware(app=None)
    mw.slow_request_ms = 500

    assert mw._level_for("/api/posts", 200, 10) == logging.INFO
    assert mw._level_for("/api/health/", 200, 10) == logging.DEBUG
    assert mw._level_for("/api/posts", 200, 900) == logging.WARNING
    assert mw._level_for("/api/posts", 503, 10) == logging.ERROR


def _app():
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    return app


def test_response_carries_request_id():
    client = TestClient(_app())

    generated = client.get("/ping")
    assert len(generated.headers["x-request-id"]) == 12

    echoed = client.get("/ping", headers={"X-Request-ID": "req-42"})
    assert echoed.headers["x-request-id"] == "req-42"
