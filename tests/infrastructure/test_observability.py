"""Structured logging — JSON formatter and request access log."""

import json
import logging

from httpx import ASGITransport, AsyncClient

from taskapi.infrastructure.observability import JSONFormatter
from taskapi.main import app


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "taskapi.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))

    assert out["level"] == "INFO"
    assert out["logger"] == "taskapi.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_formatter_surfaces_request_fields():
    out = json.loads(JSONFormatter().format(
        _record(method="GET", path="/api/health", status_code=200, duration_ms=1.5),
    ))

    assert out["method"] == "GET"
    assert out["path"] == "/api/health"
    assert out["status_code"] == 200
    assert out["duration_ms"] == 1.5


def test_json_formatter_skips_unknown_extras():
    out = json.loads(JSONFormatter().format(_record(secret="x")))
    assert "secret" not in out


async def test_request_is_access_logged(caplog):
    with caplog.at_level(logging.INFO, logger="taskapi.access"):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            await c.get("/api/health")

    records = [r for r in caplog.records if r.name == "taskapi.access"]
    assert len(records) == 1
    assert records[0].method == "GET"
    assert records[0].path == "/api/health"
    assert records[0].status_code == 200
