import io
import json
import logging

from explore_api.core.config import settings
from explore_api.core.logger import TraceContextFilter, build_stream_handler
from explore_api.core.trace import (
    TRACE_HEADER, bind_trace_id, get_trace_id, reset_trace_id,
)


def test_bind_trace_id_generates_and_resets():
    token = bind_trace_id()
    try:
        assert get_trace_id() not in ("", "-")
    finally:
        reset_trace_id(token)
    assert get_trace_id() == "-"


def test_filter_stamps_trace_service_env():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "m", (), None)
    token = bind_trace_id("abc")
    try:
        assert TraceContextFilter().filter(record)
    finally:
        reset_trace_id(token)
    assert record.trace_id == "abc"
    assert record.service == settings.app_name
    assert record.env == settings.env


def test_stream_handler_emits_json_with_extra():
    stream = io.StringIO()
    log = logging.getLogger("tests.json")
    log.propagate = False
    log.addHandler(build_stream_handler(stream))
    try:
        log.warning("tour_rating_not_found", extra={"tour_id": 3})
    finally:
        log.handlers.clear()

    payload = json.loads(stream.getvalue())
    assert payload["message"] == "tour_rating_not_found"
    assert payload["tour_id"] == 3
    assert payload["trace_id"] == "-"


async def test_middleware_echoes_inbound_request_id(client):
    r = await client.get("/health", headers={TRACE_HEADER: "req-42"})
    assert r.status_code == 200
    assert r.headers[TRACE_HEADER] == "req-42"


async def test_middleware_generates_request_id(client):
    r = await client.get("/health")
    assert r.headers[TRACE_HEADER] not in ("", "-")
