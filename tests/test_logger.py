import json
import logging
import sys

from shared.logging.logger import StructuredFormatter, bind_request, get_logger, unbind_request


def _record(msg, *args, exc_info=None):
    return logging.LogRecord("order_repository", logging.INFO, __file__, 1, msg, args, exc_info)


def test_line_is_json_with_extras():
    record = _record("%s saved", "order")
    record.entity = "order"
    record.record_id = "abc"

    line = json.loads(StructuredFormatter().format(record))
    assert line["level"] == "INFO"
    assert line["service"] == "vegetable-app"
    assert line["logger"] == "order_repository"
    assert line["message"] == "order saved"
    assert line["entity"] == "order"
    assert line["record_id"] == "abc"
    assert "ts" in line


def test_exception_attached():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record("failed", exc_info=sys.exc_info())

    line = json.loads(StructuredFormatter().format(record))
    assert "RuntimeError: boom" in line["exception"]


def test_handler_added_once():
    first = get_logger("test_logger_once")
    second = get_logger("test_logger_once")
    assert first is second
    assert len(second.handlers) == 1


def test_request_fields_attached_while_bound():
    token = bind_request("POST", "/order")
    try:
        line = json.loads(StructuredFormatter().format(_record("order saved")))
    finally:
        unbind_request(token)
    assert line["method"] == "POST"
    assert line["path"] == "/order"

    line = json.loads(StructuredFormatter().format(_record("idle")))
    assert "path" not in line


def test_access_line_per_request(client, caplog):
    caplog.set_level(logging.INFO, logger="api")
    client.get("/cart/000000000000000000000000")

    access = [r for r in caplog.records if r.name == "api" and hasattr(r, "latency_ms")]
    assert len(access) == 1
    assert access[0].status_code == 404
    assert access[0].getMessage() == "GET /cart/000000000000000000000000 404"
