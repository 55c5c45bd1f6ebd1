import json
import logging

import pytest

from thinktool.runtime.event_logger import EventLogger, JsonLineFormatter, configure_logging


def test_formatter_emits_event_shape():
    record = logging.LogRecord("thinktool", logging.INFO, __file__, 1, "tool.ok", None, None)
    record.fields = {"tool": "think", "latency_ms": 0}
    data = json.loads(JsonLineFormatter().format(record))
    assert data["event"] == "tool.ok"
    assert data["level"] == "info"
    assert data["tool"] == "think"
    assert "ts" in data


def test_configure_logging_writes_jsonl_file(tmp_path, capsys):
    path = tmp_path / "logs" / "events.jsonl"
    logger = configure_logging("INFO", path)
    EventLogger(logger).log("server.start", name="think-tool")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["name"] == "think-tool"
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "server.start" in captured.err


def test_span_fail_reraises(caplog):
    caplog.set_level(logging.INFO, logger="thinktool.test")
    events = EventLogger(logging.getLogger("thinktool.test"))
    with pytest.raises(RuntimeError):
        with events.span("work", job="x"):
            raise RuntimeError("boom")
    rec = [r for r in caplog.records if r.getMessage() == "work.fail"][0]
    assert rec.fields["error"] == "boom"
    assert rec.fields["job"] == "x"
