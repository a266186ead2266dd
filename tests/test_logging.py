import logging

from hbot.infra.logging import format_event, log_event


def test_format_event_key_value_line():
    line = format_event("recency_cleared", count=3, user=None, note="a b")
    assert line.startswith("event=recency_cleared uptime_s=")
    assert "count=3" in line
    assert "user=-" in line
    assert 'note="a b"' in line


def test_log_event_level(caplog):
    caplog.set_level(logging.INFO, logger="hbot")
    log_event("handler_error", level=logging.ERROR, handler="on_message")
    rec = caplog.records[-1]
    assert rec.levelno == logging.ERROR
    assert "handler=on_message" in rec.getMessage()
