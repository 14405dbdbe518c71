"""Tests for campaign_vault.diagnostics."""

import logging
import threading
import time
from unittest.mock import MagicMock, patch

import httpx
import pytest

from campaign_vault.diagnostics import (
    Diagnostics,
    LoggingSink,
    WebhookSink,
    format_diagnostic,
)


def _raised(error: Exception) -> Exception:
    try:
        raise error
    except Exception as e:
        return e


def test_format_diagnostic_has_origin_message_and_trace():
    message = format_diagnostic("setObject('party', '1')", _raised(ValueError("bad value")))
    first_line = message.splitlines()[0]
    assert first_line == "Error in setObject('party', '1'): bad value"
    assert "Traceback (most recent call last)" in message
    assert message.endswith("ValueError: bad value")


def test_default_sink_is_logging():
    diagnostics = Diagnostics()
    assert len(diagnostics.sinks) == 1
    assert isinstance(diagnostics.sinks[0], LoggingSink)


def test_report_reaches_every_sink():
    first: list[str] = []
    second: list[str] = []
    diagnostics = Diagnostics([first.append])
    diagnostics.add_sink(second.append)
    message = diagnostics.report("getCatalog('x')", _raised(RuntimeError("nope")))
    assert first == [message]
    assert second == [message]


def test_failing_sink_does_not_stop_others(caplog):
    delivered: list[str] = []

    def broken(message: str) -> None:
        raise ConnectionError("offline")

    diagnostics = Diagnostics([broken, delivered.append])
    with caplog.at_level(logging.WARNING, logger="campaign_vault.diagnostics"):
        diagnostics.report("op", _raised(RuntimeError("x")))
    assert len(delivered) == 1
    assert "offline" in caplog.text


def test_logging_sink(caplog):
    with caplog.at_level(logging.ERROR, logger="vault-test"):
        LoggingSink("vault-test")("Error in op: boom")
    assert caplog.records[0].levelno == logging.ERROR
    assert caplog.records[0].getMessage() == "Error in op: boom"


# ---------------------------------------------------------------------------
# WebhookSink
# ---------------------------------------------------------------------------

def _mock_response(status: int = 204) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.raise_for_status = MagicMock(
        side_effect=None if status < 400 else httpx.HTTPStatusError(
            "", request=MagicMock(), response=resp
        )
    )
    return resp


class TestWebhookSink:
    def test_posts_message(self) -> None:
        mock_post = MagicMock(return_value=_mock_response())
        sink = WebhookSink("http://chat.local/hook")
        with patch("httpx.post", mock_post):
            sink("Error in op: boom")
            assert sink.flush(timeout=5)
        assert mock_post.call_args[0][0] == "http://chat.local/hook"
        assert mock_post.call_args.kwargs["json"] == {"content": "Error in op: boom"}
        assert mock_post.call_args.kwargs["timeout"] == 5.0

    def test_truncates_long_messages(self) -> None:
        mock_post = MagicMock(return_value=_mock_response())
        sink = WebhookSink("http://chat.local/hook", max_length=10)
        with patch("httpx.post", mock_post):
            sink("x" * 50)
            assert sink.flush(timeout=5)
        sent = mock_post.call_args.kwargs["json"]["content"]
        assert sent == "xxxxxxx..."

    def test_delivers_in_order(self) -> None:
        mock_post = MagicMock(return_value=_mock_response())
        sink = WebhookSink("http://chat.local/hook")
        with patch("httpx.post", mock_post):
            for n in range(3):
                sink(f"message {n}")
            assert sink.flush(timeout=5)
        sent = [c.kwargs["json"]["content"] for c in mock_post.call_args_list]
        assert sent == ["message 0", "message 1", "message 2"]

    def test_post_raises_http_error(self) -> None:
        with patch("httpx.post", MagicMock(return_value=_mock_response(500))):
            with pytest.raises(httpx.HTTPStatusError):
                WebhookSink("http://chat.local/hook").post("boom")

    def test_delivery_error_is_logged(self, caplog) -> None:
        sink = WebhookSink("http://chat.local/hook")
        with caplog.at_level(logging.WARNING, logger="campaign_vault.diagnostics"):
            with patch("httpx.post", MagicMock(side_effect=httpx.ConnectError("refused"))):
                sink("boom")
                assert sink.flush(timeout=5)
        assert "Webhook delivery to http://chat.local/hook failed: refused" in caplog.text

    def test_report_does_not_wait_for_slow_hook(self) -> None:
        release = threading.Event()
        started = threading.Event()

        def slow_post(*args, **kwargs):
            started.set()
            release.wait(5)
            return _mock_response()

        sink = WebhookSink("http://chat.local/hook")
        delivered: list[str] = []
        diagnostics = Diagnostics([sink, delivered.append])
        with patch("httpx.post", MagicMock(side_effect=slow_post)):
            began = time.monotonic()
            diagnostics.report("setCatalog('bad[name]')", _raised(ValueError("bad name")))
            elapsed = time.monotonic() - began
            assert started.wait(5)
            assert not sink.flush(timeout=0.05)
            release.set()
            assert sink.flush(timeout=5)
        assert elapsed < 1.0
        assert len(delivered) == 1

    def test_delivery_error_is_contained_by_diagnostics(self) -> None:
        delivered: list[str] = []
        sink = WebhookSink("http://chat.local/hook")
        diagnostics = Diagnostics([sink, delivered.append])
        with patch("httpx.post", MagicMock(side_effect=httpx.ConnectError("refused"))):
            diagnostics.report("op", _raised(RuntimeError("x")))
            assert sink.flush(timeout=5)
        assert len(delivered) == 1
