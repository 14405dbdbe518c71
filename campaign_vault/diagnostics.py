"""Diagnostic side channel for store soft failures.

When a store operation fails it returns a default value and reports the error
here. A report is formatted once and handed to every sink:

    LoggingSink  — writes the message to a stdlib logger at ERROR level.
    WebhookSink  — queues the message for a background thread that POSTs
                   {"content": message} to a chat/broadcast webhook.

Any callable taking a single string is a valid sink, so tests can pass
`messages.append`. Delivery is best-effort: a sink that raises is logged and
skipped, and the report never fails.
"""

from __future__ import annotations

import logging
import queue
import threading
import traceback
from collections.abc import Callable, Iterable

import httpx

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]


def format_diagnostic(origin: str, error: BaseException) -> str:
    """Build the human-readable report: origin, error message, traceback."""
    trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return f"Error in {origin}: {error}\n{trace}".rstrip()


class LoggingSink:
    def __init__(self, logger_name: str = "campaign_vault.diagnostics") -> None:
        self._logger = logging.getLogger(logger_name)

    def __call__(self, message: str) -> None:
        self._logger.error(message)


class WebhookSink:
    """Broadcast diagnostics to an HTTP webhook.

    Calling the sink only queues the message. A daemon worker thread, started
    on first use, drains the queue and POSTs each message, so a slow or dead
    hook never holds up the operation that reported the failure. Delivery
    errors are logged as warnings and the message is dropped.

    Args:
        url:        Webhook endpoint, e.g. a Discord or Slack incoming hook.
        timeout:    HTTP timeout in seconds. Defaults to 5.
        max_length: Messages longer than this are truncated. Defaults to 2000,
                    the common chat-message cap.
    """

    def __init__(self, url: str, timeout: float = 5.0, max_length: int = 2000) -> None:
        self._url = url
        self._timeout = timeout
        self._max_length = max_length
        self._queue: queue.Queue[str | threading.Event] = queue.Queue()
        self._worker: threading.Thread | None = None
        self._lock = threading.Lock()

    def __call__(self, message: str) -> None:
        if len(message) > self._max_length:
            message = message[: self._max_length - 3] + "..."
        self._ensure_worker()
        self._queue.put(message)

    def post(self, message: str) -> None:
        """Deliver one message synchronously. Raises on HTTP errors."""
        resp = httpx.post(self._url, json={"content": message}, timeout=self._timeout)
        resp.raise_for_status()

    def flush(self, timeout: float | None = None) -> bool:
        """Wait until every message queued so far has been handled.

        Returns False if `timeout` seconds pass first.
        """
        done = threading.Event()
        self._ensure_worker()
        self._queue.put(done)
        return done.wait(timeout)

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._worker is None:
                self._worker = threading.Thread(
                    target=self._deliver_loop, daemon=True, name="WebhookSink"
                )
                self._worker.start()

    def _deliver_loop(self) -> None:
        while True:
            item = self._queue.get()
            if isinstance(item, threading.Event):
                item.set()
                continue
            try:
                self.post(item)
            except Exception as e:
                logger.warning("Webhook delivery to %s failed: %s", self._url, e)


class Diagnostics:
    """Fan-out of failure reports to a list of sinks (LoggingSink by default)."""

    def __init__(self, sinks: Iterable[DiagnosticSink] | None = None) -> None:
        self._sinks: list[DiagnosticSink] = (
            list(sinks) if sinks is not None else [LoggingSink()]
        )

    @property
    def sinks(self) -> list[DiagnosticSink]:
        return list(self._sinks)

    def add_sink(self, sink: DiagnosticSink) -> None:
        self._sinks.append(sink)

    def report(self, origin: str, error: BaseException) -> str:
        message = format_diagnostic(origin, error)
        for sink in self._sinks:
            try:
                sink(message)
            except Exception as e:
                logger.warning("Diagnostic sink %r failed: %s", sink, e)
        return message
