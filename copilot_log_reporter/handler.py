# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logging handler that forwards records to a reporting client."""

import logging
import threading
from typing import Any, Iterable, Mapping

from .report import Report
from .reporting_client import ReportingClient
from .severity import Severity, resolve_severity

DEFAULT_FORMAT = "[%(name)s] %(message)s"


class SeverityMappingHandler(logging.Handler):
    """A :class:`logging.Handler` that sends each record to a ReportingClient.

    The record level is translated into one of the three severity tiers
    (info, warning, error). Records carrying an exception are sent with
    ``notify_exception``; all others with ``notify_error``. Fields passed as
    ``extra={"extra": {...}}`` become the report metadata.

    Usage::

        client = SilentReportingClient()
        handler = SeverityMappingHandler(client, level=logging.WARNING)
        logging.getLogger("app").addHandler(handler)
        logging.getLogger("app").warning("disk low", extra={"extra": {"free_gb": 2}})
    """

    def __init__(
        self,
        client: ReportingClient,
        level: int = logging.DEBUG,
        bubble: bool = True,
    ) -> None:
        """Initialize the handler.

        Args:
            client: Configured reporting client (shared, not owned)
            level: Minimum logging level at which this handler is triggered
            bubble: Whether handled records may continue to other handlers
        """
        super().__init__(level=level)
        self.client = client
        self.bubble = bubble
        self._batch_formatter: logging.Formatter | None = None
        # Records logged by the client while it delivers a report (for example
        # by the console client) are not forwarded again on the same thread.
        self._local = threading.local()
        self.setFormatter(self.get_default_formatter())

    def emit(self, record: logging.LogRecord) -> None:
        """Forward *record* to the reporting client.

        Errors raised by the client propagate to the caller.
        """
        if getattr(self._local, "forwarding", False):
            return

        self._local.forwarding = True
        try:
            self._forward(record)
        finally:
            self._local.forwarding = False

    def handle_batch(self, records: Iterable[logging.LogRecord]) -> None:
        """Run :meth:`handle` for each record at or above the handler level."""
        for record in records:
            if self.accepts(record.levelno):
                self.handle(record)

    def _forward(self, record: logging.LogRecord) -> None:
        severity = self.get_severity(record.levelno)
        extra = getattr(record, "extra", None)

        def apply_report(report: Report) -> None:
            report.set_severity(severity)
            if extra is not None:
                report.set_metadata(extra)

        exception = self._get_exception(record)
        if exception is not None:
            self.client.notify_exception(exception, apply_report)
        else:
            self.client.notify_error(str(record.msg), str(self.format(record)), apply_report)

    def accepts(self, level: int) -> bool:
        """Return True if a record at *level* passes the minimum level."""
        return level >= self.level

    def get_severity(self, level: int) -> Severity:
        """Translate a logging level into a severity tier."""
        return resolve_severity(level)

    def get_default_formatter(self) -> logging.Formatter:
        """Formatter used for single records: ``[channel] message``."""
        return logging.Formatter(DEFAULT_FORMAT)

    def get_default_batch_formatter(self) -> logging.Formatter:
        """Default formatter for rendering several records as one message."""
        return logging.Formatter()

    @property
    def batch_formatter(self) -> logging.Formatter:
        if self._batch_formatter is None:
            self._batch_formatter = self.get_default_batch_formatter()
        return self._batch_formatter

    @batch_formatter.setter
    def batch_formatter(self, formatter: logging.Formatter) -> None:
        self._batch_formatter = formatter

    @staticmethod
    def _get_exception(record: logging.LogRecord) -> Any:
        context = getattr(record, "context", None)
        if isinstance(context, Mapping) and context.get("exception") is not None:
            return context["exception"]
        if record.exc_info and record.exc_info[1] is not None:
            return record.exc_info[1]
        return None
