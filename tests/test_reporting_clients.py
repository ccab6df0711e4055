# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for the console and silent reporting clients."""

import logging

import pytest

from copilot_log_reporter import (
    ConsoleReportingClient,
    DriverConfig,
    ReportingClient,
    Severity,
    SilentReportingClient,
)


class TestReportingClientInterface:
    """Tests for the abstract interface."""

    def test_cannot_instantiate_abstract_client(self):
        with pytest.raises(TypeError):
            ReportingClient()  # type: ignore[abstract]

    def test_callback_runs_before_delivery(self):
        """Test that the draft is mutated before it is stored."""
        client = SilentReportingClient()
        seen = []

        def callback(report):
            seen.append(len(client.reports))
            report.set_severity("warning")

        client.notify_error("name", "message", callback)

        assert seen == [0]
        assert client.reports[0].severity == Severity.WARNING


class TestSilentReportingClient:
    """Tests for SilentReportingClient."""

    def test_notify_exception(self):
        client = SilentReportingClient()
        error = ValueError("bad value")

        client.notify_exception(error)

        assert client.has_reports()
        report = client.reports[0]
        assert report.error is error
        assert report.name == "ValueError"
        assert report.message == "bad value"
        assert report.severity == Severity.ERROR

    def test_notify_error(self):
        client = SilentReportingClient()

        client.notify_error("disk low", "[app] disk low", lambda r: r.set_metadata({"free_gb": 2}))

        report = client.reports[0]
        assert report.error is None
        assert report.name == "disk low"
        assert report.message == "[app] disk low"
        assert report.metadata == {"free_gb": 2}

    def test_get_reports_by_severity(self):
        client = SilentReportingClient()
        client.notify_error("a", "a", lambda r: r.set_severity(Severity.INFO))
        client.notify_error("b", "b", lambda r: r.set_severity(Severity.WARNING))
        client.notify_error("c", "c")

        assert [r.name for r in client.get_reports("warning")] == ["b"]
        assert [r.name for r in client.get_reports(Severity.ERROR)] == ["c"]
        assert len(client.get_reports()) == 3
        assert client.has_reports("info")

    def test_clear(self):
        client = SilentReportingClient()
        client.notify_error("a", "a")

        client.clear()

        assert not client.has_reports()

    def test_from_config(self):
        client = SilentReportingClient.from_config(DriverConfig(driver_name="silent"))

        assert isinstance(client, SilentReportingClient)


class TestConsoleReportingClient:
    """Tests for ConsoleReportingClient."""

    def test_default_logger_name(self):
        client = ConsoleReportingClient()

        assert client.logger.name == "copilot_log_reporter.console"

    def test_custom_logger_name(self):
        client = ConsoleReportingClient(logger_name="my-reports")

        assert client.logger.name == "my-reports"

    def test_from_config(self):
        config = DriverConfig(driver_name="console", config={"logger_name": "cfg-reports"})

        client = ConsoleReportingClient.from_config(config)

        assert client.logger.name == "cfg-reports"

    def test_notify_error_logs_at_severity_level(self, caplog):
        client = ConsoleReportingClient(logger_name="console-test")

        with caplog.at_level(logging.DEBUG, logger="console-test"):
            client.notify_error(
                "disk low",
                "[app] disk low",
                lambda r: (r.set_severity("warning"), r.set_metadata({"free_gb": 2})),
            )

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert "disk low" in record.getMessage()
        assert "free_gb=2" in record.getMessage()

    def test_notify_exception_logs_error_and_stack_trace(self, caplog):
        client = ConsoleReportingClient(logger_name="console-test")

        with caplog.at_level(logging.DEBUG, logger="console-test"):
            try:
                raise RuntimeError("boom")
            except RuntimeError as exc:
                client.notify_exception(exc)

        levels = [r.levelno for r in caplog.records]
        assert levels == [logging.ERROR, logging.DEBUG]
        assert "RuntimeError: boom" in caplog.records[0].getMessage()
        assert "Stack trace" in caplog.records[1].getMessage()

    def test_info_severity_logs_at_info(self, caplog):
        client = ConsoleReportingClient(logger_name="console-test")

        with caplog.at_level(logging.DEBUG, logger="console-test"):
            client.notify_error("started", "[app] started", lambda r: r.set_severity("info"))

        assert caplog.records[0].levelno == logging.INFO
