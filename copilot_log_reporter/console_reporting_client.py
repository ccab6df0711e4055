# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Console-based reporting client implementation."""

import logging
import traceback
from typing import Optional

from .config import DriverConfig
from .report import Report
from .reporting_client import ReportCallback, ReportingClient
from .severity import Severity

DEFAULT_LOGGER_NAME = "copilot_log_reporter.console"

_SEVERITY_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class ConsoleReportingClient(ReportingClient):
    """Reporting client that writes reports through Python's logging system.

    This is the default client. It is handy for local development where no
    error tracking backend is available.
    """

    def __init__(self, logger_name: str | None = None):
        """Initialize console reporting client.

        Args:
            logger_name: Optional logger name to use (defaults to
                ``copilot_log_reporter.console``)
        """
        self.logger = logging.getLogger(logger_name or DEFAULT_LOGGER_NAME)

    @classmethod
    def from_config(cls, config: DriverConfig) -> "ConsoleReportingClient":
        """Create ConsoleReportingClient from DriverConfig.

        Args:
            config: DriverConfig with optional logger_name key.

        Returns:
            ConsoleReportingClient instance
        """
        return cls(logger_name=config.get("logger_name"))

    def notify_exception(
        self,
        error: BaseException,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        report = self._build_report(callback, error=error)
        self._deliver(report, f"Exception occurred: {report.name}: {report.message}")

        stack_trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        self.logger.debug(f"Stack trace:\n{stack_trace}")

    def notify_error(
        self,
        name: str,
        message: str,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        report = self._build_report(callback, name=name, message=message)
        self._deliver(report, f"Error reported: {report.name} | {report.message}")

    def _deliver(self, report: Report, log_message: str) -> None:
        if report.metadata:
            metadata_str = ", ".join(f"{k}={v}" for k, v in report.metadata.items())
            log_message += f" | Metadata: {metadata_str}"

        self.logger.log(_SEVERITY_LEVELS[report.severity], log_message)
