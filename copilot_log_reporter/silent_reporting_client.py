# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Silent reporting client implementation for testing."""

from typing import Optional

from .config import DriverConfig
from .report import Report
from .reporting_client import ReportCallback, ReportingClient
from .severity import Severity, coerce_severity


class SilentReportingClient(ReportingClient):
    """Reporting client that keeps delivered reports in memory.

    Useful in unit tests to verify what would have been sent without any
    output or network traffic.
    """

    def __init__(self):
        """Initialize silent reporting client."""
        self.reports: list[Report] = []

    @classmethod
    def from_config(cls, config: DriverConfig) -> "SilentReportingClient":
        """Create SilentReportingClient from DriverConfig.

        Args:
            config: DriverConfig (ignored, no configuration needed)

        Returns:
            SilentReportingClient instance
        """
        return cls()

    def notify_exception(
        self,
        error: BaseException,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        self.reports.append(self._build_report(callback, error=error))

    def notify_error(
        self,
        name: str,
        message: str,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        self.reports.append(self._build_report(callback, name=name, message=message))

    def get_reports(self, severity: Severity | str | None = None) -> list[Report]:
        """Get delivered reports, optionally filtered by severity.

        Args:
            severity: Optional severity tier to filter by

        Returns:
            List of reports in delivery order
        """
        if severity is None:
            return self.reports
        wanted = coerce_severity(severity)
        return [r for r in self.reports if r.severity == wanted]

    def has_reports(self, severity: Severity | str | None = None) -> bool:
        """Check if any reports have been delivered."""
        return len(self.get_reports(severity)) > 0

    def clear(self) -> None:
        """Clear all stored reports."""
        self.reports.clear()
