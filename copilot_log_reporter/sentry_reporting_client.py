# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Sentry reporting client implementation."""

import logging
from typing import Optional

from .config import DriverConfig
from .report import Report
from .reporting_client import ReportCallback, ReportingClient

logger = logging.getLogger(__name__)

_INSTALL_HINT = "sentry-sdk is not installed. Install it with: pip install copilot-log-reporter[sentry]"


class SentryReportingClient(ReportingClient):
    """Reporting client that delivers reports to Sentry.

    Requires the ``sentry`` extra (``sentry-sdk``) and a DSN.

    Example:
        client = SentryReportingClient(dsn="https://...@sentry.io/...")
        client.notify_exception(exception, lambda report: report.set_severity("warning"))
    """

    def __init__(self, dsn: str | None = None, environment: str = "production"):
        """Initialize Sentry reporting client.

        Args:
            dsn: Sentry DSN (Data Source Name) for the project
            environment: Environment name (production, staging, development)
        """
        self.dsn = dsn
        self.environment = environment
        self._initialized = False

        if dsn:
            self._initialize_sentry()

    @classmethod
    def from_config(cls, config: DriverConfig) -> "SentryReportingClient":
        """Create a SentryReportingClient from driver configuration.

        Args:
            config: Driver config with dsn and environment keys.

        Returns:
            Configured SentryReportingClient instance
        """
        return cls(dsn=config.get("dsn"), environment=config.get("environment") or "production")

    def _initialize_sentry(self) -> None:
        try:
            import sentry_sdk
        except ImportError as exc:
            raise ImportError(_INSTALL_HINT) from exc

        sentry_sdk.init(dsn=self.dsn, environment=self.environment)
        self._initialized = True
        logger.debug("Sentry reporting client initialized for environment %s", self.environment)

    def is_initialized(self) -> bool:
        """Return True once the SDK has been initialized with a DSN."""
        return self._initialized

    def notify_exception(
        self,
        error: BaseException,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        sentry_sdk = self._sdk()
        report = self._build_report(callback, error=error)

        with sentry_sdk.new_scope() as scope:
            self._apply_report(scope, report)
            sentry_sdk.capture_exception(error)

    def notify_error(
        self,
        name: str,
        message: str,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        sentry_sdk = self._sdk()
        report = self._build_report(callback, name=name, message=message)

        with sentry_sdk.new_scope() as scope:
            self._apply_report(scope, report)
            scope.set_tag("error_name", report.name)
            sentry_sdk.capture_message(report.message, level=report.severity.value)

    def _sdk(self):
        if not self._initialized:
            raise RuntimeError("Sentry reporting client not initialized with a valid DSN")
        try:
            import sentry_sdk
        except ImportError as exc:
            raise ImportError(_INSTALL_HINT) from exc
        return sentry_sdk

    @staticmethod
    def _apply_report(scope, report: Report) -> None:
        scope.set_level(report.severity.value)
        if report.metadata:
            scope.set_context("metadata", report.metadata)
