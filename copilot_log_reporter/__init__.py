# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Copilot-for-Consensus Log Reporter.

Forwards records from Python's logging system to an error reporting client,
mapping logging levels onto the info / warning / error severity tiers.

Example:
    >>> import logging
    >>> from copilot_log_reporter import SilentReportingClient, create_handler
    >>>
    >>> client = SilentReportingClient()
    >>> log = logging.getLogger("app")
    >>> log.addHandler(create_handler(client, level=logging.INFO))
    >>> log.warning("disk low", extra={"extra": {"free_gb": 2}})
    >>> client.reports[0].severity
    <Severity.WARNING: 'warning'>
"""

__version__ = "0.1.0"

from .config import DriverConfig, ReportingClientConfig, load_config_from_env
from .console_reporting_client import ConsoleReportingClient
from .factory import attach_handler, create_handler, create_reporting_client
from .handler import SeverityMappingHandler
from .report import Report
from .reporting_client import ReportCallback, ReportingClient
from .sentry_reporting_client import SentryReportingClient
from .severity import (
    ALERT,
    EMERGENCY,
    LEVEL_SEVERITY,
    NOTICE,
    Severity,
    coerce_severity,
    resolve_severity,
)
from .silent_reporting_client import SilentReportingClient

__all__ = [
    # Version
    "__version__",
    # Severity
    "Severity",
    "LEVEL_SEVERITY",
    "NOTICE",
    "ALERT",
    "EMERGENCY",
    "resolve_severity",
    "coerce_severity",
    # Reports and clients
    "Report",
    "ReportCallback",
    "ReportingClient",
    "ConsoleReportingClient",
    "SilentReportingClient",
    "SentryReportingClient",
    # Handler
    "SeverityMappingHandler",
    # Configuration and factories
    "DriverConfig",
    "ReportingClientConfig",
    "load_config_from_env",
    "create_reporting_client",
    "create_handler",
    "attach_handler",
]
