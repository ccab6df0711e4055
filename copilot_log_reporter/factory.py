# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating reporting clients and handlers."""

import logging
from typing import Callable, Mapping

from .config import DriverConfig, ReportingClientConfig, load_config_from_env
from .handler import SeverityMappingHandler
from .reporting_client import ReportingClient

logger = logging.getLogger(__name__)


def _build_console(config: DriverConfig) -> ReportingClient:
    from .console_reporting_client import ConsoleReportingClient

    return ConsoleReportingClient.from_config(config)


def _build_silent(config: DriverConfig) -> ReportingClient:
    from .silent_reporting_client import SilentReportingClient

    return SilentReportingClient.from_config(config)


def _build_sentry(config: DriverConfig) -> ReportingClient:
    from .sentry_reporting_client import SentryReportingClient

    return SentryReportingClient.from_config(config)


_DRIVERS: Mapping[str, Callable[[DriverConfig], ReportingClient]] = {
    "console": _build_console,
    "silent": _build_silent,
    "sentry": _build_sentry,
}


def create_reporting_client(config: ReportingClientConfig | None = None) -> ReportingClient:
    """Create a reporting client from typed configuration.

    Args:
        config: Typed reporting client configuration. When omitted, the
            configuration is read from the environment.

    Returns:
        ReportingClient instance

    Raises:
        ValueError: If reporting_client_type is not recognized
        TypeError: If the driver config is not a DriverConfig
    """
    if config is None:
        config = load_config_from_env()

    driver_type = str(config.reporting_client_type).lower()
    try:
        factory = _DRIVERS[driver_type]
    except KeyError as exc:
        supported = ", ".join(sorted(_DRIVERS.keys()))
        raise ValueError(
            f"Unknown reporting client driver: {driver_type}. Supported drivers: {supported}"
        ) from exc

    if not isinstance(config.driver, DriverConfig):
        raise TypeError("driver config must be DriverConfig")

    logger.debug("Creating %s reporting client", driver_type)
    return factory(config.driver)


def create_handler(
    client: ReportingClient | None = None,
    level: int = logging.DEBUG,
    bubble: bool = True,
) -> SeverityMappingHandler:
    """Create a SeverityMappingHandler.

    Args:
        client: Reporting client to forward records to. Defaults to a client
            built from the environment.
        level: Minimum logging level at which the handler is triggered
        bubble: Whether handled records may continue to other handlers

    Returns:
        SeverityMappingHandler instance

    Example:
        >>> handler = create_handler(level=logging.WARNING)
        >>> attach_handler(logging.getLogger("my-service"), handler)
    """
    if client is None:
        client = create_reporting_client()
    return SeverityMappingHandler(client, level=level, bubble=bubble)


def attach_handler(
    target: logging.Logger,
    handler: SeverityMappingHandler,
) -> SeverityMappingHandler:
    """Add *handler* to the *target* logger and return it."""
    target.addHandler(handler)
    return handler
