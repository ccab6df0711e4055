# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Configuration models for reporting clients."""

import os
from dataclasses import dataclass, field
from typing import Any

DEFAULT_CLIENT_TYPE = "console"
DEFAULT_ENVIRONMENT = "production"


@dataclass
class DriverConfig:
    """Configuration for a specific reporting client driver.

    Attributes:
        driver_name: Name of the driver (e.g., "console", "sentry")
        config: Dictionary of driver-specific configuration values
    """
    driver_name: str
    config: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a driver config value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self.config.get(key, default)

    def __getattr__(self, name: str) -> Any:
        """Allow attribute-style access to driver config values.

        Raises:
            AttributeError: If key is not present in the config
        """
        if name in ("driver_name", "config"):
            return object.__getattribute__(self, name)

        config = object.__getattribute__(self, "config")
        if name in config:
            return config[name]

        raise AttributeError(
            f"Driver '{object.__getattribute__(self, 'driver_name')}' has no config key '{name}'"
        )


@dataclass
class ReportingClientConfig:
    """Typed adapter configuration for a reporting client.

    Attributes:
        reporting_client_type: Driver discriminant ("console", "silent", "sentry")
        driver: Driver-specific configuration
    """
    reporting_client_type: str
    driver: DriverConfig


def _default(value: str | None, env_var: str, fallback: str | None) -> str | None:
    """Helper to pick an explicit value, then env var, then fallback."""
    return value or os.getenv(env_var) or fallback


def load_config_from_env(
    reporting_client_type: str | None = None,
    **overrides: Any,
) -> ReportingClientConfig:
    """Build a ReportingClientConfig from environment variables.

    Explicit arguments win over environment variables.

    Environment Variables:
    - REPORTING_CLIENT_TYPE: console, silent or sentry (default: console)
    - REPORTING_LOGGER_NAME: Logger name for the console driver
    - SENTRY_DSN: DSN for the sentry driver
    - SENTRY_ENVIRONMENT: Environment for the sentry driver (default: production)

    Args:
        reporting_client_type: Optional explicit driver type
        **overrides: Optional explicit driver config values

    Returns:
        ReportingClientConfig instance
    """
    client_type = _default(reporting_client_type, "REPORTING_CLIENT_TYPE", DEFAULT_CLIENT_TYPE)
    client_type = client_type.lower()

    if client_type == "console":
        driver_values = {
            "logger_name": _default(overrides.get("logger_name"), "REPORTING_LOGGER_NAME", None),
        }
    elif client_type == "sentry":
        driver_values = {
            "dsn": _default(overrides.get("dsn"), "SENTRY_DSN", None),
            "environment": _default(overrides.get("environment"), "SENTRY_ENVIRONMENT", DEFAULT_ENVIRONMENT),
        }
    else:
        driver_values = {}

    return ReportingClientConfig(
        reporting_client_type=client_type,
        driver=DriverConfig(driver_name=client_type, config=driver_values),
    )
