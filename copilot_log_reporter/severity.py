# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity tiers and the log-level to severity translation table."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

# Levels known to the reporting side but missing from the stdlib ladder.
NOTICE = 25
ALERT = 60
EMERGENCY = 70

logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(ALERT, "ALERT")
logging.addLevelName(EMERGENCY, "EMERGENCY")


class Severity(str, Enum):
    """The three severity tiers accepted by the reporting service."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


LEVEL_SEVERITY: Mapping[int, Severity] = MappingProxyType({
    logging.DEBUG: Severity.INFO,
    logging.INFO: Severity.INFO,
    NOTICE: Severity.INFO,
    logging.WARNING: Severity.WARNING,
    logging.ERROR: Severity.ERROR,
    logging.CRITICAL: Severity.ERROR,
    ALERT: Severity.ERROR,
    EMERGENCY: Severity.ERROR,
})

DEFAULT_SEVERITY = LEVEL_SEVERITY[logging.ERROR]


def resolve_severity(level: int) -> Severity:
    """Translate a logging level into a severity tier.

    Levels outside the table fall back to the error tier.

    Args:
        level: Numeric logging level (e.g. ``record.levelno``)

    Returns:
        Matching Severity
    """
    return LEVEL_SEVERITY.get(level, DEFAULT_SEVERITY)


def coerce_severity(value: Severity | str) -> Severity:
    """Normalize a severity given as an enum member or a name.

    Args:
        value: Severity member or case-insensitive tier name

    Returns:
        Severity member

    Raises:
        ValueError: If value is not one of the three tiers
    """
    if isinstance(value, Severity):
        return value
    try:
        return Severity(str(value).lower())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in Severity)
        raise ValueError(f"Invalid severity: {value}. Must be one of: {allowed}") from exc
