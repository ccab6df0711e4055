# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Mutable report draft handed to report callbacks before delivery."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from .severity import DEFAULT_SEVERITY, Severity, coerce_severity


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class Report:
    """An in-flight error report.

    Reporting clients allocate a Report, pass it to the caller's callback so
    severity and metadata can be injected, then deliver it.

    Attributes:
        name: Error name (exception class name, or the raw log message)
        message: Human-readable error message
        error: Exception being reported, if any
        severity: Severity tier of the report
        metadata: Arbitrary diagnostic data attached to the report
        timestamp: Creation time in UTC (ISO 8601)
    """
    name: str
    message: str
    error: BaseException | None = None
    severity: Severity = DEFAULT_SEVERITY
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=_utc_timestamp)

    @classmethod
    def from_exception(cls, error: BaseException) -> "Report":
        """Create a draft describing an exception."""
        return cls(name=type(error).__name__, message=str(error), error=error)

    def set_severity(self, severity: Severity | str) -> None:
        """Set the severity tier.

        Raises:
            ValueError: If severity is not info, warning or error
        """
        self.severity = coerce_severity(severity)

    def set_metadata(self, metadata: Mapping[str, Any]) -> None:
        """Replace the report metadata with a copy of ``metadata``."""
        self.metadata = dict(metadata)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "name": self.name,
            "message": self.message,
            "error_type": type(self.error).__name__ if self.error is not None else None,
            "severity": self.severity.value,
            "metadata": dict(self.metadata),
            "timestamp": self.timestamp,
        }
