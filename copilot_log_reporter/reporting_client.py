# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract reporting client interface."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .report import Report

ReportCallback = Callable[[Report], None]


class ReportingClient(ABC):
    """Abstract base class for error reporting clients.

    A client turns an exception or an error message into a Report, lets the
    caller mutate the draft through a callback, then delivers it.
    """

    @abstractmethod
    def notify_exception(
        self,
        error: BaseException,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        """Report an exception.

        Args:
            error: The exception to report
            callback: Optional function invoked with the draft before delivery
        """
        pass

    @abstractmethod
    def notify_error(
        self,
        name: str,
        message: str,
        callback: Optional[ReportCallback] = None,
    ) -> None:
        """Report an error that has no exception attached.

        Args:
            name: Error name
            message: Error message
            callback: Optional function invoked with the draft before delivery
        """
        pass

    def _build_report(
        self,
        callback: Optional[ReportCallback],
        *,
        error: BaseException | None = None,
        name: str = "",
        message: str = "",
    ) -> Report:
        """Allocate a draft and run the callback on it synchronously."""
        if error is not None:
            report = Report.from_exception(error)
        else:
            report = Report(name=name, message=message)
        if callback is not None:
            callback(report)
        return report
