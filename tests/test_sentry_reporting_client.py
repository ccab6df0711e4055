# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for SentryReportingClient."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from copilot_log_reporter import DriverConfig, SentryReportingClient


@pytest.fixture
def mock_sentry_sdk():
    """Install a mock sentry_sdk module."""
    sdk = MagicMock()
    with patch.dict(sys.modules, {"sentry_sdk": sdk}):
        yield sdk


def scope_of(sdk):
    """Return the scope yielded by sentry_sdk.new_scope()."""
    return sdk.new_scope.return_value.__enter__.return_value


class TestSentryReportingClientInitialization:
    """Tests for client initialization."""

    def test_without_dsn_is_not_initialized(self):
        client = SentryReportingClient()

        assert not client.is_initialized()

    def test_init_with_dsn(self, mock_sentry_sdk):
        client = SentryReportingClient(dsn="https://key@sentry.example/1", environment="staging")

        assert client.is_initialized()
        mock_sentry_sdk.init.assert_called_once_with(
            dsn="https://key@sentry.example/1",
            environment="staging",
        )

    def test_missing_sdk_raises_import_error(self):
        with patch.dict(sys.modules, {"sentry_sdk": None}):
            with pytest.raises(ImportError, match="sentry-sdk is not installed"):
                SentryReportingClient(dsn="https://key@sentry.example/1")

    def test_from_config(self, mock_sentry_sdk):
        config = DriverConfig(
            driver_name="sentry",
            config={"dsn": "https://key@sentry.example/1", "environment": None},
        )

        client = SentryReportingClient.from_config(config)

        assert client.dsn == "https://key@sentry.example/1"
        assert client.environment == "production"

    def test_uninitialized_submission_raises(self):
        client = SentryReportingClient()

        with pytest.raises(RuntimeError, match="not initialized"):
            client.notify_error("name", "message")
        with pytest.raises(RuntimeError, match="not initialized"):
            client.notify_exception(ValueError("x"))


class TestSentryReportingClientDelivery:
    """Tests for report delivery."""

    def test_notify_exception(self, mock_sentry_sdk):
        client = SentryReportingClient(dsn="https://key@sentry.example/1")
        error = ValueError("bad value")

        client.notify_exception(
            error,
            lambda r: (r.set_severity("warning"), r.set_metadata({"user_id": 42})),
        )

        scope = scope_of(mock_sentry_sdk)
        scope.set_level.assert_called_once_with("warning")
        scope.set_context.assert_called_once_with("metadata", {"user_id": 42})
        mock_sentry_sdk.capture_exception.assert_called_once_with(error)
        mock_sentry_sdk.capture_message.assert_not_called()

    def test_notify_error(self, mock_sentry_sdk):
        client = SentryReportingClient(dsn="https://key@sentry.example/1")

        client.notify_error("disk low", "[app] disk low", lambda r: r.set_severity("info"))

        scope = scope_of(mock_sentry_sdk)
        scope.set_level.assert_called_once_with("info")
        scope.set_context.assert_not_called()
        scope.set_tag.assert_called_once_with("error_name", "disk low")
        mock_sentry_sdk.capture_message.assert_called_once_with("[app] disk low", level="info")
        mock_sentry_sdk.capture_exception.assert_not_called()

    def test_delivery_errors_propagate(self, mock_sentry_sdk):
        mock_sentry_sdk.capture_message.side_effect = ConnectionError("unreachable")
        client = SentryReportingClient(dsn="https://key@sentry.example/1")

        with pytest.raises(ConnectionError):
            client.notify_error("name", "message")
