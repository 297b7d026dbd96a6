"""Tests for structlog setup helpers."""

from __future__ import annotations

import structlog

from toolhooks.config.settings import LoggingSettings
from toolhooks.infra.logging import (
    get_subsystem_logger,
    setup_logging,
    setup_logging_from_settings,
)


class TestSetupLogging:
    def test_configures_structlog(self) -> None:
        try:
            setup_logging(json_output=False, log_level="debug")
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()


class TestSubsystemLogger:
    def test_subsystem_bound(self) -> None:
        cap = structlog.testing.LogCapture()
        structlog.configure(processors=[cap], wrapper_class=structlog.BoundLogger)
        try:
            get_subsystem_logger("agents/tools").warning("probe", tool_name="read")
            assert cap.entries == [
                {
                    "event": "probe",
                    "subsystem": "agents/tools",
                    "tool_name": "read",
                    "log_level": "warning",
                }
            ]
        finally:
            structlog.reset_defaults()


class TestSetupLoggingFromSettings:
    def test_uses_logging_settings(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(
            "toolhooks.infra.logging.setup_logging",
            lambda **kw: calls.append(kw),
        )
        setup_logging_from_settings(LoggingSettings(level="warning", json_output=False))
        assert calls == [{"json_output": False, "log_level": "WARNING"}]

    def test_reads_env_when_omitted(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.delenv("LOG_JSON_OUTPUT", raising=False)
        try:
            setup_logging_from_settings()
            assert structlog.is_configured()
            assert structlog.get_config()["logger_factory"] is not None
        finally:
            structlog.reset_defaults()
