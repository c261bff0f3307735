"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_adds_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_http_client_loggers_quieted(self) -> None:
        """Loggers do httpx/httpcore não logam requests em INFO."""
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "webflow-sendpulse"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        """Fallback é logado em WARNING com formato lazy."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "address_book_resolver")
        logger.warning.assert_called_once()
        call_args = logger.warning.call_args
        assert call_args[0][0] == "Fallback applied for %s"
        assert call_args[0][1] == "address_book_resolver"
        extra = call_args[1]["extra"]
        assert extra["fallback_used"] is True
        assert extra["component"] == "address_book_resolver"
        assert "reason" not in extra

    def test_log_fallback_with_reason_and_fields(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(
            logger,
            "sendpulse_add_contact",
            reason="address_book_failed",
            failed_address_book_id="963387",
            address_book_id="961879",
        )
        extra = logger.warning.call_args[1]["extra"]
        assert extra["reason"] == "address_book_failed"
        assert extra["failed_address_book_id"] == "963387"
        assert extra["address_book_id"] == "961879"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""
        assert record.service == "service_name"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_output(self) -> None:
        """Saída é JSON com campos renomeados e extras."""
        formatter = create_json_formatter()
        record = _record(msg="sendpulse_token_obtained", name="api.connectors.sendpulse")
        record.correlation_id = "abc-123"
        record.service = "webflow-sendpulse"
        record.expires_in = 3600

        output = json.loads(formatter.format(record))

        assert output["message"] == "sendpulse_token_obtained"
        assert output["logger"] == "api.connectors.sendpulse"
        assert output["level"] == "INFO"
        assert output["correlation_id"] == "abc-123"
        assert output["service"] == "webflow-sendpulse"
        assert output["expires_in"] == 3600


class TestLoggingIntegration:
    """Testes de integração do sistema de logging."""

    def test_full_logging_flow(self) -> None:
        """Fluxo completo: configure, get_logger, log."""
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        logger = get_logger("integration.test")
        logger.debug("debug_event", extra={"custom_field": "value"})
        logger.info("info_event", extra={"latency_ms": 42, "address_book_id": "963387"})
        logger.warning("warning_event")
        logger.error("error_event")
