"""Testes abrangentes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, SecretRedactionFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from config.logging import (
    DEFAULT_SERVICE_NAME,
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SecretRedactionFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import VALID_LOG_LEVELS
from config.logging.filters import REDACTED_PLACEHOLDER, is_sensitive_key


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """configure_logging altera o logger raiz; restaura após cada teste."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Nível é case insensitive."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

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

    def test_handler_has_correlation_and_redaction_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, SecretRedactionFilter) for f in filters)

    def test_valid_log_levels_constant(self) -> None:
        """VALID_LOG_LEVELS contém os níveis esperados."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        """DEFAULT_SERVICE_NAME está definido."""
        assert DEFAULT_SERVICE_NAME == "grafana_token_issuer"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        """Log fallback básico com componente."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "expiration_resolver")
        logger.info.assert_called_once()
        call_args = logger.info.call_args
        # Formato lazy: primeiro arg é template, segundo é o componente
        assert call_args[0][0] == "Fallback applied for %s"
        assert call_args[0][1] == "expiration_resolver"
        extra = call_args[1]["extra"]
        assert extra["fallback_used"] is True
        assert extra["component"] == "expiration_resolver"
        assert "reason" not in extra

    def test_log_fallback_with_reason_and_fields(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "expiration_resolver", reason="format_not_recognized", default_days=30)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "format_not_recognized"
        assert extra["default_days"] == 30


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


class TestSecretRedactionFilter:
    """Segredos passados via extra nunca chegam ao formatter."""

    @pytest.mark.parametrize(
        ("key", "sensitive"),
        [
            ("api_key", True),
            ("Authorization", True),
            ("secret_value", True),
            ("smtp_password", True),
            ("credential_name", False),
            ("expires_at", False),
            ("row", False),
        ],
    )
    def test_is_sensitive_key(self, key: str, sensitive: bool) -> None:
        assert is_sensitive_key(key) is sensitive

    def test_sensitive_extras_are_masked(self) -> None:
        record = _record()
        record.api_key = "glc_live"
        record.credential_name = "alice-20261019153045"
        record.headers = {"Authorization": "Bearer glc_live", "Accept": "application/json"}

        assert SecretRedactionFilter().filter(record) is True

        assert record.api_key == REDACTED_PLACEHOLDER
        assert record.credential_name == "alice-20261019153045"
        assert record.headers == {"Authorization": REDACTED_PLACEHOLDER, "Accept": "application/json"}

    def test_standard_attributes_are_untouched(self) -> None:
        record = _record(msg="token_key rotated")
        SecretRedactionFilter().filter(record)
        assert record.msg == "token_key rotated"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert isinstance(REQUIRED_LOG_FIELDS, frozenset)
        assert expected == REQUIRED_LOG_FIELDS

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_create_json_formatter_returns_formatter(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)

    def test_json_formatter_formats_record(self) -> None:
        record = _record(msg="issuance_completed")
        record.name = "app.use_cases.issue_token"
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.credential_name = "alice-20261019153045"

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "issuance_completed"
        assert payload["logger"] == "app.use_cases.issue_token"
        assert payload["level"] == "INFO"
        assert payload["correlation_id"] == "abc-123"
        assert payload["credential_name"] == "alice-20261019153045"


class TestLoggingIntegration:
    """Testes de integração do sistema de logging."""

    def test_full_logging_flow_redacts_secrets(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Fluxo completo: configure, get_logger, log com segredo em extra."""
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        logger = get_logger("integration.test")
        logger.info("issuance_request", extra={"api_key": "glc_live", "region": "prod-us-east-0"})

        output = capsys.readouterr().err
        assert "glc_live" not in output
        line = json.loads(output.strip().splitlines()[-1])
        assert line["service"] == "integration_test"
        assert line["correlation_id"] == "int-test-001"
        assert line["region"] == "prod-us-east-0"
