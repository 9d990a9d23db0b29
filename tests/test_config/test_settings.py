"""Testes das settings por domínio (base, issuer, sheets, email)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    BaseSettings,
    ColumnLayout,
    EmailSettings,
    IssuerSettings,
    SheetsSettings,
    get_base_settings,
    get_email_settings,
    get_issuer_settings,
    get_sheets_settings,
)

DEV = BaseSettings(environment="development")
PROD = BaseSettings(environment="production")


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    getters = (get_base_settings, get_email_settings, get_issuer_settings, get_sheets_settings)
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()


class TestBaseSettings:
    def test_defaults_are_valid(self) -> None:
        assert BaseSettings().validate() == []
        assert BaseSettings().is_development is True

    def test_empty_service_name(self) -> None:
        assert "SERVICE_NAME não pode ser vazio" in BaseSettings(service_name="").validate()

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "p-123")
        monkeypatch.delenv("GCP_PROJECT", raising=False)

        settings = get_base_settings()

        assert settings.is_production is True
        assert settings.gcp_project == "p-123"


class TestIssuerSettings:
    def test_defaults(self) -> None:
        settings = IssuerSettings()
        assert settings.validate() == []
        assert settings.api_endpoint == "https://www.grafana.com/api/v1/tokens"
        assert settings.default_expiration_days == 30
        assert str(settings.zone) == "UTC"

    def test_invalid_values(self) -> None:
        errors = IssuerSettings(
            api_endpoint="ftp://grafana",
            request_timeout_seconds=0,
            default_expiration_days=0,
            name_timezone="Mars/Olympus",
        ).validate()
        assert len(errors) == 4

    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
        monkeypatch.setenv("ISSUER_DEFAULT_EXPIRATION_DAYS", "14")
        monkeypatch.setenv("ISSUER_CONFIG_BACKEND", "GCP")
        monkeypatch.setenv("ISSUER_NAME_TIMEZONE", "Asia/Tokyo")

        settings = get_issuer_settings()

        assert settings.default_expiration_days == 14
        assert settings.config_backend == "gcp"
        assert settings.name_timezone == "Asia/Tokyo"


class TestSheetsSettings:
    def test_column_layout_defaults(self) -> None:
        columns = ColumnLayout()
        assert columns.outcome_columns == (5, 6, 7, 8)
        assert columns.required_capacity == 8
        assert columns.validate() == []

    def test_column_layout_rejects_duplicates(self) -> None:
        errors = ColumnLayout(token_name=5).validate()
        assert "Colunas de resultado devem ser distintas" in errors

    def test_sheets_backend_requires_spreadsheet(self) -> None:
        errors = SheetsSettings().validate(DEV)
        assert "SHEETS_SPREADSHEET_ID não configurado" in errors
        assert "SHEETS_CREDENTIALS_JSON não configurado" in errors

    def test_memory_backend_only_in_development(self) -> None:
        settings = SheetsSettings(backend="memory")
        assert settings.validate(DEV) == []
        assert settings.validate(PROD) == ["SHEETS_BACKEND=memory proibido em staging/production."]

    def test_columns_from_env(self, monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
        monkeypatch.setenv("SHEETS_BACKEND", "memory")
        monkeypatch.setenv("SHEETS_COLUMN_STATUS", "10")
        monkeypatch.setenv("SHEETS_COLUMN_ERROR_DETAILS", "13")

        settings = get_sheets_settings()

        assert settings.backend == "memory"
        assert settings.columns.status == 10
        assert settings.columns.required_capacity == 13


class TestEmailSettings:
    def test_requires_host_and_sender(self) -> None:
        errors = EmailSettings().validate()
        assert "EMAIL_SMTP_HOST não configurado" in errors
        assert "EMAIL_DEFAULT_FROM não configurado" in errors

    def test_tls_flag_from_env(self, monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
        monkeypatch.setenv("EMAIL_SMTP_HOST", "smtp.example.com")
        monkeypatch.setenv("EMAIL_DEFAULT_FROM", "noreply@example.com")
        monkeypatch.setenv("EMAIL_SMTP_USE_TLS", "false")

        settings = get_email_settings()

        assert settings.validate() == []
        assert settings.smtp_use_tls is False
