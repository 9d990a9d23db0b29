"""Testes do composition root (validação de settings e factories)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app.bootstrap import collect_settings_errors, validate_runtime_settings
from app.bootstrap.dependencies import (
    create_config_store,
    create_issue_token_use_case,
    create_row_store,
)
from app.infra.secrets import EnvSecretProvider, GCPSecretProvider
from app.infra.stores import MemoryRowStore
from app.use_cases import IssueTokenUseCase
from config.settings import (
    get_base_settings,
    get_email_settings,
    get_issuer_settings,
    get_sheets_settings,
)

_GETTERS = (get_base_settings, get_email_settings, get_issuer_settings, get_sheets_settings)


@pytest.fixture(autouse=True)
def dev_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("ENVIRONMENT", "GCP_PROJECT", "GOOGLE_CLOUD_PROJECT", "ISSUER_CONFIG_BACKEND"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SHEETS_BACKEND", "memory")
    monkeypatch.setenv("EMAIL_SMTP_HOST", "smtp.example.com")
    monkeypatch.setenv("EMAIL_DEFAULT_FROM", "noreply@example.com")
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


class TestSettingsValidation:
    def test_development_with_memory_store_is_valid(self) -> None:
        assert collect_settings_errors() == []

    def test_gcp_backend_requires_project(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ISSUER_CONFIG_BACKEND", "gcp")
        get_issuer_settings.cache_clear()

        assert "issuer: ISSUER_CONFIG_BACKEND=gcp requer GCP_PROJECT" in collect_settings_errors()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        get_base_settings.cache_clear()

        with pytest.raises(RuntimeError, match="production"):
            validate_runtime_settings()

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EMAIL_SMTP_HOST")
        get_email_settings.cache_clear()

        validate_runtime_settings()


class TestFactories:
    def test_env_config_store_by_default(self) -> None:
        assert isinstance(create_config_store(), EnvSecretProvider)

    def test_gcp_config_store(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ISSUER_CONFIG_BACKEND", "gcp")
        monkeypatch.setenv("GCP_PROJECT", "p-123")
        get_issuer_settings.cache_clear()
        get_base_settings.cache_clear()

        assert isinstance(create_config_store(), GCPSecretProvider)

    def test_memory_row_store_has_required_capacity(self) -> None:
        store = create_row_store()
        assert isinstance(store, MemoryRowStore)
        assert store.column_capacity() == 8

    def test_use_case_is_wired(self) -> None:
        assert isinstance(create_issue_token_use_case(), IssueTokenUseCase)
