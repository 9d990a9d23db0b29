"""Testes do endpoint POST /forms/submissions."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from app.bootstrap import get_issue_token_use_case
from app.infra.stores import MemoryRowStore
from app.use_cases import IssueTokenUseCase
from config.settings import ColumnLayout, IssuerSettings
from tests.fakes.fake_collaborators import (
    DEFAULT_CONFIG_VALUES,
    FakeConfigStore,
    FakeIssuanceClient,
    FakeMailer,
)

NOW = datetime(2026, 10, 19, 15, 30, 45, tzinfo=UTC)


def _client(use_case: IssueTokenUseCase) -> TestClient:
    app = FastAPI()
    app.include_router(create_api_router())
    app.dependency_overrides[get_issue_token_use_case] = lambda: use_case
    return TestClient(app)


def _use_case(
    *,
    store: MemoryRowStore,
    mailer: FakeMailer,
    config_values: dict[str, str] | None = None,
    client: FakeIssuanceClient | None = None,
) -> IssueTokenUseCase:
    return IssueTokenUseCase(
        config_store=FakeConfigStore(config_values),
        row_store=store,
        issuance_client=client or FakeIssuanceClient(),
        mailer=mailer,
        issuer_settings=IssuerSettings(),
        columns=ColumnLayout(),
        clock=lambda: NOW,
    )


class TestSubmitForm:
    def test_successful_submission(self) -> None:
        store = MemoryRowStore()
        mailer = FakeMailer()
        client = _client(_use_case(store=store, mailer=mailer))

        response = client.post(
            "/forms/submissions",
            json={
                "row": 4,
                "respondent_email": "a.b@example.com",
                "named_values": {"有効期限": ["90日"]},
            },
            headers={"x-correlation-id": "corr-abc"},
        )

        assert response.status_code == 200
        assert response.headers["x-correlation-id"] == "corr-abc"
        payload = response.json()
        assert payload["correlation_id"] == "corr-abc"
        assert payload["success"] is True
        assert payload["final_state"] == "RECORDED"
        assert payload["credential_name"] == "a.b-20261019153045"
        assert payload["expires_at"] == "2027-01-17T00:00:00Z"
        assert "glc_secret_value_xyz" not in response.text
        assert store.read_cell(4, 5) == "成功"
        assert [message.to for message in mailer.sent] == ["a.b@example.com"]

    def test_failed_submission_is_still_200(self) -> None:
        store = MemoryRowStore()
        client = _client(_use_case(store=store, mailer=FakeMailer()))

        response = client.post("/forms/submissions", json={"row": 2})

        assert response.status_code == 200
        payload = response.json()
        assert payload["success"] is False
        assert payload["failure_kind"] == "identity"
        assert payload["admin_notified"] is True
        assert payload["correlation_id"]
        assert store.read_cell(2, 5) == "失敗"

    def test_missing_configuration_returns_500(self) -> None:
        values = {key: value for key, value in DEFAULT_CONFIG_VALUES.items() if key != "ACCESS_POLICY_ID"}
        store = MemoryRowStore()
        mailer = FakeMailer()
        client = _client(_use_case(store=store, mailer=mailer, config_values=values))

        response = client.post(
            "/forms/submissions",
            json={"row": 2, "respondent_email": "a.b@example.com"},
        )

        assert response.status_code == 500
        payload = response.json()
        assert payload["error"] == "configuration_error"
        assert payload["missing_keys"] == ["ACCESS_POLICY_ID"]
        assert store.row(2) == {}
        assert mailer.attempts == []

    @pytest.mark.parametrize("body", [{"row": 0}, {"named_values": {}}, {"row": "x"}])
    def test_invalid_payload_returns_422(self, body: dict[str, object]) -> None:
        client = _client(_use_case(store=MemoryRowStore(), mailer=FakeMailer()))

        response = client.post("/forms/submissions", json=body)

        assert response.status_code == 422
