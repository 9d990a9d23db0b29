"""Fakes in-memory dos colaboradores do fluxo de emissão.

Mantêm estado local para validar o que foi enviado/emitido sem rede.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from app.domain.configuration import Configuration
from app.domain.credential import CredentialRequest, IssuedCredential
from app.protocols.mailer import MailDeliveryError, OutgoingEmail
from app.protocols.row_store import RowStoreError

DEFAULT_CONFIG_VALUES: dict[str, str] = {
    "API_KEY": "glc_test_api_key",
    "ACCESS_POLICY_ID": "policy-123",
    "REGION": "prod-ap-northeast-0",
    "SUCCESS_EMAIL_FROM": "noreply@example.com",
    "SUCCESS_EMAIL_NAME": "Grafana 管理者",
    "ADMIN_EMAIL": "admin@example.com",
}


class FakeConfigStore:
    """Config store sobre um dict; registra as chaves lidas."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(DEFAULT_CONFIG_VALUES if values is None else values)
        self.reads: list[str] = []

    def get(self, key: str, default: str | None = None) -> str | None:
        self.reads.append(key)
        return self._values.get(key, default)


class FakeMailer:
    """Mailer que guarda as mensagens; pode falhar sob demanda."""

    def __init__(self, *, fail_for: set[str] | None = None) -> None:
        self.sent: list[OutgoingEmail] = []
        self.attempts: list[OutgoingEmail] = []
        self._fail_for = fail_for or set()

    def send(self, message: OutgoingEmail) -> None:
        self.attempts.append(message)
        if message.to in self._fail_for or "*" in self._fail_for:
            raise MailDeliveryError(f"mailbox unavailable: {message.to}")
        self.sent.append(message)

    def sent_to(self, address: str) -> list[OutgoingEmail]:
        return [message for message in self.sent if message.to == address]


@dataclass
class FakeIssuanceClient:
    """Cliente de emissão: devolve credencial fixa ou levanta `error`."""

    secret_value: str = "glc_secret_value_xyz"
    error: Exception | None = None
    calls: list[tuple[Configuration, CredentialRequest]] = field(default_factory=list)

    def issue(self, config: Configuration, request: CredentialRequest) -> IssuedCredential:
        self.calls.append((config, request))
        if self.error is not None:
            raise self.error
        return IssuedCredential(
            name=request.name,
            secret_value=self.secret_value,
            expires_at=request.expires_at,
        )


class FailingRowStore:
    """Row store cujas escritas sempre falham."""

    def __init__(self, column_count: int = 8, cells: Mapping[tuple[int, int], str] | None = None) -> None:
        self._column_count = column_count
        self._cells = dict(cells or {})
        self.write_attempts = 0

    @property
    def location(self) -> str:
        return "failing-store"

    def column_capacity(self) -> int:
        return self._column_count

    def read_cell(self, row: int, column: int) -> str:
        return self._cells.get((row, column), "")

    def write_cells(self, row: int, values: Mapping[int, str]) -> None:
        self.write_attempts += 1
        raise RowStoreError("quota exceeded")
