"""Use case de emissão de token a partir de uma submissão de formulário.

Fluxo por evento:
1. Carrega Configuration (ConfigurationError aborta sem efeitos)
2. Resolve identidade, expiração e nome do token
3. Emite o token (uma única tentativa)
4. Sucesso: e-mail ao solicitante, depois registro na linha
5. Falha: registro na linha, depois alerta ao administrador

Exceções de estágio viram um WorkflowFailure explícito; o resultado da
invocação é sempre um IssuanceResult.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.configuration import load_configuration
from app.domain.credential import CredentialRequest
from app.domain.errors import FailureKind, IdentityError, NotificationError, TokenIssuerError
from app.domain.outcome import RowOutcome
from app.protocols.row_store import RowStoreError
from app.services.credential_name import generate_credential_name
from app.services.expiration_resolver import resolve_expiration
from app.services.identity_extractor import IdentityExtractor
from app.services.notifier import Notifier
from app.services.outcome_recorder import OutcomeRecorder
from fsm import IssuanceState, IssuanceStateMachine, create_fsm

if TYPE_CHECKING:
    from app.domain.configuration import Configuration
    from app.domain.credential import IssuedCredential
    from app.domain.submission import SubmissionEvent
    from app.protocols.config_store import ConfigStoreProtocol
    from app.protocols.issuance_client import IssuanceClientProtocol
    from app.protocols.mailer import MailerProtocol
    from app.protocols.row_store import RowStoreProtocol
    from config.settings import IssuerSettings
    from config.settings.sheets import ColumnLayout

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class WorkflowFailure:
    """Falha de estágio convertida em valor."""

    kind: FailureKind
    message: str
    error: BaseException = field(repr=False, compare=False)

    @classmethod
    def from_exception(cls, error: BaseException) -> WorkflowFailure:
        if isinstance(error, TokenIssuerError):
            return cls(kind=error.kind, message=str(error), error=error)
        message = str(error) or type(error).__name__
        return cls(kind=FailureKind.UNEXPECTED, message=message, error=error)


@dataclass(frozen=True, slots=True)
class IssuancePreview:
    """Valores resolvidos sem chamar a API (modo dry-run)."""

    identity: str
    expires_at: str
    credential_name: str


@dataclass(frozen=True, slots=True)
class IssuanceResult:
    """Resultado de uma invocação."""

    row: int
    success: bool
    final_state: IssuanceState
    credential_name: str = ""
    expires_at: str = ""
    failure: WorkflowFailure | None = None
    admin_notified: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Resumo seguro para respostas HTTP e logs (sem segredo)."""
        return {
            "row": self.row,
            "success": self.success,
            "final_state": str(self.final_state),
            "credential_name": self.credential_name,
            "expires_at": self.expires_at,
            "failure_kind": str(self.failure.kind) if self.failure else None,
            "failure_message": self.failure.message if self.failure else None,
            "admin_notified": self.admin_notified,
        }


class IssueTokenUseCase:
    """Orquestra uma submissão do início ao registro do resultado."""

    def __init__(
        self,
        *,
        config_store: ConfigStoreProtocol,
        row_store: RowStoreProtocol,
        issuance_client: IssuanceClientProtocol,
        mailer: MailerProtocol,
        issuer_settings: IssuerSettings,
        columns: ColumnLayout,
        clock: Clock = utc_now,
    ) -> None:
        self._config_store = config_store
        self._row_store = row_store
        self._issuance_client = issuance_client
        self._settings = issuer_settings
        self._columns = columns
        self._clock = clock
        self._identity_extractor = IdentityExtractor.default(
            row_store,
            field_name=issuer_settings.identity_field_name,
            email_column=columns.email,
        )
        self._recorder = OutcomeRecorder(row_store, columns)
        self._notifier = Notifier(mailer)

    def execute(self, event: SubmissionEvent) -> IssuanceResult:
        """Processa um evento de submissão.

        Raises:
            ConfigurationError: Chave obrigatória ausente no config store;
                nada é gravado nem enviado.
        """
        config = load_configuration(self._config_store)
        fsm = create_fsm(event.row)
        now = self._clock()
        logger.info("issuance_started", extra={"row": event.row})

        identity: str | None = None
        try:
            identity = self._identity_extractor.extract(event)
            fsm.advance(IssuanceState.IDENTITY_RESOLVED, "identity_extracted")

            expires_at = self._resolve_expires_at(event, now)
            fsm.advance(IssuanceState.EXPIRATION_RESOLVED, "expiration_resolved")

            request = CredentialRequest(
                name=self._credential_name(identity, now),
                expires_at=expires_at,
                access_policy_id=config.access_policy_id,
            )
            fsm.advance(IssuanceState.CREDENTIAL_BUILT, "request_built", {"credential_name": request.name})

            credential = self._issuance_client.issue(config, request)
            fsm.advance(IssuanceState.ISSUED, "credential_issued", {"credential_name": credential.name})

            self._notify_success(identity, credential, config, event.row)
            fsm.advance(IssuanceState.NOTIFIED_SUCCESS, "success_email_sent")
        except Exception as exc:
            return self._fail(fsm, event, config, WorkflowFailure.from_exception(exc), identity)

        self._recorder.record(event.row, RowOutcome.success(credential.name, credential.expires_at))
        fsm.advance(IssuanceState.RECORDED, "outcome_recorded")
        logger.info(
            "issuance_completed",
            extra={
                "row": event.row,
                "credential_name": credential.name,
                "expires_at": credential.expires_at,
                "transitions": fsm.get_history_summary(),
            },
        )
        return IssuanceResult(
            row=event.row,
            success=True,
            final_state=fsm.current_state,
            credential_name=credential.name,
            expires_at=credential.expires_at,
        )

    def preview(self, event: SubmissionEvent) -> IssuancePreview:
        """Resolve identidade, expiração e nome sem efeitos externos.

        Raises:
            IdentityError: Nenhum e-mail válido no evento.
        """
        now = self._clock()
        identity = self._identity_extractor.extract(event)
        return IssuancePreview(
            identity=identity,
            expires_at=self._resolve_expires_at(event, now),
            credential_name=self._credential_name(identity, now),
        )

    def _resolve_expires_at(self, event: SubmissionEvent, now: datetime) -> str:
        text = self._read_expiration_text(event)
        return resolve_expiration(text, self._settings.default_expiration_days, now)

    def _read_expiration_text(self, event: SubmissionEvent) -> str | None:
        value = event.named_value(self._settings.expiration_field_name)
        if value:
            return value
        column = self._columns.expiration
        try:
            if self._row_store.column_capacity() < column:
                return None
            return self._row_store.read_cell(event.row, column)
        except RowStoreError as exc:
            logger.warning(
                "expiration_cell_unreadable",
                extra={"row": event.row, "column": column, "error_type": type(exc).__name__},
            )
            return None

    def _credential_name(self, identity: str, now: datetime) -> str:
        return generate_credential_name(identity, now.astimezone(self._settings.zone))

    def _notify_success(
        self,
        identity: str,
        credential: IssuedCredential,
        config: Configuration,
        row: int,
    ) -> None:
        try:
            self._notifier.notify_success(identity, credential, config)
        except NotificationError:
            # Token já existe no provedor e a chave não é recuperável
            logger.warning(
                "orphaned_credential",
                extra={
                    "row": row,
                    "credential_name": credential.name,
                    "expires_at": credential.expires_at,
                },
            )
            raise

    def _fail(
        self,
        fsm: IssuanceStateMachine,
        event: SubmissionEvent,
        config: Configuration,
        failure: WorkflowFailure,
        identity: str | None,
    ) -> IssuanceResult:
        unexpected = failure.kind == FailureKind.UNEXPECTED
        logger.error(
            "issuance_failed",
            extra={"row": event.row, "failure_kind": str(failure.kind), "state": str(fsm.current_state)},
            exc_info=failure.error if unexpected else None,
        )
        fsm.advance(IssuanceState.FAILED, f"{failure.kind}_failure")

        self._recorder.record(event.row, RowOutcome.failure(failure.message))
        fsm.advance(IssuanceState.RECORDED_FAILURE, "outcome_recorded")

        requester = identity
        if requester is None and isinstance(failure.error, IdentityError):
            requester = failure.error.candidate

        admin_notified = self._notifier.notify_failure(
            config.admin_email,
            failure.error,
            requester,
            event.row,
            occurred_at=self._clock(),
            location=self._row_store.location,
        )
        if admin_notified:
            fsm.advance(IssuanceState.ADMIN_NOTIFIED, "admin_alert_sent")

        return IssuanceResult(
            row=event.row,
            success=False,
            final_state=fsm.current_state,
            failure=failure,
            admin_notified=admin_notified,
        )
