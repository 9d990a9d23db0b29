"""Endpoint de submissões do formulário de solicitação de token.

Endpoints:
- POST /forms/submissions: processa uma submissão (uma linha da planilha)

O gatilho do formulário (ou um job de reprocessamento) envia a linha e,
quando disponíveis, o e-mail coletado e as respostas por pergunta.
O fluxo síncrono roda em worker thread para não bloquear o event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.bootstrap import get_issue_token_use_case
from app.domain.errors import ConfigurationError
from app.domain.submission import SubmissionEvent
from app.observability import correlation_scope
from app.use_cases import IssueTokenUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

CORRELATION_HEADER = "x-correlation-id"


class FormSubmissionPayload(BaseModel):
    """Corpo da submissão."""

    row: int = Field(..., ge=1, description="Linha (1-based) da resposta na planilha.")
    respondent_email: str | None = Field(
        default=None,
        description="E-mail coletado automaticamente pelo formulário.",
    )
    named_values: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Respostas por pergunta (nome -> valores).",
    )

    def to_event(self) -> SubmissionEvent:
        email = self.respondent_email
        return SubmissionEvent(
            row=self.row,
            respondent_email=(lambda: email) if email is not None else None,
            named_values=self.named_values,
        )


class SubmissionResponse(BaseModel):
    """Resumo do processamento (nunca contém a chave do token)."""

    correlation_id: str
    row: int
    success: bool
    final_state: str
    credential_name: str = ""
    expires_at: str = ""
    failure_kind: str | None = None
    failure_message: str | None = None
    admin_notified: bool = False


@router.post("/submissions", response_model=SubmissionResponse)
async def submit_form(
    payload: FormSubmissionPayload,
    request: Request,
    use_case: IssueTokenUseCase = Depends(get_issue_token_use_case),
) -> Any:
    """Processa uma submissão e devolve o resultado registrado.

    Returns:
        200 com o resumo (sucesso ou falha registrada na planilha),
        500 se a configuração obrigatória estiver ausente.
    """
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        logger.info("form_submission_received", extra={"row": payload.row})
        try:
            result = await asyncio.to_thread(use_case.execute, payload.to_event())
        except ConfigurationError as exc:
            logger.error(
                "form_submission_rejected",
                extra={"row": payload.row, "missing_keys": exc.missing_keys},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "correlation_id": correlation_id,
                    "error": "configuration_error",
                    "missing_keys": exc.missing_keys,
                },
                headers={CORRELATION_HEADER: correlation_id},
            )

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=SubmissionResponse(correlation_id=correlation_id, **result.to_dict()).model_dump(),
            headers={CORRELATION_HEADER: correlation_id},
        )
