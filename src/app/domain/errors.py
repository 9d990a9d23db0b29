"""Hierarquia de erros do fluxo de emissão de tokens.

Cada erro carrega um `kind` (FailureKind) usado pelo use case para
converter exceções de estágio em um WorkflowFailure explícito.
As mensagens são exibidas na planilha e no alerta ao administrador.
"""

from __future__ import annotations

from enum import StrEnum


class FailureKind(StrEnum):
    """Classificação de falhas do pipeline."""

    CONFIGURATION = "configuration"
    IDENTITY = "identity"
    TRANSPORT = "transport"
    API = "api"
    RESPONSE_PARSE = "response_parse"
    NOTIFICATION = "notification"
    UNEXPECTED = "unexpected"

    def __str__(self) -> str:
        return self.value


class TokenIssuerError(Exception):
    """Erro base do emissor de tokens."""

    kind: FailureKind = FailureKind.UNEXPECTED


class ConfigurationError(TokenIssuerError):
    """Chave obrigatória ausente no config store.

    Fatal: aborta o fluxo antes de qualquer efeito colateral.
    """

    kind = FailureKind.CONFIGURATION

    def __init__(self, missing_keys: list[str]) -> None:
        self.missing_keys = list(missing_keys)
        joined = ", ".join(f"'{key}'" for key in self.missing_keys)
        super().__init__(f"設定プロパティ {joined} が設定されていません。")


class IdentityError(TokenIssuerError):
    """Nenhum candidato a e-mail do solicitante passou na validação.

    Attributes:
        candidate: Primeiro valor não vazio encontrado (inválido), se houver.
    """

    kind = FailureKind.IDENTITY

    def __init__(self, candidate: str | None = None) -> None:
        self.candidate = candidate
        super().__init__("有効な申請者メールアドレスを取得できませんでした。")


class TransportError(TokenIssuerError):
    """Falha de rede antes de qualquer resposta da API de emissão."""

    kind = FailureKind.TRANSPORT

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Grafana API への接続に失敗しました: {cause}")


class ApiError(TokenIssuerError):
    """Resposta não-2xx da API de emissão.

    Attributes:
        status_code: Status HTTP retornado.
        detail: Mensagem extraída de `message`/`error` ou corpo bruto.
    """

    kind = FailureKind.API

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Grafana APIエラー (HTTP {status_code}): {detail}")


class ResponseParseError(TokenIssuerError):
    """Resposta 2xx com corpo que não representa um token emitido."""

    kind = FailureKind.RESPONSE_PARSE

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        message = "Grafana APIからの成功応答の解析に失敗しました。"
        super().__init__(f"{message} ({reason})" if reason else message)


class NotificationError(TokenIssuerError):
    """Falha ao enviar o e-mail de sucesso ao solicitante."""

    kind = FailureKind.NOTIFICATION

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"成功通知メールの送信に失敗しました: {cause}")


__all__ = [
    "ApiError",
    "ConfigurationError",
    "FailureKind",
    "IdentityError",
    "NotificationError",
    "ResponseParseError",
    "TokenIssuerError",
    "TransportError",
]
