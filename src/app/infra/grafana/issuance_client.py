"""Cliente HTTP da API de tokens Grafana Cloud.

Comportamento:
- POST {endpoint}?region={region} com Bearer token e corpo JSON
- Nunca levanta por status HTTP: o status é inspecionado explicitamente
- 2xx → IssuedCredential (ou ResponseParseError)
- não-2xx → ApiError com mensagem extraída do corpo
- falha de rede/timeout antes da resposta → TransportError
- Uma única tentativa: retry poderia emitir um segundo token
- Logging sem api key e sem a chave do token emitido
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from app.domain.errors import ApiError, TransportError
from app.infra.grafana.api_errors import extract_error_detail, parse_issued_credential
from config.settings.issuer import GRAFANA_CLOUD_API_ENDPOINT

if TYPE_CHECKING:
    from app.domain.configuration import Configuration
    from app.domain.credential import CredentialRequest, IssuedCredential
    from config.settings import IssuerSettings

logger = logging.getLogger(__name__)


def build_headers(api_key: str) -> dict[str, str]:
    """Headers da chamada de emissão.

    Raises:
        ValueError: Se api_key estiver vazia.
    """
    if not api_key or not api_key.strip():
        raise ValueError("api_key não pode ser vazia")
    return {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


class GrafanaIssuanceClient:
    """Implementa IssuanceClientProtocol sobre httpx (síncrono).

    Args:
        endpoint: URL do endpoint de tokens; query string é descartada
        timeout_seconds: Timeout total da requisição
        http_client: Cliente httpx opcional (testes injetam MockTransport)
    """

    def __init__(
        self,
        *,
        endpoint: str = GRAFANA_CLOUD_API_ENDPOINT,
        timeout_seconds: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._endpoint = endpoint.split("?", 1)[0]
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def issue(self, config: Configuration, request: CredentialRequest) -> IssuedCredential:
        """Emite um token para `request` sob a access policy configurada.

        Raises:
            TransportError: Falha de conexão/DNS/timeout.
            ApiError: Status não-2xx.
            ResponseParseError: Corpo 2xx inválido.
        """
        headers = build_headers(config.api_key)
        params = {"region": config.region}
        logger.info(
            "issuance_request",
            extra={
                "endpoint": self._endpoint,
                "region": config.region,
                "credential_name": request.name,
                "expires_at": request.expires_at,
            },
        )

        try:
            response = self._post(params=params, headers=headers, payload=request.to_payload())
        except httpx.TransportError as exc:
            logger.error(
                "issuance_transport_error",
                extra={"endpoint": self._endpoint, "error_type": type(exc).__name__},
            )
            raise TransportError(exc) from exc

        logger.info(
            "issuance_response",
            extra={"endpoint": self._endpoint, "status_code": response.status_code},
        )

        if response.is_success:
            return parse_issued_credential(response.text, request)

        detail = extract_error_detail(response.text)
        logger.warning(
            "issuance_api_error",
            extra={"status_code": response.status_code, "detail": detail},
        )
        raise ApiError(response.status_code, detail)

    def _post(
        self,
        *,
        params: dict[str, str],
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(
                self._endpoint,
                params=params,
                headers=headers,
                json=payload,
                timeout=self._timeout_seconds,
            )
        with httpx.Client(timeout=self._timeout_seconds) as client:
            return client.post(self._endpoint, params=params, headers=headers, json=payload)


def create_issuance_client(settings: IssuerSettings | None = None) -> GrafanaIssuanceClient:
    """Factory do cliente com settings do ambiente.

    Args:
        settings: IssuerSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_issuer_settings

    issuer = settings or get_issuer_settings()
    return GrafanaIssuanceClient(
        endpoint=issuer.api_endpoint,
        timeout_seconds=issuer.request_timeout_seconds,
    )
