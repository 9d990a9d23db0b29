"""Integração com a API de tokens Grafana Cloud."""

from __future__ import annotations

from app.infra.grafana.issuance_client import GrafanaIssuanceClient, create_issuance_client

__all__ = ["GrafanaIssuanceClient", "create_issuance_client"]
