"""Casos de uso do emissor de tokens."""

from app.use_cases.issue_token import (
    IssuancePreview,
    IssuanceResult,
    IssueTokenUseCase,
    WorkflowFailure,
)

__all__ = [
    "IssuancePreview",
    "IssuanceResult",
    "IssueTokenUseCase",
    "WorkflowFailure",
]
