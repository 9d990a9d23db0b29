"""
Estados do fluxo de emissão de um token.

Cada submissão percorre um caminho determinístico: caminho feliz até
RECORDED, ou desvio para FAILED seguido de registro e alerta.
"""

from enum import StrEnum


class IssuanceState(StrEnum):
    """
    Estados de uma invocação do fluxo de emissão.

    Caminho feliz:
        RECEIVED → IDENTITY_RESOLVED → EXPIRATION_RESOLVED →
        CREDENTIAL_BUILT → ISSUED → NOTIFIED_SUCCESS → RECORDED

    Caminho de falha:
        (qualquer estado até ISSUED) → FAILED → RECORDED_FAILURE →
        ADMIN_NOTIFIED

    RECORDED_FAILURE é final quando não há administrador configurado ou
    o alerta não pôde ser enviado.
    """

    RECEIVED = "RECEIVED"
    IDENTITY_RESOLVED = "IDENTITY_RESOLVED"
    EXPIRATION_RESOLVED = "EXPIRATION_RESOLVED"
    CREDENTIAL_BUILT = "CREDENTIAL_BUILT"
    ISSUED = "ISSUED"
    NOTIFIED_SUCCESS = "NOTIFIED_SUCCESS"
    RECORDED = "RECORDED"

    FAILED = "FAILED"
    RECORDED_FAILURE = "RECORDED_FAILURE"
    ADMIN_NOTIFIED = "ADMIN_NOTIFIED"

    def __str__(self) -> str:
        return self.value


# Estados sem nenhuma saída
TERMINAL_STATES: frozenset[IssuanceState] = frozenset({
    IssuanceState.RECORDED,
    IssuanceState.ADMIN_NOTIFIED,
})

# Estados em que uma invocação pode legitimamente terminar
FINAL_STATES: frozenset[IssuanceState] = TERMINAL_STATES | {IssuanceState.RECORDED_FAILURE}

DEFAULT_INITIAL_STATE: IssuanceState = IssuanceState.RECEIVED


def is_terminal(state: IssuanceState) -> bool:
    """Verifica se o estado não admite transições."""
    return state in TERMINAL_STATES


def is_final(state: IssuanceState) -> bool:
    """Verifica se a invocação pode encerrar neste estado."""
    return state in FINAL_STATES


def is_valid_state(state: IssuanceState) -> bool:
    """Verifica se o valor é um IssuanceState válido."""
    return isinstance(state, IssuanceState)
