"""
Regras de transição válidas entre estados do fluxo de emissão.

Qualquer etapa até ISSUED pode falhar; após ISSUED só a notificação de
sucesso pode desviar para FAILED (o token já existe no provedor).
"""

from fsm.states.issuance import TERMINAL_STATES, IssuanceState

TransitionMap = dict[IssuanceState, frozenset[IssuanceState]]

VALID_TRANSITIONS: TransitionMap = {
    IssuanceState.RECEIVED: frozenset({
        IssuanceState.IDENTITY_RESOLVED,
        IssuanceState.FAILED,
    }),
    IssuanceState.IDENTITY_RESOLVED: frozenset({
        IssuanceState.EXPIRATION_RESOLVED,
        IssuanceState.FAILED,
    }),
    IssuanceState.EXPIRATION_RESOLVED: frozenset({
        IssuanceState.CREDENTIAL_BUILT,
        IssuanceState.FAILED,
    }),
    IssuanceState.CREDENTIAL_BUILT: frozenset({
        IssuanceState.ISSUED,
        IssuanceState.FAILED,
    }),
    # Falha no e-mail de sucesso: token órfão, registrado como falha
    IssuanceState.ISSUED: frozenset({
        IssuanceState.NOTIFIED_SUCCESS,
        IssuanceState.FAILED,
    }),
    # Registro nunca levanta: não há desvio após a notificação
    IssuanceState.NOTIFIED_SUCCESS: frozenset({
        IssuanceState.RECORDED,
    }),
    IssuanceState.FAILED: frozenset({
        IssuanceState.RECORDED_FAILURE,
    }),
    IssuanceState.RECORDED_FAILURE: frozenset({
        IssuanceState.ADMIN_NOTIFIED,
    }),

    IssuanceState.RECORDED: frozenset(),
    IssuanceState.ADMIN_NOTIFIED: frozenset(),
}


def get_valid_targets(state: IssuanceState) -> frozenset[IssuanceState]:
    """
    Retorna os estados de destino válidos para um estado de origem.

    Args:
        state: Estado de origem

    Returns:
        Conjunto de estados de destino permitidos (vazio se terminal)
    """
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: IssuanceState, to_state: IssuanceState) -> bool:
    """Verifica se uma transição é permitida pelo mapa."""
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Todo estado não-terminal tem ao menos uma saída

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in IssuanceState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state, targets in VALID_TRANSITIONS.items():
        if state in TERMINAL_STATES and targets:
            errors.append(f"Estado terminal {state.name} não deveria ter transições: {targets}")
        if state not in TERMINAL_STATES and not targets:
            errors.append(f"Estado {state.name} sem transições de saída")

    return errors
