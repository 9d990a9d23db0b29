"""
Módulo FSM: Máquina de estados do fluxo de emissão de tokens.

Governa as etapas de uma invocação: resolução de identidade e expiração,
emissão, notificação e registro do resultado.

Estrutura:
    - states/: Definições dos estados (IssuanceState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - rules/: Guards
    - manager/: Máquina de estados (IssuanceStateMachine)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

# Manager
from fsm.manager import (
    IssuanceStateMachine,
    create_fsm,
)

# Guards
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)

# Estados
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    FINAL_STATES,
    TERMINAL_STATES,
    IssuanceState,
    is_final,
    is_terminal,
    is_valid_state,
)

# Transições
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)

# Types
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "FINAL_STATES",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "GuardResult",
    "IssuanceState",
    "IssuanceStateMachine",
    "StateTransition",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_final",
    "is_terminal",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
