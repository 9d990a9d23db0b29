"""
Exports públicos do módulo fsm/states.

Estados do fluxo de emissão de tokens.
"""

from fsm.states.issuance import (
    DEFAULT_INITIAL_STATE,
    FINAL_STATES,
    TERMINAL_STATES,
    IssuanceState,
    is_final,
    is_terminal,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "FINAL_STATES",
    "TERMINAL_STATES",
    "IssuanceState",
    "is_final",
    "is_terminal",
    "is_valid_state",
]
