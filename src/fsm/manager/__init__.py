"""
Exports públicos do módulo fsm/manager.

Máquina de estados (IssuanceStateMachine) do fluxo de emissão.
"""

from fsm.manager.machine import (
    IssuanceStateMachine,
    create_fsm,
)

__all__ = [
    "IssuanceStateMachine",
    "create_fsm",
]
