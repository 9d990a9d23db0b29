"""
Máquina de estados (IssuanceStateMachine) de uma invocação do fluxo.

Controla as transições permitidas e mantém o histórico para auditoria.
Uma instância por submissão; nada é compartilhado entre invocações.
"""

from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.issuance import (
    DEFAULT_INITIAL_STATE,
    IssuanceState,
    is_final,
    is_terminal,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class IssuanceStateMachine:
    """
    Máquina de estados do fluxo de emissão.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_history", "_row")

    def __init__(
        self,
        initial_state: IssuanceState | None = None,
        row: int = 0,
    ) -> None:
        """
        Inicializa a máquina de estados.

        Args:
            initial_state: Estado inicial (usa DEFAULT_INITIAL_STATE se None)
            row: Linha da submissão, para logs
        """
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._row = row

    @property
    def current_state(self) -> IssuanceState:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def row(self) -> int:
        return self._row

    @property
    def is_terminal(self) -> bool:
        """Verifica se está em estado terminal."""
        return is_terminal(self._current_state)

    @property
    def is_final(self) -> bool:
        """Verifica se a invocação pode encerrar no estado atual."""
        return is_final(self._current_state)

    def can_transition_to(self, target: IssuanceState) -> bool:
        """Verifica se pode transitar para o estado alvo."""
        if not is_transition_valid(self._current_state, target):
            return False
        return evaluate_guards(self._current_state, target).allowed

    def get_valid_targets(self) -> frozenset[IssuanceState]:
        """Retorna estados de destino válidos a partir do estado atual."""
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: IssuanceState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho (ex: 'identity_extracted')
            metadata: Dados adicionais para auditoria (nunca segredos)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_state, target)
        if not guard_result.allowed:
            return TransitionResult(
                success=False,
                error_reason=guard_result.reason,
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )

        self._current_state = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def advance(
        self,
        target: IssuanceState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> StateTransition:
        """
        Transita ou levanta se a transição for proibida.

        Raises:
            RuntimeError: Transição fora do grafo (erro de programação).
        """
        result = self.transition(target, trigger, metadata)
        if not result.success or result.transition is None:
            raise RuntimeError(result.error_reason)
        return result.transition

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        return {
            "row": self._row,
            "current_state": self._current_state.name,
            "is_final": self.is_final,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Retorna histórico em formato seguro para logs."""
        return [t.to_log_dict() for t in self._history]


def create_fsm(
    row: int,
    initial_state: IssuanceState | None = None,
) -> IssuanceStateMachine:
    """
    Factory function para criar uma FSM.

    Args:
        row: Linha da submissão
        initial_state: Estado inicial (opcional)
    """
    return IssuanceStateMachine(
        initial_state=initial_state,
        row=row,
    )
