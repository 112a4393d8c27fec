"""Public flow/state-machine API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

type FlowPayload = object


@dataclass(frozen=True, slots=True)
class FlowContext[TState]:
    """Transition execution context."""

    trigger: str
    source: TState
    target: TState
    payload: FlowPayload | None = None


type TransitionGuard[TState] = Callable[[FlowContext[TState]], bool]
type TransitionHook[TState] = Callable[[FlowContext[TState]], None]


@dataclass(frozen=True, slots=True)
class FlowTransition[TState]:
    """Public transition definition."""

    trigger: str
    source: TState | None
    target: TState
    guard: TransitionGuard[TState] | None = None
    before: TransitionHook[TState] | None = None
    after: TransitionHook[TState] | None = None


class InvalidTransitionError(RuntimeError):
    """Raised when a required transition does not match the current state."""


class FlowMachine[TState](Protocol):
    """Public flow-machine contract."""

    @property
    def state(self) -> TState:
        """Return current state."""

    @property
    def history(self) -> tuple[TState, ...]:
        """Return every state entered, starting with the initial one."""

    def add_transition(self, transition: FlowTransition[TState]) -> None:
        """Register one transition."""

    def trigger(self, event: str, *, payload: FlowPayload | None = None) -> bool:
        """Execute first matching transition."""

    def require(self, event: str, *, payload: FlowPayload | None = None) -> TState:
        """Execute a transition that must match, raising otherwise."""


def create_flow_machine[TState](
    initial_state: TState,
    transitions: tuple[FlowTransition[TState], ...] = (),
) -> FlowMachine[TState]:
    """Create default engine flow-machine implementation."""
    from engine.runtime.flow import RuntimeFlowMachine

    machine = RuntimeFlowMachine(initial_state)
    for transition in transitions:
        machine.add_transition(transition)
    return machine
