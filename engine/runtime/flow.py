"""Generic state-flow transition executor."""

from __future__ import annotations

import logging

from engine.api.flow import FlowContext, FlowPayload, FlowTransition, InvalidTransitionError

logger = logging.getLogger(__name__)


class RuntimeFlowMachine[TState]:
    """Deterministic transition table executor with visited-state history."""

    def __init__(self, initial_state: TState) -> None:
        self._state = initial_state
        self._transitions: list[FlowTransition[TState]] = []
        self._history: list[TState] = [initial_state]

    @property
    def state(self) -> TState:
        return self._state

    @property
    def history(self) -> tuple[TState, ...]:
        return tuple(self._history)

    def add_transition(self, transition: FlowTransition[TState]) -> None:
        """Register one transition."""
        self._transitions.append(transition)

    def trigger(self, event: str, *, payload: FlowPayload | None = None) -> bool:
        """Execute first matching transition. Returns whether a transition fired."""
        source_state = self._state
        for transition in self._transitions:
            if transition.trigger != event:
                continue
            if transition.source is not None and transition.source != source_state:
                continue
            context = FlowContext(
                trigger=event,
                source=source_state,
                target=transition.target,
                payload=payload,
            )
            if transition.guard is not None and not transition.guard(context):
                continue
            if transition.before is not None:
                transition.before(context)
            self._state = transition.target
            self._history.append(transition.target)
            logger.debug("flow_transition trigger=%s %s->%s", event, source_state, self._state)
            if transition.after is not None:
                transition.after(context)
            return True
        return False

    def require(self, event: str, *, payload: FlowPayload | None = None) -> TState:
        """Execute a transition that must exist from the current state."""
        if not self.trigger(event, payload=payload):
            raise InvalidTransitionError(f"No transition for '{event}' from {self._state}.")
        return self._state


FlowMachine = RuntimeFlowMachine
