"""Finite state machine with validated transitions.

Used by the playback driver to keep its mode (idle, jittering, simulating)
consistent: every mode change goes through ``request_transition``, which
rejects transitions that are not in the graph and runs the effect attached
to the transition (e.g. clearing the jittered coordinate when jitter stops).
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

State = TypeVar("State", bound=Enum)
"""Type variable for state enumerations."""

ActionFn = Callable[..., Any]
"""Effect run when a transition is taken."""

StateGraph = dict[Enum, set["Action"]]
"""Mapping from a state to the actions allowed out of it."""


@dataclass(frozen=True)
class Action:
    """A transition into ``state`` with an optional side effect.

    Attributes:
        state: The target state this action transitions to.
        effect: Optional function executed when the action is taken.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        """Run the effect, if any, and return its result."""
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """A finite state machine that validates every transition.

    Attributes:
        _state: The current state.
        _allowed: Mapping from each state to the actions leaving it.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        """Create a machine in ``initial_state`` following ``nodes_graph``."""
        self._state = initial_state
        self._allowed = nodes_graph

    @property
    def current(self) -> Enum:
        """The current state."""
        return self._state

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the transition's effect.

        The state is updated before the effect runs, so effects observe the
        new state.

        Returns:
            Whatever the effect returns, or None.

        Raises:
            ValueError: If the transition is not in the graph.
        """
        next_action = self._validate_transition(self._state, next_state)
        self._state = next_action.state
        return next_action(*args, **kwargs)

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        for action in self._allowed.get(frm, set()):
            if action.state == to:
                return action

        msg = f"Illegal transition {frm.name} -> {to.name}"
        raise ValueError(msg)
