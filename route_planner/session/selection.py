"""
Start/goal picker state machine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SelectionState(str, Enum):
    EMPTY = "empty"
    START_ONLY = "start_only"
    COMPLETE = "complete"


@dataclass
class Selection:
    """
    The two nodes chosen for the next route query.

    Transitions on choose(node):
        EMPTY                        -> START_ONLY (start = node)
        START_ONLY, node != start    -> COMPLETE (goal = node)
        START_ONLY, node == start    -> EMPTY
        COMPLETE, node == start      -> EMPTY
        COMPLETE, node != start      -> START_ONLY (start = node, goal dropped)

    Choosing the current start always deselects, whatever the state.

    Attributes:
        start: Chosen start node id, if any
        goal: Chosen goal node id, if any
    """

    start: str | None = None
    goal: str | None = None

    @property
    def state(self) -> SelectionState:
        if self.start is None:
            return SelectionState.EMPTY
        if self.goal is None:
            return SelectionState.START_ONLY
        return SelectionState.COMPLETE

    @property
    def is_complete(self) -> bool:
        return self.state is SelectionState.COMPLETE

    def choose(self, node_id: str) -> SelectionState:
        """Apply one selection event and return the new state."""
        state = self.state

        if state is SelectionState.EMPTY:
            self.start = node_id
        elif node_id == self.start:
            self.clear()
        elif state is SelectionState.START_ONLY:
            self.goal = node_id
        else:
            self.start = node_id
            self.goal = None

        return self.state

    def clear(self) -> None:
        self.start = None
        self.goal = None
