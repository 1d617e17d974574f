"""Registry of states by identifier."""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

from .state import State

MAX_STATES = 10

_log = logging.getLogger(__name__)


class StateManager:
    """Keeps one state per identifier; identifiers run from 1 to MAX_STATES - 1."""

    _instance: ClassVar[Optional[StateManager]] = None

    def __init__(self) -> None:
        self._states: dict[int, State] = {}

    @classmethod
    def instance(cls) -> StateManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def release_instance(cls) -> None:
        """Drop the shared manager and every state it holds."""
        cls._instance = None

    @staticmethod
    def _valid(state_id: int) -> bool:
        return 1 <= state_id < MAX_STATES

    def register(self, state: State) -> None:
        """Add a state under its identifier, replacing any state already there."""
        if state is None:
            raise ValueError("cannot register no state")
        state_id = state.state_id
        if not self._valid(state_id):
            raise ValueError(
                f"state id {state_id} out of range 1..{MAX_STATES - 1}"
            )
        self._states[state_id] = state
        _log.info("add state : %s,%d", state.name, state_id)

    def get(self, state_id: int) -> Optional[State]:
        """Return the state with this identifier, or None."""
        if not self._valid(state_id):
            return None
        return self._states.get(state_id)

    def __len__(self) -> int:
        return len(self._states)