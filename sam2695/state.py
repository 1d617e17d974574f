"""States and the state machine that dispatches button events to them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Optional

from .events import EVENT_POOL_SIZE, Event, EventType

ErrorHandler = Callable[[int, str], None]

_log = logging.getLogger(__name__)


class State(ABC):
    """A mode of the device; subclasses set ``state_id`` and ``name``."""

    state_id: ClassVar[int]
    name: ClassVar[str]
    active: bool = False

    def on_enter(self) -> None:
        """Called when the machine enters this state; marks it active."""
        self.active = True
        _log.info("enter %s", self.name)

    def on_exit(self) -> None:
        """Called when the machine leaves this state; marks it inactive."""
        self.active = False
        _log.info("exit %s", self.name)

    @abstractmethod
    def handle_event(self, machine: StateMachine, event: Event) -> bool:
        """Process an event and tell whether it was handled."""


class StateMachine:
    """Holds the current state, forwards events to it and manages transitions."""

    def __init__(self) -> None:
        self.current_state: Optional[State] = None
        self.previous_state: Optional[State] = None
        self.error_state: Optional[State] = None
        self._error_handler: Optional[ErrorHandler] = None
        self._transitioning = False
        self.events = tuple(Event() for _ in range(EVENT_POOL_SIZE))
        self.reset()

    def init(self, initial_state: State, error_state: Optional[State] = None) -> None:
        """Start in ``initial_state``, remembering ``error_state`` for failures."""
        if initial_state is None:
            raise ValueError("an initial state is required")
        self.current_state = initial_state
        self.error_state = error_state
        initial_state.on_enter()

    def handle_event(self, event: Optional[Event]) -> bool:
        """Pass an event to the current state.

        Returns False when there is no state or event, or when called again
        while the current state is still handling an earlier event.
        """
        if self.current_state is None or event is None:
            return False
        if self._transitioning:
            return False
        self._transitioning = True
        try:
            return bool(self.current_state.handle_event(self, event))
        finally:
            self._transitioning = False

    def change_state(self, new_state: State) -> bool:
        """Leave the current state and enter ``new_state``.

        Returns False when ``new_state`` already is the current state.
        """
        if new_state is None:
            raise ValueError("cannot change to no state")
        if new_state is self.current_state:
            return False
        if self.current_state is not None:
            self.current_state.on_exit()
        self.previous_state = self.current_state
        self.current_state = new_state
        new_state.on_enter()
        return True

    def go_to_previous_state(self) -> bool:
        """Return to the state active before the last change, if there was one."""
        if self.previous_state is None:
            return False
        return self.change_state(self.previous_state)

    def set_error_handler(self, handler: Optional[ErrorHandler]) -> None:
        """Install a callback receiving an error code and message."""
        self._error_handler = handler

    def handle_error(self, code: int, message: str) -> None:
        """Report an error and switch to the error state if one is set."""
        if self._error_handler is not None:
            self._error_handler(code, message)
        if self.error_state is not None and self.current_state is not self.error_state:
            self.change_state(self.error_state)

    def acquire_event(self, event_type: EventType) -> Optional[Event]:
        """Take a free event from the pool, or None when all are in use."""
        for event in self.events:
            if not event.in_use:
                event.type = event_type
                event.in_use = True
                return event
        return None

    def recycle_event(self, event: Optional[Event]) -> None:
        """Return an event to the pool."""
        if event is not None:
            event.in_use = False

    def reset(self) -> None:
        """Free every pooled event and clear its type."""
        for event in self.events:
            event.type = EventType.NONE
            event.in_use = False