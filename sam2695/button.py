"""Debounced push-button reading with short-press, long-press and release detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

LOW = 0
HIGH = 1

DEBOUNCE_DELAY_MS = 50
LONG_PRESS_MS = 1000


class ButtonEvent(Enum):
    """What a button did during one poll."""

    SHORT_PRESS = "short_press"
    LONG_PRESS = "long_press"
    RELEASE = "release"


@dataclass
class ButtonState:
    """Debounce and timing state of one active-low button."""

    button_state: int = HIGH
    last_button_state: int = HIGH
    last_debounce_time: int = 0
    press_start_time: int = 0
    long_press_triggered: bool = False


class Button:
    """An active-low button polled through a level reader and a millisecond clock."""

    def __init__(self, read: Callable[[], int], clock: Callable[[], int]) -> None:
        self._read = read
        self._clock = clock
        self.state = ButtonState()

    def update(self) -> list[ButtonEvent]:
        """Poll the button once and return the events detected, in order."""
        reading = self._read()
        now = self._clock()
        state = self.state
        events: list[ButtonEvent] = []

        if reading != state.last_button_state:
            state.last_debounce_time = now

        if now - state.last_debounce_time > DEBOUNCE_DELAY_MS and reading != state.button_state:
            state.button_state = reading
            if reading == LOW:
                state.press_start_time = now
                state.long_press_triggered = False
            else:
                duration = now - state.press_start_time
                if not state.long_press_triggered and duration < LONG_PRESS_MS:
                    events.append(ButtonEvent.SHORT_PRESS)
                events.append(ButtonEvent.RELEASE)

        if (
            state.button_state == LOW
            and now - state.press_start_time >= LONG_PRESS_MS
            and not state.long_press_triggered
        ):
            events.append(ButtonEvent.LONG_PRESS)
            state.long_press_triggered = True

        state.last_button_state = reading
        return events