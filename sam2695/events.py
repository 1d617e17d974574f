"""Events passed from the buttons to the state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

EVENT_POOL_SIZE = 3


class EventType(IntEnum):
    """Kinds of button events."""

    NONE = 0
    A_PRESSED = 1
    B_PRESSED = 2
    C_PRESSED = 3
    D_PRESSED = 4
    A_RELEASED = 5
    B_RELEASED = 6
    C_RELEASED = 7
    D_RELEASED = 8
    BTN_RELEASED = 9
    A_LONG_PRESSED = 10
    B_LONG_PRESSED = 11
    C_LONG_PRESSED = 12
    D_LONG_PRESSED = 13


@dataclass
class Event:
    """An event of a given type; pooled events carry an in-use mark."""

    type: EventType = EventType.NONE
    timestamp: int = 0
    in_use: bool = False