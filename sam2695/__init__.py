"""Serial control of a SAM2695 MIDI synthesizer, with debounced buttons and a state machine."""

__version__ = "0.1.0"

__all__ = [
    "button",
    "defs",
    "events",
    "music",
    "state",
    "state_manager",
    "synth",
]