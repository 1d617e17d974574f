"""MIDI command front end for a SAM2695 synthesizer on a serial line."""

from __future__ import annotations

from typing import Protocol

import serial

from .defs import (
    BPM_DEFAULT,
    BPM_MAX,
    BPM_MIN,
    BPM_STEP,
    CHANNELS,
    MIDI_CMD_CONTROL_CHANGE,
    MIDI_CMD_PROGRAM_CHANGE,
    MIDI_COMMAND_OFF,
    MIDI_COMMAND_ON,
    MIDI_SERIAL_BAUD_RATE,
    NOTE_B0,
    NOTE_C8,
    VELOCITY_MAX,
    VELOCITY_MIN,
    VELOCITY_STEP,
    MusicData,
)

DEFAULT_PITCH = 60
DEFAULT_VELOCITY = 90

_CONTROLLER_BANK_SELECT = 0x00
_CONTROLLER_VOLUME = 0x07
_CONTROLLER_ALL_NOTES_OFF = 0x7B


class Port(Protocol):
    """Anything that accepts raw bytes, such as an open serial port."""

    def write(self, data: bytes) -> object: ...


def _status(command: int, channel: int) -> int:
    return command | (channel & 0x0F)


class Synth:
    """Sends MIDI messages to the synthesizer and keeps its pitch, velocity and tempo."""

    def __init__(self, port: Port) -> None:
        self.port = port
        self.pitch = DEFAULT_PITCH
        self._velocity = DEFAULT_VELOCITY
        self._bpm = BPM_DEFAULT

    def __enter__(self) -> Synth:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying port if it can be closed."""
        close = getattr(self.port, "close", None)
        if close is not None:
            close()

    @property
    def velocity(self) -> int:
        """The current velocity, also used as the volume of every channel."""
        return self._velocity

    @property
    def bpm(self) -> int:
        """The current tempo in beats per minute."""
        return self._bpm

    def _send(self, *message: int) -> None:
        self.port.write(bytes(message))

    def set_instrument(self, bank: int, channel: int, value: int) -> None:
        """Select a bank and then a program on a channel."""
        self._send(_status(MIDI_CMD_CONTROL_CHANGE, channel), _CONTROLLER_BANK_SELECT, bank)
        self._send(_status(MIDI_CMD_PROGRAM_CHANGE, channel), value)

    def note_on(self, channel: int, pitch: int, velocity: int) -> None:
        """Start a note."""
        self._send(_status(MIDI_COMMAND_ON, channel), pitch, velocity)

    def note_off(self, channel: int, pitch: int) -> None:
        """Stop a note."""
        self._send(_status(MIDI_COMMAND_OFF, channel), pitch, 0x00)

    def all_notes_off(self, channel: int) -> None:
        """Stop every note sounding on a channel."""
        self._send(_status(MIDI_CMD_CONTROL_CHANGE, channel), _CONTROLLER_ALL_NOTES_OFF, 0x00)

    def play_chord(self, chord: MusicData) -> None:
        """Start every switched-on note of a chord at the chord's velocity."""
        for pitch in chord.active_pitches:
            self.note_on(chord.channel, pitch, chord.velocity)

    def set_volume(self, channel: int, level: int) -> None:
        """Set the volume controller of a channel."""
        self._send(_status(MIDI_CMD_CONTROL_CHANGE, channel), _CONTROLLER_VOLUME, level)

    def increase_pitch(self) -> None:
        """Raise the current pitch by a semitone, up to C8."""
        self.pitch = min(self.pitch + 1, NOTE_C8)

    def decrease_pitch(self) -> None:
        """Lower the current pitch by a semitone, down to B0."""
        self.pitch = max(self.pitch - 1, NOTE_B0)

    def _apply_velocity(self, velocity: int) -> None:
        self._velocity = max(VELOCITY_MIN, min(velocity, VELOCITY_MAX))
        for channel in CHANNELS:
            self.set_volume(channel, self._velocity)

    def increase_velocity(self) -> None:
        """Raise the velocity by one step and apply it as volume on all channels."""
        self._apply_velocity(self._velocity + VELOCITY_STEP)

    def decrease_velocity(self) -> None:
        """Lower the velocity by one step and apply it as volume on all channels."""
        self._apply_velocity(self._velocity - VELOCITY_STEP)

    def increase_bpm(self) -> None:
        """Raise the tempo by one step."""
        self.set_bpm(self._bpm + BPM_STEP)

    def decrease_bpm(self) -> None:
        """Lower the tempo by one step."""
        self.set_bpm(self._bpm - BPM_STEP)

    def set_bpm(self, bpm: int) -> None:
        """Set the tempo, clamped to the allowed range."""
        self._bpm = max(BPM_MIN, min(int(bpm), BPM_MAX))


def open_synth(device: str, baud: int = MIDI_SERIAL_BAUD_RATE) -> Synth:
    """Open a serial device and return a synthesizer that writes to it."""
    return Synth(serial.Serial(device, baud))