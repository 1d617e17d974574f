"""Sample tracks of chords and drum hits, and track timing."""

from __future__ import annotations

from collections.abc import Iterable

from .defs import (
    BPM_DEFAULT,
    BPM_STEP,
    CHANNEL_0,
    CHANNEL_2,
    CHANNEL_5,
    CHANNEL_9,
    NOTE_C2,
    NOTE_D2,
    NOTE_FS2,
    VELOCITY_DEFAULT,
    MusicData,
    OneNote,
)

KICK = 36
SNARE = 38
CLOSED_HI_HAT = 42


def _track(channel: int, steps: Iterable[tuple[Iterable[int], int]]) -> tuple[MusicData, ...]:
    return tuple(
        MusicData(
            channel=channel,
            notes=tuple(OneNote(pitch) for pitch in pitches),
            velocity=VELOCITY_DEFAULT,
            index=index,
            delay=delay,
        )
        for index, (pitches, delay) in enumerate(steps)
    )


_SEVENTH_CHORDS = (
    ((64, 67, 71, 74), 1000),
    ((65, 69, 72, 76), 1000),
    ((62, 65, 69, 72), 1000),
    ((60, 64, 67, 71), 1000),
)

_K, _S, _H = KICK, SNARE, CLOSED_HI_HAT
_DRUM_HITS = (_K, _H, _K, _S, _H, _K, _H, _K, _H, _H, _S, _H, _K, _H, _S, _H, _K, _H, _K, _S, _H)
_DRUM_DELAYS = (
    167, 137, 197, 167, 167, 167, 167, 167, 167, 167, 167,
    167, 200, 100, 600, 100, 100, 100, 300, 400, 100,
)

CHORD_TRACK = _track(CHANNEL_0, _SEVENTH_CHORDS)

DRUM_TRACK = _track(CHANNEL_9, (((hit,), delay) for hit, delay in zip(_DRUM_HITS, _DRUM_DELAYS)))

PAD_TRACK = _track(CHANNEL_5, _SEVENTH_CHORDS)

BASS_TRACK = _track(
    CHANNEL_2,
    (
        ((48, 52, 55, 59), 1000),
        ((50, 53, 57, 62), 1000),
        ((45, 50, 55, 59), 1000),
        ((43, 48, 52, 55), 1000),
    ),
)

_FAST = BPM_DEFAULT + BPM_STEP
_SLOW = BPM_DEFAULT - BPM_STEP

CHANNEL_CHORDS = _track(
    CHANNEL_9,
    (
        ((NOTE_C2, NOTE_FS2), _FAST),
        ((NOTE_FS2,), _SLOW),
        ((NOTE_D2, NOTE_FS2), _SLOW),
        ((NOTE_FS2,), _FAST),
    ),
)

CHANNEL_1_CHORD, CHANNEL_2_CHORD, CHANNEL_3_CHORD, CHANNEL_4_CHORD = CHANNEL_CHORDS


def track_duration(track: Iterable[MusicData]) -> int:
    """Total time of a track in milliseconds, the sum of the waits after each step."""
    return sum(step.delay for step in track)