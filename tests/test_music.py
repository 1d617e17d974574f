import pytest

from sam2695.defs import CHANNEL_0, CHANNEL_2, CHANNEL_5, CHANNEL_9, NOTE_C2, NOTE_FS2, MusicData, OneNote
from sam2695.music import (
    BASS_TRACK,
    CHANNEL_1_CHORD,
    CHANNEL_CHORDS,
    CHORD_TRACK,
    DRUM_TRACK,
    KICK,
    PAD_TRACK,
    track_duration,
)


def test_empty_track_has_no_duration():
    assert track_duration([]) == 0


def test_single_step_duration_is_its_delay():
    step = MusicData(channel=0, notes=(OneNote(60),), delay=250)
    assert track_duration([step]) == 250


def test_duration_is_additive():
    assert track_duration(CHORD_TRACK + DRUM_TRACK) == track_duration(CHORD_TRACK) + track_duration(DRUM_TRACK)


def test_duration_accepts_generators():
    assert track_duration(step for step in BASS_TRACK) == track_duration(BASS_TRACK)


@pytest.mark.parametrize(
    "track,duration",
    [(CHORD_TRACK, 4000), (DRUM_TRACK, 4004), (PAD_TRACK, 4000), (BASS_TRACK, 4000), (CHANNEL_CHORDS, 480)],
)
def test_indices_are_sequential(track, duration):
    assert track_duration(track) == duration
    assert [step.index for step in track] == list(range(len(track)))


@pytest.mark.parametrize(
    "track,channel",
    [(CHORD_TRACK, CHANNEL_0), (DRUM_TRACK, CHANNEL_9), (PAD_TRACK, CHANNEL_5), (BASS_TRACK, CHANNEL_2)],
)
def test_track_channels(track, channel):
    assert {step.channel for step in track} == {channel}


def test_chord_track_first_chord():
    assert track_duration(CHORD_TRACK[:1]) == 1000
    assert CHORD_TRACK[0].active_pitches == [64, 67, 71, 74]


def test_pad_track_matches_chord_track_notes():
    assert track_duration(PAD_TRACK) == track_duration(CHORD_TRACK) == 4000
    assert [s.notes for s in PAD_TRACK] == [s.notes for s in CHORD_TRACK]


def test_drum_track_is_single_hits():
    assert track_duration(DRUM_TRACK) == 4004
    assert len(DRUM_TRACK) == 21
    assert all(len(step.notes) == 1 for step in DRUM_TRACK)
    assert DRUM_TRACK[0].active_pitches == [KICK]


def test_channel_chord_notes():
    assert track_duration([CHANNEL_1_CHORD]) == 130
    assert CHANNEL_1_CHORD.active_pitches == [NOTE_C2, NOTE_FS2]
    assert all(step.channel == CHANNEL_9 for step in CHANNEL_CHORDS)