"""Constants, instrument numbers and chord data for the SAM2695 synthesizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MIDI_SERIAL_BAUD_RATE = 31250
USB_SERIAL_BAUD_RATE = 115200

MIDI_COMMAND_ON = 0x90
MIDI_COMMAND_OFF = 0x80
MIDI_CMD_CONTROL_CHANGE = 0xB0
MIDI_CMD_PROGRAM_CHANGE = 0xC0

BPM_DEFAULT = 120
BPM_MIN = 40
BPM_MAX = 240
BPM_STEP = 10

VELOCITY_MIN = 0
VELOCITY_MAX = 127
VELOCITY_STEP = 10
VELOCITY_DEFAULT = 64

BASIC_TIME = 60000  # milliseconds in one minute

QUATER_NOTE = 0
EIGHTH_NOTE = 1
SIXTEENTH_NOTE = 2

BEATS_BAR_DEFAULT = 4
BEATS_BAR_2 = 2
BEATS_BAR_3 = 3
BEATS_BAR_4 = 4

NOTE_COUNT_DEFAULT = 4
NOTE_COUNT_MIN = 1
NOTE_COUNT_MAX = 16

CHANNEL_0 = 0
CHANNEL_1 = 1
CHANNEL_2 = 2
CHANNEL_3 = 3
CHANNEL_4 = 4
CHANNEL_5 = 5
CHANNEL_6 = 6
CHANNEL_7 = 7
CHANNEL_8 = 8
CHANNEL_9 = 9
CHANNEL_10 = 10
CHANNEL_11 = 11
CHANNEL_12 = 12
CHANNEL_13 = 13
CHANNEL_14 = 14
CHANNEL_15 = 15
CHANNELS = range(CHANNEL_0, CHANNEL_15 + 1)

REST = 0

_NOTE_NAMES = ("C", "CS", "D", "DS", "E", "F", "FS", "G", "GS", "A", "AS", "B")
_LOWEST_NOTE = 23
_HIGHEST_NOTE = 111

Note = IntEnum(
    "Note",
    [
        (f"{_NOTE_NAMES[pitch % 12]}{pitch // 12 - 1}", pitch)
        for pitch in range(_LOWEST_NOTE, _HIGHEST_NOTE + 1)
    ],
)
Note.__doc__ = "MIDI pitch numbers by note name, from B0 (23) to DS8 (111)."

NOTE_B0 = Note.B0
NOTE_C2 = Note.C2
NOTE_D2 = Note.D2
NOTE_FS2 = Note.FS2
NOTE_C4 = Note.C4
NOTE_C8 = Note.C8


class Instrument(IntEnum):
    """General MIDI program numbers of the synthesizer's melodic bank."""

    GRAND_PIANO_1 = 0
    BRIGHT_PIANO_2 = 1
    EL_GRD_PIANO_3 = 2
    HONKY_TONK_PIANO = 3
    EL_PIANO_1 = 4
    EL_PIANO_2 = 5
    HARPSICHORD = 6
    CLAVI = 7
    CELESTA = 8
    GLOCKENSPIEL = 9
    MUSIC_BOX = 10
    VIBRAPHONE = 11
    MARIMBA = 12
    XYLOPHONE = 13
    TUBULAR_BELLS = 14
    SANTUR = 15
    DRAWBAR_ORGAN = 16
    PERCUSSIVE_ORGAN = 17
    ROCK_ORGAN = 18
    CHURCH_ORGAN = 19
    REED_ORGAN = 20
    ACCORDION_FRENCH = 21
    HARMONICA = 22
    TANGO_ACCORDION = 23
    AC_GUITAR_NYLON = 24
    AC_GUITAR_STEEL = 25
    AC_GUITAR_JAZZ = 26
    AC_GUITAR_CLEAN = 27
    AC_GUITAR_MUTED = 28
    OVERDRIVEN_GUITAR = 29
    DISTORTION_GUITAR = 30
    GUITAR_HARMONICS = 31
    ACOUSTIC_BASS = 32
    FINGER_BASS = 33
    PICKED_BASS = 34
    FRETLESS_BASS = 35
    SLAP_BASS_1 = 36
    SLAP_BASS_2 = 37
    SYNTH_BASS_1 = 38
    SYNTH_BASS_2 = 39
    VIOLIN = 40
    VIOLA = 41
    CELLO = 42
    CONTRABASS = 43
    TREMOLO_STRINGS = 44
    PIZZICATO_STRINGS = 45
    ORCHESTRAL_HARP = 46
    TIMPANI = 47
    STRING_ENSEMBLE_1 = 48
    STRING_ENSEMBLE_2 = 49
    SYNTH_STRINGS_1 = 50
    SYNTH_STRINGS_2 = 51
    CHOIR_AAHS = 52
    VOICE_OOHS = 53
    SYNTH_VOICE = 54
    ORCHESTRA_HIT = 55
    TRUMPET = 56
    TROMBONE = 57
    TUBA = 58
    MUTED_TRUMPET = 59
    FRENCH_HORN = 60
    BRASS_SECTION = 61
    SYNTH_BRASS_1 = 62
    SYNTH_BRASS_2 = 63
    SOPRANO_SAX = 64
    ALTO_SAX = 65
    TENOR_SAX = 66
    BARITONE_SAX = 67
    OBOE = 68
    ENGLISH_HORN = 69
    BASSOON = 70
    CLARINET = 71
    PICCOLO = 72
    FLUTE = 73
    RECORDER = 74
    PAN_FLUTE = 75
    BLOWN_BOTTLE = 76
    SHAKUHACHI = 77
    WHISTLE = 78
    OCARINA = 79
    LEAD_1_SQUARE = 80
    LEAD_2_SAWTOOTH = 81
    LEAD_3_CALLIOPE = 82
    LEAD_4_CHIFF = 83
    LEAD_5_CHARANG = 84
    LEAD_6_VOICE = 85
    LEAD_7_FIFTHS = 86
    LEAD_8_BASS_LEAD = 87
    PAD_1_FANTASIA = 88
    PAD_2_WARM = 89
    PAD_3_POLY_SYNTH = 90
    PAD_4_CHOIR = 91
    PAD_5_BOWED = 92
    PAD_6_METALLIC = 93
    PAD_7_HALO = 94
    PAD_8_SWEEP = 95
    FX_1_RAIN = 96
    FX_2_SOUNDTRACK = 97
    FX_3_CRYSTAL = 98
    FX_4_ATMOSPHERE = 99
    FX_5_BRIGHTNESS = 100
    FX_6_GOBLINS = 101
    FX_7_ECHOES = 102
    FX_8_SCI_FI = 103
    SITAR = 104
    BANJO = 105
    SHAMISEN = 106
    KOTO = 107
    KALIMBA = 108
    BAG_PIPE = 109
    FIDDLE = 110
    SHANAI = 111
    TINKLE_BELL = 112
    AGOGO = 113
    STEEL_DRUMS = 114
    WOODBLOCK = 115
    TAIKO_DRUM = 116
    MELODIC_TOM = 117
    SYNTH_DRUM = 118
    REVERSE_CYMBAL = 119
    GT_FRET_NOISE = 120
    BREATH_NOISE = 121
    SEASHORE = 122
    BIRD_TWEET = 123
    TELEPH_RING = 124
    HELICOPTER = 125
    APPLAUSE = 126
    GUNSHOT = 127


@dataclass(frozen=True)
class OneNote:
    """A single pitch within a chord, which may be switched off."""

    pitch: int
    is_on: bool = True


@dataclass(frozen=True)
class MusicData:
    """One step of a track: a chord of up to four notes and the wait after it."""

    channel: int
    notes: tuple[OneNote, ...] = field(default_factory=tuple)
    velocity: int = VELOCITY_DEFAULT
    index: int = 0
    delay: int = 0

    def __post_init__(self) -> None:
        notes = tuple(self.notes)
        if len(notes) > NOTE_COUNT_DEFAULT:
            raise ValueError(
                f"a chord holds at most {NOTE_COUNT_DEFAULT} notes, got {len(notes)}"
            )
        object.__setattr__(self, "notes", notes)

    @property
    def active_pitches(self) -> list[int]:
        """Pitches of the notes that are switched on, in order."""
        return [note.pitch for note in self.notes if note.is_on]