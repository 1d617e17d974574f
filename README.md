# sam2695

Control a SAM2695 General MIDI synthesizer from Python over a serial
connection, and build button-driven instruments on top of it.

## Modules

- `sam2695.synth`: `Synth` writes MIDI messages to any object that has a
  `write()` method. It can send note on, note off, all notes off, bank and
  program selection, and channel volume. It also keeps a current `pitch`,
  `velocity` and `bpm` within the chip's limits. `open_synth(device, baud)`
  opens a serial port with pyserial and returns a `Synth` that writes to it.
  The default baud rate is 31250. `Synth` is a context manager and closes
  its port on exit.
- `sam2695.defs`: MIDI constants, the `Note` and `Instrument` enums (General
  MIDI programs 0 to 127), and the frozen `OneNote` and `MusicData` chord
  records. A `MusicData` holds at most four notes.
- `sam2695.music`: sample tracks (`CHORD_TRACK`, `DRUM_TRACK`,
  `PAD_TRACK`, `BASS_TRACK`, `CHANNEL_CHORDS`) and `track_duration(track)`,
  which sums the delays of a track's steps.
- `sam2695.events`: `EventType` and `Event`, the button events that a
  state machine acts on.
- `sam2695.button`: `Button`, a debounced active-low push button that
  reports `ButtonEvent.SHORT_PRESS`, `ButtonEvent.LONG_PRESS` and
  `ButtonEvent.RELEASE`.
- `sam2695.state`: the abstract `State` and the `StateMachine` that passes
  events to the current state and handles transitions.
- `sam2695.state_manager`: `StateManager`, a registry of states keyed by
  id.

## Playing a note

```python
from sam2695.synth import open_synth

with open_synth("/dev/ttyUSB0", 31250) as synth:
    synth.set_instrument(0, 0, 0)      # bank 0, channel 0, grand piano
    synth.note_on(0, 60, 127)          # middle C, full velocity
    synth.note_off(0, 60)
```

`Synth` accepts any port-like object, so you can capture the bytes it
sends:

```python
import io
from sam2695.synth import Synth

buffer = io.BytesIO()
synth = Synth(buffer)
synth.all_notes_off(0)
print(buffer.getvalue())           # b'\xb0{\x00'
```

The limits are:

- Pitch starts at 60 and stays between B0 (23) and C8 (108).
- Velocity starts at 90 and stays between 0 and 127. `increase_velocity()`
  and `decrease_velocity()` move it in steps of 10 and send it as the volume
  of all sixteen channels.
- Tempo starts at 120 BPM and `set_bpm()` keeps it between 40 and 240.
  `increase_bpm()` and `decrease_bpm()` move it in steps of 10.

`play_chord(chord)` sends a note-on message for every note of a
`MusicData` that is switched on.

## Buttons

```python
import time
from sam2695.button import Button

button = Button(read=lambda: pin_level(), clock=lambda: int(time.monotonic() * 1000))
while True:
    for event in button.update():
        print(event)
```

`read` returns the pin level, where 0 means pressed. `clock` returns
milliseconds.

- A change of level is accepted once the input has held still for more
  than 50 ms.
- Releasing the button after less than one second reports a short press
  followed by a release.
- Holding it for one second reports a long press once. The later release
  reports only a release.

## States

Subclass `State` and give the subclass a `state_id` and a `name`. Then
implement `handle_event(machine, event)`.

Register your states with a `StateManager`. Ids from 1 to 9 are valid, and
`register` raises `ValueError` for any other id. `StateManager.instance()`
returns one shared registry.

Start a `StateMachine` with `init(initial_state, error_state)` and feed it
events with `handle_event(event)`. `change_state`, `go_to_previous_state`
and `handle_error` move the machine between states. The machine also keeps
a pool of three reusable events, used through `acquire_event` and
`recycle_event`.

## What this package does not do

The package includes no ready-made modes, such as audition, tempo-tapping or
track-toggling modes, and has no command-line program. It also does not
schedule track playback: `MusicData.delay` and `track_duration` only
describe timing. The application decides when to call `play_chord` and how
to read button pins.