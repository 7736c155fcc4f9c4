# rubicore

Timing and chart primitives for rhythm games: a conductor that tracks song
position against a list of tempo changes and reports measure, beat and step
boundaries, plus the data types that describe a chart.

## Install

From a checkout of the project:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Timing helpers

`rubicore.timing` converts between measures, beats, steps and milliseconds:

```python
from rubicore.timing import measure_to_ms, beats_to_ms, steps_to_ms

measure_to_ms(1, 120, 4)   # 2000.0 ms for one 4/4 measure at 120 bpm
beats_to_ms(1, 120)        # 500.0 ms
steps_to_ms(1, 120, 4)     # 125.0 ms
```

It also has `measure_to_beats`, `measure_to_steps`, `beats_to_steps`,
`beats_to_measures` and `steps_to_measures`.

Two functions take a list of `TimeChange` objects into account:

- `measure_range_to_ms(start, end, time_changes)` gives the milliseconds
  between two measure positions. It raises `ValueError` when `start` is
  greater than `end` or the list is empty.
- `ms_to_measures(ms_time, time_changes)` gives the measure position of a
  time in milliseconds, using the tempo change in effect at that time. It
  raises `ValueError` for an empty list.

## Chart data

- `rubicore.time_change.TimeChange(time, bpm, time_signature_numerator=4.0,
  time_signature_denominator=4.0, ms_time=0.0)`: a tempo change starting at
  measure `time`. The properties `measure_value`, `beat_value` and
  `step_value` give the length of one measure, beat and step in milliseconds.
- `rubicore.sv_change.SvChange(time=0.0, multiplier=1.0)`: a scroll-velocity
  change. `convert_data(time_changes, previous_change=None)` sets its
  `ms_time` and, when a previous change is given, its scroll `position`.
- `rubicore.chart`: `MAX_LANE_COUNT` (32), the `QuantValue` enum of row
  subdivisions (`FOURTH` = 4 up to `HUNDRED_NINETY_SECOND` = 192) and
  `SectionData`, a section starting at a whole `measure`.
- `rubicore.note_data.NoteData`: a note on a `lane` with an optional `type`,
  a starting row and an optional ending row. `convert_data(time_changes,
  sv_changes)` sets `measure_time` and `measure_length` from those rows. The
  module also has `note_lane_key`, `is_note_lane` and `is_note_type`.
- `rubicore.row_data.RowData`: a row at `offset` subdivisions of `quant` into
  its `section`, holding the notes that start and end on it. It keeps its
  notes sorted by lane, and `add_start_note` / `add_end_note` raise
  `ValueError` when the lane is already taken. It can look notes up by lane
  or type (`get_notes`, `get_note_at_lane`, `get_notes_of_type`,
  `get_note_types`), remove them (`remove_note`, `remove_note_at_lane`),
  and `convert_data` attaches itself to its notes and lets them compute their
  timing.

## Conductor

```python
from rubicore.conductor import Conductor
from rubicore.time_change import TimeChange

conductor = Conductor()
conductor.time_changes = [TimeChange(time=0, bpm=120)]
conductor.connect("beat_hit", lambda beat: print("beat", beat))
conductor.play(0.0)

# once per frame:
conductor.run_callbacks()
```

Signals (listed in `rubicore.conductor.SIGNALS`) are `measure_hit`,
`beat_hit`, `step_hit` and `time_change_reached`; `connect` and `disconnect`
raise `ValueError` for an unknown signal, a callback connected twice, or one
that is not connected.

`play`, `pause`, `resume`, `stop` and `reset` control playback. The `time`
property is the song time in seconds scaled by `speed`; `audio_time`
includes `offset`. `current_measure`, `current_beat` and `current_step`
report the position (0.0 when there are no tempo changes), and
`current_time_change` the tempo change in effect. The conductor reads the
wall clock by default; pass `Conductor(clock=...)` to supply another time
source in seconds. The most recently created conductor is available from
`Conductor.get_singleton()`.

## What it does not do

rubicore plays no audio and reads or writes no chart files: the conductor
follows a clock, and charts are built from the classes above in code. There
is no command-line tool.