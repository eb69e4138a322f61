# svscraft

Building blocks for music editing tools: clock time values, musical time
values, a tempo and time-signature timeline, MIDI pitches with wildcard
octaves, scale modes and a decibel-to-fader mapping.

## Installation

```
pip install svscraft
```

To run the test suite:

```
pip install "svscraft[test]"
pytest
```

## Clock time (`svscraft.longtime`)

`LongTime` holds a whole number of milliseconds. Negative values are clamped
to zero. Values compare and hash by their millisecond count.

```python
from svscraft.longtime import LongTime

t = LongTime.from_string("1:02.5")
t.total_msec()                          # 62500
t.minute(), t.second(), t.msec()        # (1, 2, 500)
t.to_string(1, 2, 3)                    # "1:02.500"
str(LongTime.from_parts(2, 3, 4))       # "2:03.004"
```

`to_string(minute_width, second_width, msec_width)` zero-pads each part to
its width (defaults 1, 2 and 3). `from_string` accepts bare seconds, `m:s`
or `h:m:s`, each optionally followed by a fractional part after `.`;
full-width colons and full stops are accepted too. Text that does not fit
raises `ValueError`.

## Musical time (`svscraft.musictime`)

`MusicTime` is a frozen measure/beat/tick triple, zero-based. `is_valid()`
is true when no part is negative, and `to_string()` gives one-based
`measure:beat:tick` text (ticks padded to three digits by default).

`PersistentMusicTime` is a tick position tied to a timeline. It stores only
the absolute tick; `measure()`, `beat()`, `tick()`, `to_time()` and `msec()`
are worked out from the timeline each time they are asked for, so they follow
later tempo or time-signature changes. Adding or subtracting an integer moves
the position by that many ticks. Comparison and hashing use the absolute
tick. A `PersistentMusicTime()` with no timeline reads as zero throughout.

## Timelines (`svscraft.musictimeline`)

`MusicTimeline` keeps time signatures by bar and tempos by tick, at 480 ticks
per quarter note. It starts with 4/4 at bar 0 and 120 BPM at tick 0.

```python
from svscraft.musictimeline import MusicTimeline, MusicTimeSignature

timeline = MusicTimeline()
timeline.set_time_signature(2, MusicTimeSignature(3, 4))
timeline.set_tempo(1920, 90.0)

t = timeline.create(3, 1, 0)     # measure, beat, tick (zero-based)
t.total_tick()
t.msec()
t.to_string()                    # one-based "measure:beat:tick"

timeline.create_from_string("4:2:0")
timeline.create_from_msec(1500.0)
```

Time signatures and tempos can be set or removed one at a time or in batches
(`set_multiple_time_signatures`, `remove_multiple_time_signatures`,
`set_multiple_tempos`, `remove_multiple_tempos`). Batch setters take pairs of
position and value; a time signature may also be given as a
`(numerator, denominator)` tuple. Entries that are out of range or invalid
(a negative position, a denominator that is not a power of two up to 32, a
tempo that is not positive, removal at position 0 or where nothing is set) are
skipped with a logged warning rather than raising.

Lookups: `time_signatures()`, `bars_with_time_signature()`,
`time_signature_at(bar)`, `nearest_time_signature_to(bar)`, `tempos()`,
`ticks_with_tempo()`, `tempo_at(tick)` and `nearest_tempo_to(tick)`.

Conversions: `tick_to_time`, `tick_to_msec`, `time_to_tick`,
`string_to_tick` and `msec_to_tick`. `string_to_tick` and
`create_from_string` raise `ValueError` for text that is not
`measure:beat:tick`.

Listeners are attached with `timeline.connect(event, callback)` and removed
with `timeline.disconnect(event, callback)`. The events are
`"time_signature_changed"`, `"tempo_changed"` and `"changed"`; callbacks are
called with no arguments. An unknown event name raises `ValueError`.

## Pitches and modes (`svscraft.musicpitch`, `svscraft.musicmode`)

```python
from svscraft.musicpitch import MusicPitch, Accidental
from svscraft.musicmode import MusicMode, Mode

MusicPitch.from_string("C#5").pitch            # 61
MusicPitch(63).to_string(Accidental.FLAT)      # "Eb5"
MusicPitch.from_string("A?").matched_notes()   # every A from octave 0 upward
MusicPitch.range(MusicPitch(60), MusicPitch(64))

MusicMode(Mode.IONIAN).scale(MusicPitch(60))   # C major scale
MusicMode(Mode.GONG).key_count()               # 5
```

A `MusicPitch` is either a concrete pitch 0–127 or a wildcard key (written
with `?` as its octave) that matches that key in every octave.
`from_string` raises `ValueError` when the text is not a valid pitch or is
outside 0–127. `MusicPitch.range(a, b)` returns the sorted concrete pitches
between two pitches, walking to the nearest match when either end is a
wildcard.

`Mode` lists the seven church modes and the five pentatonic modes `GONG`,
`SHANG`, `JUE`, `ZHI` and `YU`. `MusicMode` also takes any twelve-bit mask
that includes the tonic bit; otherwise it raises `ValueError`.

## Decibels (`svscraft.decibel`)

`decibel_to_linear` and `linear_to_decibel` map gain in decibels to and from
an evenly spaced linear value, suitable for faders. Both take a `factor`
(default -24) that sets the curve.

```python
from svscraft.decibel import decibel_to_linear, linear_to_decibel

linear_to_decibel(decibel_to_linear(-6.0))  # about -6.0
```

## What this package does not do

It is a library of values and conversions only. It has no widgets, dialogs or
other user interface, no command-line program, and it does not read or write
project files or play audio.