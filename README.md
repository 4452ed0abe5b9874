# harpsynth

A small harp-like synthesizer that computes 12-bit DAC sample values
(integers from 0 to 4095, centred on 2047). It builds a one-cycle wavetable
from a set of harmonic weights and shapes each note with a linear ADSR
envelope. A separate helper watches active-low digital inputs and reports
debounced changes.

The package has no dependencies outside the standard library.

## Install

```
pip install harpsynth
```

To run the tests:

```
pip install "harpsynth[test]"
pytest
```

## Modules

### `harpsynth.voice`

- Constants: `SAMPLE_RATE` (16000), `MAX_AMPLITUDE` (2047, the DAC midpoint),
  `DAC_MAX` (4095), `WAVEFORM_SIZE` (512), `NOTE_FREQUENCIES` (eight notes,
  C4 to C5) and `HARMONICS` (the harmonic weights, fundamental first).
- `build_waveform(harmonics)` returns a tuple of `WAVEFORM_SIZE` integers: one
  period of the weighted sum of sine harmonics, scaled by 2047 around 2047.
- `EnvelopeSettings(attack_ms=10, decay_ms=300, sustain_level=0.5, release_ms=800)`
  is a frozen dataclass. Negative durations, or a sustain level outside
  0.0–1.0, raise `ValueError`. Two presets are provided:
  `MIXER_ENVELOPE` (5 / 300 / 0.1 / 600) with `MIXER_AMPLITUDE = 0.5`, and
  `PLAYER_ENVELOPE` (10 / 300 / 0.5 / 800) with `PLAYER_AMPLITUDE = 0.8`.
- `AdsrStage` enumerates `IDLE`, `ATTACK`, `DECAY`, `SUSTAIN` and `RELEASE`.
- `Voice(settings=None, clock=None)` is a single note source.
  - `configure(frequency, amplitude, harmonics, sample_rate)` sets the pitch
    and loudness, resets the phase and builds the wavetable. A sample rate
    that is not positive raises `ValueError`.
  - `note_on()` starts the attack from silence; `note_off()` starts the
    release from the current level (it does nothing when idle or already
    releasing).
  - `next_sample()` advances the envelope and the phase and returns one
    sample in 0..4095. Calling it before `configure()` raises `RuntimeError`.
  - `is_idle()` is true when the voice is silent.
  - Properties: `stage` (an `AdsrStage`), `level` (the last envelope level)
    and `waveform` (the wavetable).

### `harpsynth.mixer`

`Mixer(clock=None)` keeps one voice per note, using the mixer preset, and
sums all of them into each output sample, so a released note keeps ringing
while the next one plays.

- `play(note_index)` releases the current note, if any, and starts the given
  one. An index outside 0–7 raises `IndexError`.
- `stop()` releases the current note, if any.
- `next_sample()` advances every voice and returns the clipped mix in 0..4095.
- Properties: `voices`, `current_note` (the last note played, or `None`) and
  `releasing` (true after `stop()` until the next `play()`).

### `harpsynth.player`

`Player(clock=None)` plays one note at a time, using the player preset.

- `play(note_index)` starts a note; an index outside 0–7 is ignored. Playing a
  different note releases the previous one; playing the same note restarts it.
- `stop()` releases the sounding note, if any.
- `next_sample()` returns the next sample of the sounding note, or 2047 when
  nothing sounds. Once a stopped note's envelope reaches silence,
  `current_note` goes back to `None`.
- Properties: `voices` and `current_note`.

### `harpsynth.sensors`

`SensorWatcher(pins, read_pin, sleep=None)` polls a set of pins through the
`read_pin(pin)` callable, which must return `LOW` (0) or `HIGH` (1). `sleep`
defaults to `time.sleep` and is used for a 10 ms debounce wait when a reading
changes.

- A sensor counts as pressed (`LOW`) only when it reads low on two consecutive
  checks; anything else counts as released (`HIGH`).
- `on_change(callback)` sets a function called as `callback(index, state)` for
  every change of stable state; pass `None` to remove it.
- `check_all()` reads every pin once and returns the changes as a list of
  `(index, state)` pairs.
- Properties: `pins` and `states` (the last reported stable state of each
  sensor).

## Time

Envelopes read time from a clock: a callable with no arguments returning
milliseconds. By default a monotonic system clock is used; pass your own to
drive the envelope in tests or offline rendering.

## Example

```python
from harpsynth.player import Player

now = 0
player = Player(clock=lambda: now)
player.play(5)              # A4
samples = []
for _ in range(160):
    now += 1
    samples.append(player.next_sample())
player.stop()
```

Watching sensors:

```python
from harpsynth.sensors import SensorWatcher

levels = {2: 1, 3: 1}
watcher = SensorWatcher([2, 3], read_pin=levels.__getitem__, sleep=lambda s: None)
watcher.on_change(lambda index, state: print(index, state))
levels[2] = 0
watcher.check_all()         # returns []: the low level has been seen once
watcher.check_all()         # prints "0 0" and returns [(0, 0)]
```

## What it does not do

- It only computes sample values. It does not play sound, open an audio
  device or drive a DAC; sending the samples anywhere is up to the caller,
  including calling `next_sample()` at the sample rate.
- It does not read hardware pins itself; `SensorWatcher` relies on the
  `read_pin` callable you supply.
- It has no serial or network link between the sensor watcher and the
  players, and no command-line program.