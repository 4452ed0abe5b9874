"""Polyphonic mixer: one voice per note, all voices summed into a DAC sample."""

from __future__ import annotations

from .voice import (
    DAC_MAX,
    HARMONICS,
    MAX_AMPLITUDE,
    MIXER_AMPLITUDE,
    MIXER_ENVELOPE,
    NOTE_FREQUENCIES,
    SAMPLE_RATE,
    Clock,
    Voice,
)


class Mixer:
    """Keeps a voice for every note and mixes them, letting released notes ring out."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock
        self._voices: tuple[Voice, ...] = tuple(
            self._make_voice(frequency) for frequency in NOTE_FREQUENCIES
        )
        self._current: int | None = None
        self._releasing = False
        self._release_started: int | None = None

    def _make_voice(self, frequency: float) -> Voice:
        voice = Voice(MIXER_ENVELOPE, self._clock)
        voice.configure(frequency, MIXER_AMPLITUDE, HARMONICS, SAMPLE_RATE)
        return voice

    @property
    def voices(self) -> tuple[Voice, ...]:
        """The voices, one per note, in note order."""
        return self._voices

    @property
    def current_note(self) -> int | None:
        """Index of the note most recently played, or None."""
        return self._current

    @property
    def releasing(self) -> bool:
        """True after stop() until the next play()."""
        return self._releasing

    def play(self, note_index: int) -> None:
        """Release the current note, if any, and start the given one."""
        if not 0 <= note_index < len(self._voices):
            raise IndexError(f"note index {note_index} out of range")
        if self._current is not None:
            self._voices[self._current].note_off()
        self._current = note_index
        self._voices[note_index].note_on()
        self._releasing = False
        self._release_started = None

    def stop(self) -> None:
        """Release the current note, if any."""
        if self._current is None:
            return
        self._voices[self._current].note_off()
        self._releasing = True
        voice_clock = self._voices[self._current]._clock
        self._release_started = voice_clock()

    def next_sample(self) -> int:
        """Advance every voice one sample and return the clipped mix in 0..4095."""
        total = sum(float(voice.next_sample()) - MAX_AMPLITUDE for voice in self._voices)
        total += MAX_AMPLITUDE
        return int(min(max(total, 0.0), float(DAC_MAX)))