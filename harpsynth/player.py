"""Single-note player: at most one note sounds, releasing before the next begins."""

from __future__ import annotations

from .voice import (
    HARMONICS,
    MAX_AMPLITUDE,
    NOTE_FREQUENCIES,
    PLAYER_AMPLITUDE,
    PLAYER_ENVELOPE,
    SAMPLE_RATE,
    Clock,
    Voice,
)


class Player:
    """Plays one note at a time from a set of per-note voices."""

    def __init__(self, clock: Clock | None = None) -> None:
        voices = []
        for frequency in NOTE_FREQUENCIES:
            voice = Voice(PLAYER_ENVELOPE, clock)
            voice.configure(frequency, PLAYER_AMPLITUDE, HARMONICS, SAMPLE_RATE)
            voices.append(voice)
        self._voices: tuple[Voice, ...] = tuple(voices)
        self._current: int | None = None
        self._releasing = False

    @property
    def voices(self) -> tuple[Voice, ...]:
        """The voices, one per note, in note order."""
        return self._voices

    @property
    def current_note(self) -> int | None:
        """Index of the sounding note, or None when nothing sounds."""
        return self._current

    def play(self, note_index: int) -> None:
        """Start a note; indexes outside the note table are ignored."""
        if not 0 <= note_index < len(self._voices):
            return
        if self._current is not None and self._current != note_index:
            self._voices[self._current].note_off()
        self._current = note_index
        self._voices[note_index].note_on()
        self._releasing = False

    def stop(self) -> None:
        """Release the sounding note, if any."""
        if self._current is None:
            return
        self._voices[self._current].note_off()
        self._releasing = True

    def next_sample(self) -> int:
        """Return the next sample of the sounding note, or the DAC midpoint."""
        if self._current is None:
            return MAX_AMPLITUDE
        voice = self._voices[self._current]
        sample = voice.next_sample()
        if self._releasing and voice.is_idle():
            self._current = None
            self._releasing = False
        return sample