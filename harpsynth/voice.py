"""Wavetable voice with a linear ADSR envelope, producing 12-bit DAC samples."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

SAMPLE_RATE = 16000
MAX_AMPLITUDE = 2047
DAC_MAX = 4095
WAVEFORM_SIZE = 512

NOTE_FREQUENCIES: tuple[float, ...] = (
    261.63,  # C4
    293.66,  # D4
    329.63,  # E4
    349.23,  # F4
    392.00,  # G4
    440.00,  # A4
    493.88,  # B4
    523.25,  # C5
)

# Relative weights of the harp's harmonics, fundamental first.
HARMONICS: tuple[float, ...] = (
    1.0,
    0.048,
    0.039,
    0.036,
    0.007,
    0.006,
    0.006,
    0.008,
    0.001,
)

_SILENCE_THRESHOLD = 0.001

Clock = Callable[[], int]


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class AdsrStage(Enum):
    """Stages of the amplitude envelope."""

    IDLE = "idle"
    ATTACK = "attack"
    DECAY = "decay"
    SUSTAIN = "sustain"
    RELEASE = "release"


@dataclass(frozen=True)
class EnvelopeSettings:
    """Durations in milliseconds and the sustain level (0.0 to 1.0)."""

    attack_ms: int = 10
    decay_ms: int = 300
    sustain_level: float = 0.5
    release_ms: int = 800

    def __post_init__(self) -> None:
        for name in ("attack_ms", "decay_ms", "release_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if not 0.0 <= self.sustain_level <= 1.0:
            raise ValueError("sustain_level must lie between 0.0 and 1.0")


# Envelope and base amplitude used by the polyphonic mixer.
MIXER_ENVELOPE = EnvelopeSettings(attack_ms=5, decay_ms=300, sustain_level=0.1, release_ms=600)
MIXER_AMPLITUDE = 0.5

# Envelope and base amplitude used by the single-note player.
PLAYER_ENVELOPE = EnvelopeSettings(attack_ms=10, decay_ms=300, sustain_level=0.5, release_ms=800)
PLAYER_AMPLITUDE = 0.8


def build_waveform(harmonics: Sequence[float]) -> tuple[int, ...]:
    """Return one period of an additive waveform scaled around the DAC midpoint."""
    table = []
    for i in range(WAVEFORM_SIZE):
        t = i / WAVEFORM_SIZE
        value = sum(
            math.sin(2.0 * math.pi * order * t) * weight
            for order, weight in enumerate(harmonics, start=1)
        )
        table.append(min(max(int(value * MAX_AMPLITUDE + MAX_AMPLITUDE), 0), 0xFFFF))
    return tuple(table)


class Voice:
    """A single oscillator reading a precomputed waveform, shaped by an ADSR envelope."""

    def __init__(
        self,
        settings: EnvelopeSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings if settings is not None else EnvelopeSettings()
        self._clock = clock if clock is not None else _monotonic_ms
        self.frequency = 0.0
        self.amplitude = 0.0
        self.sample_rate = 0
        self._waveform: tuple[int, ...] = (0,) * WAVEFORM_SIZE
        self._phase = 0.0
        self._stage = AdsrStage.IDLE
        self._level = 0.0
        self._start_level = 0.0
        self._end_level = 0.0
        self._stage_start = 0

    @property
    def stage(self) -> AdsrStage:
        """The envelope's current stage."""
        return self._stage

    @property
    def level(self) -> float:
        """The envelope level last computed."""
        return self._level

    @property
    def waveform(self) -> tuple[int, ...]:
        """The precomputed waveform table."""
        return self._waveform

    def configure(
        self,
        frequency: float,
        amplitude: float,
        harmonics: Sequence[float],
        sample_rate: int,
    ) -> None:
        """Set the pitch and loudness and build the waveform; the envelope is untouched."""
        if sample_rate <= 0:
            raise ValueError("sample_rate must be positive")
        self.frequency = frequency
        self.amplitude = amplitude
        self.sample_rate = sample_rate
        self._phase = 0.0
        self._waveform = build_waveform(harmonics)

    def note_on(self) -> None:
        """Start the attack stage from silence."""
        self._stage = AdsrStage.ATTACK
        self._level = 0.0
        self._start_level = 0.0
        self._end_level = 1.0
        self._stage_start = self._clock()

    def note_off(self) -> None:
        """Begin the release from the current level, unless idle or already releasing."""
        if self._stage in (AdsrStage.IDLE, AdsrStage.RELEASE):
            return
        self._stage = AdsrStage.RELEASE
        self._start_level = self._level
        self._end_level = 0.0
        self._stage_start = self._clock()

    def is_idle(self) -> bool:
        """True when the voice is silent."""
        return self._stage is AdsrStage.IDLE

    def next_sample(self) -> int:
        """Advance one sample and return it in the DAC range 0..4095."""
        if self.sample_rate <= 0:
            raise RuntimeError("voice is not configured")
        envelope = self._advance_envelope()

        self._phase += self.frequency / self.sample_rate
        if self._phase >= 1.0:
            self._phase -= 1.0

        index = min(max(int(self._phase * WAVEFORM_SIZE), 0), WAVEFORM_SIZE - 1)
        raw = float(self._waveform[index]) - MAX_AMPLITUDE
        sample = raw * self.amplitude * envelope + MAX_AMPLITUDE
        sample = min(max(sample, 0.0), float(DAC_MAX))

        if self._stage is AdsrStage.RELEASE and envelope < _SILENCE_THRESHOLD:
            self._stage = AdsrStage.IDLE
            self._level = 0.0

        return int(sample)

    def _interpolate(self, elapsed: int, duration: int) -> float:
        return self._start_level + (self._end_level - self._start_level) * (elapsed / duration)

    def _advance_envelope(self) -> float:
        elapsed = self._clock() - self._stage_start
        settings = self.settings
        level = 0.0

        if self._stage is AdsrStage.ATTACK:
            if elapsed < settings.attack_ms:
                level = self._interpolate(elapsed, settings.attack_ms)
            else:
                level = self._end_level
                self._stage = AdsrStage.DECAY
                self._start_level = self._end_level
                self._end_level = settings.sustain_level
                self._stage_start = self._clock()
        elif self._stage is AdsrStage.DECAY:
            if elapsed < settings.decay_ms:
                level = self._interpolate(elapsed, settings.decay_ms)
            else:
                level = self._end_level
                self._stage = AdsrStage.SUSTAIN
        elif self._stage is AdsrStage.SUSTAIN:
            level = settings.sustain_level
        elif self._stage is AdsrStage.RELEASE:
            if elapsed < settings.release_ms:
                level = max(self._interpolate(elapsed, settings.release_ms), 0.0)
            else:
                self._stage = AdsrStage.IDLE
                level = 0.0

        self._level = level
        return level