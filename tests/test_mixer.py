import pytest

from harpsynth.mixer import Mixer
from harpsynth.voice import (
    DAC_MAX,
    MAX_AMPLITUDE,
    MIXER_AMPLITUDE,
    MIXER_ENVELOPE,
    NOTE_FREQUENCIES,
    SAMPLE_RATE,
    AdsrStage,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_voices_follow_note_table(clock):
    mixer = Mixer(clock)
    assert [v.frequency for v in mixer.voices] == list(NOTE_FREQUENCIES)
    assert all(v.amplitude == MIXER_AMPLITUDE for v in mixer.voices)
    assert all(v.sample_rate == SAMPLE_RATE for v in mixer.voices)
    assert all(v.settings == MIXER_ENVELOPE for v in mixer.voices)


def test_idle_mixer_outputs_midpoint(clock):
    mixer = Mixer(clock)
    assert [mixer.next_sample() for _ in range(20)] == [MAX_AMPLITUDE] * 20


def test_stop_without_play_is_silent(clock):
    mixer = Mixer(clock)
    mixer.stop()
    assert mixer.releasing is False
    assert mixer.next_sample() == MAX_AMPLITUDE


def test_play_out_of_range_raises(clock):
    mixer = Mixer(clock)
    with pytest.raises(IndexError):
        mixer.play(len(NOTE_FREQUENCIES))
    with pytest.raises(IndexError):
        mixer.play(-1)


def test_playing_note_produces_sound_in_range(clock):
    mixer = Mixer(clock)
    mixer.play(5)
    mixer.next_sample()
    clock.now = MIXER_ENVELOPE.attack_ms
    samples = [mixer.next_sample() for _ in range(200)]
    assert all(0 <= s <= DAC_MAX for s in samples)
    assert len(set(samples)) > 1
    assert mixer.current_note == 5


def test_new_note_releases_previous(clock):
    mixer = Mixer(clock)
    mixer.play(0)
    mixer.play(1)
    assert mixer.voices[0].stage is AdsrStage.RELEASE
    assert mixer.voices[1].stage is AdsrStage.ATTACK
    assert mixer.current_note == 1


def test_stop_then_release_finishes_silently(clock):
    mixer = Mixer(clock)
    mixer.play(2)
    mixer.next_sample()
    clock.now = 50
    mixer.next_sample()
    mixer.stop()
    assert mixer.releasing is True
    assert mixer.voices[2].stage is AdsrStage.RELEASE
    clock.now += MIXER_ENVELOPE.release_ms
    assert mixer.next_sample() == MAX_AMPLITUDE
    assert all(v.is_idle() for v in mixer.voices)


def test_play_after_stop_clears_releasing(clock):
    mixer = Mixer(clock)
    mixer.play(3)
    mixer.stop()
    mixer.play(4)
    assert mixer.releasing is False
    assert mixer.voices[4].stage is AdsrStage.ATTACK