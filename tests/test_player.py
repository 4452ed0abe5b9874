import pytest

from harpsynth.player import Player
from harpsynth.voice import (
    DAC_MAX,
    MAX_AMPLITUDE,
    NOTE_FREQUENCIES,
    PLAYER_AMPLITUDE,
    PLAYER_ENVELOPE,
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


def test_voices_configured(clock):
    player = Player(clock)
    assert [v.frequency for v in player.voices] == list(NOTE_FREQUENCIES)
    assert all(v.amplitude == PLAYER_AMPLITUDE for v in player.voices)
    assert all(v.settings == PLAYER_ENVELOPE for v in player.voices)


def test_idle_player_returns_midpoint(clock):
    player = Player(clock)
    assert player.current_note is None
    assert player.next_sample() == MAX_AMPLITUDE


@pytest.mark.parametrize("bad", [-1, len(NOTE_FREQUENCIES), 100])
def test_out_of_range_play_is_ignored(clock, bad):
    player = Player(clock)
    player.play(2)
    player.play(bad)
    assert player.current_note == 2


def test_play_sets_current_note(clock):
    player = Player(clock)
    player.play(3)
    assert player.current_note == 3
    assert player.voices[3].stage is AdsrStage.ATTACK


def test_switching_note_releases_previous(clock):
    player = Player(clock)
    player.play(0)
    player.play(1)
    assert player.voices[0].stage is AdsrStage.RELEASE
    assert player.current_note == 1


def test_replaying_same_note_retriggers_attack(clock):
    player = Player(clock)
    player.play(4)
    player.next_sample()
    clock.now = PLAYER_ENVELOPE.attack_ms
    player.next_sample()
    assert player.voices[4].stage is AdsrStage.DECAY
    player.play(4)
    assert player.voices[4].stage is AdsrStage.ATTACK


def test_samples_stay_in_dac_range(clock):
    player = Player(clock)
    player.play(7)
    player.next_sample()
    clock.now = PLAYER_ENVELOPE.attack_ms
    samples = [player.next_sample() for _ in range(300)]
    assert all(0 <= s <= DAC_MAX for s in samples)
    assert len(set(samples)) > 1


def test_release_clears_current_note(clock):
    player = Player(clock)
    player.play(2)
    player.next_sample()
    clock.now = 20
    player.next_sample()
    player.stop()
    clock.now += PLAYER_ENVELOPE.release_ms // 2
    player.next_sample()
    assert player.current_note == 2
    clock.now += PLAYER_ENVELOPE.release_ms
    assert player.next_sample() == MAX_AMPLITUDE
    assert player.current_note is None
    assert player.next_sample() == MAX_AMPLITUDE


def test_stop_without_note_does_nothing(clock):
    player = Player(clock)
    player.stop()
    assert player.current_note is None
    assert all(v.is_idle() for v in player.voices)