"""Tests for sound synthesis and the best-effort sound board."""

import numpy as np
import pygame
import pytest

from letterquest.synth import (
    POP_SOUNDS, SAMPLE_RATE, SoundBoard, apply_envelope, apply_lowpass_filter,
    sweep_wave, to_stereo_pcm, triangle_wave,
)


class FakeSound:
    def __init__(self, fail=False):
        self.fail = fail
        self.plays = 0

    def play(self):
        if self.fail:
            raise pygame.error("device lost")
        self.plays += 1


class TestWaves:
    """numpy waveform helpers."""

    def test_sweep_length_and_volume(self):
        wave = sweep_wave(400, 1200, 0.1, volume=0.5)
        assert len(wave) == int(SAMPLE_RATE * 0.1)
        assert np.max(np.abs(wave)) <= 0.5 + 1e-9

    def test_triangle_bounds(self):
        wave = triangle_wave(440, 0.05, volume=0.3)
        assert wave.min() >= -0.3 - 1e-9
        assert wave.max() <= 0.3 + 1e-9

    def test_envelope_fades_in_and_out(self):
        wave = apply_envelope(np.ones(SAMPLE_RATE), attack=0.1, decay=0.1)
        assert wave[0] == 0
        assert wave[-1] == 0
        assert wave[SAMPLE_RATE // 2] == 1

    def test_lowpass_keeps_length(self):
        wave = triangle_wave(440, 0.05)
        assert len(apply_lowpass_filter(wave, 2000)) == len(wave)

    def test_stereo_pcm(self):
        pcm = to_stereo_pcm(np.array([0.0, 1.0, -1.0, 2.0]))
        assert pcm.dtype == np.int16
        assert pcm.shape == (4, 2)
        assert pcm[:, 0].tolist() == [0, 32767, -32767, 32767]
        assert pcm.flags['C_CONTIGUOUS']


class TestSoundBoard:
    """Sound is cosmetic and never breaks the frame."""

    def test_silent_board(self):
        board = SoundBoard()
        assert board.enabled is False
        board.play_pop()
        board.play('level_up')

    def test_plays_known_sound(self):
        sound = FakeSound()
        SoundBoard({'level_up': sound}).play('level_up')
        assert sound.plays == 1

    def test_playback_failure_is_swallowed(self):
        board = SoundBoard({'pop': FakeSound(fail=True), 'plop': FakeSound(fail=True)})
        board.play_pop()

    def test_pop_picks_one_of_two(self):
        sounds = {name: FakeSound() for name in POP_SOUNDS}
        board = SoundBoard(sounds)
        for _ in range(50):
            board.play_pop()
        assert sum(s.plays for s in sounds.values()) == 50
        assert all(s.plays > 0 for s in sounds.values())

    def test_open_without_device_is_silent(self, monkeypatch):
        def no_device(*args, **kwargs):
            raise pygame.error("No available audio device")
        monkeypatch.setattr(pygame.mixer, "init", no_device)
        assert SoundBoard.open().enabled is False
