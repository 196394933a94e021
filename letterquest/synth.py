"""
Synthesised sound effects.

Effects are built as numpy waveforms and handed to pygame's mixer. Sound is
cosmetic: a missing audio device silences the game, and a failed playback is
logged and dropped.
"""

import logging
import os
import random
from typing import Dict, Optional

import numpy as np

# Suppress pygame welcome message
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pygame

from letterquest import config

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
POP_SOUNDS = ('pop', 'plop')


def sweep_wave(start_freq: float, end_freq: float, duration: float,
               volume: float = 0.3, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Sine wave gliding from one frequency to another"""
    samples = int(sample_rate * duration)
    freq = np.linspace(start_freq, end_freq, samples)
    # Integrate frequency so the glide has no phase jumps
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    return volume * np.sin(phase)


def triangle_wave(frequency: float, duration: float, volume: float = 0.3,
                  sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Triangle wave (soft, rounded tone)"""
    t = np.linspace(0, duration, int(sample_rate * duration), endpoint=False)
    return volume * 2 * np.abs(2 * ((frequency * t) % 1) - 1) - volume


def apply_envelope(wave: np.ndarray, attack: float = 0.01, decay: float = 0.1,
                   sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Linear fade in over `attack` seconds and out over the last `decay` seconds"""
    length = len(wave)
    attack_samples = min(length, int(attack * sample_rate))
    decay_samples = int(decay * sample_rate)

    envelope = np.ones(length)
    if attack_samples > 0:
        envelope[:attack_samples] = np.linspace(0, 1, attack_samples)
    if 0 < decay_samples < length:
        envelope[-decay_samples:] = np.linspace(1, 0, decay_samples)

    return wave * envelope


def apply_lowpass_filter(wave: np.ndarray, cutoff_freq: float = 2000,
                         sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Moving-average smoothing to take the edge off a tone"""
    window_size = max(1, int(sample_rate / cutoff_freq))
    kernel = np.ones(window_size) / window_size
    return np.convolve(wave, kernel, mode='same')


def to_stereo_pcm(wave: np.ndarray) -> np.ndarray:
    """Float wave in [-1, 1] to interleaved 16-bit stereo samples"""
    pcm = np.clip(wave * 32767, -32767, 32767).astype(np.int16)
    return np.ascontiguousarray(np.column_stack((pcm, pcm)))


class BubbleSynth:
    """Generates the game's effects and loads them into the mixer"""

    def __init__(self, volume: float = config.SOUND_VOLUME):
        pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        self.volume = volume
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self._generate_sounds()

    def _make_sound(self, wave: np.ndarray) -> pygame.mixer.Sound:
        sound = pygame.mixer.Sound(to_stereo_pcm(wave))
        sound.set_volume(self.volume)
        return sound

    def _generate_sounds(self):
        # Pop: quick upward chirp, the bubble skin snapping
        pop = sweep_wave(450, 1300, 0.07, 0.5)
        self.sounds['pop'] = self._make_sound(apply_envelope(pop, 0.002, 0.05))

        # Plop: a drop falling in, low and rounded
        plop = sweep_wave(900, 220, 0.12, 0.55)
        plop = apply_lowpass_filter(plop, 3000)
        self.sounds['plop'] = self._make_sound(apply_envelope(plop, 0.003, 0.09))

        # Level up: rising major arpeggio
        notes = [523.25, 659.25, 783.99, 1046.50]  # C5 E5 G5 C6
        level_up = np.concatenate([
            apply_envelope(triangle_wave(freq, 0.09, 0.35), 0.005, 0.03) for freq in notes
        ])
        self.sounds['level_up'] = self._make_sound(level_up)

        # Word bonus: two bright chimes with a shimmer on top
        chime = np.concatenate([
            apply_envelope(triangle_wave(880.0, 0.12, 0.3), 0.003, 0.08),
            apply_envelope(triangle_wave(1318.51, 0.2, 0.3), 0.003, 0.16),
        ])
        shimmer = sweep_wave(2000, 2600, len(chime) / SAMPLE_RATE, 0.05)
        self.sounds['word_bonus'] = self._make_sound(chime + shimmer[:len(chime)])


class SoundBoard:
    """Audio sink that never raises and never blocks the frame"""

    def __init__(self, sounds: Optional[Dict[str, object]] = None):
        self.sounds = sounds or {}

    @classmethod
    def open(cls, volume: float = config.SOUND_VOLUME) -> 'SoundBoard':
        """Board backed by the synth, or a silent one if there is no audio device"""
        try:
            synth = BubbleSynth(volume)
        except pygame.error as exc:
            logger.warning("Audio unavailable, playing silently: %s", exc)
            return cls()
        return cls(synth.sounds)

    @property
    def enabled(self) -> bool:
        return bool(self.sounds)

    def play_pop(self):
        """Play one of the two collection sounds, picked at random"""
        self.play(random.choice(POP_SOUNDS))

    def play(self, name: str):
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.debug("Could not play %s: %s", name, exc)

    def close(self):
        if self.enabled and pygame.mixer.get_init():
            pygame.mixer.quit()
