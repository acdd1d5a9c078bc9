"""
Audio
======
Fire-and-forget sound cues through pygame's mixer.

Each cue plays sounds/<cue>.wav when the file exists; otherwise a
short retro tone is synthesized for it. If no audio device is
available the sink goes quiet instead of stopping the game.
"""

import logging
import os
import time
from typing import Dict, Optional

import numpy as np

# Keep pygame's banner off the game screen
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

import pygame

from .config import SOUND_CUES, SOUNDS_DIR

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


# =============================================================================
# SYNTHESIS
# =============================================================================

def _time_axis(duration: float, sample_rate: int) -> np.ndarray:
    return np.linspace(0, duration, int(sample_rate * duration), endpoint=False)


def _square(freq, t: np.ndarray, volume: float = 0.3) -> np.ndarray:
    return volume * np.sign(np.sin(2 * np.pi * freq * t))


def _envelope(wave: np.ndarray, sample_rate: int,
              attack: float = 0.005, decay: float = 0.05) -> np.ndarray:
    """Linear attack and release so tones don't click."""
    length = len(wave)
    envelope = np.ones(length)
    attack_samples = min(int(attack * sample_rate), length)
    decay_samples = min(int(decay * sample_rate), length)
    if attack_samples > 0:
        envelope[:attack_samples] = np.linspace(0, 1, attack_samples)
    if decay_samples > 0:
        envelope[-decay_samples:] = np.minimum(
            envelope[-decay_samples:], np.linspace(1, 0, decay_samples)
        )
    return wave * envelope


def _arpeggio(notes, note_length: float, sample_rate: int) -> np.ndarray:
    t = _time_axis(note_length, sample_rate)
    return np.concatenate([
        _envelope(_square(freq, t, 0.25), sample_rate, decay=note_length / 3)
        for freq in notes
    ])


def synthesize(cue: str, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Mono waveform in [-1, 1] for a cue."""
    if cue == 'pew':
        t = _time_axis(0.08, sample_rate)
        sweep = 1200 - 800 * (t / 0.08)
        wave = 0.3 * (2 * ((sweep * t) % 1) - 1)
        return _envelope(wave, sample_rate, decay=0.04)

    if cue == 'move':
        t = _time_axis(0.06, sample_rate)
        return _envelope(_square(110, t, 0.35), sample_rate, decay=0.03)

    if cue == 'explode':
        t = _time_axis(0.3, sample_rate)
        rng = np.random.default_rng(7)
        noise = rng.uniform(-1, 1, len(t))
        return 0.4 * noise * np.exp(-t * 12)

    if cue == 'startup':
        return _arpeggio([262, 330, 392, 523], 0.09, sample_rate)

    if cue == 'win':
        return _arpeggio([523, 659, 784, 1047, 1047], 0.12, sample_rate)

    if cue == 'lose':
        return _arpeggio([392, 330, 262, 196], 0.18, sample_rate)

    raise KeyError(cue)


# =============================================================================
# SINK
# =============================================================================

class Audio:
    """
    Sound cue player.

    Use as a context manager so the mixer is shut down on every
    exit path.
    """

    def __init__(self, sounds_dir: str = SOUNDS_DIR, enabled: bool = True):
        self.sounds_dir = sounds_dir
        self.enabled = enabled
        self.sounds: Dict[str, 'pygame.mixer.Sound'] = {}
        if enabled:
            self._open()

    def _open(self):
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as exc:
            logger.warning('Audio unavailable, playing silently: %s', exc)
            self.enabled = False
            return

        for cue in SOUND_CUES:
            self.sounds[cue] = self._load(cue)

    def _load(self, cue: str) -> 'pygame.mixer.Sound':
        path = os.path.join(self.sounds_dir, f'{cue}.wav')
        if os.path.exists(path):
            try:
                return pygame.mixer.Sound(path)
            except pygame.error as exc:
                logger.warning('Could not load %s: %s', path, exc)
        else:
            logger.debug('No %s, synthesizing %r', path, cue)
        return self._make_sound(synthesize(cue))

    @staticmethod
    def _make_sound(wave: np.ndarray) -> 'pygame.mixer.Sound':
        """Convert a mono float waveform to a stereo 16-bit Sound."""
        wave = np.clip(wave * 32767, -32767, 32767).astype(np.int16)
        stereo = np.column_stack((wave, wave))
        return pygame.mixer.Sound(stereo)

    def play(self, cue: str):
        """Start a cue without waiting for it."""
        if not self.enabled:
            return
        sound = self.sounds.get(cue)
        if sound is None:
            logger.warning('Unknown sound cue %r', cue)
            return
        sound.play()

    def busy(self) -> bool:
        return self.enabled and pygame.mixer.get_busy()

    def wait(self, timeout: Optional[float] = 5.0):
        """Block until every playing cue has finished."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while self.busy():
            if deadline is not None and time.monotonic() >= deadline:
                logger.debug('Gave up waiting for sounds after %.1fs', timeout)
                break
            time.sleep(0.02)

    def close(self):
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
