"""Sound synthesis and playback utilities for pygame.mixer.

Mirrors the style of `texture_utils.py`: keep a tiny registry so the rest of
the code can reference sounds by key without juggling Sound objects. The game
ships no audio files; its blips are synthesized at startup.

Usage:

    from sound.sound_utils import Sounds

    Sounds.ensure_init()  # safe to call many times
    Sounds.synthesize("jump", 620, 70, volume=0.25)
    Sounds.play("jump")

All operations fail gracefully if the mixer can't initialize; errors are
printed once and calls become no-ops.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np
import pygame

from config import MUTE


def tone_samples(
    freq: float,
    duration_ms: float,
    *,
    sample_rate: int = 22050,
    channels: int = 1,
    volume: float = 0.25,
    fade_ms: float = 5.0,
) -> np.ndarray:
    """Sine tone as int16 samples, shape (n,) for mono or (n, channels).

    A short linear fade at both ends avoids clicks.
    """
    n = max(0, int(sample_rate * duration_ms / 1000.0))
    t = np.arange(n, dtype=np.float64) / sample_rate
    wave = np.sin(2.0 * np.pi * freq * t)

    fade_n = min(n // 2, int(sample_rate * fade_ms / 1000.0))
    if fade_n > 0:
        ramp = np.linspace(0.0, 1.0, fade_n, endpoint=False)
        wave[:fade_n] *= ramp
        wave[n - fade_n:] *= ramp[::-1]

    amp = 32767 * max(0.0, min(1.0, float(volume)))
    samples = (wave * amp).astype(np.int16)
    if channels > 1:
        samples = np.ascontiguousarray(np.repeat(samples[:, None], channels, axis=1))
    return samples


class Sounds:
    """Static manager for synthesizing and playing short SFX.

    Notes
    -----
    - Initializes pygame.mixer lazily on first use.
    - Stores sounds by a string key (e.g., "jump").
    - `play()` uses a free channel (reserving one if necessary) and returns it.
    - All methods are safe even if audio isn't available; they just no-op.
    """

    _inited: bool = False
    _failed_init: bool = False
    _sounds: Dict[str, pygame.mixer.Sound] = {}

    @classmethod
    def ensure_init(
        cls,
        *,
        frequency: int = 44100,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> bool:
        """Initialize pygame.mixer if needed. Returns True on success.

        Safe to call multiple times.
        """
        if cls._inited:
            return True
        if cls._failed_init:
            return False
        try:
            # If pygame.init() was called already, mixer may be ready; check first.
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(
                    frequency=frequency, size=size, channels=channels, buffer=buffer
                )
            cls._inited = pygame.mixer.get_init() is not None
            return cls._inited
        except pygame.error as e:  # pragma: no cover - environment dependent
            print(f"[Sounds] Mixer init failed: {e}")
            cls._failed_init = True
            return False

    @classmethod
    def is_available(cls) -> bool:
        """Return True if audio playback should work."""
        return cls._inited and (pygame.mixer.get_init() is not None)

    @classmethod
    def synthesize(
        cls, key: str, freq: float, duration_ms: float, *, volume: float = 0.25
    ) -> Optional[pygame.mixer.Sound]:
        """Build a sine blip matching the mixer format and register it under `key`."""
        if not cls.ensure_init():
            return None
        sample_rate, fmt, channels = pygame.mixer.get_init()
        if abs(fmt) != 16:
            print(f"[Sounds] Unsupported mixer format {fmt}; skipping '{key}'")
            return None
        samples = tone_samples(
            freq, duration_ms, sample_rate=sample_rate, channels=channels, volume=volume
        )
        snd = pygame.sndarray.make_sound(samples)
        cls._sounds[key] = snd
        return snd

    @classmethod
    def get(cls, key: str) -> Optional[pygame.mixer.Sound]:
        return cls._sounds.get(key)

    @classmethod
    def play(cls, key: str) -> Optional[pygame.mixer.Channel]:
        """Play a registered sound by key on a free channel."""
        if MUTE:
            return None
        if not cls.is_available():
            return None
        snd = cls._sounds.get(key)
        if snd is None:
            # Soft failure to keep game running.
            # Print only once per missing key to avoid spam.
            if getattr(cls, "_missing_warned", None) is None:
                cls._missing_warned = set()
            if key not in cls._missing_warned:
                print(f"[Sounds] Warning: sound '{key}' not loaded")
                cls._missing_warned.add(key)
            return None

        ch = pygame.mixer.find_channel(True)
        if ch is None:
            return None
        ch.play(snd)
        return ch

    @classmethod
    def is_loaded(cls, key: str) -> bool:
        return key in cls._sounds


__all__ = ["Sounds", "tone_samples"]
