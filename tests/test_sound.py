import numpy as np

from sound.sound_utils import Sounds, tone_samples


def test_mono_tone_shape_and_type():
    s = tone_samples(620, 70, sample_rate=22050)
    assert s.dtype == np.int16
    assert s.shape == (int(22050 * 0.07),)


def test_stereo_tone_duplicates_channels():
    s = tone_samples(300, 60, sample_rate=44100, channels=2)
    assert s.shape == (int(44100 * 0.06), 2)
    assert (s[:, 0] == s[:, 1]).all()


def test_tone_fades_in_and_out():
    s = tone_samples(120, 150, sample_rate=44100, volume=0.5)
    assert s[0] == 0
    assert abs(int(s[-1])) < 200
    assert np.abs(s).max() <= int(32767 * 0.5)
    assert np.abs(s).max() > 10_000


def test_zero_duration_gives_empty_buffer():
    assert tone_samples(440, 0).shape == (0,)


def test_unknown_sound_is_a_noop():
    assert Sounds.get("does-not-exist") is None
    assert not Sounds.is_loaded("does-not-exist")


def test_play_without_mixer_or_sound_returns_none():
    assert Sounds.play("does-not-exist") is None
