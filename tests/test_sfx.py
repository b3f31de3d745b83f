import pytest

pygame = pytest.importorskip("pygame")

from dustvacuum.sfx import load_sound, play


def test_missing_sound_is_none(tmp_path):
    assert load_sound("nope.wav", fx_dir=str(tmp_path)) is None


def test_play_ignores_missing_sound():
    play(None)


def test_play_swallows_device_errors():
    class Busy:
        def play(self):
            raise pygame.error("device busy")

    play(Busy())
