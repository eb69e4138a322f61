import pytest

from svscraft.musicmode import Mode, MusicMode
from svscraft.musicpitch import MusicPitch


def test_key_counts():
    assert MusicMode(Mode.IONIAN).key_count() == 7
    assert MusicMode(Mode.GONG).key_count() == 5
    assert MusicMode().key_count() == 1


@pytest.mark.parametrize("mode", list(Mode))
def test_scale_on_concrete_tonic(mode):
    music_mode = MusicMode(mode)
    scale = music_mode.scale(MusicPitch(60))
    assert len(scale) == music_mode.key_count()
    assert scale[0] == MusicPitch(60)
    assert scale == sorted(scale)
    assert all(60 <= p.pitch < 72 for p in scale)


@pytest.mark.parametrize("mode", list(Mode))
def test_scale_on_wildcard_tonic(mode):
    music_mode = MusicMode(mode)
    tonic = MusicPitch.from_string("F?")
    scale = music_mode.scale(tonic)
    assert len(scale) == music_mode.key_count()
    assert all(p.is_wildcard() for p in scale)
    assert scale[0] == tonic
    assert len({p.key() for p in scale}) == len(scale)


def test_wildcard_scale_matches_concrete_keys():
    mode = MusicMode(Mode.DORIAN)
    concrete = {p.key() for p in mode.scale(MusicPitch(62))}
    wildcard = {p.key() for p in mode.scale(MusicPitch.from_string("D?"))}
    assert concrete == wildcard


def test_scale_truncated_at_top():
    assert MusicMode(Mode.IONIAN).scale(MusicPitch(127)) == [MusicPitch(127)]


def test_flags_without_tonic_rejected():
    with pytest.raises(ValueError):
        MusicMode(2)


def test_equality():
    assert MusicMode(Mode.AEOLIAN) == MusicMode(int(Mode.AEOLIAN))
    assert MusicMode(Mode.AEOLIAN) != MusicMode(Mode.IONIAN)