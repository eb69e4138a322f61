import pytest

from svscraft.musicpitch import Accidental, MusicPitch


@pytest.mark.parametrize(
    "string,pitch",
    [
        ("C5", 60),
        ("C?", -12),
        ("Eb8", 99),
        (" C#  5  ", 61),
        ("C###bb#b##5", 63),
    ],
)
def test_from_string(string, pitch):
    assert MusicPitch.from_string(string).pitch == pitch


@pytest.mark.parametrize("string", ["G#10", "H5"])
def test_from_string_invalid(string):
    with pytest.raises(ValueError):
        MusicPitch.from_string(string)


@pytest.mark.parametrize("accidental", list(Accidental))
def test_to_string_round_trip(accidental):
    for p in range(-12, 128):
        pitch = MusicPitch(p)
        assert MusicPitch.from_string(pitch.to_string(accidental)) == pitch


def test_key_names():
    assert MusicPitch(61).key_name(Accidental.FLAT) == "Db"
    assert MusicPitch(61).key_name(Accidental.SHARP) == "C#"
    assert MusicPitch(-12).to_string(Accidental.SHARP) == "C?"


def test_key_octave_round_trip():
    for p in range(128):
        pitch = MusicPitch(p)
        assert MusicPitch.from_key_octave(pitch.key(), pitch.octave()) == pitch
    wildcard = MusicPitch.from_key_octave(3, MusicPitch.WILDCARD)
    assert wildcard.is_wildcard()
    assert wildcard.key() == 3


@pytest.mark.parametrize("key,octave", [(12, 0), (-1, 0), (8, 10), (0, -2)])
def test_from_key_octave_invalid(key, octave):
    with pytest.raises(ValueError):
        MusicPitch.from_key_octave(key, octave)


def test_constructor_range():
    with pytest.raises(ValueError):
        MusicPitch(-13)
    with pytest.raises(ValueError):
        MusicPitch(128)


def test_matched_notes():
    wildcard = MusicPitch.from_string("E?")
    notes = wildcard.matched_notes()
    assert notes
    assert all(n.key() == wildcard.key() and not n.is_wildcard() for n in notes)
    assert all(wildcard.is_matched(n) for n in notes)
    assert MusicPitch(60).matched_notes() == []
    assert not MusicPitch(60).is_matched(MusicPitch(60))


def test_range_concrete_is_symmetric():
    a, b = MusicPitch(60), MusicPitch(64)
    expected = [MusicPitch(p) for p in range(60, 65)]
    assert MusicPitch.range(a, b) == expected
    assert MusicPitch.range(b, a) == expected


def test_range_concrete_to_wildcard():
    result = MusicPitch.range(MusicPitch(60), MusicPitch.from_string("E?"))
    assert result == MusicPitch.range(MusicPitch(60), MusicPitch.from_string("E5"))


def test_range_wildcard_to_concrete():
    result = MusicPitch.range(MusicPitch.from_string("C?"), MusicPitch(64))
    assert result == MusicPitch.range(MusicPitch(60), MusicPitch(64))


def test_range_two_wildcards_ascending():
    result = MusicPitch.range(MusicPitch.from_string("C?"), MusicPitch.from_string("E?"))
    assert result == sorted(result)
    assert {p.key() for p in result} == {0, 1, 2, 3, 4}
    assert MusicPitch(60) in result and MusicPitch(64) in result


def test_range_two_wildcards_descending():
    result = MusicPitch.range(MusicPitch.from_string("E?"), MusicPitch.from_string("C?"))
    assert result == sorted(result)
    assert all(p.key() not in (1, 2, 3) for p in result)
    assert MusicPitch(52) in result and MusicPitch(60) in result