import pytest

from svscraft.longtime import LongTime


def test_negative_is_clamped_to_zero():
    assert LongTime(-100) == LongTime()
    assert LongTime(-100).total_msec() == LongTime().total_msec()


@pytest.mark.parametrize("minute,second,msec", [(0, 0, 0), (1, 2, 3), (59, 59, 999), (125, 7, 40)])
def test_parts_round_trip(minute, second, msec):
    lt = LongTime.from_parts(minute, second, msec)
    assert lt.minute() == minute
    assert lt.second() == second
    assert lt.msec() == msec


def test_default_format():
    assert str(LongTime.from_parts(1, 2, 3)) == "1:02.003"


def test_custom_widths():
    assert LongTime.from_parts(1, 2, 3).to_string(3, 2, 1) == "001:02.3"


def test_minutes_and_seconds():
    assert LongTime.from_string("1:30") == LongTime.from_parts(1, 30, 0)


def test_seconds_only():
    assert LongTime.from_string(" 12 ") == LongTime.from_parts(0, 12, 0)


def test_hours_with_fraction():
    assert LongTime.from_string("1:02:03.5") == LongTime.from_parts(62, 3, 500)


def test_fullwidth_separators():
    assert LongTime.from_string("1\uff1a30\uff0e25") == LongTime.from_string("1:30.25")


def test_invalid_string_raises():
    with pytest.raises(ValueError):
        LongTime.from_string("abc")


def test_ordering_and_hash():
    a, b = LongTime(5), LongTime(10)
    assert a < b
    assert b >= a
    assert sorted([b, a]) == [a, b]
    assert hash(LongTime(5)) == hash(a)
    assert len({a, LongTime(5), b}) == 2


def test_repr_wraps_string():
    lt = LongTime.from_parts(3, 4, 5)
    assert repr(lt) == f"LongTime({lt})"