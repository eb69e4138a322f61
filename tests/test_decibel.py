import pytest

from svscraft.decibel import decibel_to_linear, linear_to_decibel


def test_zero_decibel_maps_to_zero():
    assert decibel_to_linear(0) == pytest.approx(0.0, abs=1e-12)
    assert linear_to_decibel(0) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("db", [-60.0, -24.0, -6.0, 0.0, 3.5, 6.0])
def test_round_trip(db):
    assert linear_to_decibel(decibel_to_linear(db)) == pytest.approx(db)


@pytest.mark.parametrize("factor", [-12.0, -48.0])
def test_round_trip_custom_factor(factor):
    for db in (-30.0, -1.0, 2.0):
        assert linear_to_decibel(decibel_to_linear(db, factor), factor) == pytest.approx(db)


def test_monotonic():
    values = [decibel_to_linear(db) for db in (-40.0, -20.0, -10.0, 0.0, 5.0)]
    assert values == sorted(values)


def test_out_of_domain_raises():
    with pytest.raises(ValueError):
        linear_to_decibel(-10.0)