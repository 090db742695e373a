import pytest
from prismatica.units import Hue, Saturation, Lightness, Chroma, Alpha


def test_hue_wraps():
    assert Hue(370) == Hue(10)
    assert Hue(-30) == 330
    assert Hue(360) == 0
    assert Hue(720.5) == pytest.approx(0.5)

def test_hue_tiny_negative_stays_below_360():
    assert Hue(-1e-20) == 0.0
    assert Hue(-1e-13) < 360

def test_percent_units_clamp():
    assert Saturation(150) == 100
    assert Saturation(-5) == 0
    assert Lightness(42.5) == 42.5
    assert Lightness(101) == 100

def test_chroma_clamps_to_half():
    assert Chroma(0.7) == 0.5
    assert Chroma(-0.1) == 0.0
    assert Chroma(0.123) == pytest.approx(0.123)

def test_alpha_default_and_ratio():
    assert Alpha() == 100
    assert Alpha().ratio == 1.0
    assert Alpha(25).ratio == 0.25
    assert Alpha(250) == 100

def test_units_behave_like_floats():
    assert Hue(350) + 20 == 370  # plain float arithmetic, no re-wrap
    assert isinstance(Saturation(10) * 2, float)
    assert repr(Hue(10)) == "Hue(10.0)"
