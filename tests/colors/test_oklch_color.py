import pytest
from prismatica import OKLCH, RGB, HSL, InvalidArgument, Lightness


def test_construction():
    c = OKLCH(0.58, 0.15, 400)
    assert c.lightness == pytest.approx(0.58)
    assert isinstance(c.lightness_percentage, Lightness)
    assert c.lightness_percentage == pytest.approx(58)
    assert c.chroma == pytest.approx(0.15)
    assert c.hue == pytest.approx(40)

def test_construction_clamps():
    c = OKLCH(1.5, 0.9, -10)
    assert c.lightness == 1.0
    assert c.chroma == 0.5
    assert c.hue == 350

def test_equality_uses_tolerance():
    assert OKLCH(0.5, 0.1, 120) == OKLCH(0.505, 0.105, 120.005)
    assert OKLCH(0.5, 0.1, 120) != OKLCH(0.52, 0.1, 120)
    assert hash(OKLCH(0.5, 0.1, 120)) == hash(OKLCH(0.505, 0.1, 120))

def test_blend_takes_shortest_arc():
    a = OKLCH(0.5, 0.1, 350)
    b = OKLCH(0.5, 0.1, 10)
    assert a.blend(b, 0.5).hue == 0
    assert OKLCH(0.5, 0.1, 10).blend(OKLCH(0.5, 0.1, 350), 0.25).hue == pytest.approx(5)

def test_blend_linear_lightness_chroma_alpha():
    a = OKLCH(0.2, 0.1, 0, alpha=100)
    b = OKLCH(0.6, 0.3, 90, alpha=0)
    mid = a.blend(b, 0.5)
    assert mid.lightness == pytest.approx(0.4)
    assert mid.chroma == pytest.approx(0.2)
    assert mid.hue == pytest.approx(45)
    assert mid.alpha == pytest.approx(50)

def test_lighten_darken_clamp():
    assert OKLCH(0.5, 0.1, 0).lighten().lightness == pytest.approx(0.53)
    assert OKLCH(0.5, 0.1, 0).darken(0.1).lightness == pytest.approx(0.4)
    assert OKLCH(0.99, 0.1, 0).lighten(0.1).lightness == 1.0
    assert OKLCH(0.01, 0.1, 0).darken(0.1).lightness == 0.0

def test_saturate_desaturate_rotate():
    c = OKLCH(0.5, 0.39, 350)
    assert c.saturate().chroma == pytest.approx(0.4)
    assert OKLCH(0.5, 0.01, 0).desaturate().chroma == 0.0
    assert OKLCH(0.5, 0.1, 0).desaturate(0.05).chroma == pytest.approx(0.05)
    assert c.rotate().hue == pytest.approx(0)
    assert c.rotate(-20).hue == pytest.approx(330)

def test_rgb_conversion_and_alpha():
    c = OKLCH(0.5, 0.0, 0, alpha=25)
    assert c.to_rgb() == RGB(128, 128, 128, alpha=25)
    assert isinstance(c.to_hsl(), HSL)
    assert c.to_hsl().alpha == 25

def test_luminance_goes_through_rgb():
    c = OKLCH(0.5, 0.2, 40)
    assert c.luminance() == pytest.approx(c.to_rgb().luminance())

def test_css_output():
    c = OKLCH(0.58, 0.15, 180)
    assert c.to_css_oklch() == "oklch(0.5800 0.1500 180.00)"
    assert str(c) == c.to_css_oklch()
    assert c.to_css_vars() == "--ul:0.5800;--uc:0.1500;--uh:180.00;"
    assert c.to_css_color_mix() == "color-mix(in oklch, oklch(0.5800 0.1500 180.00) 72%, var(--bg) 28%)"
    assert c.to_css_color_mix("white", 50, 50) == "color-mix(in oklch, oklch(0.5800 0.1500 180.00) 50%, white 50%)"

def test_derive():
    seed = 0xABCD12
    h32 = seed
    c = OKLCH.derive(seed)
    assert c.lightness == pytest.approx(0.58)
    assert c.hue == pytest.approx((137.508 * (h32 % 997)) % 360)
    assert c.chroma == pytest.approx(0.10 + ((h32 >> 8) & 0xFF) / 255 * 0.08)
    assert OKLCH.derive(seed) == c
    with pytest.raises(InvalidArgument):
        OKLCH.derive(None)
