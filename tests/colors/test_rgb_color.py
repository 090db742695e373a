import pytest
from prismatica import RGB, HSL, OKLCH, InvalidArgument


def test_channels_round_and_clamp():
    c = RGB(300, -5, 127.5)
    assert c.channels == (255, 0, 128)
    assert c.alpha == 100

def test_immutable():
    c = RGB(1, 2, 3)
    with pytest.raises(AttributeError):
        c.red = 10
    with pytest.raises(AttributeError):
        c.extra = 1

def test_equality_and_hash_include_alpha():
    assert RGB(1, 2, 3) == RGB(1, 2, 3)
    assert RGB(1, 2, 3) != RGB(1, 2, 3, alpha=50)
    assert len({RGB(1, 2, 3), RGB(1, 2, 3), RGB(3, 2, 1)}) == 2
    assert RGB(255, 0, 0) != HSL(0, 100, 50)

def test_same_space_conversion_is_identity():
    c = RGB(10, 20, 30)
    assert c.to_rgb() is c
    assert c.convert("rgb") is c

def test_conversions_preserve_alpha():
    c = RGB(255, 87, 51, alpha=40)
    assert c.to_hsl().alpha == 40
    assert c.to_oklch().alpha == 40
    assert c.to_hsl() == HSL(11, 100, 60, alpha=40)

def test_convert_rejects_unknown_space():
    with pytest.raises(InvalidArgument):
        RGB(0, 0, 0).convert("cmyk")

def test_hex():
    assert RGB(255, 87, 51).to_hex() == "#ff5733"
    assert str(RGB(0, 0, 0)) == "#000000"

def test_blend_linear_channels_and_alpha():
    a = RGB(0, 0, 0, alpha=100)
    b = RGB(255, 100, 50, alpha=0)
    mid = a.blend(b, 0.5)
    assert mid.channels == (128, 50, 25)
    assert mid.alpha == 50

def test_blend_amount_is_clamped():
    a, b = RGB(10, 10, 10), RGB(200, 200, 200)
    assert a.blend(b, -1) == a
    assert a.blend(b, 2) == b

def test_blend_converts_other_space():
    red = RGB(255, 0, 0)
    assert red.blend(HSL(0, 100, 50), 0.5) == red

def test_lighten_darken():
    c = RGB(100, 100, 100)
    assert c.lighten(0.5).channels == (178, 178, 178)
    assert c.darken(0.5).channels == (50, 50, 50)
    assert c.lighten().channels == (116, 116, 116)
    assert RGB(0, 0, 0, alpha=30).lighten(1).alpha == 30

def test_derive_is_deterministic():
    assert RGB.derive(12345) == RGB.derive(12345)
    assert RGB.derive(12345) != RGB.derive(54321)

def test_derive_formula():
    # bytes: r=0x40, g=0x80, b=0xC0; average 128
    seed = 0xC08040
    c = RGB.derive(seed, brightness=127.5, saturation=1.0)
    assert c.channels == (0x40, 0x80, 0xC0)
    gray = RGB.derive(seed, brightness=127.5, saturation=0.0)
    assert gray.channels == (128, 128, 128)

def test_derive_masks_to_32_bits():
    assert RGB.derive(-1) == RGB.derive(0xFFFFFFFF)

def test_derive_rejects_non_integer_seed():
    with pytest.raises(InvalidArgument, match="Seed must be an integer"):
        RGB.derive(1.5)
    with pytest.raises(InvalidArgument):
        RGB.derive("abc")

def test_to_oklch_of_white():
    c = RGB(255, 255, 255).to_oklch()
    assert isinstance(c, OKLCH)
    assert c.lightness == pytest.approx(1.0)
    assert c.chroma == 0.0
