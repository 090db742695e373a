from prismatica.utils import value_or_default, round_half_up, lerp

def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0
    assert value_or_default("", "x") == ""

def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-2.5) == -3
    assert round_half_up(-0.4) == 0

def test_lerp():
    assert lerp(10, 20, 0) == 10
    assert lerp(10, 20, 1) == 20
    assert lerp(10, 20, 0.25) == 12.5
