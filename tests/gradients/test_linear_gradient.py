import pytest
import numpy as np
from prismatica import (
    RGB,
    HSL,
    OKLCH,
    Direction,
    GradientError,
    InvalidArgument,
    Stop,
    RGBLinearGradient,
    HSLLinearGradient,
    OKLCHLinearGradient,
    linear,
)
from prismatica.gradients import pixel_positions

RED = RGB(255, 0, 0)
YELLOW = RGB(255, 255, 0)
GREEN = RGB(0, 128, 0)
BLUE = RGB(0, 0, 255)
MAGENTA = RGB(255, 0, 255)


def test_build_auto_balances_positions():
    gradient = RGBLinearGradient.build([RED, (YELLOW, 0.3), GREEN, [BLUE, 0.9], MAGENTA])
    assert [s.position for s in gradient.stops] == pytest.approx([0.0, 0.3, 0.6, 0.9, 1.0])
    assert [s.color for s in gradient.stops] == [RED, YELLOW, GREEN, BLUE, MAGENTA]

def test_build_converts_other_spaces():
    gradient = RGBLinearGradient.build([HSL(0, 100, 50), BLUE])
    assert gradient.stops[0].color == RED
    assert isinstance(gradient.stops[0].color, RGB)

def test_build_rejects_non_colors():
    with pytest.raises(GradientError):
        RGBLinearGradient.build(["red", BLUE])

def test_default_direction_is_top_to_bottom():
    assert RGBLinearGradient.build([RED, BLUE]).direction == Direction.TOP_TO_BOTTOM
    assert RGBLinearGradient.build([RED, BLUE], direction=90).direction == Direction.LEFT_TO_RIGHT

def test_construction_needs_two_stops():
    with pytest.raises(GradientError, match="at least 2 stops"):
        RGBLinearGradient([Stop(RED, 0.0)])

def test_construction_rejects_wrong_variant():
    with pytest.raises(GradientError):
        RGBLinearGradient([Stop(RED, 0.0), Stop(HSL(0, 100, 50), 1.0)])

def test_construction_rejects_non_stops():
    with pytest.raises(GradientError, match="must be a Stop"):
        RGBLinearGradient([Stop(RED, 0.0), RED])

def test_construction_rejects_unsorted_stops():
    with pytest.raises(GradientError, match="sorted"):
        RGBLinearGradient([Stop(RED, 0.6), Stop(BLUE, 0.2)])

def test_gradient_error_is_invalid_argument():
    assert issubclass(GradientError, InvalidArgument)
    assert issubclass(GradientError, ValueError)

def test_rasterize_endpoints_are_exact():
    gradient = RGBLinearGradient.build([RED, BLUE], direction=Direction.LEFT_TO_RIGHT)
    bitmap = gradient.rasterize(width=3)
    assert bitmap.at(0) == RED
    assert bitmap.at(1) == RGB(128, 0, 128)
    assert bitmap.at(2) == BLUE

def test_rasterize_direction_top_to_bottom():
    gradient = RGBLinearGradient.build([RED, BLUE])
    bitmap = gradient.rasterize(width=2, height=3)
    assert bitmap.at(0, 0) == RED
    assert bitmap.at(1, 0) == RED
    assert bitmap.at(0, 2) == BLUE
    assert bitmap.width == 2 and bitmap.height == 3

def test_rasterize_single_pixel_is_midpoint():
    gradient = RGBLinearGradient.build([RGB(0, 0, 0), RGB(200, 100, 50)])
    assert gradient.rasterize().at(0) == RGB(100, 50, 25)

def test_rasterize_rejects_empty_sizes():
    gradient = RGBLinearGradient.build([RED, BLUE])
    with pytest.raises(InvalidArgument, match="width"):
        gradient.rasterize(width=0)
    with pytest.raises(InvalidArgument, match="height"):
        gradient.rasterize(width=1, height=0)

def test_equal_positions_return_start_color():
    gradient = RGBLinearGradient([Stop(RED, 0.0), Stop(GREEN, 0.5), Stop(BLUE, 0.5), Stop(MAGENTA, 1.0)])
    assert gradient.color_at(0.5) == GREEN
    assert gradient.bracket(0.5) == (gradient.stops[0], gradient.stops[1])
    assert gradient.color_at(0.75) == BLUE.blend(MAGENTA, 0.5)

def test_positions_outside_stops_hold_end_colors():
    gradient = RGBLinearGradient([Stop(RED, 0.2), Stop(BLUE, 0.8)])
    assert gradient.color_at(0.0) == RED
    assert gradient.color_at(1.0) == BLUE

def test_hsl_gradient_uses_hsl_blend():
    gradient = HSLLinearGradient.build([HSL(10, 50, 50), HSL(350, 50, 50)], direction=90)
    assert gradient.rasterize(width=3).at(1).hue == 180

def test_oklch_gradient_uses_shortest_arc():
    gradient = OKLCHLinearGradient.build([OKLCH(0.5, 0.1, 350), OKLCH(0.5, 0.1, 10)], direction=90)
    assert gradient.rasterize(width=3).at(1).hue == 0

def test_linear_picks_space_of_first_entry():
    assert isinstance(linear([HSL(0, 50, 50), HSL(90, 50, 50)]), HSLLinearGradient)
    assert isinstance(linear([(OKLCH(0.5, 0.1, 0), 0.0), OKLCH(0.6, 0.1, 0)]), OKLCHLinearGradient)

def test_linear_warns_on_mixed_spaces():
    with pytest.warns(UserWarning, match="Converting"):
        gradient = linear([RED, HSL(240, 100, 50)])
    assert isinstance(gradient, RGBLinearGradient)
    assert gradient.stops[1].color == BLUE

def test_linear_rejects_empty():
    with pytest.raises(GradientError):
        linear([])

def test_pixel_positions_grid():
    positions = pixel_positions(3, 1, 90)
    assert np.allclose(positions, [[0.0, 0.5, 1.0]])
    positions = pixel_positions(1, 3, 0)
    assert np.allclose(positions[:, 0], [1.0, 0.5, 0.0])
    positions = pixel_positions(2, 2, 45)
    assert positions.min() >= 0.0 and positions.max() <= 1.0

def test_gradient_is_immutable():
    gradient = RGBLinearGradient.build([RED, BLUE])
    with pytest.raises(AttributeError):
        gradient._stops = ()
