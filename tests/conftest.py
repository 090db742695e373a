import sys
import os

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from prismatica import RGB, HSL, OKLCH  # noqa: E402

# (r, g, b) -> (h, s, l) with whole-number hsl
samples_rgb_hsl = {
    (0, 0, 0): (0, 0, 0),
    (255, 255, 255): (0, 0, 100),
    (128, 128, 128): (0, 0, 50),
    (255, 0, 0): (0, 100, 50),
    (0, 255, 0): (120, 100, 50),
    (0, 0, 255): (240, 100, 50),
    (255, 255, 0): (60, 100, 50),
    (0, 255, 255): (180, 100, 50),
    (255, 0, 255): (300, 100, 50),
    (255, 87, 51): (11, 100, 60),
    (128, 0, 0): (0, 100, 25),
}


@pytest.fixture
def rgb_hsl_samples():
    return samples_rgb_hsl


@pytest.fixture
def sample_colors():
    """One color per space, all with a non-default alpha."""
    return [
        RGB(255, 87, 51, alpha=80),
        HSL(200, 60, 40, alpha=80),
        OKLCH(0.6, 0.15, 200, alpha=80),
    ]
