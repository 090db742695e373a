# No dependencies
from enum import Enum


class AnsiMode(str, Enum):
    TRUECOLOR = "truecolor"
    PALETTE_256 = "256"
    PALETTE_16 = "16"


class Layer(str, Enum):
    FOREGROUND = "foreground"
    BACKGROUND = "background"


DEFAULT_ANSI_MODE = AnsiMode.TRUECOLOR
DEFAULT_LAYER = Layer.FOREGROUND

# Channels whose spread (max - min) is below this are mapped to the gray ramp
GRAYSCALE_THRESHOLD = 10

# A channel's cube bucket is the number of thresholds it reaches
CUBE_THRESHOLDS = (48, 115, 155, 195, 235)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

# Index order matches SGR 30-37 / 90-97
STANDARD_COLORS = (
    (0, 0, 0),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

layer_sgr_prefixes = {
    Layer.FOREGROUND: 38,
    Layer.BACKGROUND: 48,
}

layer_bright_bases = {
    Layer.FOREGROUND: 90,
    Layer.BACKGROUND: 100,
}
