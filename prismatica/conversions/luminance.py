from ..types.color_types import MAX_CHANNEL

RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722


def linearize_channel(channel: float) -> float:
    """sRGB gamma expansion of a 0-255 channel."""
    c = channel / MAX_CHANNEL
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: float, g: float, b: float) -> float:
    return (
        RED_WEIGHT * linearize_channel(r)
        + GREEN_WEIGHT * linearize_channel(g)
        + BLUE_WEIGHT * linearize_channel(b)
    )


def contrast_ratio(l1: float, l2: float) -> float:
    """WCAG contrast ratio, always >= 1 regardless of argument order."""
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
