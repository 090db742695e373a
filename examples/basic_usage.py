"""Basic Prismatica usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from prismatica import (
    RGB,
    HSL,
    OKLCH,
    Direction,
    AnsiMode,
    linear,
)


def demonstrate_colors() -> None:
    # Construct colors and convert between spaces.
    accent = RGB(255, 128, 64)
    print("RGB hex:", accent.to_hex())
    print("RGB -> HSL:", accent.to_hsl())
    print("RGB -> OKLCH:", accent.to_oklch().to_css_oklch())
    print("Luminance:", round(accent.luminance(), 4))

    text = HSL(220, 30, 60)
    background = HSL(0, 0, 100)
    print("Contrast before:", round(text.contrast_ratio(background), 2))
    print("Contrast after:", round(text.adjust_for_contrast(background).contrast_ratio(background), 2))


def demonstrate_harmonies() -> None:
    base = HSL(200, 70, 45)
    print("Complementary:", base.complementary())
    print("Triadic:", [str(c) for c in base.triadic()])
    print("Shades:", [str(c) for c in base.shades(steps=3)])
    # Harmonies come back in the caller's own space.
    print("OKLCH tints:", [c.to_css_oklch() for c in OKLCH(0.55, 0.12, 30).tints(steps=3)])


def demonstrate_gradients() -> None:
    # Missing positions are spread evenly between their neighbours.
    gradient = linear(
        [RGB(255, 0, 0), (RGB(255, 255, 0), 0.3), RGB(0, 128, 0), RGB(0, 0, 255)],
        direction=Direction.LEFT_TO_RIGHT,
    )
    print("Stop positions:", [round(s.position, 3) for s in gradient.stops])

    bitmap = gradient.rasterize(width=8, height=2)
    print("First row:", [str(c) for c in bitmap.pixels[0]])
    print("Array shape:", bitmap.to_array().shape)

    # Same stops interpolated along the shortest hue arc.
    ring = linear([OKLCH(0.6, 0.15, 330), OKLCH(0.6, 0.15, 30)], direction=90)
    print("OKLCH midpoint:", ring.color_at(0.5).to_css_oklch())


def demonstrate_terminal() -> None:
    color = RGB(0, 175, 135)
    for mode in AnsiMode:
        params = color.to_ansi(mode=mode)
        print(f"{mode.value:>9}: \x1b[{params}m██████\x1b[0m ({params})")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_harmonies()
    demonstrate_gradients()
    demonstrate_terminal()
