# Reference colors, unit RGB → unit HSB (hue as a fraction of a full turn).

RED_RGB = (1.0, 0.0, 0.0)
RED_HSB = (0.0, 1.0, 1.0)

GREEN_RGB = (0.0, 1.0, 0.0)
GREEN_HSB = (1 / 3, 1.0, 1.0)

BLUE_RGB = (0.0, 0.0, 1.0)
BLUE_HSB = (2 / 3, 1.0, 1.0)

YELLOW_RGB = (1.0, 1.0, 0.0)
YELLOW_HSB = (1 / 6, 1.0, 1.0)

CYAN_RGB = (0.0, 1.0, 1.0)
CYAN_HSB = (0.5, 1.0, 1.0)

MAGENTA_RGB = (1.0, 0.0, 1.0)
MAGENTA_HSB = (5 / 6, 1.0, 1.0)

WHITE_RGB = (1.0, 1.0, 1.0)
WHITE_HSB = (0.0, 0.0, 1.0)

BLACK_RGB = (0.0, 0.0, 0.0)
BLACK_HSB = (0.0, 0.0, 0.0)

GRAY_RGB = (0.5, 0.5, 0.5)
GRAY_HSB = (0.0, 0.0, 0.5)

samples_rgb_hsb = {
    RED_RGB: RED_HSB,
    GREEN_RGB: GREEN_HSB,
    BLUE_RGB: BLUE_HSB,
    YELLOW_RGB: YELLOW_HSB,
    CYAN_RGB: CYAN_HSB,
    MAGENTA_RGB: MAGENTA_HSB,
    WHITE_RGB: WHITE_HSB,
    BLACK_RGB: BLACK_HSB,
    GRAY_RGB: GRAY_HSB,
    (1.0, 0.5, 0.0): (1 / 12, 1.0, 1.0),
    (0.5, 0.2, 1.0): (4.375 / 6, 0.8, 1.0),
    (0.2, 0.4, 0.6): (3.5 / 6, 2 / 3, 0.6),
    (0.8, 0.2, 0.4): (17 / 18, 0.75, 0.8),
}

# Colors with chroma, safe for RGB → HSB → RGB round trips.
samples_chromatic_rgb = [
    rgb for rgb, (_, saturation, _) in samples_rgb_hsb.items() if saturation > 0
]
