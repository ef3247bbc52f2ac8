import logging
import math
import random
from typing import List, Tuple

import numpy as np

from spritegen.mask import Mask
from spritegen.options import GenerationOptions
from spritegen.types import RGBA, ColorGrid, Pixel
from spritegen.utils.color import hsl2rgb_np

logger = logging.getLogger(__name__)

BLACK: RGBA = (0, 0, 0, 255)
UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(min(value, hi), lo)


def border_color(options: GenerationOptions) -> RGBA:
    """Gray derived from ``edge_brightness`` when coloured, opaque black otherwise."""
    if not options.colored:
        return BLACK
    gray = int(clamp(round(255.0 * options.edge_brightness), 0, 255))
    return gray, gray, gray, 255


def is_new_color(rng: random.Random) -> float:
    """Magnitude of the mean of three uniform draws in ``[-1, 1]``."""
    return abs(
        (
            (rng.random() * 2.0 - 1.0)
            + (rng.random() * 2.0 - 1.0)
            + (rng.random() * 2.0 - 1.0)
        )
        / 3.0
    )


def band_hues(
    rng: random.Random, hue: float, length: int, color_variations: float
) -> List[float]:
    """
    Hue for each outer index. A new hue is drawn whenever the three-draw noise
    statistic exceeds ``1 - color_variations`` and holds until the next change.
    """
    hues: List[float] = []
    for u in range(length):
        if is_new_color(rng) > (1.0 - color_variations):
            hue = rng.random()
            logger.debug("Hue band change at u=%d -> %.4f", u, hue)
        hues.append(hue)
    return hues


def brightness_arch(length: int, brightness_noise: float) -> List[float]:
    """Half-sine brightness along the outer axis, darkest at both ends."""
    return [
        math.sin((u / length) * math.pi) * (1.0 - brightness_noise)
        for u in range(length)
    ]


def pixel_grid(mask: Mask) -> np.ndarray:
    """Image-space (mirrored) pixel states as an ``(H, W)`` int8 array."""
    width, height = mask.image_width, mask.image_height
    return np.array(
        [mask.pixel_at(x, y) for y in range(height) for x in range(width)],
        dtype=np.int8,
    ).reshape(height, width)


def gradient_axis(rng: random.Random, mask: Mask) -> Tuple[bool, int]:
    """Pick the gradient axis. Returns ``(vertical, outer_len)``."""
    if rng.random() > 0.5:
        return True, mask.image_height
    return False, mask.image_width


def render(mask: Mask, options: GenerationOptions) -> ColorGrid:
    """
    Paint a resolved mask into an ``(H, W, 4)`` uint8 RGBA grid.

    The renderer's continuous randomness comes from a ``random.Random`` seeded
    with the unsigned 64-bit pattern of ``options.bits.seed_value()``. Draw
    order is fixed: initial hue, saturation, gradient axis, then per outer
    index the three-draw band statistic and (on a band change) the new hue.

    With a vertical gradient the outer axis runs over rows, otherwise over
    columns. Hue bands and the brightness arch both follow the outer axis.
    Cells that are neither ``BORDER`` nor (when coloured) ``BODY`` stay fully
    transparent.
    """
    # two's-complement pattern, so s and -s seed different streams
    rng = random.Random(options.bits.seed_value() & UINT64_MASK)

    hue = rng.random()
    saturation = clamp(rng.random() * options.saturation)
    edge = border_color(options)
    vertical, outer_len = gradient_axis(rng, mask)
    logger.debug(
        "Rendering %dx%d sprite, %s gradient",
        mask.image_width,
        mask.image_height,
        "vertical" if vertical else "horizontal",
    )

    hues = band_hues(rng, hue, outer_len, options.color_variations)

    pixels = pixel_grid(mask)
    out: ColorGrid = np.zeros((mask.image_height, mask.image_width, 4), dtype=np.uint8)
    out[pixels == Pixel.BORDER] = edge

    if not options.colored:
        return out

    body = pixels == Pixel.BODY
    if not body.any():
        return out

    ys, xs = np.indices(pixels.shape)
    u = ys if vertical else xs
    hue_grid = np.asarray(hues, dtype=np.float64)[u]
    brightness_grid = np.asarray(
        brightness_arch(outer_len, options.brightness_noise), dtype=np.float64
    )[u]

    r, g, b = hsl2rgb_np(hue_grid, np.float64(saturation), brightness_grid)
    out[..., 0][body] = r[body]
    out[..., 1][body] = g[body]
    out[..., 2][body] = b[body]
    out[..., 3][body] = 255
    return out
