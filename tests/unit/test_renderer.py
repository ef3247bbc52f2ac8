# tests/unit/test_renderer.py

import math
import random

import numpy as np
import pytest

from spritegen.bits import BytesBitSource, SeededBitSource
from spritegen.examples.masks import spaceship
from spritegen.options import GenerationOptions
from spritegen.renderer.sprite import (
    band_hues,
    border_color,
    brightness_arch,
    is_new_color,
    pixel_grid,
    render,
)
from spritegen.resolve import resolve
from spritegen.types import Pixel
from spritegen.utils.color import hsl2rgb
from spritegen.utils.image import to_image
from tests.test_utils import ScriptedBits, make_mask

# resolved 3x3 quadrant, mirrored horizontally into 6x3
RESOLVED_ROWS = [" --", "-OO", " --"]

# unmirrored and asymmetric, so either gradient axis is observable
LOPSIDED_ROWS = ["-O ", "OO-", " O-", "OOO"]


def make_options(colored: bool, seed: int = 42, **kwargs) -> GenerationOptions:
    return GenerationOptions(colored=colored, bits=ScriptedBits(seed=seed), **kwargs)


@pytest.mark.parametrize(
    "edge_brightness, expected",
    [(0.0, 0), (0.3, 76), (0.5, 128), (1.0, 255), (1.5, 255)],
)
def test_border_color_colored_gray(edge_brightness: float, expected: int) -> None:
    options = make_options(colored=True, edge_brightness=edge_brightness)
    assert border_color(options) == (expected, expected, expected, 255)


def test_border_color_uncolored_black() -> None:
    options = make_options(colored=False, edge_brightness=0.9)
    assert border_color(options) == (0, 0, 0, 255)


def test_is_new_color_bounds() -> None:
    rng = random.Random(0)
    for _ in range(500):
        assert 0.0 <= is_new_color(rng) <= 1.0


def test_band_hues_zero_variation_keeps_hue() -> None:
    hues = band_hues(random.Random(3), 0.25, 40, color_variations=0.0)
    assert hues == [0.25] * 40


def test_band_hues_full_variation_resamples() -> None:
    hues = band_hues(random.Random(3), 0.25, 40, color_variations=1.0)
    assert len(set(hues)) > 1
    assert all(0.0 <= h < 1.0 for h in hues)


def test_band_hues_draws_three_values_per_index() -> None:
    a, b = random.Random(8), random.Random(8)
    band_hues(a, 0.5, 6, color_variations=0.0)
    for _ in range(18):
        b.random()
    assert a.random() == b.random()


def test_brightness_arch() -> None:
    arch = brightness_arch(12, brightness_noise=0.3)
    assert arch[0] == 0.0
    assert arch[6] == pytest.approx(0.7)
    assert max(arch) == arch[6]
    for u in range(1, 12):
        assert arch[u] == pytest.approx(arch[12 - u])
    assert arch[3] == pytest.approx(math.sin(math.pi / 4) * 0.7)


def test_pixel_grid_applies_mirroring() -> None:
    mask = make_mask(RESOLVED_ROWS, mirror_x=True)
    grid = pixel_grid(mask)
    assert grid.shape == (3, 6)
    np.testing.assert_array_equal(grid, grid[:, ::-1])


def test_render_uncolored_draws_only_black_borders() -> None:
    mask = make_mask(RESOLVED_ROWS, mirror_x=True)
    out = render(mask, make_options(colored=False))
    assert out.shape == (3, 6, 4)
    assert out.dtype == np.uint8

    pixels = pixel_grid(mask)
    border = pixels == -1
    assert (out[border] == [0, 0, 0, 255]).all()
    assert (out[~border] == 0).all()


def test_render_colored_paints_body_and_gray_borders() -> None:
    mask = make_mask(RESOLVED_ROWS, mirror_x=True)
    out = render(mask, make_options(colored=True))
    pixels = pixel_grid(mask)

    assert (out[pixels == -1] == [76, 76, 76, 255]).all()
    assert (out[pixels == 3][:, 3] == 255).all()
    assert (out[pixels == 0] == 0).all()


def test_render_body_at_outer_origin_is_black() -> None:
    # u == 0 whichever axis is chosen, and sin(0) == 0
    mask = make_mask(["O"])
    out = render(mask, make_options(colored=True))
    assert tuple(out[0, 0]) == (0, 0, 0, 255)


def test_render_is_deterministic_for_seed() -> None:
    mask = make_mask(RESOLVED_ROWS, mirror_x=True)
    a = render(mask, make_options(colored=True, seed=7))
    b = render(mask, make_options(colored=True, seed=7))
    np.testing.assert_array_equal(a, b)


def test_render_reads_seed_value_once() -> None:
    options = make_options(colored=True)
    render(make_mask(RESOLVED_ROWS), options)
    assert options.bits.seed_calls == 1
    assert options.bits.consumed == 0


def test_render_alpha_is_mirror_symmetric() -> None:
    mask = make_mask(RESOLVED_ROWS, mirror_x=True)
    for seed in range(5):
        out = render(mask, make_options(colored=True, seed=seed))
        np.testing.assert_array_equal(out[..., 3], out[:, ::-1, 3])


def test_render_empty_mask() -> None:
    out = render(make_mask([]), make_options(colored=True))
    assert out.shape == (0, 0, 4)


def test_to_image() -> None:
    out = render(make_mask(RESOLVED_ROWS, mirror_x=True), make_options(colored=True))
    image = to_image(out)
    assert image.mode == "RGBA"
    assert image.size == (6, 3)
    assert image.getpixel((0, 1)) == tuple(int(c) for c in out[1, 0])


def test_to_image_rejects_wrong_shape() -> None:
    with pytest.raises(ValueError):
        to_image(np.zeros((4, 4, 3), dtype=np.uint8))


def reference_render(mask, options: GenerationOptions, seed: int):
    """Pixel-by-pixel rendering with the draws taken in their documented order."""
    rng = random.Random(seed & 0xFFFF_FFFF_FFFF_FFFF)
    hue = rng.random()
    saturation = min(max(rng.random() * options.saturation, 0.0), 1.0)
    vertical = rng.random() > 0.5
    outer = mask.image_height if vertical else mask.image_width

    hues = []
    for _ in range(outer):
        stat = abs(sum(rng.random() * 2.0 - 1.0 for _ in range(3)) / 3.0)
        if stat > 1.0 - options.color_variations:
            hue = rng.random()
        hues.append(hue)

    expected = np.zeros((mask.image_height, mask.image_width, 4), dtype=np.uint8)
    for y in range(mask.image_height):
        for x in range(mask.image_width):
            pixel = mask.pixel_at(x, y)
            u = y if vertical else x
            if pixel == Pixel.BORDER:
                expected[y, x] = (76, 76, 76, 255)
            elif pixel == Pixel.BODY:
                arch = math.sin(u / outer * math.pi)
                lightness = arch * (1.0 - options.brightness_noise)
                expected[y, x] = hsl2rgb(hues[u], saturation, lightness)
    return expected, vertical


def test_render_matches_draw_order_reference() -> None:
    mask = make_mask(LOPSIDED_ROWS)
    axes = set()
    for seed in range(16):
        options = make_options(colored=True, seed=seed, color_variations=0.5)
        expected, vertical = reference_render(mask, options, seed)
        axes.add(vertical)
        np.testing.assert_array_equal(render(mask, options), expected)
    assert axes == {True, False}


def test_render_negative_seed_uses_twos_complement_pattern() -> None:
    mask = make_mask(LOPSIDED_ROWS)
    a = render(mask, make_options(colored=True, seed=-1))
    b = render(mask, make_options(colored=True, seed=2**64 - 1))
    np.testing.assert_array_equal(a, b)


def test_render_opposite_seeds_differ() -> None:
    resolved = resolve(spaceship(), SeededBitSource(3))
    minus_one = GenerationOptions(colored=True, bits=BytesBitSource(b"\xff" * 8))
    plus_one = GenerationOptions(
        colored=True, bits=BytesBitSource(b"\x00" * 7 + b"\x01")
    )
    assert minus_one.bits.seed_value() == -1
    assert plus_one.bits.seed_value() == 1
    assert not np.array_equal(render(resolved, minus_one), render(resolved, plus_one))
