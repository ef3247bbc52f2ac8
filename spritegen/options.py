"""Generation options.

Numeric fields are free-form floats and are not validated; behaviour for
values outside ``[0, 1]`` is unspecified. Use :func:`dataclasses.replace`
to derive variants of an options object.
"""

from dataclasses import dataclass, field
from typing import Any

from spritegen.bits import BitSource, RandomBitSource

DEFAULT_COLORED = False
DEFAULT_EDGE_BRIGHTNESS = 0.3
DEFAULT_COLOR_VARIATIONS = 0.2
DEFAULT_BRIGHTNESS_NOISE = 0.3
DEFAULT_SATURATION = 0.5


@dataclass
class GenerationOptions:
    """Renderer configuration plus the bit source that drives generation.

    Attributes:
        colored: Paint body cells with a hue gradient; otherwise only borders
            are drawn (in black).
        edge_brightness: Gray level of borders in coloured mode.
        color_variations: Probability knob for hue bands changing along the
            outer axis. ``0`` keeps a single hue.
        brightness_noise: Scales the brightness arch down by ``1 - noise``.
        saturation: Upper bound of the randomly drawn saturation.
        bits: Bit source. Owned by the options; not shared between generators.
    """

    colored: bool = DEFAULT_COLORED
    edge_brightness: float = DEFAULT_EDGE_BRIGHTNESS
    color_variations: float = DEFAULT_COLOR_VARIATIONS
    brightness_noise: float = DEFAULT_BRIGHTNESS_NOISE
    saturation: float = DEFAULT_SATURATION
    bits: BitSource = field(default_factory=RandomBitSource)


def default_options(**overrides: Any) -> GenerationOptions:
    """Defaults with a fresh self-reseeding random bit source."""
    return GenerationOptions(**overrides)
