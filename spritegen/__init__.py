"""spritegen
=========

Procedural, seed-reproducible pixel-art sprites from small quadrant masks.

Aggregate import surface so callers can write::

    from spritegen import Generator, Mask, BytesBitSource, default_options

A :class:`Mask` holds the authored quadrant (with ambiguous cells), a bit
source resolves the ambiguity, and the renderer paints the resolved bitmap
into an RGBA ``numpy`` grid. See :mod:`spritegen.resolve` and
:mod:`spritegen.renderer.sprite` for the two stages.
"""

from spritegen.bits import BitSource, BytesBitSource, RandomBitSource, SeededBitSource
from spritegen.errors import (
    InsufficientSeedMaterialError,
    MalformedTemplateError,
    PixelOutOfBoundsError,
    SpriteGenError,
)
from spritegen.generator import Generator
from spritegen.mask import Mask
from spritegen.options import GenerationOptions, default_options
from spritegen.resolve import resolve
from spritegen.types import Pixel

__all__ = [
    "BitSource",
    "BytesBitSource",
    "RandomBitSource",
    "SeededBitSource",
    "SpriteGenError",
    "MalformedTemplateError",
    "PixelOutOfBoundsError",
    "InsufficientSeedMaterialError",
    "Generator",
    "Mask",
    "GenerationOptions",
    "default_options",
    "resolve",
    "Pixel",
]
