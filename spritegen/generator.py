"""Sprite generator facade.

A :class:`Generator` pairs a shared, read-only :class:`~spritegen.mask.Mask`
with a :class:`~spritegen.options.GenerationOptions` that owns the bit
source. Every :meth:`Generator.sprite` call resolves a fresh copy of the
mask and renders it, consuming more of the bit source, so consecutive calls
give different sprites. Replaying an identically seeded source reproduces
them exactly.

Usage:

``Generator(spaceship(), default_options(colored=True)).sprite_image()``

Not thread-safe: serialize ``sprite()`` calls on a shared generator.
"""

import logging
from typing import Optional

from PIL import Image

from spritegen.mask import Mask
from spritegen.options import GenerationOptions, default_options
from spritegen.renderer.sprite import render
from spritegen.resolve import resolve
from spritegen.types import ColorGrid
from spritegen.utils.image import to_image

logger = logging.getLogger(__name__)


class Generator:
    mask: Mask
    options: GenerationOptions

    def __init__(self, mask: Mask, options: Optional[GenerationOptions] = None):
        self.mask = mask
        self.options = options if options is not None else default_options()
        logger.debug("mask can represent %d bits", mask.ambiguity_count())

    def resolve(self) -> Mask:
        """Resolve a copy of the mask, consuming one bit per ambiguous cell."""
        return resolve(self.mask, self.options.bits)

    def sprite(self) -> ColorGrid:
        """Resolve and render a new sprite as an ``(H, W, 4)`` uint8 RGBA grid."""
        return render(self.resolve(), self.options)

    def sprite_image(self) -> Image.Image:
        return to_image(self.sprite())
