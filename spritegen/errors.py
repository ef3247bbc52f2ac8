"""Exception hierarchy.

All failures are deterministic functions of their input; nothing here is
retried. Each error also derives from the built-in exception a caller would
naturally catch (``ValueError`` / ``IndexError``).
"""


class SpriteGenError(Exception):
    """Base class for all spritegen errors."""


class MalformedTemplateError(SpriteGenError, ValueError):
    """A textual mask template has ragged rows or an unknown character."""


class PixelOutOfBoundsError(SpriteGenError, IndexError):
    """A pixel was addressed outside the (mirrored) image rectangle."""


class InsufficientSeedMaterialError(SpriteGenError, ValueError):
    """A byte-backed bit source holds fewer than 8 bytes of seed material."""
