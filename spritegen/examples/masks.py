"""Built-in mask templates.

Each factory returns a fresh :class:`~spritegen.mask.Mask`; masks are
immutable, so the results may be cached and shared freely.

Examples
--------
>>> mask = get_mask("spaceship")
>>> (mask.image_width, mask.image_height)
(12, 12)
"""

from typing import Callable, Dict

from spritegen.mask import Mask

SPACESHIP_TEMPLATE = [
    "      ",
    "    ..",
    "    .-",
    "   ..-",
    "   ..-",
    "  ...-",
    " ...//",
    " ...//",
    " ...//",
    " ....-",
    "   ...",
    "      ",
]

# Left half of a small invader, mirrored horizontally.
INVADER_TEMPLATE = [
    "     ",
    "  . .",
    "   ..",
    "  ./O",
    " ..OO",
    " . ..",
    "  .  ",
    "     ",
]

# Top-left quadrant of a radial emblem, mirrored both ways.
EMBLEM_TEMPLATE = [
    "     ",
    "   ..",
    "  ../",
    " ..//",
    " .//O",
]


def spaceship() -> Mask:
    """6x12 quadrant mirrored horizontally into a 12x12 ship."""
    return Mask.from_template(SPACESHIP_TEMPLATE, mirror_x=True)


def invader() -> Mask:
    return Mask.from_template(INVADER_TEMPLATE, mirror_x=True)


def emblem() -> Mask:
    return Mask.from_template(EMBLEM_TEMPLATE, mirror_x=True, mirror_y=True)


MASK_REGISTRY: Dict[str, Callable[[], Mask]] = {
    "spaceship": spaceship,
    "invader": invader,
    "emblem": emblem,
}


def get_mask(name: str) -> Mask:
    if name not in MASK_REGISTRY:
        raise ValueError(
            f"Unknown mask: {name!r} (available: {', '.join(sorted(MASK_REGISTRY))})"
        )
    return MASK_REGISTRY[name]()
