"""Sprite mask: the authoring-time quadrant template.

A :class:`Mask` stores only the quadrant that was authored. When
``mirror_x`` / ``mirror_y`` are set, the addressable image is twice as wide
/ tall and coordinates beyond the stored size are reflected back into it at
read time. Mirroring never duplicates storage.

Masks are frozen value objects backed by a ``pyrsistent`` vector, so one
mask can be shared by any number of generators and resolved repeatedly.
Resolution (see :mod:`spritegen.resolve`) produces a *new* Mask.

Template alphabet (one character per cell):

=====  ======================
char   pixel
=====  ======================
``' '``  ``Pixel.EMPTY``
``'-'``  ``Pixel.BORDER`` (also ``'|'`` and ``'+'``)
``'.'``  ``Pixel.EMPTY_OR_BODY``
``'/'``  ``Pixel.BORDER_OR_BODY``
``'O'``  ``Pixel.BODY``
=====  ======================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from pyrsistent import PVector, pvector

from spritegen.errors import MalformedTemplateError, PixelOutOfBoundsError
from spritegen.types import AMBIGUOUS_PIXELS, Pixel

CHAR_TO_PIXEL: Dict[str, Pixel] = {
    " ": Pixel.EMPTY,
    "-": Pixel.BORDER,
    "|": Pixel.BORDER,
    "+": Pixel.BORDER,
    ".": Pixel.EMPTY_OR_BODY,
    "/": Pixel.BORDER_OR_BODY,
    "O": Pixel.BODY,
}

PIXEL_TO_CHAR: Dict[Pixel, str] = {
    Pixel.EMPTY: " ",
    Pixel.BORDER: "-",
    Pixel.EMPTY_OR_BODY: ".",
    Pixel.BORDER_OR_BODY: "/",
    Pixel.BODY: "O",
}


def mirror_index(
    x: int, y: int, width: int, height: int, mirror_x: bool, mirror_y: bool
) -> int:
    """Map an image coordinate to its row-major index in the stored quadrant.

    Coordinates at or past the stored width/height are reflected across the
    mirror axis: ``x' = width - (x - width) - 1``, likewise for ``y``. No
    bounds checking is done here.
    """
    if x >= width and mirror_x:
        x = width - (x - width) - 1
    if y >= height and mirror_y:
        y = height - (y - height) - 1
    return y * width + x


@dataclass(frozen=True)
class Mask:
    """Immutable sprite template.

    Attributes:
        cells (PVector[Pixel]): Row-major stored cells, ``width * height`` long.
        width (int): Stored (quadrant) width.
        height (int): Stored (quadrant) height.
        mirror_x (bool): Reflect horizontally; image width is ``2 * width``.
        mirror_y (bool): Reflect vertically; image height is ``2 * height``.
    """

    cells: PVector[Pixel]
    width: int
    height: int
    mirror_x: bool = False
    mirror_y: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.cells, PVector):
            object.__setattr__(self, "cells", pvector(self.cells))
        if len(self.cells) != self.width * self.height:
            raise MalformedTemplateError(
                f"Mask has {len(self.cells)} cells, expected "
                f"{self.width}x{self.height}={self.width * self.height}"
            )

    @classmethod
    def from_template(
        cls, rows: Sequence[str], mirror_x: bool = False, mirror_y: bool = False
    ) -> Mask:
        """Build a mask from equal-length template rows.

        Raises:
            MalformedTemplateError: If rows differ in length or a row contains
                a character outside the template alphabet.
        """
        width = len(rows[0]) if rows else 0
        cells: List[Pixel] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MalformedTemplateError(
                    f"Misaligned mask template, row[{y}] has {len(row)} columns, "
                    f"expected {width}"
                )
            for x, char in enumerate(row):
                if char not in CHAR_TO_PIXEL:
                    raise MalformedTemplateError(
                        f"Unknown template character {char!r} at {(x, y)}"
                    )
                cells.append(CHAR_TO_PIXEL[char])
        return cls(
            cells=pvector(cells),
            width=width,
            height=len(rows) if width else 0,
            mirror_x=mirror_x,
            mirror_y=mirror_y,
        )

    @property
    def image_width(self) -> int:
        return self.width * 2 if self.mirror_x else self.width

    @property
    def image_height(self) -> int:
        return self.height * 2 if self.mirror_y else self.height

    def index_of(self, x: int, y: int) -> int:
        """Stored-cell index for image coordinate ``(x, y)``."""
        self._check_bounds(x, y)
        return mirror_index(x, y, self.width, self.height, self.mirror_x, self.mirror_y)

    def pixel_at(self, x: int, y: int) -> Pixel:
        """Return the pixel at image coordinate ``(x, y)``, honoring mirroring."""
        return self.cells[self.index_of(x, y)]

    def ambiguity_count(self) -> int:
        """Number of stored cells that need a bit to resolve."""
        return sum(1 for pixel in self.cells if pixel in AMBIGUOUS_PIXELS)

    def is_resolved(self) -> bool:
        return self.ambiguity_count() == 0

    def rows(self) -> List[List[Pixel]]:
        """Stored cells as a list of rows (copies)."""
        return [
            list(self.cells[y * self.width : (y + 1) * self.width])
            for y in range(self.height)
        ]

    def to_template(self) -> List[str]:
        """Inverse of :meth:`from_template` (all borders render as ``'-'``)."""
        return ["".join(PIXEL_TO_CHAR[pixel] for pixel in row) for row in self.rows()]

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.image_width and 0 <= y < self.image_height):
            raise PixelOutOfBoundsError(
                f"Out of bounds: {(x, y)} for image "
                f"{self.image_width}x{self.image_height}"
            )
