"""Mask resolution.

Turns an ambiguous :class:`~spritegen.mask.Mask` into a concrete bitmap
containing only ``EMPTY``, ``BODY`` and ``BORDER`` cells. The input mask is
never mutated: its cells are copied into a list buffer, both passes rewrite
that buffer in place, and the buffer is frozen into a new Mask.

Both passes walk the *stored* quadrant in row-major order (left to right,
top to bottom). The order of pass 1 fixes which bit resolves which cell, so
it is part of the seed-reproducibility contract.
"""

from dataclasses import replace
from typing import List

from pyrsistent import pvector

from spritegen.bits import BitSource
from spritegen.mask import Mask
from spritegen.types import Pixel


def choose_body(cells: List[Pixel], bits: BitSource) -> None:
    """Pass 1: draw one bit per ambiguous cell.

    ``EMPTY_OR_BODY``: ``True`` -> ``EMPTY``, ``False`` -> ``BODY``.
    ``BORDER_OR_BODY``: ``True`` -> ``BORDER``, ``False`` -> ``BODY``.
    """
    for i, pixel in enumerate(cells):
        if pixel == Pixel.EMPTY_OR_BODY:
            cells[i] = Pixel.EMPTY if bits.next() else Pixel.BODY
        elif pixel == Pixel.BORDER_OR_BODY:
            cells[i] = Pixel.BORDER if bits.next() else Pixel.BODY


def choose_edges(
    cells: List[Pixel], width: int, height: int, mirror_x: bool, mirror_y: bool
) -> None:
    """Pass 2: wrap filled cells in a border.

    Every ``EMPTY`` 4-neighbour of a cell above ``EMPTY`` becomes ``BORDER``,
    visiting up, down, left, right. The neighbour across a mirror axis
    (down for ``mirror_y``, right for ``mirror_x``) is left alone since the
    reflection already provides one. The pass reads the buffer it writes.
    """
    for y in range(height):
        for x in range(width):
            if cells[y * width + x] <= Pixel.EMPTY:
                continue
            neighbours = [(x, y - 1)]
            if not mirror_y:
                neighbours.append((x, y + 1))
            neighbours.append((x - 1, y))
            if not mirror_x:
                neighbours.append((x + 1, y))
            for nx, ny in neighbours:
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                i = ny * width + nx
                if cells[i] == Pixel.EMPTY:
                    cells[i] = Pixel.BORDER


def resolve(mask: Mask, bits: BitSource) -> Mask:
    """Resolve ``mask`` into a new Mask, consuming one bit per ambiguous cell."""
    buffer: List[Pixel] = list(mask.cells)
    choose_body(buffer, bits)
    choose_edges(buffer, mask.width, mask.height, mask.mirror_x, mask.mirror_y)
    return replace(mask, cells=pvector(buffer))
