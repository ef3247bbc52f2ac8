"""Common type aliases and enumerations.

``Pixel`` is the cell alphabet shared by masks, the resolver and the
renderer. Its integer ordering is significant: ``BORDER`` sorts below
``EMPTY`` so the border pass can select "filled" cells with a single
``> Pixel.EMPTY`` comparison.
"""

from enum import IntEnum
from typing import Tuple

import numpy as np
import numpy.typing as npt


class Pixel(IntEnum):
    """Mask cell states. The two ambiguous states only exist before resolution."""

    BORDER = -1
    EMPTY = 0
    EMPTY_OR_BODY = 1
    BORDER_OR_BODY = 2
    BODY = 3


AMBIGUOUS_PIXELS = frozenset({Pixel.EMPTY_OR_BODY, Pixel.BORDER_OR_BODY})


RGBA = Tuple[int, int, int, int]

# Rendered sprite: (height, width, 4) RGBA, uint8
ColorGrid = npt.NDArray[np.uint8]
