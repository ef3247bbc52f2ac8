import numpy as np
from PIL import Image

from spritegen.types import ColorGrid


def to_image(grid: ColorGrid) -> Image.Image:
    """
    Wrap an ``(H, W, 4)`` uint8 colour grid as an RGBA Pillow image.
    Encoding and scaling are left to the caller.
    """
    arr = np.ascontiguousarray(grid, dtype=np.uint8)
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) grid, got shape {arr.shape}")
    return Image.fromarray(arr)
