"""Colour conversion helpers.

``hsl2rgb`` uses the six-sector method: the hue picks one of six sectors,
and the channel triple is a permutation of ``l`` (the lightness), ``t``
(rising), ``q`` (falling) and ``p`` (floor). Channels are truncated to
8 bits, alpha is always opaque.
"""

import math
from typing import Tuple

import numpy as np
import numpy.typing as npt

from spritegen.types import RGBA

FloatArray = npt.NDArray[np.float32 | np.float64]
UInt8Array = npt.NDArray[np.uint8]


def _to_channel(value: float) -> int:
    return min(max(int(value * 255.0), 0), 255)


def hsl2rgb(h: float, s: float, l: float) -> RGBA:
    """Convert hue, saturation, lightness in ``[0, 1]`` to an opaque RGBA tuple."""
    i = int(math.floor(h * 6.0))
    f = h * 6.0 - i
    p = l * (1.0 - s)
    q = l * (1.0 - f * s)
    t = l * (1.0 - (1.0 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = l, t, p
    elif sector == 1:
        r, g, b = q, l, p
    elif sector == 2:
        r, g, b = p, l, t
    elif sector == 3:
        r, g, b = p, q, l
    elif sector == 4:
        r, g, b = t, p, l
    else:
        r, g, b = l, p, q
    return _to_channel(r), _to_channel(g), _to_channel(b), 255


def hsl2rgb_np(
    h: FloatArray, s: FloatArray, l: FloatArray
) -> Tuple[UInt8Array, UInt8Array, UInt8Array]:
    """
    Vectorized ``hsl2rgb`` for broadcastable arrays. Returns uint8 R, G, B.
    """
    h = np.asarray(h, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)
    i: npt.NDArray[np.int64] = np.floor(h * 6.0).astype(np.int64)
    f: FloatArray = h * 6.0 - i
    p: FloatArray = l * (1.0 - s)
    q: FloatArray = l * (1.0 - f * s)
    t: FloatArray = l * (1.0 - (1.0 - f) * s)

    i_mod = np.broadcast_to(i % 6, np.broadcast(h, s, l).shape)
    l_b, t_b, q_b, p_b = np.broadcast_arrays(l, t, q, p)

    r: FloatArray = np.choose(i_mod, [l_b, q_b, p_b, p_b, t_b, l_b])
    g: FloatArray = np.choose(i_mod, [t_b, l_b, l_b, q_b, p_b, p_b])
    b: FloatArray = np.choose(i_mod, [p_b, p_b, t_b, l_b, l_b, q_b])

    def channel(x: FloatArray) -> UInt8Array:
        return np.clip(np.trunc(x * 255.0), 0, 255).astype(np.uint8)

    return channel(r), channel(g), channel(b)
