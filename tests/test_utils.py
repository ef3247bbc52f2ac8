from typing import Iterable, List, Sequence

from spritegen.mask import Mask
from spritegen.types import Pixel


class ScriptedBits:
    """Bit source replaying a fixed list of decisions, for exact resolver tests."""

    def __init__(self, decisions: Iterable[bool] = (), seed: int = 0):
        self.decisions: List[bool] = list(decisions)
        self.seed = seed
        self.consumed = 0
        self.seed_calls = 0

    def next(self) -> bool:
        result = self.decisions[self.consumed]
        self.consumed += 1
        return result

    def seed_value(self) -> int:
        self.seed_calls += 1
        return self.seed


def make_mask(
    rows: Sequence[str], mirror_x: bool = False, mirror_y: bool = False
) -> Mask:
    return Mask.from_template(rows, mirror_x=mirror_x, mirror_y=mirror_y)


def stored_neighbours(mask: Mask, x: int, y: int) -> List[tuple[int, int]]:
    """4-neighbours of a stored cell that the border pass is allowed to touch."""
    candidates = [(x, y - 1), (x - 1, y)]
    if not mask.mirror_y:
        candidates.append((x, y + 1))
    if not mask.mirror_x:
        candidates.append((x + 1, y))
    return [
        (nx, ny)
        for nx, ny in candidates
        if 0 <= nx < mask.width and 0 <= ny < mask.height
    ]


def stored_pixel(mask: Mask, x: int, y: int) -> Pixel:
    return mask.cells[y * mask.width + x]
