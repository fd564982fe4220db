"""Star-rating rendering for review scores.

Both providers score on a 0-5 scale. Notes show the score as a fixed-width
row of filled and empty stars, rounding partial stars up.
"""

from __future__ import annotations

import math
from typing import Optional

FILLED_STAR = "★"
EMPTY_STAR = "☆"


def make_stars(count: int, star: str) -> list[str]:
    """Return `count` copies of `star`."""
    return [star] * max(0, count)


def star_rating(score: Optional[float], scale: int = 5) -> str:
    """Render a numeric score as stars, e.g. 3.2 -> '★★★★☆'.

    A missing score renders as an empty row.
    """
    filled = 0 if score is None else math.ceil(score)
    filled = max(0, min(scale, filled))
    return "".join(make_stars(filled, FILLED_STAR) + make_stars(scale - filled, EMPTY_STAR))
