"""
Random sampling helpers used for mine placement.
"""
import random
from typing import Optional, Set


def sample_unique(
    n: int, lo: int, hi: int, rng: Optional[random.Random] = None
) -> Set[int]:
    """
    Draw ``n`` distinct integers uniformly from ``[lo, hi)``.

    Values are drawn one at a time into a set until it holds ``n``
    entries; no ordering is implied by the result.

    Args:
        n: How many values to draw.
        lo: Inclusive lower bound.
        hi: Exclusive upper bound.
        rng: Random source (default: the process-wide ``random`` module).

    Returns:
        Set of ``n`` distinct values.

    Raises:
        ValueError: If ``n`` is negative or larger than the range.
    """
    if n < 0:
        raise ValueError("Cannot sample a negative number of values")
    if n > hi - lo:
        raise ValueError(
            f"Cannot sample {n} unique values from a range of {max(hi - lo, 0)}"
        )

    rng = rng or random
    values: Set[int] = set()
    while len(values) < n:
        values.add(rng.randrange(lo, hi))
    return values
