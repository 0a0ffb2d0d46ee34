"""
Even distribution of indivisible units across groups.

distribute() spreads ``total`` units over ``groups`` buckets so every bucket
holds either ``total // groups`` or one more.  The larger buckets are placed
by accumulated remainder, the same error-accumulation walk used to rasterize
a line, so they are spread through the sequence instead of bunched at one end.

Example: 7 units over 3 groups gives (2, 2, 3); 2 units over 4 groups gives
(0, 1, 0, 1) because the accumulator overflows on every second position.
"""

from __future__ import annotations


def distribute(total: int, groups: int) -> tuple[int, ...]:
    """
    Split *total* into *groups* segments as evenly as possible.

    Args:
        total: Number of units to hand out. Must be >= 0.
        groups: Number of segments. Must be >= 1.

    Returns:
        Tuple of length ``groups`` summing to ``total``.  Exactly
        ``total % groups`` segments are ``total // groups + 1``.

    Raises:
        ValueError: If groups < 1 or total < 0.
    """
    if groups < 1:
        raise ValueError(f"groups must be >= 1, got {groups}")
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")

    base = total // groups
    remainder = total % groups

    segments: list[int] = []
    error = 0
    for _ in range(groups):
        error += remainder
        if error >= groups:
            segments.append(base + 1)
            error -= groups
        else:
            segments.append(base)

    return tuple(segments)
