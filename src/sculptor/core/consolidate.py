"""Consolidate phase: merge vertices that ended up too close together.

A pass pairs up close neighbours without letting any vertex take part in two
pairs, so a dense cluster shrinks gradually instead of collapsing to a single
point. Passes repeat until no close pair is left, the contour is down to its
minimum size, or the pass limit is reached.
"""

import logging

from sculptor.core.geometry import distance, midpoint
from sculptor.core.indexing import next_index
from sculptor.domain import MIN_VERTICES, BoundingBox, Contour

logger = logging.getLogger(__name__)


def find_close_pairs(contour: Contour, min_spacing: float) -> list[tuple[int, int]]:
    """Find non-overlapping adjacent pairs closer than ``min_spacing``.

    When a pair is found the scan skips its second vertex. A pair starting at
    index 0 also claims vertex 0, so the closing pair ``(n - 1, 0)`` is not
    examined in that case.

    Args:
        contour: Contour to scan
        min_spacing: Shortest allowed edge

    Returns:
        Pairs of raw indices ``(i, next(i))`` in scan order
    """
    length = len(contour)
    scan_end = length
    pairs: list[tuple[int, int]] = []

    i = 0
    while i < scan_end:
        j = next_index(i, length)
        if distance(contour[i].position, contour[j].position) < min_spacing:
            pairs.append((i, j))
            if i == 0:
                scan_end -= 1
            i += 1
        i += 1

    return pairs


def corrected_pair(pair: tuple[int, int], removed: int) -> tuple[int, int]:
    """Map a raw pair to live indices after ``removed`` earlier merges.

    Only the closing pair ``(n - 1, 0)`` can have its second index go
    negative; it still refers to vertex 0.
    """
    first = pair[0] - removed
    second = pair[1] - removed
    if second < 0:
        second = 0
    return first, second


def merge_pair(contour: Contour, pair: tuple[int, int], bounds: BoundingBox) -> None:
    """Merge the second vertex of a pair into the first.

    The first vertex moves to the clamped midpoint of both, then the second
    is removed, which links the first to the vertex after the pair.
    """
    first, second = pair
    merged = bounds.clip(midpoint(contour[first].position, contour[second].position))

    contour.move(first, merged)
    contour.remove(second)


def merge_close_pairs(
    contour: Contour,
    pairs: list[tuple[int, int]],
    bounds: BoundingBox,
) -> int:
    """Merge recorded pairs left to right.

    Stops early once the contour is down to its minimum size.

    Returns:
        Number of vertices removed
    """
    removed = 0
    for pair in pairs:
        if len(contour) <= MIN_VERTICES:
            break
        merge_pair(contour, corrected_pair(pair, removed), bounds)
        removed += 1
    return removed


def consolidate(contour: Contour, min_spacing: float, bounds: BoundingBox) -> int:
    """Merge close vertices until every edge is at least ``min_spacing`` long.

    Never reduces the contour below three vertices. Runs at most as many
    passes as the contour had vertices on entry.

    Args:
        contour: Contour to mutate in place
        min_spacing: Shortest allowed edge
        bounds: Area merged positions are clamped into

    Returns:
        Number of vertices removed
    """
    max_passes = len(contour)
    total_removed = 0

    for pass_number in range(max_passes):
        if len(contour) <= MIN_VERTICES:
            break

        pairs = find_close_pairs(contour, min_spacing)
        if not pairs:
            break

        removed = merge_close_pairs(contour, pairs, bounds)
        total_removed += removed
        logger.debug(
            "Merge pass %d removed %d vertices, length now %d",
            pass_number,
            removed,
            len(contour),
        )

    return total_removed
