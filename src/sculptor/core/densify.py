"""Densify phase: insert vertices where pushing left sparse spacing.

Only the pushed span and its two neighbouring edges are examined. Pushing
changes spacing nowhere else, so the rest of the contour keeps whatever
spacing the previous step left it with.
"""

import logging

from sculptor.core.geometry import distance, midpoint, project_to_circle
from sculptor.core.indexing import next_index, next_index_before_insert, previous_index
from sculptor.domain import Contour, Point, PushedSpan, SculptContext

logger = logging.getLogger(__name__)


def find_sparse_sites(contour: Contour, span: PushedSpan, max_spacing: float) -> list[int]:
    """Find vertices whose edge to their successor is longer than ``max_spacing``.

    Checks every index of the span, then the vertex after ``span.last`` and
    the vertex before ``span.first``. Neither neighbour is checked twice when
    the span covers (almost) the whole contour.

    Args:
        contour: Contour to examine
        span: Pushed span returned by the push phase
        max_spacing: Longest allowed edge

    Returns:
        Ascending list of indices to insert a vertex after
    """
    length = len(contour)
    sites: list[int] = []

    def check(i: int) -> None:
        successor = contour[next_index(i, length)]
        if distance(contour[i].position, successor.position) > max_spacing:
            sites.append(i)

    for i in range(span.first, span.last + 1):
        check(i)

    after_last = next_index(span.last, length)
    if after_last != span.first:
        check(after_last)

        before_first = previous_index(span.first, length)
        if before_first != after_last:
            check(before_first)

    return sorted(sites)


def insert_position(context: SculptContext, previous: Point, following: Point) -> Point:
    """Position for a vertex inserted between two neighbours.

    The midpoint of the neighbours, pushed radially onto the brush boundary
    if it falls inside the brush, clamped into the context bounds.
    """
    brush = context.brush
    position = midpoint(previous, following)

    if distance(brush.center, position) < brush.radius:
        position = project_to_circle(brush, position)

    return context.bounds.clip(position)


def densify(context: SculptContext, span: PushedSpan) -> int:
    """Insert vertices into over-long edges around the pushed span.

    Sites are processed in ascending order; each insertion shifts later
    indices by one, which is tracked with a running offset.

    Args:
        context: Current sculpt step
        span: Pushed span returned by the push phase

    Returns:
        Number of vertices inserted
    """
    contour = context.contour
    sites = find_sparse_sites(contour, span, context.max_spacing)

    for offset, site in enumerate(sites):
        insert_index = site + 1 + offset
        previous = contour[insert_index - 1].position
        following = contour[next_index_before_insert(insert_index, len(contour))].position

        contour.insert(insert_index, insert_position(context, previous, following))

    if sites:
        logger.debug("Inserted %d vertices after sites %s", len(sites), sites)

    return len(sites)
