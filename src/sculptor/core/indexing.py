"""Circular index arithmetic for closed contours.

Every phase that walks a contour goes through these helpers so that index
``n - 1`` is always followed by index ``0``.
"""


def next_index(i: int, length: int) -> int:
    """Return the index following ``i`` on a closed contour of ``length``."""
    if i == length - 1:
        return 0
    return i + 1


def previous_index(i: int, length: int) -> int:
    """Return the index preceding ``i`` on a closed contour of ``length``."""
    if i == 0:
        return length - 1
    return i - 1


def next_index_before_insert(insert_index: int, length: int) -> int:
    """Return the successor of a vertex about to be inserted at ``insert_index``.

    Until the insertion happens, the vertex that will follow the new one still
    sits at ``insert_index`` itself, except when appending after the last
    vertex, where the successor wraps to ``0``.

    Args:
        insert_index: Position the new vertex will occupy, 0..length
        length: Current contour length (before insertion)

    Returns:
        Current index of the future successor
    """
    if insert_index == length:
        return 0
    return insert_index
