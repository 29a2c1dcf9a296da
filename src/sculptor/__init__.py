"""Sculptor - Freehand contour sculpting.

Sculptor deforms closed polygon contours with a circular brush: vertices inside
the brush are pushed to its edge, sparse stretches gain new vertices and
crowded ones are merged, so the outline stays evenly sampled while it is
being reshaped.

Example:
    $ sculptor stroke --start 40,50 --end 60,50

This replays a straight drag across a generated contour and prints how the
vertex count, area and spacing changed.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
