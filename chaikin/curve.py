"""Chaikin's corner-cutting subdivision for closed polygons."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Point = tuple[float, float]


def _as_points(points: Iterable[Sequence[float]]) -> list[Point]:
    return [(float(x), float(y)) for x, y in points]


def chaikin_iteration(points: Iterable[Sequence[float]], ratio: float) -> list[Point]:
    """Run one round of corner cutting over a closed polygon.

    Every edge (including the closing edge from the last point back to the
    first) is replaced by two points placed ``ratio`` of the way in from each
    end.  Polylines of two points or fewer are returned unchanged.
    """
    pts = _as_points(points)
    if len(pts) <= 2:
        return pts

    result: list[Point] = []
    for (x0, y0), (x1, y1) in zip(pts, pts[1:] + pts[:1]):
        keep = 1.0 - ratio
        result.append((x0 * keep + x1 * ratio, y0 * keep + y1 * ratio))
        result.append((x0 * ratio + x1 * keep, y0 * ratio + y1 * keep))
    return result


def apply_chaikin(
    points: Iterable[Sequence[float]], iterations: int, ratio: float
) -> list[list[Point]]:
    """Return every stage of repeated corner cutting.

    The first element is the original polygon and each following element is
    the result of one more iteration, so the list holds ``iterations + 1``
    stages.
    """
    current = _as_points(points)
    stages = [list(current)]
    for _ in range(iterations):
        current = chaikin_iteration(current, ratio)
        stages.append(list(current))
    return stages