# domain/roadmap/collision.py
from collections.abc import Sequence

import numpy as np

from prm_roadmap.app.protocols import AxisRule
from prm_roadmap.domain.entities.geometry import EdgeBox, Line, Obstacle, ObstacleSet, Point

# ------------- axis-aligned edges ------------------


def axis_blocked_literal(a: Point, b: Point, o: Obstacle) -> bool:
    """
    Blocking rule for horizontal/vertical edges as used by the reference roadmap.

    Horizontal: y_top <= a.y <= y_bottom and a.x <= x_left and x_right <= a.x.
    The x clause only holds when a.x == x_left == x_right, so for any obstacle
    with nonzero width a horizontal edge is never blocked. Vertical edges mirror
    this with the axes swapped.
    """
    if a.y == b.y:
        return (o.y_top <= a.y <= o.y_bottom) and (a.x <= o.x_left and o.x_right <= a.x)
    return (o.x_left <= a.x <= o.x_right) and (a.y <= o.y_top and o.y_bottom <= a.y)


def axis_blocked_span(a: Point, b: Point, o: Obstacle) -> bool:
    """Blocked when the fixed coordinate is in the obstacle span and the ranges overlap."""
    if a.y == b.y:
        lo, hi = min(a.x, b.x), max(a.x, b.x)
        return (o.y_top <= a.y <= o.y_bottom) and (lo <= o.x_right and o.x_left <= hi)
    lo, hi = min(a.y, b.y), max(a.y, b.y)
    return (o.x_left <= a.x <= o.x_right) and (lo <= o.y_bottom and o.y_top <= hi)


# ------------- sloped edges ------------------------


def gate(box: EdgeBox, o: Obstacle) -> bool:
    """
    Bounding-box pre-filter for the line test.

    True when one of the obstacle's boundary coordinates falls inside the edge
    box on the matching axis. Heuristic only: an obstacle far along the line
    still passes when one of its edges lines up with the box.
    """
    return (
        (box.y_min <= o.y_top <= box.y_max)
        or (box.y_min <= o.y_bottom <= box.y_max)
        or (box.x_min <= o.x_left <= box.x_max)
        or (box.x_min <= o.x_right <= box.x_max)
    )


def line_hits_obstacle(line: Line, o: Obstacle) -> bool:
    """Does the infinite line cross any of the obstacle's four boundary lines inside its span."""
    y_0 = line.y_at(o.x_left)
    y_1 = line.y_at(o.x_right)
    x_0 = line.x_at(o.y_top)
    x_1 = line.x_at(o.y_bottom)
    return (
        (o.y_top <= y_0 <= o.y_bottom)
        or (o.y_top <= y_1 <= o.y_bottom)
        or (o.x_left <= x_0 <= o.x_right)
        or (o.x_left <= x_1 <= o.x_right)
    )


# ------------- edges ------------------------------


def blocking_obstacle(
    a: Point, b: Point, obstacles: ObstacleSet, axis_rule: AxisRule = axis_blocked_literal
) -> int | None:
    """Index of the first obstacle that blocks edge a-b, or None."""
    if a.y == b.y or a.x == b.x:
        for idx, o in enumerate(obstacles):
            if axis_rule(a, b, o):
                return idx
        return None

    line = Line.through(a, b)
    box = EdgeBox.of(a, b)
    for idx, o in enumerate(obstacles):
        if gate(box, o) and line_hits_obstacle(line, o):
            return idx
    return None


def edge_blocked(
    a: Point, b: Point, obstacles: ObstacleSet, axis_rule: AxisRule = axis_blocked_literal
) -> bool:
    return blocking_obstacle(a, b, obstacles, axis_rule) is not None


def filter_edges(
    adj: np.ndarray,
    nodes: Sequence[Point],
    obstacles: ObstacleSet,
    axis_rule: AxisRule = axis_blocked_literal,
) -> tuple[int, int]:
    """
    Clear, in place, every edge whose segment is blocked by an obstacle.

    Only the upper triangle (i < j) decides whether an edge exists; a blocked
    edge is cleared in both directions. Returns (tested, removed).
    """
    n = len(nodes)
    tested = removed = 0
    for i in range(n):
        for j in range(i + 1, n):
            if adj[i, j] == 0:
                continue
            tested += 1
            if edge_blocked(nodes[i], nodes[j], obstacles, axis_rule):
                adj[i, j] = 0.0
                adj[j, i] = 0.0
                removed += 1
    return tested, removed
