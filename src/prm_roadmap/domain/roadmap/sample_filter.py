# domain/roadmap/sample_filter.py
from collections.abc import Iterable

from prm_roadmap.domain.entities.geometry import ObstacleSet, Point


def inside_any(p: Point, obstacles: ObstacleSet) -> bool:
    # index order, first hit wins
    return any(o.contains(p) for o in obstacles)


def filter_samples(samples: Iterable[Point], obstacles: ObstacleSet) -> tuple[Point, ...]:
    """Keep the samples outside every obstacle, in their original order."""
    return tuple(s for s in samples if not inside_any(s, obstacles))
