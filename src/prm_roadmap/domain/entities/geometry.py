from collections.abc import Iterator, Sequence
from dataclasses import dataclass


# Core geometry types used by the roadmap
@dataclass(frozen=True)
class Point:
    x: float  # map units; ints in grid maps
    y: float


@dataclass(frozen=True)
class Obstacle:
    """Axis-aligned rectangle; y grows downwards so top_left holds the minima."""

    top_left: Point
    bottom_right: Point

    @property
    def x_left(self) -> float:
        return self.top_left.x

    @property
    def x_right(self) -> float:
        return self.bottom_right.x

    @property
    def y_top(self) -> float:
        return self.top_left.y

    @property
    def y_bottom(self) -> float:
        return self.bottom_right.y

    def contains(self, p: Point) -> bool:
        # closed rectangle: boundary points are inside
        return self.x_left <= p.x <= self.x_right and self.y_top <= p.y <= self.y_bottom


class ObstacleSet:
    """Obstacles built from the two parallel corner sequences."""

    def __init__(
        self,
        top_left: Sequence[Point],
        bottom_right: Sequence[Point],
        n_obstacles: int | None = None,
    ):
        if len(top_left) != len(bottom_right):
            raise ValueError(
                f"corner sequences differ in length: {len(top_left)} != {len(bottom_right)}"
            )
        if n_obstacles is not None and n_obstacles != len(top_left):
            raise ValueError(f"n_obstacles={n_obstacles} but {len(top_left)} corner pairs given")
        self._items = tuple(Obstacle(tl, br) for tl, br in zip(top_left, bottom_right))

    @classmethod
    def of(cls, obstacles: Sequence[Obstacle]) -> "ObstacleSet":
        return cls([o.top_left for o in obstacles], [o.bottom_right for o in obstacles])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._items)

    def __getitem__(self, i: int) -> Obstacle:
        return self._items[i]


@dataclass(frozen=True)
class EdgeBox:
    """Bounding box of the segment between two nodes."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @classmethod
    def of(cls, a: Point, b: Point) -> "EdgeBox":
        return cls(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))


@dataclass(frozen=True)
class Line:
    """
    Infinite line through two points in both slope-intercept forms:
    y = m_y * x + c_y and x = m_x * y + c_x.
    Only defined for sloped edges (a.x != b.x and a.y != b.y).
    """

    m_y: float
    c_y: float
    m_x: float
    c_x: float

    @classmethod
    def through(cls, a: Point, b: Point) -> "Line":
        if a.x == b.x or a.y == b.y:
            raise ValueError(f"line through {a} and {b} is axis-aligned")
        m_y = (b.y - a.y) / (b.x - a.x)
        m_x = (b.x - a.x) / (b.y - a.y)
        return cls(m_y=m_y, c_y=b.y - b.x * m_y, m_x=m_x, c_x=b.x - b.y * m_x)

    def y_at(self, x: float) -> float:
        return self.m_y * x + self.c_y

    def x_at(self, y: float) -> float:
        return self.m_x * y + self.c_x
