"""
Entity model for the clustering canvas.

Two entity kinds share one collection:

- ``Point``: a leaf with a constant intrinsic radius.
- ``Cluster``: a derived aggregate whose intrinsic radius is
  ``cluster_screen_radius / zoom_level``, so its on-screen footprint stays
  fixed once the renderer scales data-space by the zoom level.

Both are frozen dataclasses. A collection is a plain ``tuple`` of entities
and every operation returns a new tuple.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union


# Default intrinsic radius of a point, in data-space units
DEFAULT_POINT_RADIUS = 20.0

# On-screen radius every cluster occupies regardless of zoom
DEFAULT_CLUSTER_SCREEN_RADIUS = 40.0


class Color(str, Enum):
    """Supported point colors, in canonical display order."""
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"

    @classmethod
    def parse(cls, value: Union["Color", str]) -> "Color":
        """Coerce a color tag into a :class:`Color`."""
        if isinstance(value, Color):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(c.value for c in cls)
            raise ValueError(
                f"Unknown color '{value}'. Supported colors: {supported}"
            ) from None


def new_entity_id() -> str:
    """Generate a fresh entity identifier."""
    return uuid.uuid4().hex


def ordered_color_counts(counts: Mapping[Color, int]) -> Dict[Color, int]:
    """Return ``counts`` in canonical color order with zero entries dropped."""
    return {color: counts[color] for color in Color if counts.get(color, 0) > 0}


@dataclass(frozen=True)
class Point:
    """
    A single colored point.

    Attributes:
        x: Data-space x coordinate
        y: Data-space y coordinate
        color: Color tag
        radius: Intrinsic radius, constant across zoom levels
        id: Stable identifier, preserved through cluster round trips
    """
    x: float
    y: float
    color: Color
    radius: float = DEFAULT_POINT_RADIUS
    id: str = field(default_factory=new_entity_id)

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"Point radius must be positive, got {self.radius}")
        object.__setattr__(self, "color", Color.parse(self.color))

    @property
    def kind(self) -> str:
        return "point"

    @property
    def total(self) -> int:
        return 1

    @property
    def color_counts(self) -> Dict[Color, int]:
        return {self.color: 1}

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Cluster:
    """
    Aggregate of member points.

    Grouping only creates clusters of two or more points. ``points`` is
    always flat: merging a cluster into a bigger one contributes
    its points, never the cluster itself. ``x``/``y`` is the mean of the
    positions of the entities merged in the pass that created the cluster.

    Attributes:
        points: Member points, in merge order
        x: Centroid x coordinate
        y: Centroid y coordinate
        color_counts: Members per color, canonical color order
        total: Number of member points
        radius: Intrinsic radius at the zoom level of the last grouping pass
        id: Identifier, fresh for every newly formed cluster
    """
    points: Tuple[Point, ...]
    x: float
    y: float
    color_counts: Dict[Color, int]
    total: int
    radius: float
    id: str = field(default_factory=new_entity_id)

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "color_counts", ordered_color_counts(self.color_counts))
        assert all(isinstance(p, Point) for p in self.points), "cluster members must be points"
        assert self.total >= 1, "cluster must hold at least one point"
        assert self.total == len(self.points), (
            f"cluster total {self.total} != {len(self.points)} member points"
        )
        assert self.total == sum(self.color_counts.values()), (
            f"cluster total {self.total} != color count sum {sum(self.color_counts.values())}"
        )
        if not self.radius > 0:
            raise ValueError(f"Cluster radius must be positive, got {self.radius}")

    @property
    def kind(self) -> str:
        return "cluster"

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_points(
        cls,
        points: Iterable[Point],
        radius: float,
        cluster_id: Optional[str] = None,
    ) -> "Cluster":
        """Build a cluster centred on the mean of ``points``."""
        members = tuple(points)
        if not members:
            raise ValueError("Cannot build a cluster from zero points")
        counts: Dict[Color, int] = {}
        for p in members:
            counts[p.color] = counts.get(p.color, 0) + 1
        kwargs = {} if cluster_id is None else {"id": cluster_id}
        return cls(
            points=members,
            x=sum(p.x for p in members) / len(members),
            y=sum(p.y for p in members) / len(members),
            color_counts=counts,
            total=len(members),
            radius=radius,
            **kwargs,
        )


Entity = Union[Point, Cluster]
EntityCollection = Tuple[Entity, ...]


def is_cluster(entity: Entity) -> bool:
    return isinstance(entity, Cluster)


def iter_points(entities: Iterable[Entity]) -> Iterable[Point]:
    """Yield every point of ``entities``, looking inside clusters."""
    for entity in entities:
        if isinstance(entity, Cluster):
            yield from entity.points
        else:
            yield entity
