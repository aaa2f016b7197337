"""
Proximity grouping of points and clusters.

This module provides:
1. Effective radius rules (constant for points, zoom-dependent for clusters)
2. Pairwise "radii touch" adjacency over the current entities
3. Partitioning through a disjoint-set union
4. Materialization of each group into a pass-through entity or a new cluster
5. Diagnostics for every grouping run

Hierarchical grouping (the default) lets existing clusters take part in the
adjacency scan, so clusters can merge into bigger clusters or absorb points.
Passes are repeated until one forms no new cluster; the result is then closed
under the adjacency test and re-running it at the same zoom changes nothing.

The scan compares every pair of entities, so each run costs O(n^2) and a zoom
change pays that cost synchronously.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, asdict, replace
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .entities import (
    DEFAULT_CLUSTER_SCREEN_RADIUS,
    DEFAULT_POINT_RADIUS,
    Cluster,
    Color,
    Entity,
    EntityCollection,
    Point,
)
from .union_find import DisjointSet


logger = logging.getLogger(__name__)


class GroupingScope(Enum):
    """Which entities take part in a grouping pass."""
    HIERARCHICAL = "hierarchical"
    POINTS_ONLY = "points_only"


@dataclass
class ClusteringConfig:
    """Configuration for proximity grouping."""

    point_radius: float = DEFAULT_POINT_RADIUS
    """Intrinsic radius given to newly added points."""

    cluster_screen_radius: float = DEFAULT_CLUSTER_SCREEN_RADIUS
    """On-screen radius of every cluster; data-space radius is this / zoom."""

    scope: GroupingScope = GroupingScope.HIERARCHICAL
    """HIERARCHICAL groups points and clusters; POINTS_ONLY leaves clusters alone."""

    settle: bool = True
    """Repeat hierarchical passes until no new cluster forms."""

    def __post_init__(self):
        if not self.point_radius > 0:
            raise ValueError(f"point_radius must be positive, got {self.point_radius}")
        if not self.cluster_screen_radius > 0:
            raise ValueError(
                f"cluster_screen_radius must be positive, got {self.cluster_screen_radius}"
            )
        if not isinstance(self.scope, GroupingScope):
            self.scope = GroupingScope(self.scope)


@dataclass
class ClusteringDiagnostics:
    """Summary of one grouping run, logged at DEBUG level."""

    num_entities_in: int
    """Entities in the input collection."""

    num_entities_out: int
    """Entities in the output collection."""

    num_clusters_formed: int = 0
    """New clusters created across all passes."""

    num_passthrough: int = 0
    """Entities of the final pass that formed a group on their own."""

    cluster_sizes: List[int] = field(default_factory=list)
    """Point count of every cluster in the output, in output order."""

    zoom_level: float = 1.0
    """Zoom level the run was evaluated at."""

    scope: str = GroupingScope.HIERARCHICAL.value
    """Grouping scope used."""

    passes: int = 0
    """Number of grouping passes executed."""

    def to_dict(self) -> Dict:
        return asdict(self)

    def to_json(self) -> str:
        """Convert to JSON string for logging."""
        return json.dumps(self.to_dict())


def _check_zoom(zoom_level: float) -> float:
    zoom = float(zoom_level)
    if not zoom > 0:
        raise ValueError(f"zoom_level must be positive, got {zoom_level}")
    return zoom


def cluster_radius(zoom_level: float, config: Optional[ClusteringConfig] = None) -> float:
    """Data-space radius of a cluster at ``zoom_level``."""
    config = config or ClusteringConfig()
    return config.cluster_screen_radius / _check_zoom(zoom_level)


def effective_radius(
    entity: Entity,
    zoom_level: float,
    config: Optional[ClusteringConfig] = None,
) -> float:
    """
    Radius used for the proximity test.

    A point keeps its intrinsic radius. A cluster's radius is recomputed from
    the current zoom and never read from the cached ``radius`` field.
    """
    if isinstance(entity, Cluster):
        return cluster_radius(zoom_level, config)
    return entity.radius


def touching_matrix(positions: np.ndarray, radii: np.ndarray) -> np.ndarray:
    """
    Boolean matrix of entity pairs whose radii touch.

    Args:
        positions: (n, 2) array of x/y coordinates
        radii: (n,) array of effective radii

    Returns:
        (n, n) symmetric matrix; ``[i, j]`` is True when the distance between
        ``i`` and ``j`` is at most ``radii[i] + radii[j]``. The boundary is
        inclusive and the diagonal is always True.
    """
    diff = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    distances = np.hypot(diff[..., 0], diff[..., 1])
    reach = radii[:, np.newaxis] + radii[np.newaxis, :]
    return distances <= reach


def partition_entities(
    entities: Sequence[Entity],
    zoom_level: float,
    config: Optional[ClusteringConfig] = None,
) -> List[List[int]]:
    """
    Partition ``entities`` into groups of transitively touching entities.

    Returns:
        Lists of indices into ``entities``. Groups are ordered by their first
        member and members keep their input order.
    """
    n = len(entities)
    if n == 0:
        return []

    positions = np.array([[e.x, e.y] for e in entities], dtype=float)
    radii = np.array([effective_radius(e, zoom_level, config) for e in entities], dtype=float)

    touching = np.triu(touching_matrix(positions, radii), k=1)

    uf = DisjointSet(n)
    for i, j in zip(*np.nonzero(touching)):
        uf.union(int(i), int(j))

    return list(uf.groups().values())


def merge_group(
    members: Sequence[Entity],
    zoom_level: float,
    config: Optional[ClusteringConfig] = None,
) -> Cluster:
    """
    Merge a group of touching entities into one new cluster.

    The centroid is the mean of the members' own positions, so a merged
    cluster counts as one position no matter how many points it holds.
    """
    if len(members) < 2:
        raise ValueError(f"merge_group needs at least two entities, got {len(members)}")

    points: List[Point] = []
    counts: Dict[Color, int] = {}
    for member in members:
        if isinstance(member, Cluster):
            points.extend(member.points)
        else:
            points.append(member)
        for color, count in member.color_counts.items():
            counts[color] = counts.get(color, 0) + count

    centroid = np.mean(np.array([[m.x, m.y] for m in members], dtype=float), axis=0)

    return Cluster(
        points=tuple(points),
        x=float(centroid[0]),
        y=float(centroid[1]),
        color_counts=counts,
        total=sum(m.total for m in members),
        radius=cluster_radius(zoom_level, config),
    )


def _grouping_pass(
    entities: Sequence[Entity],
    zoom_level: float,
    config: ClusteringConfig,
) -> Tuple[EntityCollection, int, int]:
    """
    Run one pass over ``entities``.

    Returns:
        (new_entities, clusters_formed, passthrough_count)
    """
    if config.scope is GroupingScope.POINTS_ONLY:
        eligible = [e for e in entities if isinstance(e, Point)]
        untouched = [e for e in entities if not isinstance(e, Point)]
    else:
        eligible = list(entities)
        untouched = []

    groups = partition_entities(eligible, zoom_level, config)

    output: List[Entity] = []
    formed = 0
    passthrough = 0
    radius = cluster_radius(zoom_level, config)
    for group in groups:
        members = [eligible[i] for i in group]
        if len(members) == 1:
            sole = members[0]
            if isinstance(sole, Cluster) and sole.radius != radius:
                sole = replace(sole, radius=radius)
            output.append(sole)
            passthrough += 1
        else:
            output.append(merge_group(members, zoom_level, config))
            formed += 1

    output.extend(untouched)
    return tuple(output), formed, passthrough


def cluster_entities(
    entities: Sequence[Entity],
    zoom_level: float,
    config: Optional[ClusteringConfig] = None,
) -> Tuple[EntityCollection, ClusteringDiagnostics]:
    """
    Group touching entities into clusters.

    Args:
        entities: Current entity collection
        zoom_level: Current zoom level (must be positive)
        config: Clustering configuration (uses defaults if None)

    Returns:
        (new_entities, diagnostics)

    The new collection holds exactly what the groups produced: a lone point
    is passed through as the same object, a lone cluster keeps its id and
    members with its radius refreshed for ``zoom_level``, and every group of
    two or more entities becomes a new cluster with a fresh id.
    """
    if config is None:
        config = ClusteringConfig()
    zoom = _check_zoom(zoom_level)

    current: EntityCollection = tuple(entities)
    diagnostics = ClusteringDiagnostics(
        num_entities_in=len(current),
        num_entities_out=len(current),
        zoom_level=zoom,
        scope=config.scope.value,
    )

    has_eligible = any(
        isinstance(e, Point) or config.scope is GroupingScope.HIERARCHICAL
        for e in current
    )
    if not has_eligible:
        return current, diagnostics

    while True:
        current, formed, passthrough = _grouping_pass(current, zoom, config)
        diagnostics.passes += 1
        diagnostics.num_clusters_formed += formed
        diagnostics.num_passthrough = passthrough
        if formed == 0 or not config.settle or config.scope is GroupingScope.POINTS_ONLY:
            break

    diagnostics.num_entities_out = len(current)
    diagnostics.cluster_sizes = [e.total for e in current if isinstance(e, Cluster)]

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Grouping diagnostics: {diagnostics.to_json()}")

    return current, diagnostics
