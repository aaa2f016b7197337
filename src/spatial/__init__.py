"""
src/spatial: Point entities, proximity clustering, and zoom-driven views.

This module groups touching points and clusters with a disjoint-set union and
switches between clustered and individual views as the zoom level changes.
"""

from .clustering import (
    ClusteringConfig,
    ClusteringDiagnostics,
    GroupingScope,
    cluster_entities,
    cluster_radius,
    effective_radius,
    merge_group,
    partition_entities,
)
from .donut import DonutSegment, donut_segments
from .entities import (
    DEFAULT_CLUSTER_SCREEN_RADIUS,
    DEFAULT_POINT_RADIUS,
    Cluster,
    Color,
    Entity,
    EntityCollection,
    Point,
    iter_points,
)
from .expansion import flatten_clusters
from .operations import add_point, expand_cluster, on_zoom_change, recluster
from .scene import CanvasConfig, Scene
from .union_find import DisjointSet
from .zoom import (
    ZoomConfig,
    ZoomDirection,
    ZoomRegime,
    clamp_zoom,
    regime_for,
    step_zoom,
)

__all__ = [
    # Entities
    "Color",
    "Point",
    "Cluster",
    "Entity",
    "EntityCollection",
    "iter_points",
    "DEFAULT_POINT_RADIUS",
    "DEFAULT_CLUSTER_SCREEN_RADIUS",

    # Grouping
    "DisjointSet",
    "ClusteringConfig",
    "ClusteringDiagnostics",
    "GroupingScope",
    "cluster_entities",
    "cluster_radius",
    "effective_radius",
    "merge_group",
    "partition_entities",
    "flatten_clusters",

    # Zoom
    "ZoomConfig",
    "ZoomDirection",
    "ZoomRegime",
    "clamp_zoom",
    "regime_for",
    "step_zoom",

    # Operations
    "add_point",
    "recluster",
    "on_zoom_change",
    "expand_cluster",

    # Session
    "CanvasConfig",
    "Scene",

    # Rendering data
    "DonutSegment",
    "donut_segments",
]
