"""
The four operations the presentation layer calls.

Each one is a pure function of (collection, arguments) -> new collection.
Nothing here holds state; see :mod:`src.spatial.scene` for the owner of the
live collection.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .clustering import ClusteringConfig, cluster_entities
from .entities import Color, Entity, EntityCollection, Point
from .expansion import expand_cluster as _expand_cluster
from .zoom import ZoomConfig, apply_zoom


def add_point(
    entities: Sequence[Entity],
    color: Union[Color, str],
    x: float,
    y: float,
    *,
    radius: Optional[float] = None,
    config: Optional[ClusteringConfig] = None,
) -> EntityCollection:
    """
    Append a new point at data-space ``(x, y)``.

    ``radius`` defaults to the configured point radius. Converting screen
    coordinates into data-space is the caller's job.
    """
    if radius is None:
        radius = (config or ClusteringConfig()).point_radius
    point = Point(x=float(x), y=float(y), color=Color.parse(color), radius=float(radius))
    return tuple(entities) + (point,)


def recluster(
    entities: Sequence[Entity],
    zoom_level: float,
    config: Optional[ClusteringConfig] = None,
) -> EntityCollection:
    """Run proximity grouping unconditionally."""
    updated, _diagnostics = cluster_entities(entities, zoom_level, config)
    return updated


def on_zoom_change(
    entities: Sequence[Entity],
    zoom_level: float,
    config: Optional[ClusteringConfig] = None,
    zoom_config: Optional[ZoomConfig] = None,
) -> EntityCollection:
    """Regroup or flatten ``entities`` depending on the zoom regime."""
    return apply_zoom(entities, zoom_level, config, zoom_config)


def expand_cluster(entities: Sequence[Entity], cluster_id: str) -> EntityCollection:
    """Expand one cluster into its points; unknown ids are a no-op."""
    return _expand_cluster(entities, cluster_id)
