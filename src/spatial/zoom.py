"""
Zoom-driven switching between aggregated and expanded views.

At or below ``cluster_threshold`` the collection is regrouped; above it every
cluster is flattened back into points. The decision only looks at the zoom
value and the live collection, never at earlier zoom levels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .clustering import ClusteringConfig, cluster_entities
from .entities import Entity, EntityCollection
from .expansion import flatten_clusters


logger = logging.getLogger(__name__)


class ZoomRegime(Enum):
    """The two views a zoom level can select."""
    AGGREGATED = "aggregated"
    EXPANDED = "expanded"


class ZoomDirection(Enum):
    IN = "in"
    OUT = "out"


@dataclass
class ZoomConfig:
    """
    Zoom range and clustering threshold.

    Attributes:
        min_zoom: Smallest allowed zoom level
        max_zoom: Largest allowed zoom level
        step: Increment applied by one zoom in/out step
        cluster_threshold: Zoom levels <= this show clusters
        initial_zoom: Zoom level of a new scene
    """
    min_zoom: float = 0.5
    max_zoom: float = 2.0
    step: float = 0.1
    cluster_threshold: float = 0.8
    initial_zoom: float = 1.0

    def __post_init__(self):
        if not self.min_zoom > 0:
            raise ValueError(f"min_zoom must be positive, got {self.min_zoom}")
        if self.min_zoom > self.max_zoom:
            raise ValueError(
                f"min_zoom ({self.min_zoom}) must not exceed max_zoom ({self.max_zoom})"
            )
        if not self.step > 0:
            raise ValueError(f"step must be positive, got {self.step}")

    def clamp(self, zoom_level: float) -> float:
        """Clamp ``zoom_level`` into ``[min_zoom, max_zoom]``."""
        return min(max(float(zoom_level), self.min_zoom), self.max_zoom)

    def regime_for(self, zoom_level: float) -> ZoomRegime:
        if zoom_level <= self.cluster_threshold:
            return ZoomRegime.AGGREGATED
        return ZoomRegime.EXPANDED


DEFAULT_ZOOM = ZoomConfig()


def clamp_zoom(zoom_level: float, config: Optional[ZoomConfig] = None) -> float:
    return (config or DEFAULT_ZOOM).clamp(zoom_level)


def step_zoom(
    zoom_level: float,
    direction: ZoomDirection,
    config: Optional[ZoomConfig] = None,
) -> float:
    """
    Move one step in ``direction`` and clamp.

    The result is rounded to 6 decimals so that repeated 0.1 steps land
    exactly on values like the 0.8 threshold.
    """
    config = config or DEFAULT_ZOOM
    direction = ZoomDirection(direction)
    delta = config.step if direction is ZoomDirection.IN else -config.step
    return round(config.clamp(zoom_level + delta), 6)


def regime_for(zoom_level: float, config: Optional[ZoomConfig] = None) -> ZoomRegime:
    return (config or DEFAULT_ZOOM).regime_for(zoom_level)


def apply_zoom(
    entities: Sequence[Entity],
    zoom_level: float,
    clustering_config: Optional[ClusteringConfig] = None,
    zoom_config: Optional[ZoomConfig] = None,
) -> EntityCollection:
    """
    Re-evaluate ``entities`` for a new zoom level.

    Aggregated regime: run proximity grouping at ``zoom_level``.
    Expanded regime: flatten every cluster into its points.
    """
    regime = regime_for(zoom_level, zoom_config)
    if regime is ZoomRegime.AGGREGATED:
        updated, _diagnostics = cluster_entities(entities, zoom_level, clustering_config)
        return updated
    return flatten_clusters(entities)
