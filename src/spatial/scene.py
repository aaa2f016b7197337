"""
Scene session: the single owner of the live entity collection.

Every method reads the current collection, computes a new one with the pure
operations and replaces the stored tuple once the computation returns. A zoom
change only counts as applied after the regroup/flatten it triggers has
finished.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Union

from .clustering import ClusteringConfig
from .entities import Cluster, Color, Entity, EntityCollection, Point
from .operations import add_point, expand_cluster, on_zoom_change, recluster
from .zoom import ZoomConfig, ZoomDirection, ZoomRegime, step_zoom


logger = logging.getLogger(__name__)


@dataclass
class CanvasConfig:
    """Data-space extent used for randomly placed points."""
    width: float = 1400.0
    height: float = 700.0

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )


class Scene:
    """
    Live collection plus zoom level.

    Args:
        clustering_config: Grouping configuration (defaults if None)
        zoom_config: Zoom range and threshold (defaults if None)
        canvas_config: Extent for random points (defaults if None)
        seed: Seed for random point placement
    """

    def __init__(
        self,
        clustering_config: Optional[ClusteringConfig] = None,
        zoom_config: Optional[ZoomConfig] = None,
        canvas_config: Optional[CanvasConfig] = None,
        seed: Optional[int] = None,
    ):
        self.clustering_config = clustering_config or ClusteringConfig()
        self.zoom_config = zoom_config or ZoomConfig()
        self.canvas_config = canvas_config or CanvasConfig()
        self._rng = random.Random(seed)
        self._entities: EntityCollection = ()
        self._zoom_level = self.zoom_config.clamp(self.zoom_config.initial_zoom)

    @property
    def entities(self) -> EntityCollection:
        return self._entities

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @property
    def regime(self) -> ZoomRegime:
        return self.zoom_config.regime_for(self._zoom_level)

    def points(self) -> List[Point]:
        return [e for e in self._entities if isinstance(e, Point)]

    def clusters(self) -> List[Cluster]:
        return [e for e in self._entities if isinstance(e, Cluster)]

    def find(self, entity_id: str) -> Optional[Entity]:
        return next((e for e in self._entities if e.id == entity_id), None)

    def add_point(self, color: Union[Color, str], x: float, y: float) -> Point:
        """Add a point at data-space ``(x, y)`` and return it."""
        self._entities = add_point(self._entities, color, x, y, config=self.clustering_config)
        point = self._entities[-1]
        logger.debug(f"Added {point.color.value} point {point.id} at ({point.x:.1f}, {point.y:.1f})")
        return point

    def add_random_point(self, color: Union[Color, str]) -> Point:
        """Add a point at a uniformly random position inside the canvas."""
        x = self._rng.random() * self.canvas_config.width
        y = self._rng.random() * self.canvas_config.height
        return self.add_point(color, x, y)

    def recluster(self) -> EntityCollection:
        """Group the collection at the current zoom, whatever the regime."""
        self._entities = recluster(self._entities, self._zoom_level, self.clustering_config)
        logger.debug(
            f"Reclustered at zoom {self._zoom_level}: "
            f"{len(self.clusters())} clusters, {len(self.points())} points"
        )
        return self._entities

    def set_zoom(self, zoom_level: float) -> float:
        """
        Clamp and apply a new zoom level.

        The collection is regrouped or flattened first; the zoom level is
        stored only after that finishes.
        """
        target = self.zoom_config.clamp(zoom_level)
        previous_regime = self.regime
        entities = on_zoom_change(
            self._entities, target, self.clustering_config, self.zoom_config
        )
        self._entities = entities
        self._zoom_level = target

        if self.regime is not previous_regime:
            logger.info(f"Zoom {target}: switched to {self.regime.value} view")
        return target

    def zoom_in(self) -> float:
        return self.set_zoom(step_zoom(self._zoom_level, ZoomDirection.IN, self.zoom_config))

    def zoom_out(self) -> float:
        return self.set_zoom(step_zoom(self._zoom_level, ZoomDirection.OUT, self.zoom_config))

    def expand_cluster(self, cluster_id: str) -> EntityCollection:
        """Expand one cluster; does not regroup until the next zoom or recluster."""
        self._entities = expand_cluster(self._entities, cluster_id)
        return self._entities

    def reset(self) -> None:
        """Drop every entity and return to the initial zoom."""
        self._entities = ()
        self._zoom_level = self.zoom_config.clamp(self.zoom_config.initial_zoom)
