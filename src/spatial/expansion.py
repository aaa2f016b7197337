"""Turning clusters back into their member points."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .entities import Cluster, Entity, EntityCollection


logger = logging.getLogger(__name__)


def flatten_clusters(entities: Sequence[Entity]) -> EntityCollection:
    """Replace every cluster with its member points, regardless of distance."""
    flat: List[Entity] = []
    for entity in entities:
        if isinstance(entity, Cluster):
            flat.extend(entity.points)
        else:
            flat.append(entity)
    return tuple(flat)


def expand_cluster(entities: Sequence[Entity], cluster_id: str) -> EntityCollection:
    """
    Replace the cluster ``cluster_id`` with its member points.

    Member points come back with their original ids, positions and colors,
    at the position the cluster held in the collection. Every other entity is
    kept as the same object. An unknown id, or the id of a point, leaves the
    collection unchanged.
    """
    expanded: List[Entity] = []
    found = False
    for entity in entities:
        if not found and isinstance(entity, Cluster) and entity.id == cluster_id:
            expanded.extend(entity.points)
            found = True
        else:
            expanded.append(entity)

    if not found:
        logger.debug(f"expand_cluster: no cluster with id {cluster_id!r}, nothing to expand")
        return tuple(entities)
    return tuple(expanded)
