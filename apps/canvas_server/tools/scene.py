"""Scene helpers built on top of :mod:`src.spatial`."""

from __future__ import annotations

from typing import List, Optional, Union

from src.spatial import Cluster, Entity, Scene, donut_segments
from src.tools.config_loader import ConfigLoader, build_configs

from ..schemas.models import ClusterModel, DonutSegmentModel, PointModel, SceneResponse


def build_scene(profile_name: Optional[str] = None, seed: Optional[int] = None) -> Scene:
    """Create an empty scene configured from a canvas profile."""

    if profile_name:
        profile = ConfigLoader.load_canvas_profile(profile_name)
    else:
        profile = ConfigLoader.load_default_or_env_profile()
    clustering, zoom, canvas = build_configs(profile)
    return Scene(clustering_config=clustering, zoom_config=zoom, canvas_config=canvas, seed=seed)


def entity_model(entity: Entity) -> Union[PointModel, ClusterModel]:
    if isinstance(entity, Cluster):
        return ClusterModel(
            id=entity.id,
            x=entity.x,
            y=entity.y,
            radius=entity.radius,
            total=entity.total,
            color_counts={color.value: count for color, count in entity.color_counts.items()},
            segments=[DonutSegmentModel(**segment.to_dict()) for segment in donut_segments(entity)],
            member_ids=[p.id for p in entity.points],
        )
    return PointModel(
        id=entity.id,
        x=entity.x,
        y=entity.y,
        color=entity.color.value,
        radius=entity.radius,
    )


def scene_response(scene: Scene) -> SceneResponse:
    entities: List[Union[PointModel, ClusterModel]] = [entity_model(e) for e in scene.entities]
    return SceneResponse(
        zoom_level=scene.zoom_level,
        regime=scene.regime.value,
        entities=entities,
    )
