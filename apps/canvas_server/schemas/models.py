"""Pydantic models for the cluster canvas action server."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


ColorTag = Literal["red", "yellow", "green"]


class PointModel(BaseModel):
    """A single point as sent to the renderer."""

    type: Literal["point"] = "point"
    id: str
    x: float
    y: float
    color: ColorTag
    radius: float


class DonutSegmentModel(BaseModel):
    color: ColorTag
    count: int
    fraction: float
    offset: float


class ClusterModel(BaseModel):
    """Cluster summary: centroid, counts per color and ring segments."""

    type: Literal["cluster"] = "cluster"
    id: str
    x: float
    y: float
    radius: float
    total: int
    color_counts: Dict[str, int] = Field(default_factory=dict, alias="colorCounts")
    segments: List[DonutSegmentModel] = Field(default_factory=list)
    member_ids: List[str] = Field(default_factory=list, alias="memberIds")

    model_config = {"populate_by_name": True}


class SceneResponse(BaseModel):
    zoom_level: float = Field(..., alias="zoomLevel")
    regime: Literal["aggregated", "expanded"]
    entities: List[Union[PointModel, ClusterModel]] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class AddPointRequest(BaseModel):
    color: ColorTag
    x: float = Field(..., description="Data-space x coordinate")
    y: float = Field(..., description="Data-space y coordinate")


class AddRandomPointRequest(BaseModel):
    color: ColorTag


class ZoomRequest(BaseModel):
    """Either an absolute zoom level or one step in a direction."""

    zoom_level: Optional[float] = Field(default=None, gt=0, alias="zoomLevel")
    direction: Optional[Literal["in", "out"]] = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _exactly_one_target(self) -> "ZoomRequest":
        if (self.zoom_level is None) == (self.direction is None):
            raise ValueError("Provide exactly one of 'zoomLevel' or 'direction'")
        return self


class ExpandClusterRequest(BaseModel):
    cluster_id: str = Field(..., alias="clusterId")

    model_config = {"populate_by_name": True}
