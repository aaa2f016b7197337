"""FastAPI server exposing the cluster canvas scene as JSON actions."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .schemas.models import (
    AddPointRequest,
    AddRandomPointRequest,
    ExpandClusterRequest,
    ZoomRequest,
)
from .tools.scene import build_scene, scene_response
from src.spatial import Scene


logger = logging.getLogger(__name__)

app = FastAPI(title="Cluster Canvas Server", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_scene: Optional[Scene] = None


def get_scene() -> Scene:
    """Return the live scene, creating it from the active profile on first use."""
    global _scene
    if _scene is None:
        _scene = build_scene()
    return _scene


def reset_scene(profile_name: Optional[str] = None, seed: Optional[int] = None) -> Scene:
    """Replace the live scene with a fresh one."""
    global _scene
    _scene = build_scene(profile_name, seed=seed)
    logger.info(f"Scene reset with profile '{profile_name or 'env/default'}'")
    return _scene


def _apply(action: Callable[[Scene], Any]) -> Dict[str, Any]:
    scene = get_scene()
    try:
        action(scene)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return scene_response(scene).model_dump(by_alias=True)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/scene")
async def get_scene_action() -> Dict[str, Any]:
    return scene_response(get_scene()).model_dump(by_alias=True)


@app.post("/actions/add_point")
async def add_point_action(request: AddPointRequest) -> Dict[str, Any]:
    return _apply(lambda scene: scene.add_point(request.color, request.x, request.y))


@app.post("/actions/add_random_point")
async def add_random_point_action(request: AddRandomPointRequest) -> Dict[str, Any]:
    return _apply(lambda scene: scene.add_random_point(request.color))


@app.post("/actions/recluster")
async def recluster_action() -> Dict[str, Any]:
    return _apply(lambda scene: scene.recluster())


@app.post("/actions/zoom")
async def zoom_action(request: ZoomRequest) -> Dict[str, Any]:
    if request.zoom_level is not None:
        return _apply(lambda scene: scene.set_zoom(request.zoom_level))
    if request.direction == "in":
        return _apply(lambda scene: scene.zoom_in())
    return _apply(lambda scene: scene.zoom_out())


@app.post("/actions/expand_cluster")
async def expand_cluster_action(request: ExpandClusterRequest) -> Dict[str, Any]:
    return _apply(lambda scene: scene.expand_cluster(request.cluster_id))


@app.post("/actions/reset")
async def reset_action() -> Dict[str, Any]:
    return _apply(lambda scene: scene.reset())


__all__ = ["app", "get_scene", "reset_scene"]
