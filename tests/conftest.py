"""
Pytest configuration and shared fixtures for cluster canvas tests.

This file provides:
- Sample points and clusters for the grouping scenarios
- Configuration fixtures
- Common test utilities
"""

from typing import List

import pytest
import numpy as np

from src.spatial import (
    Cluster,
    ClusteringConfig,
    Color,
    Point,
    ZoomConfig,
    iter_points,
    recluster,
)


# ==============================================================================
# Sample Points
# ==============================================================================

@pytest.fixture
def touching_points() -> List[Point]:
    """Three points within reach of each other (red, red, yellow)."""
    return [
        Point(x=0.0, y=0.0, color=Color.RED, radius=20.0, id="p-red-1"),
        Point(x=5.0, y=0.0, color=Color.RED, radius=20.0, id="p-red-2"),
        Point(x=10.0, y=0.0, color=Color.YELLOW, radius=20.0, id="p-yellow-1"),
    ]


@pytest.fixture
def far_point() -> Point:
    """A point far away from every other sample point."""
    return Point(x=1000.0, y=1000.0, color=Color.GREEN, radius=20.0, id="p-far")


@pytest.fixture
def sample_cluster(touching_points) -> Cluster:
    """The cluster formed by ``touching_points`` at zoom 0.5."""
    (cluster,) = recluster(touching_points, 0.5)
    return cluster


@pytest.fixture
def scattered_points() -> List[Point]:
    """Forty reproducible points spread over a 400x400 square."""
    rng = np.random.default_rng(42)
    coords = rng.uniform(0.0, 400.0, size=(40, 2))
    colors = list(Color)
    return [
        Point(x=float(x), y=float(y), color=colors[i % len(colors)], id=f"s{i}")
        for i, (x, y) in enumerate(coords)
    ]


# ==============================================================================
# Configuration
# ==============================================================================

@pytest.fixture
def clustering_config() -> ClusteringConfig:
    return ClusteringConfig()


@pytest.fixture
def zoom_config() -> ZoomConfig:
    return ZoomConfig()


@pytest.fixture(autouse=True)
def clean_profile_env(monkeypatch):
    """Make sure tests never pick up a profile from the outer environment."""
    monkeypatch.delenv("CANVAS_PROFILE", raising=False)
    yield


# ==============================================================================
# Utilities
# ==============================================================================

def point_signature(entities):
    """Set of (id, x, y, color) for every point, inside clusters or not."""
    return {(p.id, p.x, p.y, p.color) for p in iter_points(entities)}


def assert_approx_equal(a: float, b: float, tolerance: float = 1e-9):
    """Assert two floats are approximately equal."""
    assert abs(a - b) < tolerance, f"{a} != {b} (tolerance={tolerance})"
