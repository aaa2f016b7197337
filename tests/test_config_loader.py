"""
Unit Tests for canvas profile loading (src/tools/config_loader.py)
"""

import pytest

from src.spatial import ClusteringConfig, GroupingScope, ZoomConfig
from src.spatial.scene import CanvasConfig
from src.tools.config_loader import ConfigLoader, build_configs, get_config


class TestConfigLoader:
    """Test YAML profile loading."""

    def test_load_default_profile(self):
        """The default profile mirrors the dataclass defaults."""
        profile = ConfigLoader.load_canvas_profile("default")
        clustering, zoom, canvas = build_configs(profile)

        assert clustering == ClusteringConfig()
        assert zoom == ZoomConfig()
        assert canvas == CanvasConfig()

    def test_load_dense_profile(self):
        """The dense profile overrides radii and zoom range."""
        clustering, zoom, canvas = build_configs(ConfigLoader.load_canvas_profile("dense"))

        assert clustering.point_radius == 10.0
        assert clustering.scope is GroupingScope.HIERARCHICAL
        assert zoom.cluster_threshold == 0.5
        assert canvas.width == 2800

    def test_missing_profile(self):
        """Unknown profiles list the available ones."""
        with pytest.raises(FileNotFoundError, match="Available profiles: default, dense"):
            ConfigLoader.load_canvas_profile("nonexistent")

    def test_profile_from_env(self, monkeypatch):
        """CANVAS_PROFILE selects the profile."""
        monkeypatch.setenv("CANVAS_PROFILE", "dense")

        assert ConfigLoader.get_profile_from_env() == "dense"
        assert get_config()["zoom"]["cluster_threshold"] == 0.5

    def test_default_without_env(self):
        """Without CANVAS_PROFILE the default profile is used."""
        assert get_config()["clustering"]["point_radius"] == 20.0

    def test_custom_config_dir(self, tmp_path, monkeypatch):
        """Profiles are read from CONFIG_DIR."""
        (tmp_path / "tiny.yaml").write_text("clustering:\n  point_radius: 2.5\n")
        monkeypatch.setattr(ConfigLoader, "CONFIG_DIR", tmp_path)

        clustering, zoom, _ = build_configs(ConfigLoader.load_canvas_profile("tiny"))

        assert clustering.point_radius == 2.5
        assert zoom == ZoomConfig()

    def test_empty_profile_file(self, tmp_path, monkeypatch):
        """An empty YAML file yields all defaults."""
        (tmp_path / "empty.yaml").write_text("")
        monkeypatch.setattr(ConfigLoader, "CONFIG_DIR", tmp_path)

        assert ConfigLoader.load_canvas_profile("empty") == {}


class TestBuildConfigs:
    """Test conversion of profile dictionaries."""

    def test_empty_profile_uses_defaults(self):
        """Missing sections fall back to defaults."""
        clustering, zoom, canvas = build_configs({})

        assert clustering == ClusteringConfig()
        assert zoom == ZoomConfig()
        assert canvas == CanvasConfig()

    def test_invalid_values_rejected(self):
        """Bad values surface as ValueError."""
        with pytest.raises(ValueError):
            build_configs({"zoom": {"min_zoom": -1}})
        with pytest.raises(ValueError):
            build_configs({"clustering": {"scope": "bogus"}})

    def test_unknown_keys_rejected(self):
        """Typos in a profile are not silently ignored."""
        with pytest.raises(TypeError):
            build_configs({"clustering": {"point_radiuss": 3}})
