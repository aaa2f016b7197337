"""
Configuration loader for canvas profiles and environment variables.
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional, Tuple
import yaml

from src.spatial.clustering import ClusteringConfig
from src.spatial.scene import CanvasConfig
from src.spatial.zoom import ZoomConfig


DEFAULT_PROFILE = "default"


class ConfigLoader:
    """Load and manage configuration from YAML files and environment."""

    CONFIG_DIR = Path(__file__).parent.parent.parent / "configs"

    @classmethod
    def load_canvas_profile(cls, profile_name: str = DEFAULT_PROFILE) -> Dict[str, Any]:
        """
        Load a canvas profile configuration.

        Args:
            profile_name: Name of the profile (default, dense)

        Returns:
            Dictionary with configuration values

        Raises:
            FileNotFoundError: If profile doesn't exist
        """
        profile_path = cls.CONFIG_DIR / f"{profile_name}.yaml"

        if not profile_path.exists():
            available = sorted(f.stem for f in cls.CONFIG_DIR.glob("*.yaml"))
            raise FileNotFoundError(
                f"Profile '{profile_name}' not found. Available profiles: {', '.join(available)}"
            )

        with open(profile_path, "r") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def get_profile_from_env(cls) -> Optional[str]:
        """Get canvas profile name from CANVAS_PROFILE environment variable."""
        return os.getenv("CANVAS_PROFILE")

    @classmethod
    def load_default_or_env_profile(cls) -> Dict[str, Any]:
        """
        Load canvas profile from environment variable or use the default.

        Returns:
            Configuration dictionary
        """
        profile = cls.get_profile_from_env() or DEFAULT_PROFILE
        return cls.load_canvas_profile(profile)


def build_configs(
    profile: Dict[str, Any],
) -> Tuple[ClusteringConfig, ZoomConfig, CanvasConfig]:
    """
    Turn a profile dictionary into typed configuration objects.

    Missing sections or keys fall back to the dataclass defaults. Unknown
    keys raise ``TypeError`` from the dataclass constructor, and invalid
    values raise ``ValueError``.
    """
    return (
        ClusteringConfig(**(profile.get("clustering") or {})),
        ZoomConfig(**(profile.get("zoom") or {})),
        CanvasConfig(**(profile.get("canvas") or {})),
    )


def get_config() -> Dict[str, Any]:
    """Convenience function to get current configuration."""
    return ConfigLoader.load_default_or_env_profile()
