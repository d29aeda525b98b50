"""
Directory Configuration Loading.

A DirectoryConfig is assembled from layers, later layers winning key by
key: the YAML file, then an optional profile from config/profiles/, then
the HOSPITAL_DIRECTORY_CSV environment variable, which replaces
source.path so a deployment can point at its own export.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from hospital_directory.config.models import DirectoryConfig

logger = logging.getLogger(__name__)

SOURCE_ENV_VAR = "HOSPITAL_DIRECTORY_CSV"
PROFILES_DIR = Path("config") / "profiles"

Layer = Dict[str, Any]


def deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Layer:
    """Overlay one config layer on another; nested sections merge."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def read_layer(path: Path) -> Layer:
    """Read one YAML layer; an empty file is an empty layer."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class ConfigLoader:
    """Builds a validated DirectoryConfig from YAML layers and the environment."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Args:
            base_path: Directory that config paths and profiles resolve against
            environ: Environment to read the source override from (default: os.environ)
        """
        self._base_path = base_path or Path(".")
        self._environ = os.environ if environ is None else environ

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> DirectoryConfig:
        """
        Load the directory configuration.

        Args:
            config_path: YAML file, absolute or relative to the base path
            profile: Name of a profile under config/profiles/ to overlay

        Raises:
            FileNotFoundError: If the file or the profile does not exist
            ValidationError: If the merged configuration is invalid
        """
        layers: List[Layer] = [read_layer(self._base_path / config_path)]
        if profile:
            layers.append(read_layer(self._profile_path(profile)))

        merged: Layer = {}
        for layer in layers:
            merged = deep_merge(merged, layer)
        return self.load_from_dict(merged)

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> DirectoryConfig:
        """Validate an in-memory config, applying the environment override."""
        source_path = self._environ.get(SOURCE_ENV_VAR)
        if source_path:
            logger.debug(f"{SOURCE_ENV_VAR} overrides source.path: {source_path}")
            config_dict = deep_merge(config_dict, {"source": {"path": source_path}})
        return DirectoryConfig.model_validate(config_dict)

    def _profile_path(self, profile: str) -> Path:
        path = self._base_path / PROFILES_DIR / f"{profile}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return path


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> DirectoryConfig:
    """Load configuration using the process environment."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
