"""
Localization Settings - YAML configuration with environment overrides

Example localization.yaml:

    resource_root: _AppConfig/resources
    default_culture: de-DE
    store: json
    cache_size: 32
    log_level: INFO

With store: memory, resource sets are read from the settings themselves:

    store: memory
    resources:
      Login:
        "": {Default: DEFAULT}
        de-DE: {Default: GERMANY}
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..constants import (
    DEFAULT_CACHE_SIZE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RESOURCE_ROOT,
    DEFAULT_STORE_SCHEME,
    ENV_CULTURE,
    ENV_RESOURCE_ROOT,
)

logger = logging.getLogger(__name__)


@dataclass
class LocalizationSettings:
    """Settings used to build localization services and their resource stores."""
    resource_root: Path = field(default_factory=lambda: Path(DEFAULT_RESOURCE_ROOT))
    default_culture: Optional[str] = None
    store: str = DEFAULT_STORE_SCHEME
    cache_size: int = DEFAULT_CACHE_SIZE
    log_level: str = DEFAULT_LOG_LEVEL
    # base path -> culture tag -> key -> value, used by the memory store
    resources: Dict[str, Dict[str, Dict[str, Any]]] = field(default_factory=dict)

    def __post_init__(self):
        self.resource_root = Path(self.resource_root)
        if not isinstance(self.cache_size, int) or self.cache_size < 1:
            raise ValueError(f"cache_size must be a positive integer, got {self.cache_size!r}")
        if not isinstance(self.resources, dict):
            raise ValueError(f"resources must be a mapping, got {type(self.resources).__name__}")

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "LocalizationSettings":
        """
        Load settings from a YAML file, then apply environment overrides.

        A relative resource_root is resolved against the directory of the
        settings file.

        Args:
            path: Path to the YAML file. Defaults are used when None or when
                the file does not exist.

        Returns:
            LocalizationSettings instance

        Raises:
            ValueError: If the file is not valid YAML, is not a mapping or
                contains unknown keys
        """
        data = {}
        base_dir = None

        if path is not None:
            path = Path(path)
            if path.is_file():
                data = cls._read_yaml(path)
                base_dir = path.parent
                logger.debug(f"Loaded localization settings from {path}")
            else:
                logger.info(f"Settings file not found: {path}, using defaults")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown localization settings: {', '.join(sorted(unknown))}")

        settings = cls(**data)
        if base_dir is not None and not settings.resource_root.is_absolute():
            settings.resource_root = base_dir / settings.resource_root

        settings._apply_environment()
        return settings

    @staticmethod
    def _read_yaml(path: Path) -> dict:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid format in {path}: expected a mapping")
        return data

    def _apply_environment(self):
        """Override settings from LANGUAGE_MANAGER_* environment variables."""
        resource_root = os.environ.get(ENV_RESOURCE_ROOT)
        if resource_root:
            self.resource_root = Path(resource_root)

        culture = os.environ.get(ENV_CULTURE)
        if culture:
            self.default_culture = culture
