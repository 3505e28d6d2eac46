"""
Resource Store - Keyed resource lookup with culture fallback

A resource store holds the resource sets of one resource context (base path),
one set per culture, and resolves (key, culture) by walking the culture's
fallback chain:

    requested culture -> neutral culture -> invariant culture

File layout for JsonResourceStore, base path "Resources.Login.Login":

    <root>/Resources/Login/Login.json         (invariant, required)
    <root>/Resources/Login/Login.de.json      (neutral)
    <root>/Resources/Login/Login.de-DE.json   (specific)
"""

import base64
import binascii
import copy
import io
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from cachetools import LRUCache

from ..constants import (
    BASE64_MARKER,
    DEFAULT_CACHE_SIZE,
    FILE_MARKER,
    RESOURCE_FILE_SUFFIX,
)
from .culture import CultureInfo
from .exceptions import ResourceContextError

if TYPE_CHECKING:
    from ..config.settings import LocalizationSettings

logger = logging.getLogger(__name__)

ResourceSet = Dict[str, Any]


class ResourceStore(ABC):
    """
    Abstract base class for resource stores.

    Subclasses only provide the resource set of a single culture; fallback
    across the culture chain is handled here.

    Usage:
        store = JsonResourceStore("Resources.Login.Login", root=Path("res"))
        store.get_string("Default", CultureInfo("fr-FR"))  # invariant value
    """

    @property
    @abstractmethod
    def base_name(self) -> str:
        """Human-readable name of the resource context."""
        pass

    @abstractmethod
    def get_resource_set(self, culture: CultureInfo) -> Optional[ResourceSet]:
        """
        Get the resource set of exactly one culture (no fallback).

        Returns:
            Mapping of key to value, or None if the culture has no set
        """
        pass

    @abstractmethod
    def available_cultures(self) -> List[CultureInfo]:
        """Get the cultures that have a resource set, sorted by name."""
        pass

    def get_object(self, key: str, culture: CultureInfo) -> Optional[Any]:
        """
        Resolve a key for a culture, walking its fallback chain.

        Args:
            key: Resource key
            culture: Requested culture

        Returns:
            The value of the most specific culture defining the key, or None
        """
        for candidate in culture.fallback_chain():
            resource_set = self.get_resource_set(candidate)
            if resource_set is None:
                continue
            value = resource_set.get(key)
            if isinstance(value, (dict, list)):
                # Cached sets are shared
                return copy.deepcopy(value)
            if value is not None:
                return value
        return None

    def get_string(self, key: str, culture: CultureInfo) -> Optional[str]:
        """Resolve a string resource. Non-string values count as absent."""
        value = self.get_object(key, culture)
        if value is not None and not isinstance(value, str):
            logger.debug(f"Resource '{key}' in '{self.base_name}' is not a string ({type(value).__name__})")
            return None
        return value

    def get_stream(self, key: str, culture: CultureInfo) -> Optional[io.BytesIO]:
        """Resolve a binary resource as a stream. Strings are UTF-8 encoded."""
        value = self.get_object(key, culture)
        if isinstance(value, bytes):
            return io.BytesIO(value)
        if isinstance(value, str):
            return io.BytesIO(value.encode("utf-8"))
        return None


class DictResourceStore(ResourceStore):
    """
    In-memory resource store.

    Usage:
        store = DictResourceStore("Login", {
            "": {"Default": "DEFAULT"},
            "de-DE": {"Default": "GERMANY"},
        })
    """

    def __init__(self, base_name: str, sets: Optional[Dict[str, ResourceSet]] = None):
        self._base_name = base_name
        self._sets: Dict[CultureInfo, ResourceSet] = {}
        for tag, resource_set in (sets or {}).items():
            self._sets[CultureInfo(tag)] = dict(resource_set)

    @classmethod
    def from_settings(cls, base_path: str, settings: "LocalizationSettings") -> "DictResourceStore":
        """
        Create a store from the resources mapping of settings.

        Raises:
            ResourceContextError: If settings define no invariant set for base_path
        """
        sets = settings.resources.get(base_path)
        if not isinstance(sets, dict) or not isinstance(sets.get(""), dict):
            raise ResourceContextError(base_path, "no invariant resource set in settings")
        try:
            return cls(base_path, sets)
        except (AttributeError, TypeError, ValueError) as e:
            raise ResourceContextError(base_path, f"invalid resources in settings: {e}") from e

    @property
    def base_name(self) -> str:
        return self._base_name

    def get_resource_set(self, culture: CultureInfo) -> Optional[ResourceSet]:
        return self._sets.get(culture)

    def available_cultures(self) -> List[CultureInfo]:
        return sorted(self._sets, key=lambda c: c.name)


class JsonResourceStore(ResourceStore):
    """
    File-backed resource store reading one JSON object per culture.

    The invariant set is loaded eagerly so that a missing or malformed
    context fails at construction. Culture sets are loaded on first use and
    kept in an LRU cache.

    Values may be any JSON value. Binary resources are written as
    {"$base64": "..."} or {"$file": "relative/path"}.
    """

    def __init__(self, base_path: str, root: Path, cache_size: int = DEFAULT_CACHE_SIZE):
        """
        Open a resource context.

        Args:
            base_path: Dotted base path (e.g. "Resources.Login.Login")
            root: Directory the base path is resolved against
            cache_size: Maximum number of culture sets kept in memory

        Raises:
            ResourceContextError: If the base path is invalid or its invariant
                resource set is missing or malformed
        """
        segments = base_path.split(".")
        if not base_path or any(not s for s in segments):
            raise ResourceContextError(base_path, "invalid base path")

        self._base_path = base_path
        self._name = segments[-1]
        self._directory = Path(root).joinpath(*segments[:-1])
        self._cache: LRUCache = LRUCache(maxsize=cache_size)

        invariant_file = self._directory / f"{self._name}{RESOURCE_FILE_SUFFIX}"
        if not invariant_file.is_file():
            raise ResourceContextError(base_path, f"resource file not found: {invariant_file}")

        try:
            self._invariant = self._load_file(invariant_file)
        except (OSError, ValueError) as e:
            raise ResourceContextError(base_path, str(e)) from e

        self._culture_files = self._index_culture_files()
        logger.debug(
            f"Opened resource context '{base_path}' "
            f"({len(self._invariant)} keys, {len(self._culture_files)} cultures)"
        )

    @classmethod
    def from_settings(cls, base_path: str, settings: "LocalizationSettings") -> "JsonResourceStore":
        """Create a store using the resource root and cache size of settings."""
        return cls(base_path, root=settings.resource_root, cache_size=settings.cache_size)

    @property
    def base_name(self) -> str:
        return self._base_path

    @property
    def directory(self) -> Path:
        return self._directory

    def get_resource_set(self, culture: CultureInfo) -> Optional[ResourceSet]:
        if culture.is_invariant:
            return self._invariant

        if culture.name in self._cache:
            return self._cache[culture.name]

        resource_set = None
        file_path = self._culture_files.get(culture)
        if file_path is not None:
            try:
                resource_set = self._load_file(file_path)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load {file_path}: {e}")

        self._cache[culture.name] = resource_set
        return resource_set

    def available_cultures(self) -> List[CultureInfo]:
        cultures = [CultureInfo.invariant()] + list(self._culture_files)
        return sorted(cultures, key=lambda c: c.name)

    def _index_culture_files(self) -> Dict[CultureInfo, Path]:
        """Map each culture to its resource file (<name>.<culture>.json)."""
        index: Dict[CultureInfo, Path] = {}
        prefix = f"{self._name}."
        for file_path in self._directory.glob(f"{self._name}.*{RESOURCE_FILE_SUFFIX}"):
            tag = file_path.name[len(prefix):-len(RESOURCE_FILE_SUFFIX)]
            try:
                index[CultureInfo(tag)] = file_path
            except ValueError:
                logger.warning(f"Ignoring resource file with invalid culture tag: {file_path.name}")
        return index

    def _load_file(self, file_path: Path) -> ResourceSet:
        """
        Load and decode one resource set file.

        Raises:
            ValueError: If the file is not a JSON object
            OSError: If the file cannot be read
        """
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Invalid format in {file_path}: expected JSON object")

        resource_set: ResourceSet = {}
        for key, value in data.items():
            try:
                resource_set[key] = self._decode_value(value, file_path.parent)
            except (OSError, ValueError, binascii.Error) as e:
                logger.error(f"Skipping resource '{key}' in {file_path.name}: {e}")
        return resource_set

    @staticmethod
    def _decode_value(value: Any, directory: Path) -> Any:
        """Decode binary markers; other values are returned unchanged."""
        if isinstance(value, dict) and len(value) == 1:
            for marker in (BASE64_MARKER, FILE_MARKER):
                if marker in value and not isinstance(value[marker], str):
                    raise ValueError(f"{marker} expects a string, got {type(value[marker]).__name__}")
            if BASE64_MARKER in value:
                return base64.b64decode(value[BASE64_MARKER], validate=True)
            if FILE_MARKER in value:
                return (directory / value[FILE_MARKER]).read_bytes()
        return value


StoreBuilder = Callable[[str, "LocalizationSettings"], ResourceStore]


class ResourceStoreFactory:
    """
    Registry of resource store kinds, selected by scheme name.

    Usage:
        store = ResourceStoreFactory.create("json", "Resources.Login.Login", settings)
        ResourceStoreFactory.register("sqlite", SqliteResourceStore.from_settings)
    """

    _builders: Dict[str, StoreBuilder] = {}

    @classmethod
    def create(cls, scheme: str, base_path: str, settings: "LocalizationSettings") -> ResourceStore:
        """
        Create a store for a base path.

        Raises:
            ValueError: If the scheme is not registered
            ResourceContextError: If the store cannot open the context
        """
        builder = cls._builders.get(scheme.lower())
        if builder is None:
            raise ValueError(
                f"Unknown resource store '{scheme}', expected one of: {', '.join(cls.supported_schemes())}"
            )
        return builder(base_path, settings)

    @classmethod
    def is_supported(cls, scheme: str) -> bool:
        return scheme.lower() in cls._builders

    @classmethod
    def supported_schemes(cls) -> List[str]:
        return sorted(cls._builders)

    @classmethod
    def register(cls, scheme: str, builder: StoreBuilder):
        """
        Register a store kind.

        Args:
            scheme: Scheme identifier used in settings ("store: json")
            builder: Callable (base_path, settings) -> ResourceStore
        """
        cls._builders[scheme.lower()] = builder


ResourceStoreFactory.register("json", JsonResourceStore.from_settings)
ResourceStoreFactory.register("memory", DictResourceStore.from_settings)
