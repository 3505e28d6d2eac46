"""
Language Manager - Runtime localization service
PySide6 Edition
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("language-manager")
except PackageNotFoundError:
    # Package not installed
    __version__ = "1.0.0"

from .config.settings import LocalizationSettings
from .core import (
    CultureInfo,
    DictResourceStore,
    JsonResourceStore,
    LocalizationError,
    LocalizationProvider,
    LocalizationService,
    LocalizationServiceBase,
    ResourceContextError,
    ResourceStore,
    ResourceStoreFactory,
    create_service,
)
from .utils.logger import configure_logging

__all__ = [
    "__version__",
    "CultureInfo",
    "DictResourceStore",
    "JsonResourceStore",
    "LocalizationError",
    "LocalizationProvider",
    "LocalizationService",
    "LocalizationServiceBase",
    "LocalizationSettings",
    "ResourceContextError",
    "ResourceStore",
    "ResourceStoreFactory",
    "configure_logging",
    "create_service",
]
