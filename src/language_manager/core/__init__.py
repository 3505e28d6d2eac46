"""
Core localization components: cultures, resource stores and the service.
"""

from .culture import CultureInfo, normalize_tag
from .exceptions import LocalizationError, ResourceContextError
from .localization_service import LocalizationService, LocalizationServiceBase, create_service
from .provider import LocalizationProvider
from .resource_store import DictResourceStore, JsonResourceStore, ResourceStore, ResourceStoreFactory

__all__ = [
    "CultureInfo",
    "normalize_tag",
    "LocalizationError",
    "ResourceContextError",
    "LocalizationService",
    "LocalizationServiceBase",
    "create_service",
    "LocalizationProvider",
    "DictResourceStore",
    "JsonResourceStore",
    "ResourceStore",
    "ResourceStoreFactory",
]
