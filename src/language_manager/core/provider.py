"""
LocalizationProvider - Process-wide localization service slot

Used by UI bindings and design-time tooling that cannot receive a service
explicitly. Application code should create a LocalizationService and pass it
where it is needed; assign it here only so that bindings can find it.

    service = LocalizationService("Resources.Welcome.Welcome", "de-DE")
    LocalizationProvider.set_service(service)
"""

import logging
from typing import Optional

from .localization_service import LocalizationService, LocalizationServiceBase

logger = logging.getLogger(__name__)


class LocalizationProvider:
    """
    Holder of the current process-wide localization service.

    If no service was assigned, a design-time service (empty context, keys
    returned unchanged) is created on first access.
    """

    _service: Optional[LocalizationServiceBase] = None

    @classmethod
    def get_service(cls) -> LocalizationServiceBase:
        """Get the current service, creating a design-time one if unset."""
        if cls._service is None:
            logger.debug("No localization service assigned, using design-time service")
            cls._service = LocalizationService("")
        return cls._service

    @classmethod
    def set_service(cls, service: LocalizationServiceBase):
        """
        Assign the process-wide service.

        Args:
            service: LocalizationService or any LocalizationServiceBase implementation
        """
        if service is None:
            raise TypeError("service must not be None, use reset() to clear it")
        cls._service = service
        logger.debug(f"Localization service assigned: {service}")

    @classmethod
    def has_service(cls) -> bool:
        """True if a service was assigned or already created."""
        return cls._service is not None

    @classmethod
    def reset(cls):
        """Clear the slot. The next get_service() returns a design-time service."""
        cls._service = None
