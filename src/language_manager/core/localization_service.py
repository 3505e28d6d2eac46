"""
LocalizationService - Runtime resolution of culture-specific resources

The service owns the current culture and the active resource context
(base path). Keys are resolved against the resource store of that context;
culture fallback is the store's job.

Two states:
- design-time: empty base path, get_string() returns the key itself
- bound: non-empty base path, full resolution against the resource store

Every successful set_language() / update_context() notifies observers once,
after the new state is committed.
"""

import io
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Union

from cachetools import LRUCache

from ..config.settings import LocalizationSettings
from ..constants import DESIGN_TIME_CONTEXT, MISSING_KEY_LOG_SIZE, MISSING_KEY_PREFIX
from .culture import CultureInfo
from .resource_store import ResourceStore, ResourceStoreFactory

logger = logging.getLogger(__name__)

CultureLike = Union[CultureInfo, str]
StoreFactory = Callable[[str], ResourceStore]


class LocalizationServiceBase(ABC):
    """
    Contract for localization services.

    Implement this to plug a custom service into LocalizationProvider or
    LocalizationBindingSource.
    """

    @abstractmethod
    def set_language(self, culture: CultureLike):
        pass

    @abstractmethod
    def update_context(self, base_path: str):
        pass

    @abstractmethod
    def get_string(self, key: str) -> str:
        pass

    @abstractmethod
    def get_language(self) -> CultureInfo:
        pass

    @abstractmethod
    def register_observer(self, callback: Callable):
        pass

    @abstractmethod
    def unregister_observer(self, callback: Callable):
        pass


class LocalizationService(LocalizationServiceBase):
    """
    Resolves resource keys for the current culture and resource context.

    Usage:
        service = LocalizationService("Resources.Login.Login", "de-DE")
        service.get_string("Default")          # "GERMANY"

        service.register_observer(window.retranslate)
        service.set_language("en-US")           # observers called once
        service.update_context("Resources.CreateAccount.CreateAccount")
    """

    def __init__(
        self,
        base_path: str = DESIGN_TIME_CONTEXT,
        culture: Optional[CultureLike] = None,
        store_factory: Optional[StoreFactory] = None,
    ):
        """
        Initialize the service.

        Args:
            base_path: Resource context to bind. Empty string means design-time
                mode (keys are returned unchanged).
            culture: Initial culture. Defaults to the ambient UI culture.
            store_factory: Callable base_path -> ResourceStore. Defaults to a
                JSON store configured from LocalizationSettings.load().

        Raises:
            ResourceContextError: If the resource context cannot be opened
        """
        self._observers: List[Callable] = []
        self._reported_missing: LRUCache = LRUCache(maxsize=MISSING_KEY_LOG_SIZE)
        self._store_factory = store_factory or _default_store_factory
        self._current_culture = self._resolve_culture(culture)
        self._base_path = base_path
        self._store = self._open_store(base_path)

        logger.debug(f"LocalizationService initialized: context='{base_path}', culture='{self._current_culture}'")

    # ==================== State ====================

    @property
    def base_path(self) -> str:
        """Identifier of the active resource context."""
        return self._base_path

    @property
    def is_design_time(self) -> bool:
        return self._store is None

    @property
    def store(self) -> Optional[ResourceStore]:
        """Resource store of the active context (None in design-time mode)."""
        return self._store

    def get_language(self) -> CultureInfo:
        """Get the current culture."""
        return self._current_culture

    def available_cultures(self) -> List[CultureInfo]:
        """Get the cultures the active context has resources for."""
        if self._store is None:
            return []
        return self._store.available_cultures()

    # ==================== Mutations ====================

    def set_language(self, culture: CultureLike):
        """
        Set the current culture and notify observers.

        Observers are notified on every call, even when the culture does
        not change.

        Args:
            culture: CultureInfo or culture tag (e.g. "de-DE")

        Raises:
            TypeError: If culture is None or of an unsupported type
            ValueError: If culture is an invalid tag
        """
        if culture is None:
            raise TypeError("culture must not be None")

        self._current_culture = CultureInfo.coerce(culture)
        logger.info(f"Language changed to: {self._current_culture.name or 'invariant'}")
        self._notify_observers()

    def update_context(self, base_path: str):
        """
        Point the service at another resource context and notify observers.

        The current culture is kept. The new store is opened before any state
        changes, so a failure leaves the service untouched and nobody is
        notified.

        Args:
            base_path: New resource context, e.g. "Resources.CreateAccount.CreateAccount".
                An empty string switches back to design-time mode.

        Raises:
            ResourceContextError: If the resource context cannot be opened
        """
        store = self._open_store(base_path)

        self._store = store
        self._base_path = base_path
        logger.info(f"Resource context changed to: '{base_path}'")
        self._notify_observers()

    # ==================== Resolution ====================

    def get_string(self, key: str) -> str:
        """
        Get the localized string for a key.

        Args:
            key: Resource key

        Returns:
            The localized string; the key itself in design-time mode;
            "MissingKey:<context>" if no culture in the fallback chain
            defines the key
        """
        if self._store is None:
            return key

        value = self._store.get_string(key, self._current_culture)
        if value is None:
            return self._missing_key(key)
        return value

    def get_object(self, key: str) -> Any:
        """
        Get a resource of any type for a key.

        Returns:
            The resource value; the key itself in design-time mode;
            "MissingKey:<context>" if the key is not found
        """
        if self._store is None:
            return key

        value = self._store.get_object(key, self._current_culture)
        if value is None:
            return self._missing_key(key)
        return value

    def get_stream(self, key: str) -> io.BytesIO:
        """
        Get a binary resource as a stream.

        Returns:
            Stream over the resource bytes; an empty stream in design-time
            mode or if the key is not found
        """
        if self._store is None:
            return io.BytesIO()

        stream = self._store.get_stream(key, self._current_culture)
        if stream is None:
            self._missing_key(key)
            return io.BytesIO()
        return stream

    # ==================== Observers ====================

    def register_observer(self, callback: Callable):
        """
        Register a callback for culture/context changes.

        Args:
            callback: Function to call after each change (no arguments)
        """
        if callback not in self._observers:
            self._observers.append(callback)
            logger.debug(f"Registered localization observer: {callback}")

    def unregister_observer(self, callback: Callable):
        """Unregister a change observer. Unknown callbacks are ignored."""
        if callback in self._observers:
            self._observers.remove(callback)
            logger.debug(f"Unregistered localization observer: {callback}")

    def _notify_observers(self):
        """Notify all observers that culture or context changed."""
        logger.debug(f"Notifying {len(self._observers)} localization observers")
        for callback in list(self._observers):
            try:
                callback()
            except Exception as e:
                logger.error(f"Error notifying localization observer {callback}: {e}")

    # ==================== Helpers ====================

    def _open_store(self, base_path: str) -> Optional[ResourceStore]:
        if base_path == DESIGN_TIME_CONTEXT:
            return None
        return self._store_factory(base_path)

    def _missing_key(self, key: str) -> str:
        """Build the missing-key sentinel, logging each miss once."""
        base_name = self._store.base_name
        marker = (base_name, key, self._current_culture.name)
        if marker not in self._reported_missing:
            self._reported_missing[marker] = True
            logger.warning(f"Missing resource '{key}' in '{base_name}' for culture '{self._current_culture}'")
        return f"{MISSING_KEY_PREFIX}{base_name}"

    @staticmethod
    def _resolve_culture(culture: Optional[CultureLike]) -> CultureInfo:
        """Use the given culture, falling back to the ambient UI culture."""
        if culture is None:
            return CultureInfo.current_ui_culture()
        if isinstance(culture, str):
            try:
                return CultureInfo(culture)
            except ValueError:
                ambient = CultureInfo.current_ui_culture()
                logger.warning(f"Invalid culture '{culture}', using ambient culture '{ambient}'")
                return ambient
        return CultureInfo.coerce(culture)


def _default_store_factory(base_path: str) -> ResourceStore:
    settings = LocalizationSettings.load()
    return ResourceStoreFactory.create(settings.store, base_path, settings)


def create_service(
    base_path: str,
    culture: Optional[CultureLike] = None,
    settings: Optional[LocalizationSettings] = None,
) -> LocalizationService:
    """
    Create a LocalizationService from settings.

    Args:
        base_path: Resource context to bind ("" for design-time mode)
        culture: Initial culture. Defaults to settings.default_culture, then
            the ambient UI culture.
        settings: Settings to use. Defaults to LocalizationSettings.load().

    Returns:
        LocalizationService bound to base_path
    """
    settings = settings or LocalizationSettings.load()

    def store_factory(path: str) -> ResourceStore:
        return ResourceStoreFactory.create(settings.store, path, settings)

    return LocalizationService(
        base_path,
        culture=culture if culture is not None else settings.default_culture,
        store_factory=store_factory,
    )
