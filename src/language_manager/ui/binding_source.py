"""
LocalizationBindingSource - Qt adapter for LocalizationService

Re-emits service change notifications as a Qt signal so widgets can
retranslate themselves, and offers keyed lookup for labels.

Usage:
    source = LocalizationBindingSource(service, parent=window)
    source.bind(title_label.setText, "Title")      # set now and on every change
    source.languageChanged.connect(window.retranslate_ui)
    ok_button.setText(source["Ok"])
"""

import logging
from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from ..core.localization_service import LocalizationServiceBase
from ..core.provider import LocalizationProvider

logger = logging.getLogger(__name__)


class LocalizationBindingSource(QObject):
    """
    Binding source for localized strings in PySide6 UIs.

    Emits languageChanged (no arguments) after every culture or context
    change of the underlying service.
    """

    languageChanged = Signal()

    def __init__(self, service: Optional[LocalizationServiceBase] = None, parent: Optional[QObject] = None):
        """
        Initialize the binding source.

        Args:
            service: Service to read from. Defaults to LocalizationProvider's service.
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self._service = service or LocalizationProvider.get_service()
        self._bindings: List[Tuple[Callable[[str], None], str]] = []
        self._service.register_observer(self._on_service_changed)

    @property
    def service(self) -> LocalizationServiceBase:
        return self._service

    def __getitem__(self, key: str) -> str:
        return self._service.get_string(key)

    def tr(self, key: str, **kwargs) -> str:
        """
        Get the localized string for a key.

        Args:
            key: Resource key
            **kwargs: Format parameters for string interpolation

        Returns:
            Localized (and formatted) string
        """
        text = self._service.get_string(key)
        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, IndexError, ValueError) as e:
                logger.warning(f"Error formatting localized string '{key}': {e}")
        return text

    def bind(self, setter: Callable[[str], None], key: str):
        """
        Bind a setter to a key.

        The setter is called with the current value right away and again
        after every change.

        Args:
            setter: Callable receiving the localized string (e.g. QLabel.setText)
            key: Resource key
        """
        self._bindings.append((setter, key))
        setter(self[key])

    def detach(self):
        """Stop listening to the service and drop all bindings."""
        self._service.unregister_observer(self._on_service_changed)
        self._bindings.clear()

    def _on_service_changed(self):
        for setter, key in list(self._bindings):
            setter(self[key])
        self.languageChanged.emit()
