"""
Language Manager sample - Main entry point

A small window whose labels follow the culture picked in a combo box.
"""

import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication, QComboBox, QLabel, QVBoxLayout, QWidget

from ..config.settings import LocalizationSettings
from ..core.localization_service import LocalizationService, create_service
from ..core.provider import LocalizationProvider
from ..ui.binding_source import LocalizationBindingSource
from ..utils.logger import configure_logging

RESOURCES_DIR = Path(__file__).parent / "resources"
BASE_PATH = "Welcome.Welcome"
GREETING_NAME = "Language Manager"


class WelcomeWindow(QWidget):
    """Window with a title, a greeting and a language picker."""

    def __init__(self, service: LocalizationService, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._service = service
        self._source = LocalizationBindingSource(service, parent=self)

        self.title_label = QLabel()
        self.greeting_label = QLabel()
        self.language_label = QLabel()
        self.language_combo = QComboBox()

        cultures = [c for c in service.available_cultures() if not c.is_invariant]
        if service.get_language() not in cultures:
            cultures.append(service.get_language())
        for culture in cultures:
            self.language_combo.addItem(culture.name or "invariant", culture)
        self.language_combo.setCurrentIndex(cultures.index(service.get_language()))
        self.language_combo.currentIndexChanged.connect(self._on_language_selected)

        layout = QVBoxLayout(self)
        layout.addWidget(self.title_label)
        layout.addWidget(self.greeting_label)
        layout.addWidget(self.language_label)
        layout.addWidget(self.language_combo)

        self._source.bind(self.title_label.setText, "Title")
        self._source.bind(self.language_label.setText, "LanguageLabel")
        self._source.bind(self.setWindowTitle, "Title")
        self._source.languageChanged.connect(self.retranslate_ui)
        self.retranslate_ui()

    def retranslate_ui(self):
        self.greeting_label.setText(self._source.tr("Greeting", name=GREETING_NAME))

    def _on_language_selected(self, index: int):
        culture = self.language_combo.itemData(index)
        if culture is not None:
            self._service.set_language(culture)


def main(culture: Optional[str] = None) -> int:
    """Run the sample window."""
    settings = LocalizationSettings(resource_root=RESOURCES_DIR, default_culture=culture or "de-DE")
    configure_logging(settings.log_level)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Language Manager Sample")

    service = create_service(BASE_PATH, settings=settings)
    LocalizationProvider.set_service(service)

    window = WelcomeWindow(service)
    window.show()
    return app.exec()
