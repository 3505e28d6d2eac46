"""
PySide6 integration. Importing this package requires PySide6.
"""

from .binding_source import LocalizationBindingSource

__all__ = ["LocalizationBindingSource"]
