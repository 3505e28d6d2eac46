from .settings import LocalizationSettings

__all__ = ["LocalizationSettings"]
