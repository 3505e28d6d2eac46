"""
Localization exceptions.
"""


class LocalizationError(Exception):
    """Base class for all Language Manager errors."""


class ResourceContextError(LocalizationError):
    """
    A resource context (base path) could not be opened.

    Raised when the invariant resource set of a base path is missing or
    malformed. A non-existent bundle is a programming error, so callers
    are not expected to recover from it.
    """

    def __init__(self, base_path: str, reason: str):
        self.base_path = base_path
        self.reason = reason
        super().__init__(f"Cannot open resource context '{base_path}': {reason}")
