"""
Sample application showing runtime language switching.
"""

from .app import main

__all__ = ["main"]
