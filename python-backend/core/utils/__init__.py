"""
Utility helpers shared across the engine
"""

from .decorators import timer

__all__ = ["timer"]
