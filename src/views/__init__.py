"""
View layer - Logical view names resolved to rendered templates.
"""

from .exceptions import ViewError, ViewNotFound
from .resolver import ViewResolver

__all__ = [
    "ViewError",
    "ViewNotFound",
    "ViewResolver",
]
