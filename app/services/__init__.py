"""Services package for GOSHALA application."""

from . import forum_presenter

__all__ = [
    "forum_presenter",
]
