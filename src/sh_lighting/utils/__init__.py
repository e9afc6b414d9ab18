"""Utilities module."""

from .config import ProjectionConfig

__all__ = ["ProjectionConfig"]
