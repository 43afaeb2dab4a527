"""Utility helpers for sitmap."""

from sitmap.utils.logger import get_logger

__all__ = ["get_logger"]
