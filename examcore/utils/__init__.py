"""Utilities for examcore."""

from .logging_config import configure_logging

__all__ = [
    "configure_logging",
]
