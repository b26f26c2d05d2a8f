"""Command-line entry points for examcore.

``main`` parses and grades; ``validate_document`` is a small check meant for
automation scripts.
"""

from .main import main

__all__ = ["main"]
