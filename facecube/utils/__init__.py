"""
Utility functions for facecube.

This module provides terminal colouring and random-key helpers shared across the package.
"""

from facecube.utils.util import coloring_str, random_key

__all__ = [
    "coloring_str",
    "random_key",
]
