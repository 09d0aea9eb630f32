"""
Puzzle environments for facecube.

This module wraps the facelet cube model in a puzzle-style interface with integer actions.
"""

from facecube.puzzles.facelet_cube import FaceletCube

__all__ = [
    "FaceletCube",
]
