"""
facecube: a facelet model of the 3x3x3 cube on JAX

Represents the cube as six 3x3 faces of colours and applies the 18 face turns to it,
with solved checks, equality, hashing, cloning and random scrambles.
"""

# Core model
from facecube.core import (
    ALL_MOVES,
    CubeState,
    Face,
    Move,
    apply_action,
    apply_move,
    apply_moves,
    clone,
    equals,
    facelet_counts,
    from_faces,
    hash_code,
    is_solved,
    render_net,
    reset,
    scramble,
    scramble_moves,
    to_string,
)

# Puzzle environment
from facecube.puzzles import FaceletCube

__version__ = "0.1.0"

__all__ = [
    # Core model
    "CubeState",
    "Face",
    "Move",
    "ALL_MOVES",
    "reset",
    "from_faces",
    "clone",
    "apply_move",
    "apply_moves",
    "apply_action",
    "is_solved",
    "equals",
    "hash_code",
    "facelet_counts",
    "scramble",
    "scramble_moves",
    "to_string",
    "render_net",
    # Puzzle environment
    "FaceletCube",
]
