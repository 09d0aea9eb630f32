"""
Core cube model.

This module provides the facelet state, the move enumeration and the operations on states.
"""

from facecube.core.cube_state import CubeState, Face, clone, from_faces, reset, state_dataclass
from facecube.core.formatting import render_net, to_string
from facecube.core.moves import ALL_MOVES, Move, inverse_move_map
from facecube.core.queries import equals, facelet_counts, hash_code, is_solved
from facecube.core.scrambler import scramble, scramble_moves
from facecube.core.turns import (
    apply_action,
    apply_move,
    apply_moves,
    move_permutations,
    quarter_turn,
    rotate_face_clockwise,
)

__all__ = [
    "CubeState",
    "Face",
    "Move",
    "ALL_MOVES",
    "state_dataclass",
    "reset",
    "from_faces",
    "clone",
    "apply_move",
    "apply_moves",
    "apply_action",
    "move_permutations",
    "quarter_turn",
    "rotate_face_clockwise",
    "inverse_move_map",
    "is_solved",
    "equals",
    "hash_code",
    "facelet_counts",
    "scramble",
    "scramble_moves",
    "to_string",
    "render_net",
]
