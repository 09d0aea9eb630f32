from __future__ import annotations

from functools import reduce
from operator import xor

import numpy as np

from facecube.core.cube_state import NUM_FACES, CubeState

_HASH_MASK = 0xFFFFFFFF


def is_solved(state: CubeState) -> bool:
    """True iff every face is a single colour. Stops at the first mixed face."""
    for face in np.asarray(state.faces):
        if not np.all(face == face[0, 0]):
            return False
    return True


def equals(a, b) -> bool:
    """Face-by-face comparison; ``False`` if either side is not a :class:`CubeState`."""
    if not isinstance(a, CubeState) or not isinstance(b, CubeState):
        return False
    for face_a, face_b in zip(np.asarray(a.faces), np.asarray(b.faces)):
        if not np.array_equal(face_a, face_b):
            return False
    return True


def _face_hash(face: np.ndarray) -> int:
    result = 1
    for row in face:
        row_hash = 1
        for value in row:
            row_hash = (31 * row_hash + int(value)) & _HASH_MASK
        result = (31 * result + row_hash) & _HASH_MASK
    return result


def hash_code(state: CubeState) -> int:
    """XOR of a 32-bit deep hash of each face; equal states hash equally."""
    return reduce(xor, (_face_hash(face) for face in np.asarray(state.faces)))


def facelet_counts(state: CubeState) -> np.ndarray:
    """Number of facelets of each colour, indexed by colour id."""
    return np.bincount(np.asarray(state.faces).reshape(-1), minlength=NUM_FACES)
