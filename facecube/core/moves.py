from __future__ import annotations

from enum import IntEnum

import jax.numpy as jnp

from facecube.core.cube_state import Face

face_letters = {
    Face.UP: "U",
    Face.DOWN: "D",
    Face.LEFT: "L",
    Face.RIGHT: "R",
    Face.FRONT: "F",
    Face.BACK: "B",
}

# (clockwise quarter turns, notation suffix) per variant, in member order.
_VARIANTS = ((1, ""), (3, "'"), (2, "2"))
_FACE_ORDER = (Face.UP, Face.DOWN, Face.LEFT, Face.RIGHT, Face.FRONT, Face.BACK)


class Move(IntEnum):
    """
    The 18 face turns of a 3x3x3 cube.

    Members come in groups of three per face: clockwise quarter turn,
    counter-clockwise quarter turn and half turn.
    """

    U = 0
    U_PRIME = 1
    U2 = 2
    D = 3
    D_PRIME = 4
    D2 = 5
    L = 6
    L_PRIME = 7
    L2 = 8
    R = 9
    R_PRIME = 10
    R2 = 11
    F = 12
    F_PRIME = 13
    F2 = 14
    B = 15
    B_PRIME = 16
    B2 = 17

    @property
    def face(self) -> Face:
        return _FACE_ORDER[self.value // 3]

    @property
    def quarter_turns(self) -> int:
        """Number of clockwise quarter turns this move is composed of."""
        return _VARIANTS[self.value % 3][0]

    @property
    def notation(self) -> str:
        return face_letters[self.face] + _VARIANTS[self.value % 3][1]

    @property
    def inverse(self) -> "Move":
        variant = self.value % 3
        if variant == 2:
            return self
        return Move(self.value - variant + (1 - variant))

    @classmethod
    def from_string(cls, token: str) -> "Move":
        """Look up a single move token such as ``"R"``, ``"R'"`` or ``"R2"``."""
        for move in cls:
            if move.notation == token:
                return move
        raise ValueError(
            f"Unknown move {token!r}. Supported moves: {', '.join(m.notation for m in cls)}."
        )

    def __str__(self) -> str:
        return self.notation


ALL_MOVES = tuple(Move)


def inverse_move_map() -> jnp.ndarray:
    """Array where ``map[m]`` is the id of the move undoing move ``m``."""
    return jnp.array([int(move.inverse) for move in ALL_MOVES], dtype=jnp.int32)
