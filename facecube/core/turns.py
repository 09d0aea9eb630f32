from __future__ import annotations

from functools import lru_cache, partial
from typing import Iterable

import chex
import jax
import jax.numpy as jnp
import numpy as np

from facecube.core.cube_state import FACES_SHAPE, NUM_FACELETS, CubeState, Face
from facecube.core.moves import ALL_MOVES, Move

UP, DOWN, FRONT, BACK, RIGHT, LEFT = (
    Face.UP,
    Face.DOWN,
    Face.FRONT,
    Face.BACK,
    Face.RIGHT,
    Face.LEFT,
)
ROW = 0
COL = 1

# Strips cycled by a clockwise quarter turn of each face, as
# (face, axis, line, reversed). Each strip takes the values of the next one and
# the last takes the saved first one. A reversed strip is addressed as 2 - i.
SIDE_CYCLES = {
    UP: (
        (FRONT, ROW, 0, False),
        (RIGHT, ROW, 0, False),
        (BACK, ROW, 0, False),
        (LEFT, ROW, 0, False),
    ),
    DOWN: (
        (FRONT, ROW, 2, False),
        (LEFT, ROW, 2, False),
        (BACK, ROW, 2, False),
        (RIGHT, ROW, 2, False),
    ),
    LEFT: (
        (FRONT, COL, 0, False),
        (UP, COL, 0, False),
        (BACK, COL, 2, True),
        (DOWN, COL, 0, False),
    ),
    RIGHT: (
        (FRONT, COL, 2, False),
        (DOWN, COL, 2, False),
        (BACK, COL, 0, True),
        (UP, COL, 2, False),
    ),
    FRONT: (
        (UP, ROW, 2, False),
        (LEFT, COL, 2, True),
        (DOWN, ROW, 0, True),
        (RIGHT, COL, 0, False),
    ),
    BACK: (
        (UP, ROW, 0, False),
        (RIGHT, COL, 2, False),
        (DOWN, ROW, 2, True),
        (LEFT, COL, 0, True),
    ),
}


def rotate_face_clockwise(face: chex.Array) -> chex.Array:
    """Rotate a single 3x3 face 90 degrees clockwise: (row, col) -> (col, 2 - row)."""
    return jnp.rot90(face, k=-1)


def _read_strip(faces: chex.Array, strip) -> chex.Array:
    face, axis, line, reverse = strip
    face = int(face)
    values = faces[face, line, :] if axis == ROW else faces[face, :, line]
    return values[::-1] if reverse else values


def _write_strip(faces: chex.Array, strip, values: chex.Array) -> chex.Array:
    face, axis, line, reverse = strip
    face = int(face)
    if reverse:
        values = values[::-1]
    if axis == ROW:
        return faces.at[face, line, :].set(values)
    return faces.at[face, :, line].set(values)


def cycle_side_strips(faces: chex.Array, face: int) -> chex.Array:
    """Cycle the 12 facelets bordering ``face`` by one clockwise quarter turn."""
    strips = SIDE_CYCLES[face]
    saved = _read_strip(faces, strips[0])
    for target, source in zip(strips, strips[1:]):
        faces = _write_strip(faces, target, _read_strip(faces, source))
    return _write_strip(faces, strips[-1], saved)


@partial(jax.jit, static_argnums=(1,))
def quarter_turn(faces: chex.Array, face: int) -> chex.Array:
    """Clockwise quarter turn of ``face`` on a ``(6, 3, 3)`` facelet array."""
    face = int(face)
    faces = faces.at[face].set(rotate_face_clockwise(faces[face]))
    return cycle_side_strips(faces, face)


def _check_move(move) -> Move:
    if not isinstance(move, Move):
        raise ValueError(
            f"Unknown move {move!r}. Supported moves: {', '.join(m.notation for m in ALL_MOVES)}."
        )
    return move


def apply_move(state: CubeState, move: Move) -> CubeState:
    """
    Return the state reached by turning one face.

    Counter-clockwise and half turns are applied as three and two clockwise
    quarter turns of the same face.

    Raises:
        ValueError: If ``move`` is not a :class:`Move` member.
    """
    move = _check_move(move)
    faces = state.faces
    for _ in range(move.quarter_turns):
        faces = quarter_turn(faces, int(move.face))
    return CubeState(faces=faces)


@lru_cache(maxsize=None)
def move_permutations() -> jnp.ndarray:
    """
    Gather indices of every move on the flattened facelet array.

    Row ``m`` satisfies ``apply_move(s, m).faces.ravel() == s.faces.ravel()[perm[m]]``.
    The table is derived by turning a cube whose facelets hold their own index.
    """
    # The table is cached, so it must never be built as a tracer.
    with jax.ensure_compile_time_eval():
        index_cube = jnp.arange(NUM_FACELETS, dtype=jnp.uint8).reshape(FACES_SHAPE)
        rows = []
        for move in ALL_MOVES:
            faces = index_cube
            for _ in range(move.quarter_turns):
                faces = quarter_turn(faces, int(move.face))
            rows.append(faces.reshape(-1).astype(jnp.int32))
        return jnp.stack(rows)


def check_action(action):
    """Reject concrete integer action ids outside ``0..17``; traced ids pass through."""
    if isinstance(action, (int, np.integer)) and not 0 <= action < len(ALL_MOVES):
        raise ValueError(
            f"Action {action} is out of bounds for action space size {len(ALL_MOVES)}."
        )
    return action


def apply_action(state: CubeState, action: chex.Array) -> CubeState:
    """Apply the move with integer id ``action`` through the permutation table.

    Traceable: ``action`` may be a JAX scalar under ``jit`` or ``vmap``. Only
    concrete ids are range-checked; keeping traced ids in range is up to the
    caller, since out-of-range gathers are clamped.

    Raises:
        ValueError: If a concrete ``action`` is not a move id.
    """
    check_action(action)
    perm = move_permutations()[action]
    faces = state.faces.reshape(-1)[perm].reshape(FACES_SHAPE)
    return CubeState(faces=faces)


def apply_moves(state: CubeState, moves: Iterable[Move]) -> CubeState:
    """Apply a sequence of moves in order with a single ``lax.scan``."""
    actions = jnp.asarray([int(_check_move(move)) for move in moves], dtype=jnp.int32)
    perms = move_permutations()

    def step(flat, action):
        return flat[perms[action]], None

    flat, _ = jax.lax.scan(step, state.faces.reshape(-1), actions)
    return CubeState(faces=flat.reshape(FACES_SHAPE))
