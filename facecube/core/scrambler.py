from __future__ import annotations

import logging
import operator

import chex
import jax
import numpy as np

from facecube.core.cube_state import CubeState
from facecube.core.moves import ALL_MOVES, Move
from facecube.core.turns import apply_move
from facecube.utils.util import random_key

logger = logging.getLogger(__name__)


def _check_num_moves(num_moves: int) -> int:
    num_moves = operator.index(num_moves)
    if num_moves < 0:
        raise ValueError(f"Number of scramble moves must be non-negative, got {num_moves}")
    return num_moves


def scramble_moves(num_moves: int, key: chex.PRNGKey | None = None) -> list[Move]:
    """Draw ``num_moves`` moves uniformly, with replacement, from all 18 moves.

    Without a ``key`` a freshly seeded one is used, so the draw is not reproducible.
    """
    num_moves = _check_num_moves(num_moves)
    if key is None:
        key = random_key()
    actions = jax.random.randint(key, (num_moves,), 0, len(ALL_MOVES))
    moves = [ALL_MOVES[int(action)] for action in np.asarray(actions)]
    logger.debug("scramble_moves: %s", " ".join(move.notation for move in moves))
    return moves


def scramble(state: CubeState, num_moves: int, key: chex.PRNGKey | None = None) -> CubeState:
    """
    Apply ``num_moves`` random moves to ``state``, one ``apply_move`` call each.

    Args:
        state: Starting state; it is not modified.
        num_moves: Number of moves to apply. Zero returns an equal state.
        key: Optional JAX PRNG key. The same key always produces the same moves.

    Returns:
        The scrambled ``CubeState``.

    Raises:
        TypeError: If ``num_moves`` is not an integer.
        ValueError: If ``num_moves`` is negative.
    """
    for move in scramble_moves(num_moves, key):
        state = apply_move(state, move)
    return state
