from __future__ import annotations

import logging

import chex
import jax
import jax.numpy as jnp

from facecube.core.cube_state import CubeState, reset
from facecube.core.moves import ALL_MOVES, inverse_move_map
from facecube.core.queries import is_solved
from facecube.core.scrambler import scramble
from facecube.core.turns import apply_action, check_action

logger = logging.getLogger(__name__)


class FaceletCube:
    """Puzzle-style facade over the facelet cube model.

    Actions are the integer ids of :class:`~facecube.core.moves.Move`
    (``U, U', U2, D, ...``), so ``action_size`` is 18 and every action has
    unit cost.

    Attributes:
        initial_shuffle: Number of random moves used by :meth:`get_initial_state`.
    """

    action_size: int = len(ALL_MOVES)

    def __init__(self, initial_shuffle: int = 10):
        if initial_shuffle < 0:
            raise ValueError(f"initial_shuffle must be non-negative, got {initial_shuffle}")
        self.initial_shuffle = initial_shuffle
        logger.debug("FaceletCube created with initial_shuffle=%s", initial_shuffle)

    @property
    def inverse_action_map(self) -> jnp.ndarray:
        """
        Maps each action to the action undoing it: a quarter turn to the opposite
        quarter turn of the same face, a half turn to itself.
        """
        return inverse_move_map()

    def get_target_state(self) -> CubeState:
        return reset()

    def get_initial_state(self, key: chex.PRNGKey | None = None) -> CubeState:
        """Solved state scrambled with ``initial_shuffle`` random moves."""
        return scramble(self.get_target_state(), self.initial_shuffle, key)

    def get_actions(self, state: CubeState, action: chex.Array) -> CubeState:
        return apply_action(state, action)

    def get_neighbours(self, state: CubeState) -> tuple[CubeState, chex.Array]:
        """Compute the successor state for every action.

        Returns:
            ``(neighbour_states, costs)`` where ``neighbour_states`` has a leading
            axis of size ``action_size`` in action order and ``costs`` is all ones.
        """
        actions = jnp.arange(self.action_size)
        states = jax.vmap(self.get_actions, in_axes=(None, 0))(state, actions)
        costs = jnp.ones(self.action_size, dtype=jnp.float32)
        return states, costs

    def is_solved(self, state: CubeState) -> bool:
        return is_solved(state)

    def action_to_string(self, action: int) -> str:
        return ALL_MOVES[check_action(int(action))].notation

    def __repr__(self):
        return f"{self.__class__.__name__}(initial_shuffle={self.initial_shuffle})"
