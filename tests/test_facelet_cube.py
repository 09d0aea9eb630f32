"""Tests for the FaceletCube puzzle-style environment."""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from facecube.core.cube_state import reset
from facecube.core.moves import ALL_MOVES
from facecube.core.queries import equals
from facecube.core.scrambler import scramble
from facecube.core.turns import apply_move
from facecube.puzzles import FaceletCube


@pytest.fixture
def rng_key():
    """Provide a reproducible random key for JAX operations."""
    return jax.random.PRNGKey(42)


class TestFaceletCube:
    def test_instantiation(self):
        cube = FaceletCube()
        assert cube.action_size == 18
        assert cube.initial_shuffle == 10
        assert repr(cube) == "FaceletCube(initial_shuffle=10)"

        custom = FaceletCube(initial_shuffle=3)
        assert custom.initial_shuffle == 3

    def test_negative_shuffle_rejected(self):
        with pytest.raises(ValueError, match="initial_shuffle"):
            FaceletCube(initial_shuffle=-1)

    def test_target_state_is_solved(self):
        cube = FaceletCube()
        assert cube.is_solved(cube.get_target_state())

    def test_initial_state(self, rng_key):
        cube = FaceletCube(initial_shuffle=12)
        state = cube.get_initial_state(key=rng_key)
        assert equals(state, scramble(reset(), 12, key=rng_key))
        assert not cube.is_solved(state)

        unshuffled = FaceletCube(initial_shuffle=0)
        assert unshuffled.is_solved(unshuffled.get_initial_state())

    def test_neighbours_follow_action_order(self, rng_key):
        cube = FaceletCube()
        state = cube.get_initial_state(key=rng_key)
        neighbours, costs = cube.get_neighbours(state)
        assert neighbours.faces.shape == (18, 6, 3, 3)
        assert costs.shape == (18,)
        assert jnp.all(costs == 1.0)
        for action, move in enumerate(ALL_MOVES):
            np.testing.assert_array_equal(
                np.asarray(neighbours.faces[action]),
                np.asarray(apply_move(state, move).faces),
            )

    def test_inverse_action_map(self, rng_key):
        cube = FaceletCube()
        state = cube.get_initial_state(key=rng_key)
        inv_map = cube.inverse_action_map
        for action in range(cube.action_size):
            forward = cube.get_actions(state, action)
            back = cube.get_actions(forward, int(inv_map[action]))
            assert equals(back, state)

    def test_action_strings(self):
        cube = FaceletCube()
        assert cube.action_to_string(0) == "U"
        assert cube.action_to_string(1) == "U'"
        assert cube.action_to_string(2) == "U2"
        assert cube.action_to_string(17) == "B2"
        names = [cube.action_to_string(i) for i in range(cube.action_size)]
        assert len(set(names)) == 18

    @pytest.mark.parametrize("action", [-1, 18, 100])
    def test_action_strings_out_of_bounds(self, action):
        cube = FaceletCube()
        with pytest.raises(ValueError, match="out of bounds"):
            cube.action_to_string(action)

    @pytest.mark.parametrize("action", [-1, 18, 100])
    def test_get_actions_out_of_bounds(self, action):
        cube = FaceletCube()
        with pytest.raises(ValueError, match="out of bounds"):
            cube.get_actions(reset(), action)
        with pytest.raises(ValueError, match="out of bounds"):
            cube.get_actions(reset(), np.int32(action))
