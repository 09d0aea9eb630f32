import chex
import jax
import numpy as np


def coloring_str(string: str, color: tuple[int, int, int]) -> str:
    r, g, b = color
    return f"\x1b[38;2;{r};{g};{b}m{string}\x1b[0m"


def random_key() -> chex.PRNGKey:
    """A PRNG key seeded from fresh OS entropy, for callers that pass no key."""
    seed = int(np.random.default_rng().integers(0, 2**31 - 1))
    return jax.random.PRNGKey(seed)
