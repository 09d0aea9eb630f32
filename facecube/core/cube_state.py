from enum import IntEnum
from typing import Any, Optional, Type, TypeVar

import chex
import jax.numpy as jnp
import numpy as np
from xtructure import FieldDescriptor, xtructure_dataclass

T = TypeVar("T")

TYPE = jnp.uint8
NUM_FACES = 6
FACE_SIZE = 3
FACES_SHAPE = (NUM_FACES, FACE_SIZE, FACE_SIZE)
NUM_FACELETS = NUM_FACES * FACE_SIZE * FACE_SIZE


class Face(IntEnum):
    """Face ids. A face's id is also the colour of its facelets when solved."""

    UP = 0
    DOWN = 1
    FRONT = 2
    BACK = 3
    RIGHT = 4
    LEFT = 5


def state_dataclass(cls: Optional[Type[T]] = None, **kwargs: Any):
    """
    Decorator used to define a JAX-compatible xtructure dataclass for cube states.

    Cube states are stored unpacked (one uint8 per facelet), so bitpacking is
    turned off unless the caller asks for it.
    """

    def wrap(target_cls: Type[T]) -> Type[T]:
        call_kwargs = dict(kwargs)
        call_kwargs.setdefault("bitpack", "off")

        try:
            return xtructure_dataclass(target_cls, **call_kwargs)
        except TypeError:
            # Older xtructure releases do not accept `bitpack=`.
            call_kwargs.pop("bitpack", None)
            return xtructure_dataclass(target_cls, **call_kwargs)

    if cls is None:
        return wrap
    return wrap(cls)


@state_dataclass
class CubeState:
    """Six 3x3 faces of facelet colours, indexed ``faces[face, row, col]``."""

    faces: FieldDescriptor[TYPE, FACES_SHAPE]

    def __str__(self, **kwargs):
        from facecube.core.formatting import to_string

        return to_string(self)


def solved_faces() -> chex.Array:
    return jnp.repeat(
        jnp.arange(NUM_FACES, dtype=TYPE)[:, None], FACE_SIZE * FACE_SIZE, axis=1
    ).reshape(FACES_SHAPE)


def reset() -> CubeState:
    """Return a solved cube: every face filled with its own colour."""
    return CubeState(faces=solved_faces())


def from_faces(faces: chex.Array) -> CubeState:
    """
    Build a state from an explicit ``(6, 3, 3)`` array of colours.

    Raises:
        ValueError: If the shape is wrong or a value is not a colour id (0..5).
    """
    faces_np = np.asarray(faces)
    if faces_np.shape != FACES_SHAPE:
        raise ValueError(f"Expected faces of shape {FACES_SHAPE}, got {faces_np.shape}")
    if not np.issubdtype(faces_np.dtype, np.integer):
        raise ValueError(f"Facelet colours must be integers, got dtype={faces_np.dtype}")
    if faces_np.min() < 0 or faces_np.max() >= NUM_FACES:
        raise ValueError(
            f"Facelet colours must lie in 0..{NUM_FACES - 1}, "
            f"got range {faces_np.min()}..{faces_np.max()}"
        )
    return CubeState(faces=jnp.asarray(faces_np, dtype=TYPE))


def clone(state: CubeState) -> CubeState:
    """Return a copy of ``state`` that owns its own facelet array."""
    return CubeState(faces=jnp.array(state.faces, dtype=TYPE, copy=True))
