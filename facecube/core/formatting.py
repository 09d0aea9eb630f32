"""Text renderings of a cube state.

``to_string`` is the plain labelled dump used by ``str(state)``. ``render_net``
lays the six faces out as an unfolded net for terminals, colouring tiles with
24-bit ANSI escapes and face titles via ``termcolor``.
"""

from __future__ import annotations

import numpy as np
import termcolor
from tabulate import tabulate

from facecube.core.cube_state import FACE_SIZE, CubeState, Face
from facecube.utils.util import coloring_str

face_map_legend = {
    Face.UP: "up",
    Face.DOWN: "down",
    Face.FRONT: "front",
    Face.BACK: "back",
    Face.RIGHT: "right",
    Face.LEFT: "left",
}
rgb_map = {
    Face.UP: (255, 255, 255),  # white
    Face.DOWN: (255, 255, 0),  # yellow
    Face.FRONT: (255, 0, 0),  # red
    Face.BACK: (255, 128, 0),  # orange
    Face.RIGHT: (0, 255, 0),  # green
    Face.LEFT: (0, 0, 255),  # blue
}


def _face_to_string(face: np.ndarray) -> str:
    return "".join("[" + " ".join(str(int(v)) for v in row) + "]" for row in face)


def to_string(state: CubeState) -> str:
    """Labelled dump of every face, facelets listed row by row."""
    faces = np.asarray(state.faces)
    lines = ["Face-based cube state:"]
    for face in Face:
        lines.append(f"{face.name}: {_face_to_string(faces[face])}")
    return "\n".join(lines) + "\n"


def render_net(state: CubeState, colored: bool = True) -> str:
    """Render the cube as an unfolded net: UP above LEFT FRONT RIGHT BACK, DOWN below."""
    faces = np.asarray(state.faces)
    inner_width = FACE_SIZE * 2 - 1

    def format_tile(value: int) -> str:
        if colored:
            return coloring_str("■", rgb_map[Face(value)])
        return str(value)

    def title(face: Face) -> str:
        text = face_map_legend[face].center(inner_width, "━")
        return termcolor.colored(text, attrs=["bold"]) if colored else text

    def color_legend():
        return "\n".join(
            f"{face_map_legend[face]:<6}:{format_tile(int(face))}" for face in Face
        )

    def get_empty_face_string():
        return "\n".join(["  " * (FACE_SIZE + 2) for _ in range(FACE_SIZE + 2)])

    def get_face_string(face: Face) -> str:
        string = f"┏━{title(face)}━┓\n"
        for row in faces[face]:
            tokens = " ".join(format_tile(int(v)) for v in row)
            string += f"┃ {tokens} ┃\n"
        string += f"┗━{'━' * inner_width}━┛\n"
        return string

    return tabulate(
        [
            [color_legend(), (".\n" + get_face_string(Face.UP))],
            [
                get_face_string(Face.LEFT),
                get_face_string(Face.FRONT),
                get_face_string(Face.RIGHT),
                get_face_string(Face.BACK),
            ],
            [get_empty_face_string(), get_face_string(Face.DOWN)],
        ],
        tablefmt="plain",
        rowalign="center",
    )
