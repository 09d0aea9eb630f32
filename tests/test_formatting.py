from facecube.core.cube_state import reset
from facecube.core.formatting import render_net, to_string
from facecube.core.moves import Move
from facecube.core.turns import apply_move


def test_to_string_labels_and_enumerates_every_face():
    text = to_string(reset())
    lines = text.strip().split("\n")
    assert lines[0] == "Face-based cube state:"
    assert lines[1:] == [
        "UP: [0 0 0][0 0 0][0 0 0]",
        "DOWN: [1 1 1][1 1 1][1 1 1]",
        "FRONT: [2 2 2][2 2 2][2 2 2]",
        "BACK: [3 3 3][3 3 3][3 3 3]",
        "RIGHT: [4 4 4][4 4 4][4 4 4]",
        "LEFT: [5 5 5][5 5 5][5 5 5]",
    ]


def test_to_string_is_row_major():
    text = to_string(apply_move(reset(), Move.U))
    assert "FRONT: [4 4 4][2 2 2][2 2 2]" in text
    assert "LEFT: [2 2 2][5 5 5][5 5 5]" in text


def test_str_is_the_textual_dump():
    state = apply_move(reset(), Move.B)
    assert str(state) == to_string(state)


def test_render_net_plain():
    text = render_net(apply_move(reset(), Move.R), colored=False)
    assert "\x1b[" not in text
    for label in ("up", "down", "front", "back", "right", "left"):
        assert label in text
    assert "┏━" in text and "┗━" in text


def test_render_net_colored():
    text = render_net(reset())
    assert "\x1b[38;2;" in text
    assert "■" in text
