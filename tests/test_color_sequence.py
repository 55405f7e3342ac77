import pytest

from rbxdatatypes.color3 import Color3
from rbxdatatypes.color_sequence import ColorSequence, ColorSequenceKeypoint

RED = Color3(1.0, 0.0, 0.0)
BLUE = Color3(0.0, 0.0, 1.0)


def test_single_color_spans_whole_sequence():
    seq = ColorSequence.new(RED)
    assert seq.keypoints == (
        ColorSequenceKeypoint(0.0, RED),
        ColorSequenceKeypoint(1.0, RED),
    )


def test_two_colors():
    seq = ColorSequence.new(RED, BLUE)
    assert [k.time for k in seq.keypoints] == [0.0, 1.0]
    assert [k.value for k in seq.keypoints] == [RED, BLUE]


def test_keypoint_list_is_kept_in_order():
    points = [
        ColorSequenceKeypoint(0.0, RED),
        ColorSequenceKeypoint(0.5, BLUE),
        ColorSequenceKeypoint(1.0, RED),
    ]
    seq = ColorSequence.new(points)
    assert seq.keypoints == tuple(points)


@pytest.mark.parametrize("args", [(), (1.0,), ("red",), ([RED],), (RED, 2)])
def test_invalid_arguments(args):
    with pytest.raises(TypeError, match="Invalid arguments to constructor"):
        ColorSequence.new(*args)


def test_equality():
    assert ColorSequence.new(RED, BLUE) == ColorSequence.new(RED, BLUE)
    assert ColorSequence.new(RED, BLUE) != ColorSequence.new(BLUE, RED)


def test_keypoint_str():
    assert str(ColorSequenceKeypoint(0.5, RED)) == "0.5 > 1, 0, 0"


def test_sequence_str_joins_keypoints():
    seq = ColorSequence.new(RED, BLUE)
    assert str(seq) == f"{seq.keypoints[0]}, {seq.keypoints[1]}"


def test_empty_sequence_str():
    assert str(ColorSequence()) == ""