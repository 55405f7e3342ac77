import pytest

from rbxdatatypes.number_sequence import NumberSequence, NumberSequenceKeypoint


def test_single_value_spans_whole_sequence():
    seq = NumberSequence.new(0.5)
    assert [k.time for k in seq.keypoints] == [0.0, 1.0]
    assert [k.value for k in seq.keypoints] == [0.5, 0.5]
    assert all(k.envelope == 0.0 for k in seq.keypoints)


def test_two_values():
    seq = NumberSequence.new(2, 3)
    assert seq.keypoints == (
        NumberSequenceKeypoint(0.0, 2.0),
        NumberSequenceKeypoint(1.0, 3.0),
    )


def test_keypoint_list_is_kept_in_order():
    points = [
        NumberSequenceKeypoint(0.0, 1.0, 0.5),
        NumberSequenceKeypoint(0.5, 4.0),
        NumberSequenceKeypoint(1.0, 2.0),
    ]
    assert NumberSequence.new(points).keypoints == tuple(points)


def test_invalid_arguments():
    with pytest.raises(TypeError, match="Invalid arguments to constructor"):
        NumberSequence.new("nope")
    with pytest.raises(TypeError):
        NumberSequence.new([1, 2])


def test_keypoint_default_envelope():
    assert NumberSequenceKeypoint(0.25, 7.0).envelope == 0.0


def test_keypoint_rejects_non_numbers():
    with pytest.raises(TypeError):
        NumberSequenceKeypoint("a", 1.0)


def test_str():
    assert str(NumberSequence.new(2, 3)) == "0 > 2, 1 > 3"