import numpy as np
import pytest

from pose_overlay import DisplayMode, Landmark, PoseResult
from pose_overlay.constants import BONE_SEGMENTS, HIGHLIGHTED_LANDMARKS, required_landmark_count


def test_from_lists_accepts_tuples_and_landmarks():
    result = PoseResult.from_lists([[(0.1, 0.2), Landmark(0.3, 0.4, 0.5, 0.9), (0.5, 0.6, 0.1)]])
    person = result.first_person()
    assert person[0] == Landmark(0.1, 0.2)
    assert person[1].visibility == 0.9
    assert person[2].z == 0.1


def test_from_array_single_person():
    data = np.array([[0.1, 0.2, 0.0, 1.0], [0.3, 0.4, 0.0, 0.5]])
    result = PoseResult.from_array(data)
    assert result.person_count == 1
    assert result.first_person()[1] == Landmark(0.3, 0.4, 0.0, 0.5)


def test_from_array_multiple_people():
    result = PoseResult.from_array(np.zeros((2, 33, 3)))
    assert result.person_count == 2
    assert len(result.first_person()) == 33


def test_from_array_rejects_bad_shape():
    with pytest.raises(ValueError):
        PoseResult.from_array(np.zeros((33, 1)))


def test_first_person_empty():
    assert PoseResult(()).first_person() is None


def test_landmark_is_immutable():
    with pytest.raises(Exception):
        Landmark(0.1, 0.2).x = 0.5


@pytest.mark.parametrize("name, expected", [
    ("IMAGE", DisplayMode.STATIC),
    ("VIDEO", DisplayMode.STATIC),
    ("LIVE_STREAM", DisplayMode.STREAMED),
    ("RunningMode.LIVE_STREAM", DisplayMode.STREAMED),
    ("live_stream", DisplayMode.STREAMED),
])
def test_display_mode_from_running_mode(name, expected):
    assert DisplayMode.from_running_mode(name) is expected


def test_display_mode_unknown():
    with pytest.raises(ValueError):
        DisplayMode.from_running_mode("BATCH")


def test_skeleton_table():
    assert [(s.name, s.start, s.end) for s in BONE_SEGMENTS] == [
        ("shoulder", 11, 12),
        ("hip", 23, 24),
        ("knee", 25, 26),
    ]
    endpoints = {i for s in BONE_SEGMENTS for i in (s.start, s.end)}
    assert endpoints == set(HIGHLIGHTED_LANDMARKS)
    assert required_landmark_count() == 27
