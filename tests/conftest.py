"""Shared fixtures for the overlay test suite."""
import math
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pose_overlay import Landmark, PoseResult  # noqa: E402

LANDMARK_COUNT = 33


def make_result(points=None, count=LANDMARK_COUNT):
    """Person with every landmark at the image center, overridden by ``points``."""
    landmarks = [Landmark(0.5, 0.5) for _ in range(count)]
    for index, (x, y) in (points or {}).items():
        landmarks[index] = Landmark(x, y)
    return PoseResult((tuple(landmarks),))


def tilted_points(start_screen, length, degrees, image_size=100.0):
    """Landmark pair whose mirrored view-space segment has the given angle at scale 1."""
    sx, sy = start_screen
    ex = sx + length * math.cos(math.radians(degrees))
    ey = sy + length * math.sin(math.radians(degrees))
    return (
        (1 - sx / image_size, sy / image_size),
        (1 - ex / image_size, ey / image_size),
    )


@pytest.fixture
def level_result():
    return make_result({
        11: (0.6, 0.3), 12: (0.4, 0.3),
        23: (0.6, 0.6), 24: (0.4, 0.6),
        25: (0.6, 0.8), 26: (0.4, 0.8),
    })


@pytest.fixture
def tilted_hip_result():
    hip_start, hip_end = tilted_points((40.0, 60.0), 20.0, 10.0)
    return make_result({
        11: (0.6, 0.3), 12: (0.4, 0.3),
        23: hip_start, 24: hip_end,
        25: (0.6, 0.8), 26: (0.4, 0.8),
    })


@pytest.fixture(scope="session")
def qapp():
    pytest.importorskip("PySide6")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
