"""
Data models for the pose overlay.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class Landmark:
    """Single normalized keypoint (x, y in [0, 1])"""
    x: float
    y: float
    z: float = 0.0
    visibility: float = 0.0


LandmarkLike = Union[Landmark, Sequence[float]]


def _to_landmark(value: LandmarkLike) -> Landmark:
    if isinstance(value, Landmark):
        return value
    return Landmark(*(float(v) for v in value[:4]))


@dataclass(frozen=True)
class PoseResult:
    """Landmark lists for every detected person; only the first one is drawn"""
    landmarks: Tuple[Tuple[Landmark, ...], ...]

    @classmethod
    def from_lists(cls, people: Iterable[Iterable[LandmarkLike]]) -> "PoseResult":
        return cls(tuple(tuple(_to_landmark(lm) for lm in person) for person in people))

    @classmethod
    def from_array(cls, array) -> "PoseResult":
        """
        Build a result from an array shaped (persons, landmarks, k) or (landmarks, k).
        Columns are x, y and optionally z and visibility.
        """
        data = np.asarray(array, dtype=float)
        if data.ndim == 2:
            data = data[np.newaxis, ...]
        if data.ndim != 3 or data.shape[-1] < 2:
            raise ValueError(f"expected landmark array of shape (P, N, >=2), got {data.shape}")
        return cls.from_lists(person[:, :4].tolist() for person in data)

    @property
    def person_count(self) -> int:
        return len(self.landmarks)

    def first_person(self) -> Optional[Tuple[Landmark, ...]]:
        if not self.landmarks:
            return None
        return self.landmarks[0]


class DisplayMode(Enum):
    """How the source image is fitted into the view"""
    STATIC = "static"        # single image / recorded video: fit inside
    STREAMED = "streamed"    # live camera: fill and crop

    @classmethod
    def from_running_mode(cls, running_mode: str) -> "DisplayMode":
        """Map an inference engine running mode (IMAGE, VIDEO, LIVE_STREAM)"""
        name = str(running_mode).rsplit(".", 1)[-1].upper()
        if name in ("IMAGE", "VIDEO", "STATIC"):
            return cls.STATIC
        if name in ("LIVE_STREAM", "STREAMED"):
            return cls.STREAMED
        raise ValueError(f"unknown running mode: {running_mode!r}")


@dataclass(frozen=True)
class Viewport:
    """Source image size, on-screen view size and display mode"""
    image_width: float
    image_height: float
    view_width: float
    view_height: float
    display_mode: DisplayMode = DisplayMode.STATIC

    @property
    def scale_factor(self) -> float:
        from .geometry import resolve_scale_factor
        return resolve_scale_factor(
            self.display_mode, self.view_width, self.view_height,
            self.image_width, self.image_height,
        )


@dataclass(frozen=True)
class BoneSegment:
    """Named pair of landmark indices drawn as one line"""
    name: str
    start: int
    end: int


class Classification(Enum):
    NORMAL = "normal"
    FLAGGED = "flagged"


@dataclass(frozen=True)
class Paint:
    """Immutable drawing style attached to each command"""
    color: str
    stroke_width: float = 1.0
    filled: bool = False
    text_size: float = 0.0
    dash: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class DrawPoint:
    x: float
    y: float
    paint: Paint


@dataclass(frozen=True)
class DrawLine:
    x1: float
    y1: float
    x2: float
    y2: float
    paint: Paint


@dataclass(frozen=True)
class DrawCircle:
    x: float
    y: float
    radius: float
    paint: Paint


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float
    y: float
    paint: Paint


DrawCommand = Union[DrawPoint, DrawLine, DrawCircle, DrawText]
