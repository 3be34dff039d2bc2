"""
Geometry helpers: scale factor, landmark-to-view mapping and segment angles.
"""

import math
from typing import Optional, Tuple

import numpy as np

from .exceptions import ViewportError
from .models import Classification, DisplayMode, Landmark, Viewport


def validate_dimension(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ViewportError(f"{name} must be a positive finite number, got {value!r}")


def resolve_scale_factor(mode: DisplayMode, view_width: float, view_height: float,
                         image_width: float, image_height: float) -> float:
    """
    Scale that converts image pixels to view pixels.
    STATIC fits the whole image inside the view, STREAMED fills the view and crops.
    """
    validate_dimension("view_width", view_width)
    validate_dimension("view_height", view_height)
    validate_dimension("image_width", image_width)
    validate_dimension("image_height", image_height)

    ratio_x = view_width / image_width
    ratio_y = view_height / image_height
    if mode is DisplayMode.STREAMED:
        return max(ratio_x, ratio_y)
    return min(ratio_x, ratio_y)


def map_landmark(landmark: Landmark, viewport: Viewport,
                 scale_factor: Optional[float] = None) -> Tuple[float, float]:
    """Normalized landmark -> view coordinates, mirrored horizontally"""
    if scale_factor is None:
        scale_factor = viewport.scale_factor
    screen_x = (1.0 - landmark.x) * viewport.image_width * scale_factor
    screen_y = landmark.y * viewport.image_height * scale_factor
    return screen_x, screen_y


def map_points(points, viewport: Viewport, scale_factor: Optional[float] = None) -> np.ndarray:
    """Vectorized map_landmark for an (N, >=2) array of normalized x, y"""
    if scale_factor is None:
        scale_factor = viewport.scale_factor
    data = np.asarray(points, dtype=float)
    if data.ndim != 2 or data.shape[1] < 2:
        raise ValueError(f"expected (N, >=2) array, got shape {data.shape}")
    mapped = np.empty((data.shape[0], 2), dtype=float)
    mapped[:, 0] = (1.0 - data[:, 0]) * viewport.image_width * scale_factor
    mapped[:, 1] = data[:, 1] * viewport.image_height * scale_factor
    return mapped


def segment_angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """Signed angle of the segment (x1, y1) -> (x2, y2) in degrees, within (-180, 180]"""
    angle = math.degrees(math.atan2(y2 - y1, x2 - x1))
    angle = (angle + 360.0) % 360.0
    if angle > 180.0:
        angle -= 360.0
    return angle


def classify_angle(angle: float, threshold: float) -> Classification:
    """Angles strictly beyond +/- threshold are flagged"""
    if angle < -threshold or angle > threshold:
        return Classification.FLAGGED
    return Classification.NORMAL


def segment_length(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)
