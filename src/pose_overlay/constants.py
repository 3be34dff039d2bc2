"""
Constants for the pose overlay: colors, paint defaults and the fixed skeleton.
"""

from typing import Dict, Tuple

from .models import BoneSegment


# Colors (hex, converted to QColor by the canvas)
COLORS: Dict[str, str] = {
    'normal': "#00FF00",    # neutral skeleton color
    'flagged': "#FF0000",   # alert color for tilted segments
    'text': "#FFFFFF",
}

# Paint defaults
LINE_WIDTH: float = 10.0
POINT_SIZE: float = 30.0
TEXT_SIZE: float = 80.0

# Classification
ANGLE_THRESHOLD_DEGREES: float = 2.0

# Flagged segment markers
GUIDE_DOT_LENGTH: float = 15.0
GUIDE_GAP_LENGTH: float = 5.0
PIVOT_CIRCLE_RADIUS: float = 20.0
LABEL_OFFSET: float = 30.0

# BlazePose landmark indices used by the overlay
LEFT_SHOULDER = 11
RIGHT_SHOULDER = 12
LEFT_HIP = 23
RIGHT_HIP = 24
LEFT_KNEE = 25
RIGHT_KNEE = 26

BONE_SEGMENTS: Tuple[BoneSegment, ...] = (
    BoneSegment("shoulder", LEFT_SHOULDER, RIGHT_SHOULDER),
    BoneSegment("hip", LEFT_HIP, RIGHT_HIP),
    BoneSegment("knee", LEFT_KNEE, RIGHT_KNEE),
)

HIGHLIGHTED_LANDMARKS: Tuple[int, ...] = (
    LEFT_SHOULDER, RIGHT_SHOULDER,
    LEFT_HIP, RIGHT_HIP,
    LEFT_KNEE, RIGHT_KNEE,
)


def required_landmark_count() -> int:
    """Number of landmarks a person must have for the fixed skeleton to be drawn"""
    indices = list(HIGHLIGHTED_LANDMARKS)
    for segment in BONE_SEGMENTS:
        indices.extend((segment.start, segment.end))
    return max(indices) + 1
