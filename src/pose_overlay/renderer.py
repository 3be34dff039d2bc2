"""
Skeleton overlay renderer.

Turns the first person of a PoseResult into a list of draw commands:
one line, angle label and (when tilted) guide line and pivot circle per
bone segment, followed by a point for every highlighted landmark.
Rendering is a pure function of the result, viewport and style.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .constants import BONE_SEGMENTS, HIGHLIGHTED_LANDMARKS, required_landmark_count
from .exceptions import InsufficientLandmarksError
from .geometry import (
    classify_angle, map_landmark, segment_angle, segment_length,
    validate_dimension,
)
from .models import (
    BoneSegment, Classification, DisplayMode, DrawCircle, DrawCommand, DrawLine,
    DrawPoint, DrawText, Landmark, PoseResult, Viewport,
)
from .style import DEFAULT_STYLE, OverlayStyle

logger = logging.getLogger(__name__)


def format_angle(angle: float) -> str:
    return f"{abs(angle):.2f}°"


def _segment_commands(segment: BoneSegment, landmarks: Sequence[Landmark], viewport: Viewport,
                      scale: float, style: OverlayStyle,
                      point_states: Dict[int, Classification]) -> List[DrawCommand]:
    start_x, start_y = map_landmark(landmarks[segment.start], viewport, scale)
    end_x, end_y = map_landmark(landmarks[segment.end], viewport, scale)

    angle = segment_angle(start_x, start_y, end_x, end_y)
    classification = classify_angle(angle, style.threshold)

    for index in (segment.start, segment.end):
        if point_states.get(index) is not Classification.FLAGGED:
            point_states[index] = classification

    commands: List[DrawCommand] = [
        DrawLine(start_x, start_y, end_x, end_y, style.line_paint(classification))
    ]

    if classification is Classification.FLAGGED:
        # Level guide: where the end joint would sit if the segment were horizontal
        direction = -1.0 if end_x < start_x else 1.0
        length = segment_length(start_x, start_y, end_x, end_y)
        commands.append(DrawLine(
            start_x, start_y, start_x + direction * length, start_y, style.guide_paint()
        ))
        if angle > 0:
            pivot_x, pivot_y = end_x, end_y
        else:
            pivot_x, pivot_y = start_x, start_y
        commands.append(DrawCircle(pivot_x, pivot_y, style.circle_radius, style.circle_paint()))

    mid_x = (start_x + end_x) / 2
    mid_y = (start_y + end_y) / 2
    commands.append(DrawText(format_angle(angle), mid_x, mid_y - style.label_offset, style.text_paint()))
    return commands


def render_overlay(result: Optional[PoseResult], viewport: Viewport,
                   style: OverlayStyle = DEFAULT_STYLE) -> List[DrawCommand]:
    """
    Build the draw commands for one frame.

    Returns an empty list when there is no result or nobody was detected.
    Raises InsufficientLandmarksError when the first person is missing
    landmarks referenced by the skeleton, and ViewportError for unusable
    dimensions.
    """
    if result is None:
        return []
    landmarks = result.first_person()
    if landmarks is None:
        return []

    required = required_landmark_count()
    if len(landmarks) < required:
        raise InsufficientLandmarksError(required, len(landmarks))

    scale = viewport.scale_factor

    commands: List[DrawCommand] = []
    point_states: Dict[int, Classification] = {}
    for segment in BONE_SEGMENTS:
        commands.extend(_segment_commands(segment, landmarks, viewport, scale, style, point_states))

    for index in HIGHLIGHTED_LANDMARKS:
        x, y = map_landmark(landmarks[index], viewport, scale)
        state = point_states.get(index, Classification.NORMAL)
        commands.append(DrawPoint(x, y, style.point_paint(state)))

    return commands


class OverlayRenderer:
    """Holds the latest result and viewport and renders them on demand"""

    def __init__(self, style: OverlayStyle = DEFAULT_STYLE):
        self.result: Optional[PoseResult] = None
        self.image_width: float = 1
        self.image_height: float = 1
        self.view_width: float = 0
        self.view_height: float = 0
        self.display_mode: DisplayMode = DisplayMode.STATIC
        self.style: OverlayStyle = style
        self._default_style = style

    @property
    def has_result(self) -> bool:
        return self.result is not None

    @property
    def viewport(self) -> Viewport:
        return Viewport(
            image_width=self.image_width,
            image_height=self.image_height,
            view_width=self.view_width,
            view_height=self.view_height,
            display_mode=self.display_mode,
        )

    def _has_view(self) -> bool:
        return self.view_width > 0 and self.view_height > 0

    @property
    def scale_factor(self) -> float:
        """Scale for the current viewport; 0.0 while the view has no size"""
        if not self._has_view():
            return 0.0
        return self.viewport.scale_factor

    def set_result(self, result: PoseResult, image_width: float, image_height: float,
                   display_mode: DisplayMode = DisplayMode.STATIC):
        """Replace the held result and image size"""
        validate_dimension("image_width", image_width)
        validate_dimension("image_height", image_height)
        self.result = result
        self.image_width = image_width
        self.image_height = image_height
        self.display_mode = display_mode
        logger.debug(
            "Result set: %d person(s), image %sx%s, mode %s, scale %.4f",
            result.person_count, image_width, image_height, display_mode.name, self.scale_factor,
        )

    def set_view_size(self, view_width: float, view_height: float):
        if view_width == 0 or view_height == 0:
            # Widget not laid out yet
            self.view_width = 0
            self.view_height = 0
            return
        validate_dimension("view_width", view_width)
        validate_dimension("view_height", view_height)
        self.view_width = view_width
        self.view_height = view_height
        logger.debug("View resized to %sx%s, scale %.4f", view_width, view_height, self.scale_factor)

    def set_style(self, style: OverlayStyle):
        self.style = style

    def clear(self):
        """Drop the result and restore the default style"""
        self.result = None
        self.style = self._default_style
        logger.debug("Overlay cleared")

    def render(self) -> List[DrawCommand]:
        if self.result is None or not self._has_view():
            return []
        return render_overlay(self.result, self.viewport, self.style)
