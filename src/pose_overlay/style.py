"""
Overlay style configuration.
"""

from dataclasses import dataclass

from . import constants
from .models import Classification, Paint


@dataclass(frozen=True)
class OverlayStyle:
    """Colors, sizes and thresholds used to build draw commands"""
    normal_color: str = constants.COLORS['normal']
    flagged_color: str = constants.COLORS['flagged']
    text_color: str = constants.COLORS['text']
    line_width: float = constants.LINE_WIDTH
    point_size: float = constants.POINT_SIZE
    text_size: float = constants.TEXT_SIZE
    threshold: float = constants.ANGLE_THRESHOLD_DEGREES
    dot_length: float = constants.GUIDE_DOT_LENGTH
    gap_length: float = constants.GUIDE_GAP_LENGTH
    circle_radius: float = constants.PIVOT_CIRCLE_RADIUS
    label_offset: float = constants.LABEL_OFFSET

    def color_for(self, classification: Classification) -> str:
        if classification is Classification.FLAGGED:
            return self.flagged_color
        return self.normal_color

    def line_paint(self, classification: Classification) -> Paint:
        return Paint(color=self.color_for(classification), stroke_width=self.line_width)

    def guide_paint(self) -> Paint:
        return Paint(
            color=self.flagged_color,
            stroke_width=self.line_width,
            dash=(self.dot_length, self.gap_length),
        )

    def circle_paint(self) -> Paint:
        return Paint(color=self.flagged_color, filled=True)

    def point_paint(self, classification: Classification) -> Paint:
        return Paint(color=self.color_for(classification), stroke_width=self.point_size)

    def text_paint(self) -> Paint:
        return Paint(color=self.text_color, text_size=self.text_size)


DEFAULT_STYLE = OverlayStyle()
