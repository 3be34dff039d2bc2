"""
pose_overlay - Pose skeleton and joint angle overlay
Maps normalized pose landmarks onto a view and paints a color-coded
shoulder/hip/knee skeleton with PySide6.
"""

__version__ = "0.1.0"

from .exceptions import InsufficientLandmarksError, OverlayError, ViewportError
from .models import (
    BoneSegment, Classification, DisplayMode, DrawCircle, DrawLine, DrawPoint, DrawText,
    Landmark, Paint, PoseResult, Viewport,
)
from .geometry import classify_angle, map_landmark, map_points, resolve_scale_factor, segment_angle
from .renderer import OverlayRenderer, render_overlay
from .style import DEFAULT_STYLE, OverlayStyle


# Qt is only imported when the widget is requested
def __getattr__(name):
    if name == "PoseOverlayCanvas":
        from .canvas import PoseOverlayCanvas
        return PoseOverlayCanvas
    elif name == "paint_commands":
        from .canvas import paint_commands
        return paint_commands
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "BoneSegment",
    "Classification",
    "DEFAULT_STYLE",
    "DisplayMode",
    "DrawCircle",
    "DrawLine",
    "DrawPoint",
    "DrawText",
    "InsufficientLandmarksError",
    "Landmark",
    "OverlayError",
    "OverlayRenderer",
    "OverlayStyle",
    "Paint",
    "PoseOverlayCanvas",
    "PoseResult",
    "Viewport",
    "ViewportError",
    "classify_angle",
    "map_landmark",
    "map_points",
    "paint_commands",
    "render_overlay",
    "resolve_scale_factor",
    "segment_angle",
    "__version__",
]
