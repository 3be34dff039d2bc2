"""
Errors raised by the pose overlay.
"""


class OverlayError(Exception):
    """Base class for overlay errors"""


class InsufficientLandmarksError(OverlayError, IndexError):
    """The first person in a result has fewer landmarks than the skeleton references"""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"insufficient landmarks: need at least {required}, got {available}"
        )


class ViewportError(OverlayError, ValueError):
    """Image or view dimensions cannot produce a finite scale factor"""
