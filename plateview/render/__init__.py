"""Overlay rendering for detections and frame rate."""

from .fps import FrameRateMonitor, fps_from_elapsed, format_fps
from .overlay import (
    Annotation,
    OverlayRenderer,
    color_for_id,
    color_name,
    format_label,
    text_origin,
)

__all__ = [
    "Annotation",
    "FrameRateMonitor",
    "OverlayRenderer",
    "color_for_id",
    "color_name",
    "format_fps",
    "format_label",
    "fps_from_elapsed",
    "text_origin",
]
