"""Detection overlay drawing."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import cv2
import numpy as np

from ..core.geometry import map_keypoints
from ..detection.base import ClassCatalog, DetectedObject


Color = Tuple[int, int, int]

# RGB, matching VideoReader output
WARM_COLOR: Color = (255, 0, 0)
COOL_COLOR: Color = (0, 0, 255)
FALLBACK_COLOR: Color = (255, 255, 0)
TEXT_COLOR: Color = (255, 255, 255)
TEXT_BACKGROUND: Color = (0, 0, 0)

FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_SCALE = 0.5
FONT_THICKNESS = 1
LINE_THICKNESS = 2
MARKER_RADIUS = 3
TEXT_PADDING = 4
TEXT_LIFT = 6
# Drawing coordinates saturate to +/- this bound
COORD_LIMIT = 1 << 20


def color_for_id(color_id: int) -> Color:
    """Drawing color for a detection's color attribute."""
    if color_id == 1:
        return WARM_COLOR
    if color_id == 0:
        return COOL_COLOR
    return FALLBACK_COLOR


def color_name(color_id: int) -> str:
    """Display name for a detection's color attribute."""
    if color_id == 1:
        return "Red"
    if color_id == 0:
        return "Blue"
    return "Other"


def format_label(obj: DetectedObject, catalog: ClassCatalog) -> str:
    """Build the ``"<class> | <color> | conf=<prob>"`` caption."""
    return f"{catalog.name_for(obj.label)} | {color_name(obj.color)} | conf={obj.prob:.2f}"


def saturate(points: np.ndarray) -> np.ndarray:
    """Clamp display-space points to a drawable range.

    Infinities saturate to the range bounds and NaN maps to 0.
    """
    points = np.asarray(points, dtype=np.float64)
    points = np.nan_to_num(points, nan=0.0, posinf=COORD_LIMIT, neginf=-COORD_LIMIT)
    return np.clip(points, -COORD_LIMIT, COORD_LIMIT)


def text_origin(points: np.ndarray, text_height: int) -> Tuple[int, int]:
    """Place a caption baseline just above the top-left extent of a shape.

    Args:
        points: (N, 2) display-space points.
        text_height: Measured caption height in pixels.

    Returns:
        (x, y) origin, kept inside the frame's top and left edges.
    """
    points = saturate(points)
    min_x = float(np.min(points[:, 0]))
    min_y = float(np.min(points[:, 1]))
    return max(0, int(min_x)), max(text_height + 2, int(min_y) - TEXT_LIFT)


@dataclass
class Annotation:
    """Everything drawn for one detection, in display space.

    Attributes:
        points: (4, 2) mapped keypoints.
        color: Outline and marker color.
        text: Caption.
    """

    points: np.ndarray
    color: Color
    text: str

    @property
    def pixel_points(self) -> List[Tuple[int, int]]:
        """Keypoints rounded to saturated pixel coordinates."""
        return [(int(round(x)), int(round(y))) for x, y in saturate(self.points)]


class OverlayRenderer:
    """Draw detections onto display frames.

    Attributes:
        catalog: Class names used for captions.
    """

    def __init__(self, catalog: Optional[ClassCatalog] = None):
        """Initialize the renderer.

        Args:
            catalog: Class names; defaults to the built-in armor classes.
        """
        self.catalog = catalog if catalog is not None else ClassCatalog()

    def annotate(self, obj: DetectedObject, scale: Tuple[float, float]) -> Annotation:
        """Compute the display-space annotation for one detection."""
        return Annotation(
            points=map_keypoints(obj.keypoints, scale),
            color=color_for_id(obj.color),
            text=format_label(obj, self.catalog),
        )

    def draw(
        self,
        frame: np.ndarray,
        objects: Iterable[DetectedObject],
        scale: Tuple[float, float],
    ) -> None:
        """Draw all detections onto a frame in place, in the given order.

        Args:
            frame: Display frame (RGB); modified in place.
            objects: Detections in model space.
            scale: (scale_x, scale_y) from model to display space.
        """
        for obj in objects:
            self.draw_annotation(frame, self.annotate(obj, scale))

    def draw_annotation(self, frame: np.ndarray, annotation: Annotation) -> None:
        """Draw the outline, markers and caption of one annotation."""
        pts = annotation.pixel_points
        color = annotation.color

        for i in range(len(pts)):
            cv2.line(frame, pts[i], pts[(i + 1) % len(pts)], color, LINE_THICKNESS)

        for p in pts:
            cv2.circle(frame, p, MARKER_RADIUS, color, -1)

        (text_w, text_h), _ = cv2.getTextSize(
            annotation.text, FONT, FONT_SCALE, FONT_THICKNESS
        )
        x, y = text_origin(annotation.points, text_h)
        cv2.rectangle(
            frame,
            (x, y - text_h),
            (x + text_w + TEXT_PADDING - 1, y + TEXT_PADDING - 1),
            TEXT_BACKGROUND,
            -1,
        )
        cv2.putText(
            frame,
            annotation.text,
            (x + 2, y - 2),
            FONT,
            FONT_SCALE,
            TEXT_COLOR,
            FONT_THICKNESS,
        )
