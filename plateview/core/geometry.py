"""Mapping between model space and display space."""

from typing import Tuple

import numpy as np


def scale_factors(
    frame_shape: Tuple[int, ...], model_width: int, model_height: int
) -> Tuple[float, float]:
    """Compute display/model scale factors for a frame.

    Args:
        frame_shape: Shape of the raw frame, (height, width[, channels]).
        model_width: Width of the model input.
        model_height: Height of the model input.

    Returns:
        Tuple of (scale_x, scale_y).
    """
    height, width = frame_shape[:2]
    return width / model_width, height / model_height


def map_point(
    point: Tuple[float, float], scale: Tuple[float, float]
) -> Tuple[float, float]:
    """Map a model-space point into display space."""
    x, y = point
    sx, sy = scale
    return x * sx, y * sy


def map_keypoints(keypoints: np.ndarray, scale: Tuple[float, float]) -> np.ndarray:
    """Map an (N, 2) array of model-space points into display space.

    Each point is scaled independently; no clamping to frame bounds.
    """
    return np.asarray(keypoints, dtype=np.float64) * np.asarray(scale, dtype=np.float64)
