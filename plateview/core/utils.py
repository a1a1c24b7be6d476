"""Frame and process utility functions."""

import logging

import cv2
import numpy as np


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logging for the command-line tools.

    Args:
        log_level: Level name such as ``"INFO"`` or ``"DEBUG"``.

    Raises:
        ValueError: If the level name is unknown.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def resize_to_model(frame: np.ndarray, width: int, height: int) -> np.ndarray:
    """Resize a frame to the model input resolution.

    Args:
        frame: Input frame.
        width: Model input width.
        height: Model input height.

    Returns:
        A new array of shape (height, width, channels); the input is untouched.
    """
    if frame.shape[:2] == (height, width):
        return frame.copy()
    return cv2.resize(frame, (width, height), interpolation=cv2.INTER_LINEAR)
