"""Real-time keypoint detection overlay for video streams."""

__version__ = "0.1.0"
