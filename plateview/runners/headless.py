"""Headless processing runner."""

import logging
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from ..config import AppConfig
from ..core.io import VideoReader
from ..detection.base import InferenceEngine
from ..detection.loader import load_engine
from ..pipeline import FramePipeline

logger = logging.getLogger(__name__)


@dataclass
class HeadlessStats:
    """Totals from a headless run."""

    frames: int = 0
    detections: int = 0
    fps_total: float = 0.0

    @property
    def mean_fps(self) -> float:
        """Mean of the per-frame FPS readings."""
        if self.frames == 0:
            return 0.0
        return self.fps_total / self.frames


def run_headless(
    config: AppConfig, engine: Optional[InferenceEngine] = None
) -> HeadlessStats:
    """Run the frame pipeline over a whole source without a window.

    Annotated frames are discarded; only totals are reported.

    Args:
        config: Application configuration.
        engine: Preloaded engine; loaded from config.engine when omitted.

    Returns:
        HeadlessStats for the run.

    Raises:
        IOError: If the source cannot be opened.
    """
    engine = engine or load_engine(config.engine, config.model)
    pipeline = FramePipeline.from_config(config, engine)
    stats = HeadlessStats()

    with VideoReader(config.source.path) as reader:
        total = reader.frame_count or None
        progress = tqdm(total=total, desc="Processing")
        for frame in reader:
            context = pipeline.process(frame)
            stats.frames += 1
            stats.detections += len(context.detections)
            stats.fps_total += context.fps
            progress.update(1)
        progress.close()

    logger.info(
        "Processed %d frames, %d detections, mean FPS %.1f",
        stats.frames,
        stats.detections,
        stats.mean_fps,
    )
    return stats
