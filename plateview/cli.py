"""Command-line interface for plateview."""

import argparse
from pathlib import Path

from . import __version__
from .config import AppConfig
from .core.io import is_camera_source
from .detection.base import DEFAULT_CLASS_NAMES

EPILOG = """\
Examples:
  plateview video.avi --engine myengine.openvino:OpenvinoInfer
  plateview 0 --engine myengine.openvino:OpenvinoInfer --device GPU
  plateview video.avi --engine myengine:Engine --model Model/0526.xml --detect-color 0
  plateview video.avi --engine myengine:Engine --headless

Keys:
  q, Q, Esc   Quit
  space       Pause until any key is pressed
  s           Save the annotated frame (see --snapshot)

The engine factory is called as factory(model_xml, model_bin, device) and
must return an object with model_width, model_height and
infer(frame, detect_color) -> list of detections.
"""


def parse_args(args=None) -> AppConfig:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv).

    Returns:
        AppConfig with parsed options.
    """
    parser = argparse.ArgumentParser(
        prog="plateview",
        description="Overlay keypoint detections on a video stream in real time.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "source",
        type=str,
        help="Video file (.avi, .mp4), image file, or camera index (e.g. 0)",
    )

    parser.add_argument(
        "--engine",
        type=str,
        required=True,
        help="Inference engine factory as 'module:attribute'",
    )

    # Model arguments
    parser.add_argument(
        "--model",
        type=str,
        default="Model/0526.xml",
        help="Model description file (default: Model/0526.xml)",
    )

    parser.add_argument(
        "--weights",
        type=str,
        default=None,
        help="Model weights file (default: --model with .xml replaced by .bin)",
    )

    parser.add_argument(
        "--device",
        type=str,
        default="CPU",
        help="Inference device identifier passed to the engine (default: CPU)",
    )

    parser.add_argument(
        "--detect-color",
        type=int,
        default=1,
        choices=[0, 1],
        help="Color mode flag passed to the engine on every frame (default: 1)",
    )

    parser.add_argument(
        "--classes",
        type=str,
        default=",".join(DEFAULT_CLASS_NAMES),
        help="Comma-separated class names in index order (default: %(default)s)",
    )

    # Playback arguments
    parser.add_argument(
        "--snapshot",
        type=str,
        default="result.jpg",
        help="File written when 's' is pressed; overwritten each time (default: result.jpg)",
    )

    parser.add_argument(
        "--poll-ms",
        type=int,
        default=1,
        help="Key poll timeout after each frame in milliseconds (default: 1)",
    )

    parser.add_argument(
        "--window",
        type=str,
        default="RP24 Detection",
        help="Window title (default: %(default)s)",
    )

    parser.add_argument(
        "--headless",
        action="store_true",
        help="Process the whole source without a window and report totals",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    parsed = parser.parse_args(args)

    # Validate input exists
    if not is_camera_source(parsed.source) and not Path(parsed.source).exists():
        parser.error(f"Input file not found: {parsed.source}")
    if parsed.poll_ms <= 0:
        parser.error("--poll-ms must be a positive number of milliseconds")
    class_names = [name.strip() for name in parsed.classes.split(",") if name.strip()]
    if not class_names:
        parser.error("--classes must name at least one class")

    return AppConfig.from_args(
        engine=parsed.engine,
        source_path=parsed.source,
        model_xml=parsed.model,
        model_bin=parsed.weights,
        device=parsed.device,
        detect_color=parsed.detect_color,
        class_names=class_names,
        window_name=parsed.window,
        poll_interval_ms=parsed.poll_ms,
        snapshot_path=parsed.snapshot,
        display=not parsed.headless,
        log_level=parsed.log_level,
    )
