"""Entry point for python -m plateview."""

import logging
import sys

from .cli import parse_args
from .config import AppConfig
from .core.utils import setup_logging
from .detection.loader import load_engine

logger = logging.getLogger("plateview")


def log_startup(config: AppConfig) -> None:
    """Log the resolved startup parameters."""
    logger.info("Model XML: %s", config.model.xml_path)
    logger.info("Model BIN: %s", config.model.bin_path)
    logger.info("Device: %s", config.model.device)
    logger.info("Source: %s", config.source.path)
    logger.info("Detect color: %d", config.detect_color)


def main(args=None) -> int:
    """Main entry point."""
    config = parse_args(args)
    setup_logging(config.log_level)
    log_startup(config)

    try:
        engine = load_engine(config.engine, config.model)
    except (ImportError, ValueError) as e:
        logger.error("Cannot load engine %s: %s", config.engine, e)
        return 1

    try:
        if config.playback.display:
            from .runners.interactive import run_interactive
            run_interactive(config, engine=engine)
        else:
            from .runners.headless import run_headless
            run_headless(config, engine=engine)
    except IOError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
