"""
Vision Target CLI
Resolves per-frame candidate boxes into targets.

Reads one JSON array of boxes per line (from a file or stdin) and writes one
JSON target per line:
  python -m vision_target frames.jsonl
  python -m vision_target --validate
"""

import argparse
import json
import logging
import sys
from contextlib import ExitStack
from pathlib import Path

from .config import (
    ConfigValidationError,
    camera_from_settings,
    load_config_file,
    load_config_with_env,
    parse_config,
    print_validation_result,
    validate_config_full,
)
from .core import TargetResolver, process_frames, read_frames
from .errors import ConfigurationError
from .utils.constants import DEFAULT_CONFIG_FILE, USER_CONFIG_DIR

logger = logging.getLogger(__name__)


def find_config_file(config_path: str | None) -> Path | None:
    """
    Find config file in standard locations.

    Search order:
    1. Specified path (if provided)
    2. Current directory (config.yaml)
    3. ~/.config/vision-target/config.yaml

    Args:
        config_path: User-specified config path, or None to search

    Returns:
        Path to config file, or None if no file was found (built-in defaults apply)

    Raises:
        SystemExit: If a specified config file does not exist
    """
    if config_path is not None:
        specified = Path(config_path)
        if specified.exists():
            return specified
        logger.error(f"Specified config file not found: {config_path}")
        sys.exit(1)

    search_paths = [
        Path.cwd() / DEFAULT_CONFIG_FILE,
        Path.home() / ".config" / USER_CONFIG_DIR / DEFAULT_CONFIG_FILE,
    ]

    for path in search_paths:
        if path.exists():
            logger.info(f"Using config: {path}")
            return path

    logger.info("No config file found, using built-in camera defaults")
    return None


def load_config(config_path: str | None = None) -> dict:
    """
    Load configuration file and apply environment overrides.

    Args:
        config_path: Path to config.yaml, or None to search standard locations

    Returns:
        Raw configuration dictionary (not yet validated)

    Raises:
        SystemExit: If the config file cannot be read
    """
    config_file = find_config_file(config_path)

    config: dict = {}
    if config_file is not None:
        try:
            config = load_config_file(config_file)
        except (ConfigValidationError, OSError) as e:
            logger.error(str(e))
            sys.exit(1)
        logger.info(f"Configuration loaded from {config_file}")

    try:
        return load_config_with_env(config)
    except ConfigValidationError as e:
        logger.error(str(e))
        sys.exit(1)


def setup_logging(quiet: bool = False) -> None:
    """
    Setup logging configuration.

    Args:
        quiet: If True, only show warnings and errors
    """
    level = logging.WARNING if quiet else logging.INFO

    # Custom formatter with shorter module names
    class ShortNameFormatter(logging.Formatter):
        def format(self, record):
            record.name = record.name.replace("vision_target.", "vt.")
            return super().format(record)

    handler = logging.StreamHandler()
    handler.setFormatter(
        ShortNameFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s", datefmt="%H:%M:%S"
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(level)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Vision Target - Resolve candidate boxes into a classified target",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m vision_target frames.jsonl             # Resolve frames from a file
  detector | python -m vision_target -             # Resolve frames from stdin
  python -m vision_target frames.jsonl -o out.jsonl
  python -m vision_target --validate               # Check config validity

Input format (one frame per line):
  [[10, 20, 8, 30], {"x": 40, "y": 20, "width": 8, "height": 30}]

Environment Variables:
  VISION_FRAME_WIDTH  - Override camera frame width
  VISION_FOCAL_LENGTH - Override camera focal length
  VISION_HFOV_DEG     - Override camera horizontal field of view
        """,
    )

    parser.add_argument(
        "frames",
        nargs="?",
        default="-",
        help="JSON lines file of candidate boxes (default: stdin)",
    )

    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help=f"Path to config file (default: search for {DEFAULT_CONFIG_FILE})",
    )

    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write targets to this file instead of the configured output",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode - only show warnings and errors",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate configuration and show derived camera settings",
    )

    return parser.parse_args(argv)


def run_validate(config_path: str | None) -> None:
    """Run validation mode."""
    config = load_config(config_path)
    result = validate_config_full(config)
    print_validation_result(result)
    sys.exit(0 if result.valid else 1)


def run(frames_path: str, config_path: str | None, output_path: str | None) -> int:
    """
    Resolve every frame in frames_path and write targets as JSON lines.

    Returns:
        Process exit code
    """
    config = load_config(config_path)
    try:
        settings = parse_config(config)
        camera = camera_from_settings(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    resolver = TargetResolver(camera)
    logger.info(
        f"Camera: {camera.frame_width}px wide, focal length {camera.focal_length:.1f}px "
        f"({camera.horizontal_fov_deg:.1f} deg FOV)"
    )

    output_path = output_path or settings.output.path

    with ExitStack() as stack:
        if frames_path == "-":
            source = sys.stdin
        else:
            try:
                source = stack.enter_context(open(frames_path, encoding="utf-8"))
            except OSError as e:
                logger.error(f"Cannot read frames: {e}")
                return 1

        if output_path:
            try:
                sink = stack.enter_context(open(output_path, "w", encoding="utf-8"))
            except OSError as e:
                logger.error(f"Cannot write targets: {e}")
                return 1
        else:
            sink = sys.stdout

        def write_target(target) -> None:
            sink.write(json.dumps(target.to_dict()) + "\n")

        try:
            stats = process_frames(
                read_frames(source),
                resolver,
                write_target,
                report_interval=settings.runtime.report_interval,
            )
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            return 1

    if stats.frames and stats.skipped == stats.frames:
        logger.warning("Every frame was skipped - check the input format")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(quiet=args.quiet or args.validate)

    if args.validate:
        run_validate(args.config)
        return

    sys.exit(run(args.frames, args.config, args.output))


if __name__ == "__main__":
    main()
