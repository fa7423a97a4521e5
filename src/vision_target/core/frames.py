"""
Frame loop - feeds per-frame candidate boxes through the resolver.

The detection collaborator hands over one list of boxes per camera frame.
This loop owns the error policy the pure resolver leaves to its caller:
malformed frames are logged and skipped, configuration errors stop the run.
"""

import json
import logging
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from ..errors import MalformedBoxError
from ..models import Target
from ..utils.constants import FPS_REPORT_INTERVAL
from .resolver import TargetResolver

logger = logging.getLogger(__name__)


@dataclass
class FrameStats:
    """Counters for a processing run."""

    frames: int = 0
    targets: int = 0
    skipped: int = 0
    elapsed: float = 0.0

    @property
    def fps(self) -> float:
        return self.frames / self.elapsed if self.elapsed > 0 else 0.0


@dataclass(frozen=True)
class JsonFrame:
    """
    One line of a JSON lines frame stream.

    Parsing happens on iteration so a bad line surfaces as a MalformedBoxError
    for that frame only.
    """

    line_number: int
    text: str

    def __iter__(self) -> Iterator[Any]:
        try:
            boxes = json.loads(self.text)
        except json.JSONDecodeError as e:
            raise MalformedBoxError(f"Line {self.line_number}: invalid JSON ({e.msg})") from e
        if not isinstance(boxes, list):
            raise MalformedBoxError(
                f"Line {self.line_number}: expected a list of boxes, "
                f"got {type(boxes).__name__}"
            )
        return iter(boxes)


def read_frames(stream: TextIO) -> Iterator[JsonFrame]:
    """
    Read frames from a JSON lines stream.

    Each non-blank line holds a JSON array of boxes, either [x, y, w, h]
    arrays or {"x", "y", "width", "height"} objects.
    """
    for line_number, line in enumerate(stream, 1):
        text = line.strip()
        if text:
            yield JsonFrame(line_number=line_number, text=text)


def process_frames(
    frames: Iterable[Iterable[Any]],
    resolver: TargetResolver,
    on_target: Callable[[Target], None],
    report_interval: int = FPS_REPORT_INTERVAL,
) -> FrameStats:
    """
    Resolve every frame and hand each Target to on_target.

    Args:
        frames: One iterable of box-like values per frame
        resolver: Resolver holding the camera constants
        on_target: Callback invoked with the Target of each good frame
        report_interval: Log a throughput line every N frames

    Returns:
        FrameStats for the run

    Raises:
        ConfigurationError: If the camera constants are invalid
    """
    stats = FrameStats()
    start_time = time.time()

    for frame in frames:
        stats.frames += 1

        try:
            target = resolver.resolve(frame)
        except MalformedBoxError as e:
            stats.skipped += 1
            logger.warning(f"Skipping frame {stats.frames}: {e}")
            continue

        if target.has_target:
            stats.targets += 1
        on_target(target)

        if stats.frames % report_interval == 0:
            elapsed = time.time() - start_time
            logger.info(
                f"[{elapsed:.1f}s] Frame {stats.frames} | "
                f"Targets: {stats.targets} | Skipped: {stats.skipped}"
            )

    stats.elapsed = time.time() - start_time
    logger.info(
        f"Complete: {stats.frames} frames, {stats.targets} targets, "
        f"{stats.skipped} skipped"
    )
    return stats
