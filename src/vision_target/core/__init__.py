"""
Core target resolution components.

resolver.py holds the pure per-frame pipeline; frames.py runs it over a
stream of frames; overlay.py draws the result for debugging.
"""

from .frames import FrameStats, JsonFrame, process_frames, read_frames
from .overlay import draw_target
from .resolver import (
    TargetResolver,
    classify_goal,
    derive_target,
    filter_largest,
    union_boxes,
)

__all__ = [
    "FrameStats",
    "JsonFrame",
    "TargetResolver",
    "classify_goal",
    "derive_target",
    "draw_target",
    "filter_largest",
    "process_frames",
    "read_frames",
    "union_boxes",
]
