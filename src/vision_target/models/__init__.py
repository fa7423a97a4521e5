"""
Data models for target resolution.

Everything here is an immutable value type; the pipeline in core/ builds
fresh instances for every frame.
"""

from .camera import CameraConfig
from .geometry import BoundingBox
from .target import GoalType, Target

__all__ = [
    "BoundingBox",
    "CameraConfig",
    "GoalType",
    "Target",
]
