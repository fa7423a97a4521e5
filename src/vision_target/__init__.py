"""
Vision Target

Reduces the candidate boxes detected in a camera frame to a single classified
target: the two largest boxes are kept, the goal type is read from their
orientation, and the union rectangle gives the center and bearing.

Package structure:
  models/  - BoundingBox, GoalType, Target, CameraConfig value types
  core/    - Resolver pipeline, frame loop, debug overlay
  config/  - Configuration loading and validation
  utils/   - Constants
"""

__version__ = "1.0.0"

from .config import (
    ConfigValidationError,
    ValidationResult,
    build_camera_config,
    validate_config_full,
)
from .core import (
    TargetResolver,
    classify_goal,
    derive_target,
    filter_largest,
    process_frames,
    union_boxes,
)
from .errors import ConfigurationError, MalformedBoxError, TargetError
from .models import BoundingBox, CameraConfig, GoalType, Target

__all__ = [
    # Models
    "BoundingBox",
    "CameraConfig",
    # Config
    "ConfigValidationError",
    # Errors
    "ConfigurationError",
    "GoalType",
    "MalformedBoxError",
    "Target",
    "TargetError",
    # Core
    "TargetResolver",
    "ValidationResult",
    "build_camera_config",
    "classify_goal",
    "derive_target",
    "filter_largest",
    "process_frames",
    "union_boxes",
    "validate_config_full",
]
