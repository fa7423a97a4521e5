"""
Target and goal type models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .geometry import BoundingBox


class GoalType(str, Enum):
    """Goal types the robot can encounter during a match."""

    HIGH_GOAL = "HIGH_GOAL"  # horizontal rings ( = )
    GEAR = "GEAR"  # vertical stripes ( || )
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Target:
    """
    Resolved vision target for a single frame.

    A Target is recomputed for every frame and never mutated. When no
    candidate boxes were supplied, box and all derived fields are None and
    has_target is False.

    Attributes:
        box: Union rectangle of the retained candidate boxes
        goal_type: Classified goal type
        center_x: Horizontal center of the union rectangle in pixels
        center_y: Vertical center of the union rectangle in pixels
        bearing_degrees: Horizontal angle from the optical axis, positive right
    """

    box: BoundingBox | None
    goal_type: GoalType = GoalType.UNKNOWN
    center_x: float | None = None
    center_y: float | None = None
    bearing_degrees: float | None = None

    @property
    def has_target(self) -> bool:
        return self.box is not None

    @classmethod
    def none(cls, goal_type: GoalType = GoalType.UNKNOWN) -> "Target":
        """Explicit no-target result for a frame without candidates."""
        return cls(box=None, goal_type=goal_type)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "has_target": self.has_target,
            "goal_type": self.goal_type.value,
            "box": list(self.box.as_tuple()) if self.box is not None else None,
            "center_x": self.center_x,
            "center_y": self.center_y,
            "bearing_degrees": self.bearing_degrees,
        }
