"""
Target Resolver - Reduces candidate boxes to a single classified target.

Pipeline (applied once per frame):
1. filter_largest  - keep the two largest boxes
2. classify_goal   - goal type from the summed height/width imbalance
3. union_boxes     - smallest rectangle enclosing the kept boxes
4. derive_target   - center point and bearing from camera geometry

Every stage is a pure function. Nothing here logs or keeps state between
frames; the caller decides what to do with errors.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any

from ..models import BoundingBox, CameraConfig, GoalType, Target
from ..utils.constants import TARGET_BOX_COUNT


def filter_largest(
    boxes: Sequence[BoundingBox], keep: int = TARGET_BOX_COUNT
) -> list[BoundingBox]:
    """
    Keep only the largest boxes, ordered by descending area.

    Equal-area boxes keep their input order. Fewer than two boxes come back
    unchanged.

    Args:
        boxes: Candidate boxes
        keep: Number of boxes to retain

    Returns:
        New list with at most `keep` boxes
    """
    if len(boxes) < 2:
        return list(boxes)
    # sorted() is stable, including with reverse=True
    return sorted(boxes, key=lambda box: box.area, reverse=True)[:keep]


def classify_goal(boxes: Iterable[BoundingBox]) -> GoalType:
    """
    Determine goal type from how vertical the boxes are overall.

    Summing over every box tolerates one stripe being partially blocked.
    Symmetric shapes land on UNKNOWN, and oddly angled mixed shapes can be
    misread; this is a heuristic, not a geometric test.
    """
    verticalness = sum(box.height - box.width for box in boxes)

    if verticalness > 0:
        return GoalType.GEAR
    if verticalness < 0:
        return GoalType.HIGH_GOAL
    return GoalType.UNKNOWN


def union_boxes(boxes: Iterable[BoundingBox]) -> BoundingBox | None:
    """
    Compute the smallest axis-aligned box containing all boxes.

    Returns:
        Union rectangle, or None when no boxes were given
    """
    bounds: tuple[float, float, float, float] | None = None

    for box in boxes:
        if bounds is None:
            bounds = (box.x, box.y, box.right, box.bottom)
            continue
        left, top, right, bottom = bounds
        bounds = (
            min(left, box.x),
            min(top, box.y),
            max(right, box.right),
            max(bottom, box.bottom),
        )

    if bounds is None:
        return None

    left, top, right, bottom = bounds
    return BoundingBox(x=left, y=top, width=right - left, height=bottom - top)


def derive_target(
    union: BoundingBox | None, goal_type: GoalType, camera: CameraConfig
) -> Target:
    """
    Build a Target with center and bearing from the union rectangle.

    Args:
        union: Union rectangle, or None if the frame had no candidates
        goal_type: Classified goal type
        camera: Camera constants

    Returns:
        Target; Target.none() when union is None

    Raises:
        ConfigurationError: If focal length or frame width is not positive and finite
    """
    camera.validate()

    if union is None:
        return Target.none(goal_type)

    center_x = union.x + union.width / 2
    center_y = union.y + union.height / 2
    radians = math.atan((center_x - camera.frame_width / 2) / camera.focal_length)

    return Target(
        box=union,
        goal_type=goal_type,
        center_x=center_x,
        center_y=center_y,
        bearing_degrees=math.degrees(radians),
    )


class TargetResolver:
    """
    Runs the full filter -> classify -> union -> derive pipeline.

    Holds nothing but the camera constants, so one instance can serve every
    frame.
    """

    def __init__(self, camera: CameraConfig):
        self.camera = camera

    def resolve(self, boxes: Iterable[Any]) -> Target:
        """
        Resolve candidate boxes from one frame into a Target.

        Args:
            boxes: BoundingBox instances or box-like values (see BoundingBox.coerce)

        Raises:
            MalformedBoxError: If any candidate box is invalid
            ConfigurationError: If the camera constants are invalid
        """
        # Snapshot first so later changes to the caller's list can't leak in
        candidates = tuple(BoundingBox.coerce(box) for box in boxes)

        largest = filter_largest(candidates)
        goal_type = classify_goal(largest)
        union = union_boxes(largest)
        return derive_target(union, goal_type, self.camera)
