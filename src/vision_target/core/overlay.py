"""
Overlay drawing for debugging the resolver on live frames.
"""

from collections.abc import Iterable
from typing import Any

import cv2
import numpy as np

from ..models import BoundingBox, Target

CANDIDATE_COLOR = (0, 0, 255)  # BGR red
TARGET_COLOR = (0, 255, 0)  # BGR green
CENTER_COLOR = (0, 255, 255)  # BGR yellow


def _corners(box: BoundingBox) -> tuple[tuple[int, int], tuple[int, int]]:
    return (
        (int(round(box.x)), int(round(box.y))),
        (int(round(box.right)), int(round(box.bottom))),
    )


def draw_target(
    frame: np.ndarray, target: Target, candidates: Iterable[Any] = ()
) -> np.ndarray:
    """
    Draw candidate boxes and the resolved target on a copy of a BGR frame.

    Args:
        frame: BGR frame (numpy array)
        target: Resolved target for this frame
        candidates: Raw candidate boxes (box-like values)

    Returns:
        Annotated copy of the frame
    """
    out = frame.copy()

    for candidate in candidates:
        top_left, bottom_right = _corners(BoundingBox.coerce(candidate))
        cv2.rectangle(out, top_left, bottom_right, CANDIDATE_COLOR, 1)

    if not target.has_target:
        return out

    top_left, bottom_right = _corners(target.box)
    cv2.rectangle(out, top_left, bottom_right, TARGET_COLOR, 2)

    center = (int(round(target.center_x)), int(round(target.center_y)))
    cv2.circle(out, center, 3, CENTER_COLOR, -1)

    label = f"{target.goal_type.value} {target.bearing_degrees:+.1f}deg"
    cv2.putText(
        out,
        label,
        (top_left[0], max(top_left[1] - 8, 12)),
        cv2.FONT_HERSHEY_SIMPLEX,
        0.4,
        TARGET_COLOR,
        1,
    )
    return out
