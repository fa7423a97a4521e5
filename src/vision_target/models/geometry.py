"""
Bounding box model for candidate detections.
"""

import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..errors import MalformedBoxError
from ..utils.constants import MAX_COORDINATE

Number = int | float


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned rectangle in pixel coordinates.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent, never negative
        height: Vertical extent, never negative
    """

    x: Number
    y: Number
    width: Number
    height: Number

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise MalformedBoxError(f"Box {name} must be a number, got {value!r}")
            if isinstance(value, np.generic):
                # numpy scalars -> plain Python numbers, keeps to_dict JSON-safe
                value = value.item()
                object.__setattr__(self, name, value)
            try:
                finite = math.isfinite(value)
            except OverflowError:
                finite = False
            if not finite:
                raise MalformedBoxError(f"Box {name} must be finite, got {value!r}")
        if self.width < 0 or self.height < 0:
            raise MalformedBoxError(
                f"Box has negative size: width={self.width}, height={self.height}"
            )
        # Bounded edges keep every union extent finite
        for edge in (self.x, self.y, self.right, self.bottom):
            if abs(edge) > MAX_COORDINATE:
                raise MalformedBoxError(
                    f"Box {self.as_tuple()} reaches beyond +/-{MAX_COORDINATE} pixels"
                )

    @property
    def area(self) -> Number:
        return self.width * self.height

    @property
    def right(self) -> Number:
        return self.x + self.width

    @property
    def bottom(self) -> Number:
        return self.y + self.height

    def contains(self, other: "BoundingBox") -> bool:
        """Check if other lies entirely inside this box (edges inclusive)."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def as_tuple(self) -> tuple[Number, Number, Number, Number]:
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def coerce(cls, value: Any) -> "BoundingBox":
        """
        Build a BoundingBox from the shapes upstream detectors hand us.

        Accepts an existing BoundingBox, an (x, y, w, h) sequence such as the
        tuple returned by cv2.boundingRect, a numpy array of four values, or a
        mapping with x/y and width/height (or w/h) keys.

        Raises:
            MalformedBoxError: If the value has the wrong shape or invalid fields
        """
        if isinstance(value, BoundingBox):
            return value

        if isinstance(value, np.ndarray):
            value = value.ravel().tolist()

        if isinstance(value, Mapping):
            try:
                return cls(
                    x=value["x"],
                    y=value["y"],
                    width=value["width"] if "width" in value else value["w"],
                    height=value["height"] if "height" in value else value["h"],
                )
            except KeyError as e:
                raise MalformedBoxError(f"Box mapping is missing key {e}") from e

        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 4:
                raise MalformedBoxError(
                    f"Box sequence must have 4 values (x, y, w, h), got {len(value)}"
                )
            return cls(*value)

        raise MalformedBoxError(f"Cannot interpret {value!r} as a bounding box")
