"""
Camera geometry used to turn pixel positions into bearings.
"""

import math
from dataclasses import dataclass

from ..errors import ConfigurationError


@dataclass(frozen=True)
class CameraConfig:
    """
    Pinhole camera constants, injected once at startup.

    Attributes:
        frame_width: Frame width in pixels
        focal_length: Focal length in pixels (from calibration)
    """

    frame_width: float
    focal_length: float

    @classmethod
    def from_fov(cls, frame_width: float, horizontal_fov_deg: float) -> "CameraConfig":
        """
        Derive focal length from the horizontal field of view.

        Args:
            frame_width: Frame width in pixels
            horizontal_fov_deg: Horizontal field of view in degrees, 0 < fov < 180

        Raises:
            ConfigurationError: If the field of view is out of range
        """
        if not 0 < horizontal_fov_deg < 180:
            raise ConfigurationError(
                f"horizontal_fov_deg must be between 0 and 180, got {horizontal_fov_deg}"
            )
        hfov_rad = math.radians(horizontal_fov_deg)
        return cls(
            frame_width=frame_width,
            focal_length=(frame_width / 2.0) / math.tan(hfov_rad / 2.0),
        )

    def validate(self) -> None:
        """
        Check the constants can produce a finite bearing.

        Raises:
            ConfigurationError: If frame width or focal length is not a positive finite number
        """
        for name in ("frame_width", "focal_length"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be positive and finite, got {value}")

    @property
    def horizontal_fov_deg(self) -> float:
        self.validate()
        return math.degrees(2 * math.atan((self.frame_width / 2.0) / self.focal_length))
