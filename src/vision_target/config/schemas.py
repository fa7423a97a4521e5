"""
Pydantic schemas for configuration validation.

Provides type-safe, declarative validation with clear error messages.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.constants import DEFAULT_FOCAL_LENGTH, DEFAULT_FRAME_WIDTH, FPS_REPORT_INTERVAL


class StrictModel(BaseModel):
    """Base model that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class CameraSettings(StrictModel):
    """Camera geometry settings."""

    frame_width: int = Field(
        default=DEFAULT_FRAME_WIDTH, gt=0, description="Frame width in pixels"
    )
    focal_length: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Focal length in pixels (from calibration)",
    )
    horizontal_fov_deg: float | None = Field(
        default=None,
        gt=0,
        lt=180,
        allow_inf_nan=False,
        description="Horizontal field of view in degrees",
    )

    @model_validator(mode="after")
    def default_focal_length(self):
        if self.focal_length is None and self.horizontal_fov_deg is None:
            self.focal_length = DEFAULT_FOCAL_LENGTH
        return self


class OutputSettings(StrictModel):
    """Output configuration."""

    path: str | None = Field(
        default=None, description="JSON lines output file (None = stdout)"
    )


class RuntimeSettings(StrictModel):
    """Runtime configuration."""

    report_interval: int = Field(default=FPS_REPORT_INTERVAL, gt=0)


class Config(StrictModel):
    """Complete configuration schema."""

    camera: CameraSettings = Field(default_factory=CameraSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)


def validate_config_pydantic(config: dict) -> Config:
    """
    Validate configuration using Pydantic.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated Config object

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return Config(**config)
