"""
Configuration Validator - Validates config syntax and semantic correctness.

Provides comprehensive validation with detailed error messages.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from .loader import camera_from_settings, format_validation_error
from .schemas import validate_config_pydantic

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of config validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    derived: dict[str, Any] = field(default_factory=dict)


def validate_config_full(config: dict) -> ValidationResult:
    """
    Comprehensive config validation with detailed error messages.

    Args:
        config: Configuration dictionary to validate

    Returns:
        ValidationResult with errors, warnings, and derived camera settings.
    """
    result = ValidationResult(valid=True)

    try:
        parsed = validate_config_pydantic(config)
    except ValidationError as e:
        result.errors.extend(format_validation_error(err) for err in e.errors())
        result.valid = False
        return result

    raw_camera = config.get("camera") or {}
    if "focal_length" in raw_camera and "horizontal_fov_deg" in raw_camera:
        result.warnings.append(
            "camera.focal_length and camera.horizontal_fov_deg both set - "
            "using focal_length"
        )
    if "focal_length" not in raw_camera and "horizontal_fov_deg" not in raw_camera:
        result.warnings.append(
            f"No camera calibration given - using default focal length "
            f"{parsed.camera.focal_length}px"
        )

    camera = camera_from_settings(parsed)
    result.derived["frame_width"] = camera.frame_width
    result.derived["focal_length"] = camera.focal_length
    result.derived["horizontal_fov_deg"] = camera.horizontal_fov_deg
    result.derived["output"] = parsed.output.path or "stdout"

    logger.debug(f"Validated config: {result.derived}")
    return result


def print_validation_result(result: ValidationResult) -> None:
    """Print validation result to the console."""
    if result.valid:
        print("Configuration valid")
    else:
        print("Configuration invalid")

    for error in result.errors:
        print(f"  ERROR: {error}")
    for warning in result.warnings:
        print(f"  WARNING: {warning}")

    if result.derived:
        print("\nDerived settings:")
        for key, value in result.derived.items():
            if isinstance(value, float):
                value = f"{value:.2f}"
            print(f"  {key}: {value}")
