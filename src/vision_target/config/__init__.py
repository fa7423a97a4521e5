"""
Configuration loading and validation.

- load_config_file / load_config_with_env: read YAML and apply env overrides
- validate_config_full: validation with errors, warnings and derived settings
- build_camera_config: immutable camera constants for the resolver
"""

from .loader import (
    ConfigValidationError,
    build_camera_config,
    camera_from_settings,
    load_config_file,
    load_config_with_env,
    parse_config,
)
from .schemas import (
    CameraSettings,
    Config,
    OutputSettings,
    RuntimeSettings,
    validate_config_pydantic,
)
from .validator import (
    ValidationResult,
    print_validation_result,
    validate_config_full,
)

__all__ = [
    "CameraSettings",
    "Config",
    "ConfigValidationError",
    "OutputSettings",
    "RuntimeSettings",
    "ValidationResult",
    "build_camera_config",
    "camera_from_settings",
    "load_config_file",
    "load_config_with_env",
    "parse_config",
    "print_validation_result",
    "validate_config_full",
    "validate_config_pydantic",
]
