"""
Configuration loading - YAML files, environment overrides, camera constants.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models import CameraConfig
from ..utils.constants import ENV_FOCAL_LENGTH, ENV_FRAME_WIDTH, ENV_HFOV_DEG
from .schemas import Config, validate_config_pydantic

logger = logging.getLogger(__name__)


class ConfigValidationError(ConfigurationError):
    """Raised when config validation fails."""


# Environment variable -> (camera key, parser)
_ENV_OVERRIDES = {
    ENV_FRAME_WIDTH: ("frame_width", int),
    ENV_FOCAL_LENGTH: ("focal_length", float),
    ENV_HFOV_DEG: ("horizontal_fov_deg", float),
}


def load_config_file(path: str | Path) -> dict:
    """
    Read a YAML config file.

    Args:
        path: Path to the YAML file

    Returns:
        Raw configuration dictionary (empty for an empty file)

    Raises:
        ConfigValidationError: If the file is not valid YAML or not a mapping
    """
    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigValidationError(
            f"Config file {path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def load_config_with_env(config: dict) -> dict:
    """
    Apply environment variable overrides to config.

    Args:
        config: Base configuration dictionary

    Returns:
        Configuration with environment variables applied

    Raises:
        ConfigValidationError: If an override is not a number
    """
    for env_name, (key, parse) in _ENV_OVERRIDES.items():
        if env_name not in os.environ:
            continue
        raw = os.environ[env_name]
        try:
            value = parse(raw)
        except ValueError as e:
            raise ConfigValidationError(
                f"Environment variable {env_name} must be a number, got '{raw}'"
            ) from e
        logger.info(f"Using camera {key} from environment: {env_name}")
        config.setdefault("camera", {})
        if config["camera"] is None:
            config["camera"] = {}
        config["camera"][key] = value

    return config


def parse_config(config: dict) -> Config:
    """
    Validate a raw config dict into a Config model.

    Raises:
        ConfigValidationError: With every pydantic error flattened into the message
    """
    try:
        return validate_config_pydantic(config)
    except ValidationError as e:
        problems = "; ".join(format_validation_error(err) for err in e.errors())
        raise ConfigValidationError(f"Invalid configuration: {problems}") from e


def camera_from_settings(config: Config) -> CameraConfig:
    """Build camera constants; an explicit focal length wins over the FOV."""
    camera = config.camera
    if camera.focal_length is not None:
        return CameraConfig(
            frame_width=camera.frame_width, focal_length=camera.focal_length
        )
    return CameraConfig.from_fov(camera.frame_width, camera.horizontal_fov_deg)


def build_camera_config(config: dict) -> CameraConfig:
    """
    Build the immutable camera constants from a raw config dict.

    Args:
        config: Raw configuration dictionary

    Returns:
        CameraConfig for the resolver

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    return camera_from_settings(parse_config(config))


def format_validation_error(err: dict) -> str:
    """Render one pydantic error as "section.key: message"."""
    location = ".".join(str(part) for part in err.get("loc", ())) or "config"
    return f"{location}: {err.get('msg', 'invalid value')}"
