"""
Shared utilities and constants.
"""

from .constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_FOCAL_LENGTH,
    DEFAULT_FRAME_WIDTH,
    ENV_FOCAL_LENGTH,
    ENV_FRAME_WIDTH,
    ENV_HFOV_DEG,
    FPS_REPORT_INTERVAL,
    TARGET_BOX_COUNT,
    USER_CONFIG_DIR,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_FOCAL_LENGTH",
    "DEFAULT_FRAME_WIDTH",
    "ENV_FOCAL_LENGTH",
    "ENV_FRAME_WIDTH",
    "ENV_HFOV_DEG",
    "FPS_REPORT_INTERVAL",
    "TARGET_BOX_COUNT",
    "USER_CONFIG_DIR",
]
