"""
Constants used throughout the vision target system
"""

# Pipeline
TARGET_BOX_COUNT = 2  # Boxes kept per frame (one per reflective stripe)
MAX_COORDINATE = 2**31  # Largest box edge magnitude accepted, in pixels

# Camera defaults when no config file is found
DEFAULT_FRAME_WIDTH = 320  # Pixels
DEFAULT_FOCAL_LENGTH = 160.0  # Pixels, ~90 degree horizontal FOV at 320px

# Performance and monitoring
FPS_REPORT_INTERVAL = 100  # Report throughput every N frames

# Config file locations
DEFAULT_CONFIG_FILE = "config.yaml"
USER_CONFIG_DIR = "vision-target"

# Environment variables
ENV_FRAME_WIDTH = "VISION_FRAME_WIDTH"
ENV_FOCAL_LENGTH = "VISION_FOCAL_LENGTH"
ENV_HFOV_DEG = "VISION_HFOV_DEG"
