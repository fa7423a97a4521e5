"""
Exceptions raised by the target resolution pipeline.
"""


class TargetError(Exception):
    """Base class for vision target errors."""


class MalformedBoxError(TargetError, ValueError):
    """Raised when a candidate box has negative size or non-numeric fields."""


class ConfigurationError(TargetError):
    """Raised when camera configuration cannot produce a valid bearing."""


__all__ = [
    "ConfigurationError",
    "MalformedBoxError",
    "TargetError",
]
