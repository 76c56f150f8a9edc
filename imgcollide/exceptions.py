"""
Exception hierarchy for imgcollide.

Decode failures are per-item and never abort a run; directory read failures
are fatal and surface before any image is processed.
"""

from __future__ import annotations


class ImgCollideError(Exception):
    """Base class for all imgcollide errors."""


class DecodeError(ImgCollideError):
    """An image file could not be decoded into a pixel grid."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Cannot decode {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DirectoryReadError(ImgCollideError):
    """The source directory could not be listed."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read directory {path}: {reason}" if reason else f"Cannot read directory {path}")


class ConfigError(ImgCollideError, ValueError):
    """Invalid configuration value."""


__all__ = [
    'ImgCollideError',
    'DecodeError',
    'DirectoryReadError',
    'ConfigError',
]
