"""
Input validation for imgcollide.

Provides validators for the directory argument and the numeric options.
"""

from __future__ import annotations

import os

from ..config import MAX_WORKERS


def validate_directory(directory: str) -> tuple[bool, str]:
    """
    Validate that a directory exists and is accessible.

    Args:
        directory: Directory path to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_directory('/nonexistent/directory')
        (False, 'Directory not found: /nonexistent/directory')
    """
    if not directory:
        return False, "Directory path is required"

    if not os.path.exists(directory):
        return False, f"Directory not found: {directory}"

    if not os.path.isdir(directory):
        return False, f"Path is not a directory: {directory}"

    if not os.access(directory, os.R_OK):
        return False, f"Cannot read directory (permission denied): {directory}"

    return True, ""


def validate_side(side) -> tuple[bool, str]:
    """
    Validate the fingerprint grid side.

    Examples:
        >>> validate_side(10)
        (True, '')
        >>> validate_side(0)
        (False, 'Resolution must be a positive integer')
    """
    if isinstance(side, bool):
        return False, "Resolution must be an integer"
    try:
        side = int(side)
    except (ValueError, TypeError):
        return False, "Resolution must be an integer"
    if side < 1:
        return False, "Resolution must be a positive integer"
    return True, ""


def validate_workers(workers) -> tuple[bool, str]:
    """Validate the worker count."""
    try:
        workers = int(workers)
    except (ValueError, TypeError):
        return False, "Workers must be an integer"
    if not 1 <= workers <= MAX_WORKERS:
        return False, f"Workers must be between 1 and {MAX_WORKERS}"
    return True, ""


__all__ = [
    'validate_directory',
    'validate_side',
    'validate_workers',
]
