"""
File discovery module for the scanner package.

Lists the regular files directly inside a directory. There is no extension
filter: anything that does not decode is dropped later by the pipeline.
"""

from __future__ import annotations

from pathlib import Path

from ..exceptions import DirectoryReadError


def list_files(root_path: str | Path) -> list[str]:
    """
    List regular files in the given directory (non-recursive).

    Args:
        root_path: Directory to list

    Returns:
        Sorted list of file paths as strings

    Raises:
        DirectoryReadError: If the directory does not exist or cannot be read
    """
    root = Path(root_path)

    if not root.is_dir():
        raise DirectoryReadError(str(root), "Not a directory")

    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise DirectoryReadError(str(root), str(e)) from e

    return sorted(str(entry) for entry in entries if entry.is_file())


__all__ = ['list_files']
