"""
Export functionality for imgcollide.

Provides functions to export collision groups to TXT, CSV or JSON files.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TextIO

from ..config import EXPORT_FORMATS
from ..models import CollisionGroup


def _export_txt(groups: list[CollisionGroup], file_handle: TextIO) -> None:
    """Export in the same layout as the console report."""
    from ..cli.reporting import format_collision_report

    file_handle.write(format_collision_report(groups))


def _export_csv(groups: list[CollisionGroup], file_handle: TextIO) -> None:
    """
    Export collision groups to CSV format.

    Notes:
        One row per path: group_id, fingerprint, width, height, path
    """
    writer = csv.writer(file_handle, lineterminator='\n')
    writer.writerow(['group_id', 'fingerprint', 'width', 'height', 'path'])

    for i, group in enumerate(groups, 1):
        for (width, height), paths in group.buckets.items():
            for path in paths:
                writer.writerow([i, group.fingerprint.hex, width, height, path])


def _export_json(groups: list[CollisionGroup], file_handle: TextIO) -> None:
    json.dump(
        {
            'group_count': len(groups),
            'groups': [group.to_dict() for group in groups],
        },
        file_handle,
        indent=2,
    )


def export_results(
    groups: list[CollisionGroup],
    output_path: Path,
    export_format: str = 'txt'
) -> None:
    """
    Export collision groups to a file.

    Args:
        groups: Collision groups to write
        output_path: Path to output file
        export_format: Export format ('txt', 'csv' or 'json'). Default: 'txt'

    Raises:
        ValueError: If export_format is not supported
        OSError: If file cannot be written
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(
            f"Unsupported export format: {export_format}. Use one of {', '.join(EXPORT_FORMATS)}."
        )

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        if export_format == 'txt':
            _export_txt(groups, f)
        elif export_format == 'csv':
            _export_csv(groups, f)
        else:
            _export_json(groups, f)


__all__ = ['export_results']
