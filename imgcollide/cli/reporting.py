"""
Report formatting and display for the CLI interface.

Renders collision groups as:

    collision:
      W x H
        path
"""

from __future__ import annotations

from ..models import CollisionGroup


def _format_group(group: CollisionGroup) -> list[str]:
    lines = ["", "collision:"]
    for (width, height), paths in group.buckets.items():
        lines.append(f"  {width} x {height}")
        for path in paths:
            lines.append(f"    {path}")
    return lines


def format_collision_report(groups: list[CollisionGroup]) -> str:
    """
    Format collision groups as text.

    Args:
        groups: Collision groups to render

    Returns:
        Report text, empty when there are no groups
    """
    lines: list[str] = []
    for group in groups:
        lines.extend(_format_group(group))
    return "\n".join(lines) + "\n" if lines else ""


def print_collision_report(groups: list[CollisionGroup]) -> None:
    """Print collision groups to stdout."""
    report = format_collision_report(groups)
    if report:
        print(report, end="")


def summarize(groups: list[CollisionGroup]) -> str:
    """One-line summary, e.g. '2 collision groups covering 5 images'."""
    image_count = sum(group.image_count for group in groups)
    noun = "group" if len(groups) == 1 else "groups"
    return f"{len(groups):,} collision {noun} covering {image_count:,} images"


__all__ = ['format_collision_report', 'print_collision_report', 'summarize']
