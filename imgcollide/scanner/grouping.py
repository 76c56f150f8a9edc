"""
Collision grouping for the scanner package.

Aggregates image records into fingerprint -> dimensions -> paths and keeps
the fingerprints shared by more than one image. Images with the same
fingerprint but different dimensions land in the same group, one bucket per
size, which is how resized copies show up.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from ..models import CollisionGroup, Dimensions, Fingerprint, ImageRecord


def build_collision_index(
    records: Iterable[ImageRecord],
) -> dict[Fingerprint, dict[Dimensions, list[str]]]:
    """
    Build the two-level index fingerprint -> dimensions -> paths.

    Dimension buckets and path lists keep insertion order.

    Args:
        records: Image records to index

    Returns:
        Nested mapping covering every record
    """
    index: dict[Fingerprint, dict[Dimensions, list[str]]] = defaultdict(dict)

    for record in records:
        index[record.fingerprint].setdefault(record.dimensions, []).append(record.path)

    return dict(index)


def group_collisions(records: Iterable[ImageRecord]) -> list[CollisionGroup]:
    """
    Find fingerprints shared by two or more images.

    The count is taken across all dimension buckets of a fingerprint, so a
    group may contain several buckets holding one path each.

    Args:
        records: Image records from the pipeline, in any order

    Returns:
        List of CollisionGroup objects (order across groups is unspecified)
    """
    groups = []
    for fingerprint, buckets in build_collision_index(records).items():
        group = CollisionGroup(fingerprint=fingerprint, buckets=buckets)
        if group.image_count > 1:
            groups.append(group)
    return groups


__all__ = [
    'build_collision_index',
    'group_collisions',
]
