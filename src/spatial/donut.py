"""
Donut ring segments for cluster markers.

A cluster is drawn as a ring split into one arc per color. This module only
computes the arcs as fractions of the full ring; drawing them is up to the
renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .entities import Cluster, Color


@dataclass(frozen=True)
class DonutSegment:
    """
    One colored arc of a cluster ring.

    Attributes:
        color: Color of the arc
        count: Member points of this color
        fraction: Share of the ring, ``count / total``
        offset: Share of the ring covered by the preceding arcs
    """
    color: Color
    count: int
    fraction: float
    offset: float

    def to_dict(self) -> dict:
        return {
            "color": self.color.value,
            "count": self.count,
            "fraction": self.fraction,
            "offset": self.offset,
        }


def donut_segments(cluster: Cluster) -> List[DonutSegment]:
    """
    Split a cluster ring by color, in canonical color order.

    Fractions sum to 1.0 and each offset is the sum of the fractions before
    it, so segments can be laid end to end.
    """
    segments: List[DonutSegment] = []
    offset = 0.0
    for color, count in cluster.color_counts.items():
        fraction = count / cluster.total
        segments.append(DonutSegment(color=color, count=count, fraction=fraction, offset=offset))
        offset += fraction
    return segments
