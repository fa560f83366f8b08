"""Summary counts over a built contour tree."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from quadcontour.engine.geometry import Segment
from quadcontour.engine.quadnode import Internal, Leaf, Pruned, QuadNode, iter_nodes


@dataclass
class TreeStats:
    internal: int = 0
    leaves: int = 0
    pruned: int = 0
    contours: int = 0
    max_depth: int = 0
    # leaf depth -> number of leaves at that depth
    leaf_depths: dict[int, int] = field(default_factory=dict)
    segments: list[Segment] = field(default_factory=list)

    @property
    def nodes(self) -> int:
        return self.internal + self.leaves + self.pruned


def collect_stats(tree: QuadNode) -> TreeStats:
    stats = TreeStats()
    depths: Counter[int] = Counter()

    for node in iter_nodes(tree):
        stats.max_depth = max(stats.max_depth, node.depth)
        if isinstance(node, Internal):
            stats.internal += 1
        elif isinstance(node, Leaf):
            stats.leaves += 1
            depths[node.depth] += 1
            if node.has_contour:
                stats.contours += 1
                stats.segments.append(node.contour)
        elif isinstance(node, Pruned):
            stats.pruned += 1

    stats.leaf_depths = dict(sorted(depths.items()))
    return stats
