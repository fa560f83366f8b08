"""Quadtree node variants and read-only traversal.

A node is exactly one of:
    Internal — four children tiling its region
    Leaf     — a final cell with at most one contour segment
    Pruned   — a branch dropped because its boundary shows no sign change

Nodes are frozen once built. Each Internal owns its children outright, so a
tree is released as a unit when the root goes out of scope.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import NamedTuple, Union

from quadcontour.engine.geometry import Direction, Region, Segment

# Fixed child visiting order for every traversal.
TRAVERSAL_ORDER: tuple[Direction, ...] = (
    Direction.NE,
    Direction.SE,
    Direction.NW,
    Direction.SW,
)


class Children(NamedTuple):
    ne: QuadNode
    nw: QuadNode
    se: QuadNode
    sw: QuadNode

    def get(self, direction: Direction) -> QuadNode:
        return getattr(self, direction.value)

    def ordered(self) -> tuple[QuadNode, ...]:
        return tuple(self.get(d) for d in TRAVERSAL_ORDER)


@dataclass(frozen=True)
class Internal:
    region: Region
    depth: int
    children: Children
    code: int


@dataclass(frozen=True)
class Leaf:
    region: Region
    depth: int
    contour: Segment | None = None
    code: int = 0

    @property
    def has_contour(self) -> bool:
        return self.contour is not None


@dataclass(frozen=True)
class Pruned:
    region: Region
    depth: int
    code: int = 0


QuadNode = Union[Internal, Leaf, Pruned]


def iter_nodes(node: QuadNode) -> Iterator[QuadNode]:
    """Pre-order walk over every node, children in TRAVERSAL_ORDER."""
    stack: list[QuadNode] = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Internal):
            # Reversed so the first child in order is popped first
            stack.extend(reversed(current.children.ordered()))


def iter_leaves(node: QuadNode) -> Iterator[Leaf]:
    for current in iter_nodes(node):
        if isinstance(current, Leaf):
            yield current


def for_each_leaf(node: QuadNode, visit: Callable[[Leaf], None]) -> None:
    """Call ``visit`` once per Leaf, depth-first pre-order. Never mutates."""
    for leaf in iter_leaves(node):
        visit(leaf)
