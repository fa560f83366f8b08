"""Subdivider — builds the contour quadtree top-down.

Per node, after classifying the four corner values:
    depth >= max_depth  → split once more into four leaves that all reuse
                          this node's code, each with its own segment
    depth <  min_depth  → always split and recurse
    otherwise           → prune on codes 0/15, else split and recurse

Leaves therefore sit at depth max_depth + 1 at the deepest.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor

from quadcontour.engine.field import ScalarField
from quadcontour.engine.geometry import Region
from quadcontour.engine.marching import EMPTY_CODES, classify, lookup
from quadcontour.engine.quadnode import Children, Internal, Leaf, Pruned, QuadNode
from quadcontour.engine.stats import collect_stats

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Subdivision bounds are inconsistent."""


def check_depths(min_depth: int, max_depth: int) -> None:
    if max_depth < min_depth:
        msg = f"Maximum depth ({max_depth}) cannot be less than minimum depth ({min_depth})"
        logger.error(msg)
        raise ConfigurationError(msg)


class Subdivider:
    """Recursive quadtree construction over one scalar field."""

    def __init__(self, field: ScalarField, min_depth: int, max_depth: int) -> None:
        check_depths(min_depth, max_depth)
        self.field = field
        self.min_depth = min_depth
        self.max_depth = max_depth

    def classify_region(self, region: Region) -> int:
        tl, tr, br, bl = (self.field.evaluate(x, y) for x, y in region.corners())
        code = classify(tl, tr, br, bl)
        logger.debug("TL: %f TR: %f BR: %f BL: %f BIN: %d", tl, tr, br, bl, code)
        return code

    def build(self, region: Region, depth: int = 0) -> QuadNode:
        check_depths(self.min_depth, self.max_depth)
        return self._build(region, depth)

    def build_parallel(self, region: Region, depth: int = 0, max_workers: int = 4) -> QuadNode:
        """Same tree as build(), with the root's four subtrees built concurrently.

        Sibling subtrees share no state, so joining the futures is the only
        synchronisation needed.
        """
        check_depths(self.min_depth, self.max_depth)
        code = self.classify_region(region)
        if not self._splits(code, depth) or depth >= self.max_depth:
            return self._finish(region, depth, code)

        quads = region.quadrants()
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(self._build, q, depth + 1) for q in quads]
            built = [f.result() for f in futures]
        return Internal(region=region, depth=depth, children=Children(*built), code=code)

    def _splits(self, code: int, depth: int) -> bool:
        if depth < self.min_depth:
            return True
        return code not in EMPTY_CODES

    def _build(self, region: Region, depth: int) -> QuadNode:
        code = self.classify_region(region)
        if depth >= self.max_depth or not self._splits(code, depth):
            return self._finish(region, depth, code)

        quads = region.quadrants()
        return Internal(
            region=region,
            depth=depth,
            children=Children(
                ne=self._build(quads.ne, depth + 1),
                nw=self._build(quads.nw, depth + 1),
                se=self._build(quads.se, depth + 1),
                sw=self._build(quads.sw, depth + 1),
            ),
            code=code,
        )

    def _finish(self, region: Region, depth: int, code: int) -> QuadNode:
        """Terminal states: the max-depth leaf group, or a pruned branch."""
        if depth < self.max_depth:
            return Pruned(region=region, depth=depth, code=code)

        # Leaves reuse the parent's code; only the segment is re-scoped.
        quads = region.quadrants()
        leaves = [
            Leaf(region=q, depth=depth + 1, contour=lookup(code, q), code=code)
            for q in quads
        ]
        return Internal(region=region, depth=depth, children=Children(*leaves), code=code)


def build_contour_tree(
    region: Region,
    min_depth: int,
    max_depth: int,
    field: ScalarField,
    parallel: bool = False,
) -> QuadNode:
    """Build the complete contour quadtree for ``field`` over ``region``."""
    start = time.perf_counter()
    subdivider = Subdivider(field, min_depth, max_depth)
    if parallel:
        tree = subdivider.build_parallel(region)
    else:
        tree = subdivider.build(region)

    elapsed = (time.perf_counter() - start) * 1000
    stats = collect_stats(tree)
    logger.info(
        "Contour tree: %d internal, %d leaves (%d with contour), %d pruned in %.1fms",
        stats.internal,
        stats.leaves,
        stats.contours,
        stats.pruned,
        elapsed,
    )
    return tree
