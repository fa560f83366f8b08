"""Tests for quadtree construction: termination policy, invariants and scenarios."""

from __future__ import annotations

import random

import pytest

from quadcontour.engine.field import CallableField, make_field, PlotTransform
from quadcontour.engine.geometry import Region
from quadcontour.engine.quadnode import Internal, Leaf, Pruned, iter_leaves, iter_nodes
from quadcontour.engine.stats import collect_stats
from quadcontour.engine.subdivider import ConfigurationError, Subdivider, build_contour_tree


def _overlap(a: Region, b: Region) -> float:
    w = min(a.right, b.right) - max(a.x, b.x)
    h = min(a.bottom, b.bottom) - max(a.y, b.y)
    return max(w, 0.0) * max(h, 0.0)


def _with_ancestors(node, internal_ancestors=0):
    yield node, internal_ancestors
    if isinstance(node, Internal):
        for child in node.children:
            yield from _with_ancestors(child, internal_ancestors + 1)


# ── Scenarios ──


def test_scenario_a_flat_field_single_leaf_group(plot, positive_field):
    tree = build_contour_tree(plot, 0, 0, positive_field)

    assert isinstance(tree, Internal)
    assert tree.depth == 0
    leaves = list(iter_leaves(tree))
    assert len(leaves) == 4
    assert all(isinstance(c, Leaf) for c in tree.children)
    assert {leaf.region for leaf in leaves} == set(plot.quadrants())
    assert all(leaf.contour is None for leaf in leaves)
    assert all(leaf.depth == 1 for leaf in leaves)


def test_scenario_b_vertical_line(plot, vertical_line_field):
    tree = build_contour_tree(plot, 1, 3, vertical_line_field)

    # x = 400 counts as non-positive, so the left half is uniformly 15 and
    # pruned while the right half keeps subdividing along x = 400.
    assert isinstance(tree.children.nw, Pruned)
    assert isinstance(tree.children.sw, Pruned)
    assert tree.children.nw.code == 15
    assert isinstance(tree.children.ne, Internal)
    assert isinstance(tree.children.se, Internal)

    leaves = list(iter_leaves(tree))
    assert leaves
    assert all(leaf.depth == 4 for leaf in leaves)
    assert all(leaf.region.x >= 400.0 for leaf in leaves)

    segments = [leaf.contour for leaf in leaves if leaf.contour is not None]
    assert len(segments) == 32
    for s in segments:
        assert s.x1 == s.x2
        assert 400.0 <= s.x1 <= 500.0
    assert {s.x1 for s in segments} == {425.0, 475.0}


def test_scenario_c_bad_depths_builds_nothing(plot, counting_field):
    field = counting_field(lambda x, y: x)
    with pytest.raises(ConfigurationError):
        build_contour_tree(plot, 5, 2, field)
    assert field.calls == 0


def test_configuration_error_is_value_error(positive_field):
    with pytest.raises(ValueError, match="Maximum depth"):
        Subdivider(positive_field, min_depth=3, max_depth=1)


def test_equal_depths_allowed(plot, positive_field):
    tree = build_contour_tree(plot, 2, 2, positive_field)
    stats = collect_stats(tree)
    # Forced to depth 2, then every depth-2 node becomes a leaf group
    assert stats.leaves == 4**3
    assert stats.pruned == 0


# ── Pruning and depth policy ──


def test_pruning_constant_positive(plot, positive_field):
    tree = build_contour_tree(plot, 2, 5, positive_field)

    for node in iter_nodes(tree):
        if isinstance(node, Internal):
            assert node.depth < 2
        if isinstance(node, Leaf) and node.depth > 3:
            assert node.contour is None
    stats = collect_stats(tree)
    assert stats.internal == 1 + 4
    assert stats.pruned == 16
    assert stats.leaves == 0


def test_no_pruning_above_min_depth(plot, positive_field):
    tree = build_contour_tree(plot, 3, 6, positive_field)
    for node in iter_nodes(tree):
        if isinstance(node, Pruned):
            assert node.depth >= 3


def test_pruned_root(plot, positive_field):
    tree = build_contour_tree(plot, 0, 4, positive_field)
    assert isinstance(tree, Pruned)
    assert tree.region == plot
    assert list(iter_leaves(tree)) == []


def test_max_depth_forces_leaves_even_without_crossing(plot):
    # Crossing only in the top-left cell; other depth-max cells still get leaves
    field = CallableField(lambda x, y: x + y - 100.0)
    tree = build_contour_tree(plot, 1, 1, field)
    leaves = list(iter_leaves(tree))
    assert len(leaves) == 16
    assert any(leaf.contour is None for leaf in leaves)
    assert any(leaf.contour is not None for leaf in leaves)


def test_leaf_group_reuses_parent_code(plot, circle_field):
    tree = build_contour_tree(plot, 2, 4, circle_field)
    for node in iter_nodes(tree):
        if isinstance(node, Internal) and all(isinstance(c, Leaf) for c in node.children):
            assert node.depth == 4
            assert {c.code for c in node.children} == {node.code}


@pytest.mark.parametrize("seed", range(5))
def test_depth_bound_and_ancestors(seed, counting_field):
    rng = random.Random(seed)
    min_depth = rng.randint(0, 3)
    max_depth = rng.randint(min_depth, 5)
    region = Region(rng.uniform(-100, 100), rng.uniform(-100, 100), rng.uniform(10, 500), rng.uniform(10, 500))
    cx, cy = region.center
    r = min(region.width, region.height) / 3
    field = CallableField(lambda x, y: (x - cx) ** 2 + (y - cy) ** 2 - r * r)

    tree = build_contour_tree(region, min_depth, max_depth, field)
    for node, ancestors in _with_ancestors(tree):
        assert node.depth == ancestors
        assert node.depth <= max_depth + 1
        if isinstance(node, Leaf):
            assert node.depth == max_depth + 1


# ── Structural invariants ──


@pytest.mark.parametrize("seed", range(5))
def test_tiling_invariant(seed):
    rng = random.Random(100 + seed)
    region = Region(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(1, 300), rng.uniform(1, 300))
    a, b, c = rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-20, 20)
    cx, cy = region.center
    field = CallableField(lambda x, y: a * (x - cx) + b * (y - cy) + c)

    tree = build_contour_tree(region, 1, 4, field)
    for node in iter_nodes(tree):
        if not isinstance(node, Internal):
            continue
        kids = [child.region for child in node.children]
        assert sum(k.area for k in kids) == pytest.approx(node.region.area)
        assert min(k.x for k in kids) == pytest.approx(node.region.x)
        assert min(k.y for k in kids) == pytest.approx(node.region.y)
        assert max(k.right for k in kids) == pytest.approx(node.region.right)
        assert max(k.bottom for k in kids) == pytest.approx(node.region.bottom)
        for i in range(4):
            for j in range(i + 1, 4):
                assert _overlap(kids[i], kids[j]) == pytest.approx(0.0, abs=1e-9)


def test_contours_lie_within_leaf(plot):
    field = make_field("xsinx_ycosy", PlotTransform())
    tree = build_contour_tree(plot, 3, 6, field)
    contours = 0
    for leaf in iter_leaves(tree):
        if leaf.contour is not None:
            contours += 1
            assert leaf.region.contains(*leaf.contour.start)
            assert leaf.region.contains(*leaf.contour.end)
    assert contours > 0


def test_nodes_are_discriminated(plot, circle_field):
    tree = build_contour_tree(plot, 2, 5, circle_field)
    for node in iter_nodes(tree):
        assert sum(isinstance(node, cls) for cls in (Internal, Leaf, Pruned)) == 1
        if isinstance(node, Internal):
            assert len(node.children) == 4


def test_tree_is_immutable(plot, positive_field):
    tree = build_contour_tree(plot, 0, 0, positive_field)
    with pytest.raises(AttributeError):
        tree.children.ne.contour = None


# ── Numeric anomalies ──


def test_nan_field_counts_as_non_positive(plot):
    field = CallableField(lambda x, y: float("nan"))
    tree = build_contour_tree(plot, 0, 0, field)
    leaves = list(iter_leaves(tree))
    assert {leaf.code for leaf in leaves} == {15}
    assert all(leaf.contour is None for leaf in leaves)


def test_nan_corner_creates_crossing(plot):
    # NaN only at the origin corner: reads as non-positive next to positives
    field = CallableField(lambda x, y: float("nan") if (x, y) == (0.0, 0.0) else 1.0)
    tree = build_contour_tree(plot, 0, 0, field)
    assert tree.code == 8
    assert all(leaf.contour is not None for leaf in iter_leaves(tree))


def test_infinite_values(plot):
    tree = build_contour_tree(plot, 0, 3, CallableField(lambda x, y: float("inf")))
    assert isinstance(tree, Pruned) and tree.code == 0
    tree = build_contour_tree(plot, 0, 3, CallableField(lambda x, y: float("-inf")))
    assert isinstance(tree, Pruned) and tree.code == 15


# ── Parallel construction ──


def test_parallel_matches_sequential(plot, circle_field):
    sequential = build_contour_tree(plot, 2, 5, circle_field)
    parallel = build_contour_tree(plot, 2, 5, circle_field, parallel=True)
    assert parallel == sequential


def test_parallel_terminal_root(plot, positive_field):
    sub = Subdivider(positive_field, 0, 0)
    assert sub.build_parallel(plot) == sub.build(plot)


def test_parallel_rejects_bad_depths(plot, positive_field):
    sub = Subdivider(positive_field, 0, 2)
    sub.max_depth = -1
    with pytest.raises(ConfigurationError):
        sub.build_parallel(plot)
