"""Tests for tree summary statistics."""

from quadcontour.engine.stats import collect_stats
from quadcontour.engine.subdivider import build_contour_tree


def test_stats_vertical_line(plot, vertical_line_field):
    stats = collect_stats(build_contour_tree(plot, 1, 3, vertical_line_field))
    assert stats.leaves == 64
    assert stats.contours == 32
    assert len(stats.segments) == 32
    assert stats.max_depth == 4
    assert stats.leaf_depths == {4: 64}
    assert stats.nodes == stats.internal + stats.leaves + stats.pruned


def test_stats_flat_field(plot, positive_field):
    stats = collect_stats(build_contour_tree(plot, 0, 0, positive_field))
    assert stats.internal == 1
    assert stats.leaves == 4
    assert stats.contours == 0
    assert stats.pruned == 0
