"""Adaptive quadtree contouring engine."""

from quadcontour.engine.config import PlotConfig
from quadcontour.engine.field import (
    CallableField,
    ExpressionField,
    PlotTransform,
    ScalarField,
    get_field_registry,
    make_field,
    scalar_field,
)
from quadcontour.engine.geometry import Direction, Region, Segment
from quadcontour.engine.marching import CONTOUR_TABLE, classify, lookup
from quadcontour.engine.quadnode import (
    Internal,
    Leaf,
    Pruned,
    QuadNode,
    for_each_leaf,
    iter_leaves,
    iter_nodes,
)
from quadcontour.engine.stats import TreeStats, collect_stats
from quadcontour.engine.subdivider import ConfigurationError, Subdivider, build_contour_tree

__all__ = [
    "PlotConfig",
    "CallableField",
    "ExpressionField",
    "PlotTransform",
    "ScalarField",
    "get_field_registry",
    "make_field",
    "scalar_field",
    "Direction",
    "Region",
    "Segment",
    "CONTOUR_TABLE",
    "classify",
    "lookup",
    "Internal",
    "Leaf",
    "Pruned",
    "QuadNode",
    "for_each_leaf",
    "iter_leaves",
    "iter_nodes",
    "TreeStats",
    "collect_stats",
    "ConfigurationError",
    "Subdivider",
    "build_contour_tree",
]
