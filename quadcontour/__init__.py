"""quadcontour — adaptive quadtree plotting of implicit curves."""

__version__ = "0.1.0"
