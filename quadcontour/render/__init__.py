"""Renderers — read-only consumers of a finished contour tree."""

from quadcontour.render.ascii import render_ascii
from quadcontour.render.raster import RenderMode, render_png
from quadcontour.render.screen import ScreenTransform

__all__ = ["render_ascii", "RenderMode", "render_png", "ScreenTransform"]
