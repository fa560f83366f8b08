"""POST /api/contour — build a contour tree and return it as leaves, PNG or text."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse, Response

from quadcontour.config import Settings
from quadcontour.dependencies import get_registry, get_settings
from quadcontour.engine.config import PlotConfig
from quadcontour.engine.field import FieldRegistry, PlotTransform, make_field
from quadcontour.engine.geometry import Region
from quadcontour.engine.quadnode import Leaf, QuadNode, iter_leaves
from quadcontour.engine.stats import collect_stats
from quadcontour.engine.subdivider import ConfigurationError, build_contour_tree
from quadcontour.models.requests import AsciiRequest, ContourRequest, RenderRequest
from quadcontour.models.responses import (
    ContourResponse,
    LeafModel,
    RegionModel,
    SegmentModel,
    TreeStatsModel,
)
from quadcontour.render.ascii import render_ascii
from quadcontour.render.raster import render_png

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contour")


def _build(req: ContourRequest, registry: FieldRegistry, settings: Settings) -> tuple[QuadNode, Region, PlotConfig]:
    """Shared request → tree step. Maps engine errors onto HTTP errors."""
    if req.max_depth > settings.max_allowed_depth:
        raise HTTPException(
            status_code=422,
            detail=f"max_depth {req.max_depth} exceeds limit {settings.max_allowed_depth}",
        )
    if req.min_depth > settings.max_allowed_min_depth:
        raise HTTPException(
            status_code=422,
            detail=f"min_depth {req.min_depth} exceeds limit {settings.max_allowed_min_depth}",
        )
    if req.field not in registry:
        raise HTTPException(status_code=404, detail=f"Unknown field: {req.field}")

    config = PlotConfig(
        width=req.width,
        height=req.height,
        step_x=req.step_x,
        step_y=req.step_y,
        min_depth=req.min_depth,
        max_depth=req.max_depth,
    )
    plot = Region(0.0, 0.0, config.width, config.height)
    field = make_field(req.field, PlotTransform.from_config(config), registry=registry)

    try:
        tree = build_contour_tree(plot, config.min_depth, config.max_depth, field, parallel=req.parallel)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return tree, plot, config


def _leaf_model(leaf: Leaf) -> LeafModel:
    r = leaf.region
    contour = None
    if leaf.contour is not None:
        s = leaf.contour
        contour = SegmentModel(x1=s.x1, y1=s.y1, x2=s.x2, y2=s.y2)
    return LeafModel(
        region=RegionModel(x=r.x, y=r.y, width=r.width, height=r.height),
        depth=leaf.depth,
        code=leaf.code,
        contour=contour,
    )


@router.post("", response_model=ContourResponse)
def contour(
    req: ContourRequest,
    registry: FieldRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> ContourResponse:
    start = time.perf_counter()
    tree, _, _ = _build(req, registry, settings)
    stats = collect_stats(tree)
    elapsed = (time.perf_counter() - start) * 1000

    return ContourResponse(
        field=req.field,
        leaves=[_leaf_model(leaf) for leaf in iter_leaves(tree)],
        stats=TreeStatsModel(
            internal=stats.internal,
            leaves=stats.leaves,
            pruned=stats.pruned,
            contours=stats.contours,
            max_depth=stats.max_depth,
            leaf_depths=stats.leaf_depths,
        ),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/png")
def contour_png(
    req: RenderRequest,
    registry: FieldRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> Response:
    tree, plot, config = _build(req, registry, settings)
    png = render_png(tree, plot, mode=req.mode, origin=config.origin)
    return Response(content=png, media_type="image/png")


@router.post("/ascii", response_class=PlainTextResponse)
def contour_ascii(
    req: AsciiRequest,
    registry: FieldRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> str:
    tree, plot, _ = _build(req, registry, settings)
    return render_ascii(tree, plot, resolution=req.resolution)
