"""Command-line plotter — builds one contour tree and renders it.

    quadcontour --field circle --min-depth 4 --max-depth 8 -o circle.png
    quadcontour --field heart --max-depth 6          # ASCII grid to stdout
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from quadcontour.config import settings
from quadcontour.engine.config import PlotConfig
from quadcontour.engine.field import PlotTransform, get_field_registry, make_field
from quadcontour.engine.fields import register_builtin_fields
from quadcontour.engine.geometry import Region
from quadcontour.engine.stats import collect_stats
from quadcontour.engine.subdivider import ConfigurationError, build_contour_tree
from quadcontour.render.ascii import render_ascii
from quadcontour.render.raster import RenderMode, render_png

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Adaptive quadtree plot of an implicit curve f(x, y) = 0")
    parser.add_argument("--field", default=settings.default_field, help="Registered field ID")
    parser.add_argument("--min-depth", type=int, default=settings.min_depth, help="Depth above which nothing is pruned")
    parser.add_argument("--max-depth", type=int, default=settings.max_depth, help="Depth at which leaves are forced")
    parser.add_argument("--width", type=float, default=settings.plot_width, help="Plot area width")
    parser.add_argument("--height", type=float, default=settings.plot_height, help="Plot area height")
    parser.add_argument("--step", type=float, default=settings.step_x, help="World units per field unit")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in RenderMode],
        default=RenderMode.CELLS.value,
        help="What to draw into the PNG",
    )
    parser.add_argument("--resolution", type=int, default=64, help="ASCII grid size")
    parser.add_argument("-o", "--output", help="PNG output path (ASCII to stdout if omitted)")
    parser.add_argument("--parallel", action="store_true", help="Build root subtrees concurrently")
    parser.add_argument("--list-fields", action="store_true", help="List registered fields and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.quadcontour_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    register_builtin_fields()
    registry = get_field_registry()

    if args.list_fields:
        for spec in registry.all():
            print(f"{spec.id:<14} {spec.description}")
        return 0

    if args.field not in registry:
        print(f"Unknown field: {args.field} (try --list-fields)", file=sys.stderr)
        return 2

    config = PlotConfig(
        width=args.width,
        height=args.height,
        step_x=args.step,
        step_y=args.step,
        min_depth=args.min_depth,
        max_depth=args.max_depth,
    )
    plot = Region(0.0, 0.0, config.width, config.height)
    field = make_field(args.field, PlotTransform.from_config(config))

    try:
        tree = build_contour_tree(plot, config.min_depth, config.max_depth, field, parallel=args.parallel)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.output:
        out = Path(args.output)
        out.write_bytes(render_png(tree, plot, mode=RenderMode(args.mode), origin=config.origin))
        stats = collect_stats(tree)
        print(f"Saved: {out} ({stats.contours} contour cells, {stats.leaves} leaves)")
    else:
        print(render_ascii(tree, plot, resolution=args.resolution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
