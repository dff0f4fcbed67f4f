#!/usr/bin/env python3
"""DXF entities → SVG document.

Pipeline: bounds over all entities → viewport (viewBox, Y-flip transform)
→ one element per entity → document wrapper. Unsupported entity types are
logged and skipped; only failing to load a drawing file is fatal.

Usage:
    python scripts/dxf_to_svg.py drawing.dxf -o drawing.svg [--config render.toml]
    python scripts/dxf_to_svg.py drawing.dxf --no-bounds --report report.json
"""
import argparse
import json
import os
import sys
from collections import Counter
from datetime import datetime, timezone

sys.path.insert(0, os.path.dirname(__file__))
from _bootstrap import log
from _bounds import calculate_bounds
from _drawing_constants import NO_BACKGROUND, SVG_NS, XLINK_NS
from _dxf_source import DrawingLoadError, load_entities
from _entity_svg import RenderState, render_entity
from _normalize import compute_viewport
from _render_config import RenderOptions, load_render_options, options_from_dict
from _svg_utils import escape_xml_text, fmt, fmt_compact

VERSION = "0.3.0"


# -- Document assembly ---------------------------------------------------------

def _open_document(viewport, options):
    """Opening tags (root, optional transform group, background)."""
    parts = [
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" '
        f'width="{fmt_compact(viewport.width)}" height="{fmt_compact(viewport.height)}" '
        f'viewBox="{viewport.view_box_attr()}">'
    ]
    closers = ["</svg>"]
    transform = viewport.transform_attr()
    if transform:
        parts.append(f'<g transform="{transform}">')
        closers.append("</g>")
    if options.background_color != NO_BACKGROUND:
        x, y, w, h = viewport.background
        parts.append(f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(w)}" '
                     f'height="{fmt(h)}" fill="{escape_xml_text(options.background_color)}"/>')
    return parts, closers


def render_document(entities, options=None):
    """Render entities and return (svg_text, RenderState)."""
    options = options or RenderOptions()
    viewport = compute_viewport(calculate_bounds(entities), options)

    out, closers = _open_document(viewport, options)
    state = RenderState(options=options, flip_y=viewport.flip_y,
                        scale=viewport.scale_x if viewport.normalized else 1.0)
    for entity in entities:
        render_entity(entity, state, out)
    out.extend(reversed(closers))
    return "".join(out), state


def dxf_to_svg(entities, options=None):
    """Convert a sequence of entity records into an SVG document string."""
    svg, _ = render_document(entities, options)
    return svg


def dxf_file_to_svg(path, options=None):
    """Load a DXF file and render its modelspace.

    Raises DrawingLoadError when the file cannot be read or parsed.
    """
    return dxf_to_svg(load_entities(path), options)


# -- CLI -----------------------------------------------------------------------

def _cli_options(args):
    options = load_render_options(args.config) if args.config else RenderOptions()
    overrides = {}
    if args.no_bounds:
        overrides["use_bounds"] = False
    if args.padding is not None:
        overrides["padding"] = args.padding
    if args.background:
        overrides["background_color"] = args.background
    if args.stroke_width is not None:
        overrides["stroke_width"] = args.stroke_width
    if args.default_color:
        overrides["default_color"] = args.default_color
    return options_from_dict(overrides, base=options)


def _build_report(args, output, entities, state):
    return {
        "meta": {
            "tool": "dxf_to_svg.py",
            "version": VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "input_dxf": args.input,
            "output_svg": output,
        },
        "counts": {
            "entities": len(entities),
            "rendered": state.rendered,
            "unsupported": len(state.skipped),
        },
        "skipped_types": dict(sorted(Counter(state.skipped).items())),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a DXF drawing to SVG")
    parser.add_argument("input", help="Input DXF file")
    parser.add_argument("-o", "--output", help="Output SVG file (default: input with .svg)")
    parser.add_argument("--config", help="Render options file (TOML or JSON)")
    parser.add_argument("--no-bounds", action="store_true",
                        help="Use the fixed 0 0 100 100 canvas instead of fitting the drawing")
    parser.add_argument("--padding", type=float, help="Bounds padding fraction (default 0.1)")
    parser.add_argument("--background", help='Background color, "none" for transparent')
    parser.add_argument("--stroke-width", type=float, help="Stroke width (default 1.0)")
    parser.add_argument("--default-color", help="Stroke color for entities without one")
    parser.add_argument("--report", help="Save JSON report to file")
    args = parser.parse_args(argv)

    output = args.output or os.path.splitext(args.input)[0] + ".svg"
    try:
        options = _cli_options(args)
        entities = load_entities(args.input)
    except (DrawingLoadError, ValueError, OSError) as e:
        log(f"ERROR: {e}")
        return 1

    print(f"Converting: {args.input}")
    svg, state = render_document(entities, options)
    with open(output, "w", encoding="utf-8") as f:
        f.write(svg)
    print(f"  rendered={state.rendered} unsupported={len(state.skipped)}")
    print(f"  Output: {output}")

    if args.report:
        with open(args.report, "w") as f:
            json.dump(_build_report(args, output, entities, state), f,
                      indent=2, ensure_ascii=False)
        print(f"  Report saved: {args.report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
