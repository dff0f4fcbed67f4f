"""Shared SVG helpers used across the rendering modules."""

from _drawing_constants import (
    ARROW_MARKER_H,
    ARROW_MARKER_ID,
    ARROW_MARKER_W,
    COORD_PRECISION,
)

# Order matters: ampersand first so later entities are not re-escaped.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml_text(text):
    """Escape XML special characters.

    Not idempotent: escaping an already-escaped string escapes its '&' again.
    """
    text = str(text)
    for raw, entity in _XML_ESCAPES:
        text = text.replace(raw, entity)
    return text


def fmt(value, precision=COORD_PRECISION):
    """Fixed-precision number for coordinates (negative zero folded to zero)."""
    s = f"{value:.{precision}f}"
    if s.startswith("-") and float(s) == 0.0:
        s = s[1:]
    return s


def fmt_compact(value, precision=6):
    """Number with trailing zeros stripped, for viewBox and transforms."""
    s = fmt(value, precision)
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def fmt_general(value):
    """Significant-digit number for transform factors of any magnitude."""
    s = f"{value:.10g}"
    if s.startswith("-") and float(s) == 0.0:
        s = s[1:]
    return s


def fmt_point(pt):
    return f"{fmt(pt[0])},{fmt(pt[1])}"


def points_attr(points):
    """Space separated "x,y" pairs for polyline/polygon points."""
    return " ".join(fmt_point(p) for p in points)


def arrowhead_marker_def(color, scale=1.0):
    """<defs> block with the leader arrowhead marker.

    The marker is sized in user space, divided by the document `scale`, so
    the arrowhead stays ARROW_MARKER_W canvas units wide however far the
    drawing is zoomed. Its own viewBox keeps the polygon in marker units.
    """
    w, h = ARROW_MARKER_W, ARROW_MARKER_H
    scale = abs(scale) or 1.0
    return (f'<defs><marker id="{ARROW_MARKER_ID}" viewBox="0 0 {w} {h}" '
            f'markerWidth="{fmt_general(w / scale)}" '
            f'markerHeight="{fmt_general(h / scale)}" '
            f'refX="{w}" refY="{h / 2}" orient="auto" '
            f'markerUnits="userSpaceOnUse">'
            f'<polygon points="0 0, {w} {h / 2}, 0 {h}" '
            f'fill="{escape_xml_text(color)}"/></marker></defs>')
