"""Per-entity SVG emitters.

Each emitter appends one element to `out` (a list of markup strings owned
by the conversion call) and returns True, or returns False when the entity
is too degenerate to draw. Coordinates are written in drawing units; the
document transform maps them onto the canvas.
"""

from dataclasses import dataclass, field
from typing import List

from _bootstrap import log
from _drawing_constants import (
    ARROW_MARKER_ID,
    DEFAULT_TEXT_HEIGHT,
    POINT_MARKER_RADIUS,
)
from _entities import (
    AngularThreePointDimension, Arc, ArcAlignedText, Circle, Ellipse, Face3D,
    Helix, Insert, Leader, Line, LwPolyline, ModelPoint, Polyline,
    RotatedDimension, Shape, Solid, Spline, Text, Trace, UnsupportedEntity,
)
from _geometry import (
    arc_endpoints,
    arc_flags,
    helix_spiral_points,
    rotation_angle_deg,
    spline_bezier_groups,
    vector_length,
)
from _svg_utils import (
    arrowhead_marker_def,
    escape_xml_text,
    fmt,
    fmt_point,
    points_attr,
)


@dataclass
class RenderState:
    """Call-local state threaded through the emitters."""
    options: object
    flip_y: bool = False
    scale: float = 1.0
    marker_emitted: bool = False
    rendered: int = 0
    skipped: List[str] = field(default_factory=list)


def resolve_color(entity, options):
    color = (entity.color_name or "").strip()
    return color if color else options.default_color


def stroke_attrs(color, options):
    return (f'stroke="{escape_xml_text(color)}" '
            f'stroke-width="{fmt(options.stroke_width)}" fill="none" '
            f'vector-effect="non-scaling-stroke"')


# -- Emitters -----------------------------------------------------------------

def _emit_line(e, attrs, state, out):
    out.append(f'<line x1="{fmt(e.start[0])}" y1="{fmt(e.start[1])}" '
               f'x2="{fmt(e.end[0])}" y2="{fmt(e.end[1])}" {attrs}/>')
    return True


def _emit_circle(e, attrs, state, out):
    out.append(f'<circle cx="{fmt(e.center[0])}" cy="{fmt(e.center[1])}" '
               f'r="{fmt(e.radius)}" {attrs}/>')
    return True


def _emit_arc(e, attrs, state, out):
    start, end = arc_endpoints(e.center, e.radius, e.start_angle, e.end_angle)
    large_arc, sweep = arc_flags(e.start_angle, e.end_angle)
    r = fmt(e.radius)
    out.append(f'<path d="M {fmt_point(start)} A {r},{r} 0 {large_arc} {sweep} '
               f'{fmt_point(end)}" {attrs}/>')
    return True


def _emit_vertices(vertices, closed, attrs, out, extra=""):
    if len(vertices) < 2:
        return False
    tag = "polygon" if closed else "polyline"
    out.append(f'<{tag} points="{points_attr(vertices)}" {attrs}{extra}/>')
    return True


def _emit_polyline(e, attrs, state, out):
    return _emit_vertices(e.vertices, e.closed, attrs, out)


def _emit_ellipse(e, attrs, state, out):
    rx = vector_length(e.major_axis)
    ry = rx * e.ratio
    angle = rotation_angle_deg(e.major_axis)
    cx, cy = fmt(e.center[0]), fmt(e.center[1])
    out.append(f'<ellipse cx="{cx}" cy="{cy}" rx="{fmt(rx)}" ry="{fmt(ry)}" '
               f'transform="rotate({fmt(angle)},{cx},{cy})" {attrs}/>')
    return True


def _emit_spline(e, attrs, state, out):
    pts = e.control_points
    if len(pts) < 2:
        return False
    d = [f"M {fmt_point(pts[0])}"]
    for p1, p2, p3 in spline_bezier_groups(pts):
        d.append(f"C {fmt_point(p1)} {fmt_point(p2)} {fmt_point(p3)}")
    out.append(f'<path d="{" ".join(d)}" {attrs}/>')
    return True


def _emit_helix(e, attrs, state, out):
    pts = helix_spiral_points(e.axis_base_point, e.radius, e.turns)
    if len(pts) < 2:
        return False
    d = [f"M {fmt_point(pts[0])}"] + [f"L {fmt_point(p)}" for p in pts[1:]]
    out.append(f'<path d="{" ".join(d)}" {attrs}/>')
    return True


def _emit_leader(e, attrs, state, out):
    if len(e.vertices) < 2:
        return False
    if not state.marker_emitted:
        # One marker per document, filled with the first leader's color.
        out.append(arrowhead_marker_def(resolve_color(e, state.options),
                                        state.scale))
        state.marker_emitted = True
    return _emit_vertices(e.vertices, False, attrs, out,
                          extra=f' marker-end="url(#{ARROW_MARKER_ID})"')


def _emit_face(e, attrs, state, out):
    return _emit_vertices(e.corners, True, attrs, out)


def _emit_solid(e, attrs, state, out):
    c = e.corners
    return _emit_vertices((c[0], c[1], c[3], c[2]), True, attrs, out)


def _text_element(location, value, height, rotation, color, state):
    x, y = location
    if state.flip_y:
        # Counter the document's Y flip so glyphs stay upright.
        y = -y
        transform = "scale(1,-1)"
        if rotation:
            transform += f" rotate({fmt(-rotation)},{fmt(x)},{fmt(y)})"
    elif rotation:
        transform = f"rotate({fmt(rotation)},{fmt(x)},{fmt(y)})"
    else:
        transform = None
    tf = f' transform="{transform}"' if transform else ""
    return (f'<text x="{fmt(x)}" y="{fmt(y)}" font-size="{fmt(height)}" '
            f'fill="{escape_xml_text(color)}"{tf}>{escape_xml_text(value)}</text>')


def _emit_text(e, attrs, state, out):
    out.append(_text_element(e.location, e.value, e.height, e.rotation,
                             resolve_color(e, state.options), state))
    return True


def _emit_arc_aligned_text(e, attrs, state, out):
    out.append(_text_element(e.center, e.text, DEFAULT_TEXT_HEIGHT, 0.0,
                             resolve_color(e, state.options), state))
    return True


def _emit_point(e, attrs, state, out):
    out.append(f'<circle cx="{fmt(e.location[0])}" cy="{fmt(e.location[1])}" '
               f'r="{fmt(POINT_MARKER_RADIUS)}" {attrs}/>')
    return True


def _use_element(name, location, rotation, sx, sy):
    transform = f"translate({fmt(location[0])},{fmt(location[1])})"
    if rotation:
        transform += f" rotate({fmt(rotation)})"
    if sx != 1.0 or sy != 1.0:
        transform += f" scale({fmt(sx)},{fmt(sy)})"
    return (f'<use xlink:href="#{escape_xml_text(name)}" '
            f'transform="{transform}"/>')


def _emit_insert(e, attrs, state, out):
    # Block definitions are not resolved; the reference is left dangling.
    out.append(_use_element(e.name, e.location, e.rotation, e.x_scale, e.y_scale))
    return True


def _emit_shape(e, attrs, state, out):
    out.append(_use_element(e.name, e.location, e.rotation, e.size, e.size))
    return True


def _emit_dimension(e, attrs, state, out):
    p2, p3 = e.definition_point_2, e.definition_point_3
    out.append(f'<line x1="{fmt(p2[0])}" y1="{fmt(p2[1])}" '
               f'x2="{fmt(p3[0])}" y2="{fmt(p3[1])}" {attrs}/>')
    label = e.text.strip()
    # "<>" asks for the measured value, which is not computed here.
    if label and label != "<>":
        mid = ((p2[0] + p3[0]) / 2, (p2[1] + p3[1]) / 2)
        out.append(_text_element(mid, label, DEFAULT_TEXT_HEIGHT, 0.0,
                                 resolve_color(e, state.options), state))
    return True


_EMITTERS = {
    Line: _emit_line,
    Circle: _emit_circle,
    Arc: _emit_arc,
    LwPolyline: _emit_polyline,
    Polyline: _emit_polyline,
    Ellipse: _emit_ellipse,
    Spline: _emit_spline,
    Helix: _emit_helix,
    Leader: _emit_leader,
    Face3D: _emit_face,
    Solid: _emit_solid,
    Trace: _emit_solid,
    Text: _emit_text,
    ArcAlignedText: _emit_arc_aligned_text,
    ModelPoint: _emit_point,
    Insert: _emit_insert,
    Shape: _emit_shape,
    RotatedDimension: _emit_dimension,
    AngularThreePointDimension: _emit_dimension,
}


def render_entity(entity, state, out):
    """Append the SVG element for one entity; never raises for unknown kinds."""
    emitter = _EMITTERS.get(type(entity))
    if emitter is None:
        kind = (entity.source_type if isinstance(entity, UnsupportedEntity)
                else entity.kind)
        log(f"Unsupported entity type: {kind} (layer {entity.layer}). "
            "Continuing without this entity...")
        state.skipped.append(kind)
        return False
    attrs = stroke_attrs(resolve_color(entity, state.options), state.options)
    if not emitter(entity, attrs, state, out):
        return False
    state.rendered += 1
    return True
