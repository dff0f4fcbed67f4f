"""Pure geometry helpers shared by bounds calculation and SVG emission.

Angles are radians unless a name says otherwise.
"""

import math

import numpy as np

from _drawing_constants import HELIX_SEGMENTS_PER_TURN

TAU = 2 * math.pi

# Axis-aligned extremes of a circle, checked against an arc's span
QUADRANT_ANGLES = (0.0, math.pi / 2, math.pi, 3 * math.pi / 2)


def normalize_angle(angle):
    """Map an angle into [0, 2*pi)."""
    a = angle % TAU
    return 0.0 if a == TAU else a


def is_angle_in_arc(angle, start, end):
    """True if `angle` lies on the counter-clockwise arc from `start` to `end`.

    Arcs crossing the 0/2*pi boundary (start > end after normalization)
    are unwrapped by shifting `end`, and `angle` when it sits below `start`.
    """
    angle = normalize_angle(angle)
    start = normalize_angle(start)
    end = normalize_angle(end)
    if start > end:
        end += TAU
        if angle < start:
            angle += TAU
    return start <= angle <= end


def vector_length(vec):
    return math.hypot(vec[0], vec[1])


def rotation_angle_deg(vec):
    """Direction of a 2D vector in degrees, measured from +X."""
    return math.degrees(math.atan2(vec[1], vec[0]))


def point_on_circle(center, radius, angle):
    return (center[0] + radius * math.cos(angle),
            center[1] + radius * math.sin(angle))


def arc_endpoints(center, radius, start_deg, end_deg):
    """Start and end points of an arc given in degrees."""
    sa, ea = math.radians(start_deg), math.radians(end_deg)
    return point_on_circle(center, radius, sa), point_on_circle(center, radius, ea)


def arc_flags(start_deg, end_deg):
    """(large_arc, sweep) flags for an SVG elliptical-arc command."""
    sa, ea = math.radians(start_deg), math.radians(end_deg)
    large_arc = 1 if abs(ea - sa) % TAU > math.pi else 0
    sweep = 1 if ea > sa else 0
    return large_arc, sweep


def arc_extreme_points(center, radius, start_deg, end_deg):
    """Endpoints plus every quadrant point the arc passes through."""
    start_pt, end_pt = arc_endpoints(center, radius, start_deg, end_deg)
    pts = [start_pt, end_pt]
    sa, ea = math.radians(start_deg), math.radians(end_deg)
    for q in QUADRANT_ANGLES:
        if is_angle_in_arc(q, sa, ea):
            pts.append(point_on_circle(center, radius, q))
    return pts


def spline_bezier_groups(control_points):
    """Split control points after the first into cubic Bezier triples.

    Groups start at index 1 and step by 3; a trailing remainder of fewer
    than three points is dropped. Control points are used as-is, there is
    no NURBS evaluation.
    """
    groups = []
    i = 1
    while len(control_points) - i >= 3:
        groups.append(tuple(control_points[i:i + 3]))
        i += 3
    return groups


def helix_spiral_points(base, radius, turns, segments=HELIX_SEGMENTS_PER_TURN):
    """Flat spiral approximating a helix seen along its axis.

    `turns * segments` samples; sample i sits at angle i*2*pi/segments with
    a radius growing linearly from 0 towards `radius`. Z is ignored.
    """
    total = int(turns * segments)
    if total <= 0:
        return []
    idx = np.arange(total, dtype=float)
    angles = idx * (TAU / segments)
    radii = radius * idx / total
    xs = base[0] + radii * np.cos(angles)
    ys = base[1] + radii * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]
