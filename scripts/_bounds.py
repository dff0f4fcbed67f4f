"""Axis-aligned bounds over heterogeneous entity geometry."""

import math
from dataclasses import dataclass

from _entities import (
    Arc, ArcAlignedText, Circle, Ellipse, Face3D, Helix, Leader, Line,
    LwPolyline, ModelPoint, Polyline, Shape, Solid, Text, Trace,
)
from _geometry import arc_extreme_points, vector_length


@dataclass
class Bounds:
    """Running min/max; starts inverted (+inf, +inf, -inf, -inf)."""
    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    def update(self, x, y):
        self.min_x = min(self.min_x, x)
        self.min_y = min(self.min_y, y)
        self.max_x = max(self.max_x, x)
        self.max_y = max(self.max_y, y)

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y

    def is_degenerate(self):
        """True for empty bounds and zero-width or zero-height extents."""
        w, h = self.width, self.height
        return not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0

    def with_padding(self, padding):
        """New bounds grown by `padding` x width/height on every side."""
        dx = self.width * padding
        dy = self.height * padding
        return Bounds(self.min_x - dx, self.min_y - dy,
                      self.max_x + dx, self.max_y + dy)

    def as_tuple(self):
        return (self.min_x, self.min_y, self.max_x, self.max_y)


# -- Per-kind bounding points -------------------------------------------------

def _circle_points(center, radius):
    cx, cy = center
    return [(cx - radius, cy - radius), (cx + radius, cy + radius)]


def _ellipse_points(e):
    # Ignores rotation: fine for a viewBox, not for tangency.
    major = vector_length(e.major_axis)
    minor = major * e.ratio
    cx, cy = e.center
    return [(cx - major, cy - minor), (cx + major, cy + minor)]


def _helix_points(h):
    bx, by = h.axis_base_point
    return [h.axis_base_point, h.start_point,
            (bx - h.radius, by - h.radius), (bx + h.radius, by + h.radius)]


def _shape_points(s):
    half = s.size / 2
    x, y = s.location
    return [(x - half, y - half), (x + half, y + half)]


_BOUNDS_POINTS = {
    Line: lambda e: [e.start, e.end],
    Circle: lambda e: _circle_points(e.center, e.radius),
    Arc: lambda e: arc_extreme_points(e.center, e.radius,
                                      e.start_angle, e.end_angle),
    LwPolyline: lambda e: list(e.vertices),
    Polyline: lambda e: list(e.vertices),
    Ellipse: _ellipse_points,
    Text: lambda e: [e.location],
    ArcAlignedText: lambda e: [e.center],
    ModelPoint: lambda e: [e.location],
    Face3D: lambda e: list(e.corners),
    Solid: lambda e: list(e.corners),
    Trace: lambda e: list(e.corners),
    Leader: lambda e: list(e.vertices),
    Helix: _helix_points,
    Shape: _shape_points,
}


def entity_points(entity):
    """Points bounding an entity's visual extent; [] for kinds without one."""
    fn = _BOUNDS_POINTS.get(type(entity))
    if fn is None:
        return []
    return fn(entity)


def calculate_bounds(entities):
    """Fold every entity's bounding points into a fresh Bounds."""
    bounds = Bounds()
    for entity in entities:
        for x, y in entity_points(entity):
            bounds.update(x, y)
    return bounds
