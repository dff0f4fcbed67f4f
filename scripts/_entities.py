"""Entity records consumed by the renderer.

One frozen dataclass per geometry kind. Points are (x, y) tuples; Z is
dropped by the DXF adapter. Every record carries the common header
fields `color_name` (may be empty) and `layer`.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Tuple

from _drawing_constants import DEFAULT_TEXT_HEIGHT

Point = Tuple[float, float]


@dataclass(frozen=True)
class Entity:
    kind: ClassVar[str] = "ENTITY"

    color_name: str = field(default="", kw_only=True)
    layer: str = field(default="0", kw_only=True)


# -- Curves -------------------------------------------------------------------

@dataclass(frozen=True)
class Line(Entity):
    kind: ClassVar[str] = "LINE"

    start: Point
    end: Point


@dataclass(frozen=True)
class Circle(Entity):
    kind: ClassVar[str] = "CIRCLE"

    center: Point
    radius: float


@dataclass(frozen=True)
class Arc(Entity):
    """Counter-clockwise arc; angles in degrees as stored in DXF."""
    kind: ClassVar[str] = "ARC"

    center: Point
    radius: float
    start_angle: float
    end_angle: float


@dataclass(frozen=True)
class Ellipse(Entity):
    """`major_axis` is relative to `center`; `ratio` = minor / major."""
    kind: ClassVar[str] = "ELLIPSE"

    center: Point
    major_axis: Point
    ratio: float


@dataclass(frozen=True)
class Spline(Entity):
    kind: ClassVar[str] = "SPLINE"

    control_points: Tuple[Point, ...]


@dataclass(frozen=True)
class Helix(Entity):
    kind: ClassVar[str] = "HELIX"

    axis_base_point: Point
    start_point: Point
    radius: float
    turns: float


# -- Vertex chains ------------------------------------------------------------

@dataclass(frozen=True)
class LwPolyline(Entity):
    kind: ClassVar[str] = "LWPOLYLINE"

    vertices: Tuple[Point, ...]
    closed: bool = False


@dataclass(frozen=True)
class Polyline(Entity):
    kind: ClassVar[str] = "POLYLINE"

    vertices: Tuple[Point, ...]
    closed: bool = False


@dataclass(frozen=True)
class Leader(Entity):
    kind: ClassVar[str] = "LEADER"

    vertices: Tuple[Point, ...]


# -- Four-corner faces --------------------------------------------------------

@dataclass(frozen=True)
class Face3D(Entity):
    kind: ClassVar[str] = "3DFACE"

    corners: Tuple[Point, Point, Point, Point]


@dataclass(frozen=True)
class Solid(Entity):
    """Corners in DXF order; the outline runs 0-1-3-2."""
    kind: ClassVar[str] = "SOLID"

    corners: Tuple[Point, Point, Point, Point]


@dataclass(frozen=True)
class Trace(Entity):
    kind: ClassVar[str] = "TRACE"

    corners: Tuple[Point, Point, Point, Point]


# -- Annotation / references --------------------------------------------------

@dataclass(frozen=True)
class Text(Entity):
    kind: ClassVar[str] = "TEXT"

    location: Point
    value: str
    height: float = DEFAULT_TEXT_HEIGHT
    rotation: float = 0.0


@dataclass(frozen=True)
class ArcAlignedText(Entity):
    """Text laid along an arc; drawn straight at the arc center."""
    kind: ClassVar[str] = "ARCALIGNEDTEXT"

    center: Point
    text: str


@dataclass(frozen=True)
class ModelPoint(Entity):
    kind: ClassVar[str] = "POINT"

    location: Point


@dataclass(frozen=True)
class Insert(Entity):
    kind: ClassVar[str] = "INSERT"

    name: str
    location: Point
    x_scale: float = 1.0
    y_scale: float = 1.0
    rotation: float = 0.0


@dataclass(frozen=True)
class Shape(Entity):
    kind: ClassVar[str] = "SHAPE"

    name: str
    location: Point
    size: float
    rotation: float = 0.0


@dataclass(frozen=True)
class RotatedDimension(Entity):
    kind: ClassVar[str] = "DIMENSION_ROTATED"

    definition_point_2: Point
    definition_point_3: Point
    text: str = ""


@dataclass(frozen=True)
class AngularThreePointDimension(Entity):
    kind: ClassVar[str] = "DIMENSION_ANGULAR_3P"

    definition_point_2: Point
    definition_point_3: Point
    text: str = ""


@dataclass(frozen=True)
class UnsupportedEntity(Entity):
    """Placeholder for source entities without a translation."""
    kind: ClassVar[str] = "UNSUPPORTED"

    source_type: str = ""
