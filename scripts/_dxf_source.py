"""ezdxf adapter: read a DXF modelspace into renderer entity records.

Only the common header (layer, color name) and each type's geometry are
read; Z coordinates are dropped.
"""

import ezdxf

from _bootstrap import log
from _drawing_constants import DEFAULT_TEXT_HEIGHT
from _entities import (
    AngularThreePointDimension, Arc, ArcAlignedText, Circle, Ellipse, Face3D,
    Helix, Insert, Leader, Line, LwPolyline, ModelPoint, Polyline,
    RotatedDimension, Shape, Solid, Spline, Text, Trace, UnsupportedEntity,
)

# DIMENSION dimtype codes (group 70, low bits)
DIMTYPE_ROTATED = 0
DIMTYPE_ANGULAR_3P = 5


class DrawingLoadError(RuntimeError):
    """Raised when a drawing file cannot be read or parsed."""


def _xy(v):
    return (float(v[0]), float(v[1]))


def _common(e):
    dxf = e.dxf
    color_name = ""
    if dxf.is_supported("color_name"):
        color_name = dxf.get("color_name", "") or ""
    return {"color_name": color_name, "layer": dxf.get("layer", "0")}


def _corners(e):
    dxf = e.dxf
    vtx2 = dxf.get("vtx2", dxf.vtx1)
    return (_xy(dxf.vtx0), _xy(dxf.vtx1), _xy(vtx2), _xy(dxf.get("vtx3", vtx2)))


def _line(e, common):
    return Line(_xy(e.dxf.start), _xy(e.dxf.end), **common)


def _circle(e, common):
    return Circle(_xy(e.dxf.center), e.dxf.radius, **common)


def _arc(e, common):
    dxf = e.dxf
    return Arc(_xy(dxf.center), dxf.radius, dxf.start_angle, dxf.end_angle, **common)


def _lwpolyline(e, common):
    vertices = tuple(_xy(p) for p in e.get_points("xy"))
    return LwPolyline(vertices, closed=bool(e.closed), **common)


def _polyline(e, common):
    vertices = tuple(_xy(p) for p in e.points())
    return Polyline(vertices, closed=bool(e.is_closed), **common)


def _ellipse(e, common):
    dxf = e.dxf
    return Ellipse(_xy(dxf.center), _xy(dxf.major_axis), dxf.ratio, **common)


def _spline(e, common):
    pts = tuple(_xy(p) for p in e.control_points)
    return Spline(pts, **common)


def _helix(e, common):
    dxf = e.dxf
    return Helix(_xy(dxf.axis_base_point), _xy(dxf.start_point),
                 dxf.radius, dxf.turns, **common)


def _text(e, common):
    dxf = e.dxf
    return Text(_xy(dxf.insert), dxf.get("text", ""),
                height=dxf.get("height", DEFAULT_TEXT_HEIGHT),
                rotation=dxf.get("rotation", 0.0), **common)


def _mtext(e, common):
    dxf = e.dxf
    return Text(_xy(dxf.insert), e.plain_text(),
                height=dxf.get("char_height", DEFAULT_TEXT_HEIGHT),
                rotation=dxf.get("rotation", 0.0), **common)


def _point(e, common):
    return ModelPoint(_xy(e.dxf.location), **common)


def _insert(e, common):
    dxf = e.dxf
    return Insert(dxf.name, _xy(dxf.insert),
                  x_scale=dxf.get("xscale", 1.0), y_scale=dxf.get("yscale", 1.0),
                  rotation=dxf.get("rotation", 0.0), **common)


def _shape(e, common):
    dxf = e.dxf
    return Shape(dxf.get("name", ""), _xy(dxf.insert), dxf.get("size", 1.0),
                 rotation=dxf.get("rotation", 0.0), **common)


def _leader(e, common):
    return Leader(tuple(_xy(v) for v in e.vertices), **common)


def _dimension(e, common):
    dxf = e.dxf
    dimtype = e.dimtype
    if dimtype == DIMTYPE_ROTATED:
        cls = RotatedDimension
    elif dimtype == DIMTYPE_ANGULAR_3P:
        cls = AngularThreePointDimension
    else:
        return UnsupportedEntity(source_type=f"DIMENSION({dimtype})", **common)
    return cls(_xy(dxf.get("defpoint2", (0, 0))), _xy(dxf.get("defpoint3", (0, 0))),
               text=dxf.get("text", ""), **common)


def _tag_values(e):
    """Group code -> first value over every subclass of a tag-storage entity."""
    values = {}
    for subclass in e.xtags.subclasses:
        for tag in subclass:
            values.setdefault(tag.code, tag.value)
    return values


def _arc_aligned_text(e, common):
    # ezdxf keeps ARCALIGNEDTEXT as raw tags: 10 = arc center, 1 = text.
    tags = _tag_values(e)
    center = tags.get(10, (0.0, 0.0))
    if not hasattr(center, "__len__"):
        center = (center, tags.get(20, 0.0))
    return ArcAlignedText(_xy(center), str(tags.get(1, "")), **common)


_CONVERTERS = {
    "LINE": _line,
    "CIRCLE": _circle,
    "ARC": _arc,
    "LWPOLYLINE": _lwpolyline,
    "POLYLINE": _polyline,
    "ELLIPSE": _ellipse,
    "SPLINE": _spline,
    "HELIX": _helix,
    "TEXT": _text,
    "MTEXT": _mtext,
    "ARCALIGNEDTEXT": _arc_aligned_text,
    "POINT": _point,
    "INSERT": _insert,
    "SHAPE": _shape,
    "LEADER": _leader,
    "DIMENSION": _dimension,
    "3DFACE": lambda e, common: Face3D(_corners(e), **common),
    "SOLID": lambda e, common: Solid(_corners(e), **common),
    "TRACE": lambda e, common: Trace(_corners(e), **common),
}


def from_ezdxf(entity):
    """Convert one ezdxf graphic entity; unknown types become UnsupportedEntity."""
    common = _common(entity)
    dxftype = entity.dxftype()
    converter = _CONVERTERS.get(dxftype)
    if converter is None:
        return UnsupportedEntity(source_type=dxftype, **common)
    return converter(entity, common)


def load_entities(path):
    """Read a DXF file and return its modelspace entities in file order.

    Any read or structure error is raised as DrawingLoadError.
    """
    try:
        doc = ezdxf.readfile(path)
    except (IOError, ezdxf.DXFStructureError) as e:
        raise DrawingLoadError(f"Cannot load drawing {path}: {e}") from e
    entities = [from_ezdxf(e) for e in doc.modelspace()]
    log(f"Loaded {len(entities)} entities from {path} (DXF {doc.dxfversion})")
    return entities
