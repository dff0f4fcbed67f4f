"""Map drawing coordinates (Y-up) onto the SVG canvas (Y-down)."""

from dataclasses import dataclass
from typing import Optional, Tuple

from _drawing_constants import CANVAS_W, DEFAULT_VIEWBOX
from _svg_utils import fmt_compact, fmt_general


@dataclass(frozen=True)
class Viewport:
    """viewBox plus the optional drawing-to-canvas transform.

    `background` is the rectangle (x, y, w, h) the background fill covers,
    expressed in the coordinates the elements are written in.
    """
    view_box: Tuple[float, float, float, float]
    background: Tuple[float, float, float, float]
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    translate_x: Optional[float] = None
    translate_y: Optional[float] = None

    @property
    def normalized(self):
        return self.scale_x is not None

    @property
    def flip_y(self):
        return self.normalized and self.scale_y < 0

    @property
    def width(self):
        return self.view_box[2]

    @property
    def height(self):
        return self.view_box[3]

    def view_box_attr(self):
        return " ".join(fmt_compact(v) for v in self.view_box)

    def transform_attr(self):
        if not self.normalized:
            return None
        return (f"scale({fmt_general(self.scale_x)},{fmt_general(self.scale_y)}) "
                f"translate({fmt_general(self.translate_x)},{fmt_general(self.translate_y)})")


def default_viewport():
    return Viewport(view_box=DEFAULT_VIEWBOX, background=DEFAULT_VIEWBOX)


def compute_viewport(bounds, options):
    """Derive the viewBox and transform from (unpadded) bounds.

    Falls back to the fixed default canvas when bounds are disabled or the
    padded extent is empty, zero-sized or non-finite.
    """
    if not options.use_bounds:
        return default_viewport()

    padded = bounds.with_padding(options.padding)
    if padded.is_degenerate():
        return default_viewport()

    width, height = padded.width, padded.height
    aspect = width / height
    scale = CANVAS_W / width
    return Viewport(
        view_box=(0.0, 0.0, CANVAS_W, CANVAS_W / aspect),
        background=(padded.min_x, padded.min_y, width, height),
        scale_x=scale,
        # Same magnitude on both axes; negative flips Y-up into Y-down.
        scale_y=-scale,
        translate_x=-padded.min_x,
        translate_y=-padded.max_y,
    )
