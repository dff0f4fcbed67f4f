"""Render options and their loaders (TOML or JSON files, plain dicts)."""

import json
import os
from dataclasses import dataclass, fields, replace

from _drawing_constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_COLOR,
    DEFAULT_PADDING,
    DEFAULT_STROKE_WIDTH,
)


@dataclass(frozen=True)
class RenderOptions:
    use_bounds: bool = True
    padding: float = DEFAULT_PADDING
    background_color: str = DEFAULT_BACKGROUND
    stroke_width: float = DEFAULT_STROKE_WIDTH
    default_color: str = DEFAULT_COLOR


_OPTION_NAMES = frozenset(f.name for f in fields(RenderOptions))


def _as_bool(name, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _as_non_negative(name, value):
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if number < 0:
        raise ValueError(f"{name} must be >= 0, got {number}")
    return number


def _as_color(name, value):
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string, got {value!r}")
    return value.strip()


_COERCE = {
    "use_bounds": _as_bool,
    "padding": _as_non_negative,
    "stroke_width": _as_non_negative,
    "background_color": _as_color,
    "default_color": _as_color,
}


def options_from_dict(data, base=None):
    """Build RenderOptions from a mapping, validating every key.

    Keys missing from `data` keep their value from `base` (or the defaults).
    """
    unknown = sorted(set(data) - _OPTION_NAMES)
    if unknown:
        raise ValueError(f"Unknown render option(s): {', '.join(unknown)}")
    values = {k: _COERCE[k](k, v) for k, v in data.items()}
    return replace(base or RenderOptions(), **values)


def load_render_options(path):
    """Load options from a TOML or JSON file; uses its [render] table if present."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.endswith(".toml"):
        import tomllib
        with open(path, "rb") as f:
            data = tomllib.load(f)
    else:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    return options_from_dict(data.get("render", data))
