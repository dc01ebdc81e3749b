"""Render settings loaded from YAML."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from . import layout
from .font import Font, PrintDirection
from .renderer import FontRenderer

DIRECTION_NAMES = {
    "ltr": PrintDirection.LEFT_TO_RIGHT,
    "left_to_right": PrintDirection.LEFT_TO_RIGHT,
    "rtl": PrintDirection.RIGHT_TO_LEFT,
    "right_to_left": PrintDirection.RIGHT_TO_LEFT,
}


@dataclass
class RenderConfig:
    """Font location and optional layout/direction overrides."""

    font_path: Path | None = None
    layout: int | None = None
    direction: PrintDirection | None = None

    def renderer(self, font: Font) -> FontRenderer:
        return FontRenderer(font, self.layout, self.direction)


def parse_layout(value) -> int | None:
    """
    Accept a layout as an int, a single flag name, or a list of flag names.

    Integers are used as given so custom rule combinations stay possible.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid layout: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return layout.layout_from_names([value])
    if isinstance(value, list):
        return layout.layout_from_names(value)
    raise ValueError(f"Invalid layout: {value!r}")


def parse_direction(value) -> PrintDirection | None:
    if value is None:
        return None
    if isinstance(value, str):
        key = value.strip().lower()
        if key not in DIRECTION_NAMES:
            raise ValueError(f"Invalid direction: {value!r}")
        return DIRECTION_NAMES[key]
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return PrintDirection(value)
        except ValueError:
            raise ValueError(f"Invalid direction: {value!r}") from None
    raise ValueError(f"Invalid direction: {value!r}")


def config_from_dict(data: dict, base_dir: Path | None = None) -> RenderConfig:
    """Build a RenderConfig; a relative font path is resolved against `base_dir`."""
    font_path = data.get("font")
    if font_path is not None:
        font_path = Path(font_path)
        if base_dir is not None and not font_path.is_absolute():
            font_path = base_dir / font_path

    try:
        layout_value = parse_layout(data.get("layout"))
    except ValueError as e:
        raise ValueError(f"layout: {e}") from None
    try:
        direction = parse_direction(data.get("direction"))
    except ValueError as e:
        raise ValueError(f"direction: {e}") from None
    return RenderConfig(font_path=font_path, layout=layout_value, direction=direction)


def load_render_config(path) -> RenderConfig:
    """Load render settings from a YAML file."""
    path = Path(path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of render settings")
    return config_from_dict(data, base_dir=path.parent)
