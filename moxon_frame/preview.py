"""
Low-detail preview geometry: one axis-aligned box per frame feature.

Boxes use the same FrameLayout boundaries as the exported mesh. Positions
are remapped for Y-up viewers: (x, y, z) -> (x, z, -y).
"""

from dataclasses import dataclass

from .calculator import ConvertedDimensions
from .features import FeatureType
from .layout import DEFAULT_PRINT_CONFIG, PrintConfig, compute_layout

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class PreviewBox:
    position: Vec3  # centre, display axes
    size: Vec3  # extents, display axes
    feature: FeatureType


def _display_box(x0, y0, z0, x1, y1, z1, feature: FeatureType) -> PreviewBox:
    return PreviewBox(
        position=((x0 + x1) / 2, (z0 + z1) / 2, -((y0 + y1) / 2)),
        size=(abs(x1 - x0), abs(z1 - z0), abs(y1 - y0)),
        feature=feature,
    )


def build_preview_geometry(
    dims: ConvertedDimensions,
    cfg: PrintConfig = DEFAULT_PRINT_CONFIG,
) -> list[PreviewBox]:
    """Preview boxes in the same order the frame composer emits features."""
    layout = compute_layout(dims, cfg)
    half = layout.half_outer
    left, right = layout.columns
    top = cfg.total_height
    wall = cfg.wall_thickness
    boxes: list[PreviewBox] = []

    def add(x0, y0, z0, x1, y1, z1, feature):
        boxes.append(_display_box(x0, y0, z0, x1, y1, z1, feature))

    y = layout.driver_y
    add(left, y - half, 0, right, y + half, top, FeatureType.DRIVER)
    for xc in layout.columns:
        add(xc - half, y, 0, xc + half, layout.driver_tail_end, top, FeatureType.DRIVER)
    for xc in layout.columns:
        add(xc - half, layout.driver_tail_end, 0, xc + half, layout.driver_tail_end + wall, top,
            FeatureType.ENDCAP)

    y = layout.reflector_y
    add(left, y - half, 0, right, y + half, top, FeatureType.REFLECTOR)
    for xc in layout.columns:
        add(xc - half, layout.reflector_tail_end, 0, xc + half, y, top, FeatureType.REFLECTOR)
    for xc in layout.columns:
        add(xc - half, layout.reflector_tail_end - wall, 0, xc + half, layout.reflector_tail_end, top,
            FeatureType.ENDCAP)

    for xc in layout.columns:
        add(xc - wall, layout.bridge_start, 0, xc + wall, layout.bridge_end, cfg.floor_thickness,
            FeatureType.BRIDGE)

    for yc in (layout.driver_y, layout.reflector_y):
        for xc in layout.columns:
            add(xc - half, yc - half, 0, xc + half, yc + half, top, FeatureType.CORNER)

    half_boom = cfg.boom_width / 2
    add(-half_boom, layout.boom_start, 0, half_boom, layout.boom_body_end, cfg.boom_height, FeatureType.BOOM)
    add(-half_boom, layout.boom_body_end, 0, half_boom, layout.boom_tail_end, cfg.boom_height, FeatureType.BOOM)

    return boxes
