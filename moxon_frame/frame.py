"""
Frame composer: lays out every feature of the printed Moxon support.

The frame is a bag of independently closed convex solids. Pieces touch or
overlap at the seams (corner blocks over channel ends, bridges under end
caps) and no union is performed, so coincident faces are expected in the
output. Slicers re-slice per layer and print this as one body.
"""

import logging
from dataclasses import dataclass

from .calculator import ConvertedDimensions
from .features import (
    Direction,
    FeatureType,
    Solid,
    channel_x,
    channel_y,
    corner_block,
    end_cap,
    side_bridge,
)
from .layout import DEFAULT_PRINT_CONFIG, FrameLayout, PrintConfig, compute_layout
from .primitives import Triangle, box_prism
from .stl import DEFAULT_HEADER, encode_stl

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameMesh:
    """Ordered solids of one frame; not a merged manifold."""
    solids: tuple[Solid, ...]

    @property
    def triangles(self) -> list[Triangle]:
        return [tri for solid in self.solids for tri in solid.triangles]

    def by_feature(self, feature: FeatureType) -> list[Solid]:
        return [solid for solid in self.solids if solid.feature is feature]


def _boom_tail(layout: FrameLayout, cfg: PrintConfig) -> list[Solid]:
    """Mounting tail behind the reflector, framed around the hole if any."""
    half_boom = cfg.boom_width / 2.0
    height = cfg.boom_height
    y0, y1 = layout.boom_body_end, layout.boom_tail_end

    if y1 - y0 <= 0:
        return []
    if layout.hole_side <= 0:
        return [Solid.from_prism(FeatureType.BOOM, box_prism(-half_boom, y0, 0.0, half_boom, y1, height))]

    half_hole = layout.hole_side / 2.0
    cy = layout.tail_center_y
    pieces = [
        box_prism(-half_boom, y0, 0.0, -half_hole, y1, height),
        box_prism(half_hole, y0, 0.0, half_boom, y1, height),
        box_prism(-half_hole, y0, 0.0, half_hole, cy - half_hole, height),
        box_prism(-half_hole, cy + half_hole, 0.0, half_hole, y1, height),
    ]
    return [Solid.from_prism(FeatureType.BOOM, prism) for prism in pieces]


def compose_frame(dims: ConvertedDimensions, cfg: PrintConfig = DEFAULT_PRINT_CONFIG) -> FrameMesh:
    """
    Build every solid of the frame.

    Args:
        dims: Moxon dimensions in millimetres
        cfg: Print tolerances

    Returns:
        FrameMesh with solids in a fixed order: driver bar, driver tails,
        driver end caps, reflector bar, reflector tails, reflector end caps,
        side bridges, corner blocks, boom body and mounting tail
    """
    layout = compute_layout(dims, cfg)
    left, right = layout.columns
    solids: list[Solid] = []

    # Driven element
    solids += channel_x(left, right, layout.driver_y, cfg, FeatureType.DRIVER)
    for xc in layout.columns:
        solids += channel_y(xc, layout.driver_y, layout.driver_tail_end, cfg, FeatureType.DRIVER)
    for xc in layout.columns:
        solids.append(end_cap(xc, layout.driver_tail_end, Direction.POSITIVE, cfg))

    # Reflector
    solids += channel_x(left, right, layout.reflector_y, cfg, FeatureType.REFLECTOR)
    for xc in layout.columns:
        solids += channel_y(xc, layout.reflector_tail_end, layout.reflector_y, cfg, FeatureType.REFLECTOR)
    for xc in layout.columns:
        solids.append(end_cap(xc, layout.reflector_tail_end, Direction.NEGATIVE, cfg))

    for xc in layout.columns:
        solids.append(side_bridge(xc, layout.bridge_start, layout.bridge_length, cfg))

    for yc in (layout.driver_y, layout.reflector_y):
        for xc in layout.columns:
            solids.append(corner_block(xc, yc, cfg))

    half_boom = cfg.boom_width / 2.0
    solids.append(Solid.from_prism(
        FeatureType.BOOM,
        box_prism(-half_boom, layout.boom_start, 0.0, half_boom, layout.boom_body_end, cfg.boom_height),
    ))
    solids += _boom_tail(layout, cfg)

    frame = FrameMesh(tuple(solids))
    logger.debug("Composed frame: %d solids, %d triangles", len(frame.solids), len(frame.triangles))
    return frame


def generate_frame(
    dims: ConvertedDimensions,
    cfg: PrintConfig = DEFAULT_PRINT_CONFIG,
    header: str = DEFAULT_HEADER,
) -> bytes:
    """Binary STL content for the frame."""
    return encode_stl(compose_frame(dims, cfg).triangles, header=header)
