"""Antenna-specific features built from primitive prisms."""

from dataclasses import dataclass, field
from enum import Enum

from .layout import PrintConfig
from .primitives import Prism, Triangle, box_prism, chamfered_prism


class FeatureType(str, Enum):
    DRIVER = "driver"
    REFLECTOR = "reflector"
    BOOM = "boom"
    CORNER = "corner"
    BRIDGE = "bridge"
    ENDCAP = "endcap"


class Direction(str, Enum):
    """Side of the tail's open face an end cap is placed on."""
    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class Solid:
    """One independently closed convex prism of the frame."""
    feature: FeatureType
    prism: Prism
    triangles: tuple[Triangle, ...] = field(repr=False)

    @classmethod
    def from_prism(cls, feature: FeatureType, prism: Prism) -> "Solid":
        return cls(feature, prism, tuple(prism.triangles()))


def channel_x(x0: float, x1: float, yc: float, cfg: PrintConfig, feature: FeatureType) -> list[Solid]:
    """U-channel running along X from x0 to x1, centred on y = yc."""
    half = cfg.outer_width / 2.0
    wall = cfg.wall_thickness
    floor = cfg.floor_thickness
    top = cfg.total_height
    return [
        Solid.from_prism(feature, box_prism(x0, yc - half, 0.0, x1, yc + half, floor)),
        Solid.from_prism(feature, box_prism(x0, yc - half, floor, x1, yc - half + wall, top)),
        Solid.from_prism(feature, box_prism(x0, yc + half - wall, floor, x1, yc + half, top)),
    ]


def channel_y(xc: float, y0: float, y1: float, cfg: PrintConfig, feature: FeatureType) -> list[Solid]:
    """U-channel running along Y from y0 to y1, centred on x = xc."""
    half = cfg.outer_width / 2.0
    wall = cfg.wall_thickness
    floor = cfg.floor_thickness
    top = cfg.total_height
    return [
        Solid.from_prism(feature, box_prism(xc - half, y0, 0.0, xc + half, y1, floor)),
        Solid.from_prism(feature, box_prism(xc - half, y0, floor, xc - half + wall, y1, top)),
        Solid.from_prism(feature, box_prism(xc + half - wall, y0, floor, xc + half, y1, top)),
    ]


def end_cap(xc: float, y: float, direction: Direction, cfg: PrintConfig) -> Solid:
    """Wall that seals the open end of a tail channel at y."""
    half = cfg.outer_width / 2.0
    if Direction(direction) is Direction.POSITIVE:
        y0, y1 = y, y + cfg.wall_thickness
    else:
        y0, y1 = y - cfg.wall_thickness, y
    return Solid.from_prism(
        FeatureType.ENDCAP,
        box_prism(xc - half, y0, 0.0, xc + half, y1, cfg.total_height),
    )


def side_bridge(xc: float, y0: float, length: float, cfg: PrintConfig) -> Solid:
    """Floor-height strip closing the gap between the two tail tips."""
    half = cfg.wall_thickness
    return Solid.from_prism(
        FeatureType.BRIDGE,
        box_prism(xc - half, y0, 0.0, xc + half, y0 + length, cfg.floor_thickness),
    )


def corner_block(xc: float, yc: float, cfg: PrintConfig) -> Solid:
    return Solid.from_prism(
        FeatureType.CORNER,
        chamfered_prism(xc, yc, cfg.outer_width, cfg.corner_chamfer, cfg.total_height),
    )
