"""
Print parameters and the shared placement arithmetic for the frame.

Model space: X = overall width (A), Y = depth (E), Z = print height.
Both the exported mesh and the preview boxes read their boundaries from
FrameLayout, so the two views always agree.
"""

from dataclasses import dataclass, fields, replace

from .calculator import ConvertedDimensions

MIN_BRIDGE_LENGTH = 0.1
# Material left on each side of the mounting hole when it is clamped.
MIN_HOLE_WEB = 0.01


@dataclass(frozen=True)
class PrintConfig:
    """Print tolerances for the frame, all in mm."""
    wire_diameter_mm: float = 1.38
    tolerance: float = 0.4  # clearance around the wire in the slot
    wall_thickness: float = 2.0
    floor_thickness: float = 2.0
    channel_height: float = 3.5  # wall height above the floor
    boom_width: float = 10.0
    mounting_tail_length: float = 35.0
    mounting_hole_diameter: float = 4.0  # square hole side, 0 = no hole
    corner_chamfer: float = 1.5
    boom_raise: float = 1.5  # boom height above the channel floor

    @property
    def slot_width(self) -> float:
        return self.wire_diameter_mm + self.tolerance

    @property
    def outer_width(self) -> float:
        return self.slot_width + 2 * self.wall_thickness

    @property
    def total_height(self) -> float:
        return self.floor_thickness + self.channel_height

    @property
    def boom_height(self) -> float:
        return self.floor_thickness + self.boom_raise

    def scaled(self, factor: float) -> "PrintConfig":
        return replace(self, **{f.name: getattr(self, f.name) * factor for f in fields(self)})


DEFAULT_PRINT_CONFIG = PrintConfig()


@dataclass(frozen=True)
class FrameLayout:
    """Feature boundary coordinates for one frame."""
    half_a: float
    driver_y: float
    reflector_y: float
    driver_tail_end: float
    reflector_tail_end: float
    half_outer: float
    bridge_start: float
    bridge_length: float
    boom_start: float
    boom_body_end: float
    boom_tail_end: float
    hole_side: float

    @property
    def bridge_end(self) -> float:
        return self.bridge_start + self.bridge_length

    @property
    def tail_center_y(self) -> float:
        return (self.boom_body_end + self.boom_tail_end) / 2.0

    @property
    def columns(self) -> tuple[float, float]:
        """X positions of the left and right tails."""
        return (-self.half_a, self.half_a)


def compute_layout(dims: ConvertedDimensions, cfg: PrintConfig) -> FrameLayout:
    """
    Place every frame feature for the given millimetre dimensions.

    The bridge length equals e - b - d - 2 * wall_thickness, floored at
    MIN_BRIDGE_LENGTH. The mounting hole is clamped so the boom tail keeps a
    web on every side; a clamped side of zero or less means no hole.
    """
    half_a = dims.a / 2.0
    driver_y = -dims.e / 2.0
    reflector_y = dims.e / 2.0
    half_outer = cfg.outer_width / 2.0

    driver_tail_end = driver_y + dims.b
    reflector_tail_end = reflector_y - dims.d

    bridge_start = driver_tail_end + cfg.wall_thickness
    bridge_end = reflector_tail_end - cfg.wall_thickness
    bridge_length = max(MIN_BRIDGE_LENGTH, bridge_end - bridge_start)

    boom_start = driver_y - half_outer
    boom_body_end = reflector_y + half_outer
    boom_tail_end = boom_body_end + cfg.mounting_tail_length

    hole_side = 0.0
    if cfg.mounting_hole_diameter > 0:
        largest = min(cfg.boom_width, cfg.mounting_tail_length) - 2 * MIN_HOLE_WEB
        hole_side = max(0.0, min(cfg.mounting_hole_diameter, largest))

    return FrameLayout(
        half_a=half_a,
        driver_y=driver_y,
        reflector_y=reflector_y,
        driver_tail_end=driver_tail_end,
        reflector_tail_end=reflector_tail_end,
        half_outer=half_outer,
        bridge_start=bridge_start,
        bridge_length=bridge_length,
        boom_start=boom_start,
        boom_body_end=boom_body_end,
        boom_tail_end=boom_tail_end,
        hole_side=hole_side,
    )
