"""Pydantic request/response models for the Moxon Frame API."""

from pydantic import BaseModel, Field

from .calculator import ConvertedDimensions, DiameterUnit, Material, OutputUnit
from .features import FeatureType
from .layout import DEFAULT_PRINT_CONFIG, PrintConfig


class MoxonRequest(BaseModel):
    """Antenna parameters for the dimension calculator."""

    frequency_mhz: float = Field(
        default=869.525,
        gt=0.0,
        le=10000.0,
        description="Design frequency in MHz"
    )
    wire_diameter: float = Field(
        default=1.38,
        gt=0.0,
        description="Conductor diameter, in diameter_unit"
    )
    diameter_unit: DiameterUnit = Field(
        default=DiameterUnit.MILLIMETER,
        description="Unit of wire_diameter: in, mm, awg or wl"
    )
    is_insulated: bool = Field(
        default=False,
        description="Apply the 0.97 velocity factor for PVC insulation"
    )
    material: Material = Field(
        default=Material.COPPER,
        description="Conductor material"
    )
    output_unit: OutputUnit = Field(
        default=OutputUnit.MILLIMETER,
        description="Unit for the returned dimensions"
    )


class FrameRequest(MoxonRequest):
    """Antenna parameters plus print tolerances for the support frame."""

    tolerance: float = Field(
        default=DEFAULT_PRINT_CONFIG.tolerance,
        ge=0.0,
        le=2.0,
        description="Extra clearance around the wire in the channel in mm"
    )
    wall_thickness: float = Field(
        default=DEFAULT_PRINT_CONFIG.wall_thickness,
        ge=0.4,
        le=10.0,
        description="Channel wall thickness in mm"
    )
    floor_thickness: float = Field(
        default=DEFAULT_PRINT_CONFIG.floor_thickness,
        ge=0.4,
        le=10.0,
        description="Floor thickness under the wire in mm"
    )
    channel_height: float = Field(
        default=DEFAULT_PRINT_CONFIG.channel_height,
        ge=0.5,
        le=20.0,
        description="Wall height above the floor in mm"
    )
    boom_width: float = Field(
        default=DEFAULT_PRINT_CONFIG.boom_width,
        ge=2.0,
        le=50.0,
        description="Width of the central boom in mm"
    )
    mounting_tail_length: float = Field(
        default=DEFAULT_PRINT_CONFIG.mounting_tail_length,
        ge=0.0,
        le=200.0,
        description="Boom extension behind the reflector in mm"
    )
    mounting_hole_diameter: float = Field(
        default=DEFAULT_PRINT_CONFIG.mounting_hole_diameter,
        ge=0.0,
        le=40.0,
        description="Side of the square mounting hole in mm (0 = no hole)"
    )
    corner_chamfer: float = Field(
        default=DEFAULT_PRINT_CONFIG.corner_chamfer,
        ge=0.0,
        le=10.0,
        description="Chamfer on the corner blocks in mm"
    )

    def print_config(self, wire_diameter_mm: float) -> PrintConfig:
        """Print tolerances for a wire of the given diameter in mm."""
        return PrintConfig(
            wire_diameter_mm=wire_diameter_mm,
            tolerance=self.tolerance,
            wall_thickness=self.wall_thickness,
            floor_thickness=self.floor_thickness,
            channel_height=self.channel_height,
            boom_width=self.boom_width,
            mounting_tail_length=self.mounting_tail_length,
            mounting_hole_diameter=self.mounting_hole_diameter,
            corner_chamfer=self.corner_chamfer,
        )


class Dimensions(BaseModel):
    """Moxon dimensions in a single unit."""

    unit: OutputUnit
    a: float = Field(description="Overall width")
    b: float = Field(description="Driven element tail length")
    c: float = Field(description="Gap between tail tips")
    d: float = Field(description="Reflector tail length")
    e: float = Field(description="Overall depth (b + c + d)")
    driven_cut_length: float = Field(description="Wire to cut for the driven element")
    reflector_cut_length: float = Field(description="Wire to cut for the reflector")
    wavelength: float
    wire_diameter: float

    @classmethod
    def from_converted(cls, dims: ConvertedDimensions, unit: OutputUnit) -> "Dimensions":
        return cls(
            unit=unit,
            a=dims.a,
            b=dims.b,
            c=dims.c,
            d=dims.d,
            e=dims.e,
            driven_cut_length=dims.driven_cut_length,
            reflector_cut_length=dims.reflector_cut_length,
            wavelength=dims.wavelength,
            wire_diameter=dims.wire_diameter,
        )


class MoxonResponse(BaseModel):
    """Calculated dimensions and the correction applied."""

    dimensions: Dimensions
    velocity_factor: float
    warning: str | None = None


class FrameResponse(BaseModel):
    """Response containing generated file paths and the frame dimensions."""

    uuid: str = Field(description="Unique job identifier")
    dimensions: Dimensions = Field(description="Dimensions the frame was built from, in mm")
    triangle_count: int = Field(description="Triangles in the STL file")
    stl_url: str = Field(description="URL to download STL file")
    step_url: str = Field(description="URL to download STEP file")
    warning: str | None = None


class PreviewBoxModel(BaseModel):
    position: tuple[float, float, float]
    size: tuple[float, float, float]
    feature: FeatureType


class PreviewResponse(BaseModel):
    """Axis-aligned boxes for the interactive viewer (Y-up)."""

    dimensions: Dimensions
    boxes: list[PreviewBoxModel]
