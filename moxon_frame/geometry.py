"""
CadQuery solids for the Moxon frame.
Rebuilds the composer's prisms as B-rep extrusions for STEP export.
"""

import cadquery as cq
from pathlib import Path

from .frame import FrameMesh
from .primitives import Prism


def _extrude_prism(prism: Prism) -> cq.Shape:
    """Extrude a prism's boundary polygon on a workplane at its base height."""
    return (
        cq.Workplane("XY", origin=(0, 0, prism.z0))
        .polyline(list(prism.points))
        .close()
        .extrude(prism.z1 - prism.z0)
        .val()
    )


def build_frame_solid(frame: FrameMesh) -> cq.Compound:
    """
    Collect every frame solid into one compound.

    The solids are not fused: like the STL, the STEP file carries the
    frame as a set of overlapping closed bodies.

    Args:
        frame: Composed frame

    Returns:
        Compound with one CadQuery solid per frame solid
    """
    return cq.Compound.makeCompound([_extrude_prism(solid.prism) for solid in frame.solids])


def export_step(result: cq.Shape, output_path: Path) -> None:
    """Export CadQuery result to STEP format."""
    cq.exporters.export(result, str(output_path), exportType="STEP")


def export_stl(data: bytes, output_path: Path) -> None:
    """Write encoded binary STL content to disk."""
    Path(output_path).write_bytes(data)
