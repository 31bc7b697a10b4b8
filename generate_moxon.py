"""
Moxon Frame Generator
- Calculates Moxon rectangle dimensions for a frequency and wire size.
- Builds a printable support frame with U-channels sized for the wire.
- Automatically creates and uses an 'outputs' directory for generated files.
"""

import os

from moxon_frame.calculator import DiameterUnit, Material, OutputUnit, calculate_moxon
from moxon_frame.frame import compose_frame
from moxon_frame.geometry import build_frame_solid, export_step, export_stl
from moxon_frame.layout import PrintConfig
from moxon_frame.stl import encode_stl, stl_filename

# ==========================================
# CONFIGURATION / VARIABLES SECTION
# Adjust these parameters to customize the antenna and its frame.
# Defaults are set for an 869.525 MHz Moxon made from 1.38 mm bare copper wire.
# ==========================================

# Design frequency in MHz.
FREQUENCY_MHZ    = 869.525
# Conductor diameter, in DIAMETER_UNIT ("in", "mm", "awg" or "wl").
WIRE_DIAM        = 1.38
DIAMETER_UNIT    = DiameterUnit.MILLIMETER
# PVC insulation shortens the elements (velocity factor 0.97).
INSULATED        = False
# Conductor material ("copper" or "stainless").
MATERIAL         = Material.COPPER
# Extra clearance around the wire in the channel (mm).
TOLERANCE        = 0.4
# Channel wall thickness on each side of the wire (mm).
WALL_THICKNESS   = 2.0
# Floor under the wire (mm).
FLOOR_THICKNESS  = 2.0
# Wall height above the floor (mm).
CHANNEL_HEIGHT   = 3.5
# Width of the boom joining driver and reflector (mm).
BOOM_WIDTH       = 10.0
# Boom extension behind the reflector for mounting hardware (mm).
MOUNT_TAIL       = 35.0
# Side of the square mounting hole in the tail (set to 0 to disable).
MOUNT_HOLE       = 4.0
# Chamfer on the four corner blocks (set to 0 for square blocks).
CORNER_CHAMFER   = 1.5
# Also write a STEP file of the frame.
EXPORT_STEP      = True
# Directory for generated files (will be created if it doesn't exist).
OUTPUT_DIR       = "outputs"
# ==========================================


def build_moxon_frame():
    results = calculate_moxon(
        FREQUENCY_MHZ, WIRE_DIAM, DIAMETER_UNIT,
        is_insulated=INSULATED, material=MATERIAL,
    )
    if results is None:
        raise SystemExit("FREQUENCY_MHZ and WIRE_DIAM must be positive.")

    if results.warning:
        print(f"⚠️ Warning: {results.warning}")

    dims = results.converted[OutputUnit.MILLIMETER]
    cfg = PrintConfig(
        wire_diameter_mm=dims.wire_diameter,
        tolerance=TOLERANCE,
        wall_thickness=WALL_THICKNESS,
        floor_thickness=FLOOR_THICKNESS,
        channel_height=CHANNEL_HEIGHT,
        boom_width=BOOM_WIDTH,
        mounting_tail_length=MOUNT_TAIL,
        mounting_hole_diameter=MOUNT_HOLE,
        corner_chamfer=CORNER_CHAMFER,
    )
    return compose_frame(dims, cfg), dims


# ── Execution and Export ─────────────────────────────────────
if __name__ == "__main__":
    frame, dims = build_moxon_frame()

    script_dir = os.path.dirname(__file__)
    abs_output_dir = os.path.join(script_dir, OUTPUT_DIR)

    if not os.path.exists(abs_output_dir):
        os.makedirs(abs_output_dir)
        print(f"📁 Created directory: {abs_output_dir}")

    export_name = stl_filename(FREQUENCY_MHZ)
    output_path = os.path.join(abs_output_dir, export_name)
    triangles = frame.triangles
    export_stl(encode_stl(triangles, header=f"Binary STL - Moxon frame {FREQUENCY_MHZ:g} MHz"), output_path)

    if EXPORT_STEP:
        step_path = output_path[:-len(".stl")] + ".step"
        export_step(build_frame_solid(frame), step_path)

    print("=" * 45)
    print(f"✅ Success! File saved to: {os.path.join(OUTPUT_DIR, export_name)}")
    print(f"   Width A         : {dims.a:.2f} mm")
    print(f"   Depth E         : {dims.e:.2f} mm")
    print(f"   Driven cut      : {dims.driven_cut_length:.2f} mm")
    print(f"   Reflector cut   : {dims.reflector_cut_length:.2f} mm")
    print(f"   Triangles       : {len(triangles)}")
    print("=" * 45)
