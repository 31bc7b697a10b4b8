"""
Moxon rectangle dimension calculator.
Polynomial model after L.B. Cebik, W4RNL (moxgen).
"""

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Optional


class DiameterUnit(str, Enum):
    INCH = "in"
    MILLIMETER = "mm"
    AWG = "awg"
    WAVELENGTH = "wl"


class OutputUnit(str, Enum):
    WAVELENGTH = "wl"
    FOOT = "ft"
    INCH = "in"
    METER = "m"
    MILLIMETER = "mm"


class Material(str, Enum):
    COPPER = "copper"
    STAINLESS = "stainless"


# Length of one wavelength at 1 MHz
SPEED_OF_LIGHT_FT = 983.5592
SPEED_OF_LIGHT_IN = 11802.71
SPEED_OF_LIGHT_M = 299.7925
SPEED_OF_LIGHT_MM = 299792.5

# PVC-insulated wire (typical H07V-U)
INSULATED_VELOCITY_FACTOR = 0.97

MATERIAL_VELOCITY_FACTORS = {
    Material.COPPER: 1.0,
    Material.STAINLESS: 0.992,
}

# log10 of the wire diameter in wavelengths outside which the model is unreliable
MIN_LOG_DIAMETER = -6.0
MAX_LOG_DIAMETER = -2.0


@dataclass(frozen=True)
class ConvertedDimensions:
    """Moxon dimensions expressed in a single length unit."""
    a: float  # overall width, same for both elements
    b: float  # driven element tail
    c: float  # gap between tail tips
    d: float  # reflector tail
    e: float  # overall depth, b + c + d
    driven_cut_length: float
    reflector_cut_length: float
    wavelength: float
    wire_diameter: float

    def scaled(self, factor: float) -> "ConvertedDimensions":
        return replace(self, **{f.name: getattr(self, f.name) * factor for f in fields(self)})


@dataclass(frozen=True)
class MoxonResults:
    dimensions: ConvertedDimensions  # in wavelengths
    is_insulated: bool
    material: Material
    velocity_factor: float
    converted: dict[OutputUnit, ConvertedDimensions]
    warning: Optional[str] = None


def wavelength_factor(frequency_mhz: float, unit: OutputUnit) -> float:
    """Length of one wavelength at frequency_mhz in the given unit."""
    unit = OutputUnit(unit)
    if unit is OutputUnit.WAVELENGTH:
        return 1.0
    per_mhz = {
        OutputUnit.FOOT: SPEED_OF_LIGHT_FT,
        OutputUnit.INCH: SPEED_OF_LIGHT_IN,
        OutputUnit.METER: SPEED_OF_LIGHT_M,
        OutputUnit.MILLIMETER: SPEED_OF_LIGHT_MM,
    }[unit]
    return per_mhz / frequency_mhz


def awg_to_inches(gauge: float) -> float:
    return 0.005 * 92 ** ((36 - gauge) / 39)


def diameter_in_wavelengths(diameter: float, unit: DiameterUnit, frequency_mhz: float) -> float:
    unit = DiameterUnit(unit)
    if unit is DiameterUnit.WAVELENGTH:
        return diameter
    if unit is DiameterUnit.MILLIMETER:
        return diameter / (SPEED_OF_LIGHT_MM / frequency_mhz)
    if unit is DiameterUnit.AWG:
        diameter = awg_to_inches(diameter)
    return diameter / (SPEED_OF_LIGHT_IN / frequency_mhz)


def calculate_moxon(
    frequency_mhz: float,
    wire_diameter: float,
    diameter_unit: DiameterUnit = DiameterUnit.MILLIMETER,
    is_insulated: bool = False,
    material: Material = Material.COPPER,
) -> Optional[MoxonResults]:
    """
    Calculate Moxon rectangle dimensions for a frequency and wire size.

    Args:
        frequency_mhz: Design frequency in MHz
        wire_diameter: Conductor diameter, in diameter_unit
        diameter_unit: Unit of wire_diameter (inch, mm, AWG gauge or wavelengths)
        is_insulated: Apply the PVC insulation velocity factor
        material: Conductor material, stainless shortens slightly

    Returns:
        MoxonResults, or None if frequency or diameter is not positive
    """
    if frequency_mhz <= 0 or wire_diameter <= 0:
        return None

    material = Material(material)
    dw = diameter_in_wavelengths(wire_diameter, diameter_unit, frequency_mhz)
    log_d = math.log10(dw)

    warning = None
    if log_d < MIN_LOG_DIAMETER:
        warning = "Wire diameter very small for this frequency; results may be unreliable."
    elif log_d > MAX_LOG_DIAMETER:
        warning = "Wire diameter very large for this frequency; results may be unreliable."

    a = -0.0008571428571 * log_d ** 2 - 0.009571428571 * log_d + 0.3398571429
    b = -0.002142857143 * log_d ** 2 - 0.02035714286 * log_d + 0.008285714286
    c = 0.001809523381 * log_d ** 2 + 0.01780952381 * log_d + 0.05164285714
    d = 0.001 * log_d + 0.07178571429

    velocity_factor = INSULATED_VELOCITY_FACTOR if is_insulated else 1.0
    velocity_factor *= MATERIAL_VELOCITY_FACTORS[material]
    a *= velocity_factor
    b *= velocity_factor
    c *= velocity_factor
    d *= velocity_factor

    wavelengths = ConvertedDimensions(
        a=a,
        b=b,
        c=c,
        d=d,
        e=b + c + d,
        driven_cut_length=a + 2 * b,
        reflector_cut_length=a + 2 * d,
        wavelength=1.0,
        wire_diameter=dw,
    )

    converted = {
        unit: wavelengths.scaled(wavelength_factor(frequency_mhz, unit))
        for unit in OutputUnit
    }

    return MoxonResults(
        dimensions=wavelengths,
        is_insulated=is_insulated,
        material=material,
        velocity_factor=velocity_factor,
        converted=converted,
        warning=warning,
    )
