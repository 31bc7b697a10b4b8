import pytest

from moxon_frame.calculator import ConvertedDimensions, OutputUnit, calculate_moxon
from moxon_frame.layout import DEFAULT_PRINT_CONFIG, PrintConfig


def _make_dims(a: float, b: float, c: float, d: float) -> ConvertedDimensions:
    """Millimetre dimensions with e, cut lengths and wire filled in."""
    return ConvertedDimensions(
        a=a,
        b=b,
        c=c,
        d=d,
        e=b + c + d,
        driven_cut_length=a + 2 * b,
        reflector_cut_length=a + 2 * d,
        wavelength=1000.0,
        wire_diameter=1.38,
    )


@pytest.fixture()
def make_dims():
    return _make_dims


@pytest.fixture()
def uhf_dims() -> ConvertedDimensions:
    """869.525 MHz, 1.38 mm bare copper."""
    results = calculate_moxon(869.525, 1.38, "mm")
    assert results is not None
    return results.converted[OutputUnit.MILLIMETER]


@pytest.fixture()
def cfg() -> PrintConfig:
    return DEFAULT_PRINT_CONFIG
