"""Binary STL encoding for triangle lists."""

import struct
from typing import Iterable

from .primitives import Triangle

HEADER_SIZE = 80
COUNT_FORMAT = struct.Struct("<I")
# normal, three vertices, attribute byte count
RECORD_FORMAT = struct.Struct("<12fH")

DEFAULT_HEADER = "Binary STL - Moxon antenna frame"


def _header_bytes(header: str) -> bytes:
    raw = header.encode("ascii", errors="replace")
    # Readers treat files starting with "solid" as ASCII STL
    if raw[:5].lower() == b"solid":
        raw = b"Binary " + raw
    return raw[:HEADER_SIZE].ljust(HEADER_SIZE, b"\0")


def encoded_size(triangle_count: int) -> int:
    return HEADER_SIZE + COUNT_FORMAT.size + RECORD_FORMAT.size * triangle_count


def encode_stl(triangles: Iterable[Triangle], header: str = DEFAULT_HEADER) -> bytes:
    """
    Serialize triangles into binary STL.

    Layout (little-endian): 80-byte zero padded header, uint32 triangle
    count, then 50 bytes per triangle: normal (3 x float32), vertices
    (9 x float32) and a uint16 attribute field fixed at 0.
    """
    triangles = list(triangles)
    buffer = bytearray(encoded_size(len(triangles)))
    buffer[:HEADER_SIZE] = _header_bytes(header)
    COUNT_FORMAT.pack_into(buffer, HEADER_SIZE, len(triangles))

    offset = HEADER_SIZE + COUNT_FORMAT.size
    for tri in triangles:
        v0, v1, v2 = tri.vertices
        RECORD_FORMAT.pack_into(buffer, offset, *tri.normal, *v0, *v1, *v2, 0)
        offset += RECORD_FORMAT.size

    return bytes(buffer)


def stl_filename(frequency_mhz: float) -> str:
    """Suggested download name, e.g. moxon-869.525mhz.stl."""
    return f"moxon-{frequency_mhz:g}mhz.stl"
