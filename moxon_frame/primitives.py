"""
Triangle builders for the elementary solids of the printed frame.
Every solid is a convex prism: a CCW boundary polygon extruded along Z.
"""

import math
from dataclasses import dataclass

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

# Chamfers stop this far short of meeting in the middle of a side.
CHAMFER_MARGIN = 0.01


@dataclass(frozen=True)
class Triangle:
    """Outward unit normal plus three vertices in CCW order."""
    normal: Vec3
    vertices: tuple[Vec3, Vec3, Vec3]


@dataclass(frozen=True)
class Prism:
    """A convex boundary polygon extruded from z0 to z1."""
    points: tuple[Vec2, ...]
    z0: float
    z1: float

    def triangles(self) -> list[Triangle]:
        return extrude_polygon(self.points, self.z0, self.z1)


def _unit_normal(p0: Vec3, p1: Vec3, p2: Vec3) -> Vec3:
    ux, uy, uz = p1[0] - p0[0], p1[1] - p0[1], p1[2] - p0[2]
    vx, vy, vz = p2[0] - p0[0], p2[1] - p0[1], p2[2] - p0[2]
    nx = uy * vz - uz * vy
    ny = uz * vx - ux * vz
    nz = ux * vy - uy * vx
    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (nx / length, ny / length, nz / length)


def _cap_fan(points: list[Vec2]) -> list[tuple[Vec2, Vec2, Vec2]]:
    """CCW cap triangles. Quads split on a diagonal; larger polygons fan around the centroid."""
    n = len(points)
    if n <= 4:
        return [(points[0], points[i], points[i + 1]) for i in range(1, n - 1)]
    center = (sum(p[0] for p in points) / n, sum(p[1] for p in points) / n)
    return [(center, points[i], points[(i + 1) % n]) for i in range(n)]


def extrude_polygon(points, z0: float, z1: float) -> list[Triangle]:
    """
    Extrude a convex CCW polygon into a closed triangle set.

    The caps are fan-triangulated (see _cap_fan); each boundary edge
    contributes two side triangles whose normals come from the cross product
    of their edge vectors.

    Args:
        points: Boundary points (x, y), counter-clockwise seen from +Z
        z0: Bottom of the extrusion
        z1: Top of the extrusion

    Returns:
        List of triangles, empty if fewer than 3 points are given
    """
    points = list(points)
    n = len(points)
    if n < 3:
        return []

    triangles: list[Triangle] = []
    down = (0.0, 0.0, -1.0)
    up = (0.0, 0.0, 1.0)

    for (x0, y0), (xa, ya), (xb, yb) in _cap_fan(points):
        triangles.append(Triangle(down, ((x0, y0, z0), (xb, yb, z0), (xa, ya, z0))))
    for (x0, y0), (xa, ya), (xb, yb) in _cap_fan(points):
        triangles.append(Triangle(up, ((x0, y0, z1), (xa, ya, z1), (xb, yb, z1))))

    for i in range(n):
        xa, ya = points[i]
        xb, yb = points[(i + 1) % n]
        a_low, b_low = (xa, ya, z0), (xb, yb, z0)
        a_high, b_high = (xa, ya, z1), (xb, yb, z1)
        triangles.append(Triangle(_unit_normal(a_low, b_low, b_high), (a_low, b_low, b_high)))
        triangles.append(Triangle(_unit_normal(a_low, b_high, a_high), (a_low, b_high, a_high)))

    return triangles


def rectangle(x0: float, y0: float, x1: float, y1: float) -> tuple[Vec2, ...]:
    """CCW rectangle boundary; corners may be given in any order."""
    lo_x, hi_x = min(x0, x1), max(x0, x1)
    lo_y, hi_y = min(y0, y1), max(y0, y1)
    return ((lo_x, lo_y), (hi_x, lo_y), (hi_x, hi_y), (lo_x, hi_y))


def box_prism(x0: float, y0: float, z0: float, x1: float, y1: float, z1: float) -> Prism:
    return Prism(rectangle(x0, y0, x1, y1), min(z0, z1), max(z0, z1))


def box(x0: float, y0: float, z0: float, x1: float, y1: float, z1: float) -> list[Triangle]:
    """Axis-aligned box between two opposite corners (12 triangles)."""
    return box_prism(x0, y0, z0, x1, y1, z1).triangles()


def clamp_chamfer(chamfer: float, size: float) -> float:
    """Keep a corner cut strictly below half the block side."""
    return min(max(chamfer, 0.0), size / 2.0 - CHAMFER_MARGIN)


def chamfered_prism(cx: float, cy: float, size: float, chamfer: float, z1: float) -> Prism:
    half = size / 2.0
    chamfer = clamp_chamfer(chamfer, size)
    if chamfer <= 0:
        return box_prism(cx - half, cy - half, 0.0, cx + half, cy + half, z1)

    octagon = (
        (-half + chamfer, -half),
        (half - chamfer, -half),
        (half, -half + chamfer),
        (half, half - chamfer),
        (half - chamfer, half),
        (-half + chamfer, half),
        (-half, half - chamfer),
        (-half, -half + chamfer),
    )
    return Prism(tuple((cx + x, cy + y) for x, y in octagon), 0.0, z1)


def chamfered_block(cx: float, cy: float, size: float, chamfer: float, z1: float) -> list[Triangle]:
    """Square block centred on (cx, cy) with its four vertical edges cut off."""
    return chamfered_prism(cx, cy, size, chamfer, z1).triangles()
