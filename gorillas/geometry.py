"""Vertex data for a textured unit cube and a procedurally generated sphere."""

from __future__ import annotations

import math

# 36 vertices, each (x, y, z, u, v): six faces of two triangles.
TEXTURED_CUBE_VERTICES: tuple[float, ...] = (
    # back face (z = -0.5)
    -0.5, -0.5, -0.5, 0.0, 0.0, 0.5, -0.5, -0.5, 1.0, 0.0, 0.5, 0.5, -0.5, 1.0, 1.0,
    0.5, 0.5, -0.5, 1.0, 1.0, -0.5, 0.5, -0.5, 0.0, 1.0, -0.5, -0.5, -0.5, 0.0, 0.0,
    # front face (z = +0.5)
    -0.5, -0.5, 0.5, 0.0, 0.0, 0.5, -0.5, 0.5, 1.0, 0.0, 0.5, 0.5, 0.5, 1.0, 1.0,
    0.5, 0.5, 0.5, 1.0, 1.0, -0.5, 0.5, 0.5, 0.0, 1.0, -0.5, -0.5, 0.5, 0.0, 0.0,
    # left face (x = -0.5)
    -0.5, 0.5, 0.5, 1.0, 0.0, -0.5, 0.5, -0.5, 1.0, 1.0, -0.5, -0.5, -0.5, 0.0, 1.0,
    -0.5, -0.5, -0.5, 0.0, 1.0, -0.5, -0.5, 0.5, 0.0, 0.0, -0.5, 0.5, 0.5, 1.0, 0.0,
    # right face (x = +0.5)
    0.5, 0.5, 0.5, 1.0, 0.0, 0.5, 0.5, -0.5, 1.0, 1.0, 0.5, -0.5, -0.5, 0.0, 1.0,
    0.5, -0.5, -0.5, 0.0, 1.0, 0.5, -0.5, 0.5, 0.0, 0.0, 0.5, 0.5, 0.5, 1.0, 0.0,
    # bottom face (y = -0.5)
    -0.5, -0.5, -0.5, 0.0, 1.0, 0.5, -0.5, -0.5, 1.0, 1.0, 0.5, -0.5, 0.5, 1.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 0.0, -0.5, -0.5, 0.5, 0.0, 0.0, -0.5, -0.5, -0.5, 0.0, 1.0,
    # top face (y = +0.5)
    -0.5, 0.5, -0.5, 0.0, 1.0, 0.5, 0.5, -0.5, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 0.0, -0.5, 0.5, 0.5, 0.0, 0.0, -0.5, 0.5, -0.5, 0.0, 1.0,
)


def _polar_to_xyz(radius: float, phi: float, theta: float) -> tuple[float, float, float]:
    return (
        radius * math.sin(phi) * math.cos(theta),
        radius * math.cos(phi),
        radius * math.sin(phi) * math.sin(theta),
    )


def generate_sphere_vertices(radius: float, stacks: int, slices: int) -> list[float]:
    """Triangulate a sphere into interleaved (x, y, z, r, g, b) vertices.

    Each stack/slice cell yields two triangles; colour varies with latitude
    and longitude. Non-positive ``stacks`` or ``slices`` yield no vertices.
    """
    vertices: list[float] = []
    for i in range(stacks):
        phi1 = math.pi * i / stacks
        phi2 = math.pi * (i + 1) / stacks
        red = 0.8 * (i / stacks) + 0.2
        for j in range(slices):
            theta1 = 2 * math.pi * j / slices
            theta2 = 2 * math.pi * (j + 1) / slices
            c2 = j / slices
            colour = (red, 0.6 * (1.0 - c2) + 0.4, 0.5 * c2 + 0.2)

            p1 = _polar_to_xyz(radius, phi1, theta1)
            p2 = _polar_to_xyz(radius, phi2, theta1)
            p3 = _polar_to_xyz(radius, phi2, theta2)
            p4 = _polar_to_xyz(radius, phi1, theta2)

            for point in (p1, p2, p3, p1, p3, p4):
                vertices.extend(point)
                vertices.extend(colour)
    return vertices