import math

import pytest

from gorillas.geometry import generate_sphere_vertices


def chunks(values, size):
    return [values[k:k + size] for k in range(0, len(values), size)]


@pytest.mark.parametrize("stacks, slices", [(1, 1), (4, 8), (16, 16)])
def test_sphere_vertex_count(stacks, slices):
    data = generate_sphere_vertices(0.2, stacks, slices)
    assert len(data) == stacks * slices * 6 * 6


@pytest.mark.parametrize("radius", [0.2, 1.0, 3.5])
def test_sphere_points_lie_on_surface(radius):
    data = generate_sphere_vertices(radius, 6, 7)
    for x, y, z, *_ in chunks(data, 6):
        assert math.sqrt(x * x + y * y + z * z) == pytest.approx(radius)


def test_sphere_colours_within_unit_range():
    data = generate_sphere_vertices(1.0, 5, 5)
    for *_, r, g, b in chunks(data, 6):
        assert 0.2 <= r <= 1.0
        assert 0.4 <= g <= 1.0
        assert 0.2 <= b <= 0.7


def test_first_vertex_is_north_pole():
    data = generate_sphere_vertices(2.0, 4, 4)
    x, y, z = data[:3]
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(2.0)
    assert z == pytest.approx(0.0)


def test_colour_constant_within_cell():
    data = generate_sphere_vertices(1.0, 3, 3)
    for cell in chunks(data, 36):
        colours = {tuple(vertex[3:]) for vertex in chunks(cell, 6)}
        assert len(colours) == 1


@pytest.mark.parametrize("stacks, slices", [(0, 5), (5, 0), (-1, 3)])
def test_empty_sphere_for_no_divisions(stacks, slices):
    assert generate_sphere_vertices(1.0, stacks, slices) == []