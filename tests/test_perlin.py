import pytest

from ereea.perlin import Perlin

_POINTS = [(x / 6.0, y / 6.0) for x in range(25) for y in range(25)]


def test_same_seed_same_values():
    first = Perlin(42)
    second = Perlin(42)
    assert [first.get(x, y) for x, y in _POINTS] == [second.get(x, y) for x, y in _POINTS]


def test_values_in_range():
    noise = Perlin(7)
    assert all(-1.0 <= noise.get(x, y) <= 1.0 for x, y in _POINTS)


@pytest.mark.parametrize("point", [(0, 0), (3, 5), (-2, 4), (10, -7)])
def test_zero_at_lattice_points(point):
    assert Perlin(123).get(*point) == 0.0


def test_not_constant_between_lattice_points():
    noise = Perlin(1)
    values = {noise.get(x, y) for x, y in _POINTS}
    assert len(values) > 10


def test_different_seeds_differ():
    first = Perlin(1)
    second = Perlin(2)
    assert any(first.get(x, y) != second.get(x, y) for x, y in _POINTS)


def test_seed_is_kept():
    assert Perlin(99).seed == 99