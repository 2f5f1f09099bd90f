import math

import pytest

from algocorner.geometry import Point, closest_pair_distance


def _grid(spacing, count):
    return [Point(i * spacing, j * spacing) for i in range(count) for j in range(count)]


def test_two_points():
    assert closest_pair_distance([Point(0, 0), Point(3, 4)]) == pytest.approx(5.0)


def test_grid_spacing_is_found():
    assert closest_pair_distance(_grid(2.0, 6)) == pytest.approx(2.0)


def test_planted_close_pair_in_grid():
    points = _grid(2.0, 6) + [Point(5.0, 5.0), Point(5.0, 5.5)]
    assert closest_pair_distance(points) == pytest.approx(0.5)


def test_close_pair_across_split():
    points = [Point(float(x), float(x * x)) for x in range(0, 40, 4)]
    points += [Point(19.9, 0.0), Point(20.1, 0.0)]
    assert closest_pair_distance(points) == pytest.approx(0.2)


def test_duplicate_points_give_zero():
    points = [Point(1, 1), Point(5, 5), Point(1, 1), Point(9, 2)]
    assert closest_pair_distance(points) == 0


def test_translation_invariance():
    points = [Point(0, 0), Point(7, 1), Point(3, 9), Point(4, 4), Point(10, 10)]
    moved = [Point(p.x + 100, p.y - 50) for p in points]
    assert closest_pair_distance(moved) == pytest.approx(closest_pair_distance(points))


def test_result_bounded_by_a_known_pair():
    points = [Point(0, 0), Point(7, 1), Point(3, 9), Point(4, 4), Point(10, 10)]
    assert closest_pair_distance(points) <= math.dist((4, 4), (0, 0))


def test_too_few_points():
    with pytest.raises(ValueError):
        closest_pair_distance([Point(0, 0)])
    with pytest.raises(ValueError):
        closest_pair_distance([])