import pytest

from ntrace.math.ray import Ray
from ntrace.math.vector import Vector2, Vector3


def test_point_at():
    ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, 2))
    assert ray.point_at(0) == Vector3(1, 1, 1)
    assert ray.point_at(1.5) == Vector3(1, 1, 4)


def test_direction_is_not_normalized_by_the_type():
    ray = Ray(Vector2(0, 0), Vector2(3, 4))
    assert ray.direction.magnitude() == 5
    assert ray.normalized().direction.components() == pytest.approx((0.6, 0.8))
    assert ray.normalized().origin == ray.origin


def test_dimensions_must_match():
    with pytest.raises(TypeError):
        Ray(Vector3(0, 0, 0), Vector2(1, 0))
    with pytest.raises(TypeError):
        Ray((0, 0, 0), Vector3(1, 0, 0))
