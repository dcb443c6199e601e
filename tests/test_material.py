import math
import numpy as np
import pytest

from ntrace.math.vector import Vector2, Vector3
from ntrace.math.color import Color
from ntrace.math.tools import reflect
from ntrace.element.material import DiffuseMaterial, FlatColorMaterial, MirrorMaterial
from ntrace.element.shape import Circle
from ntrace.errors import DegenerateGeometryError


def test_reflection_preserves_length():
    d = Vector3(1, -2, 0.5)
    n = Vector3(1, 1, 0).norm()
    assert reflect(d, n).magnitude() == pytest.approx(d.magnitude())
    assert reflect(d.norm(), n).norm().magnitude() == pytest.approx(d.norm().magnitude())


def test_reflection_is_involutive():
    d = Vector3(0.3, -0.7, 2.0)
    n = Vector3(0, 1, 0)
    twice = reflect(reflect(d, n), n)
    assert np.allclose(twice.as_array(), d.as_array())
    assert reflect(d, n) == Vector3(0.3, 0.7, 2.0)


def test_flat_color_terminates_the_path():
    color = Color(1, 0.5, 0.25)
    behavior = FlatColorMaterial(color).behavior(Vector3(0, 0, 1), Vector3(0, 0, 5), Vector3(0, 0, -1))
    assert behavior.emission == color
    assert behavior.attenuation == color
    assert behavior.next_bounce is None


def test_mirror_reflects_about_normalized_normal():
    behavior = MirrorMaterial().behavior(Vector3(1, -1, 0), Vector3(2, 0, 0), Vector3(0, 5, 0))
    assert behavior.emission == Color.CLEAR
    assert behavior.attenuation == Color.WHITE
    assert behavior.next_bounce.origin == Vector3(2, 0, 0)
    assert behavior.next_bounce.direction == Vector3(1, 1, 0)


def test_mirror_works_in_any_dimension():
    behavior = MirrorMaterial().behavior(Vector2(1, -1), Vector2(0, 0), Vector2(0, 1))
    assert behavior.next_bounce.direction == Vector2(1, 1)


def test_diffuse_samples_hemisphere_against_incoming_ray():
    rng = np.random.default_rng(7)
    material = DiffuseMaterial(Color(0.8, 0.2, 0.2))
    direction = Vector3(0.2, 0.1, 1)
    normal = Vector3(0, 0, -3)
    for _ in range(200):
        behavior = material.behavior(direction, Vector3(0, 0, 5), normal, rng)
        bounce = behavior.next_bounce.direction
        assert behavior.emission == Color.BLACK
        assert behavior.attenuation == Color(0.8, 0.2, 0.2)
        assert behavior.next_bounce.origin == Vector3(0, 0, 5)
        assert bounce.magnitude() == pytest.approx(1.0)
        # polar angle is drawn from [0, 1) radians
        assert bounce.dot(Vector3(0, 0, -1)) >= math.cos(1.0) - 1e-9


def test_diffuse_flips_normal_facing_along_the_ray():
    rng = np.random.default_rng(3)
    material = DiffuseMaterial(Color.WHITE)
    for _ in range(50):
        behavior = material.behavior(Vector3(0, 0, 1), Vector3(0, 0, 5), Vector3(0, 0, 1), rng)
        assert behavior.next_bounce.direction.z < 0


def test_diffuse_is_reproducible_with_a_seed():
    material = DiffuseMaterial(Color.WHITE)
    args = (Vector3(0, 0, 1), Vector3(0, 0, 5), Vector3(0, 1, -1))
    first = material.behavior(*args, np.random.default_rng(42))
    second = material.behavior(*args, np.random.default_rng(42))
    assert first.next_bounce == second.next_bounce


def test_diffuse_degenerate_basis_fails_fast():
    material = DiffuseMaterial(Color.WHITE)
    with pytest.raises(DegenerateGeometryError):
        material.behavior(Vector3(-1, 0, 0), Vector3(0, 0, 0), Vector3(1, 0, 0), np.random.default_rng(0))
    with pytest.raises(DegenerateGeometryError):
        material.behavior(Vector3(1, 0, 0), Vector3(0, 0, 0), Vector3(-2, 0, 0), np.random.default_rng(0))


def test_diffuse_is_three_dimensional_only():
    with pytest.raises(TypeError):
        Circle(Vector2(0, 0), 1, DiffuseMaterial(Color.WHITE))
