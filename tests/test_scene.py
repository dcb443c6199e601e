import pytest

from ntrace.math.vector import Vector2, Vector3
from ntrace.math.color import Color
from ntrace.math.ray import Ray
from ntrace.element.material import FlatColorMaterial
from ntrace.element.shape import Circle, Sphere
from ntrace.scene.scene import Scene

RAY = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))


def test_empty_scene_has_no_intersection():
    assert Scene().first_intersection(RAY, 1e-6) is None


def test_nearest_shape_wins_regardless_of_order():
    near = Sphere(Vector3(0, 0, 5), 1, FlatColorMaterial(Color.RED))
    far = Sphere(Vector3(0, 0, 20), 1, FlatColorMaterial(Color.BLUE))
    for shapes in ((near, far), (far, near)):
        scene = Scene()
        for shape in shapes:
            scene.add_shape(shape)
        hit = scene.first_intersection(RAY, 1e-6)
        assert hit.shape is near
        assert hit.distance == pytest.approx(4)
        assert hit.behavior().emission == Color.RED


def test_ties_keep_first_shape():
    first = Sphere(Vector3(0, 0, 5), 1, FlatColorMaterial(Color.RED))
    second = Sphere(Vector3(0, 0, 5), 1, FlatColorMaterial(Color.GREEN))
    scene = Scene()
    scene += first
    scene += second
    assert len(scene) == 2
    assert scene.first_intersection(RAY, 1e-6).shape is first


def test_near_clipping_skips_close_hits():
    scene = Scene()
    scene += Sphere(Vector3(0, 0, 5), 1, FlatColorMaterial(Color.RED))
    scene += Sphere(Vector3(0, 0, 20), 1, FlatColorMaterial(Color.BLUE))
    hit = scene.first_intersection(RAY, 10)
    assert hit.distance == pytest.approx(19)


def test_scene_rejects_other_dimensions_and_types():
    scene = Scene()
    with pytest.raises(TypeError):
        scene.add_shape(Circle(Vector2(0, 0), 1, FlatColorMaterial(Color.RED)))
    with pytest.raises(TypeError):
        scene += "sphere"
    assert len(scene) == 0


def test_two_dimensional_scene():
    scene = Scene(dimension=2)
    scene += Circle(Vector2(3, 0), 1, FlatColorMaterial(Color.RED))
    hit = scene.first_intersection(Ray(Vector2(0, 0), Vector2(1, 0)), 1e-6)
    assert hit.distance == pytest.approx(2)
