from abc import ABC, abstractmethod
import math
from typing import Optional
import numpy as np

from ..math.vector import Vector, Vector2, Vector3, Vector4
from ..math.ray import Ray
from .material import Behavior, Material


class Intersection():
    '''
    A confirmed hit along a ray. The material is not evaluated until `behavior` is called,
    so only the nearest of several candidate hits pays for it.
    '''

    def __init__(self, distance: float, shape: 'Shape', ray: Ray):
        self.distance = distance
        self.shape = shape
        self.ray = ray

    def point(self) -> Vector:
        return self.ray.point_at(self.distance)

    def behavior(self, rng: np.random.Generator = None) -> Behavior:
        return self.shape.behavior_at(self.ray, self.distance, rng)

    def __repr__(self) -> str:
        return f"Intersection(distance={self.distance}, shape={self.shape!r})"


class Shape(ABC):

    @property
    @abstractmethod
    def dimension(self) -> int:
        '''
        Dimension of the vector space the shape lives in.
        '''
        pass

    @abstractmethod
    def first_intersection(self, ray: Ray, near_clipping: float) -> Optional[Intersection]:
        '''
        Nearest intersection along `ray` strictly further than `near_clipping`, or None.
        '''
        pass

    @abstractmethod
    def behavior_at(self, ray: Ray, distance: float, rng: np.random.Generator) -> Behavior:
        '''
        Evaluate the surface response where `ray` meets the shape at `distance`.
        '''
        pass


class MaterialShape(Shape):
    def __init__(self, material: Material):
        if not isinstance(material, Material):
            raise TypeError("Shapes require a Material, got: %s" % type(material))
        if not material.supports(self.dimension):
            raise TypeError("%s works in %d dimensions, %s is %d-dimensional" % (
                type(material).__name__, material.dimension, type(self).__name__, self.dimension))
        self.material = material


class NSphere(MaterialShape):
    '''
    Sphere of any dimension.

    NOTE    a sphere whose center does not lie in front of the ray origin is never hit, which
            includes every ray starting inside the sphere
    '''

    # concrete subclasses pin the vector type of `center`
    vector_type = Vector

    def __init__(self, center: Vector, radius: float, material: Material):
        if not isinstance(center, self.vector_type):
            raise TypeError("%s center must be a %s, got: %s" % (type(self).__name__, self.vector_type.__name__, type(center)))
        if radius <= 0:
            raise ValueError("Sphere radius must be positive, got %r" % radius)
        self.center = center
        self.radius = float(radius)
        super().__init__(material)

    @property
    def dimension(self) -> int:
        return self.center.dimension

    def first_intersection(self, ray: Ray, near_clipping: float) -> Optional[Intersection]:
        if ray.dimension != self.dimension:
            raise TypeError("Ray dimension %d does not match %s dimension %d" % (ray.dimension, type(self).__name__, self.dimension))

        ray = ray.normalized()
        offset_center = self.center - ray.origin

        # sphere must lie in front of the ray
        projection_length = offset_center.dot(ray.direction)
        if projection_length <= 0:
            return None

        # distance from the projected center to the sphere edge (pythagoras)
        hypotenuse_squared = self.radius ** 2
        cathetus_squared = (offset_center - ray.direction * projection_length).squared_magnitude()
        if hypotenuse_squared <= cathetus_squared:
            return None

        distance = projection_length - math.sqrt(hypotenuse_squared - cathetus_squared)
        if distance <= near_clipping:
            return None

        return Intersection(distance, self, ray)

    def behavior_at(self, ray: Ray, distance: float, rng: np.random.Generator) -> Behavior:
        intersection_point = ray.point_at(distance)
        return self.material.behavior(ray.direction, intersection_point, intersection_point - self.center, rng)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self.center!r}, radius={self.radius}, material={type(self.material).__name__})"


class Circle(NSphere):
    vector_type = Vector2


class Sphere(NSphere):
    vector_type = Vector3


class Hypersphere(NSphere):
    vector_type = Vector4
