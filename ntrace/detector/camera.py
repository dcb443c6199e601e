from abc import ABC, abstractmethod
import numbers
import numpy as np

from ..math.vector import Vector, Vector2, Vector3
from ..math.color import Color
from ..math.ray import Ray
from ..scene.scene import Scene
from ..config import DEFAULT_BACKGROUND, DEFAULT_BOUNCES, DEFAULT_NEAR_CLIPPING

import logging
logger = logging.getLogger(__name__)


class Camera(ABC):
    def __init__(self, scene: Scene, position: Vector, background_color: Color = DEFAULT_BACKGROUND,
                 bounces: int = DEFAULT_BOUNCES, near_clipping: float = DEFAULT_NEAR_CLIPPING):
        '''
        Parameters:
            scene (Scene): Shapes traced by this camera; must share the camera's dimension
            position (Vector): Camera's absolute position, origin of every primary ray
            background_color (Color): Radiance of rays that leave the scene
            bounces (int): Number of bounces followed after the primary hit
            near_clipping (float): Hits at or below this distance are ignored
        '''
        if not isinstance(scene, Scene):
            raise TypeError("Camera requires a Scene, got: %s" % type(scene))
        if scene.dimension != position.dimension:
            raise TypeError(f"A {position.dimension}-dimensional camera cannot view a {scene.dimension}-dimensional scene.")
        if not isinstance(bounces, numbers.Integral) or bounces < 0:
            raise ValueError(f"bounces must be a non-negative integer, got {bounces!r}")
        if near_clipping < 0:
            raise ValueError(f"near_clipping must not be negative, got {near_clipping!r}")

        self.scene = scene
        self.position = position
        self.background_color = background_color
        self.bounces = bounces
        self.near_clipping = near_clipping

    @property
    def dimension(self) -> int:
        return self.position.dimension

    def trace(self, ray: Ray, rng: np.random.Generator = None, current_bounce: int = 0) -> Color:
        '''
        Radiance arriving along `ray`.

        Follows next bounces recursively until a material ends the path or `bounces` is exhausted;
        an exhausted path returns only the emission of its last hit.
        '''
        if rng is None:
            rng = np.random.default_rng()

        nearest = self.scene.first_intersection(ray, self.near_clipping)
        if nearest is None:
            return self.background_color

        behavior = nearest.behavior(rng)
        if current_bounce < self.bounces and behavior.next_bounce is not None:
            return behavior.emission + behavior.attenuation * self.trace(behavior.next_bounce, rng, current_bounce + 1)
        return behavior.emission

    @abstractmethod
    def primary_ray(self, offset: Vector2) -> Ray:
        '''
        Ray leaving the camera through the normalized screen `offset`, whose components range from -1 to 1.
        '''
        pass

    def trace_through(self, offset: Vector2, rng: np.random.Generator = None) -> Color:
        return self.trace(self.primary_ray(offset), rng)


class RegularCamera(Camera):
    '''
    2D camera in a 3D scene. Faces into z+ with y+ up by default.
    '''

    def __init__(self, scene: Scene, position: Vector3 = None, direction: Vector3 = None, up: Vector3 = None, **kwargs):
        position = position if position is not None else Vector3.zero()
        super().__init__(scene, position, **kwargs)
        self._set_facing(direction if direction is not None else Vector3(0, 0, 1),
                         up if up is not None else Vector3(0, 1, 0))

    @property
    def facing(self) -> tuple:
        return (self._direction, self._up)

    @facing.setter
    def facing(self, facing: tuple):
        (direction, up) = facing
        self._set_facing(direction, up)

    @property
    def direction(self) -> Vector3:
        return self._direction

    @direction.setter
    def direction(self, direction: Vector3):
        self._set_facing(direction, self._up)

    @property
    def up(self) -> Vector3:
        return self._up

    @up.setter
    def up(self, up: Vector3):
        self._set_facing(self._direction, up)

    @property
    def x_axis(self) -> Vector3:
        return self._x_axis

    @property
    def y_axis(self) -> Vector3:
        return self._y_axis

    def _set_facing(self, direction: Vector3, up: Vector3):
        # raises DegenerateGeometryError when `up` is zero or parallel to `direction`; nothing changes then
        x_axis = Vector3(up).cross(Vector3(direction), normalize=True)
        y_axis = Vector3(up).norm()
        (self._direction, self._up, self._x_axis, self._y_axis) = (direction, up, x_axis, y_axis)

    def primary_ray(self, offset) -> Ray:
        (offset_x, offset_y) = offset
        coord = self._x_axis * offset_x + self._y_axis * offset_y
        return Ray(self.position, self._direction + coord)
