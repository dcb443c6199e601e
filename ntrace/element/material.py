from abc import ABC, abstractmethod
import math
from typing import Optional
import numpy as np

from ..math.vector import Vector, Vector3
from ..math.color import Color
from ..math.ray import Ray
from ..math.tools import reflect


class Behavior():
    def __init__(self, emission: Color, attenuation: Color, next_bounce: Optional[Ray] = None):
        '''
        Parameters:
            emission (Color): Light emitted by the surface towards the incoming ray
            attenuation (Color): Filter applied to light arriving along `next_bounce`
            next_bounce (Ray): Continuation of the path, or None to terminate it
        '''
        self.emission = emission
        self.attenuation = attenuation
        self.next_bounce = next_bounce

    def __repr__(self) -> str:
        return f"Behavior(emission={self.emission!r}, attenuation={self.attenuation!r}, next_bounce={self.next_bounce!r})"


class Material(ABC):

    # vector dimension the material works in; None means any
    dimension = None

    def supports(self, dimension: int) -> bool:
        return self.dimension is None or self.dimension == dimension

    @abstractmethod
    def behavior(self, direction: Vector, intersection: Vector, normal: Vector, rng: np.random.Generator) -> Behavior:
        '''
        Response of the surface to a ray arriving along `direction` at `intersection`.

        Parameters:
            direction (Vector): Incoming ray direction
            intersection (Vector): Point of intersection
            normal (Vector): Surface normal at `intersection`, not necessarily normalized
            rng (np.random.Generator): Random source owned by the calling render worker
        '''
        pass


class FlatColorMaterial(Material):
    '''Constant radiance. Used for light sources and flat-shaded surfaces; ends the path.'''

    def __init__(self, color: Color):
        self.color = color

    def behavior(self, direction, intersection, normal, rng=None):
        return Behavior(emission=self.color, attenuation=self.color, next_bounce=None)


class MirrorMaterial(Material):

    def behavior(self, direction, intersection, normal, rng=None):
        reflected = reflect(direction, normal.norm())
        return Behavior(emission=Color.CLEAR, attenuation=Color.WHITE, next_bounce=Ray(intersection, reflected))


class DiffuseMaterial(Material):
    '''
    Scatters the path into a random direction of the hemisphere facing the incoming ray.

    The sampled polar angle is uniform in [0, 1) radians, so bounces stay within about 57 degrees
    of the normal. This is not importance sampled.

    NOTE    the sampling basis is seeded with `REFERENCE_AXIS`; a normal parallel to it has no
            orthogonal complement through the cross product and raises `DegenerateGeometryError`
    '''
    dimension = 3

    REFERENCE_AXIS = Vector3(1, 0, 0)

    def __init__(self, color: Color):
        self.color = color

    def behavior(self, direction: Vector3, intersection: Vector3, normal: Vector3, rng: np.random.Generator) -> Behavior:
        azimuth = rng.random() * 2 * math.pi
        polar = rng.random()
        x = math.sin(polar) * math.cos(azimuth)
        y = math.sin(polar) * math.sin(azimuth)
        z = math.cos(polar)

        # face the normal against the incoming ray
        n = -normal if normal.dot(direction) > 0 else normal
        w = Vector3(n.norm())
        u = self.REFERENCE_AXIS.cross(w, normalize=True)
        v = w.cross(u, normalize=True)
        scattered = u * x + v * y + w * z

        return Behavior(emission=Color.BLACK, attenuation=self.color, next_bounce=Ray(intersection, scattered))
