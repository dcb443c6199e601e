from .vector import Vector


class Ray():
    def __init__(self, origin: Vector, direction: Vector):
        '''
        Parameters:
            origin (Vector): Ray's starting point
            direction (Vector): Ray's direction; not required to be unit length
        '''
        if not isinstance(origin, Vector) or not isinstance(direction, Vector):
            raise TypeError("Ray origin and direction must be Vectors.")
        if origin.dimension != direction.dimension:
            raise TypeError("Ray origin and direction dimensions do not match: %d and %d" % (origin.dimension, direction.dimension))
        self._origin = origin
        self._direction = direction

    @property
    def origin(self) -> Vector:
        return self._origin

    @property
    def direction(self) -> Vector:
        return self._direction

    @property
    def dimension(self) -> int:
        return self._origin.dimension

    def point_at(self, distance: float) -> Vector:
        return self._origin + self._direction * distance

    def normalized(self) -> 'Ray':
        return Ray(self._origin, self._direction.norm())

    def __eq__(self, other):
        if not isinstance(other, Ray):
            return False
        return self._origin == other._origin and self._direction == other._direction

    def __hash__(self):
        return hash((self._origin, self._direction))

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin!r}, direction={self._direction!r})"
