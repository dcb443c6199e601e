import math
import numbers
import numpy as np

from ..errors import DegenerateGeometryError


class Vector():
    '''
    Immutable Euclidean vector with a fixed number of float components.

    Arithmetic is componentwise. `Vector` itself accepts any dimension; `Vector2`, `Vector3`
    and `Vector4` pin the dimension and add named accessors. Only `Vector3` has a cross product.

    Parameters:
        components (float, or one sequence/ndarray/Vector): the vector's components
    '''
    __array_priority__ = 1000

    # None accepts any dimension
    _dimension = None

    def __init__(self, *components):
        if len(components) == 1 and isinstance(components[0], Vector):
            components = components[0]._components
        elif len(components) == 1 and isinstance(components[0], (np.ndarray, list, tuple)):
            components = components[0]

        data = np.array(components, dtype=float)
        if data.ndim != 1 or data.size == 0:
            raise TypeError("A Vector needs a flat, non-empty sequence of components.")
        if self._dimension is not None and data.size != self._dimension:
            raise TypeError("%s takes %d components, got %d" % (type(self).__name__, self._dimension, data.size))

        data.flags.writeable = False
        self._components = data

    @classmethod
    def zero(cls, dimension: int = None) -> 'Vector':
        dimension = dimension or cls._dimension
        if dimension is None:
            raise TypeError("Dimension is required for a generic zero Vector.")
        return cls(np.zeros(dimension))

    @property
    def dimension(self) -> int:
        return self._components.size

    def _matching(self, other: 'Vector') -> np.ndarray:
        if other.dimension != self.dimension:
            raise TypeError("Vector dimensions do not match: %d and %d" % (self.dimension, other.dimension))
        return other._components

    def _new(self, data: np.ndarray) -> 'Vector':
        return type(self)(data)

    def __add__(self, other):
        if isinstance(other, Vector):
            return self._new(self._components + self._matching(other))
        raise TypeError("Vector addition not compatible with type: %s" % type(other))

    def __sub__(self, other):
        if isinstance(other, Vector):
            return self._new(self._components - self._matching(other))
        raise TypeError("Vector subtraction not compatible with type: %s" % type(other))

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self._new(self._components * self._matching(other))
        elif isinstance(other, numbers.Number):
            return self._new(self._components * other)
        else:
            raise TypeError("Vector multiplication not compatible with type: %s" % type(other))

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self.__mul__(other)
        else:
            raise TypeError("Vector multiplication not compatible with type: %s" % type(other))

    def __truediv__(self, other):
        if not isinstance(other, numbers.Number):
            raise TypeError("Vector division not compatible with type: %s" % type(other))
        if other == 0:
            raise DegenerateGeometryError("Vector division by zero.")
        return self._new(self._components / other)

    def __neg__(self):
        return self._new(-self._components)

    def __eq__(self, other):
        if not isinstance(other, Vector) or other.dimension != self.dimension:
            return False
        return bool(np.array_equal(self._components, other._components))

    def __hash__(self):
        return hash(self.components())

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self):
        return iter(self.components())

    def __getitem__(self, index) -> float:
        return float(self._components[index])

    def __repr__(self) -> str:
        return "%s(%s)" % (type(self).__name__, ", ".join(repr(c) for c in self.components()))

    def dot(self, other: 'Vector') -> float:
        return float(np.dot(self._components, self._matching(other)))

    def squared_magnitude(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.squared_magnitude())

    def norm(self) -> 'Vector':
        '''
        Unit vector pointing along `self`.

        The zero vector has no direction; normalizing it raises `DegenerateGeometryError`.
        '''
        mag = self.magnitude()
        if mag == 0:
            raise DegenerateGeometryError("Cannot normalize a zero-length %r." % (self,))
        return self * (1.0 / mag)

    def components(self) -> tuple:
        return tuple(float(c) for c in self._components)

    def as_array(self) -> np.ndarray:
        # read-only view
        return self._components

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        # required so `numpy scalar * Vector` dispatches to Vector.__rmul__
        # see: https://numpy.org/doc/stable/user/basics.subclassing.html
        if method == '__call__' and ufunc == np.multiply and len(inputs) == 2 and not kwargs:
            left, right = inputs
            if isinstance(right, Vector) and isinstance(left, numbers.Number):
                return right.__mul__(left)
            if isinstance(left, Vector) and isinstance(right, numbers.Number):
                return left.__mul__(right)
        return NotImplemented


class Vector2(Vector):
    _dimension = 2

    @property
    def x(self) -> float:
        return self[0]

    @property
    def y(self) -> float:
        return self[1]


class Vector3(Vector):
    _dimension = 3

    @property
    def x(self) -> float:
        return self[0]

    @property
    def y(self) -> float:
        return self[1]

    @property
    def z(self) -> float:
        return self[2]

    def cross(self, other: 'Vector3', normalize: bool = False) -> 'Vector3':
        if not isinstance(other, Vector3):
            raise TypeError("Cross product is only defined between two Vector3, got: %s" % type(other))
        cross_product = Vector3(self.y * other.z - self.z * other.y,
                                self.z * other.x - self.x * other.z,
                                self.x * other.y - self.y * other.x)
        return cross_product.norm() if normalize else cross_product


class Vector4(Vector):
    _dimension = 4

    @property
    def x(self) -> float:
        return self[0]

    @property
    def y(self) -> float:
        return self[1]

    @property
    def z(self) -> float:
        return self[2]

    @property
    def w(self) -> float:
        return self[3]
