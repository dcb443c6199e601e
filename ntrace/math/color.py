import numbers

from .tools import clamp


class Color():
    '''
    RGBA radiance value.

    Channels are unbounded while light is accumulated; they are only clamped to [0, 1]
    when converted to 8-bit output. Instances are immutable, so the shared constants are safe to hand out.
    '''
    __slots__ = ('_red', '_green', '_blue', '_alpha')

    def __init__(self, red: float, green: float, blue: float, alpha: float = 1.0):
        (self._red, self._green, self._blue, self._alpha) = (float(red), float(green), float(blue), float(alpha))

    @property
    def red(self) -> float:
        return self._red

    @property
    def green(self) -> float:
        return self._green

    @property
    def blue(self) -> float:
        return self._blue

    @property
    def alpha(self) -> float:
        return self._alpha

    @classmethod
    def brightness(cls, brightness: float = 0.0, alpha: float = 1.0) -> 'Color':
        return cls(brightness, brightness, brightness, alpha)

    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.red + other.red, self.green + other.green, self.blue + other.blue, self.alpha + other.alpha)
        raise TypeError("Color addition not compatible with type: %s" % type(other))

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue, self.alpha * other.alpha)
        elif isinstance(other, numbers.Number):
            return Color(self.red * other, self.green * other, self.blue * other, self.alpha * other)
        else:
            raise TypeError("Color multiplication not compatible with type: %s" % type(other))

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self.__mul__(other)
        raise TypeError("Color multiplication not compatible with type: %s" % type(other))

    def __truediv__(self, scale):
        if not isinstance(scale, numbers.Number):
            raise TypeError("Color division not compatible with type: %s" % type(scale))
        return Color(self.red / scale, self.green / scale, self.blue / scale, self.alpha / scale)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return False
        return self.components() == other.components()

    def __hash__(self):
        return hash(self.components())

    def __repr__(self) -> str:
        return f"Color(red={self.red}, green={self.green}, blue={self.blue}, alpha={self.alpha})"

    def components(self) -> tuple:
        return (self.red, self.green, self.blue, self.alpha)

    def to_rgba8(self) -> tuple:
        return tuple(int(255 * clamp(c)) for c in self.components())


Color.CLEAR = Color.brightness(0, alpha=0)
Color.BLACK = Color.brightness(0)
Color.WHITE = Color.brightness(1)

Color.RED = Color(1, 0, 0)
Color.YELLOW = Color(1, 1, 0)
Color.GREEN = Color(0, 1, 0)
Color.CYAN = Color(0, 1, 1)
Color.BLUE = Color(0, 0, 1)
Color.MAGENTA = Color(1, 0, 1)
