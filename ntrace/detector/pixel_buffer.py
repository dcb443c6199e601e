import numpy as np
from PIL import Image

from ..math.color import Color


class PixelBuffer():
    '''
    Row-major RGBA float buffer; pixel (x, y) lives at flat index `x + y * width`.

    Render workers write disjoint rows in place. Everyone else should read a `snapshot()`.
    '''

    CHANNELS = 4

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"PixelBuffer dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.complete = False
        self._data = np.zeros((width * height, self.CHANNELS), dtype=np.float64)

    def __len__(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return x + y * self.width

    def __getitem__(self, coordinate) -> Color:
        (x, y) = coordinate
        return Color(*self._data[self.index(x, y)])

    def __setitem__(self, coordinate, color: Color):
        (x, y) = coordinate
        self._data[self.index(x, y)] = color.components()

    @property
    def data(self) -> np.ndarray:
        '''
        Read-only view of the flat `(width * height, 4)` float samples.
        '''
        view = self._data.view()
        view.flags.writeable = False
        return view

    def snapshot(self) -> 'PixelBuffer':
        '''
        Immutable copy of the buffer as it is now. Rows still being rendered may be partially filled.
        '''
        copy = PixelBuffer.__new__(PixelBuffer)
        copy.width = self.width
        copy.height = self.height
        copy.complete = self.complete
        copy._data = self._data.copy()
        copy._data.flags.writeable = False
        return copy

    def to_rgba8(self) -> np.ndarray:
        '''
        8-bit `(height, width, 4)` array; channels are clamped to [0, 1], scaled by 255 and truncated.
        '''
        rgba = (255 * np.clip(self._data, 0, 1)).astype(np.uint8)
        return rgba.reshape((self.height, self.width, self.CHANNELS))

    def rgba8_at(self, x: int, y: int) -> tuple:
        return self[x, y].to_rgba8()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_rgba8())
