from typing import Optional

from ..math.ray import Ray
from ..element.shape import Intersection, Shape
from ..utilities.logconfig import DEFAULT_LOG_FORMAT, setup_logging
import logging
logger = logging.getLogger(__name__)


class Scene:

    def __init__(self, dimension: int = 3, log_level=logging.CRITICAL, log_file=None,
                 log_format: str = DEFAULT_LOG_FORMAT) -> None:
        '''
        Parameters:
            dimension (int): Vector dimension shared by every shape in the scene and by its camera
            log_level (int): Level for the `ntrace` logger
            log_file (str): Optional file receiving `ntrace` log records
            log_format (str): Record format for the `ntrace` handlers
        '''
        setup_logging(name='ntrace', level=log_level, log_format=log_format, log_file=log_file)
        if dimension < 1:
            raise ValueError(f"Scene dimension must be positive, got {dimension}")
        self.dimension = dimension
        self.shapes = list()

    def add_shape(self, shape: Shape) -> None:
        if not isinstance(shape, Shape):
            raise TypeError("Only Shapes can be added to Scenes!")
        if shape.dimension != self.dimension:
            raise TypeError(f"Cannot add a {shape.dimension}-dimensional shape to a {self.dimension}-dimensional scene.")
        self.shapes.append(shape)
        logger.debug(f"added {shape!r}. shape_count={len(self.shapes)}")

    def __iadd__(self, shape):
        self.add_shape(shape)
        return self

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    def first_intersection(self, ray: Ray, near_clipping: float) -> Optional[Intersection]:
        '''
        Nearest hit among all shapes beyond `near_clipping`. On equal distances the shape added first wins.
        '''
        nearest = None
        for shape in self.shapes:
            candidate = shape.first_intersection(ray, near_clipping)
            if candidate is None or candidate.distance <= near_clipping:
                continue
            if nearest is None or candidate.distance < nearest.distance:
                nearest = candidate
        return nearest
