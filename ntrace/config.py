import math
import numbers

from .math.color import Color

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 128
DEFAULT_SAMPLES = 5
DEFAULT_BOUNCES = 5
DEFAULT_NEAR_CLIPPING = 0.000001
DEFAULT_BACKGROUND = Color.CLEAR
DEFAULT_WORKERS = 4
DEFAULT_SNAPSHOT_INTERVAL = 1.0


class RenderConfig():
    def __init__(self,
                 width: int = DEFAULT_WIDTH,
                 height: int = DEFAULT_HEIGHT,
                 samples: int = DEFAULT_SAMPLES,
                 workers: int = DEFAULT_WORKERS,
                 snapshot_interval: float = DEFAULT_SNAPSHOT_INTERVAL,
                 seed: int = None):
        '''
        Parameters:
            width (int): Output width in pixels
            height (int): Output height in pixels
            samples (int): Path traces averaged per pixel
            workers (int): Number of render threads; worker `n` owns rows with `y % workers == n`
            snapshot_interval (float): Seconds between in-progress snapshots
            seed (int): Seed for the per-worker random generators. `None` draws fresh entropy
        '''
        for name, value in (('width', width), ('height', height), ('samples', samples), ('workers', workers)):
            if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if not isinstance(snapshot_interval, numbers.Real) or not math.isfinite(snapshot_interval) or snapshot_interval <= 0:
            raise ValueError(f"snapshot_interval must be a positive number of seconds, got {snapshot_interval!r}")

        if seed is not None and (not isinstance(seed, numbers.Integral) or seed < 0):
            raise ValueError(f"seed must be a non-negative integer or None, got {seed!r}")

        self.width = int(width)
        self.height = int(height)
        self.samples = int(samples)
        self.workers = int(workers)
        self.snapshot_interval = float(snapshot_interval)
        self.seed = seed

    def __repr__(self) -> str:
        return (f"RenderConfig(width={self.width}, height={self.height}, samples={self.samples}, "
                f"workers={self.workers}, snapshot_interval={self.snapshot_interval}, seed={self.seed})")
