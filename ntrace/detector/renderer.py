from concurrent.futures import ThreadPoolExecutor
import threading
import time
from typing import Callable, Optional
import numpy as np

from ..math.vector import Vector2
from ..math.color import Color
from ..config import RenderConfig, DEFAULT_SAMPLES, DEFAULT_SNAPSHOT_INTERVAL, DEFAULT_WORKERS
from .camera import Camera
from .pixel_buffer import PixelBuffer

import logging
logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[PixelBuffer], None]


def pixel_offset(x: int, y: int, width: int, height: int) -> Vector2:
    '''
    Normalized screen offset of the center of pixel (x, y); row 0 is the top of the image.
    '''
    return Vector2((2 * x + 1) / width - 1, 1 - (2 * y + 1) / height)


class SnapshotTicker(threading.Thread):
    '''
    Hands a copy of `buffer` to `on_snapshot` every `interval` seconds until stopped.

    An exception raised by `on_snapshot` stops the ticker and is kept in `error` for the renderer to re-raise.
    '''

    def __init__(self, buffer: PixelBuffer, interval: float, on_snapshot: SnapshotCallback):
        super().__init__(name="ntrace-snapshot", daemon=True)
        self.buffer = buffer
        self.interval = interval
        self.on_snapshot = on_snapshot
        self.count = 0
        self.error = None
        self._stopped = threading.Event()

    def run(self):
        while not self._stopped.wait(self.interval):
            self.count += 1
            logger.debug(f"snapshot {self.count} emitted")
            try:
                self.on_snapshot(self.buffer.snapshot())
            except Exception as error:
                logger.error(f"snapshot {self.count} failed: {error!r}")
                self.error = error
                return

    def stop(self):
        self._stopped.set()
        if self.is_alive():
            self.join()


class Renderer:

    def __init__(self, config: RenderConfig = None):
        self.config = config if config is not None else RenderConfig()
        self.start_time = None
        self.end_time = None

    def elapsed_time(self) -> float:
        if self.start_time is None:
            raise ValueError('Timer has not been started. Call `elapsed_time` after calling `render`.')
        end_time = self.end_time if self.end_time is not None else time.perf_counter()
        return end_time - self.start_time

    def render(self, camera: Camera, on_snapshot: Optional[SnapshotCallback] = None) -> PixelBuffer:
        '''
        Render `camera`'s view into a new `PixelBuffer`.

        Worker `n` of `config.workers` renders every row with `y % workers == n`, each with its own
        random generator spawned from `config.seed`. While workers run, `on_snapshot` receives a copy
        of the buffer every `config.snapshot_interval` seconds; after they all join it is called once
        more with the complete buffer. Exceptions raised by a worker or by a periodic `on_snapshot`
        call propagate from here, after every thread has stopped.
        '''
        if not isinstance(camera, Camera):
            raise TypeError("Renderer requires a Camera, got: %s" % type(camera))

        config = self.config
        buffer = PixelBuffer(config.width, config.height)
        generators = [np.random.default_rng(s) for s in np.random.SeedSequence(config.seed).spawn(config.workers)]

        self.start_time = time.perf_counter()
        self.end_time = None
        logger.info(f"rendering {config!r}. shape_count={len(camera.scene)}")

        ticker = None
        if on_snapshot is not None:
            ticker = SnapshotTicker(buffer, config.snapshot_interval, on_snapshot)
            ticker.start()

        try:
            with ThreadPoolExecutor(max_workers=config.workers, thread_name_prefix="ntrace-render") as executor:
                futures = [executor.submit(self._render_rows, camera, buffer, n, rng) for n, rng in enumerate(generators)]
                for future in futures:
                    future.result()
        finally:
            if ticker is not None:
                ticker.stop()

        if ticker is not None and ticker.error is not None:
            raise ticker.error

        buffer.complete = True
        self.end_time = time.perf_counter()
        logger.info(f"Took {self.elapsed_time()} seconds!")

        if on_snapshot is not None:
            on_snapshot(buffer.snapshot())

        return buffer

    def _render_rows(self, camera: Camera, buffer: PixelBuffer, worker: int, rng: np.random.Generator):
        (width, height) = (buffer.width, buffer.height)
        samples = self.config.samples

        for y in range(worker, height, self.config.workers):
            logger.debug(f"rendering line {y}/{height}")
            for x in range(width):
                offset = pixel_offset(x, y, width, height)
                color = Color.CLEAR
                for _ in range(samples):
                    color = color + camera.trace_through(offset, rng)
                buffer[x, y] = color / samples


def render(camera: Camera,
           width: int,
           height: int,
           samples: int = DEFAULT_SAMPLES,
           snapshot_interval: float = DEFAULT_SNAPSHOT_INTERVAL,
           on_snapshot: Optional[SnapshotCallback] = None,
           workers: int = DEFAULT_WORKERS,
           seed: int = None) -> PixelBuffer:
    config = RenderConfig(width=width, height=height, samples=samples, workers=workers,
                          snapshot_interval=snapshot_interval, seed=seed)
    return Renderer(config).render(camera, on_snapshot)
