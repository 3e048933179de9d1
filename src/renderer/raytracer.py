# renderer/raytracer.py
import math
import random
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, List, Optional, Tuple

import numpy as np

from core.errors import ConfigurationError
from core.utils import spawn_seeds
from core.vector import Vector3
from renderer.integrator import ray_color

Tile = Tuple[int, int, int, int]  # x0, x1, y0, y1 in image rows (row 0 on top)

# Scene shared by every tile of a worker process, set by _init_worker.
_worker_scene = None

def make_tiles(width: int, height: int, tile: int) -> List[Tile]:
    tiles = []
    for y in range(0, height, tile):
        for x in range(0, width, tile):
            tiles.append((x, min(x + tile, width), y, min(y + tile, height)))
    return tiles

def render_tile(camera, world, bounds: Tile, width: int, height: int,
                samples_per_pixel: int, max_depth: int, seed: int,
                background: Optional[Vector3] = None) -> np.ndarray:
    """
    Averages `samples_per_pixel` jittered integrator calls for every pixel of
    one tile and returns the linear radiance block (rows top to bottom).
    """
    x0, x1, y0, y1 = bounds
    rng = random.Random(seed)
    block = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.float32)
    s_scale = 1.0 / max(width - 1, 1)
    t_scale = 1.0 / max(height - 1, 1)
    inv_samples = 1.0 / samples_per_pixel

    for row in range(y0, y1):
        j = height - 1 - row  # Camera t runs bottom to top
        for i in range(x0, x1):
            r = g = b = 0.0
            for _ in range(samples_per_pixel):
                s = (i + rng.random()) * s_scale
                t = (j + rng.random()) * t_scale
                ray = camera.get_ray(s, t, rng)
                col = ray_color(ray, world, max_depth, rng, background)
                r += col.x
                g += col.y
                b += col.z
            block[row - y0, i - x0] = (r * inv_samples, g * inv_samples, b * inv_samples)
    return block

def _init_worker(camera, world, background):
    global _worker_scene
    _worker_scene = (camera, world, background)

def _render_tile_in_worker(bounds: Tile, width: int, height: int,
                           samples_per_pixel: int, max_depth: int, seed: int):
    camera, world, background = _worker_scene
    block = render_tile(camera, world, bounds, width, height,
                        samples_per_pixel, max_depth, seed, background)
    return bounds, block

class Renderer:
    """
    CPU path tracer front end.

    Splits the image into square tiles and renders each with its own
    generator, seeded from `seed`, so a fixed seed reproduces the same image
    regardless of how many worker processes take part.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 max_depth: int = 8, workers: int = 1, tile: int = 16,
                 seed: Optional[int] = None, background: Optional[Vector3] = None):
        for name, value in (("width", width), ("height", height),
                            ("samples_per_pixel", samples_per_pixel),
                            ("max_depth", max_depth), ("workers", workers),
                            ("tile", tile)):
            if not isinstance(value, (int, np.integer)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.tile = tile
        self.seed = seed
        self.background = background

    def render(self, camera, world,
               progress: Optional[Callable[[int, int], None]] = None) -> np.ndarray:
        """
        Returns the averaged linear radiance as a float32 array of shape
        (height, width, 3), row 0 being the top of the image.
        """
        tiles = make_tiles(self.width, self.height, self.tile)
        seeds = spawn_seeds(self.seed, len(tiles))
        image = np.zeros((self.height, self.width, 3), dtype=np.float32)

        if self.workers == 1:
            for done, (bounds, seed) in enumerate(zip(tiles, seeds), start=1):
                x0, x1, y0, y1 = bounds
                image[y0:y1, x0:x1] = render_tile(
                    camera, world, bounds, self.width, self.height,
                    self.samples_per_pixel, self.max_depth, seed, self.background)
                if progress is not None:
                    progress(done, len(tiles))
            return image

        with ProcessPoolExecutor(max_workers=self.workers,
                                 initializer=_init_worker,
                                 initargs=(camera, world, self.background)) as exe:
            futures = [exe.submit(_render_tile_in_worker, bounds, self.width, self.height,
                                  self.samples_per_pixel, self.max_depth, seed)
                       for bounds, seed in zip(tiles, seeds)]
            for done, future in enumerate(as_completed(futures), start=1):
                (x0, x1, y0, y1), block = future.result()
                image[y0:y1, x0:x1] = block
                if progress is not None:
                    progress(done, len(tiles))
        return image

    @property
    def tile_count(self) -> int:
        return math.ceil(self.width / self.tile) * math.ceil(self.height / self.tile)
