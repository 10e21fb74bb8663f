# renderer/raytracer.py
import os
import sys
from concurrent.futures import FIRST_EXCEPTION, ProcessPoolExecutor, ThreadPoolExecutor, wait
from typing import List, Optional, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.errors import ConfigurationError, RenderError
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.color import encode_pixels
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.tiles import Tile, partition

EXECUTORS = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}

DEFAULT_TILE_GRID = (4, 4)


def render_tile(tile: Tile, camera: Camera, world: Hittable, seed_seq) -> np.ndarray:
    """
    Render one tile into a private (h, w, 3) uint8 buffer.

    `camera` must already be initialized; it and `world` are only read.
    `seed_seq` seeds the tile's own numpy Generator, so the result depends on
    nothing but the tile, the scene and the seed.
    """
    if not camera.initialized:
        raise ConfigurationError("camera must be initialized before rendering tiles")
    rng = np.random.default_rng(seed_seq)
    linear = np.zeros((tile.height, tile.width, 3), dtype=np.float64)
    spp = camera.samples_per_pixel
    max_depth = camera.max_depth
    scale = camera.pixel_samples_scale

    for i, j in tile.pixels():
        r = g = b = 0.0
        for _ in range(spp):
            ray = camera.get_ray(i, j, rng)
            color = ray_color(ray, world, 0, max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        linear[j - tile.y0, i - tile.x0] = (r * scale, g * scale, b * scale)

    return encode_pixels(linear)


class Renderer:
    """
    Renders a scene by splitting the image into a grid of tiles and tracing
    every tile as an independent task.

    Parameters:
        camera: configured Camera; initialized (and validated) by render()
        tiles: (rows, cols) of the tile grid
        workers: pool size, defaults to the CPU count
        executor: "process" or "thread"
        seed: base seed for the per-tile random streams; None draws fresh entropy
        verbose: print progress to stderr
    """

    def __init__(self, camera: Camera, tiles: Tuple[int, int] = DEFAULT_TILE_GRID,
                 workers: Optional[int] = None, executor: str = "process",
                 seed: Optional[int] = None, verbose: bool = True):
        self.camera = camera
        self.tiles = tiles
        self.workers = workers
        self.executor = executor
        self.seed = seed
        self.verbose = verbose

    def validate(self):
        rows, cols = self.tiles
        if rows <= 0 or cols <= 0:
            raise ConfigurationError(f"tile grid must be positive, got {rows}x{cols}")
        if self.workers is not None and self.workers <= 0:
            raise ConfigurationError(f"workers must be positive, got {self.workers}")
        if self.executor not in EXECUTORS:
            raise ConfigurationError(
                f"executor must be one of {sorted(EXECUTORS)}, got {self.executor!r}")
        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(f"seed must be non-negative, got {self.seed}")

    def _log(self, message: str, end: str = "\n"):
        if self.verbose:
            print(message, end=end, file=sys.stderr, flush=True)

    def plan(self) -> List[Tile]:
        """Validate everything and return the tiles that will be rendered."""
        self.validate()
        self.camera.initialize()
        rows, cols = self.tiles
        return partition(self.camera.image_width, self.camera.image_height, rows, cols)

    def render(self, world: Hittable) -> np.ndarray:
        """
        Render `world` and return the image as an (height, width, 3) uint8 array.
        Raises ConfigurationError before any work starts, or RenderError if
        a tile fails; no partial image is ever returned.
        """
        tiles = self.plan()
        camera = self.camera
        seeds = np.random.SeedSequence(self.seed).spawn(len(tiles))
        workers = self.workers or os.cpu_count() or 1

        self._log("\n=== Rendering ===")
        self._log(f"Resolution: {camera.image_width}x{camera.image_height}")
        self._log(f"Samples per pixel: {camera.samples_per_pixel}")
        self._log(f"Max depth: {camera.max_depth}")
        self._log(f"Tiles: {len(tiles)} on {workers} {self.executor} worker(s)")

        buffers = self._dispatch(tiles, seeds, world, workers)

        image = np.zeros((camera.image_height, camera.image_width, 3), dtype=np.uint8)
        for tile, buffer in zip(tiles, buffers):
            image[tile.y0:tile.y1, tile.x0:tile.x1] = buffer
        self._log("\nDone.")
        return image

    def _dispatch(self, tiles, seeds, world, workers) -> List[np.ndarray]:
        buffers: List[Optional[np.ndarray]] = [None] * len(tiles)
        pool_cls = EXECUTORS[self.executor]
        with pool_cls(max_workers=min(workers, len(tiles))) as pool:
            futures = {
                pool.submit(render_tile, tile, self.camera, world, seed): tile
                for tile, seed in zip(tiles, seeds)
            }
            pending = set(futures)
            while pending:
                done, pending = wait(pending, return_when=FIRST_EXCEPTION)
                for future in done:
                    tile = futures[future]
                    exc = future.exception()
                    if exc is not None:
                        for other in pending:
                            other.cancel()
                        raise RenderError(f"tile {tile.index} {tile} failed: {exc}", tile=tile) from exc
                    buffers[tile.index] = future.result()
                self._log(f"\rTiles remaining: {len(pending)} ", end="")
        return buffers


def render(camera: Camera, world: Hittable, **options) -> np.ndarray:
    """Convenience wrapper: Renderer(camera, **options).render(world)."""
    return Renderer(camera, **options).render(world)
