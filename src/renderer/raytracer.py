# renderer/raytracer.py
import math
import random
import threading
from typing import List
import numpy as np
from core.errors import RenderError
from core.log import child_logger
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from materials.material import scatter
from renderer.config import RenderConfig
from renderer.tone_mapping import ImageBuffer, finalize_color

logger = child_logger("raytracer")

# Hits closer than this are ignored to avoid self-intersection ("shadow acne")
T_MIN = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def sky_color(ray: Ray) -> Vector3:
    """Vertical gradient from white at the horizon to light blue overhead."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Vector3:
    """
    Radiance arriving along ray. Each bounce multiplies the path throughput
    by the material attenuation and spends one unit of depth; a path that
    runs out of depth or is absorbed contributes black.
    """
    throughput = WHITE
    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return throughput * sky_color(ray)

        scattered = scatter(rec.material, ray, rec, rng)
        if scattered is None:
            return BLACK
        attenuation, ray = scattered
        throughput = throughput * attenuation
        depth -= 1

    return BLACK

def partition_rows(height: int, workers: int) -> List[range]:
    """
    Split rows [0, height) into contiguous bands, one per worker. The first
    height % workers bands get one extra row so every row is covered.
    """
    workers = max(1, min(workers, height))
    base, extra = divmod(height, workers)
    bands = []
    start = 0
    for i in range(workers):
        size = base + (1 if i < extra else 0)
        bands.append(range(start, start + size))
        start += size
    return bands

def row_seed(seed: int, row: int) -> int:
    """Deterministic per-row seed; independent of how rows are split."""
    return int(np.random.SeedSequence([seed, row]).generate_state(1)[0])

class RenderProgress:
    """Completed-row counter shared by all workers."""

    def __init__(self, total_rows: int):
        self.total = total_rows
        self.completed = 0
        self._lock = threading.Lock()
        self._report_every = max(1, total_rows // 10)

    def advance(self) -> int:
        with self._lock:
            self.completed += 1
            done = self.completed
        logger.debug("Processing row: %d/%d", done, self.total)
        if done % self._report_every == 0 or done == self.total:
            logger.info("Rendered %d/%d rows (%.0f%%)", done, self.total,
                        100.0 * done / self.total)
        return done

class Renderer:
    """
    Renders a world through a camera into an ImageBuffer using a fixed pool
    of worker threads, one contiguous band of rows per thread.
    """
    def __init__(self, config: RenderConfig):
        self.config = config
        self.width = config.image_width
        self.height = config.image_height
        self.samples = config.samples_per_pixel
        self.max_depth = config.max_depth

    def render(self, world: Hittable, camera) -> ImageBuffer:
        buffer = ImageBuffer(self.width, self.height)
        bands = partition_rows(self.height, self.config.thread_count)
        progress = RenderProgress(self.height)
        errors: List[BaseException] = []

        threads = []
        for index, band in enumerate(bands):
            thread = threading.Thread(
                target=self._worker,
                args=(band, world, camera, buffer, progress, errors),
                name=f"render-{index}",
            )
            threads.append(thread)

        logger.info("Rendering %dx%d, %d samples, depth %d, %d threads",
                    self.width, self.height, self.samples, self.max_depth, len(threads))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        if errors:
            raise RenderError(f"render worker failed: {errors[0]!r}") from errors[0]
        return buffer

    def _worker(self, band: range, world, camera, buffer: ImageBuffer,
                progress: RenderProgress, errors: List[BaseException]):
        try:
            rng = None if self.config.seed is not None else random.Random()
            for row in band:
                if self.config.seed is not None:
                    rng = random.Random(row_seed(self.config.seed, row))
                self.render_row(row, world, camera, buffer, rng)
                progress.advance()
        except Exception as e:
            logger.exception("Worker for rows %s failed", band)
            errors.append(e)

    def render_row(self, row: int, world, camera, buffer: ImageBuffer, rng):
        """Shade one row of the buffer. Row 0 is the top of the image."""
        # v grows upwards, buffer rows grow downwards
        j = self.height - 1 - row
        u_den = max(self.width - 1, 1)
        v_den = max(self.height - 1, 1)
        for i in range(self.width):
            pixel_color = BLACK
            for _ in range(self.samples):
                u = (i + rng.random()) / u_den
                v = (j + rng.random()) / v_den
                ray = camera.get_ray(u, v, rng)
                pixel_color = pixel_color + ray_color(ray, world, self.max_depth, rng)
            buffer.set_pixel(row, i, finalize_color(pixel_color, self.samples))
