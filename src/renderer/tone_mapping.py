# renderer/tone_mapping.py
import math
from typing import Tuple
import numpy as np
from core.utils import clamp
from core.vector import Vector3

def finalize_color(accumulated: Vector3, samples: int) -> Tuple[int, int, int]:
    """
    Turn a sum of sample radiances into an 8-bit pixel: average over the
    samples, gamma-correct with gamma=2 (square root) and scale to [0, 255].
    """
    scale = 1.0 / samples
    return tuple(int(256 * clamp(math.sqrt(max(c * scale, 0.0)), 0.0, 0.999))
                 for c in accumulated)

class ImageBuffer:
    """
    Finished pixels, row-major, row 0 is the top of the image.
    Workers write disjoint rows, so no locking is needed.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def set_pixel(self, row: int, col: int, rgb: Tuple[int, int, int]):
        self.pixels[row, col] = rgb

    def get_pixel(self, row: int, col: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[row, col]
        return int(r), int(g), int(b)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()
