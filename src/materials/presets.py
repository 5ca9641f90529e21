# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

GLASS_INDEX = 1.5

class ColorPresets:
    """Colors used by the demo scenes."""

    GROUND_GRAY = Vector3(0.5, 0.5, 0.5)
    BROWN = Vector3(0.4, 0.2, 0.1)
    BRONZE = Vector3(0.7, 0.6, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class MetalPresets:

    @staticmethod
    def polished_bronze() -> Metal:
        return Metal(ColorPresets.BRONZE, fuzz=0.0)

class DielectricPresets:

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(GLASS_INDEX)
