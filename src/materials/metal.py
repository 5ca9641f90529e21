# materials/metal.py
from dataclasses import dataclass
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord

@dataclass(frozen=True)
class Metal:
    """
    Reflective material. fuzz in [0, 1] blurs the mirror reflection.
    """
    albedo: Vector3
    fuzz: float = 0.0

    def __post_init__(self):
        # Frozen dataclass: clamp through object.__setattr__
        object.__setattr__(self, "fuzz", min(max(self.fuzz, 0.0), 1.0))

def scatter_metal(mat: Metal, ray_in: Ray, rec: HitRecord,
                  rng) -> Optional[Tuple[Vector3, Ray]]:
    reflected = reflect(ray_in.direction.normalize(), rec.normal)
    scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * mat.fuzz)

    if scattered.direction.dot(rec.normal) > 0:
        return mat.albedo, scattered

    return None  # Absorb the ray if it does not scatter away from the surface
