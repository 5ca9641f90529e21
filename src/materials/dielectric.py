# src/materials/dielectric.py
import math
from dataclasses import dataclass
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord

CLEAR = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

@dataclass(frozen=True)
class Dielectric:
    ref_idx: float

def scatter_dielectric(mat: Dielectric, ray_in: Ray, rec: HitRecord,
                       rng) -> Optional[Tuple[Vector3, Ray]]:
    # Determine if we're entering or exiting the material
    ratio = 1.0 / mat.ref_idx if rec.front_face else mat.ref_idx

    unit_direction = ray_in.direction.normalize()

    cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
    sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

    cannot_refract = ratio * sin_theta > 1.0

    # A draw equal to the reflectance refracts.
    if cannot_refract or schlick(cos_theta, ratio) > rng.random():
        direction = reflect(unit_direction, rec.normal)
    else:
        direction = refract(unit_direction, rec.normal, ratio)

    return CLEAR, Ray(rec.p, direction)
