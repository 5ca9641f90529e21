# materials/lambertian.py
from dataclasses import dataclass
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord

@dataclass(frozen=True)
class Lambertian:
    """
    Diffuse material. Scatters around the surface normal and tints the ray
    by its albedo.
    """
    albedo: Vector3

def scatter_lambertian(mat: Lambertian, ray_in: Ray, rec: HitRecord,
                       rng) -> Optional[Tuple[Vector3, Ray]]:
    """
    Scatter a ray according to a Lambertian reflection model.
    Returns (attenuation, scattered_ray); a diffuse surface never absorbs.
    """
    # Pick a random scatter direction by adding a random unit vector to the normal.
    scatter_direction = rec.normal + random_unit_vector(rng)

    # If scatter_direction is degenerate, just use the normal.
    if scatter_direction.near_zero():
        scatter_direction = rec.normal

    return mat.albedo, Ray(rec.p, scatter_direction)
