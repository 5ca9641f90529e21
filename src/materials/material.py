# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.lambertian import Lambertian, scatter_lambertian
from materials.metal import Metal, scatter_metal
from materials.dielectric import Dielectric, scatter_dielectric

# The set of material kinds is closed.
Material = Union[Lambertian, Metal, Dielectric]

def scatter(material: Material, ray_in: Ray, rec: HitRecord,
            rng) -> Optional[Tuple[Vector3, Ray]]:
    """
    Computes the attenuation and scattered ray for a hit.
    Returns (attenuation, scattered_ray), or None if the ray is absorbed.
    """
    if isinstance(material, Lambertian):
        return scatter_lambertian(material, ray_in, rec, rng)
    if isinstance(material, Metal):
        return scatter_metal(material, ray_in, rec, rng)
    if isinstance(material, Dielectric):
        return scatter_dielectric(material, ray_in, rec, rng)
    raise TypeError(f"unknown material kind: {type(material).__name__}")
