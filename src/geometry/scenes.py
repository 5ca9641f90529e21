# src/geometry/scenes.py
from core.vector import Vector3
from core.utils import random_vector
from core.log import child_logger
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import ColorPresets, MetalPresets, DielectricPresets, GLASS_INDEX

logger = child_logger("scenes")

# Small spheres are skipped near this point so they don't overlap the metal sphere.
FEATURE_POINT = Vector3(4, 0.2, 0)
SMALL_RADIUS = 0.2

def random_scene(rng, grid_extent: int = 3) -> HittableList:
    """
    Ground sphere, a grid of small spheres with random materials, and three
    large feature spheres. Layout is fixed; materials come from rng.
    """
    world = HittableList()

    ground_material = ColorPresets.matte(ColorPresets.GROUND_GRAY)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ground_material))

    for a in range(-grid_extent, grid_extent):
        for b in range(-grid_extent, grid_extent):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), SMALL_RADIUS, b + 0.9 * rng.random())

            if (center - FEATURE_POINT).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(rng) * random_vector(rng)
                sphere_material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                sphere_material = Metal(albedo, fuzz)
            else:
                # glass
                sphere_material = Dielectric(GLASS_INDEX)
            world.add(Sphere(center, SMALL_RADIUS, sphere_material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.polished_bronze()))

    logger.info("Built random scene with %d spheres", len(world))
    return world

def single_sphere_scene() -> HittableList:
    """One diffuse sphere of radius 0.5 at the origin, nothing else."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, 0), 0.5, ColorPresets.matte(ColorPresets.GROUND_GRAY)))
    logger.info("Built single sphere scene")
    return world
