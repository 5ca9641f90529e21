# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Thin-lens camera. Everything is fixed at construction so the camera can
    be shared read-only between render workers.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0):
        self.origin = look_from
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0

        theta = degrees_to_radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (look_from - look_at).normalize()
        if self.w.near_zero():
            # No view direction; look down -z
            self.w = Vector3(0, 0, 1)
        u = vup.cross(self.w)
        if u.near_zero():
            # vup parallel to the view direction; any perpendicular axis will do
            fallback = Vector3(1, 0, 0) if abs(self.w.x) < 0.9 else Vector3(0, 0, 1)
            u = fallback.cross(self.w)
        self.u = u.normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance so the image plane is the focus plane
        self.horizontal = self.u * (viewport_width * focus_dist)
        self.vertical = self.v * (viewport_height * focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through (s, t) on the image plane with depth of field."""
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)
