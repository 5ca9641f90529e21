# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Optional, List
from core.ray import Ray

class HittableList(Hittable):
    """
    An ordered list of Hittable objects queried as a single surface.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Narrowing the upper bound means a later object only wins when it
        # is strictly closer, so the result does not depend on list order.
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
