# geometry/world.py
from typing import Iterable, List, Optional, Tuple
from core.ray import Ray
from geometry.hittable import HitRecord
from geometry.mesh import Traceable

class Scene:
    """
    An ordered list of Traceable objects. Built once, then only read while
    rendering. Intersection is a linear scan over every object.
    """
    def __init__(self, objects: Iterable[Traceable] = ()):
        self.objects: List[Traceable] = list(objects)

    def add(self, obj: Traceable):
        self.objects.append(obj)

    @property
    def triangle_count(self) -> int:
        return sum(len(obj.triangles) for obj in self.objects)

    def closest_hit(self, ray: Ray) -> Tuple[Optional[HitRecord], Optional[Traceable]]:
        """
        Nearest hit over all objects, with the object that produced it.
        On equal distance the object earlier in the list wins.
        """
        hit_record = None
        hit_object = None
        for obj in self.objects:
            rec = obj.closest_hit(ray)
            if rec is not None and (hit_record is None or rec.distance < hit_record.distance):
                hit_record = rec
                hit_object = obj
        return hit_record, hit_object

    def first_hit(self, ray: Ray) -> Optional[Traceable]:
        """
        The first object in list order that the ray hits at all. This is not
        necessarily the nearest one; reflection rays use it.
        """
        for obj in self.objects:
            if obj.closest_hit(ray) is not None:
                return obj
        return None

    def __len__(self) -> int:
        return len(self.objects)
