# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection. A miss is represented by
    ``None`` rather than a record, so a record always describes a real hit.
    """
    __slots__ = ("distance", "point", "normal")

    def __init__(self, distance: float, point: Vector3, normal: Vector3):
        self.distance = distance  # Ray parameter t at intersection
        self.point = point        # origin + direction * distance
        self.normal = normal      # Flat face normal, not flipped toward the ray

    def __repr__(self) -> str:
        return f"HitRecord(distance={self.distance}, point={self.point!r}, normal={self.normal!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    __slots__ = ()

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
