from geometry.hittable import HitRecord, Hittable
from geometry.mesh import EPSILON, Traceable, Triangle
from geometry.world import Scene

__all__ = ["EPSILON", "HitRecord", "Hittable", "Scene", "Traceable", "Triangle"]
