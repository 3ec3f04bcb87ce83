# geometry/mesh.py
from typing import Iterable, List, Optional, Sequence
from core.vector import Vector3
from core.color import Color
from core.ray import Ray
from core.transform import Transform
from core.utils import as_vector
from geometry.hittable import Hittable, HitRecord

# Rejects near-parallel rays and hits at (or behind) the ray origin.
EPSILON = 1e-7

class Triangle(Hittable):
    """A single world-space triangle with a precomputed flat face normal."""
    __slots__ = ("v0", "v1", "v2", "normal")

    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        # Counter-clockwise winding gives the outward normal. Degenerate
        # triangles end up with the zero vector.
        self.normal = (v1 - v0).cross(v2 - v0).normalize()

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        # Möller–Trumbore intersection algorithm
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)

        # Ray is parallel to the triangle (or the triangle is degenerate)
        if abs(a) < EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * edge2.dot(q)
        if t <= EPSILON:
            return None

        return HitRecord(t, ray.at(t), self.normal)

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"

class Traceable:
    """
    One renderable object: a flat color and a list of triangles baked into
    world space with the given transform at construction time.
    """
    def __init__(self, color: Color, triangles: Iterable[Sequence],
                 transform: Optional[Transform] = None):
        self.color = color
        transform = transform if transform is not None else Transform.identity()
        self.triangles: List[Triangle] = [
            Triangle(*(transform.apply_point(as_vector(v)) for v in tri))
            for tri in triangles
        ]

    def closest_hit(self, ray: Ray) -> Optional[HitRecord]:
        closest = None
        for triangle in self.triangles:
            rec = triangle.hit(ray)
            if rec is not None and (closest is None or rec.distance < closest.distance):
                closest = rec
        return closest

    def __len__(self) -> int:
        return len(self.triangles)

    def __repr__(self) -> str:
        return f"Traceable({self.color!r}, {len(self.triangles)} triangles)"
