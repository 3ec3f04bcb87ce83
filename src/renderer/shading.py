# renderer/shading.py
from typing import Optional
from core.vector import Vector3
from core.color import Color, BLACK, WHITE
from core.ray import Ray
from core.utils import reflect
from geometry.hittable import HitRecord
from geometry.mesh import Traceable
from geometry.world import Scene

# Directional light, pointing from the light into the scene.
LIGHT_DIRECTION = Vector3(0.6, -1.0, 0.8).normalize()
AMBIENT = Color(0.2, 0.2, 0.2)

REFLECTION_BIAS = 0.001
REFLECTED_ALBEDO = 0.5
BASE_WEIGHT = 0.8
REFLECTION_WEIGHT = 0.2

def diffuse_intensity(normal: Vector3) -> float:
    """Lambert term for the directional light. No shadow test."""
    return max(0.0, -LIGHT_DIRECTION.dot(normal))

def reflection_color(scene: Scene, ray: Ray, rec: HitRecord) -> Color:
    """
    Single mirror bounce. Takes the color of the first object in scene
    order that the reflected ray hits, which is not necessarily the nearest.
    """
    direction = reflect(ray.direction, rec.normal)
    origin = rec.point + rec.normal * REFLECTION_BIAS
    obj = scene.first_hit(Ray(origin, direction))
    if obj is None:
        return BLACK
    return obj.color * REFLECTED_ALBEDO

def shade(scene: Scene, ray: Ray, rec: Optional[HitRecord], obj: Optional[Traceable]) -> Color:
    """
    Ambient + diffuse base color blended with one reflection bounce,
    clamped to [0, 1]. Misses get the ambient background.
    """
    if rec is None:
        return AMBIENT.clamp()

    base = obj.color * (AMBIENT + WHITE * diffuse_intensity(rec.normal))
    reflected = reflection_color(scene, ray, rec)
    return (base * BASE_WEIGHT + reflected * REFLECTION_WEIGHT).clamp()
