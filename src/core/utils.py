# core/utils.py
from core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def as_vector(value) -> Vector3:
    """
    Accepts a Vector3 or any 3-sequence of numbers and returns a Vector3.
    """
    if isinstance(value, Vector3):
        return value
    x, y, z = value
    return Vector3(float(x), float(y), float(z))
