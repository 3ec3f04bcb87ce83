# core/transform.py
import math
from typing import Sequence
import numpy as np
from core.vector import Vector3

class Transform:
    """
    Affine 4x4 transform stored as a numpy matrix (column vectors, so
    ``a @ b`` applies ``b`` first).
    """
    def __init__(self, matrix=None):
        if matrix is None:
            matrix = np.identity(4, dtype=np.float64)
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"Transform matrix must be 4x4, got shape {matrix.shape}")
        self.matrix = matrix

    @staticmethod
    def identity() -> "Transform":
        return Transform()

    @staticmethod
    def translation(x: float, y: float, z: float) -> "Transform":
        m = np.identity(4)
        m[:3, 3] = (x, y, z)
        return Transform(m)

    @staticmethod
    def scaling(x: float, y: float, z: float) -> "Transform":
        return Transform(np.diag((x, y, z, 1.0)))

    @staticmethod
    def rotation_x(degrees: float) -> "Transform":
        c, s = _cos_sin(degrees)
        m = np.identity(4)
        m[1, 1], m[1, 2] = c, -s
        m[2, 1], m[2, 2] = s, c
        return Transform(m)

    @staticmethod
    def rotation_y(degrees: float) -> "Transform":
        c, s = _cos_sin(degrees)
        m = np.identity(4)
        m[0, 0], m[0, 2] = c, s
        m[2, 0], m[2, 2] = -s, c
        return Transform(m)

    @staticmethod
    def rotation_z(degrees: float) -> "Transform":
        c, s = _cos_sin(degrees)
        m = np.identity(4)
        m[0, 0], m[0, 1] = c, -s
        m[1, 0], m[1, 1] = s, c
        return Transform(m)

    @staticmethod
    def from_trs(translation: Sequence[float] = (0.0, 0.0, 0.0),
                 rotation: Sequence[float] = (0.0, 0.0, 0.0),
                 scale: Sequence[float] = (1.0, 1.0, 1.0)) -> "Transform":
        """
        Builds translate * rotate(z, y, x order applied as x first) * scale.
        Rotation angles are in degrees.
        """
        rx, ry, rz = rotation
        return (Transform.translation(*translation)
                @ Transform.rotation_z(rz)
                @ Transform.rotation_y(ry)
                @ Transform.rotation_x(rx)
                @ Transform.scaling(*scale))

    def __matmul__(self, other: "Transform") -> "Transform":
        return Transform(self.matrix @ other.matrix)

    def is_identity(self) -> bool:
        return np.array_equal(self.matrix, np.identity(4))

    def apply_point(self, p: Vector3) -> Vector3:
        if self.is_identity():
            return p
        x, y, z, w = self.matrix @ np.array([p.x, p.y, p.z, 1.0])
        if w != 1.0 and w != 0.0:
            x, y, z = x / w, y / w, z / w
        return Vector3(float(x), float(y), float(z))

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()})"

def _cos_sin(degrees: float):
    r = math.radians(degrees)
    return math.cos(r), math.sin(r)
