# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import as_vector

DEFAULT_FOV = 60.0  # field of view, degrees
WORLD_UP = Vector3(0.0, 1.0, 0.0)
# Reference axis used instead of WORLD_UP when looking straight up or down.
FALLBACK_UP = Vector3(0.0, 0.0, 1.0)

class Camera:
    """
    Pinhole camera producing one primary ray per pixel center.
    """
    def __init__(self, position, look_at, width: int, height: int, fov: float = DEFAULT_FOV):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        position = as_vector(position)
        look_at = as_vector(look_at)
        if position == look_at:
            raise ValueError(f"Camera position and look-at target coincide at {position}")
        self.position = position
        self.look_at = look_at
        self.width = width
        self.height = height
        self.fov = fov
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.forward = (self.look_at - self.position).normalize()

        right = self.forward.cross(WORLD_UP)
        if right.length() < 1e-12:
            right = self.forward.cross(FALLBACK_UP)
        self.right = right.normalize()
        self.up = self.right.cross(self.forward)

        # Half extents of the image plane at distance 1; fov spans the width.
        self.half_width = math.tan(math.radians(self.fov) / 2)
        self.half_height = self.half_width * (self.height / self.width)

    def get_ray(self, x: int, y: int) -> Ray:
        """Primary ray through the center of pixel (x, y); row 0 is the top."""
        nx = ((x + 0.5) / self.width) * 2 - 1
        ny = 1 - ((y + 0.5) / self.height) * 2
        direction = (self.forward
                     + self.right * (nx * self.half_width)
                     + self.up * (ny * self.half_height))
        return Ray(self.position, direction.normalize())
