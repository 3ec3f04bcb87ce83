# renderer/raytracer.py
from typing import Callable, Optional
import numpy as np
from camera.camera import Camera
from core.color import Color
from geometry.world import Scene
from .image import ImageBuffer
from .shading import (AMBIENT, BASE_WEIGHT, LIGHT_DIRECTION, REFLECTED_ALBEDO,
                      REFLECTION_BIAS, REFLECTION_WEIGHT, shade)

BACKENDS = ("python", "numba")

class RenderCancelled(Exception):
    """Raised when a render is stopped between rows by its cancel callback."""
    def __init__(self, rows_done: int):
        super().__init__(f"Render cancelled after {rows_done} rows")
        self.rows_done = rows_done

class Renderer:
    """
    Casts one primary ray per pixel, shades the closest hit and writes the
    result into a pixel sink. The scene is only read, never modified.
    """
    def __init__(self, width: int, height: int, backend: str = "python"):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
        self.width = width
        self.height = height
        self.backend = backend

    def render(self, camera_position, look_at, scene: Scene, sink=None,
               should_cancel: Optional[Callable[[], bool]] = None):
        """
        Renders the scene and returns the sink. ``sink`` needs only a
        ``set_pixel(x, y, color)`` method and defaults to a new ImageBuffer.
        ``should_cancel`` is polled before each row.
        """
        camera = Camera(camera_position, look_at, self.width, self.height)
        if sink is None:
            sink = ImageBuffer(self.width, self.height)

        if self.backend == "numba":
            return self._render_numba(camera, scene, sink, should_cancel)

        for y in range(self.height):
            if should_cancel is not None and should_cancel():
                raise RenderCancelled(y)
            for x in range(self.width):
                ray = camera.get_ray(x, y)
                rec, obj = scene.closest_hit(ray)
                sink.set_pixel(x, y, shade(scene, ray, rec, obj))
        return sink

    def _render_numba(self, camera: Camera, scene: Scene, sink, should_cancel):
        from .kernels import flatten_scene, render_kernel

        # The compiled kernel runs all rows at once, so cancellation is only
        # honoured before it starts.
        if should_cancel is not None and should_cancel():
            raise RenderCancelled(0)

        arrays = flatten_scene(scene)
        output = np.zeros((self.width, self.height, 3), dtype=np.float64)
        render_kernel(
            self.width, self.height,
            _array3(camera.position), _array3(camera.forward),
            _array3(camera.right), _array3(camera.up),
            camera.half_width, camera.half_height,
            arrays.vertices, arrays.normals, arrays.ranges, arrays.colors,
            _array3(LIGHT_DIRECTION),
            np.array(AMBIENT.as_tuple(), dtype=np.float64),
            np.array((REFLECTION_BIAS, REFLECTED_ALBEDO, BASE_WEIGHT, REFLECTION_WEIGHT),
                     dtype=np.float64),
            output,
        )

        if isinstance(sink, ImageBuffer):
            sink.pixels[:] = output
            return sink
        for y in range(self.height):
            for x in range(self.width):
                r, g, b = output[x, y]
                sink.set_pixel(x, y, Color(float(r), float(g), float(b)))
        return sink

def _array3(v) -> np.ndarray:
    return np.array((v.x, v.y, v.z), dtype=np.float64)

def render(width: int, height: int, camera_position, look_at, scene: Scene,
           backend: str = "python"):
    """Renders ``scene`` into a new ImageBuffer and returns it."""
    return Renderer(width, height, backend=backend).render(camera_position, look_at, scene)
