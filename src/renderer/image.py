# renderer/image.py
import numpy as np
from PIL import Image
from core.color import Color

class ImageBuffer:
    """
    Pixel sink backed by a float32 numpy array indexed [x, y, channel].
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((width, height, 3), dtype=np.float32)

    def set_pixel(self, x: int, y: int, color: Color):
        self.pixels[x, y] = (color.r, color.g, color.b)

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[x, y]
        return Color(float(r), float(g), float(b))

    def to_uint8(self) -> np.ndarray:
        """Row-major (height, width, 3) 8-bit image, ready for encoding."""
        output = (self.pixels * 255).round().clip(0, 255).astype("uint8")
        return np.ascontiguousarray(output.transpose(1, 0, 2))

    def save(self, path: str):
        Image.fromarray(self.to_uint8()).save(path)
