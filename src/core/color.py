# core/color.py
from typing import Tuple

class Color:
    """
    Linear RGB color. Channels are unbounded until clamp() is applied.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        # Component-wise (modulation by another color).
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def clamp(self) -> "Color":
        return Color(_clamp01(self.r), _clamp01(self.g), _clamp01(self.b))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
