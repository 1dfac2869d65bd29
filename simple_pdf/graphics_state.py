"""
Values of the graphics state parameters: colors and transformation matrices.

The contents of this module are serialized by `Canvas` and `TextObject`
into content stream operators.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from fpdf.drawing_primitives import Transform
from fpdf.util import format_number

from .units import Length, to_pt


@dataclass(frozen=True, slots=True)
class Color:
    """
    A color in the DeviceRGB or DeviceGray color space,
    with components expressed as integers between 0 and 255.
    """

    components: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.components) not in (1, 3):
            raise ValueError(
                f"A color has 1 (gray) or 3 (RGB) components, got {self.components}"
            )
        for component in self.components:
            if isinstance(component, bool) or not isinstance(component, int):
                raise ValueError(f"Color components must be integers, got {component!r}")
            if not 0 <= component <= 255:
                raise ValueError(
                    f"Color components must be between 0 and 255, got {component}"
                )

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        return cls((red, green, blue))

    @classmethod
    def gray(cls, gray: int) -> "Color":
        return cls((gray,))

    @property
    def is_gray(self) -> bool:
        return len(self.components) == 1

    def serialize(self) -> str:
        "Normalized components, e.g. `1 0.5 0`"
        return " ".join(format_number(c / 255) for c in self.components)

    def stroke_operator(self) -> str:
        return f"{self.serialize()} {'G' if self.is_gray else 'RG'}"

    def fill_operator(self) -> str:
        return f"{self.serialize()} {'g' if self.is_gray else 'rg'}"


@dataclass(frozen=True, slots=True)
class Matrix:
    """
    A 2D affine transformation `[a b c d e f]`, as accepted by the `cm` operator.

    Points are row vectors: `m1 * m2` is the transformation that applies `m1` first,
    then `m2`.
    """

    transform: Transform

    @classmethod
    def identity(cls) -> "Matrix":
        return cls(Transform.identity())

    @classmethod
    def translate(cls, dx: Length, dy: Length) -> "Matrix":
        return cls(Transform.translation(x=to_pt(dx), y=to_pt(dy)))

    @classmethod
    def rotate(cls, alpha: float) -> "Matrix":
        "Counter-clockwise rotation by `alpha` radians"
        cos, sin = math.cos(alpha), math.sin(alpha)
        return cls(Transform(cos, sin, -sin, cos, 0, 0))

    @classmethod
    def rotate_deg(cls, alpha: float) -> "Matrix":
        return cls.rotate(math.radians(alpha))

    @classmethod
    def scale(cls, sx: float, sy: float) -> "Matrix":
        return cls(Transform.scaling(x=sx, y=sy))

    @classmethod
    def uniform_scale(cls, scale: float) -> "Matrix":
        return cls.scale(scale, scale)

    @classmethod
    def skew(cls, alpha: float, beta: float) -> "Matrix":
        "Skew the x axis by `alpha` and the y axis by `beta` radians"
        return cls(Transform(1, math.tan(alpha), math.tan(beta), 1, 0, 0))

    @property
    def v(self) -> Tuple[float, float, float, float, float, float]:
        t = self.transform
        return (t.a, t.b, t.c, t.d, t.e, t.f)

    def __mul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(self.transform @ other.transform)

    def is_close(self, other: "Matrix", rel_tol: float = 1e-6) -> bool:
        "Compare with a tolerance relative to the largest coefficient"
        tolerance = rel_tol * max(abs(x) for x in self.v + other.v)
        return all(abs(x - y) <= tolerance for x, y in zip(self.v, other.v))

    def serialize(self) -> str:
        return " ".join(format_number(x) for x in self.v)

    def __str__(self) -> str:
        return self.serialize()
