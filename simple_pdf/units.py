"""
Typed lengths in the PDF user space.

The base unit of the user space is the point (1/72 inch). A `UserSpace` length
always stores its value in points and remembers the unit it was created with,
so that it can be displayed in that unit again.

Lengths can be added, subtracted and divided by each other, and multiplied or
divided by plain numbers, but not multiplied by each other.
"""

from functools import total_ordering
from typing import Type, Union

from fpdf.util import Number, NumberClass, format_number


class LengthUnit:
    "Base class of the units a `UserSpace` length can be expressed in"

    PT_IN_UNIT: float = 1.0
    SYMBOL: str = "pt"


class Points(LengthUnit):
    PT_IN_UNIT = 1.0
    SYMBOL = "pt"


class Millimeters(LengthUnit):
    PT_IN_UNIT = 2.834646
    SYMBOL = "mm"


@total_ordering
class UserSpace:
    __slots__ = ("pt", "unit")

    def __init__(self, value: Number, unit: Type[LengthUnit] = Points) -> None:
        self.pt = float(value) * unit.PT_IN_UNIT
        self.unit = unit

    @classmethod
    def from_pt(cls, pt: Number, unit: Type[LengthUnit] = Points) -> "UserSpace":
        length = cls(0, unit)
        length.pt = float(pt)
        return length

    @classmethod
    def from_px(
        cls, px: Number, dpi: Number, unit: Type[LengthUnit] = Points
    ) -> "UserSpace":
        "Length of `px` device pixels at the given resolution"
        return cls.from_pt(float(px) / float(dpi) * 72, unit)

    @property
    def value(self) -> float:
        "The length expressed in its own unit"
        return self.pt / self.unit.PT_IN_UNIT

    def to(self, unit: Type[LengthUnit]) -> "UserSpace":
        return UserSpace.from_pt(self.pt, unit)

    def to_px(self, dpi: Number) -> int:
        "Number of device pixels covered by this length at the given resolution"
        return round(self.pt / 72 * float(dpi))

    def __add__(self, other: "UserSpace") -> "UserSpace":
        if not isinstance(other, UserSpace):
            return NotImplemented
        return UserSpace.from_pt(self.pt + other.pt, self.unit)

    def __sub__(self, other: "UserSpace") -> "UserSpace":
        if not isinstance(other, UserSpace):
            return NotImplemented
        return UserSpace.from_pt(self.pt - other.pt, self.unit)

    def __mul__(self, factor: Number) -> "UserSpace":
        if isinstance(factor, bool) or not isinstance(factor, NumberClass):
            return NotImplemented
        return UserSpace.from_pt(self.pt * float(factor), self.unit)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["UserSpace", Number]):
        if isinstance(other, UserSpace):
            return self.pt / other.pt
        if isinstance(other, bool) or not isinstance(other, NumberClass):
            return NotImplemented
        return UserSpace.from_pt(self.pt / float(other), self.unit)

    def __neg__(self) -> "UserSpace":
        return UserSpace.from_pt(-self.pt, self.unit)

    def __abs__(self) -> "UserSpace":
        return UserSpace.from_pt(abs(self.pt), self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserSpace):
            return NotImplemented
        return self.pt == other.pt

    def __lt__(self, other: "UserSpace") -> bool:
        if not isinstance(other, UserSpace):
            return NotImplemented
        return self.pt < other.pt

    def __hash__(self) -> int:
        return hash(self.pt)

    def __float__(self) -> float:
        return self.pt

    def __str__(self) -> str:
        return format_number(self.pt)

    def __repr__(self) -> str:
        return f"UserSpace({format_number(self.value)}{self.unit.SYMBOL})"


Length = Union[UserSpace, Number]


def pt(value: Number) -> UserSpace:
    return UserSpace(value, Points)


def mm(value: Number) -> UserSpace:
    return UserSpace(value, Millimeters)


def to_pt(length: Length) -> float:
    "Coerce a plain number (already in points) or a `UserSpace` length to points"
    if isinstance(length, UserSpace):
        return length.pt
    return float(length)
