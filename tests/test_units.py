"""
Tests for typed lengths.
"""

import pytest

from simple_pdf import Millimeters, Points, UserSpace, mm, pt
from simple_pdf.units import to_pt


class TestArithmetic:
    def test_addition_keeps_left_unit(self):
        length = pt(1) + mm(1)
        assert length.unit is Points
        assert length.pt == pytest.approx(3.834646)
        assert (mm(1) + pt(1)).unit is Millimeters

    def test_subtraction(self):
        assert (mm(10) - mm(4)).value == pytest.approx(6)
        assert pt(1) - pt(3) == pt(-2)

    def test_ratio_of_lengths_is_a_number(self):
        assert mm(10) / mm(5) == pytest.approx(2.0)
        assert isinstance(pt(3) / pt(2), float)

    def test_scaling_by_numbers(self):
        assert pt(3) * 2 == pt(6)
        assert 2 * pt(3) == pt(6)
        assert pt(6) / 4 == pt(1.5)
        assert (mm(10) * 0.5).unit is Millimeters

    def test_negation_and_abs(self):
        assert -pt(2) == pt(-2)
        assert abs(pt(-2)) == pt(2)

    def test_comparisons(self):
        assert pt(1) < pt(2)
        assert mm(1) > pt(2)
        assert pt(72) <= pt(72)
        assert max(pt(1), mm(1), pt(2)) == mm(1)

    def test_lengths_cannot_be_multiplied(self):
        with pytest.raises(TypeError):
            pt(1) * pt(1)

    def test_plain_numbers_cannot_be_added(self):
        with pytest.raises(TypeError):
            pt(1) + 1


class TestConversions:
    def test_millimeters_to_points(self):
        assert mm(1).pt == pytest.approx(2.834646)
        assert mm(210).to(Points).value == pytest.approx(595.27566)

    def test_value_in_own_unit(self):
        assert mm(25.4).value == pytest.approx(25.4)
        assert UserSpace(3, Millimeters) == mm(3)

    def test_pixels(self):
        assert pt(72).to_px(300) == 300
        assert mm(25.4).to_px(96) == 96
        assert UserSpace.from_px(150, 300) == pt(36)

    def test_formatting(self):
        assert str(pt(12.5)) == "12.5"
        assert str(mm(10)) == "28.34646"
        assert repr(mm(10)) == "UserSpace(10mm)"

    def test_to_pt(self):
        assert to_pt(5) == 5.0
        assert to_pt(mm(1)) == pytest.approx(2.834646)
        assert float(pt(3)) == 3.0
