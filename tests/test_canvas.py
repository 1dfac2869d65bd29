"""
Tests for the content stream operators written by Canvas and TextObject.
"""

import re

import pytest

from simple_pdf import (
    BuiltinFont,
    Color,
    Matrix,
    PDFException,
    StrokeCapStyle,
    StrokeJoinStyle,
    TextMode,
    mm,
    pt,
)

from .pdf_inspect import render_single_page


def content_of(draw, **pdf_kwargs):
    _, stream = render_single_page(draw, **pdf_kwargs)
    return stream


# --------------------------------------------------------------------------- #
# Path & graphics state operators
# --------------------------------------------------------------------------- #

class TestPathOperators:
    def test_rectangle(self):
        assert content_of(lambda c: c.rectangle(10, 20, 30.5, 40)) == b"10 20 30.5 40 re\n"

    def test_line_is_move_then_line(self):
        assert content_of(lambda c: c.line(1, 2, 3, 4)) == b"1 2 m 3 4 l "

    def test_curve_to(self):
        assert content_of(lambda c: c.curve_to(1, 2, 3, 4, 5, 6)) == b"1 2 3 4 5 6 c\n"

    def test_painting_operators(self):
        def draw(c):
            c.close_path()
            c.stroke()
            c.close_and_stroke()
            c.fill()
            c.fill_and_stroke()

        assert content_of(draw) == b"h\nS\ns\nf\nB\n"

    def test_lengths_in_millimeters(self):
        assert content_of(lambda c: c.move_to(mm(10), pt(5))) == b"28.34646 5 m "

    def test_line_width(self):
        def draw(c):
            c.set_line_width(pt(2))
            c.set_line_width(0.25)

        assert content_of(draw) == b"2 w\n0.25 w\n"

    def test_join_and_cap_styles(self):
        def draw(c):
            c.set_line_join_style(StrokeJoinStyle.ROUND)
            c.set_line_join_style("bevel")
            c.set_line_cap_style(StrokeCapStyle.SQUARE)
            c.set_line_cap_style(StrokeCapStyle.BUTT)

        assert content_of(draw) == b"1 j\n2 j\n2 J\n0 J\n"

    def test_colors(self):
        def draw(c):
            c.set_stroke_color(Color.rgb(255, 0, 51))
            c.set_fill_color(Color.rgb(0, 255, 0))
            c.set_stroke_color(Color.gray(255))
            c.set_fill_color(Color.gray(0))

        assert content_of(draw) == b"1 0 0.2 RG\n0 1 0 rg\n1 G\n0 g\n"

    def test_concat(self):
        assert content_of(lambda c: c.concat(Matrix.translate(10, 20))) == (
            b"1 0 0 1 10 20 cm\n"
        )

    def test_gsave_grestore(self):
        def draw(c):
            c.gsave()
            c.grestore()

        assert content_of(draw) == b"q\nQ\n"

    def test_canvas_cannot_outlive_its_page(self, buffer, pdf):
        kept = []
        pdf.render_page(100, 100, kept.append)
        written = buffer.getvalue()
        canvas = kept[0]
        assert canvas.closed
        with pytest.raises(PDFException):
            canvas.rectangle(1, 2, 3, 4)
        with pytest.raises(PDFException):
            canvas.get_font(BuiltinFont.HELVETICA)
        with pytest.raises(PDFException):
            canvas.add_outline("late")
        assert buffer.getvalue() == written
        pdf.finish()
        assert pdf.outline == []


class TestDashPattern:
    @pytest.mark.parametrize(
        "pattern", [[0], [0, 0, 0], [-1, 2], [3, -0.5], []], ids=repr
    )
    def test_invalid_pattern_is_ignored(self, pattern):
        assert content_of(lambda c: c.set_dash(pattern)) == b""

    def test_valid_pattern(self):
        assert content_of(lambda c: c.set_dash([1, 2])) == b"[1 2] 0 d\n"

    def test_zero_lengths_are_allowed_next_to_positive_ones(self):
        assert content_of(lambda c: c.set_dash([pt(3), pt(0)], pt(1))) == b"[3 0] 1 d\n"

    def test_solid_line(self):
        assert content_of(lambda c: c.set_solid_line()) == b"[] 0 d\n"


class TestCircle:
    def test_four_curves_around_the_origin(self):
        assert content_of(lambda c: c.circle(0, 0, 10)) == (
            b"0 -10 m "
            b"-5.5191505 -10 -10 -5.5191505 -10 0 c\n"
            b"-10 5.5191505 -5.5191505 10 0 10 c\n"
            b"5.5191505 10 10 5.5191505 10 0 c\n"
            b"10 -5.5191505 5.5191505 -10 0 -10 c\n"
        )

    def test_closed_and_symmetric(self):
        x, y, r = 50, 60, 7
        stream = content_of(lambda c: c.circle(x, y, r))
        numbers = [float(n) for n in re.findall(rb"-?[\d.]+", stream)]
        points = list(zip(numbers[::2], numbers[1::2]))
        start, end = points[0], points[-1]
        assert start == (x, y - r)
        assert end == pytest.approx(start)
        for px, py in points:
            assert (2 * x - px, py) in [pytest.approx(p) for p in points]
            assert (px, 2 * y - py) in [pytest.approx(p) for p in points]
        assert stream.count(b" c\n") == 4


# --------------------------------------------------------------------------- #
# Fonts & text
# --------------------------------------------------------------------------- #

class TestFonts:
    def test_font_references_are_numbered_by_first_use(self):
        refs = []

        def draw(c):
            refs.append(c.get_font(BuiltinFont.TIMES_ROMAN))
            refs.append(c.get_font(BuiltinFont.COURIER))
            refs.append(c.get_font(BuiltinFont.TIMES_ROMAN))

        content_of(draw)
        assert [str(ref) for ref in refs] == ["/F0", "/F1", "/F0"]
        assert refs[0] == refs[2]

    def test_font_source_and_builtin_font_share_a_reference(self):
        refs = []

        def draw(c):
            refs.append(c.get_font(BuiltinFont.HELVETICA))
            refs.append(c.get_font(BuiltinFont.HELVETICA.source()))

        content_of(draw)
        assert refs[0].n == refs[1].n == 0


class TestText:
    def test_text_object_is_bracketed(self):
        assert content_of(lambda c: c.text(lambda t: t.show("x"))) == b"BT\n(x) Tj\nET\n"

    def test_text_returns_closure_result(self):
        results = []
        content_of(lambda c: results.append(c.text(lambda t: "done")))
        assert results == ["done"]

    def test_text_object_is_closed_on_error(self, buffer, pdf):
        def render_text(t):
            t.show("partial")
            raise ValueError("bad text")

        with pytest.raises(ValueError, match="bad text"):
            pdf.render_page(100, 100, lambda c: c.text(render_text))
        assert buffer.getvalue().endswith(
            b"stream\nBT\n(partial) Tj\nET\nendstream\nendobj\n"
        )

    def test_text_object_rejects_use_after_end(self):
        kept = []

        def draw(c):
            c.text(kept.append)
            with pytest.raises(PDFException):
                kept[0].show("late")
            c.rectangle(1, 2, 3, 4)

        assert content_of(draw) == b"BT\nET\n1 2 3 4 re\n"

    def test_text_object_operators(self):
        def render_text(t):
            t.set_leading(18)
            t.set_rise(pt(-2))
            t.set_char_spacing(0.5)
            t.set_word_spacing(1)
            t.set_render_mode(TextMode.STROKE)
            t.set_render_mode("clip")
            t.set_stroke_color(Color.gray(0))
            t.set_fill_color(Color.rgb(255, 255, 255))
            t.pos(10, 20)
            t.show_line("next")
            t.gsave()
            t.grestore()

        assert content_of(lambda c: c.text(render_text)) == (
            b"BT\n18 TL\n-2 Ts\n0.5 Tc\n1 Tw\n1 Tr\n7 Tr\n0 G\n1 1 1 rg\n"
            b"10 20 Td\n(next) '\nq\nQ\nET\n"
        )

    def test_show_adjusted(self):
        def draw(c):
            c.text(lambda t: t.show_adjusted([("W", 130), ("AN", -40), ("D", 0)]))

        assert content_of(draw) == b"BT\n[(W) 130 (AN) -40 (D) 0 ] TJ\nET\n"

    def test_strings_are_escaped(self):
        assert content_of(lambda c: c.text(lambda t: t.show("a(b)\\"))) == (
            b"BT\n(a\\(b\\)\\\\) Tj\nET\n"
        )

    def test_default_encoding_is_win_ansi(self):
        assert content_of(lambda c: c.text(lambda t: t.show("é€Ł"))) == (
            b"BT\n(\xe9\x80?) Tj\nET\n"
        )

    def test_set_font_switches_encoding(self):
        def draw(c):
            symbol = c.get_font(BuiltinFont.SYMBOL)

            def render_text(t):
                t.set_font(symbol, 14)
                t.show("α ∈ ℜ")

            c.text(render_text)

        assert content_of(draw) == b"BT\n/F0 14 Tf\n(a \xce \xc2) Tj\nET\n"


class TestTextPlacement:
    def test_left_text(self):
        def draw(c):
            c.left_text(10, 20, BuiltinFont.HELVETICA, 12, "Hello World")

        assert content_of(draw) == b"BT\n/F0 12 Tf\n10 20 Td\n(Hello World) Tj\nET\n"

    def test_right_text(self):
        def draw(c):
            c.right_text(100, 20, BuiltinFont.HELVETICA, 12, "Hello World")

        assert content_of(draw) == (
            b"BT\n/F0 12 Tf\n37.996 20 Td\n(Hello World) Tj\nET\n"
        )

    def test_center_text(self):
        def draw(c):
            c.center_text(50, 20, BuiltinFont.COURIER, pt(10), "0123456789")

        assert content_of(draw) == b"BT\n/F0 10 Tf\n20 20 Td\n(0123456789) Tj\nET\n"
