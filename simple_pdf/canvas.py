"""
The drawing surface handed to the page rendering callbacks.

A `Canvas` translates method calls into the operators of the page content stream
currently written by the document. It never allocates PDF objects itself:
fonts and outline items are only collected, and resolved once the page is complete.
"""

import logging
from typing import TYPE_CHECKING, Callable, Sequence, TypeVar

from fpdf.enums import StrokeCapStyle, StrokeJoinStyle
from fpdf.util import format_number

from .encoding import Encoding
from .errors import PDFException
from .fonts import FontLike, FontRef, FontSource
from .graphics_state import Color, Matrix
from .outline import OutlineItem
from .text_object import TextObject
from .units import Length, to_pt

if TYPE_CHECKING:
    from .output import OutputStream

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# Distance of the Bézier control points from the end points,
# relative to the radius, for a quarter circle
CIRCLE_CONTROL_RATIO = 0.55191505


def _n(length: Length) -> str:
    return format_number(to_pt(length))


class Canvas:
    def __init__(
        self,
        output: "OutputStream",
        fonts: dict,
        outline_items: list,
        base_encoding: Encoding,
        font_source_factory: Callable[[FontLike], FontSource],
    ) -> None:
        self._output = output
        # FontSource.key -> (FontSource, FontRef), in order of first use
        self._fonts = fonts
        self._outline_items = outline_items
        self._base_encoding = base_encoding
        self._font_source_factory = font_source_factory
        self.closed = False

    def close(self) -> None:
        "Called once the page content is complete, any further drawing is an error"
        self.closed = True

    def _check_open(self) -> None:
        if self.closed:
            raise PDFException("The page of this canvas has already been written")

    def _out(self, data: str) -> None:
        self._check_open()
        self._output.write(data.encode("latin-1"))

    def rectangle(self, x: Length, y: Length, width: Length, height: Length) -> None:
        "Append a rectangle to the current path"
        self._out(f"{_n(x)} {_n(y)} {_n(width)} {_n(height)} re\n")

    def set_line_join_style(self, style: StrokeJoinStyle) -> None:
        self._out(f"{int(StrokeJoinStyle.coerce(style))} j\n")

    def set_line_cap_style(self, style: StrokeCapStyle) -> None:
        self._out(f"{int(StrokeCapStyle.coerce(style))} J\n")

    def set_line_width(self, width: Length) -> None:
        self._out(f"{_n(width)} w\n")

    def set_stroke_color(self, color: Color) -> None:
        self._out(color.stroke_operator() + "\n")

    def set_fill_color(self, color: Color) -> None:
        self._out(color.fill_operator() + "\n")

    def set_dash(self, pattern: Sequence[Length], phase: Length = 0) -> None:
        """
        Set the dash pattern used to stroke paths:
        alternating lengths of dashes and gaps, starting `phase` into the pattern.

        A pattern with a negative length, or without any length greater than zero,
        is ignored and leaves the current pattern unchanged.
        """
        lengths = [to_pt(length) for length in pattern]
        if any(length < 0 for length in lengths) or not any(
            length > 0 for length in lengths
        ):
            LOGGER.debug("Ignoring invalid dash pattern %s", lengths)
            return
        dashes = " ".join(format_number(length) for length in lengths)
        self._out(f"[{dashes}] {_n(phase)} d\n")

    def set_solid_line(self) -> None:
        "Reset the dash pattern to a solid line"
        self._out("[] 0 d\n")

    def concat(self, matrix: Matrix) -> None:
        "Modify the current transformation matrix"
        self._out(f"{matrix.serialize()} cm\n")

    def line(self, x1: Length, y1: Length, x2: Length, y2: Length) -> None:
        "Begin a new subpath with a straight line segment"
        self.move_to(x1, y1)
        self.line_to(x2, y2)

    def move_to(self, x: Length, y: Length) -> None:
        self._out(f"{_n(x)} {_n(y)} m ")

    def line_to(self, x: Length, y: Length) -> None:
        self._out(f"{_n(x)} {_n(y)} l ")

    def curve_to(
        self,
        x1: Length,
        y1: Length,
        x2: Length,
        y2: Length,
        x3: Length,
        y3: Length,
    ) -> None:
        "Append a cubic Bézier curve from the current point to (x3, y3)"
        self._out(f"{_n(x1)} {_n(y1)} {_n(x2)} {_n(y2)} {_n(x3)} {_n(y3)} c\n")

    def circle(self, x: Length, y: Length, r: Length) -> None:
        """
        Append a circle centered in (x, y) to the current path,
        as four Bézier curves starting and ending at (x, y - r).
        """
        x, y, r = to_pt(x), to_pt(y), to_pt(r)
        top, bottom = y - r, y + r
        left, right = x - r, x + r
        d = r * CIRCLE_CONTROL_RATIO
        self.move_to(x, top)
        self.curve_to(x - d, top, left, y - d, left, y)
        self.curve_to(left, y + d, x - d, bottom, x, bottom)
        self.curve_to(x + d, bottom, right, y + d, right, y)
        self.curve_to(right, y - d, x + d, top, x, top)

    def close_path(self) -> None:
        self._out("h\n")

    def stroke(self) -> None:
        self._out("S\n")

    def close_and_stroke(self) -> None:
        self._out("s\n")

    def fill(self) -> None:
        self._out("f\n")

    def fill_and_stroke(self) -> None:
        self._out("B\n")

    def get_font(self, font: FontLike) -> FontRef:
        """
        Return the reference used on this page for a font.
        Fonts are numbered F0, F1... in order of first use on the page.
        """
        self._check_open()
        source = self._font_source_factory(font)
        entry = self._fonts.get(source.key)
        if entry is None:
            font_ref = FontRef(len(self._fonts), source.encoding, source.metrics)
            entry = self._fonts[source.key] = (source, font_ref)
        return entry[1]

    def text(self, render_text: Callable[[TextObject], T]) -> T:
        """
        Open a text object, and let `render_text` fill it.
        The text object is closed even if `render_text` raises.
        """
        self._out("BT\n")
        text_object = TextObject(self._output, self._base_encoding)
        try:
            return render_text(text_object)
        finally:
            text_object.close()
            self._out("ET\n")

    def left_text(
        self, x: Length, y: Length, font: FontLike, size: Length, text: str
    ) -> None:
        "Draw a line of text starting at (x, y)"
        font_ref = self.get_font(font)

        def render(t: TextObject) -> None:
            t.set_font(font_ref, size)
            t.pos(x, y)
            t.show(text)

        self.text(render)

    def right_text(
        self, x: Length, y: Length, font: FontLike, size: Length, text: str
    ) -> None:
        "Draw a line of text ending at (x, y)"
        font_ref = self.get_font(font)
        text_width = font_ref.text_width(size, text).pt

        def render(t: TextObject) -> None:
            t.set_font(font_ref, size)
            t.pos(to_pt(x) - text_width, y)
            t.show(text)

        self.text(render)

    def center_text(
        self, x: Length, y: Length, font: FontLike, size: Length, text: str
    ) -> None:
        "Draw a line of text horizontally centered on (x, y)"
        font_ref = self.get_font(font)
        text_width = font_ref.text_width(size, text).pt

        def render(t: TextObject) -> None:
            t.set_font(font_ref, size)
            t.pos(to_pt(x) - text_width / 2, y)
            t.show(text)

        self.text(render)

    def add_outline(self, title: str) -> None:
        "Add a bookmark pointing to the current page to the document outline"
        self._check_open()
        self._outline_items.append(OutlineItem(title))

    def gsave(self) -> None:
        "Save the current graphics state"
        self._out("q\n")

    def grestore(self) -> None:
        "Restore the last saved graphics state"
        self._out("Q\n")
