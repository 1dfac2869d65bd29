"""
Text operators, written between the `BT` and `ET` of a text object.
"""

from typing import TYPE_CHECKING, Sequence, Tuple

from fpdf.enums import TextMode
from fpdf.util import format_number

from .encoding import Encoding
from .errors import PDFException
from .fonts import FontRef
from .graphics_state import Color
from .units import Length, to_pt

if TYPE_CHECKING:
    from .output import OutputStream


class TextObject:
    """
    The operators allowed between `BT` and `ET`, obtained through `Canvas.text()`.

    Strings are encoded with the encoding of the font last selected with `set_font()`.
    """

    def __init__(self, output: "OutputStream", encoding: Encoding) -> None:
        self._output = output
        self._encoding = encoding
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def _write(self, data: bytes) -> None:
        if self.closed:
            raise PDFException("This text object has already been ended")
        self._output.write(data)

    def _out(self, data: str) -> None:
        self._write(data.encode("latin-1"))

    def set_font(self, font: FontRef, size: Length) -> None:
        self._out(f"{font} {format_number(to_pt(size))} Tf\n")
        self._encoding = font.encoding

    def set_leading(self, leading: Length) -> None:
        self._out(f"{format_number(to_pt(leading))} TL\n")

    def set_rise(self, rise: Length) -> None:
        self._out(f"{format_number(to_pt(rise))} Ts\n")

    def set_char_spacing(self, a_c: Length) -> None:
        self._out(f"{format_number(to_pt(a_c))} Tc\n")

    def set_word_spacing(self, a_w: Length) -> None:
        self._out(f"{format_number(to_pt(a_w))} Tw\n")

    def set_render_mode(self, mode: TextMode) -> None:
        self._out(f"{int(TextMode.coerce(mode))} Tr\n")

    def set_stroke_color(self, color: Color) -> None:
        self._out(color.stroke_operator() + "\n")

    def set_fill_color(self, color: Color) -> None:
        self._out(color.fill_operator() + "\n")

    def pos(self, x: Length, y: Length) -> None:
        "Move to the start of the next line, offset by (x, y)"
        self._out(f"{format_number(to_pt(x))} {format_number(to_pt(y))} Td\n")

    def show(self, text: str) -> None:
        self._write(b"(" + self._encoding.encode_string(text) + b") Tj\n")

    def show_adjusted(self, parts: Sequence[Tuple[str, int]]) -> None:
        """
        Show strings with individual glyph positioning: each string is followed by
        an adjustment in thousandths of a text space unit,
        positive values moving the next string to the left.
        """
        out = bytearray(b"[")
        for text, offset in parts:
            out += b"(" + self._encoding.encode_string(text) + b") "
            out += f"{int(offset)} ".encode("latin-1")
        out += b"] TJ\n"
        self._write(bytes(out))

    def show_line(self, text: str) -> None:
        "Move to the next line and show a text"
        self._write(b"(" + self._encoding.encode_string(text) + b") '\n")

    def gsave(self) -> None:
        self._out("q\n")

    def grestore(self) -> None:
        self._out("Q\n")
