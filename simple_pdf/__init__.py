"""
simple_pdf: a streaming PDF 1.7 writer for vector drawings and text
in the 14 standard fonts.
"""

from fpdf.enums import StrokeCapStyle, StrokeJoinStyle, TextMode

from .canvas import Canvas
from .config import Settings, get_settings
from .encoding import (
    MAC_ROMAN_ENCODING,
    SYMBOL_ENCODING,
    WIN_ANSI_ENCODING,
    ZAPFDINGBATS_ENCODING,
    Encoding,
    FontEncoding,
)
from .enums import BaseEncoding
from .errors import DocumentFinishedError, PDFException, PDFObjectIdError
from .fonts import BuiltinFont, FontMetrics, FontRef, FontSource, Type1Font
from .graphics_state import Color, Matrix
from .output import Pdf
from .text_object import TextObject
from .units import LengthUnit, Millimeters, Points, UserSpace, mm, pt

__version__ = "0.5.0"

__all__ = [
    "__version__",
    "Pdf",
    "Canvas",
    "TextObject",
    "BuiltinFont",
    "FontSource",
    "Type1Font",
    "FontMetrics",
    "FontRef",
    "Encoding",
    "FontEncoding",
    "WIN_ANSI_ENCODING",
    "MAC_ROMAN_ENCODING",
    "SYMBOL_ENCODING",
    "ZAPFDINGBATS_ENCODING",
    "BaseEncoding",
    "StrokeCapStyle",
    "StrokeJoinStyle",
    "TextMode",
    "Color",
    "Matrix",
    "LengthUnit",
    "Points",
    "Millimeters",
    "UserSpace",
    "pt",
    "mm",
    "Settings",
    "get_settings",
    "PDFException",
    "PDFObjectIdError",
    "DocumentFinishedError",
]
