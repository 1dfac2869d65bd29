"""
Font sources that can be used to draw text, and their metrics.

Only the 14 standard Type1 fonts that every PDF viewer provides are supported,
through the `BuiltinFont` enumeration. `FontSource` is the abstraction the
document writer relies on, so that other kinds of fonts can be plugged in.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional, Union

from fpdf.enums import CoerciveEnum

from .config import get_settings
from .encoding import (
    SYMBOL_ENCODING,
    WIN_ANSI_ENCODING,
    ZAPFDINGBATS_ENCODING,
    Encoding,
    FontEncoding,
)
from .enums import BaseEncoding
from .font_data import STANDARD_FONTS
from .units import Length, UserSpace, to_pt

# Width used for codes that have no width in the font metrics
MISSING_WIDTH = 100


class FontMetrics:
    """
    Glyph widths, by encoded character code, and global figures of a font.
    All values are expressed in 1/1000 of the text space unit.
    """

    def __init__(
        self,
        widths: Mapping[int, int],
        ascent: int = 0,
        descent: int = 0,
        cap_height: int = 0,
        bbox: tuple = (0, 0, 0, 0),
    ) -> None:
        self.widths = dict(widths)
        self.ascent = ascent
        self.descent = descent
        self.cap_height = cap_height
        self.bbox = bbox

    def get_width(self, code: int) -> Optional[int]:
        return self.widths.get(code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontMetrics):
            return NotImplemented
        return (self.widths, self.ascent, self.descent, self.cap_height, self.bbox) == (
            other.widths,
            other.ascent,
            other.descent,
            other.cap_height,
            other.bbox,
        )

    def __hash__(self) -> int:
        return hash(
            (self.ascent, self.descent, self.cap_height, tuple(self.bbox), len(self.widths))
        )


@lru_cache(maxsize=None)
def standard_font_metrics(font_name: str, encoding: Encoding) -> FontMetrics:
    """
    Metrics of one of the standard fonts, with widths indexed by the codes of `encoding`.

    Widths of the text fonts are only known by WinAnsiEncoding code:
    for another encoding each code is mapped back to its character first.
    """
    data = STANDARD_FONTS[font_name]
    widths = data.widths
    is_symbolic = font_name in ("Symbol", "ZapfDingbats")
    if not is_symbolic and encoding is not WIN_ANSI_ENCODING:
        widths = {}
        for code in range(1, 256):
            char = encoding.decode_code(code)
            win_ansi_code = WIN_ANSI_ENCODING.encode_char(char) if char else None
            if win_ansi_code in data.widths:
                widths[code] = data.widths[win_ansi_code]
    return FontMetrics(widths, data.ascent, data.descent, data.cap_height, data.bbox)


class FontSource(ABC):
    "A font that can be referenced from page content, and written as a font object"

    @property
    @abstractmethod
    def name(self) -> str:
        "PostScript name of the font, as written in /BaseFont"

    @property
    @abstractmethod
    def font_encoding(self) -> FontEncoding: ...

    @property
    @abstractmethod
    def metrics(self) -> FontMetrics: ...

    @abstractmethod
    def pdf_dictionary(self) -> str:
        "Serialize the font dictionary of this font"

    @property
    def encoding(self) -> Encoding:
        return self.font_encoding.encoding

    @property
    def key(self) -> tuple:
        "Identity of the font object in a document: two sources with the same key share it"
        return (self.name, self.font_encoding.name)

    def raw_text_width(self, text: str) -> int:
        "Width of a text in 1/1000 of the font size"
        return raw_text_width(self.encoding, self.metrics, text)

    def text_width(self, size: Length, text: str) -> UserSpace:
        "Width of a text drawn at the given font size"
        return UserSpace(to_pt(size) * self.raw_text_width(text) / 1000)


def raw_text_width(encoding: Encoding, metrics: FontMetrics, text: str) -> int:
    width = 0
    for code in encoding.encode_codes(text):
        char_width = metrics.get_width(code)
        width += MISSING_WIDTH if char_width is None else char_width
    return width


class Type1Font(FontSource):
    def __init__(
        self, name: str, font_encoding: FontEncoding, metrics: FontMetrics
    ) -> None:
        self._name = name
        self._font_encoding = font_encoding
        self._metrics = metrics

    @property
    def name(self) -> str:
        return self._name

    @property
    def font_encoding(self) -> FontEncoding:
        return self._font_encoding

    @property
    def metrics(self) -> FontMetrics:
        return self._metrics

    def pdf_dictionary(self) -> str:
        entries = f"/Type /Font /Subtype /Type1 /BaseFont /{self._name}"
        if self._font_encoding.base is not None:
            entries += f" /Encoding /{self._font_encoding.base.value}"
        return f"<< {entries} >>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type1Font):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Type1Font({self._name}, {self._font_encoding.name})"


class BuiltinFont(CoerciveEnum):
    "The 14 standard Type1 fonts available in every PDF viewer"

    COURIER = "Courier"
    COURIER_BOLD = "Courier-Bold"
    COURIER_OBLIQUE = "Courier-Oblique"
    COURIER_BOLD_OBLIQUE = "Courier-BoldOblique"
    HELVETICA = "Helvetica"
    HELVETICA_BOLD = "Helvetica-Bold"
    HELVETICA_OBLIQUE = "Helvetica-Oblique"
    HELVETICA_BOLD_OBLIQUE = "Helvetica-BoldOblique"
    TIMES_ROMAN = "Times-Roman"
    TIMES_BOLD = "Times-Bold"
    TIMES_ITALIC = "Times-Italic"
    TIMES_BOLD_ITALIC = "Times-BoldItalic"
    SYMBOL = "Symbol"
    ZAPFDINGBATS = "ZapfDingbats"

    @property
    def base_font(self) -> str:
        "PostScript name of the font, e.g. Times-Roman"
        return self.value

    @property
    def is_symbolic(self) -> bool:
        return self in (BuiltinFont.SYMBOL, BuiltinFont.ZAPFDINGBATS)

    def font_encoding(
        self, base_encoding: Optional[BaseEncoding] = None
    ) -> FontEncoding:
        if self is BuiltinFont.SYMBOL:
            return FontEncoding(SYMBOL_ENCODING)
        if self is BuiltinFont.ZAPFDINGBATS:
            return FontEncoding(ZAPFDINGBATS_ENCODING)
        if base_encoding is None:
            base_encoding = get_settings().default_encoding
        return FontEncoding.from_base(BaseEncoding.coerce(base_encoding))

    @property
    def encoding(self) -> Encoding:
        "Encoding used for this font when the document does not choose one"
        return self.font_encoding().encoding

    @property
    def metrics(self) -> FontMetrics:
        return standard_font_metrics(self.value, self.encoding)

    def raw_text_width(self, text: str) -> int:
        return raw_text_width(self.encoding, self.metrics, text)

    def text_width(self, size: Length, text: str) -> UserSpace:
        return UserSpace(to_pt(size) * self.raw_text_width(text) / 1000)

    def source(self, base_encoding: Optional[BaseEncoding] = None) -> Type1Font:
        "The font source of this font, text fonts using the given base encoding"
        font_encoding = self.font_encoding(base_encoding)
        return Type1Font(
            self.value,
            font_encoding,
            standard_font_metrics(self.value, font_encoding.encoding),
        )


FontLike = Union[FontSource, BuiltinFont]


@dataclass(frozen=True)
class FontRef:
    """
    A font as referenced from the content of one page, e.g. `/F0`.
    Obtained through `Canvas.get_font()`.
    """

    n: int
    encoding: Encoding
    metrics: FontMetrics

    @property
    def resource_name(self) -> str:
        return f"F{self.n}"

    def raw_text_width(self, text: str) -> int:
        return raw_text_width(self.encoding, self.metrics, text)

    def text_width(self, size: Length, text: str) -> UserSpace:
        return UserSpace(to_pt(size) * self.raw_text_width(text) / 1000)

    def __str__(self) -> str:
        return f"/{self.resource_name}"
