"""
Single-byte encodings of the 14 standard Type1 fonts.

An `Encoding` maps unicode characters to the one-byte codes understood by a font,
and glyph names to the same codes. Text is encoded into the bytes of a PDF
literal string with `Encoding.encode_string()`.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from fontTools import agl
from fpdf.util import escape_parens

from .enums import BaseEncoding
from .glyph_tables import MAC_ROMAN_GLYPHS, SYMBOL_GLYPHS, ZAPFDINGBATS_GLYPHS

# Replacement code for characters that are not available in an encoding
UNMAPPED_CODE = ord("?")


class Encoding:
    def __init__(
        self,
        name: str,
        name_to_code: Mapping[str, int],
        unicode_to_code: Mapping[str, int],
        is_zapfdingbats: bool = False,
    ) -> None:
        self.name = name
        self._name_to_code = dict(name_to_code)
        self._unicode_to_code = dict(unicode_to_code)
        self._code_to_unicode = {}
        for char, code in self._unicode_to_code.items():
            self._code_to_unicode.setdefault(code, char)
        self._is_zapfdingbats = is_zapfdingbats

    def get_code(self, glyph_name: str) -> Optional[int]:
        """
        Return the code of a glyph, given its PostScript name (e.g. "aring"),
        or None if the glyph is not part of this encoding.

        Names missing from the encoding table are resolved through the Adobe Glyph List,
        so `uniXXXX` names are supported too.
        """
        code = self._name_to_code.get(glyph_name)
        if code is None and glyph_name:
            char = agl.toUnicode(glyph_name, isZapfDingbats=self._is_zapfdingbats)
            if len(char) == 1:
                code = self.encode_char(char)
        return code

    def encode_char(self, char: str) -> Optional[int]:
        "Return the code of a (unicode) character, or None if it is not available"
        return self._unicode_to_code.get(char)

    def decode_code(self, code: int) -> Optional[str]:
        return self._code_to_unicode.get(code)

    def encode_codes(self, text: str) -> bytes:
        "Encode text into raw codes, replacing unavailable characters by `?`"
        return bytes(self._unicode_to_code.get(char, UNMAPPED_CODE) for char in text)

    def encode_string(self, text: str) -> bytes:
        """
        Encode text into the content of a PDF literal string:
        unavailable characters are replaced by `?`,
        and backslashes, parentheses & carriage returns are escaped.
        """
        return escape_parens(self.encode_codes(text))

    def __repr__(self) -> str:
        return f"Encoding({self.name})"


def _win_ansi_encoding() -> Encoding:
    # WinAnsiEncoding matches the cp1252 code page, the 5 codes it leaves
    # undefined map to the characters of the same value, as in Latin-1.
    unicode_to_code = {}
    name_to_code = {}
    for code in range(1, 256):
        try:
            char = bytes([code]).decode("cp1252")
        except UnicodeDecodeError:
            char = chr(code)
        unicode_to_code[char] = code
        glyph_name = agl.UV2AGL.get(ord(char))
        if glyph_name:
            name_to_code.setdefault(glyph_name, code)
    return Encoding("WinAnsiEncoding", name_to_code, unicode_to_code)


def _table_encoding(
    name: str,
    glyphs: Iterable[tuple],
    ascii_glyph_names: bool = False,
    is_zapfdingbats: bool = False,
) -> Encoding:
    # ASCII characters keep their code unless the table says otherwise
    unicode_to_code = {chr(code): code for code in range(1, 128)}
    name_to_code = {}
    for char, glyph_name, code in glyphs:
        unicode_to_code[char] = code
        name_to_code.setdefault(glyph_name, code)
    if ascii_glyph_names:
        for code in range(0x20, 0x7F):
            glyph_name = agl.UV2AGL.get(code)
            if glyph_name:
                name_to_code.setdefault(glyph_name, code)
    return Encoding(name, name_to_code, unicode_to_code, is_zapfdingbats)


WIN_ANSI_ENCODING = _win_ansi_encoding()
MAC_ROMAN_ENCODING = _table_encoding(
    "MacRomanEncoding", MAC_ROMAN_GLYPHS, ascii_glyph_names=True
)
SYMBOL_ENCODING = _table_encoding("SymbolEncoding", SYMBOL_GLYPHS)
ZAPFDINGBATS_ENCODING = _table_encoding(
    "ZapfDingbatsEncoding", ZAPFDINGBATS_GLYPHS, is_zapfdingbats=True
)


@dataclass(frozen=True)
class FontEncoding:
    """
    The encoding of a font: the code table used to encode text,
    and the predefined base encoding named in the font dictionary, if any.
    Fonts with a builtin encoding (Symbol, ZapfDingbats) have no base encoding.
    """

    encoding: Encoding
    base: Optional[BaseEncoding] = None

    @classmethod
    def from_base(cls, base: BaseEncoding) -> "FontEncoding":
        return cls(base.to_encoding(), base)

    @property
    def name(self) -> str:
        return self.encoding.name
