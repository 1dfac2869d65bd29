from typing import TYPE_CHECKING

from fpdf.enums import CoerciveEnum

if TYPE_CHECKING:
    from .encoding import Encoding


class BaseEncoding(CoerciveEnum):
    "Predefined encodings that a text font dictionary can name in its /Encoding entry"

    WIN_ANSI = "WinAnsiEncoding"
    MAC_ROMAN = "MacRomanEncoding"

    def to_encoding(self) -> "Encoding":
        # pylint: disable=import-outside-toplevel
        from .encoding import MAC_ROMAN_ENCODING, WIN_ANSI_ENCODING

        if self is BaseEncoding.MAC_ROMAN:
            return MAC_ROMAN_ENCODING
        return WIN_ANSI_ENCODING


class DocumentInfoKey(CoerciveEnum):
    "Entries of the document information dictionary that can be set by the user"

    AUTHOR = "Author"
    CREATOR = "Creator"
    KEYWORDS = "Keywords"
    PRODUCER = "Producer"
    SUBJECT = "Subject"
    TITLE = "Title"
