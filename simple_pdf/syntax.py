"""
Serialization helpers for the PDF object syntax (ISO 32000-1, §7.3),
completing the ones provided by `fpdf.syntax`.

The contents of this module are internal to simple_pdf, and not part of the public API.
"""

from datetime import datetime
from typing import Iterable

from fpdf.syntax import iobj_ref as pdf_ref
from fpdf.util import escape_parens

__all__ = ["pdf_ref", "pdf_ref_list", "pdf_string", "pdf_date"]


def pdf_ref_list(obj_ids: Iterable[int]) -> str:
    """Serialize object IDs as the content of an array: `[ 3 0 R 7 0 R ]`"""
    return "[ " + "".join(f"{pdf_ref(obj_id)} " for obj_id in obj_ids) + "]"


def pdf_string(text: str) -> str:
    """
    Serialize a text string as used in the document information dictionary.

    Text that fits in Latin-1 is written as a literal string,
    anything else as a UTF-16BE hexadecimal string with a byte order mark.
    """
    try:
        text.encode("latin-1")
    except UnicodeEncodeError:
        return "<FEFF" + text.encode("utf-16-be").hex().upper() + ">"
    return f"({escape_parens(text)})"


def pdf_date(date: datetime) -> str:
    """
    Format a date as a PDF date string, e.g. D:20240101120000+0100
    (`fpdf.syntax.PDFDate` uses the +01'00' form instead)
    """
    if date.tzinfo is None:
        date = date.astimezone()
    return "D:" + date.strftime("%Y%m%d%H%M%S%z")
