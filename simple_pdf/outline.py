"""
Document outline, also known as bookmarks (ISO 32000-1, §12.3.3).

Items are created by `Canvas.add_outline()` while a page is rendered,
and only know the page they point to once the page object has been written.
"""

from typing import Optional

from .errors import PDFException
from .syntax import pdf_ref, pdf_string


class OutlineItem:
    def __init__(self, title: str) -> None:
        self.title = title
        self.page_id: Optional[int] = None

    def set_page(self, page_id: int) -> None:
        self.page_id = page_id

    def write_dictionary(
        self, parent_id: int, prev_id: Optional[int], next_id: Optional[int]
    ) -> str:
        "Serialize this item as a member of the chain of items under `parent_id`"
        if self.page_id is None:
            raise PDFException(f"Outline item {self.title!r} does not point to a page")
        out = [f"<< /Title {pdf_string(self.title)}", f"   /Parent {pdf_ref(parent_id)}"]
        if prev_id is not None:
            out.append(f"   /Prev {pdf_ref(prev_id)}")
        if next_id is not None:
            out.append(f"   /Next {pdf_ref(next_id)}")
        out.append(f"   /Dest [{pdf_ref(self.page_id)} /XYZ null null null]")
        out.append(">>")
        return "\n".join(out)

    def __repr__(self) -> str:
        return f"OutlineItem({self.title!r}, page_id={self.page_id})"
