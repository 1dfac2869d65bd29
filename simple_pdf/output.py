"""
This module contains the document writer, that streams a PDF file to its output
while pages are rendered.

Objects are written as soon as they are known, and their byte offsets recorded
in an object table that becomes the cross-reference table once `Pdf.finish()`
is called. Object 0 is the head of the free list, and the IDs 1 and 2 are reserved
for the document catalog and the page tree, that can only be written last.
"""

import logging
from collections import defaultdict
from contextlib import contextmanager
from datetime import datetime
from typing import Any, BinaryIO, Callable, Iterator, Optional, TypeVar, Union

from fpdf.util import format_number

from .canvas import Canvas
from .config import get_settings
from .encoding import FontEncoding
from .enums import BaseEncoding, DocumentInfoKey
from .errors import DocumentFinishedError, PDFException, PDFObjectIdError
from .fonts import BuiltinFont, FontLike, FontSource
from .outline import OutlineItem
from .syntax import pdf_date, pdf_ref, pdf_ref_list, pdf_string
from .units import Length, to_pt

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

PDF_VERSION = "1.7"

ROOT_OBJECT_ID = 1
PAGES_OBJECT_ID = 2

# Offset of an object whose ID is reserved, but that is not written yet
UNWRITTEN = -1


class OutputStream:
    "Write-only view of the output sink, that keeps track of the current byte offset"

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.position = 0

    def write(self, data: bytes) -> int:
        self._stream.write(data)
        self.position += len(data)
        return len(data)

    def flush(self) -> None:
        self._stream.flush()


class PDFHeader:
    """
    Emit the PDF file header as required by ISO 32000-1, §7.5.2 “File header”:
    the version line, followed by a comment of 4 bytes with values ≥ 128,
    so that file-transfer tools treat the content as binary.
    """

    def __init__(self, pdf_version: str) -> None:
        self.pdf_version = pdf_version

    def serialize(self) -> bytes:
        return f"%PDF-{self.pdf_version}\n".encode("latin-1") + b"%\xb5\xed\xae\xfb\n"


class PDFXrefAndTrailer:
    "Cross-reference table & file trailer"

    def __init__(
        self, object_offsets: list, startxref: int, info_id: Optional[int] = None
    ) -> None:
        self.object_offsets = object_offsets
        self.startxref = startxref
        self.info_id = info_id

    def serialize(self) -> str:
        count = len(self.object_offsets)
        out = ["xref", f"0 {count}", "0000000000 65535 f "]
        for obj_id in range(1, count):
            offset = self.object_offsets[obj_id]
            if offset < 0:
                raise PDFObjectIdError(f"Object {obj_id} was never written")
            out.append(f"{offset:010} 00000 n ")
        out.append("trailer")
        out.append(f"<< /Size {count}")
        out.append(f"   /Root {pdf_ref(ROOT_OBJECT_ID)}")
        if self.info_id is not None:
            out.append(f"   /Info {pdf_ref(self.info_id)}")
        out.append(">>")
        out.append("startxref")
        out.append(str(self.startxref))
        out.append("%%EOF")
        return "\n".join(out) + "\n"


class Pdf:
    """
    A PDF document, written page by page to a binary output stream.

    Usage::

        pdf = Pdf.create("drawing.pdf")
        pdf.render_page(180, 240, lambda canvas: canvas.rectangle(10, 10, 160, 220))
        pdf.finish()
    """

    def __init__(
        self,
        output: BinaryIO,
        base_encoding: Optional[Union[BaseEncoding, str]] = None,
        close_output: bool = False,
    ) -> None:
        settings = get_settings()
        if base_encoding is None:
            base_encoding = settings.default_encoding
        self.base_encoding = BaseEncoding.coerce(base_encoding)
        self._output = OutputStream(output)
        self._raw_output = output
        self._close_output = close_output
        self.object_offsets = [UNWRITTEN, UNWRITTEN, UNWRITTEN]
        self.page_object_ids: list[int] = []
        # FontSource.key -> font object ID
        self.font_object_ids: dict[tuple, int] = {}
        self.outline: list[OutlineItem] = []
        self.info: dict[DocumentInfoKey, str] = {}
        self.creation_date: Optional[datetime] = None
        self.finished = False
        self.sections_size_per_trace_label: defaultdict = defaultdict(int)
        self._output.write(PDFHeader(PDF_VERSION).serialize())
        LOGGER.debug(
            "Started PDF %s document with base encoding %s",
            PDF_VERSION,
            self.base_encoding.value,
        )

    @classmethod
    def create(
        cls, filename: Any, base_encoding: Optional[Union[BaseEncoding, str]] = None
    ) -> "Pdf":
        "Create a document written to a new file, closed by finish()"
        # pylint: disable=consider-using-with
        output = open(filename, "wb", buffering=get_settings().buffer_size)
        try:
            return cls(output, base_encoding, close_output=True)
        except BaseException:
            output.close()
            raise

    def __enter__(self) -> "Pdf":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is None:
            self.finish()
        elif self._close_output:
            self._raw_output.close()

    def _check_not_finished(self) -> None:
        if self.finished:
            raise DocumentFinishedError("The document has already been finished")

    def _set_info(self, key: DocumentInfoKey, value: str) -> None:
        self._check_not_finished()
        self.info[key] = value

    def set_title(self, title: str) -> None:
        self._set_info(DocumentInfoKey.TITLE, title)

    def set_author(self, author: str) -> None:
        self._set_info(DocumentInfoKey.AUTHOR, author)

    def set_subject(self, subject: str) -> None:
        self._set_info(DocumentInfoKey.SUBJECT, subject)

    def set_keywords(self, keywords: str) -> None:
        self._set_info(DocumentInfoKey.KEYWORDS, keywords)

    def set_creator(self, creator: str) -> None:
        self._set_info(DocumentInfoKey.CREATOR, creator)

    def set_producer(self, producer: str) -> None:
        self._set_info(DocumentInfoKey.PRODUCER, producer)

    def set_creation_date(self, date: datetime) -> None:
        "Date used for /CreationDate and /ModDate instead of the time of finish()"
        self._check_not_finished()
        self.creation_date = date

    def _out(self, data: str) -> None:
        "Append a line to the output"
        self._output.write(data.encode("latin-1") + b"\n")

    def _font_source(self, font: FontLike) -> FontSource:
        if isinstance(font, BuiltinFont):
            return font.source(self.base_encoding)
        if isinstance(font, FontSource):
            return font
        raise TypeError(f"Expected a BuiltinFont or a FontSource, got {font!r}")

    def render_page(
        self,
        width: Length,
        height: Length,
        render_contents: Callable[[Canvas], T],
    ) -> T:
        """
        Add a page of the given size to the document, and let `render_contents`
        draw its content on a `Canvas`. Returns what `render_contents` returned.

        If `render_contents` raises, the exception propagates,
        and the document is left incomplete.
        """
        self._check_not_finished()
        fonts: dict = {}
        outline_items: list[OutlineItem] = []
        canvas = Canvas(
            self._output,
            fonts,
            outline_items,
            FontEncoding.from_base(self.base_encoding).encoding,
            self._font_source,
        )

        with self._trace_size("pages content"):
            content_id = self._reserve_object_id()
            self._begin_object(content_id)
            # The length is the next object, as nothing else is allocated meanwhile
            self._out(f"<< /Length {pdf_ref(content_id + 1)} >>")
            self._out("stream")
            start = self._output.position
            try:
                result = render_contents(canvas)
            finally:
                canvas.close()
                content_length = self._output.position - start
                self._out("endstream")
                self._out("endobj")
            length_id = self._write_new_object(str(content_length))
            if length_id != content_id + 1:
                raise PDFObjectIdError(
                    f"Stream length of object {content_id} was written as object"
                    f" {length_id} instead of {content_id + 1}"
                )

        font_refs = []
        with self._trace_size("fonts"):
            for key, (source, font_ref) in fonts.items():
                font_id = self.font_object_ids.get(key)
                if font_id is None:
                    font_id = self._write_new_object(source.pdf_dictionary())
                    self.font_object_ids[key] = font_id
                    LOGGER.debug("Font %s %s written as object %d", *key, font_id)
                font_refs.append(f"{font_ref} {pdf_ref(font_id)} ")

        with self._trace_size("pages"):
            page_id = self._write_page_dict(
                content_id, width, height, "".join(font_refs)
            )
        for item in outline_items:
            item.set_page(page_id)
            self.outline.append(item)
        self.page_object_ids.append(page_id)
        LOGGER.debug(
            "Page %d written as object %d, content stream of %d bytes using %d font(s)",
            len(self.page_object_ids),
            page_id,
            content_length,
            len(fonts),
        )
        return result

    def _write_page_dict(
        self, content_id: int, width: Length, height: Length, font_refs: str
    ) -> int:
        return self._write_new_object(
            "\n".join(
                (
                    "<< /Type /Page",
                    f"   /Parent {pdf_ref(PAGES_OBJECT_ID)}",
                    f"   /Resources << /Font << {font_refs}>> >>",
                    f"   /MediaBox {_dimensions_to_mediabox(width, height)}",
                    f"   /Contents {pdf_ref(content_id)}",
                    ">>",
                )
            )
        )

    def _reserve_object_id(self) -> int:
        self.object_offsets.append(UNWRITTEN)
        return len(self.object_offsets) - 1

    def _begin_object(self, obj_id: int) -> None:
        if self.object_offsets[obj_id] != UNWRITTEN:
            raise PDFObjectIdError(f"Object {obj_id} has already been written")
        self.object_offsets[obj_id] = self._output.position
        self._out(f"{obj_id} 0 obj")

    def _write_object_with_id(self, obj_id: int, content: str) -> int:
        self._begin_object(obj_id)
        self._out(content)
        self._out("endobj")
        return obj_id

    def _write_new_object(self, content: str) -> int:
        return self._write_object_with_id(self._reserve_object_id(), content)

    def finish(self) -> None:
        """
        Write the page tree, the document information & outline, the catalog,
        and the cross-reference table, then flush the output.
        The document cannot be modified anymore afterwards.
        """
        self._check_not_finished()
        self.finished = True
        if not self.page_object_ids:
            LOGGER.warning("Finishing a document without any page")
        try:
            self._write_trailing_objects()
        finally:
            if self._close_output:
                self._raw_output.close()

    def _write_trailing_objects(self) -> None:
        with self._trace_size("pages"):
            self._write_object_with_id(
                PAGES_OBJECT_ID,
                "\n".join(
                    (
                        "<< /Type /Pages",
                        f"   /Count {len(self.page_object_ids)}",
                        f"   /Kids {pdf_ref_list(self.page_object_ids)}",
                        ">>",
                    )
                ),
            )

        with self._trace_size("info"):
            info_id = self._write_info()
        with self._trace_size("outline"):
            outlines_id = self._write_outline()

        catalog = ["<< /Type /Catalog", f"   /Pages {pdf_ref(PAGES_OBJECT_ID)}"]
        if outlines_id is not None:
            catalog.append(f"   /Outlines {pdf_ref(outlines_id)}")
        catalog.append(">>")
        self._write_object_with_id(ROOT_OBJECT_ID, "\n".join(catalog))

        with self._trace_size("xref & trailer"):
            xref = PDFXrefAndTrailer(
                self.object_offsets, self._output.position, info_id
            )
            self._output.write(xref.serialize().encode("latin-1"))

        self._log_final_sections_sizes()
        self._output.flush()

    def _write_info(self) -> Optional[int]:
        if not self.info:
            return None
        info, self.info = self.info, {}
        date = self.creation_date or datetime.now().astimezone()
        try:
            timestamp = pdf_date(date)
        except (ValueError, OverflowError) as error:
            raise PDFException(f"Could not format date: {date}") from error
        entries = [(key.value, pdf_string(value)) for key, value in info.items()]
        entries += [("CreationDate", f"({timestamp})"), ("ModDate", f"({timestamp})")]
        entries.sort()
        lines = [f"/{key} {value}" for key, value in entries]
        return self._write_new_object(
            "<< " + "\n   ".join(lines) + "\n>>"
        )

    def _write_outline(self) -> Optional[int]:
        if not self.outline:
            return None
        outline, self.outline = self.outline, []
        parent_id = self._reserve_object_id()
        count = len(outline)
        first_id = last_id = UNWRITTEN
        for i, item in enumerate(outline):
            obj_id = len(self.object_offsets)
            content = item.write_dictionary(
                parent_id,
                obj_id - 1 if i > 0 else None,
                obj_id + 1 if i < count - 1 else None,
            )
            obj_id = self._write_new_object(content)
            if i == 0:
                first_id = obj_id
            last_id = obj_id
        self._write_object_with_id(
            parent_id,
            "\n".join(
                (
                    "<< /Type /Outlines",
                    f"   /First {pdf_ref(first_id)}",
                    f"   /Last {pdf_ref(last_id)}",
                    f"   /Count {count}",
                    ">>",
                )
            ),
        )
        LOGGER.debug("Outline of %d item(s) written as object %d", count, parent_id)
        return parent_id

    @contextmanager
    def _trace_size(self, label: str) -> Iterator[None]:
        prev_size = self._output.position
        yield
        self.sections_size_per_trace_label[label] += self._output.position - prev_size

    def _log_final_sections_sizes(self) -> None:
        LOGGER.debug("Final size summary of the document sections:")
        for label, section_size in self.sections_size_per_trace_label.items():
            LOGGER.debug("- %s: %s", label, _sizeof_fmt(section_size))


def _dimensions_to_mediabox(width: Length, height: Length) -> str:
    return f"[0 0 {format_number(to_pt(width))} {format_number(to_pt(height))}]"


def _sizeof_fmt(num: float, suffix: str = "B") -> str:
    # Recipe from: https://stackoverflow.com/a/1094933/636849
    for unit in ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi"]:
        if abs(num) < 1024:
            return f"{num:3.1f}{unit}{suffix}"
        num /= 1024
    return f"{num:.1f}Yi{suffix}"
