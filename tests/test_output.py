"""
Tests for the document writer: object table, cross-reference table,
font objects, document information and outline.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from io import BytesIO

import pytest

from simple_pdf import (
    BaseEncoding,
    BuiltinFont,
    Color,
    DocumentFinishedError,
    Pdf,
    PDFObjectIdError,
    mm,
    pt,
)
from simple_pdf.output import PDFXrefAndTrailer

from .pdf_inspect import get_object, get_stream, trailer, xref_offsets

HEADER = b"%PDF-1.7\n%\xb5\xed\xae\xfb\n"


class FailingSink(BytesIO):
    "An output that fails every write once `failing` is set"

    failing = False

    def write(self, data):
        if self.failing:
            raise OSError("disk full")
        return super().write(data)


def draw_box_and_title(c):
    c.set_stroke_color(Color.gray(0))
    c.rectangle(10, 10, 160, 220)
    c.stroke()
    c.center_text(90, 200, BuiltinFont.HELVETICA, 12, "Hello World")


# --------------------------------------------------------------------------- #
# File structure
# --------------------------------------------------------------------------- #

class TestFileStructure:
    def test_header_is_written_on_creation(self, buffer, pdf):
        assert buffer.getvalue() == HEADER

    def test_end_to_end_single_page(self, buffer, pdf):
        pdf.render_page(180, 240, draw_box_and_title)
        pdf.finish()
        data = buffer.getvalue()

        assert data.startswith(HEADER)
        assert data.endswith(b"%%EOF\n")
        # catalog, page tree, content stream, stream length, font, page
        assert len(xref_offsets(data)) == 7
        assert b"/Size 7" in trailer(data)
        assert b"/Root 1 0 R" in trailer(data)
        assert b"/Info" not in trailer(data)

        page = get_object(data, 6)
        assert page == (
            b"<< /Type /Page\n"
            b"   /Parent 2 0 R\n"
            b"   /Resources << /Font << /F0 5 0 R >> >>\n"
            b"   /MediaBox [0 0 180 240]\n"
            b"   /Contents 3 0 R\n"
            b">>"
        )
        assert get_object(data, 2) == (
            b"<< /Type /Pages\n   /Count 1\n   /Kids [ 6 0 R ]\n>>"
        )
        assert get_object(data, 1) == b"<< /Type /Catalog\n   /Pages 2 0 R\n>>"
        assert get_object(data, 5) == (
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica"
            b" /Encoding /WinAnsiEncoding >>"
        )

    def test_every_offset_points_to_its_object(self, buffer, pdf):
        pdf.set_title("Offsets")
        for n in range(3):
            pdf.render_page(100, 100, lambda c: c.add_outline(f"Page {n}"))
        pdf.finish()
        data = buffer.getvalue()
        offsets = xref_offsets(data)
        for obj_id in range(1, len(offsets)):
            assert data[offsets[obj_id] :].startswith(b"%d 0 obj\n" % obj_id)

    def test_startxref_points_to_xref(self, buffer, pdf):
        pdf.render_page(100, 100, lambda c: None)
        pdf.finish()
        data = buffer.getvalue()
        startxref = int(re.search(rb"startxref\n(\d+)\n", data).group(1))
        assert data[startxref:].startswith(b"xref\n0 ")

    def test_stream_length_is_exact(self, buffer, pdf):
        def draw(c):
            c.move_to(0, 0)
            c.line_to(100, 100)
            c.stroke()
            c.left_text(10, 10, BuiltinFont.TIMES_ROMAN, 12, "Räksmörgås (fika)")

        pdf.render_page(mm(210), mm(297), draw)
        pdf.finish()
        stream, length = get_stream(buffer.getvalue(), 3)
        assert len(stream) == length
        assert stream.startswith(b"0 0 m 100 100 l S\n")

    def test_media_box_accepts_lengths(self, buffer, pdf):
        pdf.render_page(mm(210), pt(200.5), lambda c: None)
        pdf.finish()
        page = get_object(buffer.getvalue(), 5)
        assert b"/MediaBox [0 0 595.27566 200.5]" in page

    def test_render_page_returns_callback_result(self, pdf):
        assert pdf.render_page(100, 100, lambda c: 42) == 42

    def test_pages_are_listed_in_emission_order(self, buffer, pdf):
        for _ in range(3):
            pdf.render_page(100, 100, lambda c: None)
        pdf.finish()
        data = buffer.getvalue()
        assert b"/Count 3\n   /Kids [ 5 0 R 8 0 R 11 0 R ]" in get_object(data, 2)

    def test_document_without_pages_is_valid(self, buffer, pdf, caplog):
        with caplog.at_level(logging.WARNING, logger="simple_pdf.output"):
            pdf.finish()
        assert "without any page" in caplog.text
        data = buffer.getvalue()
        assert get_object(data, 2) == b"<< /Type /Pages\n   /Count 0\n   /Kids [ ]\n>>"
        assert len(xref_offsets(data)) == 3


# --------------------------------------------------------------------------- #
# Fonts
# --------------------------------------------------------------------------- #

class TestFontObjects:
    def test_fonts_are_shared_across_pages(self, buffer, pdf):
        def draw(c):
            c.left_text(10, 10, BuiltinFont.HELVETICA, 12, "one")
            c.left_text(10, 30, BuiltinFont.HELVETICA, 12, "two")

        pdf.render_page(100, 100, draw)
        pdf.render_page(100, 100, draw)
        pdf.finish()
        data = buffer.getvalue()
        assert data.count(b"/BaseFont /Helvetica") == 1
        # page 1: 3 content, 4 length, 5 font, 6 page; page 2: 7, 8, 9 page
        assert b"/Font << /F0 5 0 R >>" in get_object(data, 6)
        assert b"/Font << /F0 5 0 R >>" in get_object(data, 9)

    def test_font_names_follow_first_use_on_each_page(self, buffer, pdf):
        def first_page(c):
            c.left_text(10, 10, BuiltinFont.TIMES_ROMAN, 12, "a")
            c.left_text(10, 30, BuiltinFont.COURIER, 12, "b")

        def second_page(c):
            c.left_text(10, 10, BuiltinFont.COURIER, 12, "c")

        pdf.render_page(100, 100, first_page)
        pdf.render_page(100, 100, second_page)
        pdf.finish()
        data = buffer.getvalue()
        # page 1: 3 content, 4 length, 5 Times, 6 Courier, 7 page
        assert b"/Font << /F0 5 0 R /F1 6 0 R >>" in get_object(data, 7)
        # page 2: 8 content, 9 length, 10 page
        assert b"/Font << /F0 6 0 R >>" in get_object(data, 10)
        second_stream, _ = get_stream(data, 8)
        assert b"/F0 12 Tf" in second_stream

    def test_symbolic_fonts_have_no_encoding_entry(self, buffer, pdf):
        pdf.render_page(
            100, 100, lambda c: c.left_text(0, 0, BuiltinFont.SYMBOL, 10, "αβγ")
        )
        pdf.finish()
        assert get_object(buffer.getvalue(), 5) == (
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Symbol >>"
        )

    def test_mac_roman_base_encoding(self, buffer):
        pdf = Pdf(buffer, base_encoding=BaseEncoding.MAC_ROMAN)
        pdf.render_page(
            100, 100, lambda c: c.left_text(0, 0, BuiltinFont.HELVETICA, 10, "å")
        )
        pdf.finish()
        data = buffer.getvalue()
        assert b"/Encoding /MacRomanEncoding" in get_object(data, 5)
        stream, _ = get_stream(data, 3)
        assert b"(\x8c) Tj" in stream

    def test_base_encoding_by_name(self, buffer):
        pdf = Pdf(buffer, base_encoding="MacRomanEncoding")
        assert pdf.base_encoding is BaseEncoding.MAC_ROMAN


# --------------------------------------------------------------------------- #
# Document information
# --------------------------------------------------------------------------- #

class TestDocumentInformation:
    def test_info_dictionary(self, buffer, pdf):
        pdf.set_title("Hello (world)")
        pdf.set_author("Ann")
        pdf.set_creation_date(
            datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=1)))
        )
        pdf.render_page(100, 100, lambda c: None)
        pdf.finish()
        data = buffer.getvalue()
        # 3 content, 4 length, 5 page, 6 info
        assert b"/Info 6 0 R" in trailer(data)
        assert get_object(data, 6) == (
            b"<< /Author (Ann)\n"
            b"   /CreationDate (D:20240102030405+0100)\n"
            b"   /ModDate (D:20240102030405+0100)\n"
            b"   /Title (Hello \\(world\\))\n"
            b">>"
        )

    def test_all_keys_are_sorted(self, buffer, pdf):
        pdf.set_title("t")
        pdf.set_subject("s")
        pdf.set_producer("p")
        pdf.set_keywords("k")
        pdf.set_creator("c")
        pdf.set_author("a")
        pdf.finish()
        info = get_object(buffer.getvalue(), 3)
        keys = re.findall(rb"/(\w+) \(", info)
        assert keys == [
            b"Author",
            b"CreationDate",
            b"Creator",
            b"Keywords",
            b"ModDate",
            b"Producer",
            b"Subject",
            b"Title",
        ]

    def test_later_value_replaces_earlier(self, buffer, pdf):
        pdf.set_title("first")
        pdf.set_title("second")
        pdf.finish()
        info = get_object(buffer.getvalue(), 3)
        assert b"(second)" in info
        assert b"(first)" not in info

    def test_non_latin_text_is_written_as_utf16(self, buffer, pdf):
        pdf.set_title("Ωμέγα")
        pdf.finish()
        info = get_object(buffer.getvalue(), 3)
        assert b"/Title <FEFF" + "Ωμέγα".encode("utf-16-be").hex().upper().encode() in info

    def test_timestamp_defaults_to_now(self, buffer, pdf):
        pdf.set_title("now")
        pdf.finish()
        info = get_object(buffer.getvalue(), 3)
        assert re.search(rb"/CreationDate \(D:\d{14}[+-]\d{4}\)", info)

    def test_no_info_without_metadata(self, buffer, pdf):
        pdf.finish()
        assert b"/Info" not in trailer(buffer.getvalue())


# --------------------------------------------------------------------------- #
# Outline
# --------------------------------------------------------------------------- #

class TestOutline:
    def test_chain_of_three_items_over_two_pages(self, buffer, pdf):
        def first_page(c):
            c.add_outline("One")
            c.add_outline("Two")

        pdf.render_page(100, 100, first_page)
        pdf.render_page(100, 100, lambda c: c.add_outline("Three"))
        pdf.finish()
        data = buffer.getvalue()

        # page 1: 3, 4, page 5; page 2: 6, 7, page 8
        # outline: parent 9 reserved first, then items 10, 11, 12
        assert get_object(data, 10) == (
            b"<< /Title (One)\n"
            b"   /Parent 9 0 R\n"
            b"   /Next 11 0 R\n"
            b"   /Dest [5 0 R /XYZ null null null]\n"
            b">>"
        )
        assert get_object(data, 11) == (
            b"<< /Title (Two)\n"
            b"   /Parent 9 0 R\n"
            b"   /Prev 10 0 R\n"
            b"   /Next 12 0 R\n"
            b"   /Dest [5 0 R /XYZ null null null]\n"
            b">>"
        )
        assert get_object(data, 12) == (
            b"<< /Title (Three)\n"
            b"   /Parent 9 0 R\n"
            b"   /Prev 11 0 R\n"
            b"   /Dest [8 0 R /XYZ null null null]\n"
            b">>"
        )
        assert get_object(data, 9) == (
            b"<< /Type /Outlines\n"
            b"   /First 10 0 R\n"
            b"   /Last 12 0 R\n"
            b"   /Count 3\n"
            b">>"
        )
        assert get_object(data, 1) == (
            b"<< /Type /Catalog\n   /Pages 2 0 R\n   /Outlines 9 0 R\n>>"
        )

    def test_single_item_has_no_siblings(self, buffer, pdf):
        pdf.render_page(100, 100, lambda c: c.add_outline("Only"))
        pdf.finish()
        item = get_object(buffer.getvalue(), 7)
        assert b"/Prev" not in item
        assert b"/Next" not in item

    def test_no_outline_without_items(self, buffer, pdf):
        pdf.render_page(100, 100, lambda c: None)
        pdf.finish()
        assert b"/Outlines" not in buffer.getvalue()


# --------------------------------------------------------------------------- #
# Errors & lifecycle
# --------------------------------------------------------------------------- #

class TestLifecycle:
    def test_finished_document_rejects_use(self, pdf):
        pdf.finish()
        with pytest.raises(DocumentFinishedError):
            pdf.render_page(100, 100, lambda c: None)
        with pytest.raises(DocumentFinishedError):
            pdf.set_title("late")
        with pytest.raises(DocumentFinishedError):
            pdf.finish()

    def test_callback_error_propagates_and_closes_stream(self, buffer, pdf):
        def draw(c):
            c.move_to(0, 0)
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            pdf.render_page(100, 100, draw)
        assert buffer.getvalue().endswith(b"0 0 m endstream\nendobj\n")

    def test_callback_error_never_reuses_object_ids(self, pdf):
        def draw(c):
            raise RuntimeError("broken page")

        with pytest.raises(RuntimeError):
            pdf.render_page(100, 100, draw)
        pdf.render_page(100, 100, lambda c: None)
        assert pdf.object_offsets[3] >= 0
        assert pdf.page_object_ids == [6]

    def test_fixed_objects_are_written_once(self, pdf):
        pdf._write_object_with_id(1, "<< >>")
        with pytest.raises(PDFObjectIdError):
            pdf._write_object_with_id(1, "<< >>")

    def test_unwritten_object_is_rejected_in_xref(self):
        with pytest.raises(PDFObjectIdError):
            PDFXrefAndTrailer([-1, 15, -1], startxref=100).serialize()

    def test_create_writes_and_closes_a_file(self, tmp_path):
        path = tmp_path / "out.pdf"
        pdf = Pdf.create(path)
        pdf.render_page(180, 240, draw_box_and_title)
        pdf.finish()
        assert pdf._raw_output.closed
        data = path.read_bytes()
        assert data.startswith(HEADER)
        assert len(xref_offsets(data)) == 7

    def test_create_fails_for_missing_directory(self, tmp_path):
        with pytest.raises(OSError):
            Pdf.create(tmp_path / "missing" / "out.pdf")

    def test_context_manager_finishes(self):
        buffer = BytesIO()
        with Pdf(buffer) as pdf:
            pdf.render_page(100, 100, lambda c: None)
        assert pdf.finished
        assert buffer.getvalue().endswith(b"%%EOF\n")

    def test_context_manager_does_not_finish_on_error(self, tmp_path):
        path = tmp_path / "broken.pdf"
        with pytest.raises(KeyError):
            with Pdf.create(path) as pdf:
                raise KeyError("x")
        assert not pdf.finished
        assert pdf._raw_output.closed
        assert b"%%EOF" not in path.read_bytes()

    def test_write_error_reaches_the_caller(self):
        sink = FailingSink()
        pdf = Pdf(sink)
        sink.failing = True
        with pytest.raises(OSError, match="disk full"):
            pdf.render_page(100, 100, lambda c: c.rectangle(0, 0, 10, 10))
        with pytest.raises(OSError, match="disk full"):
            pdf.finish()

    def test_owned_output_is_closed_when_finish_fails(self):
        sink = FailingSink()
        pdf = Pdf(sink, close_output=True)
        pdf.render_page(100, 100, draw_box_and_title)
        sink.failing = True
        with pytest.raises(OSError):
            pdf.finish()
        assert sink.closed

    def test_borrowed_output_stays_open_when_finish_fails(self):
        sink = FailingSink()
        pdf = Pdf(sink)
        sink.failing = True
        with pytest.raises(OSError):
            pdf.finish()
        assert not sink.closed
