"""
Tests for the settings read from the environment.
"""

from io import BytesIO

import pytest
from pydantic import ValidationError

from simple_pdf import BaseEncoding, BuiltinFont, MAC_ROMAN_ENCODING, Pdf, get_settings


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.default_encoding is BaseEncoding.WIN_ANSI
        assert settings.buffer_size == 65536

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_default_encoding_from_environment(self, monkeypatch):
        monkeypatch.setenv("SIMPLE_PDF_DEFAULT_ENCODING", "MacRomanEncoding")
        assert Pdf(BytesIO()).base_encoding is BaseEncoding.MAC_ROMAN
        assert BuiltinFont.HELVETICA.encoding is MAC_ROMAN_ENCODING

    def test_explicit_encoding_wins(self, monkeypatch):
        monkeypatch.setenv("SIMPLE_PDF_DEFAULT_ENCODING", "MacRomanEncoding")
        assert Pdf(BytesIO(), BaseEncoding.WIN_ANSI).base_encoding is BaseEncoding.WIN_ANSI

    def test_header_version_is_not_configurable(self, monkeypatch):
        monkeypatch.setenv("SIMPLE_PDF_PDF_VERSION", "1.4")
        buffer = BytesIO()
        Pdf(buffer)
        assert buffer.getvalue().startswith(b"%PDF-1.7\n")
        assert not hasattr(get_settings(), "pdf_version")

    def test_invalid_buffer_size(self, monkeypatch):
        monkeypatch.setenv("SIMPLE_PDF_BUFFER_SIZE", "0")
        with pytest.raises(ValidationError):
            get_settings()
