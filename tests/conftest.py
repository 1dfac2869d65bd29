from io import BytesIO

import pytest

from simple_pdf import Pdf, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def buffer():
    return BytesIO()


@pytest.fixture
def pdf(buffer):
    return Pdf(buffer)
