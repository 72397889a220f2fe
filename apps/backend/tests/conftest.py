import fitz  # PyMuPDF
import pytest


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF containing ``text``."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def resume_pdf() -> bytes:
    return make_pdf("Built X using Python and SQL")
