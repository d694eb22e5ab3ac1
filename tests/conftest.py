import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def out_of_order_pdf_bytes() -> bytes:
    """Two lines whose fragments are drawn right-to-left and bottom-to-top."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 600, "Second line")
    c.drawString(320, 700, "Right half")
    c.drawString(72, 700, "Left half")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def mixed_font_size_pdf_bytes() -> bytes:
    """A 16pt and a 10pt word sharing one baseline, with a line below."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setFont("Helvetica", 10)
    c.drawString(200, 700, "Jane")
    c.setFont("Helvetica-Bold", 16)
    c.drawString(72, 700, "Name")
    c.setFont("Helvetica", 10)
    c.drawString(72, 680, "Below")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def blank_middle_page_pdf_bytes() -> bytes:
    """Three pages; the middle one carries no text."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "First page")
    c.showPage()
    c.showPage()
    c.drawString(72, 720, "Third page")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """A DOCX with two paragraphs followed by a one-row table."""
    document = docx.Document()
    document.add_paragraph("Jane Doe")
    document.add_paragraph("Senior Platform Engineer")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "Kubernetes"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()
