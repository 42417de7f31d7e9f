import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from flash_report.extraction.models import IncidentRecord


def make_png_bytes(width: int = 2000, height: int = 1000, color: str = "red") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


def make_record(**overrides: object) -> IncidentRecord:
    fields: dict[str, object] = {
        "title": "حفاظتی واقعہ",
        "operation": "آپریشن",
        "department": "شعبہ",
        "location": "مقام",
        "company": "کمپنی",
        "date": "تاریخ",
        "time": "وقت",
        "classification": "درجہ",
        "fatal_risk": "خطرہ",
        "severity": "شدت",
        "summary": "خلاصہ",
        "how_it_happened": "وجہ",
        "actions": "پہلا قدم\nدوسرا قدم",
        "image_caption": "",
        "box_2d": None,
    }
    fields.update(overrides)
    return IncidentRecord(**fields)  # type: ignore[arg-type]


@pytest.fixture()
def png_bytes() -> bytes:
    """A 2000x1000 solid PNG."""
    return make_png_bytes()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF poster."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Safety Incident: Truck Tipped")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for page in range(3):
        c.drawString(72, 720, f"Page {page + 1}")
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def record_factory():
    """Build IncidentRecords with Urdu defaults; keyword arguments override fields."""
    return make_record


@pytest.fixture()
def png_factory():
    """Build solid PNGs of a given size."""
    return make_png_bytes
