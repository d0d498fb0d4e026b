import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

F29_HEADER_LINES = [
    "FORMULARIO 29 DECLARACION MENSUAL Y PAGO SIMULTANEO DE IMPUESTOS",
    "RUT [03] 76.123.456-7",
    "PERIODO [15] 202403",
    "FOLIO [07] 8812345",
    "RAZON SOCIAL COMERCIAL ANDES LIMITADA",
]

F29_CODE_LINES = {
    "062": "062 PPM NETO DETERMINADO 25.000",
    "089": "089 IMP. DETERM. IVA 600.000",
    "110": "110 CANT. DE DCTOS. BOLETAS 4.187",
    "503": "503 CANTIDAD FACTURAS EMITIDAS 43",
    "511": "511 CRED. IVA POR DCTOS. ELECTRONICOS 400.000",
    "519": "519 CANT. DE DCTOS. FACT. RECIB. DEL GIRO 12",
    "538": "538 TOTAL DEBITOS 1.000.000",
    "547": "547 TOTAL DETERMINADO 625.000",
    "562": "562 MONTO SIN DER. A CRED. FISCAL 150.000",
    "563": "563 BASE IMPONIBLE 5.263.157",
    "595": "595 SUB TOTAL IMP. DETERMINADO 600.000",
}

PARTIAL_CODES = ("062", "503", "511", "538", "563")


def render_pdf(pages: list[list[str]]) -> bytes:
    """Render each page's lines top to bottom into an in-memory PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 740
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


def f29_text(codes: tuple[str, ...] | None = None) -> str:
    """Flat F29 text as a text extractor would return it."""
    selected = F29_CODE_LINES if codes is None else {c: F29_CODE_LINES[c] for c in codes}
    return "\n".join(F29_HEADER_LINES + list(selected.values()))


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return render_pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return render_pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return render_pdf([[]])


@pytest.fixture()
def f29_pdf_bytes() -> bytes:
    """A complete F29 with every catalogue code, split over two pages."""
    return render_pdf(
        [
            F29_HEADER_LINES + [F29_CODE_LINES[c] for c in ("062", "089", "110", "503")],
            [line for code, line in F29_CODE_LINES.items() if code not in {"062", "089", "110", "503"}],
        ]
    )


@pytest.fixture()
def partial_f29_pdf_bytes() -> bytes:
    """An F29 where only five catalogue codes are legible."""
    return render_pdf([F29_HEADER_LINES + [F29_CODE_LINES[c] for c in PARTIAL_CODES]])


@pytest.fixture()
def make_f29_text():  # type: ignore[no-untyped-def]
    """Factory for flat F29 text holding the given subset of codes."""
    return f29_text
