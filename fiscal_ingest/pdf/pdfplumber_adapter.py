import io
import unicodedata

import pdfplumber

from fiscal_ingest.pdf.base import BasePdfExtractor
from fiscal_ingest.pdf.exceptions import ExtractionFailedError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return unicodedata.normalize("NFC", "\n".join(pages)).strip()
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pdfplumber extraction failed: {exc}") from exc

    def has_text_layer(self, pdf_bytes: bytes) -> bool:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return any(
                    char["text"].strip() for page in pdf.pages for char in page.chars
                )
        except Exception as exc:
            raise ExtractionFailedError(f"pdfplumber could not open PDF: {exc}") from exc
