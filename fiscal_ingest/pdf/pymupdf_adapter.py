import unicodedata

import pymupdf

from fiscal_ingest.pdf.base import BasePdfExtractor
from fiscal_ingest.pdf.exceptions import ExtractionFailedError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return unicodedata.normalize("NFC", "\n".join(pages)).strip()
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pymupdf extraction failed: {exc}") from exc

    def has_text_layer(self, pdf_bytes: bytes) -> bool:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return any(page.get_text().strip() for page in doc)
        except Exception as exc:
            raise ExtractionFailedError(f"pymupdf could not open PDF: {exc}") from exc
