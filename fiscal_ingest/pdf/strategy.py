from fiscal_ingest.logging.logger import Log
from fiscal_ingest.pdf.base import BasePdfExtractor
from fiscal_ingest.pdf.exceptions import ExtractionFailedError


class ExtractionStrategy(BasePdfExtractor):
    """Chooses the extractor for a document by inspecting its text layer.

    Documents with embedded text go to the direct extractor. Image-only scans go
    to the optical extractor when one is configured; none ships with this package.
    """

    def __init__(
        self,
        direct: BasePdfExtractor,
        optical: BasePdfExtractor | None = None,
    ) -> None:
        self._direct = direct
        self._optical = optical

    def extract(self, pdf_bytes: bytes) -> str:
        extractor = self.select(pdf_bytes)
        text = extractor.extract(pdf_bytes)
        if not text:
            raise ExtractionFailedError("PDF produced no text")
        return text

    def has_text_layer(self, pdf_bytes: bytes) -> bool:
        return self._direct.has_text_layer(pdf_bytes)

    def select(self, pdf_bytes: bytes) -> BasePdfExtractor:
        """Return the extractor suited to *pdf_bytes*.

        Raises:
            ExtractionFailedError: if the PDF is unreadable, or has no text layer
                and no optical extractor is configured.
        """
        if self._direct.has_text_layer(pdf_bytes):
            return self._direct
        if self._optical is None:
            raise ExtractionFailedError("PDF has no extractable text layer")
        Log.info("PDF has no text layer, using optical extractor")
        return self._optical
