from fiscal_ingest.config.settings import Settings
from fiscal_ingest.pdf.base import BasePdfExtractor
from fiscal_ingest.pdf.pdfplumber_adapter import PdfPlumberAdapter
from fiscal_ingest.pdf.pymupdf_adapter import PyMuPdfAdapter
from fiscal_ingest.pdf.strategy import ExtractionStrategy


class PdfExtractorFactory:
    """Creates the text extraction strategy based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        optical: BasePdfExtractor | None = None,
    ) -> ExtractionStrategy:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return ExtractionStrategy(direct=adapter_cls(), optical=optical)
