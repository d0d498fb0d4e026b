from fiscal_ingest.config.settings import Settings
from fiscal_ingest.fiscal.calculator import FiscalCalculator
from fiscal_ingest.fiscal.confidence import ConfidenceScorer
from fiscal_ingest.fiscal.models import DerivedTotals, FiscalSnapshot
from fiscal_ingest.logging.logger import Log
from fiscal_ingest.pdf.base import BasePdfExtractor
from fiscal_ingest.pdf.factory import PdfExtractorFactory
from fiscal_ingest.processor.document_loader import DocumentLoader
from fiscal_ingest.processor.exceptions import IngestionError
from fiscal_ingest.processor.models import ParseOutcome, TaxDocument
from fiscal_ingest.processor.pipeline import PipelineContext, PipelineStep
from fiscal_ingest.processor.result_assembler import ResultAssembler
from fiscal_ingest.processor.steps import (
    ComputeTotalsStep,
    ExtractTextStep,
    LoadDocumentStep,
    RecognizeFieldsStep,
    ScoreConfidenceStep,
)
from fiscal_ingest.recognition.recognizer import FieldRecognizer


class Processor:
    """Runs the F29 pipeline for one document.

    Pipeline: load -> extract -> recognize -> compute totals -> score -> assemble.
    Terminal ingestion errors become an unsuccessful ParseOutcome; any other
    exception propagates to the caller.
    """

    def __init__(self, steps: list[PipelineStep], assembler: ResultAssembler) -> None:
        self._steps = steps
        self._assembler = assembler

    def process(self, document: TaxDocument) -> ParseOutcome:
        Log.info(f"Processing {document.media_type} document ({document.size} bytes)")
        context = PipelineContext(document=document)
        try:
            for step in self._steps:
                context = step.run(context)
        except IngestionError as exc:
            Log.error(f"Document rejected ({exc.code}): {exc}")
            return self._assembler.failure(exc.code)

        if context.recognition is None:
            raise ValueError("Pipeline finished without a recognition result")
        snapshot = FiscalSnapshot(
            identification=context.recognition.identification,
            codes=context.recognition.codes,
            totals=context.totals or DerivedTotals(),
        )
        Log.info(f"Document parsed with confidence {context.confidence}")
        return self._assembler.success(snapshot, context.confidence)


def build_processor(
    settings: Settings,
    optical_extractor: BasePdfExtractor | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    loader = DocumentLoader.from_settings(settings)
    pdf_extractor = PdfExtractorFactory.create(settings, optical=optical_extractor)
    steps: list[PipelineStep] = [
        LoadDocumentStep(loader),
        ExtractTextStep(pdf_extractor),
        RecognizeFieldsStep(FieldRecognizer()),
        ComputeTotalsStep(FiscalCalculator()),
        ScoreConfidenceStep(ConfidenceScorer()),
    ]
    return Processor(steps=steps, assembler=ResultAssembler())
