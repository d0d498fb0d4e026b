from fiscal_ingest.fiscal.calculator import FiscalCalculator
from fiscal_ingest.fiscal.confidence import ConfidenceScorer
from fiscal_ingest.logging.logger import Log
from fiscal_ingest.pdf.base import BasePdfExtractor
from fiscal_ingest.processor.document_loader import DocumentLoader
from fiscal_ingest.processor.pipeline import PipelineContext, PipelineStep
from fiscal_ingest.recognition.recognizer import FieldRecognizer


class LoadDocumentStep(PipelineStep):
    def __init__(self, loader: DocumentLoader) -> None:
        self._loader = loader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._loader.load(context.document)
        Log.info(f"Loaded {len(context.raw_bytes)} bytes")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._pdf_extractor.extract(context.raw_bytes)
        Log.info(f"Extracted {len(context.extracted_text)} chars")
        return context


class RecognizeFieldsStep(PipelineStep):
    def __init__(self, recognizer: FieldRecognizer) -> None:
        self._recognizer = recognizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.recognition = self._recognizer.recognize(context.extracted_text)
        return context


class ComputeTotalsStep(PipelineStep):
    def __init__(self, calculator: FiscalCalculator) -> None:
        self._calculator = calculator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.recognition is None:
            raise ValueError("PipelineContext.recognition must be set before computing totals")
        context.totals = self._calculator.compute(context.recognition.codes)
        return context


class ScoreConfidenceStep(PipelineStep):
    def __init__(self, scorer: ConfidenceScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.recognition is None:
            raise ValueError("PipelineContext.recognition must be set before scoring")
        context.confidence = self._scorer.score(context.recognition.codes)
        Log.info(f"Confidence {context.confidence}")
        return context
