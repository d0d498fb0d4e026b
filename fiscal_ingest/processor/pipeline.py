from abc import ABC, abstractmethod
from dataclasses import dataclass

from fiscal_ingest.fiscal.models import DerivedTotals
from fiscal_ingest.processor.models import TaxDocument
from fiscal_ingest.recognition.models import Recognition


@dataclass(slots=True)
class PipelineContext:
    document: TaxDocument
    raw_bytes: bytes = b""
    extracted_text: str = ""
    recognition: Recognition | None = None
    totals: DerivedTotals | None = None
    confidence: int = 0


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
