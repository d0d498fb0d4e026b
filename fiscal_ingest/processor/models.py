from dataclasses import dataclass

from fiscal_ingest.fiscal.models import FiscalSnapshot


@dataclass(frozen=True)
class TaxDocument:
    """An uploaded document as declared by the caller."""

    content: bytes
    media_type: str
    size: int


@dataclass(frozen=True)
class ParseOutcome:
    """Result of one pipeline run, successful or not."""

    success: bool
    method: str
    confidence: int = 0
    snapshot: FiscalSnapshot | None = None
    error: str | None = None
