from fiscal_ingest.processor.exceptions import IngestionError


class ExtractionFailedError(IngestionError):
    """Raised when PDF bytes are malformed or carry no extractable text layer."""

    code = "ExtractionFailed"
