from collections.abc import Mapping

from fiscal_ingest.processor.exceptions import NoCodesRecognizedError
from fiscal_ingest.recognition.models import CodeEntry, count_found

WEIGHT_PER_CODE = 10
MAX_CONFIDENCE = 100


class ConfidenceScorer:
    """Coarse completeness score: 10 points per recognized code, capped at 100."""

    def score(self, codes: Mapping[str, CodeEntry]) -> int:
        """Return the confidence for *codes*.

        Raises:
            NoCodesRecognizedError: if no code carries a non-zero value.
        """
        codes_found = count_found(codes)
        if codes_found == 0:
            raise NoCodesRecognizedError("No F29 codes recognized in document")
        return min(MAX_CONFIDENCE, codes_found * WEIGHT_PER_CODE)
