"""Catalogue-driven recognition of F29 fields in extracted text.

Processing flow:
1. Normalize Unicode (NFC) so accented labels compare as single codepoints.
2. Identification fields: one pattern per field, first match in document order.
3. Codes: one pattern per catalogue entry, built from the code, its label
   fragment and a numeric run with dot-or-comma thousands separators that stands
   on its own (not glued to following letters, as in "2DO").
   Entries are matched independently and in catalogue order.
"""

import re
import unicodedata
from typing import ClassVar

from fiscal_ingest.logging.logger import Log
from fiscal_ingest.recognition.catalogue import CATALOGUE
from fiscal_ingest.recognition.models import (
    NOT_AVAILABLE,
    CatalogueEntry,
    CodeEntry,
    Identification,
    Recognition,
)

_AMOUNT = r"(?<![\d.,])(?P<value>\d{1,3}(?:[.,]\d{3})+|\d+)(?!\w)"
_SEPARATORS_RE = re.compile(r"[.,]")


def parse_amount(raw: str) -> int | None:
    """Parse "1.911.129" / "1,911,129" / "43" into a non-negative int.

    Returns None when the run is not a plain group of digits once separators
    are stripped.
    """
    digits = _SEPARATORS_RE.sub("", raw.strip())
    if not digits.isdigit():
        return None
    try:
        return int(digits)
    except ValueError:
        return None


class FieldRecognizer:
    """Extracts identification fields and catalogue codes from flat text."""

    _RUT_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\bRUT\b(?:\s*\[\d+\])?\D*?(?<![\d.])"
        r"(?P<value>\d{1,2}\.?\d{3}\.?\d{3}(?:-?[\dK])?)(?![\dK])",
        re.IGNORECASE,
    )
    _PERIOD_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\bPER[IÍ]ODO\b(?:\s*\[\d+\])?\D*?(?P<value>\d{6})(?!\d)",
        re.IGNORECASE,
    )
    _FOLIO_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\bFOLIO\b(?:\s*\[\d+\])?\D*?(?P<value>\d+)",
        re.IGNORECASE,
    )
    _LEGAL_NAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"RAZ[OÓ]N\s+SOCIAL[ \t]*:?\s*(?P<value>[^\W\d_]+(?:[ \t]+[^\W\d_]+)*)",
        re.IGNORECASE,
    )

    def __init__(self, catalogue: tuple[CatalogueEntry, ...] = CATALOGUE) -> None:
        self._catalogue = catalogue
        self._code_patterns: list[tuple[CatalogueEntry, re.Pattern[str]]] = [
            (entry, self._compile_code_pattern(entry)) for entry in catalogue
        ]

    def recognize(self, text: str) -> Recognition:
        """Scan *text* for identification fields and catalogue codes.

        Never fails: unmatched fields keep their defaults, and a text with no
        recognizable code yields a Recognition whose codes are all unfound.
        """
        normalized = unicodedata.normalize("NFC", text)
        identification = self._recognize_identification(normalized)
        codes = self._recognize_codes(normalized)
        result = Recognition(identification=identification, codes=codes)
        Log.info(
            f"Recognized {result.codes_found}/{len(self._catalogue)} codes "
            f"(rut={identification.rut}, period={identification.period})"
        )
        return result

    def _recognize_identification(self, text: str) -> Identification:
        return Identification(
            rut=self._first_match(self._RUT_RE, text),
            period=self._first_match(self._PERIOD_RE, text),
            folio=self._first_match(self._FOLIO_RE, text),
            legal_name=self._first_match(self._LEGAL_NAME_RE, text),
        )

    def _recognize_codes(self, text: str) -> dict[str, CodeEntry]:
        codes: dict[str, CodeEntry] = {}
        for entry, pattern in self._code_patterns:
            codes[entry.code] = self._recognize_code(entry, pattern, text)
        return codes

    def _recognize_code(
        self,
        entry: CatalogueEntry,
        pattern: re.Pattern[str],
        text: str,
    ) -> CodeEntry:
        match = pattern.search(text)
        if match is None:
            Log.debug(f"Code {entry.code} not found")
            return CodeEntry(code=entry.code, label=entry.label)
        value = parse_amount(match.group("value"))
        if value is None:
            Log.debug(f"Code {entry.code}: unparseable amount {match.group('value')!r}")
            return CodeEntry(code=entry.code, label=entry.label)
        Log.debug(f"Code {entry.code}: {value} <- {match.group(0)!r}")
        return CodeEntry(code=entry.code, label=entry.label, value=value, found=True)

    @staticmethod
    def _compile_code_pattern(entry: CatalogueEntry) -> re.Pattern[str]:
        # Code, label and amount must share one line; "." does not cross newlines.
        return re.compile(
            rf"(?<![\d.,]){re.escape(entry.code)}(?!\d).*?{entry.label_pattern}.*?{_AMOUNT}",
            re.IGNORECASE,
        )

    @staticmethod
    def _first_match(pattern: re.Pattern[str], text: str) -> str:
        match = pattern.search(text)
        if match is None:
            return NOT_AVAILABLE
        return match.group("value").strip()
