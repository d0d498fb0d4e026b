from collections.abc import Mapping
from dataclasses import dataclass, field

NOT_AVAILABLE = "No disponible"


@dataclass(frozen=True)
class CatalogueEntry:
    """One registered F29 code and the label fragment expected next to it."""

    code: str
    label: str
    label_pattern: str


@dataclass(frozen=True)
class CodeEntry:
    """Value recognized for a catalogue code (0 when not found)."""

    code: str
    label: str
    value: int = 0
    found: bool = False


@dataclass(frozen=True)
class Identification:
    """Taxpayer and filing identifiers printed on the form."""

    rut: str = NOT_AVAILABLE
    period: str = NOT_AVAILABLE
    folio: str = NOT_AVAILABLE
    legal_name: str = NOT_AVAILABLE


@dataclass(frozen=True)
class Recognition:
    """Output of the field recognizer."""

    identification: Identification
    codes: dict[str, CodeEntry] = field(default_factory=dict)

    @property
    def codes_found(self) -> int:
        return count_found(self.codes)


def count_found(codes: Mapping[str, CodeEntry]) -> int:
    """Number of codes carrying a non-zero value; a printed 0 does not count."""
    return sum(1 for entry in codes.values() if entry.value > 0)
