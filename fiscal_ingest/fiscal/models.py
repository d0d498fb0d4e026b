from dataclasses import dataclass, field

from fiscal_ingest.recognition.models import CodeEntry, Identification


@dataclass(frozen=True)
class DerivedTotals:
    """Totals derived from recognized code values (CLP, no subunits)."""

    net_credit: int = 0
    net_purchases: int = 0
    determined_tax: int = 0
    total_payable: int = 0
    gross_margin: int = 0


@dataclass(frozen=True)
class FiscalSnapshot:
    """Full structured result of parsing one F29 document."""

    identification: Identification
    codes: dict[str, CodeEntry] = field(default_factory=dict)
    totals: DerivedTotals = field(default_factory=DerivedTotals)
