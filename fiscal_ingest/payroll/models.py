from dataclasses import dataclass, field

EARNING = "earning"
DEDUCTION = "deduction"


@dataclass(frozen=True)
class PayrollLineItem:
    """One earning or deduction on a payslip (CLP)."""

    label: str
    kind: str
    amount: int


@dataclass(frozen=True)
class StoredTotals:
    """Totals as stored or supplied by the user (e.g. from a spreadsheet)."""

    gross: float
    deductions: float
    net: float


@dataclass(frozen=True)
class ReconciliationResult:
    """Outcome of comparing computed totals with stored ones."""

    is_valid: bool
    differences: dict[str, float] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
