"""Gross/deduction/net payroll totals and their coherence check."""

from collections.abc import Iterable

from fiscal_ingest.logging.logger import Log
from fiscal_ingest.payroll.models import (
    DEDUCTION,
    EARNING,
    PayrollLineItem,
    ReconciliationResult,
    StoredTotals,
)

TOLERANCE = 0.01
# Decimal places kept before comparing with TOLERANCE; drops float noise.
_PRECISION = 9


class PayrollReconciler:
    """Single source of truth for payslip totals."""

    def compute_gross_total(self, items: Iterable[PayrollLineItem]) -> int:
        return sum(item.amount for item in items if item.kind == EARNING)

    def compute_deduction_total(self, items: Iterable[PayrollLineItem]) -> int:
        return sum(item.amount for item in items if item.kind == DEDUCTION)

    def compute_net_total(self, items: Iterable[PayrollLineItem]) -> int:
        line_items = list(items)
        return self.compute_gross_total(line_items) - self.compute_deduction_total(
            line_items
        )

    def validate(
        self,
        items: Iterable[PayrollLineItem],
        stored: StoredTotals,
    ) -> ReconciliationResult:
        """Compare computed totals with *stored*, allowing TOLERANCE per total.

        Differences are computed minus stored. Negative line-item amounts are
        reported as errors and make the result invalid.
        """
        line_items = list(items)
        errors = [
            f"Line item '{item.label}' has negative amount {item.amount}"
            for item in line_items
            if item.amount < 0
        ]

        computed = {
            "gross": self.compute_gross_total(line_items),
            "deductions": self.compute_deduction_total(line_items),
            "net": self.compute_net_total(line_items),
        }
        stored_values = {
            "gross": stored.gross,
            "deductions": stored.deductions,
            "net": stored.net,
        }
        differences: dict[str, float] = {}
        for name, value in computed.items():
            difference = value - stored_values[name]
            differences[name] = round(difference, 2)
            if round(abs(difference), _PRECISION) > TOLERANCE:
                errors.append(
                    f"{name} mismatch: computed {value} vs stored {stored_values[name]}"
                )

        if errors:
            Log.warning(f"Payroll reconciliation found {len(errors)} problems")
        return ReconciliationResult(
            is_valid=not errors, differences=differences, errors=errors
        )
