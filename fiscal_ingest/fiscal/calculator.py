"""Derives F29 fiscal totals from recognized code values.

Codes used:
    062  PPM neto determinado
    511  crédito fiscal
    538  débito fiscal
    563  ventas netas

All arithmetic is integer; divisions truncate.
"""

from collections.abc import Mapping

from fiscal_ingest.fiscal.models import DerivedTotals
from fiscal_ingest.logging.logger import Log
from fiscal_ingest.recognition.models import CodeEntry

IVA_RATE_PERCENT = 19


class FiscalCalculator:
    """Computes DerivedTotals; missing inputs make the dependent totals 0."""

    def compute(self, codes: Mapping[str, CodeEntry]) -> DerivedTotals:
        ppm = self._value(codes, "062")
        credit = self._value(codes, "511")
        debit = self._value(codes, "538")
        sales = self._value(codes, "563")

        net_purchases = credit * 100 // IVA_RATE_PERCENT
        determined_tax = max(debit - credit, 0) if debit else 0
        gross_margin = sales - net_purchases if sales else 0

        totals = DerivedTotals(
            net_credit=credit,
            net_purchases=net_purchases,
            determined_tax=determined_tax,
            total_payable=determined_tax + ppm,
            gross_margin=gross_margin,
        )
        Log.debug(f"Derived totals: {totals}")
        return totals

    @staticmethod
    def _value(codes: Mapping[str, CodeEntry], code: str) -> int:
        entry = codes.get(code)
        if entry is None or not entry.found:
            return 0
        return max(entry.value, 0)
