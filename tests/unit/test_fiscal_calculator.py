import itertools

import pytest

from fiscal_ingest.fiscal.calculator import FiscalCalculator
from fiscal_ingest.fiscal.models import DerivedTotals
from fiscal_ingest.recognition.catalogue import CATALOGUE
from fiscal_ingest.recognition.models import CodeEntry

FULL_VALUES = {
    "062": 25_000,
    "089": 600_000,
    "110": 4_187,
    "503": 43,
    "511": 400_000,
    "519": 12,
    "538": 1_000_000,
    "547": 625_000,
    "562": 150_000,
    "563": 5_263_157,
    "595": 600_000,
}


def _codes(values: dict[str, int]) -> dict[str, CodeEntry]:
    return {
        entry.code: CodeEntry(
            code=entry.code,
            label=entry.label,
            value=values.get(entry.code, 0),
            found=entry.code in values,
        )
        for entry in CATALOGUE
    }


class TestFiscalCalculator:
    def test_computes_all_totals(self) -> None:
        totals = FiscalCalculator().compute(_codes(FULL_VALUES))
        assert totals == DerivedTotals(
            net_credit=400_000,
            net_purchases=2_105_263,
            determined_tax=600_000,
            total_payable=625_000,
            gross_margin=3_157_894,
        )

    def test_determined_tax_is_debit_minus_credit(self) -> None:
        totals = FiscalCalculator().compute(_codes({"538": 1_000_000, "511": 400_000}))
        assert totals.determined_tax == 600_000

    def test_credit_surplus_gives_zero_determined_tax(self) -> None:
        totals = FiscalCalculator().compute(_codes({"538": 100_000, "511": 400_000}))
        assert totals.determined_tax == 0
        assert totals.total_payable == 0

    def test_missing_credit_uses_full_debit(self) -> None:
        totals = FiscalCalculator().compute(_codes({"538": 190}))
        assert totals.determined_tax == 190
        assert totals.net_credit == 0
        assert totals.net_purchases == 0

    def test_net_purchases_truncates(self) -> None:
        totals = FiscalCalculator().compute(_codes({"511": 10}))
        # 10 / 0.19 = 52.63...
        assert totals.net_purchases == 52

    def test_gross_margin_zero_without_sales(self) -> None:
        totals = FiscalCalculator().compute(_codes({"511": 400_000}))
        assert totals.gross_margin == 0

    def test_gross_margin_can_be_negative(self) -> None:
        totals = FiscalCalculator().compute(_codes({"563": 1_000, "511": 1_900}))
        assert totals.gross_margin == 1_000 - 10_000

    def test_total_payable_adds_ppm(self) -> None:
        totals = FiscalCalculator().compute(_codes({"538": 500, "062": 70}))
        assert totals.total_payable == 570

    def test_empty_mapping_returns_zeros(self) -> None:
        assert FiscalCalculator().compute({}) == DerivedTotals()

    def test_unfound_entries_are_ignored(self) -> None:
        codes = _codes({"538": 1_000})
        codes["511"] = CodeEntry(code="511", label="Crédito fiscal", value=999, found=False)
        totals = FiscalCalculator().compute(codes)
        assert totals.determined_tax == 1_000


class TestTotalsNeverRaise:
    @pytest.mark.parametrize("size", [0, 1, 2, 3])
    def test_any_subset_of_codes_yields_integer_totals(self, size: int) -> None:
        calculator = FiscalCalculator()
        for subset in itertools.combinations(sorted(FULL_VALUES), size):
            values = {code: FULL_VALUES[code] for code in subset}
            totals = calculator.compute(_codes(values))
            for value in (
                totals.net_credit,
                totals.net_purchases,
                totals.determined_tax,
                totals.total_payable,
                totals.gross_margin,
            ):
                assert isinstance(value, int)
