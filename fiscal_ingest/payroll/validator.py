"""Builds payroll domain objects from raw parsed JSON."""

from typing import Any

from fiscal_ingest.payroll.exceptions import PayrollValidationError
from fiscal_ingest.payroll.models import DEDUCTION, EARNING, PayrollLineItem, StoredTotals

_VALID_KINDS = frozenset({EARNING, DEDUCTION})


def build_payroll(data: Any) -> tuple[list[PayrollLineItem], StoredTotals]:
    """Validate a payroll payload and build its line items and stored totals.

    Expected shape::

        {"items": [{"label": str, "kind": "earning"|"deduction", "amount": int}],
         "totals": {"gross": number, "deductions": number, "net": number}}

    Raises:
        PayrollValidationError: on any shape violation.
    """
    if not isinstance(data, dict):
        raise PayrollValidationError("Payroll payload must be an object")
    for field in ("items", "totals"):
        if field not in data:
            raise PayrollValidationError(f"Missing required top-level field: {field}")
    return _build_items(data["items"]), _build_totals(data["totals"])


def _build_items(raw: Any) -> list[PayrollLineItem]:
    if not isinstance(raw, list):
        raise PayrollValidationError("'items' must be a list")
    return [_build_item(item, i) for i, item in enumerate(raw)]


def _build_item(raw: Any, index: int) -> PayrollLineItem:
    if not isinstance(raw, dict):
        raise PayrollValidationError(f"Item at index {index} must be an object")
    label = raw.get("label")
    if not label or not isinstance(label, str):
        raise PayrollValidationError(
            f"Item at index {index}: 'label' must be a non-empty string"
        )
    kind = raw.get("kind")
    if kind not in _VALID_KINDS:
        raise PayrollValidationError(
            f"Item at index {index}: 'kind' must be one of {sorted(_VALID_KINDS)}, "
            f"got {kind!r}"
        )
    amount = raw.get("amount")
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise PayrollValidationError(
            f"Item at index {index}: 'amount' must be an integer"
        )
    return PayrollLineItem(label=label, kind=kind, amount=amount)


def _build_totals(raw: Any) -> StoredTotals:
    if not isinstance(raw, dict):
        raise PayrollValidationError("'totals' must be an object")
    values: dict[str, float] = {}
    for name in ("gross", "deductions", "net"):
        value = raw.get(name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PayrollValidationError(f"'totals.{name}' must be a number")
        values[name] = float(value)
    return StoredTotals(**values)
