class PayrollError(Exception):
    """Base exception for payroll reconciliation errors."""


class PayrollValidationError(PayrollError):
    """Raised when a payroll payload does not have the expected shape."""
