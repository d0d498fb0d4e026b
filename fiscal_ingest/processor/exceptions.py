from typing import ClassVar


class IngestionError(Exception):
    """Base exception for all terminal pipeline failures.

    ``code`` is the stable identifier surfaced to callers in ParseOutcome.error.
    """

    code: ClassVar[str] = "IngestionError"


class InvalidMediaTypeError(IngestionError):
    """Raised when the declared media type is not the accepted PDF type."""

    code = "InvalidMediaType"


class PayloadTooLargeError(IngestionError):
    """Raised when the payload exceeds the configured size ceiling."""

    code = "PayloadTooLarge"


class NoCodesRecognizedError(IngestionError):
    """Raised when a readable document yields no catalogue code at all."""

    code = "NoCodesRecognized"
