import mimetypes
from pathlib import Path

from fiscal_ingest.config.settings import Settings
from fiscal_ingest.processor.exceptions import InvalidMediaTypeError, PayloadTooLargeError
from fiscal_ingest.processor.models import TaxDocument


class DocumentLoader:
    """Validates an uploaded document's media type and size."""

    def __init__(self, max_bytes: int, accepted_media_type: str) -> None:
        self._max_bytes = max_bytes
        self._accepted_media_type = accepted_media_type.lower()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentLoader":
        return cls(
            max_bytes=settings.max_upload_bytes,
            accepted_media_type=settings.accepted_media_type,
        )

    def load(self, document: TaxDocument) -> bytes:
        """Return the document bytes unchanged once they pass validation.

        Raises:
            InvalidMediaTypeError: if media_type is not the accepted PDF type.
            PayloadTooLargeError: if size exceeds the configured ceiling.
        """
        media_type = document.media_type.split(";", 1)[0].strip().lower()
        if media_type != self._accepted_media_type:
            raise InvalidMediaTypeError(
                f"media type '{document.media_type}' is not supported"
            )
        if document.size > self._max_bytes:
            raise PayloadTooLargeError(
                f"payload of {document.size} bytes exceeds {self._max_bytes} bytes"
            )
        return document.content

    @staticmethod
    def read_path(path: Path) -> TaxDocument:
        """Build a TaxDocument from a file on disk, guessing its media type.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        media_type, _ = mimetypes.guess_type(path.name)
        content = path.read_bytes()
        return TaxDocument(
            content=content,
            media_type=media_type or "application/octet-stream",
            size=len(content),
        )
