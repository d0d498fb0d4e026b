from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Text of all pages joined in physical order, NFC-normalized and stripped.

        Raises:
            ExtractionFailedError: if the bytes are not a readable PDF.
        """

    @abstractmethod
    def has_text_layer(self, pdf_bytes: bytes) -> bool:
        """Tell whether any page carries embedded text.

        Raises:
            ExtractionFailedError: if the bytes are not a readable PDF.
        """
