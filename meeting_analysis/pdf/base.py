from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[list[str]]:
        """Decode PDF bytes into pages of text runs.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One list of text runs per page, in reading order.

        Raises:
            PdfExtractionError: if the bytes are not a well-formed PDF.
        """

    def extract(self, pdf_bytes: bytes) -> str:
        """Return the full document text: runs joined by spaces, one line per page."""
        return "".join(" ".join(runs) + "\n" for runs in self.extract_pages(pdf_bytes))
