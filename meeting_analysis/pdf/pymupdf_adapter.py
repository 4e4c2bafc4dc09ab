import pymupdf

from meeting_analysis.pdf.base import BasePdfExtractor
from meeting_analysis.pdf.exceptions import PdfExtractionError

# Index of the word text in tuples returned by Page.get_text("words").
_WORD_TEXT = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts word runs from PDF pages using PyMuPDF."""

    def extract_pages(self, pdf_bytes: bytes) -> list[list[str]]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [
                    [word[_WORD_TEXT] for word in page.get_text("words")]
                    for page in doc
                ]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
