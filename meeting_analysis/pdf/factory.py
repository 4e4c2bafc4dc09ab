from typing import ClassVar

from meeting_analysis.config.settings import Settings
from meeting_analysis.logging.logger import Log
from meeting_analysis.pdf.base import BasePdfExtractor
from meeting_analysis.pdf.pdfplumber_adapter import PdfPlumberAdapter
from meeting_analysis.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PDF decoding adapter named by ``Settings.pdf_engine``."""

    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        name = settings.pdf_engine.strip().lower()
        try:
            engine_cls = cls.ENGINES[name]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{name}'. Choose from: {sorted(cls.ENGINES)}"
            ) from None
        Log.debug(f"Using PDF engine {name}")
        return engine_cls()
