import asyncio

from meeting_analysis.analysis.exceptions import ExtractionError
from meeting_analysis.analysis.models import ExtractionResult, SourceFile
from meeting_analysis.analyzers.base import BaseTextAnalyzer
from meeting_analysis.logging.logger import Log
from meeting_analysis.pdf.base import BasePdfExtractor
from meeting_analysis.pdf.exceptions import PdfExtractionError


class DocumentExtractor:
    """Decodes PDF text and hands it to the text analyzer."""

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        analyzer: BaseTextAnalyzer,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._analyzer = analyzer

    async def extract(self, file: SourceFile) -> ExtractionResult:
        """Analyze one PDF.

        Raises:
            ExtractionError: if the bytes are not a well-formed PDF.
        """
        try:
            text = await asyncio.to_thread(self._pdf_extractor.extract, file.content)
        except PdfExtractionError as exc:
            raise ExtractionError(f"Failed to analyze PDF file: {exc}") from exc
        Log.info(f"Extracted {len(text)} chars from {file.name}")
        return self._analyzer.analyze_document(text)
