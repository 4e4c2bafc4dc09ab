from abc import ABC, abstractmethod

from meeting_analysis.analysis.models import ExtractionResult, FileKind
from meeting_analysis.media.models import MediaMetadata


class BaseTextAnalyzer(ABC):
    """Contract for summary, participant and key-point detection.

    Extractors only decode content; everything that interprets it goes through
    this interface so a transcription or NLP backend can replace the heuristics
    without touching routing or aggregation.
    """

    @abstractmethod
    def analyze_document(self, text: str) -> ExtractionResult:
        """Derive summary, participants and key points from document text."""

    @abstractmethod
    def analyze_media(
        self,
        kind: FileKind,
        metadata: MediaMetadata | None = None,
    ) -> ExtractionResult:
        """Derive summary, speakers and topics for a loaded audio or video file.

        Args:
            kind: FileKind.AUDIO or FileKind.VIDEO.
            metadata: Probe results, when the file was probed.
        """
