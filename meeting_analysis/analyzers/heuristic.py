"""Deterministic text heuristics used until a real NLP backend is plugged in.

Documents:
1. Split the text into sentences on runs of '.', '!' and '?'.
2. Summary = first five sentences joined with ". " plus a trailing period.
3. Key points = first three sentences, trimmed.
4. Participants = names listed after a "Participants:" label.

Media files get fixed placeholder speakers and topics; video summaries mention
the probed duration and codec.
"""

import re
from typing import ClassVar

from meeting_analysis.analysis.models import ExtractionResult, FileKind
from meeting_analysis.analyzers.base import BaseTextAnalyzer
from meeting_analysis.media.models import MediaMetadata

NO_PARTICIPANTS = "No participant information found"
UNKNOWN = "Unknown"


class HeuristicTextAnalyzer(BaseTextAnalyzer):
    """Pattern-based analyzer. No AI, no external calls.

    The participant list ends at the first newline or sentence terminator, so
    an abbreviation inside the list cuts it short: "Participants: Dr. Ali, Veli"
    yields ["Dr"].
    """

    SUMMARY_SENTENCES: ClassVar[int] = 5
    KEY_POINT_SENTENCES: ClassVar[int] = 3

    PLACEHOLDER_SPEAKERS: ClassVar[tuple[str, ...]] = ("Speaker 1", "Speaker 2")
    PLACEHOLDER_KEY_POINTS: ClassVar[tuple[str, ...]] = ("Key point 1", "Key point 2")

    _SENTENCE_SPLIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"[.!?]+")
    _PARTICIPANTS_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"Participants:?\s*([^\n.!?]+)",
        re.IGNORECASE,
    )
    _PARTICIPANT_SPLIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"[,;]")

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def analyze_document(self, text: str) -> ExtractionResult:
        sentences = self.split_sentences(text)
        summary = ". ".join(sentences[: self.SUMMARY_SENTENCES]) + "."
        key_points = [s.strip() for s in sentences[: self.KEY_POINT_SENTENCES]]
        return ExtractionResult(
            summary=summary,
            participants=self.detect_participants(text),
            key_points=key_points,
        )

    def split_sentences(self, text: str) -> list[str]:
        """Split on terminator runs, dropping blank segments. Segments stay untrimmed."""
        return [s for s in self._SENTENCE_SPLIT_RE.split(text) if s.strip()]

    def detect_participants(self, text: str) -> list[str]:
        match = self._PARTICIPANTS_RE.search(text)
        if match is None:
            return [NO_PARTICIPANTS]
        return [p.strip() for p in self._PARTICIPANT_SPLIT_RE.split(match.group(1))]

    # ------------------------------------------------------------------
    # Media
    # ------------------------------------------------------------------

    def analyze_media(
        self,
        kind: FileKind,
        metadata: MediaMetadata | None = None,
    ) -> ExtractionResult:
        if kind is FileKind.VIDEO:
            summary = self._video_summary(metadata or MediaMetadata())
        elif kind is FileKind.AUDIO:
            summary = "Audio analysis completed. Speakers detected."
        else:
            raise ValueError(f"Media analysis does not apply to {kind.value} files")
        return ExtractionResult(
            summary=summary,
            participants=list(self.PLACEHOLDER_SPEAKERS),
            key_points=list(self.PLACEHOLDER_KEY_POINTS),
        )

    @staticmethod
    def _video_summary(metadata: MediaMetadata) -> str:
        return (
            "Video analysis completed.\n"
            f"Duration: {metadata.duration or UNKNOWN}\n"
            f"Format: {metadata.codec or UNKNOWN}"
        )
