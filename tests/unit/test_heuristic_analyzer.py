import pytest

from meeting_analysis.analysis.models import FileKind
from meeting_analysis.analyzers.factory import TextAnalyzerFactory
from meeting_analysis.analyzers.heuristic import NO_PARTICIPANTS, HeuristicTextAnalyzer
from meeting_analysis.config.settings import Settings
from meeting_analysis.media.models import MediaMetadata

MEETING_TEXT = "Participants: Ali, Veli. Meeting started. Topics were discussed.\n"


class TestSplitSentences:
    def test_splits_on_terminator_runs(self) -> None:
        sentences = HeuristicTextAnalyzer().split_sentences("Wait!?! Really... Yes.")
        assert sentences == ["Wait", " Really", " Yes"]

    def test_drops_whitespace_only_segments(self) -> None:
        assert HeuristicTextAnalyzer().split_sentences(" . \n ! ") == []


class TestAnalyzeDocument:
    def test_detects_participants_from_label(self) -> None:
        result = HeuristicTextAnalyzer().analyze_document(MEETING_TEXT)
        assert result.participants == ["Ali", "Veli"]

    def test_summary_contains_sentences(self) -> None:
        result = HeuristicTextAnalyzer().analyze_document(MEETING_TEXT)
        assert "Meeting started" in result.summary
        assert result.summary.endswith("Topics were discussed.")

    def test_key_points_are_first_three_trimmed(self) -> None:
        result = HeuristicTextAnalyzer().analyze_document(MEETING_TEXT)
        assert result.key_points == [
            "Participants: Ali, Veli",
            "Meeting started",
            "Topics were discussed",
        ]

    def test_summary_uses_at_most_five_sentences(self) -> None:
        text = "One. Two. Three. Four. Five. Six. Seven."
        result = HeuristicTextAnalyzer().analyze_document(text)
        assert result.summary == "One.  Two.  Three.  Four.  Five."
        assert len(result.key_points) == 3

    def test_short_document_uses_available_sentences(self) -> None:
        result = HeuristicTextAnalyzer().analyze_document("Only one sentence here")
        assert result.summary == "Only one sentence here."
        assert result.key_points == ["Only one sentence here"]

    def test_summary_has_single_trailing_period(self) -> None:
        result = HeuristicTextAnalyzer().analyze_document("Done. Over!!")
        assert result.summary == "Done.  Over."
        assert not result.summary.endswith("..")

    def test_no_sentences_yields_bare_period(self) -> None:
        result = HeuristicTextAnalyzer().analyze_document("\n\n")
        assert result.summary == "."
        assert result.key_points == []
        assert result.participants == [NO_PARTICIPANTS]


class TestDetectParticipants:
    def test_label_is_case_insensitive(self) -> None:
        analyzer = HeuristicTextAnalyzer()
        assert analyzer.detect_participants("PARTICIPANTS Ana; Bo") == ["Ana", "Bo"]

    def test_capture_stops_at_end_of_line(self) -> None:
        text = "Agenda\nParticipants: Ana, Bo\nNotes follow"
        assert HeuristicTextAnalyzer().detect_participants(text) == ["Ana", "Bo"]

    def test_missing_label_returns_sentinel(self) -> None:
        assert HeuristicTextAnalyzer().detect_participants("Nobody listed") == [NO_PARTICIPANTS]

    def test_abbreviation_ends_the_list(self) -> None:
        text = "Participants: Dr. Ali, Veli. Meeting started."
        assert HeuristicTextAnalyzer().detect_participants(text) == ["Dr"]


class TestAnalyzeMedia:
    def test_audio_placeholder(self) -> None:
        result = HeuristicTextAnalyzer().analyze_media(FileKind.AUDIO)
        assert result.summary == "Audio analysis completed. Speakers detected."
        assert result.participants == ["Speaker 1", "Speaker 2"]
        assert result.key_points == ["Key point 1", "Key point 2"]

    def test_video_summary_mentions_metadata(self) -> None:
        metadata = MediaMetadata(duration="00:01:05", codec="h264")
        result = HeuristicTextAnalyzer().analyze_media(FileKind.VIDEO, metadata)
        assert result.summary == (
            "Video analysis completed.\nDuration: 00:01:05\nFormat: h264"
        )

    def test_video_without_metadata_reports_unknown(self) -> None:
        result = HeuristicTextAnalyzer().analyze_media(FileKind.VIDEO)
        assert "Duration: Unknown" in result.summary
        assert "Format: Unknown" in result.summary

    def test_rejects_documents(self) -> None:
        with pytest.raises(ValueError, match="document"):
            HeuristicTextAnalyzer().analyze_media(FileKind.DOCUMENT)


class TestTextAnalyzerFactory:
    def test_creates_heuristic_analyzer(self) -> None:
        analyzer = TextAnalyzerFactory.create(Settings(text_analyzer="Heuristic"))
        assert isinstance(analyzer, HeuristicTextAnalyzer)

    def test_raises_for_unknown_analyzer(self) -> None:
        with pytest.raises(ValueError, match="Unknown text analyzer"):
            TextAnalyzerFactory.create(Settings(text_analyzer="gpt"))
