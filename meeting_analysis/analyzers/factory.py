from meeting_analysis.analyzers.base import BaseTextAnalyzer
from meeting_analysis.analyzers.heuristic import HeuristicTextAnalyzer
from meeting_analysis.config.settings import Settings


class TextAnalyzerFactory:
    """Creates the configured text analyzer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseTextAnalyzer:
        name = settings.text_analyzer.strip().lower()
        if name == "heuristic":
            return HeuristicTextAnalyzer()
        raise ValueError(f"Unknown text analyzer '{name}'. Choose from: ['heuristic']")
