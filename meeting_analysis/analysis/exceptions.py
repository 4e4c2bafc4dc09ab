class AnalysisError(Exception):
    """Base exception for all analysis-related errors."""


class UnsupportedFormatError(AnalysisError):
    """Raised when a file's declared content type is not recognized."""


class ExtractionError(AnalysisError):
    """Raised when a single file cannot be decoded, loaded, or finishes too late."""


class AggregationError(AnalysisError):
    """Raised when a whole batch fails outside per-file extraction."""
