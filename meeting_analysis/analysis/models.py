from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ANALYSIS_FAILED = "Analysis failed"
FILE_NOT_ANALYZED = "File could not be analyzed"


class FileKind(Enum):
    """Routing class of a submitted file."""

    DOCUMENT = "document"
    AUDIO = "audio"
    VIDEO = "video"


class BatchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class FileState(Enum):
    PENDING = "pending"
    EXTRACTING = "extracting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """One submitted input file, held in memory for a single analysis run."""

    name: str
    declared_type: str
    size_bytes: int
    content: bytes = field(repr=False)

    @classmethod
    def from_bytes(cls, name: str, declared_type: str, content: bytes) -> "SourceFile":
        return cls(
            name=name,
            declared_type=declared_type,
            size_bytes=len(content),
            content=content,
        )


@dataclass(frozen=True)
class ExtractionResult:
    """Per-file output of an extractor, before aggregation."""

    summary: str
    participants: list[str] = field(default_factory=list)
    key_points: list[str] = field(default_factory=list)

    @classmethod
    def failed(cls, file_name: str, message: str) -> "ExtractionResult":
        """Degraded result substituted for a file that could not be analyzed."""
        return cls(
            summary=f"{file_name} could not be analyzed: {message}",
            participants=[ANALYSIS_FAILED],
            key_points=[FILE_NOT_ANALYZED],
        )


@dataclass(frozen=True)
class BatchProgress:
    """Emitted each time one file of a batch settles."""

    completed: int
    total: int
    percent: float
    file_name: str
    file_state: FileState


@dataclass(frozen=True)
class CombinedReport:
    """Persisted record summarizing one analysis batch across all its files."""

    id: int
    date: str
    files: list[str]
    summary: str
    participants: list[str]
    key_points: list[str]

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the persisted JSON schema (camelCase keys)."""
        return {
            "id": self.id,
            "date": self.date,
            "files": list(self.files),
            "summary": self.summary,
            "participants": list(self.participants),
            "keyPoints": list(self.key_points),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CombinedReport":
        """Build a report from its persisted form.

        Raises:
            ValueError: if a required field is missing or has the wrong type.
        """
        report_id = data.get("id")
        if not isinstance(report_id, int) or isinstance(report_id, bool):
            raise ValueError("'id' must be an integer")
        date = data.get("date")
        if not isinstance(date, str):
            raise ValueError("'date' must be a string")
        summary = data.get("summary")
        if not isinstance(summary, str):
            raise ValueError("'summary' must be a string")
        return cls(
            id=report_id,
            date=date,
            files=_string_list(data, "files"),
            summary=summary,
            participants=_string_list(data, "participants"),
            key_points=_string_list(data, "keyPoints"),
        )


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    raw = data.get(key)
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ValueError(f"'{key}' must be a list of strings")
    return list(raw)
