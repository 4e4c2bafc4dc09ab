from meeting_analysis.analysis.exceptions import UnsupportedFormatError
from meeting_analysis.analysis.models import FileKind, SourceFile

DOCUMENT_TYPE = "application/pdf"


class FormatDetector:
    """Classifies a file from its declared content type. Never inspects bytes."""

    def classify(self, file: SourceFile) -> FileKind:
        """Return the routing class for *file*.

        Raises:
            UnsupportedFormatError: if the type is not a PDF, audio, or video type.
        """
        mime_type = file.declared_type.split(";", 1)[0].strip().lower()
        if mime_type == DOCUMENT_TYPE:
            return FileKind.DOCUMENT
        if mime_type.startswith("audio/"):
            return FileKind.AUDIO
        if mime_type.startswith("video/"):
            return FileKind.VIDEO
        raise UnsupportedFormatError(
            f"Unsupported file type '{file.declared_type}' for {file.name}"
        )
