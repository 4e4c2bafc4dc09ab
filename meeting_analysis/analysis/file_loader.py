import mimetypes
from pathlib import Path

from meeting_analysis.analysis.models import SourceFile

FALLBACK_TYPE = "application/octet-stream"


class SourceFileLoader:
    """Reads a file from disk into a SourceFile."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root

    def load(self, path: Path | str, declared_type: str | None = None) -> SourceFile:
        """Read *path*; relative paths resolve under ``files_root``.

        The declared type defaults to the extension-based guess.

        Raises:
            FileNotFoundError: if the file does not exist at the resolved path.
        """
        resolved = self._resolve_path(Path(path))
        if not resolved.is_file():
            raise FileNotFoundError(f"File not found: {resolved}")
        if declared_type is None:
            declared_type = mimetypes.guess_type(resolved.name)[0] or FALLBACK_TYPE
        return SourceFile.from_bytes(resolved.name, declared_type, resolved.read_bytes())

    def _resolve_path(self, path: Path) -> Path:
        if self._files_root is None or path.is_absolute():
            return path
        return self._files_root / path
