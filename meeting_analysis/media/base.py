from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from meeting_analysis.media.models import MediaMetadata


class MediaSession(ABC):
    """One file's view of the decoding engine. Valid only inside its scope."""

    @abstractmethod
    async def load(self, name: str, content: bytes) -> None:
        """Load media bytes into the engine.

        Raises:
            MediaDecodingError: if the engine cannot accept the file.
        """

    @abstractmethod
    async def probe(self) -> MediaMetadata:
        """Read stream metadata of the loaded file.

        Returns:
            MediaMetadata with None for anything the engine did not report.

        Raises:
            MediaDecodingError: if nothing was loaded or the engine fails to run.
        """


class MediaDecodingService(ABC):
    """Shared decoding engine handing out per-file sessions."""

    @abstractmethod
    def session(self) -> AbstractAsyncContextManager[MediaSession]:
        """Return a context manager scoping one file's session."""
