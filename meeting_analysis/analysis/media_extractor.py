from meeting_analysis.analysis.exceptions import ExtractionError
from meeting_analysis.analysis.models import ExtractionResult, FileKind, SourceFile
from meeting_analysis.analyzers.base import BaseTextAnalyzer
from meeting_analysis.logging.logger import Log
from meeting_analysis.media.base import MediaDecodingService
from meeting_analysis.media.exceptions import MediaDecodingError
from meeting_analysis.media.models import MediaMetadata


class MediaExtractor:
    """Loads audio/video into the decoding service and analyzes the result.

    Speaker and topic detection belong to the text analyzer; this class only
    owns the engine session and the video probe.
    """

    def __init__(
        self,
        decoding_service: MediaDecodingService,
        analyzer: BaseTextAnalyzer,
    ) -> None:
        self._decoding_service = decoding_service
        self._analyzer = analyzer

    async def extract(self, file: SourceFile, kind: FileKind) -> ExtractionResult:
        """Analyze one audio or video file.

        Raises:
            ExtractionError: if the decoding engine cannot load the file.
        """
        if kind not in (FileKind.AUDIO, FileKind.VIDEO):
            raise ValueError(f"MediaExtractor cannot handle {kind.value} files")

        metadata: MediaMetadata | None = None
        try:
            async with self._decoding_service.session() as session:
                await session.load(file.name, file.content)
                if kind is FileKind.VIDEO:
                    metadata = await session.probe()
        except MediaDecodingError as exc:
            raise ExtractionError(f"Failed to analyze {kind.value} file: {exc}") from exc

        if metadata is not None:
            Log.info(
                f"Probed {file.name}", duration=metadata.duration, codec=metadata.codec
            )
        return self._analyzer.analyze_media(kind, metadata)
