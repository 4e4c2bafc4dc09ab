from meeting_analysis.config.settings import Settings
from meeting_analysis.media.base import MediaDecodingService
from meeting_analysis.media.ffmpeg_service import FfmpegDecodingService


class MediaDecodingServiceFactory:
    """Creates the shared media decoding service."""

    @classmethod
    def create(cls, settings: Settings) -> MediaDecodingService:
        return FfmpegDecodingService(binary=settings.ffmpeg_binary.strip() or None)
