"""ffmpeg-backed media decoding.

The engine binary is resolved once per service and shared by every file.
Each file gets a session with its own temporary workspace; loading writes the
bytes there and probing runs ``ffmpeg -i`` on them, reading the stream
diagnostics ffmpeg prints to stderr.
"""

import asyncio
import re
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from imageio_ffmpeg import get_ffmpeg_exe

from meeting_analysis.logging.logger import Log
from meeting_analysis.media.base import MediaDecodingService, MediaSession
from meeting_analysis.media.exceptions import MediaDecodingError
from meeting_analysis.media.models import MediaMetadata

_DURATION_RE = re.compile(r"Duration: (\d{2}):(\d{2}):(\d{2})")
_VIDEO_CODEC_RE = re.compile(r"Stream.*Video: (.*?)\s")


def parse_probe_output(diagnostics: str) -> MediaMetadata:
    """Pull duration and video codec out of ffmpeg's input banner."""
    duration_match = _DURATION_RE.search(diagnostics)
    codec_match = _VIDEO_CODEC_RE.search(diagnostics)
    return MediaMetadata(
        duration=":".join(duration_match.groups()) if duration_match else None,
        codec=codec_match.group(1) if codec_match else None,
    )


class FfmpegSession(MediaSession):
    def __init__(self, binary: str, workdir: Path) -> None:
        self._binary = binary
        self._workdir = workdir
        self._input: Path | None = None

    async def load(self, name: str, content: bytes) -> None:
        if not content:
            raise MediaDecodingError(f"{name} contains no media data")
        path = self._workdir / f"input{Path(name).suffix.lower()}"
        try:
            await asyncio.to_thread(path.write_bytes, content)
        except OSError as exc:
            raise MediaDecodingError(f"Failed to load {name}: {exc}") from exc
        self._input = path

    async def probe(self) -> MediaMetadata:
        if self._input is None:
            raise MediaDecodingError("No media loaded into session")
        diagnostics = await self._run("-hide_banner", "-i", str(self._input))
        Log.debug(f"ffmpeg probe output:\n{diagnostics}")
        return parse_probe_output(diagnostics)

    async def _run(self, *args: str) -> str:
        # Without an output file ffmpeg exits non-zero after printing the input
        # banner, so the exit code carries no information here.
        try:
            process = await asyncio.create_subprocess_exec(
                self._binary,
                *args,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise MediaDecodingError(f"Failed to start ffmpeg: {exc}") from exc
        try:
            _, stderr = await process.communicate()
        finally:
            if process.returncode is None:
                process.kill()
                await process.wait()
        return stderr.decode("utf-8", errors="ignore")


class FfmpegDecodingService(MediaDecodingService):
    """Decoding service running the ffmpeg binary as a subprocess."""

    def __init__(self, binary: str | None = None) -> None:
        self._binary = binary or None

    @property
    def binary(self) -> str:
        """Configured binary, or the one bundled with imageio-ffmpeg.

        Raises:
            MediaDecodingError: if no ffmpeg binary can be found.
        """
        if self._binary is None:
            try:
                self._binary = get_ffmpeg_exe()
            except RuntimeError as exc:
                raise MediaDecodingError(f"ffmpeg is not available: {exc}") from exc
        return self._binary

    @asynccontextmanager
    async def session(self) -> AsyncIterator[FfmpegSession]:
        binary = self.binary
        with tempfile.TemporaryDirectory(prefix="meeting-media-") as workdir:
            yield FfmpegSession(binary, Path(workdir))
