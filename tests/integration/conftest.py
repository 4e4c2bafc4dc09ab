import os
import subprocess
import uuid
from collections.abc import Generator
from pathlib import Path

import psycopg
import pytest
from imageio_ffmpeg import get_ffmpeg_exe
from psycopg import sql

from meeting_analysis.config.settings import Settings
from meeting_analysis.database.connection import (
    build_conninfo,
    close_pool,
    get_connection,
    init_pool,
)
from meeting_analysis.storage.postgres_store import PostgresKeyValueStore


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "meeting_analysis_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3):
            pass
    except psycopg.Error as e:
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set the DB_* environment variables to point at a test database"
        )
    init_pool(test_settings)
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def pg_store(integration_pool: None) -> Generator[PostgresKeyValueStore, None, None]:
    """Store over a throwaway table, dropped after the test."""
    table = f"kv_test_{uuid.uuid4().hex[:12]}"
    store = PostgresKeyValueStore(table)
    store.ensure_table()
    try:
        yield store
    finally:
        with get_connection() as conn:
            conn.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(sql.Identifier(table)))
            conn.commit()


@pytest.fixture(scope="session")
def ffmpeg_binary() -> str:
    try:
        return get_ffmpeg_exe()
    except RuntimeError as e:
        pytest.skip(f"ffmpeg binary not available: {e}")


def _synthesize(binary: str, output: Path, *inputs: str) -> bytes:
    try:
        subprocess.run(
            [binary, "-hide_banner", "-loglevel", "error", "-y", *inputs, str(output)],
            check=True,
            capture_output=True,
            timeout=60,
        )
    except (OSError, subprocess.SubprocessError) as e:
        pytest.skip(f"Could not synthesize media with ffmpeg: {e}")
    return output.read_bytes()


@pytest.fixture
def sample_video_bytes(ffmpeg_binary: str, tmp_path: Path) -> bytes:
    """Two-second MPEG-4 test pattern clip."""
    return _synthesize(
        ffmpeg_binary,
        tmp_path / "clip.mp4",
        "-f", "lavfi", "-i", "testsrc=duration=2:size=320x240:rate=10",
        "-c:v", "mpeg4",
    )


@pytest.fixture
def sample_audio_bytes(ffmpeg_binary: str, tmp_path: Path) -> bytes:
    """One-second sine tone as WAV."""
    return _synthesize(
        ffmpeg_binary,
        tmp_path / "tone.wav",
        "-f", "lavfi", "-i", "sine=frequency=440:duration=1",
    )
