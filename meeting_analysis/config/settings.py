from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    text_analyzer: str = "heuristic"
    ffmpeg_binary: str = ""

    extraction_timeout_seconds: float = 120.0
    unsupported_policy: str = "degrade"

    storage_backend: str = "memory"
    storage_key: str = "analysisResults"
    storage_dir: str = "./data"
    storage_table: str = "kv_entries"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "meeting_analysis"
    db_username: str = "meeting_analysis"
    db_password: str = "secret"
