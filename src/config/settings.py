"""
Settings module - Configurações centralizadas da aplicação usando Pydantic Settings.
Segue o princípio de Single Responsibility (SOLID).
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Configurações da aplicação."""

    # Application
    app_name: str = Field(default="Clueso API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    app_environment: str = Field(default="development", alias="APP_ENVIRONMENT")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")

    # API
    enable_cors: bool = Field(default=True, alias="ENABLE_CORS")
    cors_origins: str = Field(
        default=(
            "http://localhost:3000,http://localhost:3001,"
            "http://127.0.0.1:3000,http://127.0.0.1:3001"
        ),
        alias="CORS_ORIGINS"
    )

    # Rate limiting
    enable_rate_limit: bool = Field(default=True, alias="ENABLE_RATE_LIMIT")
    auth_rate_limit: str = Field(default="10/minute", alias="AUTH_RATE_LIMIT")
    feedback_rate_limit: str = Field(default="20/minute", alias="FEEDBACK_RATE_LIMIT")
    upload_rate_limit: str = Field(default="5/minute", alias="UPLOAD_RATE_LIMIT")

    # Auth (tokens opacos, mantidos em memória)
    access_token_ttl_minutes: int = Field(default=15, alias="ACCESS_TOKEN_TTL_MINUTES")
    refresh_token_ttl_days: int = Field(default=7, alias="REFRESH_TOKEN_TTL_DAYS")

    # Uploads de gravações
    upload_dir: str = Field(default="./uploads", alias="UPLOAD_DIR")
    max_upload_size_mb: int = Field(default=500, alias="MAX_UPLOAD_SIZE_MB")
    allowed_video_formats: str = Field(default="mp4,webm,avi,mov", alias="ALLOWED_VIDEO_FORMATS")
    cleanup_on_startup: bool = Field(default=True, alias="CLEANUP_ON_STARTUP")
    max_upload_age_hours: int = Field(default=24, alias="MAX_UPLOAD_AGE_HOURS")
    serve_uploads: bool = Field(default=True, alias="SERVE_UPLOADS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")
    log_file: str = Field(default="./logs/app.log", alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Valida o nível de log."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v

    @field_validator("allowed_video_formats")
    @classmethod
    def validate_video_formats(cls, v: str) -> str:
        """Normaliza a lista de formatos (minúsculas, sem ponto)."""
        formats = [fmt.strip().lower().lstrip(".") for fmt in v.split(",") if fmt.strip()]
        if not formats:
            raise ValueError("At least one video format must be allowed")
        return ",".join(formats)

    @property
    def is_development(self) -> bool:
        return self.app_environment == "development"

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    def get_cors_origins(self) -> List[str]:
        """Retorna lista de origens CORS permitidas."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    def get_allowed_formats(self) -> List[str]:
        """Retorna extensões permitidas para upload (ex: ['.mp4', '.webm'])."""
        return [f".{fmt}" for fmt in self.allowed_video_formats.split(",")]


# Instância global de configurações
settings = Settings()
