"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./pokemon_logger.db")

    # JWT
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    # Tokens carry no expiry unless this is set
    jwt_expiration_minutes: int | None = Field(default=None)

    # PokeAPI
    pokeapi_base_url: str = Field(default="https://pokeapi.co/api/v2")
    pokeapi_timeout_seconds: float = Field(default=10.0)

    # AWS (S3 for uploads, Bedrock for vision and image generation)
    aws_region: str = Field(default="us-east-1")
    aws_s3_bucket: str = Field(default="pokemon-logger-images")
    aws_access_key_id: str | None = Field(default=None)
    aws_secret_access_key: str | None = Field(default=None)
    aws_session_token: str | None = Field(default=None)
    bedrock_text_model_id: str = Field(default="anthropic.claude-3-sonnet-20240229-v1:0")
    bedrock_image_model_id: str = Field(default="stability.stable-diffusion-xl-v1")

    # Uploads
    signed_url_expires_seconds: int = Field(default=3600)
    max_upload_bytes: int = Field(default=10 * 1024 * 1024)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("JWT_SECRET must be changed in production")
            if self.database_url.startswith("sqlite"):
                raise ValueError("DATABASE_URL should not use SQLite in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
