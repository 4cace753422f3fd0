"""Application configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str

    # Application
    app_name: str = "Foodly"

    # Client-local storage: "database", "file" or "memory"
    storage_backend: str = "database"
    storage_dir: str = "data/storage"

    # Restaurant catalogue (defaults to the bundled YAML file)
    restaurants_file: str | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
