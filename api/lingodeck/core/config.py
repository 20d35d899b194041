from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
import logging

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# Look for .env in api directory (parent of lingodeck directory)
api_dir = Path(__file__).parent.parent.parent
env_path = api_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - DATABASE_URL is required
    database_url: str = ""

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Google Generative AI (Gemini) API, used for sentence generation
    google_gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # Google Cloud Translation API
    google_translate_api_key: str = ""

    # Timeout in seconds for calls to the text services
    text_service_timeout: float = 30.0

    environment: str = "production"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def sqlalchemy_database_url(self) -> str:
        """Database URL normalized for SQLAlchemy (postgresql:// instead of postgres://)."""
        db_url = self.database_url
        if db_url.startswith("postgres://"):
            db_url = db_url.replace("postgres://", "postgresql://", 1)
        return db_url


@lru_cache
def get_settings() -> Settings:
    """
    Build the settings instance from the environment.

    Raises:
        ValueError: If DATABASE_URL is not configured
    """
    settings = Settings()
    if not settings.database_url:
        raise ValueError("DATABASE_URL environment variable is required")
    return settings
