from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    """Application settings.

    Uses pydantic BaseSettings to load configuration from environment variables.
    """
    # Environment
    ENV: str = os.getenv("APP_ENV", "development")
    DEBUG: bool = os.getenv("APP_DEBUG", "True").lower() == "true"
    VERSION: str = "1.0.0"

    # Application paths
    APP_DIR: Path = Path(__file__).parent.parent.parent.parent

    # Configurable data paths
    DATA_ROOT_DIR: Path = APP_DIR / os.getenv("DATA_ROOT_DIR_NAME", "data")
    DUCKDB_FILENAME: str = os.getenv("DUCKDB_FILENAME", "well_reports.duckdb")

    # Token signing. The secret is read once at startup and handed to the token service.
    # NOTE: the default is for local development only; set JWT_SECRET in any shared environment.
    JWT_SECRET: str = os.getenv("JWT_SECRET", "dev-only-well-reports-signing-secret-change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")

    # Password hashing (bcrypt cost factor)
    PASSWORD_HASH_ROUNDS: int = int(os.getenv("PASSWORD_HASH_ROUNDS", "10"))

    # Reports listing
    REPORTS_DEFAULT_PAGE_SIZE: int = int(os.getenv("REPORTS_DEFAULT_PAGE_SIZE", "4"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOGS_DIR_NAME: str = os.getenv("LOGS_DIR_NAME", "logs")
    LOG_FILENAME: str = os.getenv("LOG_FILENAME", "well_reports.log")

    # Server
    SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT: int = int(os.getenv("SERVER_PORT", "5000"))

    # CORS settings
    CORS_ALLOWED_ORIGINS: list[str] = [origin.strip() for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(',')]

    model_config = SettingsConfigDict(extra="ignore")

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings, dotenv_settings,
                                   file_secret_settings):
        # env vars are read once, under their documented names, by the defaults above
        return (init_settings,)

    @property
    def DATABASE_PATH(self) -> Path:
        return self.DATA_ROOT_DIR / self.DUCKDB_FILENAME

    def setup_directories(self):
        """Create necessary directories if they don't exist."""
        for path in [self.DATA_ROOT_DIR, Path(self.LOGS_DIR_NAME)]:
            path.mkdir(parents=True, exist_ok=True)

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.setup_directories()
    return settings
