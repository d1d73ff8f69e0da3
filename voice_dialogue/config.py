from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Database Configuration
    # Local SQLite file for development; point at Postgres in deployment
    DATABASE_URL: str = "sqlite:///./voice_dialogue.db"

    # Storage backends
    # This allows to switch persistence just by changing these strings
    SESSION_BACKEND: Literal["memory", "sql"] = "memory"
    VERSION_BACKEND: Literal["static", "sql"] = "static"

    # Platform tag exposed to flows as the 'platform' variable
    PLATFORM: str = "alexa"

    # Spoken when a turn cannot be initialized
    ERROR_SPEECH: str = "Sorry, something went wrong. Please try again later."

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
