from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./members.db"
    PORT: int = 8002
    LOG_LEVEL: str = "INFO"

    # Storage backend used by the member service for the lifetime of the process.
    MEMBER_REPOSITORY: Literal["memory", "raw", "template", "orm"] = "memory"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

settings = Settings()
