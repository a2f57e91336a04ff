from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # API metadata
    app_title: str = "Videos API"
    app_version: str = "1.0.0"

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:3000"
    # Allow any origin (local dev / test runners hitting the API directly)
    cors_allow_all: bool = True

    # Start with the demo video (id 0) in the store
    seed_demo_video: bool = True

    log_level: str = "INFO"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
