# restservice/core/config.py

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "restservice"

    # PORT=0 lets the OS pick a free port
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        """
        Values come from the environment first, then from .env in the
        working directory.
        """
        env_file = ".env"


settings = Settings()
