# (c) Nelen & Schuurmans

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

__all__ = ["AppConfig"]


class AppConfig(BaseSettings):
    """Settings, read from BOOKSHELF_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="BOOKSHELF_", frozen=True)

    title: str = "Bookshelf"
    description: str = "Serves a single book"
    hostname: str = "localhost"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
