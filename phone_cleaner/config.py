"""Application settings."""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8788
    debug: bool = False
    home_dir: Path = Path.home()
    storage_channel: str = "com.phonecleaner.app/storage"
    plugins: list[str] = []  # "package.module:callable" import strings

    model_config = {"env_prefix": "PHONECLEANER_"}


settings = Settings()
