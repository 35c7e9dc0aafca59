from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bot_token: str = Field(alias="BOT_TOKEN")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    drop_pending_updates: bool = Field(default=True, alias="DROP_PENDING_UPDATES")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
