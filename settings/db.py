from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import BaseSettings


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="db_")

    url: str = Field(
        default="sqlite+aiosqlite:///./medical_kb.db", title="Database URL"
    )
    echo: bool = Field(default=False, title="Echo SQL statements")


db_settings = DatabaseSettings()
