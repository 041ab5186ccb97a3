from pydantic import Field
from pydantic_settings import SettingsConfigDict

from enums import LLMName

from .base import BaseSettings


class CoreSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="core_")

    google_api_key: str = Field(default="", title="Google API key")
    github_api_key: str = Field(default="", title="GitHub API key")
    openai_api_key: str = Field(default="", title="OpenAI API key")

    text_llm: LLMName = Field(
        default=LLMName.GEMINI_3_FLASH_PREVIEW, title="Model for text-only turns"
    )
    image_llm: LLMName = Field(
        default=LLMName.GEMINI_2_5_FLASH_IMAGE, title="Model for image turns"
    )
    temperature: float = Field(
        default=0.1, ge=0, le=0.2, title="Low sampling temperature for grounded answers"
    )
    model_timeout: float = Field(default=60.0, gt=0, title="Model call timeout")


core_settings = CoreSettings()
