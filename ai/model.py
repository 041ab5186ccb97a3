from pydantic_ai.models import Model, google, openai
from pydantic_ai.providers.github import GitHubProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from enums import LLMName, Provider
from settings.core import core_settings


def get_model(llm: LLMName, temperature: float) -> tuple[Model, ModelSettings]:
    """Get a model by llm name.

    Args:
        llm: The llm name.
        temperature: The sampling temperature.

    Returns:
        The model and settings.

    Raises:
        ValueError: If the provider key is missing or the provider is unknown.

    """
    provider, model_name = llm.decompose()
    if provider == Provider.GOOGLE:
        if not core_settings.google_api_key:
            msg = "Google API key is required"
            raise ValueError(msg)
        return (
            google.GoogleModel(
                model_name=model_name,
                provider=GoogleProvider(api_key=core_settings.google_api_key),
            ),
            google.GoogleModelSettings(temperature=temperature),
        )
    if provider == Provider.GITHUB:
        if not core_settings.github_api_key:
            msg = "GitHub API key is required"
            raise ValueError(msg)
        return (
            openai.OpenAIChatModel(
                model_name=model_name,
                provider=GitHubProvider(api_key=core_settings.github_api_key),
            ),
            openai.OpenAIChatModelSettings(temperature=temperature),
        )
    if provider == Provider.OPENAI:
        if not core_settings.openai_api_key:
            msg = "OpenAI API key is required"
            raise ValueError(msg)
        return (
            openai.OpenAIChatModel(
                model_name=model_name,
                provider=OpenAIProvider(api_key=core_settings.openai_api_key),
            ),
            openai.OpenAIChatModelSettings(temperature=temperature),
        )

    msg = f"Provider {provider} not supported"
    raise ValueError(msg)
