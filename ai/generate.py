from pydantic_ai.messages import (
    BinaryContent,
    ModelMessage,
    ModelRequest,
    SystemPromptPart,
    TextPart,
    UserContent,
    UserPromptPart,
)
from pydantic_ai.models import ModelRequestParameters

from ai.model import get_model
from ai.types import ImagePayload
from enums import LLMName
from exceptions import ModelInvocationError


async def generate(
    prompt: str,
    system_policy: str,
    llm: LLMName,
    temperature: float,
    image: ImagePayload | None = None,
) -> str:
    """Run a single model request.

    Args:
        prompt: The instruction envelope.
        system_policy: The system prompt.
        llm: The model variant.
        temperature: The sampling temperature.
        image: The optional image sent alongside the prompt.

    Returns:
        The text of the model response.

    Raises:
        ModelInvocationError: If the request fails or returns no text.

    """
    content: list[UserContent] = [prompt]
    if image is not None:
        content.append(BinaryContent(data=image.data, media_type=image.media_type))

    messages: list[ModelMessage] = [
        ModelRequest(
            parts=[
                SystemPromptPart(content=system_policy),
                UserPromptPart(content=content),
            ]
        )
    ]

    try:
        model, model_settings = get_model(llm=llm, temperature=temperature)
        response = await model.request(
            messages=messages,
            model_settings=model_settings,
            model_request_parameters=ModelRequestParameters(),
        )
    except Exception as error:
        raise ModelInvocationError(message=f"Model request failed: {error}") from error

    text = "\n\n".join(
        part.content for part in response.parts if isinstance(part, TextPart)
    )
    if not text.strip():
        raise ModelInvocationError(message="Model returned no text")

    return text
