import asyncio
from typing import Awaitable, Protocol

import logfire

from ai.generate import generate as generate_text
from ai.prompts import SYSTEM_PROMPT
from ai.types import GroundedAnswer, ImagePayload
from constants import (
    DISCLAIMER,
    FAILURE_MESSAGE,
    IMAGE_DIRECTIVE,
    NOT_FOUND_SENTINEL,
)
from enums import AnswerOutcome, LLMName, Mode
from exceptions import QueryValidationError
from settings import core_settings


class Generate(Protocol):
    def __call__(
        self,
        prompt: str,
        system_policy: str,
        llm: LLMName,
        temperature: float,
        image: ImagePayload | None = None,
    ) -> Awaitable[str]: ...


def parse_mode(mode: Mode | str) -> Mode:
    try:
        return Mode(mode)
    except ValueError as error:
        raise QueryValidationError(message=f"Unsupported mode: {mode}") from error


def build_prompt(
    query_text: str, context: str, mode: Mode, has_image: bool = False
) -> str:
    """Build the instruction envelope for one turn.

    Args:
        query_text: The user question, may be empty for image-only turns.
        context: The assembled context block.
        mode: The conversation mode.
        has_image: Whether an image is attached.

    Returns:
        The prompt text.

    """
    question = query_text.strip()
    if not question and has_image:
        question = IMAGE_DIRECTIVE

    return (
        f"CURRENT MODE: {mode.upper()}\n\n"
        f"CONTEXT FROM MEDICAL KNOWLEDGE BASE:\n{context}\n\n"
        f"USER QUESTION: {question}"
    )


def normalize_refusal(text: str) -> tuple[str, AnswerOutcome]:
    """Collapse any answer mentioning the not-found sentinel to the sentinel.

    Matching is a case-insensitive substring test on the sentinel without its
    trailing period, so text the model appends around a refusal is dropped.

    Args:
        text: The raw model output.

    Returns:
        The normalized text and its outcome tag.

    """
    if NOT_FOUND_SENTINEL.rstrip(".").lower() in text.lower():
        return NOT_FOUND_SENTINEL, AnswerOutcome.REFUSAL_SENTINEL
    return text, AnswerOutcome.GROUNDED_ANSWER


def apply_disclaimer(text: str, mode: Mode, outcome: AnswerOutcome) -> str:
    if mode != Mode.PATIENT or outcome == AnswerOutcome.REFUSAL_SENTINEL:
        return text
    if DISCLAIMER in text:
        return text
    return f"{text.strip()}\n\n{DISCLAIMER}"


class GroundingEnforcer:
    """Mediates every model call so answers stay inside the retrieved context.

    The enforcer is stateless: mode and image are per-call inputs. No model
    failure escapes `answer`. Errors, timeouts and empty output come back as
    an errored `GroundedAnswer` carrying the fixed failure message.
    """

    def __init__(
        self,
        generate: Generate = generate_text,
        text_llm: LLMName | None = None,
        image_llm: LLMName | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ):
        self._generate = generate
        self._text_llm = text_llm or core_settings.text_llm
        self._image_llm = image_llm or core_settings.image_llm
        self._temperature = (
            core_settings.temperature if temperature is None else temperature
        )
        self._timeout = core_settings.model_timeout if timeout is None else timeout

    def select_llm(self, has_image: bool) -> LLMName:
        return self._image_llm if has_image else self._text_llm

    async def answer(
        self,
        query_text: str,
        context: str,
        mode: Mode | str,
        image: ImagePayload | None = None,
    ) -> GroundedAnswer:
        """Answer a question from the given context.

        Args:
            query_text: The user question.
            context: The assembled context block.
            mode: The conversation mode.
            image: The optional attached image.

        Returns:
            The post-processed answer.

        Raises:
            QueryValidationError: If the mode is unknown or neither text nor
                image is given.

        """
        mode = parse_mode(mode=mode)
        if not query_text.strip() and image is None:
            raise QueryValidationError

        llm = self.select_llm(has_image=image is not None)
        prompt = build_prompt(
            query_text=query_text,
            context=context,
            mode=mode,
            has_image=image is not None,
        )

        with logfire.span("Grounded model call", llm=llm, mode=mode):
            try:
                async with asyncio.timeout(self._timeout):
                    raw = await self._generate(
                        prompt=prompt,
                        system_policy=SYSTEM_PROMPT,
                        llm=llm,
                        temperature=self._temperature,
                        image=image,
                    )
            except Exception:
                logfire.exception("Model call failed", llm=llm)
                return GroundedAnswer(text=FAILURE_MESSAGE, errored=True)

            if not isinstance(raw, str) or not raw.strip():
                logfire.error("Model returned no text", llm=llm)
                return GroundedAnswer(text=FAILURE_MESSAGE, errored=True)

        text, outcome = normalize_refusal(text=raw)
        return GroundedAnswer(
            text=apply_disclaimer(text=text, mode=mode, outcome=outcome),
            errored=False,
            outcome=outcome,
        )
