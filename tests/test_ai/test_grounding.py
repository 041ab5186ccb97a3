import pytest

from ai.grounding import (
    GroundingEnforcer,
    apply_disclaimer,
    build_prompt,
    normalize_refusal,
    parse_mode,
)
from ai.prompts import SYSTEM_PROMPT
from ai.types import ImagePayload
from constants import (
    DISCLAIMER,
    FAILURE_MESSAGE,
    IMAGE_DIRECTIVE,
    NO_DOCUMENTS_CONTEXT,
    NOT_FOUND_SENTINEL,
)
from enums import AnswerOutcome, LLMName, Mode
from exceptions import QueryValidationError
from tests.fakes import FakeGenerate, failing_generate

CONTEXT = "[Clinical Document 1: Diabetes]\nMetformin is first-line."


def _enforcer(generate: FakeGenerate, timeout: float = 5.0) -> GroundingEnforcer:
    return GroundingEnforcer(
        generate=generate,
        text_llm=LLMName.GEMINI_3_FLASH_PREVIEW,
        image_llm=LLMName.GEMINI_2_5_FLASH_IMAGE,
        temperature=0.1,
        timeout=timeout,
    )


def test_normalize_refusal_discards_trailing_guess() -> None:
    text, outcome = normalize_refusal(
        text="...Not found in medical knowledge base. Here is some extra guess..."
    )

    assert text == NOT_FOUND_SENTINEL
    assert outcome == AnswerOutcome.REFUSAL_SENTINEL


def test_normalize_refusal_is_case_insensitive() -> None:
    text, outcome = normalize_refusal(text="NOT FOUND IN MEDICAL KNOWLEDGE BASE")

    assert text == NOT_FOUND_SENTINEL
    assert outcome == AnswerOutcome.REFUSAL_SENTINEL


def test_normalize_refusal_keeps_grounded_answer() -> None:
    text, outcome = normalize_refusal(text="Metformin is first-line.")

    assert text == "Metformin is first-line."
    assert outcome == AnswerOutcome.GROUNDED_ANSWER


def test_apply_disclaimer_appends_once_in_patient_mode() -> None:
    text = apply_disclaimer(
        text="Metformin is first-line.  ",
        mode=Mode.PATIENT,
        outcome=AnswerOutcome.GROUNDED_ANSWER,
    )

    assert text == f"Metformin is first-line.\n\n{DISCLAIMER}"
    assert text.count(DISCLAIMER) == 1
    assert text.endswith(DISCLAIMER)


def test_apply_disclaimer_skips_answer_already_containing_it() -> None:
    original = f"Metformin is first-line.\n\n{DISCLAIMER}"

    assert (
        apply_disclaimer(
            text=original, mode=Mode.PATIENT, outcome=AnswerOutcome.GROUNDED_ANSWER
        )
        == original
    )


def test_apply_disclaimer_skips_sentinel_and_doctor_mode() -> None:
    assert (
        apply_disclaimer(
            text=NOT_FOUND_SENTINEL,
            mode=Mode.PATIENT,
            outcome=AnswerOutcome.REFUSAL_SENTINEL,
        )
        == NOT_FOUND_SENTINEL
    )
    assert (
        apply_disclaimer(
            text="HbA1c target < 7%.",
            mode=Mode.DOCTOR,
            outcome=AnswerOutcome.GROUNDED_ANSWER,
        )
        == "HbA1c target < 7%."
    )


def test_build_prompt_contains_mode_context_and_question() -> None:
    prompt = build_prompt(
        query_text="What is first-line?", context=CONTEXT, mode=Mode.DOCTOR
    )

    assert prompt == (
        "CURRENT MODE: DOCTOR\n\n"
        f"CONTEXT FROM MEDICAL KNOWLEDGE BASE:\n{CONTEXT}\n\n"
        "USER QUESTION: What is first-line?"
    )


def test_build_prompt_uses_image_directive_without_text() -> None:
    prompt = build_prompt(
        query_text="", context=NO_DOCUMENTS_CONTEXT, mode=Mode.PATIENT, has_image=True
    )

    assert prompt.endswith(f"USER QUESTION: {IMAGE_DIRECTIVE}")
    assert NO_DOCUMENTS_CONTEXT in prompt


def test_parse_mode_rejects_unknown_values() -> None:
    assert parse_mode(mode="doctor") == Mode.DOCTOR
    with pytest.raises(QueryValidationError):
        parse_mode(mode="nurse")


@pytest.mark.asyncio
async def test_answer_patient_mode_adds_disclaimer() -> None:
    generate = FakeGenerate(output="Metformin is first-line.")

    answer = await _enforcer(generate).answer(
        query_text="What is first-line for diabetes?",
        context=CONTEXT,
        mode=Mode.PATIENT,
    )

    assert answer.errored is False
    assert answer.outcome == AnswerOutcome.GROUNDED_ANSWER
    assert answer.text == f"Metformin is first-line.\n\n{DISCLAIMER}"
    call = generate.calls[0]
    assert call["system_policy"] == SYSTEM_PROMPT
    assert call["llm"] == LLMName.GEMINI_3_FLASH_PREVIEW
    assert call["temperature"] == 0.1
    assert call["image"] is None
    assert CONTEXT in call["prompt"]


@pytest.mark.asyncio
async def test_answer_doctor_mode_has_no_disclaimer() -> None:
    generate = FakeGenerate(output="Metformin 500 mg BID per document 1.")

    answer = await _enforcer(generate).answer(
        query_text="Dose?", context=CONTEXT, mode="doctor"
    )

    assert answer.text == "Metformin 500 mg BID per document 1."
    assert DISCLAIMER not in answer.text


@pytest.mark.asyncio
async def test_answer_normalizes_refusal_without_disclaimer() -> None:
    generate = FakeGenerate(
        output="...Not found in medical knowledge base. Here is some extra guess..."
    )

    answer = await _enforcer(generate).answer(
        query_text="What cures migraines?",
        context=NO_DOCUMENTS_CONTEXT,
        mode=Mode.PATIENT,
    )

    assert answer.text == NOT_FOUND_SENTINEL
    assert answer.outcome == AnswerOutcome.REFUSAL_SENTINEL
    assert answer.errored is False


@pytest.mark.asyncio
async def test_answer_selects_image_model_and_forwards_image() -> None:
    generate = FakeGenerate(output="The report shows a normal range.")
    image = ImagePayload(data=b"\x89PNG", media_type="image/png")

    await _enforcer(generate).answer(
        query_text="", context=CONTEXT, mode=Mode.DOCTOR, image=image
    )

    call = generate.calls[0]
    assert call["llm"] == LLMName.GEMINI_2_5_FLASH_IMAGE
    assert call["image"] == image
    assert call["prompt"].endswith(IMAGE_DIRECTIVE)


@pytest.mark.asyncio
async def test_answer_model_failure_returns_errored_result() -> None:
    answer = await _enforcer(failing_generate()).answer(
        query_text="Dose?", context=CONTEXT, mode=Mode.PATIENT
    )

    assert answer.text == FAILURE_MESSAGE
    assert answer.errored is True
    assert answer.outcome is None


@pytest.mark.asyncio
async def test_answer_timeout_returns_errored_result() -> None:
    generate = FakeGenerate(output="late", delay=1.0)

    answer = await _enforcer(generate, timeout=0.01).answer(
        query_text="Dose?", context=CONTEXT, mode=Mode.DOCTOR
    )

    assert answer.text == FAILURE_MESSAGE
    assert answer.errored is True


@pytest.mark.asyncio
async def test_answer_requires_text_or_image() -> None:
    generate = FakeGenerate(output="unused")

    with pytest.raises(QueryValidationError):
        await _enforcer(generate).answer(
            query_text="   ", context=CONTEXT, mode=Mode.PATIENT
        )

    assert generate.calls == []


@pytest.mark.asyncio
async def test_answer_unwrapped_transport_error_returns_errored_result() -> None:
    generate = FakeGenerate(error=ConnectionError("connection reset by peer"))

    answer = await _enforcer(generate).answer(
        query_text="Dose?", context=CONTEXT, mode=Mode.PATIENT
    )

    assert answer.text == FAILURE_MESSAGE
    assert answer.errored is True
    assert answer.outcome is None


@pytest.mark.asyncio
@pytest.mark.parametrize("output", [None, "", "   \n"])
async def test_answer_without_text_returns_errored_result(output: str | None) -> None:
    answer = await _enforcer(FakeGenerate(output=output)).answer(
        query_text="Dose?", context=CONTEXT, mode=Mode.DOCTOR
    )

    assert answer.text == FAILURE_MESSAGE
    assert answer.errored is True
    assert answer.outcome is None
